import pytest

from nonlocfem.heat_parameters import HeatEquationParameters2D, Material


def test_isotropic_defaults():
    params = HeatEquationParameters2D()
    assert params.material is Material.ISOTROPIC
    assert params.thermal_conductivity == 1.0
    assert params.heat_capacity == 1.0
    assert params.density == 1.0
    assert params.integral == 0.0
    assert params.heat_transfer == {}


def test_orthotropic_default_conductivity():
    params = HeatEquationParameters2D(material=Material.ORTHOTROPIC)
    assert params.thermal_conductivity == (1.0, 1.0)


def test_with_boundaries_sets_heat_transfer():
    params = HeatEquationParameters2D.with_boundaries(["Left", "Right"], Material.ORTHOTROPIC)
    assert params.heat_transfer == {"Left": 1.0, "Right": 1.0}
    assert params.material is Material.ORTHOTROPIC
    assert params.thermal_conductivity == (1.0, 1.0)


def test_with_boundaries_empty():
    params = HeatEquationParameters2D.with_boundaries()
    assert params.heat_transfer == {}
    assert params.thermal_conductivity == 1.0


def test_heat_transfer_not_shared():
    first = HeatEquationParameters2D()
    second = HeatEquationParameters2D()
    first.heat_transfer["Up"] = 5.0
    assert "Up" not in second.heat_transfer


def test_explicit_orthotropic_conductivity():
    params = HeatEquationParameters2D(material=Material.ORTHOTROPIC, thermal_conductivity=[2, 3])
    assert params.thermal_conductivity == (2.0, 3.0)


def test_isotropic_rejects_pair():
    with pytest.raises(ValueError, match="Isotropic"):
        HeatEquationParameters2D(thermal_conductivity=(1.0, 2.0))


def test_orthotropic_rejects_number():
    with pytest.raises(ValueError, match="Orthotropic"):
        HeatEquationParameters2D(material=Material.ORTHOTROPIC, thermal_conductivity=2.0)


def test_orthotropic_rejects_wrong_length():
    with pytest.raises(ValueError, match="Orthotropic"):
        HeatEquationParameters2D(material=Material.ORTHOTROPIC, thermal_conductivity=(1.0, 2.0, 3.0))