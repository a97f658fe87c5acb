import pytest

from nonlocfem.element_base import ElementBase, ElementIntegrateBase, QuadratureBase


class _TwoNodeElement(ElementBase):
    def nodes_count(self):
        return 2


class _MidpointRule(QuadratureBase):
    def nodes_count(self):
        return 1

    def weight(self, i):
        return [2.0][i]


def test_element_base_is_abstract():
    with pytest.raises(TypeError):
        ElementBase()


def test_quadrature_base_is_abstract():
    with pytest.raises(TypeError):
        QuadratureBase()


def test_incomplete_quadrature_subclass_is_abstract():
    class _NoWeight(QuadratureBase):
        def nodes_count(self):
            return 1

    with pytest.raises(TypeError):
        _NoWeight()

    rule = _MidpointRule()
    integrate = ElementIntegrateBase([rule.weight(0)], [1.0], [0])
    assert integrate.qnodes_count() == rule.nodes_count() == 1
    assert integrate.weight(0) == 2.0


def test_concrete_subclasses_feed_integrate_base():
    element = _TwoNodeElement()
    rule = _MidpointRule()
    weights = [rule.weight(q) for q in range(rule.nodes_count())]
    qn = [0.5] * (element.nodes_count() * rule.nodes_count())
    integrate = ElementIntegrateBase(weights, qn, [0, 0])
    assert integrate.qnodes_count() == rule.nodes_count() == 1
    assert integrate.nodes_count() == element.nodes_count() == 2
    assert integrate.weight(0) == 2.0
    assert integrate.q_n(1, 0) == 0.5


def _sample():
    weights = [0.5, 1.0, 0.5]
    qn = [1.0, 0.5, 0.0, 0.0, 0.5, 1.0]
    return ElementIntegrateBase(weights, qn, [0, 2]), weights, qn


def test_counts():
    element, weights, qn = _sample()
    assert element.qnodes_count() == len(weights)
    assert element.nodes_count() * element.qnodes_count() == len(qn)


def test_qn_layout_is_node_major():
    element, weights, qn = _sample()
    for i in range(element.nodes_count()):
        for q in range(element.qnodes_count()):
            assert element.q_n(i, q) == qn[i * len(weights) + q]


def test_weights_and_nearest():
    element, weights, _ = _sample()
    assert [element.weight(q) for q in range(element.qnodes_count())] == weights
    assert element.nearest_qnode(0) == 0
    assert element.nearest_qnode(1) == 2


def test_partition_of_unity_preserved():
    element, _, _ = _sample()
    for q in range(element.qnodes_count()):
        assert sum(element.q_n(i, q) for i in range(element.nodes_count())) == pytest.approx(1.0)


def test_mismatched_sizes_rejected():
    with pytest.raises(ValueError):
        ElementIntegrateBase([1.0, 1.0], [1.0, 0.0, 0.5], [0])


def test_empty_weights_rejected():
    with pytest.raises(ValueError):
        ElementIntegrateBase([], [], [])


def test_qn_index_out_of_range():
    element, _, _ = _sample()
    with pytest.raises(IndexError):
        element.q_n(0, 3)
    with pytest.raises(IndexError):
        element.q_n(2, 0)