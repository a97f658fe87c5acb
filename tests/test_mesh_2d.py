import io

import pytest

from nonlocfem.mesh_2d import (
    ElementType1D,
    ElementType2D,
    Mesh2D,
    VtkElementNumber,
    save_as_csv,
)

SAMPLE = """\
NDIME= 2
NELEM= 2
5 0 1 2 0
9 1 3 4 2 1
NPOIN= 5
0 0 0
1 0 1
1 1 2
2 0 3
2 1 4
NMARK= 2
MARKER_TAG= Left
MARKER_ELEMS= 1
3 0 2
MARKER_TAG= Down
MARKER_ELEMS= 2
3 0 1
3 1 3
"""

EXPECTED_VTK = """\
# vtk DataFile Version 4.2
Data
ASCII
DATASET UNSTRUCTURED_GRID
POINTS 5 double
0 0 0
1 0 0
1 1 0
2 0 0
2 1 0
CELLS 2 9
3 0 1 2
4 1 3 4 2
CELL_TYPES 2
5
9
"""


def read(text):
    return Mesh2D.read_su2(io.StringIO(text))


def test_counts_and_types():
    mesh = read(SAMPLE)
    assert mesh.nodes_count() == 5
    assert mesh.elements_count() == 2
    assert mesh.element_types == [ElementType2D.TRIANGLE, ElementType2D.BILINEAR]
    assert mesh.elements == [(0, 1, 2), (1, 3, 4, 2)]


def test_nodes_read():
    mesh = read(SAMPLE)
    assert mesh.node(2) == (1.0, 1.0)
    assert mesh.nodes[3] == (2.0, 0.0)


def test_boundaries_keep_order():
    mesh = read(SAMPLE)
    assert mesh.boundary_names() == ["Left", "Down"]
    assert mesh.boundaries["Down"] == [(0, 1), (1, 3)]
    assert mesh.boundary_types["Left"] == [ElementType1D.LINEAR]


def test_vtk_output():
    out = io.StringIO()
    read(SAMPLE).save_as_vtk(out)
    assert out.getvalue() == EXPECTED_VTK


def test_serendipity_reordered_and_round_trips():
    text = (
        "NDIME= 2\nNELEM= 1\n23 0 1 2 3 4 5 6 7 0\n"
        "NPOIN= 0\nNMARK= 1\nMARKER_TAG= B\nMARKER_ELEMS= 1\n21 0 1 2\n"
    )
    mesh = read(text)
    assert mesh.element_types == [ElementType2D.QUADRATIC_SERENDIPITY]
    assert mesh.elements[0] == (0, 4, 1, 5, 2, 6, 3, 7)
    assert mesh.boundaries["B"] == [(0, 2, 1)]
    assert mesh.boundary_types["B"] == [ElementType1D.QUADRATIC]
    out = io.StringIO()
    mesh.save_as_vtk(out)
    lines = out.getvalue().splitlines()
    assert "8 0 1 2 3 4 5 6 7" in lines
    assert lines[-1] == str(int(VtkElementNumber.QUADRATIC_SERENDIPITY))


def test_cells_list_size_matches_written_lines():
    out = io.StringIO()
    read(SAMPLE).save_as_vtk(out)
    lines = out.getvalue().splitlines()
    header = next(i for i, line in enumerate(lines) if line.startswith("CELLS"))
    _, count, size = lines[header].split()
    cells = lines[header + 1 : header + 1 + int(count)]
    assert sum(len(line.split()) for line in cells) == int(size)


def test_unknown_2d_element():
    with pytest.raises(ValueError, match="Unknown 2D element"):
        read("NDIME= 2\nNELEM= 1\n7 0 1 2 0\n")


def test_unknown_1d_element():
    text = SAMPLE.replace("MARKER_ELEMS= 1\n3 0 2", "MARKER_ELEMS= 1\n5 0 2")
    with pytest.raises(ValueError, match="Unknown 1D element"):
        read(text)


def test_truncated_file():
    with pytest.raises(ValueError, match="end of mesh file"):
        read("NDIME= 2\nNELEM= 2\n5 0 1 2 0\n")


def test_bad_number():
    with pytest.raises(ValueError, match="Integer expected"):
        read("NDIME= 2\nNELEM= x\n")


def test_from_file(tmp_path):
    path = tmp_path / "mesh.su2"
    path.write_text(SAMPLE, encoding="utf-8")
    assert Mesh2D.from_file(path) == read(SAMPLE)


def test_mismatched_element_nodes_rejected():
    with pytest.raises(ValueError):
        Mesh2D(nodes=[], elements=[(0, 1)], element_types=[ElementType2D.TRIANGLE])


def test_csv_round_trip(tmp_path):
    mesh = read(SAMPLE)
    values = [0.1, -2.5, 1.0 / 3.0, 1e-20, 7.0]
    path = tmp_path / "x.csv"
    save_as_csv(path, mesh, values)
    rows = [line.split(",") for line in path.read_text().splitlines()]
    assert len(rows) == mesh.nodes_count()
    for (x, y, v), node, value in zip(rows, mesh.nodes, values):
        assert (float(x), float(y)) == node
        assert float(v) == value


def test_csv_size_mismatch(tmp_path):
    with pytest.raises(ValueError, match="different sizes"):
        save_as_csv(tmp_path / "x.csv", read(SAMPLE), [1.0, 2.0])