# nonlocfem

Building blocks for finite element computations: symbolic shape function
bases for 2D elements, a uniform 1D mesh, reading and writing of 2D
unstructured meshes, a conjugate gradient solver for sparse symmetric
systems, and material parameters for the 2D heat equation.

## What is inside

- `nonlocfem.functions`: `distance`, `factorial`, `power` (integer
  exponent, by repeated squaring) and element-wise container arithmetic:
  `add`, `subtract`, `multiply`, `divide` and the in-place forms
  `add_inplace`, `subtract_inplace`, `multiply_inplace`, `divide_inplace`.
  Sizes that do not match raise `ValueError`.
- `nonlocfem.symbolic`: helpers built on SymPy: `make_variables`,
  `generate_lagrangian_function`, `generate_lagrangian_basis`,
  `basis_production` (tensor product of bases), `derivative`, `simplify`
  and `to_function`, which compiles expressions into callables taking a
  point.
- `nonlocfem.element_base`: the abstract `ElementBase` and
  `QuadratureBase`, and `ElementIntegrateBase`, which holds quadrature
  weights, the values of the shape functions at the quadrature nodes
  (`q_n(i, q)`) and the quadrature node nearest to each element node.
- `nonlocfem.basis_2d`: `Element2DBasis` (nodes and shape functions of a
  reference element, with `nodes_count`, `evaluate` and `derivative`) and
  the builders `triangle_basis(order)` for orders 0 to 3,
  `serendipity_basis(order, p)` for orders 0 to 5 (orders 2 and 3 take a
  parameter `p`, by default 2/9 and 1/8), `lagrangian_basis_2d(n, m)` and
  `barycentric_coordinates()`. Triangles live on the reference triangle
  with vertices (1, 0), (0, 1), (0, 0); rectangles on [-1, 1] x [-1, 1].
- `nonlocfem.conjugate_gradient`: `ConjugateGradient`, which solves
  `A x = b` reading only the upper triangle of a sparse symmetric matrix,
  `ConjugateGradientParameters` (`tolerance`, `max_iterations`,
  `threads_count`) and `distribute_rows`, which splits matrix rows into
  blocks with similar numbers of non-zeros. After a solve the solver's
  `residual` and `iterations` describe the run.
- `nonlocfem.mesh_1d`: `Mesh1D`, a uniform mesh of identical elements
  numbered left to right (by default one linear element on [-1, 1] with a
  one-point Gauss rule), `CurrNextElements` as returned by
  `Mesh1D.node_elements`, and the functions `integrate_solution` and
  `gradient` over nodal values.
- `nonlocfem.mesh_2d`: `Mesh2D`, which reads SU2 meshes
  (`Mesh2D.read_su2`, `Mesh2D.from_file`) with triangles, quadratic
  triangles, bilinear, quadratic serendipity and quadratic Lagrange
  elements and named boundaries of linear or quadratic edges, and writes
  them as ASCII legacy VTK (`save_as_vtk`); `save_as_csv` writes
  `x,y,value` lines, one per node. Unknown element types raise
  `ValueError`.
- `nonlocfem.heat_parameters`: `HeatEquationParameters2D` for `Material.ISOTROPIC`
  (a single conductivity) and `Material.ORTHOTROPIC` (a pair for x and y),
  with heat transfer per boundary, heat capacity, density and the solution
  integral used for the Neumann problem.
  `HeatEquationParameters2D.with_boundaries(names)` sets heat transfer 1 on
  every named boundary.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Example

```python
import numpy as np
from scipy.sparse import csr_matrix

from nonlocfem.basis_2d import triangle_basis
from nonlocfem.conjugate_gradient import ConjugateGradient, ConjugateGradientParameters

basis = triangle_basis(2)
print(basis.nodes_count())            # 6
print(basis.evaluate(0, (1.0, 0.0)))  # 1.0

# Only the upper triangle of the symmetric matrix is read.
matrix = csr_matrix(np.array([[4.0, 1.0], [0.0, 3.0]]))
solver = ConjugateGradient(matrix, ConjugateGradientParameters(tolerance=1e-12))
x = solver.solve(np.array([1.0, 2.0]), None)
print(solver.iterations, solver.residual)
```

Reading a mesh and writing it out:

```python
from nonlocfem.mesh_2d import Mesh2D, save_as_csv

mesh = Mesh2D.from_file("plate.su2")
with open("plate.vtk", "w") as stream:
    mesh.save_as_vtk(stream)
save_as_csv("values.csv", mesh, [0.0] * mesh.nodes_count())
```

## What the package does not do

The package is a library of parts. It does not assemble conductivity or
stiffness matrices, does not solve the heat equation or thermoelasticity
problems on a 2D mesh, and does not compute 2D element geometry such as
Jacobians, quadrature coordinates or nonlocal neighbourhoods. `Mesh2D`
holds nodes, elements and boundaries only, and `save_as_vtk` writes the
mesh without field data. There is no command-line program.