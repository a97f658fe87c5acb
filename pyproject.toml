[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nonlocfem"
version = "0.1.0"
description = "Finite element building blocks: shape function bases, 1D and 2D meshes, and a sparse conjugate gradient solver"
requires-python = ">=3.10"
keywords = [
    "finite elements",
    "shape functions",
    "serendipity",
    "lagrangian",
    "mesh",
    "su2",
    "vtk",
    "conjugate gradient",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
    "sympy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nonlocfem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
