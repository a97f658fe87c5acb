"""Finite element building blocks: shape function bases, 1D and 2D meshes, a conjugate gradient solver and heat equation parameters."""

__version__ = "0.1.0"