"""Vectors, CSR and COO sparse matrices, vector kernels and Krylov solvers."""

__version__ = "0.1.0"