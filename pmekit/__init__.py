"""Gamma functions, Cartesian multipole rotations, Jacobi diagonalisation, dense matrices and tensor helpers for PME work."""

__version__ = "0.1.0"