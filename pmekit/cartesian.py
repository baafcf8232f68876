"""Rotation of Cartesian multipole-like quantities between coordinate frames.

Quantities of angular momentum ``L`` are stored by their unique Cartesian
components, ordered by ``cartesian_address``.  The rotation matrix for each
shell follows eq. 18 of D. M. Elking, J. Comp. Chem. 37, 2067 (2016).
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np

__all__ = [
    "cartesian_address",
    "make_cartesian_rotation_matrix",
    "matrix_vector_product",
    "cartesian_transform",
]


def _n_cartesian(angular_momentum: int) -> int:
    return (angular_momentum + 1) * (angular_momentum + 2) // 2


def _components(total: int) -> Iterator[tuple[int, int, int]]:
    """Yield (x, y, z) exponent triples summing to ``total``, z outermost."""
    for z in range(total + 1):
        for y in range(total - z + 1):
            yield total - y - z, y, z


def cartesian_address(lx: int, ly: int, lz: int) -> int:
    """Return the position of the component x^lx y^ly z^lz within its shell."""
    total = lx + ly + lz
    return lz * (2 * total - lz + 3) // 2 + ly


def _multinomial(parts: tuple[int, int, int]) -> int:
    return math.factorial(sum(parts)) // (
        math.factorial(parts[0]) * math.factorial(parts[1]) * math.factorial(parts[2])
    )


def make_cartesian_rotation_matrix(angular_momentum: int, transformer) -> np.ndarray:
    """Return the rotation matrix for the Cartesian components of one shell.

    ``transformer`` is the 3x3 matrix R that maps a dipole as mu_new = R . mu_old.
    """
    if angular_momentum < 0:
        raise ValueError("Angular momentum must be non-negative.")
    t = np.asarray(transformer, dtype=float)
    if t.shape != (3, 3):
        raise ValueError("The transformer must be a 3x3 matrix.")
    size = _n_cartesian(angular_momentum)
    rotation = np.zeros((size, size))
    for n in _components(angular_momentum):
        column = cartesian_address(*n)
        for p in _components(n[0]):
            rx = t[0, 0] ** p[0] * t[1, 0] ** p[1] * t[2, 0] ** p[2]
            for q in _components(n[1]):
                ry = t[0, 1] ** q[0] * t[1, 1] ** q[1] * t[2, 1] ** q[2]
                for r in _components(n[2]):
                    rz = t[0, 2] ** r[0] * t[1, 2] ** r[1] * t[2, 2] ** r[2]
                    m = (p[0] + q[0] + r[0], p[1] + q[1] + r[1], p[2] + q[2] + r[2])
                    norm = (
                        _multinomial((p[0], q[0], r[0]))
                        * _multinomial((p[1], q[1], r[1]))
                        * _multinomial((p[2], q[2], r[2]))
                    )
                    rotation[cartesian_address(*m), column] += norm * rx * ry * rz
    return rotation


def matrix_vector_product(transformer, vector) -> np.ndarray:
    """Multiply a square matrix by the leading elements of ``vector``."""
    t = np.asarray(transformer)
    v = np.asarray(vector)
    dimension = t.shape[0]
    if v.shape[0] < dimension:
        raise ValueError("The vector is shorter than the matrix dimension.")
    return t @ v[:dimension]


def cartesian_transform(
    max_angular_momentum: int, transform_only_this_shell: bool, transformer, transformee
) -> np.ndarray:
    """Return a rotated copy of per-atom Cartesian quantities.

    ``transformee`` holds one row per atom.  If ``transform_only_this_shell`` is
    true the row holds just the shell ``max_angular_momentum``; otherwise it holds
    every shell from 0 up to it in ascending order, and the scalar is left alone.
    """
    source = np.asarray(transformee, dtype=float)
    if source.ndim != 2:
        raise ValueError("The quantity to transform must be a 2D array.")
    transformed = source.copy()
    if transform_only_this_shell:
        offset, first_shell = 0, max_angular_momentum
    else:
        offset, first_shell = 1, 1
    for angular_momentum in range(first_shell, max_angular_momentum + 1):
        size = _n_cartesian(angular_momentum)
        if source.shape[1] < offset + size:
            raise ValueError("Too few components for the requested angular momentum.")
        rotation = make_cartesian_rotation_matrix(angular_momentum, transformer)
        transformed[:, offset : offset + size] = source[:, offset : offset + size] @ rotation.T
        offset += size
    return transformed