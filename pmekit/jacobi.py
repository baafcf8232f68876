"""Eigen-decomposition of real symmetric matrices by the cyclic Jacobi method.

Off-diagonal elements are visited in the order (0,1), (0,2), ..., (n-2,n-1).
Each element above a threshold is removed by a plane rotation. After each
sweep the threshold is divided by ten, and the sweeps stop once it falls
below the initial off-diagonal norm times the machine epsilon. Only the upper
triangle of the input is read.
"""

from __future__ import annotations

import math

import numpy as np

__all__ = ["jacobi_cyclic_diagonalization"]


def _upper(a: np.ndarray, i: int, j: int) -> float:
    """Element (i, j) of the symmetric matrix, read from the upper triangle."""
    return a[i, j] if i < j else a[j, i]


def _set_upper(a: np.ndarray, i: int, j: int, value: float) -> None:
    if i < j:
        a[i, j] = value
    else:
        a[j, i] = value


def _rotate(a: np.ndarray, vectors: np.ndarray, k: int, m: int) -> None:
    """Apply the rotation that removes element (k, m), with k < m."""
    n = a.shape[0]
    cot_2phi = 0.5 * (a[k, k] - a[m, m]) / a[k, m]
    root = math.sqrt(cot_2phi * cot_2phi + 1)
    if cot_2phi < 0:
        root = -root
    tan_phi = -cot_2phi + root
    tan2_phi = tan_phi * tan_phi
    sin2_phi = tan2_phi / (1 + tan2_phi)
    cos2_phi = 1 - sin2_phi
    sin_phi = math.sqrt(sin2_phi)
    if tan_phi < 0:
        sin_phi = -sin_phi
    cos_phi = math.sqrt(cos2_phi)
    sin_2phi = 2 * sin_phi * cos_phi

    akk, amm, akm = a[k, k], a[m, m], a[k, m]
    a[k, k] = akk * cos2_phi + amm * sin2_phi + akm * sin_2phi
    a[m, m] = akk * sin2_phi + amm * cos2_phi - akm * sin_2phi
    a[k, m] = 0
    a[m, k] = 0

    for i in range(n):
        if i in (k, m):
            continue
        left = _upper(a, i, k)
        right = _upper(a, i, m)
        _set_upper(a, i, k, left * cos_phi + right * sin_phi)
        _set_upper(a, i, m, -left * sin_phi + right * cos_phi)

    col_k = vectors[:, k].copy()
    col_m = vectors[:, m].copy()
    vectors[:, k] = col_k * cos_phi + col_m * sin_phi
    vectors[:, m] = -col_k * sin_phi + col_m * cos_phi


def jacobi_cyclic_diagonalization(matrix) -> tuple[np.ndarray, np.ndarray]:
    """Return (eigenvalues, eigenvectors) of a real symmetric matrix.

    The eigenvalues come in the order they end up on the diagonal, unsorted;
    column ``i`` of the eigenvector matrix belongs to eigenvalue ``i``.
    The input is left untouched.
    """
    source = np.asarray(matrix)
    dtype = np.result_type(source.dtype, np.float32)
    a = np.array(source, dtype=dtype, copy=True)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError("Jacobi diagonalization needs a square matrix.")
    n = a.shape[0]
    if n == 0:
        return np.empty(0, dtype=dtype), np.empty((0, 0), dtype=dtype)
    vectors = np.eye(n, dtype=dtype)
    if n == 1:
        return np.array([a[0, 0]], dtype=dtype), vectors

    upper = a[np.triu_indices(n, 1)]
    threshold = math.sqrt(2 * float(np.sum(upper * upper)))
    threshold_norm = threshold * float(np.finfo(dtype).eps)
    largest = threshold + 1
    while threshold > threshold_norm:
        threshold /= 10
        if largest < threshold:
            continue
        largest = 0.0
        for k in range(n - 1):
            for m in range(k + 1, n):
                if abs(a[k, m]) < threshold:
                    continue
                _rotate(a, vectors, k, m)
            row = np.abs(np.delete(a[k], k))
            largest = max(largest, float(row.max()))
    return np.diagonal(a).copy(), vectors