"""Reordering and contraction of small dense tensors stored as flat arrays."""

from __future__ import annotations

import numpy as np

__all__ = ["permute_abc_to_cba", "permute_abc_to_acb", "contract_abxc_with_dxc"]


def _as_tensor(data, shape: tuple[int, ...]) -> np.ndarray:
    array = np.asarray(data)
    expected = int(np.prod(shape))
    if array.size != expected:
        raise ValueError(
            f"Tensor holds {array.size} elements but dimensions {shape} need {expected}."
        )
    return array.reshape(shape)


def permute_abc_to_cba(abc, a_dim: int, b_dim: int, c_dim: int) -> np.ndarray:
    """Return a flat copy of an ABC-ordered tensor reordered as CBA."""
    tensor = _as_tensor(abc, (a_dim, b_dim, c_dim))
    return np.ascontiguousarray(tensor.transpose(2, 1, 0)).reshape(-1)


def permute_abc_to_acb(abc, a_dim: int, b_dim: int, c_dim: int) -> np.ndarray:
    """Return a flat copy of an ABC-ordered tensor reordered as ACB."""
    tensor = _as_tensor(abc, (a_dim, b_dim, c_dim))
    return np.ascontiguousarray(tensor.transpose(0, 2, 1)).reshape(-1)


def contract_abxc_with_dxc(
    abc, dc, ab_dim: int, c_dim: int, d_dim: int
) -> np.ndarray:
    """Contract an ABxC tensor with a DxC tensor over C, giving a flat ABxD tensor."""
    left = _as_tensor(abc, (ab_dim, c_dim))
    right = _as_tensor(dc, (d_dim, c_dim))
    return (left @ right.T).reshape(-1)