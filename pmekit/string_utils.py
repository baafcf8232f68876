"""Fixed-point text formatting of numbers and flat tensors."""

from __future__ import annotations

import numbers
from collections.abc import Iterable

__all__ = ["format_number", "stringify"]


def format_number(number, width: int, precision: int) -> str:
    """Format a real number, or a complex one as ``(re, im)``, in fixed notation."""
    if isinstance(number, numbers.Real):
        return f"{float(number):>{width}.{precision}f}"
    real = float(number.real)
    imag = float(number.imag)
    return f"({real:>{width}.{precision}f}, {imag:>{width}.{precision}f})"


def stringify(
    data: Iterable, row_dim: int, width: int = 14, precision: int = 8
) -> str:
    """Format a flat sequence as rows of ``row_dim`` numbers, one row per line."""
    if row_dim <= 0:
        raise ValueError("The row dimension must be positive.")
    pieces = []
    for index, value in enumerate(data):
        pieces.append(format_number(value, width, precision))
        pieces.append("\n" if index % row_dim == row_dim - 1 else "  ")
    return "".join(pieces)