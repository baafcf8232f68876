"""A dense two-dimensional matrix with the operations the PME code relies on."""

from __future__ import annotations

import numbers
from collections.abc import Callable
from enum import Enum

import numpy as np

from pmekit.jacobi import jacobi_cyclic_diagonalization
from pmekit.string_utils import stringify

__all__ = ["SortOrder", "Matrix"]

_DEFAULT_THRESHOLD = 1e-10


class SortOrder(Enum):
    """Ordering of eigenpairs returned by :meth:`Matrix.diagonalize`."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def _is_row(item) -> bool:
    return isinstance(item, (list, tuple, np.ndarray, Matrix))


def _to_array(data) -> np.ndarray:
    if isinstance(data, Matrix):
        array = data._data.copy()
    elif isinstance(data, np.ndarray):
        array = np.array(data, copy=True)
    else:
        items = list(data)
        if items and _is_row(items[0]):
            width = len(items[0])
            if any(not _is_row(row) or len(row) != width for row in items):
                raise ValueError("Inconsistent row dimensions in matrix specification.")
        array = np.array(items)
    if array.dtype.kind not in "fc":
        array = array.astype(float)
    if array.ndim == 1:
        array = array.reshape(-1, 1) if array.size else array.reshape(0, 0)
    elif array.ndim != 2:
        raise ValueError("A matrix needs one- or two-dimensional data.")
    return np.ascontiguousarray(array)


class Matrix:
    """Dense row-major matrix; flat input makes a column vector."""

    __slots__ = ("_data",)

    def __init__(self, data=()):
        self._data = _to_array(data)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._data = np.ascontiguousarray(array)
        return matrix

    @staticmethod
    def zeros(n_rows: int, n_cols: int) -> Matrix:
        """Return an ``n_rows`` x ``n_cols`` matrix of zeros."""
        return Matrix._wrap(np.zeros((n_rows, n_cols)))

    @property
    def n_rows(self) -> int:
        """The number of rows."""
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        """The number of columns."""
        return self._data.shape[1]

    def row(self, r: int) -> np.ndarray:
        """Return a writable view of row ``r``."""
        return self._data[r]

    def col(self, c: int) -> np.ndarray:
        """Return a writable view of column ``c``."""
        return self._data[:, c]

    def cast(self, dtype) -> Matrix:
        """Return a copy with elements converted to ``dtype``."""
        return Matrix._wrap(self._data.astype(dtype))

    def set_constant(self, value) -> None:
        """Set every element to ``value``."""
        self._data[...] = value

    def set_zero(self) -> None:
        """Set every element to zero."""
        self.set_constant(0)

    def is_near_zero(self, threshold: float = _DEFAULT_THRESHOLD) -> bool:
        """Return whether every element's magnitude is at most ``threshold``."""
        return not bool(np.any(np.abs(self._data) > threshold))

    def inverse(self) -> Matrix:
        """Return the inverse; beyond 3x3 only symmetric matrices are supported."""
        self.assert_square()
        if self.n_rows != 3:
            return self.apply_operation(lambda value: 1 / value)
        d = self._data.reshape(-1)
        determinant = (
            d[0] * (d[4] * d[8] - d[7] * d[5])
            - d[1] * (d[3] * d[8] - d[5] * d[6])
            + d[2] * (d[3] * d[7] - d[4] * d[6])
        )
        inverse_det = 1 / determinant
        cofactors = np.array(
            [
                d[4] * d[8] - d[7] * d[5],
                d[2] * d[7] - d[1] * d[8],
                d[1] * d[5] - d[2] * d[4],
                d[5] * d[6] - d[3] * d[8],
                d[0] * d[8] - d[2] * d[6],
                d[3] * d[2] - d[0] * d[5],
                d[3] * d[7] - d[6] * d[4],
                d[6] * d[1] - d[0] * d[7],
                d[0] * d[4] - d[3] * d[1],
            ],
            dtype=self._data.dtype,
        )
        return Matrix._wrap((cofactors * inverse_det).reshape(3, 3))

    def assert_symmetric(self, threshold: float = _DEFAULT_THRESHOLD) -> None:
        """Raise ValueError unless the matrix is symmetric within ``threshold``."""
        self.assert_square()
        if np.any(np.abs(self._data - self._data.T) > threshold):
            raise ValueError("Unexpected non-symmetric matrix found.")

    def assert_same_size(self, other: Matrix) -> None:
        """Raise ValueError unless ``other`` has the same dimensions."""
        if self._data.shape != other._data.shape:
            raise ValueError("Attempting to compare matrices of different sizes!")

    def assert_square(self) -> None:
        """Raise ValueError unless the matrix is square."""
        if self.n_rows != self.n_cols:
            raise ValueError(
                "Attempting to perform a square matrix operation on a non-square matrix!"
            )

    def apply_operation_to_each_element(self, function: Callable) -> None:
        """Replace every element ``v`` by ``function(v)``, in place."""
        values = [function(value) for value in self._data.flat]
        self._data[...] = np.array(values, dtype=self._data.dtype).reshape(self._data.shape)

    def apply_operation(self, function: Callable) -> Matrix:
        """Return f(A) computed through the spectral decomposition of this symmetric matrix."""
        self.assert_symmetric()
        eigenvalues, eigenvectors = self.diagonalize()
        eigenvalues.apply_operation_to_each_element(function)
        vectors = eigenvectors._data
        return Matrix._wrap(vectors @ (vectors.T * eigenvalues._data))

    def multiply(self, other: Matrix) -> Matrix:
        """Return the matrix product of this matrix and ``other``."""
        if self.n_cols != other.n_rows:
            raise ValueError("Attempting to multiply matrices with incompatible dimensions.")
        return Matrix._wrap(self._data @ other._data)

    def increment_with(self, other) -> Matrix:
        """Add a matrix of the same size, or a scalar, to this matrix in place."""
        if isinstance(other, Matrix):
            self.assert_same_size(other)
            self._data += other._data
        else:
            self._data += other
        return self

    def almost_equals(self, other: Matrix, tolerance: float = 1e-6) -> bool:
        """Return whether all elements differ by less than ``tolerance``."""
        self.assert_same_size(other)
        tol = float(np.real(tolerance))
        diff = self._data - other._data
        return bool(np.all(np.abs(diff.real) < tol) and np.all(np.abs(diff.imag) < tol))

    def dot(self, other: Matrix):
        """Return the sum of the element-wise products with ``other``."""
        self.assert_same_size(other)
        return np.sum(self._data * other._data)

    def transpose_in_place(self) -> None:
        """Transpose this matrix."""
        self._data = np.ascontiguousarray(self._data.T)

    def clone(self) -> Matrix:
        """Return a deep copy."""
        return Matrix._wrap(self._data.copy())

    def transpose(self) -> Matrix:
        """Return a transposed copy."""
        return Matrix._wrap(self._data.T.copy())

    def diagonalize(self, order: SortOrder = SortOrder.ASCENDING) -> tuple[Matrix, Matrix]:
        """Return (eigenvalues as a column, eigenvectors by column) of this symmetric matrix."""
        self.assert_symmetric()
        values, vectors = jacobi_cyclic_diagonalization(self._data)
        ordering = np.argsort(values, kind="stable")
        if order is SortOrder.DESCENDING:
            ordering = ordering[::-1]
        return (
            Matrix._wrap(values[ordering].reshape(-1, 1)),
            Matrix._wrap(vectors[:, ordering]),
        )

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, numbers.Number):
            return Matrix._wrap(self._data * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return Matrix._wrap(other * self._data)
        return NotImplemented

    def __iadd__(self, other):
        return self.increment_with(other)

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    def __str__(self) -> str:
        if self.n_cols == 0:
            return "\n"
        rows = "".join(stringify(row, self.n_cols) for row in self._data)
        return rows + "\n"

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"