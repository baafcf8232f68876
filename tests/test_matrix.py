import math

import numpy as np
import pytest

from pmekit.matrix import Matrix, SortOrder

SYMMETRIC = [[4.0, 1.0, 0.5], [1.0, 3.0, 0.2], [0.5, 0.2, 2.0]]
GENERAL = [[2.0, 1.0, 0.0], [0.5, 3.0, 1.0], [1.0, 0.0, 4.0]]


def test_flat_list_builds_column_vector():
    values = [-0.834, 0.417, 0.417, -0.834, 0.417, 0.417]
    m = Matrix(values)
    assert (m.n_rows, m.n_cols) == (6, 1)
    assert [m[i, 0] for i in range(6)] == values


def test_nested_list_shape_and_elements():
    coords = [[2.0, 2.0, 2.0], [2.5, 2.0, 3.0]]
    m = Matrix(coords)
    assert (m.n_rows, m.n_cols) == (2, 3)
    assert m[1, 0] == 2.5
    assert m[1, 2] == 3.0


def test_ragged_rows_rejected():
    with pytest.raises(ValueError, match="Inconsistent row dimensions"):
        Matrix([[1.0, 2.0], [3.0]])


def test_zeros_and_set_constant():
    m = Matrix.zeros(2, 4)
    assert (m.n_rows, m.n_cols) == (2, 4)
    assert m.is_near_zero()
    m.set_constant(7.0)
    assert not m.is_near_zero()
    assert np.all(np.asarray(m) == 7.0)
    m.set_zero()
    assert m.is_near_zero()


def test_is_near_zero_threshold():
    m = Matrix([[1e-12, -1e-12], [0.0, 1e-11]])
    assert m.is_near_zero()
    assert not m.is_near_zero(1e-13)


def test_identity_multiplication():
    m = Matrix(GENERAL)
    identity = Matrix(np.eye(3))
    assert (m * identity).almost_equals(m, 1e-14)
    assert (identity * m).almost_equals(m, 1e-14)


def test_multiply_incompatible_dimensions():
    with pytest.raises(ValueError, match="incompatible"):
        Matrix.zeros(2, 3) * Matrix.zeros(2, 3)


def test_three_by_three_inverse():
    m = Matrix(GENERAL)
    assert (m * m.inverse()).almost_equals(Matrix(np.eye(3)), 1e-12)
    assert (m.inverse() * m).almost_equals(Matrix(np.eye(3)), 1e-12)


def test_symmetric_spectral_inverse():
    m = Matrix([[2.0, 1.0], [1.0, 3.0]])
    assert (m * m.inverse()).almost_equals(Matrix(np.eye(2)), 1e-10)


def test_inverse_of_non_square_raises():
    with pytest.raises(ValueError, match="non-square"):
        Matrix.zeros(2, 3).inverse()


def test_general_inverse_needs_symmetry():
    with pytest.raises(ValueError, match="non-symmetric"):
        Matrix([[1.0, 2.0], [0.0, 1.0]]).inverse()


def test_diagonalize_sorts_eigenvalues():
    m = Matrix([[3.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 2.0]])
    values, vectors = m.diagonalize()
    assert [values[i, 0] for i in range(3)] == [1.0, 2.0, 3.0]
    values, vectors = m.diagonalize(SortOrder.DESCENDING)
    assert [values[i, 0] for i in range(3)] == [3.0, 2.0, 1.0]
    for i in range(3):
        vector = Matrix(vectors.col(i).copy())
        assert (m * vector).almost_equals(vector * values[i, 0], 1e-12)


def test_diagonalize_reconstructs_matrix():
    m = Matrix(SYMMETRIC)
    values, vectors = m.diagonalize()
    assert values[0, 0] <= values[1, 0] <= values[2, 0]
    diagonal = Matrix(np.diag(np.asarray(values)[:, 0]))
    assert (vectors * diagonal * vectors.transpose()).almost_equals(m, 1e-10)
    assert (vectors.transpose() * vectors).almost_equals(Matrix(np.eye(3)), 1e-10)


def test_apply_operation_square_root():
    m = Matrix(SYMMETRIC)
    root = m.apply_operation(math.sqrt)
    assert (root * root).almost_equals(m, 1e-10)


def test_apply_operation_to_each_element():
    m = Matrix([[1.0, 4.0], [9.0, 16.0]])
    m.apply_operation_to_each_element(math.sqrt)
    assert np.asarray(m).tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_transpose_and_in_place():
    m = Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    t = m.transpose()
    assert (t.n_rows, t.n_cols) == (3, 2)
    assert t[2, 1] == m[1, 2]
    assert (m.n_rows, m.n_cols) == (2, 3)
    original = m.clone()
    m.transpose_in_place()
    assert m.almost_equals(t, 0.0 + 1e-15)
    m.transpose_in_place()
    assert m.almost_equals(original, 1e-15)


def test_clone_is_independent():
    m = Matrix(GENERAL)
    copy = m.clone()
    copy[0, 0] = 100.0
    assert m[0, 0] == GENERAL[0][0]


def test_almost_equals_tolerance():
    m = Matrix(GENERAL)
    shifted = m.clone()
    shifted += 1e-7
    assert m.almost_equals(shifted, 1e-6)
    assert not m.almost_equals(shifted, 1e-8)


def test_almost_equals_size_mismatch():
    with pytest.raises(ValueError, match="different sizes"):
        Matrix.zeros(2, 2).almost_equals(Matrix.zeros(3, 2))


def test_complex_almost_equals():
    a = Matrix([[1 + 2j, 3 - 1j]])
    b = Matrix([[1 + 2j, 3 - 1.5j]])
    assert a.almost_equals(a.clone())
    assert not a.almost_equals(b, 0.1)


def test_dot_with_ones_sums_elements():
    m = Matrix(GENERAL)
    ones = Matrix(np.ones((3, 3)))
    assert m.dot(ones) == pytest.approx(sum(sum(row) for row in GENERAL))


def test_iadd_matrix_and_scalar():
    m = Matrix([[1.0, 2.0]])
    m += Matrix([[0.5, 0.25]])
    assert np.asarray(m).tolist() == [[1.5, 2.25]]
    m += 1.0
    assert np.asarray(m).tolist() == [[2.5, 3.25]]
    with pytest.raises(ValueError):
        m += Matrix.zeros(2, 2)


def test_scalar_multiplication_leaves_original():
    m = Matrix([[1.0, -2.0]])
    scaled = m * 3.0
    assert np.asarray(scaled).tolist() == [[3.0, -6.0]]
    assert np.asarray(2.0 * m).tolist() == [[2.0, -4.0]]
    assert np.asarray(m).tolist() == [[1.0, -2.0]]


def test_row_and_col_views_write_through():
    m = Matrix.zeros(2, 3)
    m.row(1)[:] += 2.0
    m.col(0)[:] *= 5.0
    assert np.asarray(m).tolist() == [[0.0, 0.0, 0.0], [10.0, 2.0, 2.0]]


def test_cast_to_single_precision():
    m = Matrix(GENERAL)
    single = m.cast(np.float32)
    assert np.asarray(single).dtype == np.float32
    assert single.cast(np.float64).almost_equals(m, 1e-6)


def test_str_format():
    assert str(Matrix([[1.0, -2.5]])) == "    1.00000000     -2.50000000\n\n"