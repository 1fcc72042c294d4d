import pytest

from c3dkit.matrix import Matrix


def _make(rows):
    """Build a matrix from a list of rows."""
    nb_rows = len(rows)
    nb_cols = len(rows[0])
    m = Matrix(nb_rows, nb_cols)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            m[i, j] = value
    return m


def test_new_matrix_is_zero_filled():
    m = Matrix(2, 3)
    assert m.nb_rows() == 2
    assert m.nb_cols() == 3
    assert m.size() == 6
    assert m.to_rows() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


def test_default_matrix_is_empty():
    m = Matrix()
    assert m.size() == 0
    assert m.to_rows() == []


def test_set_and_get_element():
    m = Matrix(2, 2)
    m[1, 0] = 7.5
    assert m[1, 0] == 7.5
    assert m[0, 1] == 0.0


def test_out_of_bounds_access_raises():
    m = Matrix(2, 2)
    m[1, 1] = 3.0
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[0, 2] = 1.0
    assert m.to_rows() == [[0.0, 0.0], [0.0, 3.0]]
    assert m.size() == 4


def test_non_tuple_key_raises():
    with pytest.raises(TypeError):
        Matrix(2, 2)[0]


def test_from_columns_places_columns():
    m = Matrix.from_columns([[1, 2, 3], [4, 5, 6]])
    assert m.nb_rows() == 3
    assert m.nb_cols() == 2
    assert m.to_rows() == [[1, 4], [2, 5], [3, 6]]


def test_from_columns_accepts_matrices():
    col = Matrix.from_columns([[1, 2, 3]])
    m = Matrix.from_columns([col, col])
    assert m.to_rows(transpose=True) == [[1, 2, 3], [1, 2, 3]]


def test_from_columns_rejects_ragged():
    with pytest.raises(ValueError):
        Matrix.from_columns([[1, 2], [3]])


def test_transpose_round_trip():
    m = _make([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert t.nb_rows() == 3 and t.nb_cols() == 2
    assert t[2, 1] == m[1, 2]
    assert t.transpose() == m


def test_to_rows_transposed_matches_transpose():
    m = _make([[1, 2], [3, 4], [5, 6]])
    assert m.to_rows(transpose=True) == m.transpose().to_rows()


def test_sum_and_fill():
    m = _make([[1, 2], [3, 4]])
    assert m.sum() == 1 + 2 + 3 + 4
    m.set_ones()
    assert m.sum() == m.size()
    m.set_zeros()
    assert m.sum() == 0.0


def test_set_identity():
    m = Matrix(3, 3)
    m.set_identity()
    assert m.to_rows() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_resize_changes_dimensions():
    m = Matrix(2, 2)
    m.resize(3, 4)
    assert (m.nb_rows(), m.nb_cols(), m.size()) == (3, 4, 12)
    m.resize(1, 1)
    assert m.size() == 1


def test_scalar_add_and_subtract_round_trip():
    m = _make([[1, 2], [3, 4]])
    assert (m + 5.0) - 5.0 == m
    assert 5.0 + m == m + 5.0
    assert m.to_rows() == [[1, 2], [3, 4]]


def test_reverse_subtract():
    m = _make([[1, 2], [3, 4]])
    r = 10.0 - m
    assert r + m == _make([[10, 10], [10, 10]])


def test_matrix_add_and_subtract():
    a = _make([[1, 2], [3, 4]])
    b = _make([[5, 6], [7, 8]])
    assert (a + b) - b == a
    assert a + b == b + a


def test_in_place_operations_mutate():
    a = _make([[1, 2], [3, 4]])
    original = a.copy()
    a += original
    assert a == original * 2
    a -= original
    assert a == original
    a *= 3.0
    a /= 3.0
    assert a == original


def test_mismatched_add_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(3, 2)
    with pytest.raises(ValueError):
        Matrix(2, 2) - Matrix(2, 3)


def test_scalar_multiply_and_divide():
    m = _make([[2, 4], [6, 8]])
    assert 0.5 * m == m / 2.0
    assert (m * 3.0).sum() == m.sum() * 3.0


def test_product_with_identity():
    m = _make([[1, 2, 3], [4, 5, 6]])
    eye = Matrix(3, 3)
    eye.set_identity()
    assert m * eye == m
    left = Matrix(2, 2)
    left.set_identity()
    assert left * m == m


def test_product_dimensions_and_transpose_law():
    a = _make([[1, 2, 3], [4, 5, 6]])
    b = _make([[1, 0], [2, 1], [0, 3]])
    p = a * b
    assert (p.nb_rows(), p.nb_cols()) == (2, 2)
    assert p.transpose() == b.transpose() * a.transpose()


def test_product_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2, 3) * Matrix(2, 3)


def test_copy_is_independent():
    m = _make([[1, 2], [3, 4]])
    c = m.copy()
    c[0, 0] = 99.0
    assert m[0, 0] == 1.0


def test_str_format():
    m = _make([[1, 2], [3, 4]])
    assert str(m) == "[1, 2\n 3, 4]"


def test_equality_depends_on_shape():
    assert Matrix(1, 4) != Matrix(2, 2)
    assert Matrix(2, 2) == Matrix(2, 2)