import pytest

from ballphysics.matrix import Matrix2D
from ballphysics.vector import Vec2


def test_from_rows_matches_constructor():
    assert Matrix2D.from_rows(Vec2(1, 2), Vec2(3, 4)) == Matrix2D(1, 2, 3, 4)


def test_rows_layout():
    assert Matrix2D(1, 2, 3, 4).rows() == [[1, 2], [3, 4]]


def test_rows_returns_a_copy():
    m = Matrix2D(1, 2, 3, 4)
    rows = m.rows()
    rows[0][0] = 99
    assert m[0, 0] == 1


def test_getitem_indexes_row_then_column():
    m = Matrix2D(1, 2, 3, 4)
    assert [m[i, j] for i in (0, 1) for j in (0, 1)] == [1, 2, 3, 4]


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        Matrix2D(1, 2, 3, 4)[2, 0]


def test_add_then_subtract_round_trip():
    a = Matrix2D(1.5, -2.0, 3.25, 4.0)
    b = Matrix2D(0.5, 7.0, -1.0, 2.0)
    assert (a + b) - b == a


def test_subtract_self_is_zero():
    a = Matrix2D(1.5, -2.0, 3.25, 4.0)
    assert a - a == Matrix2D(0, 0, 0, 0)


def test_scalar_one_is_identity():
    a = Matrix2D(1.5, -2.0, 3.25, 4.0)
    assert a * 1 == a


def test_scalar_scaling_matches_addition():
    a = Matrix2D(1.5, -2.0, 3.25, 4.0)
    assert a * 2 == a + a


def test_identity_applied_to_vector():
    v = Vec2(3.5, -1.25)
    assert Matrix2D(1, 0, 0, 1) * v == v


def test_matrix_vector_product_uses_rows():
    m = Matrix2D.from_rows(Vec2(1, 0), Vec2(1, 0))
    v = Vec2(5.0, 9.0)
    assert m * v == Vec2(v.x, v.x)


def test_matrix_product_with_all_ones_keeps_entries():
    a = Matrix2D(1, 2, 3, 4)
    assert a * Matrix2D(1, 1, 1, 1) == a


def test_matrix_product_with_zero_is_zero():
    a = Matrix2D(1, 2, 3, 4)
    zero = Matrix2D(0, 0, 0, 0)
    assert a * zero == zero


def test_multiply_by_unsupported_type():
    with pytest.raises(TypeError):
        Matrix2D(1, 2, 3, 4) * "x"