import pytest

from enginekit.matrix import Matrix


def square(values):
    return Matrix(2, 2, values)


def test_values_are_given_row_by_row():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert m[0, 2] == 3
    assert m[1, 0] == 4
    assert m.row(1) == (4, 5, 6)
    assert m[0] == (1, 2, 3)


def test_wrong_number_of_values_rejected():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1, 2, 3])


def test_position_outside_matrix_rejected():
    m = square([1, 2, 3, 4])
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m.row(5)


def test_known_product():
    a = square([1, 2, 3, 4])
    b = square([5, 6, 7, 8])
    assert a * b == square([19, 22, 43, 50])


def test_identity_is_neutral():
    m = Matrix(3, 3, [2, 0, 1, 1, 3, 2, 1, 1, 2])
    ident = Matrix.identity(3)
    assert ident * m == m
    assert m * ident == m


def test_product_shapes():
    a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    b = Matrix(3, 2, [1, 0, 0, 1, 1, 1])
    assert (a * b).shape == (2, 2)
    assert (b * a).shape == (3, 3)


def test_product_shape_mismatch_rejected():
    a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    with pytest.raises(ValueError):
        a * a
    assert a == Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert a.shape == (2, 3)


@pytest.mark.parametrize(
    "m",
    [
        Matrix(2, 2, [4, 7, 2, 6]),
        Matrix(3, 3, [2, 0, 1, 1, 3, 2, 1, 1, 2]),
        Matrix(2, 2, [0, 1, 1, 0]),
    ],
)
def test_inverse_times_original_is_identity(m):
    inv = m.inverse()
    assert m * inv == Matrix.identity(m.rows)
    assert inv * m == Matrix.identity(m.rows)


def test_permutation_is_its_own_inverse():
    swap = Matrix(2, 2, [0, 1, 1, 0])
    assert swap.inverse() == swap


def test_inverse_leaves_original_and_invert_mutates():
    m = square([4, 7, 2, 6])
    original = square([4, 7, 2, 6])
    inv = m.inverse()
    assert m == original
    result = m.invert()
    assert result is m
    assert m == inv


def test_singular_matrix_rejected():
    with pytest.raises(ValueError):
        square([1, 2, 2, 4]).inverse()


def test_non_square_inverse_rejected():
    with pytest.raises(ValueError):
        Matrix(2, 3, [1, 2, 3, 4, 5, 6]).inverse()


def test_transpose_swaps_indices_and_round_trips():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    t = m.transposed()
    assert t.shape == (3, 2)
    assert all(t[c, r] == m[r, c] for r in range(2) for c in range(3))
    assert t.transposed() == m


def test_equality_within_tolerance():
    a = square([1.0, 2.0, 3.0, 4.0])
    assert a + 1e-9 == a
    assert not (a + 1e-3 == a)


def test_different_shapes_are_unequal():
    assert not (Matrix(1, 2, [1, 2]) == Matrix(2, 1, [1, 2]))


def test_equal_matrices_hash_alike():
    assert hash(square([1, 2, 3, 4])) == hash(square([1, 2, 3, 4]))
    assert {square([1, 2, 3, 4]): "x"}[square([1, 2, 3, 4])] == "x"


def test_scalar_round_trips():
    m = square([1.5, -2.0, 3.0, 4.25])
    assert (m * 2) / 2 == m
    assert 2 * m == m * 2
    assert (m + 1) - 1 == m
    assert 1 + m == m + 1


def test_elementwise_add_and_sub_round_trip():
    a = square([1, 2, 3, 4])
    b = square([9, 8, 7, 6])
    assert (a + b) - b == a


def test_add_shape_mismatch_rejected():
    with pytest.raises(ValueError):
        square([1, 2, 3, 4]) + Matrix(2, 3, [1, 2, 3, 4, 5, 6])


def test_in_place_multiply_is_elementwise():
    a = square([1, 2, 3, 4])
    b = square([5, 6, 7, 8])
    original = square([1, 2, 3, 4])
    a *= b
    assert all(a[r, c] == original[r, c] * b[r, c] for r in range(2) for c in range(2))


def test_in_place_operators_keep_identity():
    m = square([1.0, 2.0, 3.0, 4.0])
    same = m
    m += 1
    m -= 1
    m *= 3
    m /= 3
    assert m is same
    assert m == square([1.0, 2.0, 3.0, 4.0])


def test_one_and_zero_entries():
    ones = Matrix.one(2, 3)
    zeros = Matrix.zero(3, 2)
    assert ones.max_entry() == ones.min_entry() == 1
    assert zeros.max_entry() == zeros.min_entry() == 0
    assert zeros.shape == (3, 2)


def test_max_and_min_entry():
    m = square([3, -7, 12, 0])
    assert m.max_entry() == 12
    assert m.min_entry() == -7


def test_json_holds_column_major_data():
    assert square([1, 2, 3, 4]).to_json() == {"data": [1, 3, 2, 4]}


def test_json_round_trip():
    m = Matrix(2, 3, [1.5, 2, 3, 4, 5, 6])
    assert Matrix.from_json(2, 3, m.to_json()) == m


def test_from_json_rejects_bad_input():
    with pytest.raises(ValueError):
        Matrix.from_json(2, 2, {"data": [1, 2, 3]})
    with pytest.raises(ValueError):
        Matrix.from_json(2, 2, {})


def test_column_matrix_indexed_by_position():
    v = Matrix(3, 1, [1, 2, 3])
    v[1] = 10
    assert v[1] == 10
    assert list(v) == [1, 10, 3]


def test_setting_entries_and_rows():
    m = Matrix(2, 3)
    m[0, 1] = 5
    m[1] = [7, 8, 9]
    assert m.row(0) == (0.0, 5, 0.0)
    assert m.row(1) == (7, 8, 9)
    with pytest.raises(ValueError):
        m[0] = [1, 2]