import math

import pytest

from enginekit.matrix import Matrix
from enginekit.vector import DEPTH, HEIGHT, WIDTH, Vector, dimension


def test_construction_from_args_and_iterable_agree():
    assert Vector(1.0, 2.0, 3.0) == Vector([1.0, 2.0, 3.0])
    assert Vector(4.0, 5.0).shape == (2, 1)


def test_empty_vector_rejected():
    with pytest.raises(ValueError):
        Vector()


def test_indexing_and_assignment():
    v = Vector(1.0, 2.0, 3.0)
    v[1] = 9.0
    assert [v[0], v[1], v[2]] == [1.0, 9.0, 3.0]
    assert v[2, 0] == 3.0


def test_dot_product_is_symmetric_and_matches_sqr_magnitude():
    a = Vector(1.0, -2.0, 0.5)
    b = Vector(3.0, 4.0, -1.0)
    assert a * b == pytest.approx(b * a)
    assert a.sqr_magnitude() == pytest.approx(a * a)


def test_dot_product_size_mismatch():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0) * Vector(1.0, 2.0, 3.0)


def test_length_is_sqrt_of_sqr_magnitude():
    v = Vector(2.0, -3.0, 6.0)
    assert v.length() == pytest.approx(math.sqrt(v.sqr_magnitude()))


def test_normalized_has_unit_length_and_keeps_original():
    v = Vector(3.0, 4.0, 12.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert v == Vector(3.0, 4.0, 12.0)
    assert n * v == pytest.approx(v.length())


def test_normalize_in_place_returns_self():
    v = Vector(0.0, 5.0, 0.0)
    result = v.normalize()
    assert result is v
    assert v.length() == pytest.approx(1.0)


def test_cross_of_axes():
    assert Vector(1.0, 0.0, 0.0).cross(Vector(0.0, 1.0, 0.0)) == Vector(0.0, 0.0, 1.0)


def test_cross_is_orthogonal_and_antisymmetric():
    a = Vector(1.5, -2.0, 0.25)
    b = Vector(-0.5, 3.0, 2.0)
    c = a.cross(b)
    assert c * a == pytest.approx(0.0, abs=1e-12)
    assert c * b == pytest.approx(0.0, abs=1e-12)
    assert b.cross(a) == c * -1


def test_cross_requires_three_components():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0).cross(Vector(3.0, 4.0))


def test_volume():
    assert Vector(5.0).volume() == 5.0
    assert Vector(7.0, 1.0, 1.0).volume() == 7.0


def test_scalar_operations_keep_vector_type():
    v = Vector(1.0, 2.0, 3.0)
    doubled = 2 * v
    assert isinstance(doubled, Vector)
    assert doubled == v + v
    assert isinstance(v - 1, Vector)
    assert (v - 1) + 1 == v


def test_matrix_times_vector_gives_vector():
    v = Vector(1.0, 2.0, 3.0)
    result = Matrix.identity(3) * v
    assert isinstance(result, Vector)
    assert result == v


def test_component_properties():
    v = Vector(1.0, 2.0, 3.0, 4.0)
    assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)
    v.z = 8.0
    assert v[2] == 8.0


def test_missing_component_raises():
    with pytest.raises(AttributeError):
        Vector(1.0, 2.0, 3.0).w


def test_swizzles_read_and_write():
    v = Vector(1.0, 2.0, 3.0)
    assert v.xz == Vector(1.0, 3.0)
    v.xy = Vector(7.0, 8.0)
    assert v == Vector(7.0, 8.0, 3.0)
    v.xyz = (4.0, 5.0, 6.0)
    assert v.yz == Vector(5.0, 6.0)


def test_swizzle_wrong_length_rejected():
    v = Vector(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        v.xy = (1.0, 2.0, 3.0)
    assert v.xy == Vector(1.0, 2.0)
    assert v[2] == 3.0


def test_format_matches_brace_layout():
    assert str(Vector(1.0, 2.5, 3.0)) == "{1, 2.5, 3}"
    assert f"{Vector(1.0, 2.0):.1f}" == "{1.0, 2.0}"


def test_json_round_trip():
    v = Vector(1.0, -2.0, 3.5)
    assert Matrix.from_json(3, 1, v.to_json()) == v


def test_dimension_holds_integers():
    d = dimension(640, 480, 3)
    assert (d[WIDTH], d[HEIGHT], d[DEPTH]) == (640, 480, 3)
    assert d == dimension([640, 480, 3])
    assert str(dimension(2000000, 1)) == "{2000000, 1}"


@pytest.mark.parametrize("bad", [-1, 2**32, 1.5])
def test_dimension_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        dimension(1, bad)