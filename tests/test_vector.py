import pytest

from minirt.vector import Vec, get_vec


def test_add_then_sub_round_trip():
    a = Vec(1.5, -2.0, 3.25)
    b = Vec(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_add_is_commutative():
    a = Vec(1, 2, 3)
    b = Vec(4, 5, 6)
    assert a + b == b + a


def test_mul_by_two_equals_self_add():
    a = Vec(1.25, -3.0, 0.5)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_mul_by_zero_is_zero_vector():
    assert Vec(3, 4, 5) * 0 == Vec()


def test_dot_of_perpendicular_axes_is_zero():
    assert Vec(1, 0, 0).dot(Vec(0, 1, 0)) == 0


def test_dot_with_self_is_length_squared():
    v = Vec(2, -3, 6)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_length_of_pythagorean_vector():
    assert Vec(3, 4, 0).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vec(3, -7, 2)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalized_pythagorean_components():
    n = Vec(0, 3, 4).normalized()
    assert (n.x, n.y, n.z) == pytest.approx((0.0, 0.6, 0.8))


def test_normalized_unit_axis_is_unchanged():
    n = Vec(0, 0, 1).normalized()
    assert (n.x, n.y, n.z) == pytest.approx((0.0, 0.0, 1.0))


def test_cross_of_axes():
    assert Vec(1, 0, 0).cross(Vec(0, 1, 0)) == Vec(0, 0, 1)


def test_cross_is_orthogonal_to_inputs():
    a = Vec(1, 2, 3)
    b = Vec(-2, 0.5, 4)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_is_anticommutative():
    a = Vec(1, 2, 3)
    b = Vec(4, -1, 2)
    assert a.cross(b) == -b.cross(a)


def test_get_vec_points_from_first_to_second():
    p1 = Vec(1, 1, 1)
    p2 = Vec(4, -2, 9)
    assert p1 + get_vec(p1, p2) == p2


def test_vec_is_immutable():
    v = Vec(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v == Vec(1, 2, 3)
    assert v.x == 1