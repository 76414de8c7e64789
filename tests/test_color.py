import pytest

from minirt.color import Color

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def test_scaled_by_one_is_identity():
    c = Color(12, 130, 250)
    assert c.scaled(1.0) == c


def test_scaled_by_zero_is_black():
    assert Color(12, 130, 250).scaled(0.0) == BLACK


@pytest.mark.parametrize("too_high", [1.5, 2.0, 100.0])
def test_scaled_clamps_above_one(too_high):
    c = Color(12, 130, 250)
    assert c.scaled(too_high) == c.scaled(1.0)


@pytest.mark.parametrize("too_low", [-0.1, -1.0])
def test_scaled_clamps_below_zero(too_low):
    c = Color(12, 130, 250)
    assert c.scaled(too_low) == c.scaled(0.0)


def test_scaled_never_exceeds_original():
    c = Color(200, 100, 50)
    s = c.scaled(0.37)
    assert s.r <= c.r and s.g <= c.g and s.b <= c.b
    assert all(isinstance(v, int) for v in (s.r, s.g, s.b))


def test_add_saturates_at_255():
    assert Color(200, 200, 200) + Color(100, 100, 100) == WHITE


def test_add_black_is_identity():
    c = Color(10, 20, 30)
    assert c + BLACK == c


def test_add_is_commutative():
    a = Color(10, 200, 30)
    b = Color(90, 100, 5)
    assert a + b == b + a


def test_mul_by_white_is_identity():
    c = Color(17, 128, 254)
    assert c * WHITE == c


def test_mul_by_black_is_black():
    assert Color(17, 128, 254) * BLACK == BLACK


def test_mul_is_commutative():
    a = Color(17, 128, 254)
    b = Color(90, 3, 200)
    assert a * b == b * a


def test_to_int_packs_red():
    assert Color(255, 0, 0).to_int() == 0xFF0000


def test_to_int_round_trip():
    c = Color(18, 52, 86)
    packed = c.to_int()
    assert Color((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF) == c