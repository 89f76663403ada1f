# tests/test_angle.py

import math
import pytest

from sunlight.reference.angle import Angle, as_angle, normalized_to_scale, round_half_away


def test_radian_conversion():
    assert Angle.from_radians(math.pi).degrees == pytest.approx(180.0, abs=1e-12)
    assert Angle(180).radians == pytest.approx(math.pi, abs=1e-15)
    assert Angle(-90).radians == pytest.approx(-math.pi / 2, abs=1e-15)


@pytest.mark.parametrize(
    "deg, expected",
    [
        (0.0, 0.0),
        (360.0, 0.0),
        (720.0, 0.0),
        (-360.0, 0.0),
        (-1.0, 359.0),
        (361.0, 1.0),
        (-721.5, 358.5),
        (1e-20, 1e-20),
    ],
)
def test_unwound(deg, expected):
    assert Angle(deg).unwound().degrees == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize(
    "deg, expected",
    [
        (10.0, 10.0),
        (180.0, 180.0),
        (-180.0, -180.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (540.0, -180.0),   # 1.5 turns rounds away from zero
        (-540.0, 180.0),
        (725.0, 5.0),
    ],
)
def test_quadrant_shifted(deg, expected):
    assert Angle(deg).quadrant_shifted().degrees == pytest.approx(expected, abs=1e-9)


def test_normalization_ranges():
    """Sweep a wide range including negatives and near-boundary values."""
    samples = [k * 37.3 - 5000.0 for k in range(300)] + [-1e-20, 359.9999999999, 1e9, -1e9]
    for deg in samples:
        u = Angle(deg).unwound().degrees
        assert 0.0 <= u < 360.0, deg
        q = Angle(deg).quadrant_shifted().degrees
        assert -180.0 <= q <= 180.0, deg


def test_tiny_negative_does_not_unwind_to_360():
    assert Angle(-1e-20).unwound().degrees == 0.0
    assert normalized_to_scale(-1e-20, 1) == 0.0


def test_normalized_to_scale():
    assert normalized_to_scale(-0.180354, 1) == pytest.approx(0.819646, abs=1e-12)
    assert normalized_to_scale(2.25, 1) == pytest.approx(0.25, abs=1e-12)
    assert normalized_to_scale(-30.0, 24) == pytest.approx(18.0, abs=1e-12)


def test_round_half_away():
    assert round_half_away(2.5) == 3.0
    assert round_half_away(-2.5) == -3.0
    assert round_half_away(0.49) == 0.0
    assert round_half_away(-1.2) == -1.0


def test_arithmetic_is_degree_wise_and_pure():
    a = Angle(30)
    b = Angle(15)
    assert a + b == Angle(45)
    assert a - b == Angle(15)
    assert a * b == Angle(450)
    assert a / b == Angle(2)
    assert a * -1 == Angle(-30)
    assert 2 * a == Angle(60)
    assert 100 - a == Angle(70)
    assert a / 360 == Angle(30 / 360)
    assert -a == Angle(-30)
    # operands untouched
    assert a == Angle(30) and b == Angle(15)


def test_angle_is_immutable():
    a = Angle(1.0)
    with pytest.raises(Exception):
        a.degrees = 2.0  # type: ignore[misc]


def test_as_angle():
    assert as_angle(-6) == Angle(-6.0)
    x = Angle(12.5)
    assert as_angle(x) is x
    assert float(x) == 12.5
