# tests/test_interpolation.py

import pytest

from sunlight.reference.angle import Angle
from sunlight.reference.interpolation import interpolate, interpolate_angles


def test_meeus_example_3a():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 3.a:
    distance of Mars on 1992 Nov 8 at 4h21m from three tabulated days.
    """
    value = interpolate(0.877366, 0.884226, 0.870531, 4.35 / 24)
    assert value == pytest.approx(0.876125, abs=1e-6)


def test_linear_sequence():
    assert interpolate(1, -1, 3, 0.6) == pytest.approx(2.2, abs=1e-12)


def test_factor_is_not_clamped():
    # a quadratic through (-1, 1), (0, 0), (1, 1) evaluated at n = 2
    assert interpolate(0.0, 1.0, 1.0, 2.0) == pytest.approx(4.0, abs=1e-12)


def test_angle_interpolation_without_wrap():
    i1 = interpolate_angles(Angle(1), Angle(-1), Angle(3), 0.6)
    assert i1.degrees == pytest.approx(2.2, abs=1e-6)


def test_angle_interpolation_across_zero():
    i2 = interpolate_angles(Angle(1), Angle(359), Angle(3), 0.6)
    assert i2.degrees == pytest.approx(2.2, abs=1e-6)


def test_angle_interpolation_matches_scalar_when_increasing():
    y1, y2, y3 = Angle(40.68021), Angle(41.73129), Angle(42.78204)
    n = 0.81965
    scalar = interpolate(y2.degrees, y1.degrees, y3.degrees, n)
    assert interpolate_angles(y2, y1, y3, n).degrees == pytest.approx(scalar, abs=1e-12)
