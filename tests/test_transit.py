# tests/test_transit.py

import math
import pytest

from sunlight.core.types import Coordinates
from sunlight.reference.angle import Angle
from sunlight.reference import transit


def test_meeus_example_13b_altitude():
    """Example 13.b: altitude of Venus at the US Naval Observatory."""
    phi = Angle(38 + (55 / 60) + (17.0 / 3600))
    delta = Angle(-6 - (43 / 60) - (11.61 / 3600))
    H = Angle(64.352133)
    h = transit.altitude_of_celestial_body(phi, delta, H)
    assert h.degrees == pytest.approx(15.1249, abs=1e-4)


# Example 15.a: Venus at Boston, 1988 March 20.
LONGITUDE = Angle(-71.0833)
THETA0 = Angle(177.74208)
ALPHA = (Angle(40.68021), Angle(41.73129), Angle(42.78204))
DELTA = (Angle(18.04761), Angle(18.44092), Angle(18.82742))
BOSTON = Coordinates(latitude=42.3333, longitude=LONGITUDE.degrees)


@pytest.fixture
def m0():
    return transit.approximate_transit(LONGITUDE, THETA0, ALPHA[1])


def _hour_angle(m0, h0, after_transit, coords=BOSTON):
    return transit.corrected_hour_angle(
        m0, h0, coords, after_transit, THETA0,
        ALPHA[1], ALPHA[0], ALPHA[2],
        DELTA[1], DELTA[0], DELTA[2],
    )


def test_meeus_example_15a_approximate_transit(m0):
    assert m0 == pytest.approx(0.81965, abs=1e-5)
    assert 0.0 <= m0 < 1.0


def test_meeus_example_15a_corrected_transit(m0):
    hours = transit.corrected_transit(m0, LONGITUDE, THETA0, ALPHA[1], ALPHA[0], ALPHA[2])
    assert hours / 24 == pytest.approx(0.81980, abs=1e-5)


def test_meeus_example_15a_rising(m0):
    rise = _hour_angle(m0, Angle(-0.5667), after_transit=False)
    assert rise / 24 == pytest.approx(0.51766, abs=1e-5)


def test_setting_follows_transit(m0):
    rise = _hour_angle(m0, Angle(-0.5667), after_transit=False)
    set_ = _hour_angle(m0, Angle(-0.5667), after_transit=True)
    noon = transit.corrected_transit(m0, LONGITUDE, THETA0, ALPHA[1], ALPHA[0], ALPHA[2])
    assert rise < noon < set_
    # setting on the following UT day; Meeus reduces it to 0.12130
    assert set_ / 24 == pytest.approx(1.12130, abs=2e-3)


def test_unreachable_altitude_is_nan(m0):
    # Venus at +18.4 deg declination never climbs to 80 deg at Boston
    assert math.isnan(_hour_angle(m0, Angle(80.0), after_transit=True))
    # nor sinks below -60 deg
    assert math.isnan(_hour_angle(m0, Angle(-60.0), after_transit=False))


def test_pole_is_nan(m0):
    pole = Coordinates(latitude=90.0, longitude=0.0)
    assert math.isnan(_hour_angle(m0, Angle(-0.8333), after_transit=True, coords=pole))
