"""
sunlight.reference.transit
--------------------------
Transit, rising and setting of the Sun (Meeus, Astronomical Algorithms,
ch. 15).

Times are produced as fractional hours after 0h UT of the date whose
sidereal time Theta0 was supplied. Each correction is applied exactly once;
the result is not iterated to convergence.
"""

from __future__ import annotations

import math

from ..core.types import Coordinates
from .angle import Angle, normalized_to_scale
from .interpolation import interpolate, interpolate_angles

# Sidereal degrees per solar day fraction.
SIDEREAL_RATE = 360.985647


def altitude_of_celestial_body(observer_latitude: Angle, declination: Angle, local_hour_angle: Angle) -> Angle:
    """(p. 93) h = asin(sin phi sin delta + cos phi cos delta cos H)"""
    phi, delta, H = observer_latitude, declination, local_hour_angle
    term1 = math.sin(phi.radians) * math.sin(delta.radians)
    term2 = math.cos(phi.radians) * math.cos(delta.radians) * math.cos(H.radians)
    return Angle.from_radians(math.asin(term1 + term2))


def approximate_transit(longitude: Angle, sidereal_time: Angle, right_ascension: Angle) -> float:
    """
    (p. 102) m0, the day fraction at which the body crosses the meridian.
    Longitude is east positive; Meeus' west-positive Lw is its negation.
    """
    Lw = longitude * -1
    return normalized_to_scale(((right_ascension + Lw - sidereal_time) / 360).degrees, 1)


def corrected_transit(
    approx_transit: float,
    longitude: Angle,
    sidereal_time: Angle,
    right_ascension: Angle,
    previous_right_ascension: Angle,
    next_right_ascension: Angle,
) -> float:
    """(p. 102) Hours (UT) of the meridian transit after one correction of m0."""
    m0 = approx_transit
    Lw = longitude * -1
    theta = Angle(sidereal_time.degrees + (SIDEREAL_RATE * m0)).unwound()
    alpha = interpolate_angles(right_ascension, previous_right_ascension, next_right_ascension, m0).unwound()
    H = (theta - Lw - alpha).quadrant_shifted()
    dm = H / Angle(-360)
    return (m0 + dm.degrees) * 24


def corrected_hour_angle(
    approx_transit: float,
    angle: Angle,
    coordinates: Coordinates,
    after_transit: bool,
    sidereal_time: Angle,
    right_ascension: Angle,
    previous_right_ascension: Angle,
    next_right_ascension: Angle,
    declination: Angle,
    previous_declination: Angle,
    next_declination: Angle,
) -> float:
    """
    (p. 102) Hours (UT) at which the body reaches altitude `angle`, before
    (rising) or after (setting) transit.

    Returns math.nan when the altitude is never reached at this latitude,
    i.e. cos H0 falls outside [-1, 1] (polar day/night, deep twilight).
    """
    m0 = approx_transit
    h0 = angle
    phi = coordinates.latitude_angle
    Lw = coordinates.longitude_angle * Angle(-1)

    term1 = math.sin(h0.radians) - (math.sin(phi.radians) * math.sin(declination.radians))
    term2 = math.cos(phi.radians) * math.cos(declination.radians)
    if term2 == 0.0:
        return math.nan
    cos_H0 = term1 / term2
    if not -1.0 <= cos_H0 <= 1.0:
        return math.nan
    H0 = Angle.from_radians(math.acos(cos_H0))

    m = m0 + (H0.degrees / 360) if after_transit else m0 - (H0.degrees / 360)
    theta = Angle(sidereal_time.degrees + (SIDEREAL_RATE * m)).unwound()
    alpha = interpolate_angles(right_ascension, previous_right_ascension, next_right_ascension, m).unwound()
    delta = Angle(interpolate(declination.degrees, previous_declination.degrees, next_declination.degrees, m))
    H = theta - Lw - alpha
    h = altitude_of_celestial_body(phi, delta, H)

    term3 = (h - h0).degrees
    term4 = 360 * math.cos(delta.radians) * math.cos(phi.radians) * math.sin(H.radians)
    if term4 == 0.0:
        return math.nan
    dm = term3 / term4
    return (m + dm) * 24
