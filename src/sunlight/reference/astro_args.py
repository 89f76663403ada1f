from __future__ import annotations

import math

from .angle import Angle
from .time_scales import J2000, julian_day_from_century


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0


# ------------------------------------------------------------
# Mean elements of the Sun and Moon (Meeus-style; degrees)
# T is in Julian centuries from J2000.0.
# ------------------------------------------------------------

def mean_solar_longitude(T: float) -> Angle:
    """
    Geometric mean longitude of the Sun, referred to the mean equinox
    of the date (Meeus, Astronomical Algorithms p. 163):
      L0 = 280.4664567 + 36000.76983 T + 0.0003032 T^2
    """
    term1 = 280.4664567
    term2 = 36000.76983 * T
    term3 = 0.0003032 * (T ** 2)
    L0 = term1 + term2 + term3
    return Angle(L0).unwound()


def mean_lunar_longitude(T: float) -> Angle:
    """
    Mean longitude of the Moon, truncated form used for nutation (p. 144):
      L' = 218.3165 + 481267.8813 T
    """
    term1 = 218.3165
    term2 = 481267.8813 * T
    Lp = term1 + term2
    return Angle(Lp).unwound()


def ascending_lunar_node_longitude(T: float) -> Angle:
    """
    Longitude of the ascending node of the Moon's mean orbit (p. 144):
      Omega = 125.04452 - 1934.136261 T + 0.0020708 T^2 + T^3/450000
    """
    term1 = 125.04452
    term2 = 1934.136261 * T
    term3 = 0.0020708 * (T ** 2)
    term4 = (T ** 3) / 450000
    Omega = term1 - term2 + term3 + term4
    return Angle(Omega).unwound()


def mean_solar_anomaly(T: float) -> Angle:
    """
    Mean anomaly of the Sun (p. 163):
      M = 357.52911 + 35999.05029 T - 0.0001537 T^2
    """
    term1 = 357.52911
    term2 = 35999.05029 * T
    term3 = 0.0001537 * (T ** 2)
    M = term1 + term2 - term3
    return Angle(M).unwound()


# ------------------------------------------------------------
# Obliquity of the ecliptic
# ------------------------------------------------------------

def mean_obliquity_of_the_ecliptic(T: float) -> Angle:
    """
    Mean obliquity of the ecliptic, IAU formula (p. 147), in degrees:
      eps0 = 23.439291 - 0.013004167 T - 0.0000001639 T^2 + 0.0000005036 T^3
    """
    term1 = 23.439291
    term2 = 0.013004167 * T
    term3 = 0.0000001639 * (T ** 2)
    term4 = 0.0000005036 * (T ** 3)
    return Angle(term1 - term2 - term3 + term4)


def apparent_obliquity_of_the_ecliptic(T: float, mean_obliquity: Angle) -> Angle:
    """
    Mean obliquity corrected for the apparent position of the Sun (p. 165):
      eps = eps0 + 0.00256 cos(125.04 - 1934.136 T)
    """
    O = 125.04 - (1934.136 * T)
    return Angle(mean_obliquity.degrees + (0.00256 * math.cos(Angle(O).radians)))


# ------------------------------------------------------------
# Sidereal time
# ------------------------------------------------------------

def mean_sidereal_time(T: float) -> Angle:
    """
    Mean sidereal time at Greenwich, the hour angle of the vernal equinox
    (p. 88). The linear term is taken on the Julian Day rebuilt from T.
    """
    JD = julian_day_from_century(T)
    term1 = 280.46061837
    term2 = 360.98564736629 * (JD - J2000)
    term3 = 0.000387933 * (T ** 2)
    term4 = (T ** 3) / 38710000
    theta = term1 + term2 + term3 - term4
    return Angle(theta).unwound()


# ------------------------------------------------------------
# Nutation (low-precision, p. 144; accurate to ~0.5" and ~0.1")
# ------------------------------------------------------------

def nutation_in_longitude(solar_longitude: Angle, lunar_longitude: Angle, ascending_node: Angle) -> float:
    """Nutation in longitude, Delta psi, in degrees."""
    L0, Lp, Omega = solar_longitude, lunar_longitude, ascending_node
    term1 = arcsec_to_deg(-17.2) * math.sin(Omega.radians)
    term2 = arcsec_to_deg(1.32) * math.sin(2 * L0.radians)
    term3 = arcsec_to_deg(0.23) * math.sin(2 * Lp.radians)
    term4 = arcsec_to_deg(0.21) * math.sin(2 * Omega.radians)
    return term1 - term2 - term3 + term4


def nutation_in_obliquity(solar_longitude: Angle, lunar_longitude: Angle, ascending_node: Angle) -> float:
    """Nutation in obliquity, Delta epsilon, in degrees."""
    L0, Lp, Omega = solar_longitude, lunar_longitude, ascending_node
    term1 = arcsec_to_deg(9.2) * math.cos(Omega.radians)
    term2 = arcsec_to_deg(0.57) * math.cos(2 * L0.radians)
    term3 = arcsec_to_deg(0.10) * math.cos(2 * Lp.radians)
    term4 = arcsec_to_deg(0.09) * math.cos(2 * Omega.radians)
    return term1 + term2 + term3 - term4
