# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa
from .angle import Angle
from .time_scales import julian_century


def solar_equation_of_the_center(T: float, mean_anomaly: Angle) -> Angle:
    """
    (p. 164) The Sun's equation of the center C, a small signed
    correction in degrees; deliberately not unwound.
    """
    M_rad = mean_anomaly.radians
    term1 = (1.914602 - (0.004817 * T) - (0.000014 * (T ** 2))) * math.sin(M_rad)
    term2 = (0.019993 - (0.000101 * T)) * math.sin(2 * M_rad)
    term3 = 0.000289 * math.sin(3 * M_rad)
    return Angle(term1 + term2 + term3)


def apparent_solar_longitude(T: float, mean_longitude: Angle) -> Angle:
    """
    (p. 164) Apparent longitude of the Sun, referred to the true equinox
    of the date: true longitude corrected for aberration and the leading
    nutation term.
    """
    C = solar_equation_of_the_center(T, aa.mean_solar_anomaly(T))
    longitude = mean_longitude + C
    Omega = Angle(125.04 - (1934.136 * T))
    lam = Angle(longitude.degrees - 0.00569 - (0.00478 * math.sin(Omega.radians)))
    return lam.unwound()


@dataclass(frozen=True)
class SolarPosition:
    """Apparent equatorial position of the Sun at one Julian Day."""

    # Angle between the rays of the Sun and the plane of the Earth's equator.
    declination: Angle
    # Angular distance along the celestial equator from the vernal equinox, [0, 360).
    right_ascension: Angle
    # Apparent sidereal time at Greenwich, [0, 360).
    apparent_sidereal_time: Angle

    @classmethod
    def from_julian_day(cls, julian_day: float) -> "SolarPosition":
        T = julian_century(julian_day)
        L0 = aa.mean_solar_longitude(T)
        Lp = aa.mean_lunar_longitude(T)
        Omega = aa.ascending_lunar_node_longitude(T)
        lam = apparent_solar_longitude(T, L0).radians

        theta0 = aa.mean_sidereal_time(T)
        d_psi = aa.nutation_in_longitude(L0, Lp, Omega)
        d_eps = aa.nutation_in_obliquity(L0, Lp, Omega)

        eps0 = aa.mean_obliquity_of_the_ecliptic(T)
        eps_app = aa.apparent_obliquity_of_the_ecliptic(T, eps0).radians

        # (p. 165)
        declination = Angle.from_radians(math.asin(math.sin(eps_app) * math.sin(lam)))

        # (p. 165) atan2 keeps alpha in the same quadrant as lambda
        right_ascension = Angle.from_radians(
            math.atan2(math.cos(eps_app) * math.sin(lam), math.cos(lam))
        ).unwound()

        # (p. 88) nutation in right ascension, the equation of the equinoxes
        apparent_sidereal_time = Angle(
            theta0.degrees + (((d_psi * 3600) * math.cos(Angle(eps0.degrees + d_eps).radians)) / 3600)
        ).unwound()

        return cls(
            declination=declination,
            right_ascension=right_ascension,
            apparent_sidereal_time=apparent_sidereal_time,
        )
