"""
sunlight.solar_date
-------------------
Solar noon, sunrise, sunset and arbitrary-altitude crossings for one
observer on one civil date (UTC).

The Sun's apparent position is evaluated at 0h UT on the day before, the
day itself and the day after; the transit and rise/set estimates are then
corrected once by interpolating across that three-day window.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional, Tuple, Union

from .core.errors import UnknownTwilightError
from .core.time import hours_to_datetime, today_utc
from .core.types import Coordinates
from .reference.angle import Angle, AngleLike, as_angle
from .reference.solar import SolarPosition
from .reference.time_scales import julian_day
from .reference.transit import approximate_transit, corrected_hour_angle, corrected_transit

_log = logging.getLogger(__name__)

# Geometric altitude of the Sun's centre at apparent rise/set: 34' of
# refraction plus 16' of semi-diameter.
STANDARD_SOLAR_ALTITUDE = Angle(-50.0 / 60.0)

TWILIGHT_ALTITUDES: Dict[str, Angle] = {
    "civil": Angle(-6.0),
    "nautical": Angle(-12.0),
    "astronomical": Angle(-18.0),
}


def _finite(hours: float) -> Optional[float]:
    return hours if math.isfinite(hours) else None


@dataclass(frozen=True)
class SolarDate:
    date: date
    coordinates: Coordinates
    solar: SolarPosition
    prev_solar: SolarPosition
    next_solar: SolarPosition
    approx_transit: float

    # Hours after 0h UT of `date`; may fall outside [0, 24).
    transit_hours: float
    sunrise_hours: float
    sunset_hours: float

    @classmethod
    def compute(
        cls,
        coordinates: Coordinates,
        day: Optional[Union[date, datetime]] = None,
    ) -> Optional["SolarDate"]:
        """
        Solar events at `coordinates` on `day` (default: today in UTC).
        Any time-of-day on `day` is discarded.

        Returns None when the Sun does not rise or set that day (polar
        day/night), i.e. when any of transit/sunrise/sunset is not finite.
        """
        d = today_utc() if day is None else date(day.year, day.month, day.day)
        jd = julian_day(d.year, d.month, d.day)

        prev_solar = SolarPosition.from_julian_day(jd - 1)
        solar = SolarPosition.from_julian_day(jd)
        next_solar = SolarPosition.from_julian_day(jd + 1)
        m0 = approximate_transit(coordinates.longitude_angle, solar.apparent_sidereal_time, solar.right_ascension)

        transit = corrected_transit(
            m0,
            coordinates.longitude_angle,
            solar.apparent_sidereal_time,
            solar.right_ascension,
            prev_solar.right_ascension,
            next_solar.right_ascension,
        )
        rise = _hour_angle(m0, STANDARD_SOLAR_ALTITUDE, coordinates, False, solar, prev_solar, next_solar)
        set_ = _hour_angle(m0, STANDARD_SOLAR_ALTITUDE, coordinates, True, solar, prev_solar, next_solar)

        if not all(math.isfinite(x) for x in (transit, rise, set_)):
            _log.debug(
                "no sunrise/sunset at lat=%s lon=%s on %s (transit=%r rise=%r set=%r)",
                coordinates.latitude, coordinates.longitude, d, transit, rise, set_,
            )
            return None

        return cls(
            date=d,
            coordinates=coordinates,
            solar=solar,
            prev_solar=prev_solar,
            next_solar=next_solar,
            approx_transit=m0,
            transit_hours=transit,
            sunrise_hours=rise,
            sunset_hours=set_,
        )

    # ------------------------------------------------------------
    # Instants (UTC)
    # ------------------------------------------------------------

    @property
    def solar_noon(self) -> datetime:
        return hours_to_datetime(self.date, self.transit_hours)

    @property
    def sunrise(self) -> datetime:
        return hours_to_datetime(self.date, self.sunrise_hours)

    @property
    def sunset(self) -> datetime:
        return hours_to_datetime(self.date, self.sunset_hours)

    # ------------------------------------------------------------
    # Arbitrary altitudes
    # ------------------------------------------------------------

    def hours_for_solar_angle(self, angle: AngleLike, after_transit: bool) -> Optional[float]:
        """Hours after 0h UT at which the Sun's centre reaches `angle` (degrees)."""
        hours = _hour_angle(
            self.approx_transit, as_angle(angle), self.coordinates, after_transit,
            self.solar, self.prev_solar, self.next_solar,
        )
        result = _finite(hours)
        if result is None:
            _log.debug("solar altitude %s not reached on %s at %s", angle, self.date, self.coordinates)
        return result

    def time_for_solar_angle(self, angle: AngleLike, after_transit: bool) -> Optional[datetime]:
        """
        UTC instant at which the Sun's centre reaches `angle`, before
        (after_transit=False) or after solar noon. None if never reached.
        """
        hours = self.hours_for_solar_angle(angle, after_transit)
        if hours is None:
            return None
        return hours_to_datetime(self.date, hours)

    def twilight(self, kind: str = "civil") -> Optional[Tuple[datetime, datetime]]:
        """(dawn, dusk) for 'civil', 'nautical' or 'astronomical' twilight."""
        try:
            angle = TWILIGHT_ALTITUDES[kind]
        except KeyError:
            raise UnknownTwilightError(f"Unknown twilight '{kind}'. Available: {sorted(TWILIGHT_ALTITUDES)}") from None
        dawn = self.time_for_solar_angle(angle, after_transit=False)
        dusk = self.time_for_solar_angle(angle, after_transit=True)
        if dawn is None or dusk is None:
            return None
        return dawn, dusk


def _hour_angle(
    m0: float,
    angle: Angle,
    coordinates: Coordinates,
    after_transit: bool,
    solar: SolarPosition,
    prev_solar: SolarPosition,
    next_solar: SolarPosition,
) -> float:
    return corrected_hour_angle(
        m0,
        angle,
        coordinates,
        after_transit,
        solar.apparent_sidereal_time,
        solar.right_ascension,
        prev_solar.right_ascension,
        next_solar.right_ascension,
        solar.declination,
        prev_solar.declination,
        next_solar.declination,
    )


def solar_date(coordinates: Coordinates, day: Optional[Union[date, datetime]] = None) -> Optional[SolarDate]:
    return SolarDate.compute(coordinates, day)
