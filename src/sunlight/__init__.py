"""sunlight public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .core.errors import SunlightError, NonFiniteTimeError, UnknownTwilightError
from .core.types import Coordinates
from .reference.angle import Angle
from .reference.solar import SolarPosition
from .reference.time_scales import julian_day, julian_century
from .solar_date import (
    SolarDate,
    solar_date,
    STANDARD_SOLAR_ALTITUDE,
    TWILIGHT_ALTITUDES,
)

__all__ = [
    "Angle",
    "Coordinates",
    "SolarPosition",
    "SolarDate",
    "solar_date",
    "julian_day",
    "julian_century",
    "STANDARD_SOLAR_ALTITUDE",
    "TWILIGHT_ALTITUDES",
    "SunlightError",
    "NonFiniteTimeError",
    "UnknownTwilightError",
]
