from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
import math
from typing import Tuple

from .errors import NonFiniteTimeError

# All solar event times are reconstructed on the proleptic Gregorian calendar in UTC.
UTC = timezone.utc


def split_hours(hours: float) -> Tuple[int, int, int]:
    """
    Split a fractional hour count into (hours, minutes, seconds).

    Each field is floored, never rounded, so 6.999999 h is 6:59:59.
    Negative inputs floor downward: -0.5 h -> (-1, 30, 0).

    SolarDate drops non-finite hours before getting here; the
    NonFiniteTimeError is for direct callers passing NaN or infinity.
    """
    if not math.isfinite(hours):
        raise NonFiniteTimeError(f"hour value must be finite, got {hours!r}")
    h = math.floor(hours)
    m = math.floor((hours - h) * 60)
    s = math.floor((hours - (h + m / 60)) * 60 * 60)
    return int(h), int(m), int(s)


def utc_midnight(d: date) -> datetime:
    """Midnight UTC at the start of the civil date `d`."""
    return datetime(d.year, d.month, d.day, tzinfo=UTC)


def hours_to_datetime(d: date, hours: float) -> datetime:
    """
    Timezone-aware UTC datetime at `hours` after midnight of `d`.
    Values outside [0, 24) roll into the previous/next day.
    """
    h, m, s = split_hours(hours)
    return utc_midnight(d) + timedelta(hours=h, minutes=m, seconds=s)


def today_utc() -> date:
    return datetime.now(UTC).date()
