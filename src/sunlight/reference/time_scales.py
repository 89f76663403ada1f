from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

# ============================================================
# Epochs
# ============================================================

J2000 = 2451545.0  # JD at 2000 January 1.5


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor, unlike //)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


# ============================================================
# Gregorian calendar date -> JD  (Meeus, ch. 7)
# ============================================================

def julian_day(year: int, month: int, day: int, hours: float = 0.0) -> float:
    """
    Julian Day for a Gregorian calendar date plus a fractional hour count.

    Intermediate terms are truncated toward zero, as in Meeus; this is what
    reproduces the published JD values for negative years too. Hours of 24
    or more roll into the day count:
      julian_day(2010, 1, 3) == julian_day(2010, 1, 1, 48)
    """
    Y = year if month > 2 else year - 1
    M = month if month > 2 else month + 12
    D = day + (hours / 24)

    A = _trunc_div(Y, 100)
    B = 2 - A + _trunc_div(A, 4)

    i0 = int(365.25 * (Y + 4716))
    i1 = int(30.6001 * (M + 1))
    return float(i0) + float(i1) + D + float(B) - 1524.5


def julian_day_from_datetime(
    value: Optional[Union[date, datetime]] = None,
    *,
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    hour: Optional[int] = None,
    minute: Optional[int] = None,
) -> float:
    """
    Julian Day from date/time components.

    Components are taken from `value` (a date or naive/UTC datetime) and
    overridden by keyword arguments. Anything missing defaults to
    year 1, January 1, 0:00. Seconds are ignored.
    """
    if value is not None:
        year = value.year if year is None else year
        month = value.month if month is None else month
        day = value.day if day is None else day
        if isinstance(value, datetime):
            hour = value.hour if hour is None else hour
            minute = value.minute if minute is None else minute

    y = 1 if year is None else year
    m = 1 if month is None else month
    d = 1 if day is None else day
    h = float(0 if hour is None else hour)
    mi = float(0 if minute is None else minute)

    return julian_day(y, m, d, hours=h + (mi / 60))


# ============================================================
# Julian centuries from J2000.0
# ============================================================

def julian_century(jd: float) -> float:
    """T = (JD - 2451545.0) / 36525"""
    return (jd - J2000) / 36525


def julian_day_from_century(T: float) -> float:
    """JD = 36525*T + 2451545.0"""
    return (T * 36525) + J2000
