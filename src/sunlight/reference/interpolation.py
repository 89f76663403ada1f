from __future__ import annotations

from .angle import Angle


def interpolate(y2: float, y1: float, y3: float, n: float) -> float:
    """
    Three-point interpolation (Meeus, Astronomical Algorithms, ch. 3).

    y1, y2, y3 are tabulated at equidistant arguments (previous, central,
    next); n is the interpolating factor measured from the central value
    in units of the tabular interval. n is not clamped.
    """
    a = y2 - y1
    b = y3 - y2
    c = b - a
    return y2 + ((n / 2) * (a + b + (n * c)))


def interpolate_angles(y2: Angle, y1: Angle, y3: Angle, n: float) -> Angle:
    """
    As `interpolate`, with the first differences unwound to [0, 360)
    so a sequence such as 359 -> 1 -> 3 degrees does not jump by 360.
    """
    a = (y2 - y1).unwound()
    b = (y3 - y2).unwound()
    c = b - a
    return Angle(y2.degrees + ((n / 2) * (a.degrees + b.degrees + (n * c.degrees))))
