from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


# ------------------------------------------------------------
# Scalar helpers
# ------------------------------------------------------------

def normalized_to_scale(x: float, scale: float) -> float:
    """Reduce x into [0, scale) using floor, correct for negative x."""
    r = x - (scale * math.floor(x / scale))
    # tiny negative x rounds up to exactly `scale`
    return 0.0 if r >= scale else r


def round_half_away(x: float) -> float:
    """Round to nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


# ------------------------------------------------------------
# Angle value type (degrees)
# ------------------------------------------------------------

AngleLike = Union["Angle", float, int]


def _deg(x: AngleLike) -> float:
    if isinstance(x, Angle):
        return x.degrees
    return float(x)


@dataclass(frozen=True)
class Angle:
    """
    A signed angle stored in degrees.

    Arithmetic is degree-wise and never mutates: `Angle(90) * -1` is
    `Angle(-90)`, `Angle(30) / 360` is `Angle(1/12)`. Plain numbers are
    accepted on either side of an operator and are read as degrees.
    """
    degrees: float

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls((radians * 180.0) / math.pi)

    @property
    def radians(self) -> float:
        return (self.degrees * math.pi) / 180.0

    def unwound(self) -> "Angle":
        """Angle in [0, 360)."""
        return Angle(normalized_to_scale(self.degrees, 360.0))

    def quadrant_shifted(self) -> "Angle":
        """Angle in [-180, 180]; values already in range are returned as-is."""
        if -180.0 <= self.degrees <= 180.0:
            return self
        return Angle(self.degrees - (360.0 * round_half_away(self.degrees / 360.0)))

    def __add__(self, other: AngleLike) -> "Angle":
        return Angle(self.degrees + _deg(other))

    def __radd__(self, other: AngleLike) -> "Angle":
        return Angle(_deg(other) + self.degrees)

    def __sub__(self, other: AngleLike) -> "Angle":
        return Angle(self.degrees - _deg(other))

    def __rsub__(self, other: AngleLike) -> "Angle":
        return Angle(_deg(other) - self.degrees)

    def __mul__(self, other: AngleLike) -> "Angle":
        return Angle(self.degrees * _deg(other))

    def __rmul__(self, other: AngleLike) -> "Angle":
        return Angle(_deg(other) * self.degrees)

    def __truediv__(self, other: AngleLike) -> "Angle":
        return Angle(self.degrees / _deg(other))

    def __rtruediv__(self, other: AngleLike) -> "Angle":
        return Angle(_deg(other) / self.degrees)

    def __neg__(self) -> "Angle":
        return Angle(-self.degrees)

    def __float__(self) -> float:
        return self.degrees


def as_angle(x: AngleLike) -> Angle:
    return x if isinstance(x, Angle) else Angle(float(x))
