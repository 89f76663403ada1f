from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..reference.angle import Angle

@dataclass(frozen=True)
class Coordinates:
    latitude: float    # degrees, north positive
    longitude: float   # degrees, east positive

    @property
    def latitude_angle(self) -> Angle:
        return Angle(self.latitude)

    @property
    def longitude_angle(self) -> Angle:
        return Angle(self.longitude)

    def as_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Coordinates":
        return cls(latitude=float(data["latitude"]), longitude=float(data["longitude"]))
