"""Geographic search area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Circle:
    """A point and a radius around it, used to restrict event searches."""

    latitude: float = 0.0
    longitude: float = 0.0
    radius: float = 0.0

    def is_valid(self) -> bool:
        if self.radius <= 0:
            return False
        if self.latitude < -90.0 or self.latitude > 90.0:
            return False
        if self.longitude < -180.0 or self.longitude > 180.0:
            return False
        return True

    def param(self) -> str:
        return f"{self.latitude:.6f}:{self.longitude:.6f}:{self.radius:.6f}"


__all__ = [
    "Circle",
]
