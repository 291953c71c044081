"""Angle of incidence of the sound wave."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, radians

from .ranges import NamedRange

ANGLE_RANGE = NamedRange("Angle of Incidence", "degrees", 0, 0, 89)


@dataclass(frozen=True)
class IncidenceAngle:
    """Angle between the incident wave and the surface normal.

    Args:
        angle: Angle of incidence in degrees (0 to 89)
    """

    angle: int = ANGLE_RANGE.default

    def __post_init__(self):
        ANGLE_RANGE.check(self.angle)

    @property
    def radians(self) -> float:
        return radians(self.angle)

    @property
    def cos_angle(self) -> float:
        return cos(self.radians)

    @classmethod
    def default(cls) -> IncidenceAngle:
        return cls()
