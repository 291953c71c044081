"""Air gap (cavity) between an absorber and its rigid backing."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ranges import NamedRange

AIR_GAP_RANGE = NamedRange("Air Gap", "mm", 0, 100, 500)


@dataclass(frozen=True)
class CavityProperties:
    """Air gap depth.

    The millimetre value is kept for display; calculations use ``air_gap``
    in metres.

    Args:
        air_gap_mm: Air gap depth in mm (0 to 500)
    """

    air_gap_mm: int = AIR_GAP_RANGE.default
    air_gap: float = field(init=False)

    def __post_init__(self):
        AIR_GAP_RANGE.check(self.air_gap_mm)
        object.__setattr__(self, "air_gap", self.air_gap_mm / 1000.0)

    @classmethod
    def default(cls) -> CavityProperties:
        return cls()
