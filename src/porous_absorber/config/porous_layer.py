"""Porous absorbing layer (mineral wool, fibreglass, foam)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ranges import NamedRange

THICKNESS_RANGE = NamedRange("Absorber Thickness", "mm", 5, 30, 500)
FLOW_RESISTIVITY_RANGE = NamedRange("Flow Resistivity", "rayls/m", 1000, 16500, 100000)


@dataclass(frozen=True)
class PorousLayerProperties:
    """Porous layer described by thickness and static flow resistivity.

    Args:
        thickness_mm: Layer thickness in mm (5 to 500)
        sigma: Flow resistivity σ in rayls/m (1000 to 100000)

    Attributes:
        thickness: Layer thickness in m

    Example:
        >>> # 30mm of 48 kg/m³ mineral wool
        >>> layer = PorousLayerProperties(thickness_mm=30, sigma=16500)
        >>> layer.thickness
        0.03
    """

    thickness_mm: int = THICKNESS_RANGE.default
    sigma: int = FLOW_RESISTIVITY_RANGE.default
    thickness: float = field(init=False)

    def __post_init__(self):
        THICKNESS_RANGE.check(self.thickness_mm)
        FLOW_RESISTIVITY_RANGE.check(self.sigma)
        object.__setattr__(self, "thickness", self.thickness_mm / 1000.0)

    @classmethod
    def default(cls) -> PorousLayerProperties:
        return cls()
