"""Perforated, slotted and microperforated panel geometry.

Panel dimensions are entered in millimetres and converted to metres.
When no porosity is given it is derived from the geometry:

- Circular holes on a square grid: ε = πr²/d²
- Parallel slots: ε = w/(w + d)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import pi

from .ranges import ConfigError, NamedRange


def hole_porosity(hole_radius: float, hole_centres: float) -> float:
    """Open area fraction of circular holes on a square grid."""
    return (pi * hole_radius * hole_radius) / (hole_centres * hole_centres)


def slot_porosity(slot_width: float, slot_distance: float) -> float:
    """Open area fraction of parallel slots."""
    return slot_width / (slot_width + slot_distance)


def _check_porosity(porosity: float) -> float:
    if not 0 < porosity <= 1:
        raise ConfigError(f"Porosity must be in (0, 1], not '{porosity}'")
    return porosity


# =============================================================================
# Perforated panel
# =============================================================================

PERFORATED_THICKNESS_RANGE = NamedRange("Panel Thickness", "mm", 1.0, 10.0, 50.0)
PERFORATED_CENTRES_RANGE = NamedRange("Hole Centres", "mm", 2.0, 25.4, 300.0)
PERFORATED_RADIUS_RANGE = NamedRange("Hole Radius", "mm", 1.0, 12.7, 50.0)


@dataclass(frozen=True)
class PerforatedPanel:
    """Panel perforated with circular holes on a square grid.

    Args:
        thickness_mm: Panel thickness in mm (1 to 50)
        hole_centres_mm: Distance between hole centres in mm (2 to 300)
        hole_radius_mm: Hole radius in mm (1 to 50)
        porosity: Open area fraction; derived from the hole geometry if None

    Example:
        >>> # 10mm panel, 25.4mm holes on 25.4mm centres
        >>> panel = PerforatedPanel(thickness_mm=10, hole_centres_mm=25.4, hole_radius_mm=12.7)
        >>> round(panel.porosity, 4)
        0.7854
    """

    thickness_mm: float = PERFORATED_THICKNESS_RANGE.default
    hole_centres_mm: float = PERFORATED_CENTRES_RANGE.default
    hole_radius_mm: float = PERFORATED_RADIUS_RANGE.default
    porosity: float | None = None

    thickness: float = field(init=False)
    hole_centres: float = field(init=False)
    hole_radius: float = field(init=False)

    def __post_init__(self):
        PERFORATED_THICKNESS_RANGE.check(self.thickness_mm)
        PERFORATED_CENTRES_RANGE.check(self.hole_centres_mm)
        PERFORATED_RADIUS_RANGE.check(self.hole_radius_mm)

        object.__setattr__(self, "thickness", self.thickness_mm / 1000.0)
        object.__setattr__(self, "hole_centres", self.hole_centres_mm / 1000.0)
        object.__setattr__(self, "hole_radius", self.hole_radius_mm / 1000.0)

        if self.porosity is None:
            object.__setattr__(
                self, "porosity", hole_porosity(self.hole_radius, self.hole_centres)
            )
        _check_porosity(self.porosity)

    @classmethod
    def default(cls) -> PerforatedPanel:
        return cls()


# =============================================================================
# Slotted panel
# =============================================================================

SLOTTED_THICKNESS_RANGE = NamedRange("Panel Thickness", "mm", 1.0, 10.0, 50.0)
SLOTTED_DISTANCE_RANGE = NamedRange("Slot Distance", "mm", 2.0, 25.4, 300.0)
SLOTTED_WIDTH_RANGE = NamedRange("Slot Width", "mm", 1.0, 5.0, 50.0)


@dataclass(frozen=True)
class SlottedPanel:
    """Panel with parallel slots.

    Args:
        thickness_mm: Panel thickness in mm (1 to 50)
        slot_distance_mm: Distance between slots in mm (2 to 300)
        slot_width_mm: Slot width in mm (1 to 50)
        porosity: Open area fraction; derived from the slot geometry if None
    """

    thickness_mm: float = SLOTTED_THICKNESS_RANGE.default
    slot_distance_mm: float = SLOTTED_DISTANCE_RANGE.default
    slot_width_mm: float = SLOTTED_WIDTH_RANGE.default
    porosity: float | None = None

    thickness: float = field(init=False)
    slot_distance: float = field(init=False)
    slot_width: float = field(init=False)

    def __post_init__(self):
        SLOTTED_THICKNESS_RANGE.check(self.thickness_mm)
        SLOTTED_DISTANCE_RANGE.check(self.slot_distance_mm)
        SLOTTED_WIDTH_RANGE.check(self.slot_width_mm)

        object.__setattr__(self, "thickness", self.thickness_mm / 1000.0)
        object.__setattr__(self, "slot_distance", self.slot_distance_mm / 1000.0)
        object.__setattr__(self, "slot_width", self.slot_width_mm / 1000.0)

        if self.porosity is None:
            object.__setattr__(
                self, "porosity", slot_porosity(self.slot_width, self.slot_distance)
            )
        _check_porosity(self.porosity)

    @classmethod
    def default(cls) -> SlottedPanel:
        return cls()


# =============================================================================
# Microperforated panel
# =============================================================================

MICROPERFORATED_THICKNESS_RANGE = NamedRange("Panel Thickness", "mm", 0.5, 1.0, 10.0)
MICROPERFORATED_CENTRES_RANGE = NamedRange("Hole Centres", "mm", 0.5, 5.0, 10.0)
MICROPERFORATED_RADIUS_RANGE = NamedRange("Hole Radius", "mm", 0.05, 0.25, 0.5)


@dataclass(frozen=True)
class MicroperforatedPanel:
    """Thin panel with sub-millimetre holes (Maa's microperforated panel).

    Args:
        thickness_mm: Panel thickness in mm (0.5 to 10)
        hole_centres_mm: Distance between hole centres in mm (0.5 to 10)
        hole_radius_mm: Hole radius in mm (0.05 to 0.5)
        porosity: Open area fraction; derived from the hole geometry if None
    """

    thickness_mm: float = MICROPERFORATED_THICKNESS_RANGE.default
    hole_centres_mm: float = MICROPERFORATED_CENTRES_RANGE.default
    hole_radius_mm: float = MICROPERFORATED_RADIUS_RANGE.default
    porosity: float | None = None

    thickness: float = field(init=False)
    hole_centres: float = field(init=False)
    hole_radius: float = field(init=False)

    def __post_init__(self):
        MICROPERFORATED_THICKNESS_RANGE.check(self.thickness_mm)
        MICROPERFORATED_CENTRES_RANGE.check(self.hole_centres_mm)
        MICROPERFORATED_RADIUS_RANGE.check(self.hole_radius_mm)

        object.__setattr__(self, "thickness", self.thickness_mm / 1000.0)
        object.__setattr__(self, "hole_centres", self.hole_centres_mm / 1000.0)
        object.__setattr__(self, "hole_radius", self.hole_radius_mm / 1000.0)

        if self.porosity is None:
            object.__setattr__(
                self, "porosity", hole_porosity(self.hole_radius, self.hole_centres)
            )
        _check_porosity(self.porosity)

    @classmethod
    def default(cls) -> MicroperforatedPanel:
        return cls()
