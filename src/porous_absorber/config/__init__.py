"""Validated input records for the absorber calculations.

Every record is an immutable dataclass built from user units
(millimetres, °C, bar) that checks each value against a NamedRange and
raises ConfigError when it is out of range. Derived values (SI units,
air density, porosity) are computed at construction.

Example:
    >>> from porous_absorber.config import AirProperties, CavityProperties
    >>> air = AirProperties(temperature=20, pressure=1.0)
    >>> cavity = CavityProperties(air_gap_mm=100)
    >>> cavity.air_gap
    0.1
"""

from .air import AIR_VISCOSITY, AirProperties
from .cavity import CavityProperties
from .panels import (
    MicroperforatedPanel,
    PerforatedPanel,
    SlottedPanel,
    hole_porosity,
    slot_porosity,
)
from .porous_layer import PorousLayerProperties
from .ranges import ConfigError, NamedRange
from .sound import IncidenceAngle
from .sweep import SweepConfig, generate_frequencies

__all__ = [
    "AIR_VISCOSITY",
    "AirProperties",
    "CavityProperties",
    "ConfigError",
    "IncidenceAngle",
    "MicroperforatedPanel",
    "NamedRange",
    "PerforatedPanel",
    "PorousLayerProperties",
    "SlottedPanel",
    "SweepConfig",
    "generate_frequencies",
    "hole_porosity",
    "slot_porosity",
]
