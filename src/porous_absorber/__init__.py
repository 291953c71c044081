"""
Porous Absorber - sound absorption calculator for acoustic treatments.

Main exports:
- AirProperties, CavityProperties, PorousLayerProperties: Validated inputs
- PerforatedPanel, SlottedPanel, MicroperforatedPanel: Panel geometry
- IncidenceAngle: Angle of the incident sound wave
- SweepConfig, generate_frequencies: Logarithmic frequency sweeps
- DeviceInfo, SeriesData: Absorption curves returned by every calculator
- porous_absorber, perforated_panel, slotted_panel, microperforated_panel:
  Device calculators
"""

from porous_absorber.acoustics import absorber_properties, bessel_j
from porous_absorber.config import (
    AirProperties,
    CavityProperties,
    ConfigError,
    IncidenceAngle,
    MicroperforatedPanel,
    PerforatedPanel,
    PorousLayerProperties,
    SlottedPanel,
    SweepConfig,
    generate_frequencies,
)
from porous_absorber.devices import (
    DeviceInfo,
    DeviceType,
    SeriesData,
    microperforated_panel,
    perforated_panel,
    porous_absorber,
    slotted_panel,
)
from porous_absorber.logging_config import setup_logging

from . import acoustics, config, devices

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "AirProperties",
    "CavityProperties",
    "ConfigError",
    "IncidenceAngle",
    "MicroperforatedPanel",
    "PerforatedPanel",
    "PorousLayerProperties",
    "SlottedPanel",
    "SweepConfig",
    "generate_frequencies",
    # Results
    "DeviceInfo",
    "DeviceType",
    "SeriesData",
    # Calculators
    "microperforated_panel",
    "perforated_panel",
    "porous_absorber",
    "slotted_panel",
    # Numerics
    "absorber_properties",
    "bessel_j",
    # Submodules
    "acoustics",
    "config",
    "devices",
    # Logging
    "setup_logging",
]
