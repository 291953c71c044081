"""Device calculators, one per acoustic treatment topology.

Each module exposes ``calculate_plot_point`` (absorption at one
frequency) and ``calculate_plot_points`` (a full sweep returning a
DeviceInfo).
"""

from . import microperforated_panel, perforated_panel, porous_absorber, slotted_panel
from .base import (
    SERIES_NAMES,
    AbsorptionPoint,
    DeviceInfo,
    DeviceType,
    SeriesData,
    run_sweep,
)

__all__ = [
    "SERIES_NAMES",
    "AbsorptionPoint",
    "DeviceInfo",
    "DeviceType",
    "SeriesData",
    "microperforated_panel",
    "perforated_panel",
    "porous_absorber",
    "run_sweep",
    "slotted_panel",
]
