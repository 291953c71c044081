"""Device types, absorption series and the frequency sweep driver.

Every device calculator evaluates one frequency at a time and returns
one absorption coefficient per configuration it models (for example
"No Air Gap" and "Air Gap"). The sweep driver folds a calculator over
an ordered list of frequencies and collects the results into named
series.

Series order is part of the output contract: consumers associate a
series with its colour and legend entry by position.

Example:
    >>> def flat(frequency):
    ...     return (0.5, 1.0)
    >>> series = run_sweep(flat, [125.0, 250.0], ["Low", "High"])
    >>> [p.absorption for p in series[1].points]
    [1.0, 1.0]
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from porous_absorber.config import (
    CavityProperties,
    MicroperforatedPanel,
    PerforatedPanel,
    PorousLayerProperties,
    SlottedPanel,
)

logger = logging.getLogger(__name__)

# Series names
TXT_AIR_GAP = "Air Gap"
TXT_NO_AIR_GAP = "No Air Gap"
TXT_ABS_AGAINST_PANEL = "Absorber Against Panel"
TXT_ABS_AGAINST_BACKING = "Absorber Against Backing"
TXT_MP_PANEL = "Microperforated Panel"


class DeviceType(Enum):
    """Acoustic treatment topology."""

    RIGID_BACKED_POROUS_ABSORBER = "porous_absorber"
    PERFORATED_PANEL_ABSORBER = "perforated_panel"
    SLOTTED_PANEL_ABSORBER = "slotted_panel"
    MICROPERFORATED_PANEL_ABSORBER = "microperforated_panel"


SERIES_NAMES: dict[DeviceType, tuple[str, ...]] = {
    DeviceType.RIGID_BACKED_POROUS_ABSORBER: (TXT_AIR_GAP, TXT_NO_AIR_GAP),
    DeviceType.PERFORATED_PANEL_ABSORBER: (
        TXT_NO_AIR_GAP,
        TXT_ABS_AGAINST_PANEL,
        TXT_ABS_AGAINST_BACKING,
    ),
    DeviceType.SLOTTED_PANEL_ABSORBER: (
        TXT_NO_AIR_GAP,
        TXT_ABS_AGAINST_PANEL,
        TXT_ABS_AGAINST_BACKING,
    ),
    DeviceType.MICROPERFORATED_PANEL_ABSORBER: (TXT_MP_PANEL,),
}


@dataclass(frozen=True)
class AbsorptionPoint:
    """Absorption coefficient at one frequency."""

    frequency: float
    absorption: float


@dataclass
class SeriesData:
    """Named absorption curve, one point per swept frequency."""

    name: str
    points: list[AbsorptionPoint] = field(default_factory=list)

    @property
    def frequencies(self) -> list[float]:
        return [point.frequency for point in self.points]

    @property
    def absorptions(self) -> list[float]:
        return [point.absorption for point in self.points]

    def __len__(self) -> int:
        return len(self.points)


def _json_absorption(value: float) -> float | None:
    # nan has no JSON representation
    return value if math.isfinite(value) else None


@dataclass
class DeviceInfo:
    """Result of a sweep plus the configuration it was computed from.

    Args:
        device_type: Which topology was calculated
        series: Absorption curves in the fixed per-device order
        cavity: Air gap configuration
        porous_layer: Porous layer configuration (None for microperforated)
        panel: Panel configuration (None for the porous absorber)
    """

    device_type: DeviceType
    series: list[SeriesData]
    cavity: CavityProperties
    porous_layer: PorousLayerProperties | None = None
    panel: PerforatedPanel | SlottedPanel | MicroperforatedPanel | None = None

    def series_by_name(self, name: str) -> SeriesData:
        for series in self.series:
            if series.name == name:
                return series
        raise KeyError(name)

    def to_dict(self) -> dict:
        """Plain-data representation suitable for JSON output.

        Degenerate (nan) absorption values are written as None.
        """
        return {
            "device": self.device_type.value,
            "series": [
                {
                    "name": series.name,
                    "points": [
                        {"freq": point.frequency, "abs": _json_absorption(point.absorption)}
                        for point in series.points
                    ],
                }
                for series in self.series
            ],
        }


def run_sweep(
    calculator: Callable[[float], Sequence[float]],
    frequencies: Sequence[float],
    series_names: Sequence[str],
) -> list[SeriesData]:
    """Evaluate a device calculator at each frequency, in order.

    Args:
        calculator: Function of frequency returning one absorption value
            per entry in series_names, in the same order
        frequencies: Ordered frequencies in Hz
        series_names: Names of the output series

    Returns:
        One SeriesData per name; point i of every series belongs to
        frequencies[i]

    Raises:
        ValueError: If the calculator returns the wrong number of values
    """
    series = [SeriesData(name=name) for name in series_names]

    for frequency in frequencies:
        values = tuple(calculator(frequency))

        if len(values) != len(series):
            raise ValueError(
                f"Calculator returned {len(values)} values for "
                f"{len(series)} series at {frequency} Hz"
            )

        for curve, absorption in zip(series, values, strict=True):
            curve.points.append(AbsorptionPoint(frequency=frequency, absorption=absorption))

    logger.debug(
        "Swept %d frequencies into series %s", len(frequencies), ", ".join(series_names)
    )

    return series
