"""Terminal and JSON rendering of absorption results.

Provides:
- A parameter summary table for the calculated device
- An absorption table, one row per frequency and one column per series
- JSON output for consumption by other tools
"""

import json
import math

from rich.console import Console
from rich.table import Table

from porous_absorber.config import AirProperties, IncidenceAngle
from porous_absorber.devices import DeviceInfo

DEVICE_TITLES = {
    "porous_absorber": "Rigid Backed Porous Absorber",
    "perforated_panel": "Perforated Panel Absorber",
    "slotted_panel": "Slotted Panel Absorber",
    "microperforated_panel": "Microperforated Panel Absorber",
}


def format_absorption(value: float) -> str:
    """Format an absorption coefficient for display.

    Args:
        value: Absorption coefficient

    Returns:
        Two decimal string, or "n/a" for a degenerate (nan) value
    """
    if math.isnan(value):
        return "n/a"
    return f"{value:.2f}"


def format_frequency(frequency: float) -> str:
    if frequency >= 1000:
        return f"{frequency / 1000:.2f} kHz"
    return f"{frequency:.1f} Hz"


def print_device_info(
    console: Console,
    info: DeviceInfo,
    air: AirProperties,
    angle: IncidenceAngle | None = None,
):
    """Print the parameters a result was calculated from.

    Args:
        console: Rich console instance
        info: Calculated device
        air: AirProperties used for the calculation
        angle: IncidenceAngle, if the device uses one
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Air", f"{air.temperature} °C, {air.pressure} bar")
    table.add_row(
        "Air properties",
        f"ρ = {air.density:.4f} kg/m³, c = {air.velocity:.1f} m/s, Z₀ = {air.impedance:.1f} rayls",
    )
    table.add_row("Air gap", f"{info.cavity.air_gap_mm} mm")

    if info.porous_layer is not None:
        table.add_row(
            "Porous layer",
            f"{info.porous_layer.thickness_mm} mm, σ = {info.porous_layer.sigma} rayls/m",
        )

    if info.panel is not None:
        table.add_row("Panel thickness", f"{info.panel.thickness_mm} mm")
        table.add_row("Porosity", f"{info.panel.porosity:.4f}")

    if angle is not None:
        table.add_row("Angle of incidence", f"{angle.angle}°")

    console.print(table)
    console.print()


def absorption_table(info: DeviceInfo) -> Table:
    """Build a table of absorption against frequency.

    Args:
        info: Calculated device

    Returns:
        Rich table with a frequency column followed by one column per series
    """
    table = Table(title=DEVICE_TITLES[info.device_type.value], header_style="bold")
    table.add_column("Frequency", style="cyan", justify="right")

    for series in info.series:
        table.add_column(series.name, justify="right")

    if not info.series:
        return table

    for row, frequency in enumerate(info.series[0].frequencies):
        table.add_row(
            format_frequency(frequency),
            *(format_absorption(series.points[row].absorption) for series in info.series),
        )

    return table


def print_absorption(console: Console, info: DeviceInfo):
    console.print(absorption_table(info))


def to_json(info: DeviceInfo, indent: int | None = 2) -> str:
    """Serialise a result as {"device", "series": [{"name", "points"}]}.

    Output is strict JSON: a nan absorption is written as null.
    """
    return json.dumps(info.to_dict(), indent=indent, allow_nan=False)
