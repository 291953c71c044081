"""Command-line tool for calculating absorption curves.

The absorb CLI builds the validated input records from user units,
runs one device calculator over a logarithmic frequency sweep and prints
the resulting absorption curves as a table or as JSON.

Every out-of-range input is reported, not just the first one, and the
command exits with status 1 if there were any.
"""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console

from porous_absorber import __version__
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
)
from porous_absorber.config.air import PRESSURE_RANGE, TEMPERATURE_RANGE
from porous_absorber.config.cavity import AIR_GAP_RANGE
from porous_absorber.config.panels import (
    MICROPERFORATED_CENTRES_RANGE,
    MICROPERFORATED_RADIUS_RANGE,
    MICROPERFORATED_THICKNESS_RANGE,
    PERFORATED_CENTRES_RANGE,
    PERFORATED_RADIUS_RANGE,
    PERFORATED_THICKNESS_RANGE,
    SLOTTED_DISTANCE_RANGE,
    SLOTTED_THICKNESS_RANGE,
    SLOTTED_WIDTH_RANGE,
)
from porous_absorber.config.porous_layer import FLOW_RESISTIVITY_RANGE, THICKNESS_RANGE
from porous_absorber.config.sound import ANGLE_RANGE
from porous_absorber.config.sweep import DEFAULT_SUBDIVISIONS, START_FREQUENCY_RANGE
from porous_absorber.devices import (
    DeviceInfo,
    microperforated_panel,
    perforated_panel,
    porous_absorber,
    slotted_panel,
)
from porous_absorber.logging_config import setup_logging

from .report import print_absorption, print_device_info, to_json

console = Console()
logger = logging.getLogger(__name__)


def _range_help(text: str, named_range) -> str:
    return f"{text} in {named_range.units} ({named_range.min} to {named_range.max})"


def common_options(func):
    """Air, cavity, sweep and output options shared by every device."""
    options = [
        click.option(
            "--air-temp",
            type=int,
            default=TEMPERATURE_RANGE.default,
            show_default=True,
            help=_range_help("Air temperature", TEMPERATURE_RANGE),
        ),
        click.option(
            "--air-pressure",
            type=float,
            default=PRESSURE_RANGE.default,
            show_default=True,
            help=_range_help("Air pressure", PRESSURE_RANGE),
        ),
        click.option(
            "--air-gap",
            type=int,
            default=AIR_GAP_RANGE.default,
            show_default=True,
            help=_range_help("Air gap", AIR_GAP_RANGE),
        ),
        click.option(
            "--start-freq",
            type=float,
            default=START_FREQUENCY_RANGE.default,
            show_default=True,
            help=_range_help("First frequency of the sweep", START_FREQUENCY_RANGE),
        ),
        click.option(
            "--subdivisions",
            type=int,
            default=DEFAULT_SUBDIVISIONS,
            show_default=True,
            help="Octave subdivisions (1, 2, 3 or 6)",
        ),
        click.option("--json", "as_json", is_flag=True, help="Print results as JSON"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def porous_layer_options(func):
    options = [
        click.option(
            "--absorber-thickness",
            type=int,
            default=THICKNESS_RANGE.default,
            show_default=True,
            help=_range_help("Porous absorber thickness", THICKNESS_RANGE),
        ),
        click.option(
            "--flow-resistivity",
            type=int,
            default=FLOW_RESISTIVITY_RANGE.default,
            show_default=True,
            help=_range_help("Flow resistivity", FLOW_RESISTIVITY_RANGE),
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


angle_option = click.option(
    "--angle",
    type=int,
    default=ANGLE_RANGE.default,
    show_default=True,
    help=_range_help("Angle of incidence", ANGLE_RANGE),
)

porosity_option = click.option(
    "--porosity",
    type=float,
    default=None,
    help="Open area fraction (derived from the panel geometry if omitted)",
)


def build(errors: list[str], factory: Callable, **kwargs):
    """Construct an input record, collecting a ConfigError instead of raising.

    Args:
        errors: List that receives the error message
        factory: Record class to construct
        **kwargs: Constructor arguments

    Returns:
        The record, or None if validation failed
    """
    try:
        return factory(**kwargs)
    except ConfigError as e:
        errors.append(str(e))
        return None


def build_common(errors: list[str], air_temp, air_pressure, air_gap, start_freq, subdivisions):
    air = build(errors, AirProperties, temperature=air_temp, pressure=air_pressure)
    cavity = build(errors, CavityProperties, air_gap_mm=air_gap)
    sweep = build(errors, SweepConfig, start_frequency=start_freq, subdivisions=subdivisions)
    return air, cavity, sweep


def report_errors(errors: list[str]):
    """Print every collected input error and exit with status 1."""
    console.print(f"\n[bold red]Invalid input ({len(errors)}):[/bold red]")
    for message in errors:
        console.print(f"  [red]{message}[/red]")
    sys.exit(1)


def run_device(
    ctx: click.Context,
    calculate: Callable[[], DeviceInfo],
    air: AirProperties,
    as_json: bool,
    angle: IncidenceAngle | None = None,
):
    """Run a calculator and print its result."""
    verbose = ctx.obj.get("verbose", False) if ctx.obj else False

    try:
        info = calculate()
    except Exception as e:
        console.print(f"\n[bold red]Calculation Error:[/bold red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    logger.debug("Calculated %d series for %s", len(info.series), info.device_type.value)

    if as_json:
        click.echo(to_json(info))
        return

    print_device_info(console, info, air, angle)
    print_absorption(console, info)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output with debug logging")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the log to this file",
)
@click.version_option(version=__version__, prog_name="absorb")
@click.pass_context
def main(ctx: click.Context, verbose: bool, log_file: Path | None):
    """Calculate the sound absorption of acoustic treatments.

    Each command sweeps 8 octaves upwards from the start frequency and
    prints one absorption curve per configuration of the device.

    \b
    Example:
        absorb porous-absorber --absorber-thickness 50 --air-gap 200
        absorb perforated-panel --hole-radius 5 --json
    """
    setup_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        log_file=str(log_file) if log_file else None,
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command("porous-absorber")
@common_options
@porous_layer_options
@angle_option
@click.pass_context
def porous_absorber_command(
    ctx: click.Context,
    air_temp: int,
    air_pressure: float,
    air_gap: int,
    start_freq: float,
    subdivisions: int,
    as_json: bool,
    absorber_thickness: int,
    flow_resistivity: int,
    angle: int,
):
    """Rigid backed porous absorber, with and without an air gap."""
    errors: list[str] = []
    air, cavity, sweep = build_common(
        errors, air_temp, air_pressure, air_gap, start_freq, subdivisions
    )
    porous_layer = build(
        errors,
        PorousLayerProperties,
        thickness_mm=absorber_thickness,
        sigma=flow_resistivity,
    )
    incidence = build(errors, IncidenceAngle, angle=angle)

    if errors:
        report_errors(errors)

    run_device(
        ctx,
        lambda: porous_absorber.calculate_plot_points(
            sweep.frequencies, air, cavity, porous_layer, incidence
        ),
        air,
        as_json,
        incidence,
    )


@main.command("perforated-panel")
@common_options
@porous_layer_options
@click.option(
    "--panel-thickness",
    type=float,
    default=PERFORATED_THICKNESS_RANGE.default,
    show_default=True,
    help=_range_help("Panel thickness", PERFORATED_THICKNESS_RANGE),
)
@click.option(
    "--hole-centres",
    type=float,
    default=PERFORATED_CENTRES_RANGE.default,
    show_default=True,
    help=_range_help("Distance between hole centres", PERFORATED_CENTRES_RANGE),
)
@click.option(
    "--hole-radius",
    type=float,
    default=PERFORATED_RADIUS_RANGE.default,
    show_default=True,
    help=_range_help("Hole radius", PERFORATED_RADIUS_RANGE),
)
@porosity_option
@click.pass_context
def perforated_panel_command(
    ctx: click.Context,
    air_temp: int,
    air_pressure: float,
    air_gap: int,
    start_freq: float,
    subdivisions: int,
    as_json: bool,
    absorber_thickness: int,
    flow_resistivity: int,
    panel_thickness: float,
    hole_centres: float,
    hole_radius: float,
    porosity: float | None,
):
    """Perforated panel in front of a porous layer and an air gap."""
    errors: list[str] = []
    air, cavity, sweep = build_common(
        errors, air_temp, air_pressure, air_gap, start_freq, subdivisions
    )
    porous_layer = build(
        errors,
        PorousLayerProperties,
        thickness_mm=absorber_thickness,
        sigma=flow_resistivity,
    )
    panel = build(
        errors,
        PerforatedPanel,
        thickness_mm=panel_thickness,
        hole_centres_mm=hole_centres,
        hole_radius_mm=hole_radius,
        porosity=porosity,
    )

    if errors:
        report_errors(errors)

    run_device(
        ctx,
        lambda: perforated_panel.calculate_plot_points(
            sweep.frequencies, air, cavity, panel, porous_layer
        ),
        air,
        as_json,
    )


@main.command("slotted-panel")
@common_options
@porous_layer_options
@click.option(
    "--panel-thickness",
    type=float,
    default=SLOTTED_THICKNESS_RANGE.default,
    show_default=True,
    help=_range_help("Panel thickness", SLOTTED_THICKNESS_RANGE),
)
@click.option(
    "--slot-distance",
    type=float,
    default=SLOTTED_DISTANCE_RANGE.default,
    show_default=True,
    help=_range_help("Distance between slots", SLOTTED_DISTANCE_RANGE),
)
@click.option(
    "--slot-width",
    type=float,
    default=SLOTTED_WIDTH_RANGE.default,
    show_default=True,
    help=_range_help("Slot width", SLOTTED_WIDTH_RANGE),
)
@porosity_option
@click.pass_context
def slotted_panel_command(
    ctx: click.Context,
    air_temp: int,
    air_pressure: float,
    air_gap: int,
    start_freq: float,
    subdivisions: int,
    as_json: bool,
    absorber_thickness: int,
    flow_resistivity: int,
    panel_thickness: float,
    slot_distance: float,
    slot_width: float,
    porosity: float | None,
):
    """Slotted panel in front of a porous layer and an air gap."""
    errors: list[str] = []
    air, cavity, sweep = build_common(
        errors, air_temp, air_pressure, air_gap, start_freq, subdivisions
    )
    porous_layer = build(
        errors,
        PorousLayerProperties,
        thickness_mm=absorber_thickness,
        sigma=flow_resistivity,
    )
    panel = build(
        errors,
        SlottedPanel,
        thickness_mm=panel_thickness,
        slot_distance_mm=slot_distance,
        slot_width_mm=slot_width,
        porosity=porosity,
    )

    if errors:
        report_errors(errors)

    run_device(
        ctx,
        lambda: slotted_panel.calculate_plot_points(
            sweep.frequencies, air, cavity, panel, porous_layer
        ),
        air,
        as_json,
    )


@main.command("microperforated-panel")
@common_options
@click.option(
    "--panel-thickness",
    type=float,
    default=MICROPERFORATED_THICKNESS_RANGE.default,
    show_default=True,
    help=_range_help("Panel thickness", MICROPERFORATED_THICKNESS_RANGE),
)
@click.option(
    "--hole-centres",
    type=float,
    default=MICROPERFORATED_CENTRES_RANGE.default,
    show_default=True,
    help=_range_help("Distance between hole centres", MICROPERFORATED_CENTRES_RANGE),
)
@click.option(
    "--hole-radius",
    type=float,
    default=MICROPERFORATED_RADIUS_RANGE.default,
    show_default=True,
    help=_range_help("Hole radius", MICROPERFORATED_RADIUS_RANGE),
)
@porosity_option
@angle_option
@click.pass_context
def microperforated_panel_command(
    ctx: click.Context,
    air_temp: int,
    air_pressure: float,
    air_gap: int,
    start_freq: float,
    subdivisions: int,
    as_json: bool,
    panel_thickness: float,
    hole_centres: float,
    hole_radius: float,
    porosity: float | None,
    angle: int,
):
    """Microperforated panel in front of an air gap."""
    errors: list[str] = []
    air, cavity, sweep = build_common(
        errors, air_temp, air_pressure, air_gap, start_freq, subdivisions
    )
    panel = build(
        errors,
        MicroperforatedPanel,
        thickness_mm=panel_thickness,
        hole_centres_mm=hole_centres,
        hole_radius_mm=hole_radius,
        porosity=porosity,
    )
    incidence = build(errors, IncidenceAngle, angle=angle)

    if errors:
        report_errors(errors)

    run_device(
        ctx,
        lambda: microperforated_panel.calculate_plot_points(
            sweep.frequencies, air, cavity, panel, incidence
        ),
        air,
        as_json,
        incidence,
    )


if __name__ == "__main__":
    main()
