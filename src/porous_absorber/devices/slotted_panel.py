"""Slotted panel absorber backed by a porous layer and an air gap.

Same three arrangements as the perforated panel, but the openings are
parallel slots of width w. The slot end correction is

    δ  = -ln(sin(π ε / 2)) / π
    t' = t + 2 w δ

The panel is treated as a resistive mass layer. The flow resistance of
the porous layer R_b = σ t_p is scaled by the open area (R_p = R_b ε)
when the absorber sits directly behind the slots, and the slot mass
M = ρ t'/ε gives a mass reactance

    M_s = i (ω M - Z₀ cot(k₀ t'))
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from porous_absorber.acoustics import (
    absorber_properties,
    angular_frequency,
    complex_cot,
    difference_over_sum,
    reflectivity_to_absorption,
    wave_number_in_air,
)
from porous_absorber.config import (
    AirProperties,
    CavityProperties,
    PorousLayerProperties,
    SlottedPanel,
)

from .base import SERIES_NAMES, DeviceInfo, DeviceType, run_sweep

logger = logging.getLogger(__name__)

I = 1j
MINUS_I = -1j


def end_correction_delta(porosity: float) -> float:
    """End correction factor δ for slots."""
    return -np.log(np.sin(np.pi * porosity / 2.0)) / np.pi


def end_corrected_thickness(panel: SlottedPanel) -> float:
    """Apparent panel thickness t' = t + 2 w δ in m."""
    return panel.thickness + 2.0 * panel.slot_width * end_correction_delta(panel.porosity)


def flow_resistance(porous_layer: PorousLayerProperties) -> float:
    """Flow resistance R_b = σ t of the porous layer in Pa·s/m."""
    return porous_layer.sigma * porous_layer.thickness


def calculate_plot_point(
    frequency: float,
    air: AirProperties,
    cavity: CavityProperties,
    panel: SlottedPanel,
    porous_layer: PorousLayerProperties,
    ec_panel_thickness: float,
) -> tuple[float, float, float]:
    """Absorption of a slotted panel absorber at one frequency.

    Returns:
        (no_air_gap, against_panel, against_backing) absorption
    """
    resistance_backing = flow_resistance(porous_layer)
    resistance_panel = resistance_backing * panel.porosity
    mass = ec_panel_thickness * air.density / panel.porosity

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        k_air = wave_number_in_air(air, frequency)
        omega = angular_frequency(frequency)

        z_abs, wave_no_abs = absorber_properties(air, porous_layer, frequency)

        cot_air = complex_cot(k_air * cavity.air_gap)
        cot_porous = complex_cot(wave_no_abs * porous_layer.thickness)

        mass_reactance = I * (
            omega * mass - air.impedance * complex_cot(k_air * ec_panel_thickness)
        )

        # Absorber against panel
        against_panel_z1 = MINUS_I * air.impedance * cot_air
        against_panel_z2 = (MINUS_I * against_panel_z1 * z_abs * cot_porous + z_abs * z_abs) / (
            against_panel_z1 - I * z_abs * cot_porous
        )
        against_panel_z3 = resistance_panel + mass_reactance + against_panel_z2

        against_panel_alpha = reflectivity_to_absorption(
            difference_over_sum(against_panel_z3, air.impedance)
        )

        # Absorber against backing
        against_backing_z1 = MINUS_I * z_abs * cot_porous
        against_backing_z2 = (
            MINUS_I * against_backing_z1 * air.impedance * cot_air
            + air.impedance * air.impedance
        ) / (against_backing_z1 - I * air.impedance * cot_air)
        against_backing_z3 = resistance_backing + mass_reactance + against_backing_z2

        against_backing_alpha = reflectivity_to_absorption(
            difference_over_sum(against_backing_z3, air.impedance)
        )

        # No air gap
        no_air_gap_z1 = MINUS_I * z_abs * complex_cot(
            wave_no_abs * (cavity.air_gap + porous_layer.thickness)
        )
        no_air_gap_z2 = resistance_panel + mass_reactance + no_air_gap_z1

        no_air_gap_alpha = reflectivity_to_absorption(
            difference_over_sum(no_air_gap_z2, air.impedance)
        )

    logger.debug(
        "f=%.2f Hz: M_s=%s alpha=(%.2f, %.2f, %.2f)",
        frequency,
        mass_reactance,
        no_air_gap_alpha,
        against_panel_alpha,
        against_backing_alpha,
    )

    return no_air_gap_alpha, against_panel_alpha, against_backing_alpha


def calculate_plot_points(
    frequencies: Sequence[float],
    air: AirProperties,
    cavity: CavityProperties,
    panel: SlottedPanel,
    porous_layer: PorousLayerProperties,
) -> DeviceInfo:
    """Absorption curves of a slotted panel absorber.

    Args:
        frequencies: Ordered frequencies in Hz
        air: AirProperties
        cavity: CavityProperties
        panel: SlottedPanel
        porous_layer: PorousLayerProperties

    Returns:
        DeviceInfo with series ("No Air Gap", "Absorber Against Panel",
        "Absorber Against Backing")
    """
    device_type = DeviceType.SLOTTED_PANEL_ABSORBER
    ec_panel_thickness = end_corrected_thickness(panel)

    logger.debug(
        "Slot porosity = %s, end corrected panel thickness = %s m",
        panel.porosity,
        ec_panel_thickness,
    )

    series = run_sweep(
        lambda frequency: calculate_plot_point(
            frequency, air, cavity, panel, porous_layer, ec_panel_thickness
        ),
        frequencies,
        SERIES_NAMES[device_type],
    )

    return DeviceInfo(
        device_type=device_type,
        series=series,
        cavity=cavity,
        porous_layer=porous_layer,
        panel=panel,
    )
