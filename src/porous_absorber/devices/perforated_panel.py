"""Perforated panel absorber backed by a porous layer and an air gap.

A panel perforated with circular holes covers a cavity containing a
porous layer. Three arrangements are modelled:

- No air gap: the porous layer fills the whole cavity
- Absorber against panel: porous layer behind the panel, air gap behind it
- Absorber against backing: air gap behind the panel, porous layer on the
  rigid backing

The air in each hole oscillates with an added mass that extends beyond
the panel faces. This is accounted for by an end-corrected thickness:

    δ  = 0.8 (1 - 1.47 √ε + 0.47 √ε³)
    t' = t + 2 r δ

The panel contributes a mass reactance i ω ρ t'/ε and a viscous surface
resistance (ρ/ε) √(8 η ω) (...). Layers are combined with the standard
impedance transfer formula

    Z' = (-i Z₁ Z₂ cot(k₂ t₂) + Z₂²) / (Z₁ - i Z₂ cot(k₂ t₂))

References:
    - Cox & D'Antonio, "Acoustic Absorbers and Diffusers" (2009), chap. 7
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
    AIR_VISCOSITY,
    AirProperties,
    CavityProperties,
    PerforatedPanel,
    PorousLayerProperties,
)

from .base import SERIES_NAMES, DeviceInfo, DeviceType, run_sweep

logger = logging.getLogger(__name__)

I = 1j
MINUS_I = -1j


def end_correction_delta(porosity: float) -> float:
    """End correction factor δ for circular holes."""
    return 0.8 * (1.0 - 1.47 * np.sqrt(porosity) + 0.47 * np.sqrt(porosity**3))


def end_corrected_thickness(panel: PerforatedPanel) -> float:
    """Apparent panel thickness t' = t + 2 r δ in m."""
    return panel.thickness + 2.0 * panel.hole_radius * end_correction_delta(panel.porosity)


def calculate_plot_point(
    frequency: float,
    air: AirProperties,
    cavity: CavityProperties,
    panel: PerforatedPanel,
    porous_layer: PorousLayerProperties,
    ec_panel_thickness: float,
) -> tuple[float, float, float]:
    """Absorption of a perforated panel absorber at one frequency.

    Args:
        frequency: Frequency in Hz
        air: AirProperties
        cavity: CavityProperties
        panel: PerforatedPanel
        porous_layer: PorousLayerProperties
        ec_panel_thickness: End-corrected panel thickness in m

    Returns:
        (no_air_gap, against_panel, against_backing) absorption
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        k_air = wave_number_in_air(air, frequency)
        omega = np.float64(angular_frequency(frequency))

        z_abs, wave_no_abs = absorber_properties(air, porous_layer, frequency)

        cot_air = complex_cot(k_air * cavity.air_gap)
        cot_porous = complex_cot(wave_no_abs * porous_layer.thickness)

        viscous_term = (air.density / panel.porosity) * np.sqrt(8.0 * AIR_VISCOSITY * omega)
        mass_reactance = I * omega * air.density * (ec_panel_thickness / panel.porosity)

        # Absorber against panel
        against_panel_z1 = MINUS_I * air.impedance * cot_air
        against_panel_z2 = (MINUS_I * against_panel_z1 * z_abs * cot_porous + z_abs * z_abs) / (
            against_panel_z1 - I * z_abs * cot_porous
        )
        surface_resistance = viscous_term * (
            1.0 + ec_panel_thickness / (2.0 * panel.hole_radius)
        )
        against_panel_z3 = mass_reactance + against_panel_z2 + surface_resistance

        against_panel_alpha = reflectivity_to_absorption(
            difference_over_sum(against_panel_z3, air.impedance)
        )

        # Absorber against backing
        against_backing_z1 = MINUS_I * z_abs * cot_porous
        against_backing_z2 = (
            MINUS_I * against_backing_z1 * air.impedance * cot_air
            + air.impedance * air.impedance
        ) / (against_backing_z1 - I * air.impedance * cot_air)
        # Resistance factor is (t/2)·r here, not t/(2r)
        against_backing_z3 = (
            viscous_term * ((panel.thickness / 2.0 * panel.hole_radius) + 1.0)
            + mass_reactance
            + against_backing_z2
        )

        against_backing_alpha = reflectivity_to_absorption(
            difference_over_sum(against_backing_z3, air.impedance)
        )

        # No air gap: porous layer fills the cavity
        cot_cavity = complex_cot(wave_no_abs * (porous_layer.thickness + cavity.air_gap))
        no_air_gap_z1 = MINUS_I * z_abs * cot_cavity
        no_air_gap_z2 = mass_reactance + no_air_gap_z1

        no_air_gap_alpha = reflectivity_to_absorption(
            difference_over_sum(no_air_gap_z2, air.impedance)
        )

    logger.debug(
        "f=%.2f Hz: Z_panel=%s Z_backing=%s Z_no_gap=%s alpha=(%.2f, %.2f, %.2f)",
        frequency,
        against_panel_z3,
        against_backing_z3,
        no_air_gap_z2,
        no_air_gap_alpha,
        against_panel_alpha,
        against_backing_alpha,
    )

    return no_air_gap_alpha, against_panel_alpha, against_backing_alpha


def calculate_plot_points(
    frequencies: Sequence[float],
    air: AirProperties,
    cavity: CavityProperties,
    panel: PerforatedPanel,
    porous_layer: PorousLayerProperties,
) -> DeviceInfo:
    """Absorption curves of a perforated panel absorber.

    Args:
        frequencies: Ordered frequencies in Hz
        air: AirProperties
        cavity: CavityProperties
        panel: PerforatedPanel
        porous_layer: PorousLayerProperties

    Returns:
        DeviceInfo with series ("No Air Gap", "Absorber Against Panel",
        "Absorber Against Backing")
    """
    device_type = DeviceType.PERFORATED_PANEL_ABSORBER
    ec_panel_thickness = end_corrected_thickness(panel)

    logger.debug(
        "End correction delta = %s, end corrected panel thickness = %s m",
        end_correction_delta(panel.porosity),
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
