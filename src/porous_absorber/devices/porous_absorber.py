"""Rigid backed porous absorber, with and without an air gap.

A porous layer of thickness t sits on a rigid backing, either directly
or separated from it by an air gap of depth d. Sound arrives at angle φ
to the normal.

The incident wave number is split into components parallel (k_y) and
normal (k_x) to the surface, giving the surface impedance of the layer
on a rigid backing:

    Z_s = -i Z_c (k_c / k_x) cot(k_c t)

With an air gap, the impedance at the top of the gap is transformed
through the porous layer:

    Z = (Z_gap Z_p + Z_c²) / (Z_gap + Z_p)

where Z_p = -i Z_c cot(k_c t). Both impedances are normalised by Z₀,
scaled by cos φ and converted to absorption.

References:
    - Cox & D'Antonio, "Acoustic Absorbers and Diffusers" (2009), chap. 5
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from math import cos, sin

import numpy as np

from porous_absorber.acoustics import (
    absorber_properties,
    complex_abs,
    complex_cot,
    difference_over_sum,
    reflectivity_to_absorption,
    wave_number_in_air,
)
from porous_absorber.config import (
    AirProperties,
    CavityProperties,
    IncidenceAngle,
    PorousLayerProperties,
)

from .base import SERIES_NAMES, DeviceInfo, DeviceType, run_sweep

logger = logging.getLogger(__name__)

MINUS_I = -1j


def calculate_plot_point(
    frequency: float,
    air: AirProperties,
    cavity: CavityProperties,
    porous_layer: PorousLayerProperties,
    angle: IncidenceAngle,
) -> tuple[float, float]:
    """Absorption of a porous absorber at one frequency.

    Args:
        frequency: Frequency in Hz
        air: AirProperties
        cavity: CavityProperties
        porous_layer: PorousLayerProperties
        angle: IncidenceAngle

    Returns:
        (absorption_no_air_gap, absorption_with_air_gap)
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        angle_rad = angle.radians
        sin_phi = sin(angle_rad)
        cos_phi = cos(angle_rad)

        k_air = wave_number_in_air(air, frequency)
        z_abs, wave_no_abs = absorber_properties(air, porous_layer, frequency)

        # Wave number components parallel and normal to the surface
        wave_no_abs_y = k_air * sin_phi
        wave_no_abs_x = np.sqrt(wave_no_abs * wave_no_abs - wave_no_abs_y * wave_no_abs_y)

        # Angle of propagation within the porous layer (degrees)
        beta_porous = np.degrees(np.sin(complex_abs(wave_no_abs_y / wave_no_abs)))

        cot_porous_wave_no = complex_cot(wave_no_abs * porous_layer.thickness)

        z_abs_surface = MINUS_I * z_abs * (wave_no_abs / wave_no_abs_x) * cot_porous_wave_no

        abs_refl = difference_over_sum((z_abs_surface / air.impedance) * cos_phi, 1.0)
        abs_alpha = reflectivity_to_absorption(abs_refl)

        # Wave number components in the air gap
        wave_no_air_y = wave_no_abs * np.sin(np.radians(beta_porous))
        wave_no_air_x = np.sqrt(k_air * k_air - wave_no_air_y * wave_no_air_y)

        # Impedance at the top of the air gap
        air_gap_z = (
            MINUS_I
            * air.impedance
            * (k_air / wave_no_air_x)
            * complex_cot(k_air * cavity.air_gap)
        )

        # Impedance at the top of the porous layer above the air gap
        porous_z = MINUS_I * z_abs * cot_porous_wave_no
        abs_air_z = (air_gap_z * porous_z + z_abs * z_abs) / (air_gap_z + porous_z)

        abs_air_refl = difference_over_sum((abs_air_z / air.impedance) * cos_phi, 1.0)
        abs_air_alpha = reflectivity_to_absorption(abs_air_refl)

    logger.debug(
        "f=%.2f Hz: Z_c=%s k_c=%s Z_s=%s Z_gap=%s alpha=(%.2f, %.2f)",
        frequency, z_abs, wave_no_abs, z_abs_surface, abs_air_z, abs_alpha, abs_air_alpha,
    )

    return abs_alpha, abs_air_alpha


def calculate_plot_points(
    frequencies: Sequence[float],
    air: AirProperties,
    cavity: CavityProperties,
    porous_layer: PorousLayerProperties,
    angle: IncidenceAngle,
) -> DeviceInfo:
    """Absorption curves of a rigid backed porous absorber.

    Args:
        frequencies: Ordered frequencies in Hz
        air: AirProperties
        cavity: CavityProperties
        porous_layer: PorousLayerProperties
        angle: IncidenceAngle

    Returns:
        DeviceInfo with series ("Air Gap", "No Air Gap")
    """
    device_type = DeviceType.RIGID_BACKED_POROUS_ABSORBER
    logger.debug("Calculating %s at %d° incidence", device_type.value, angle.angle)

    def air_gap_first(frequency: float) -> tuple[float, float]:
        no_air_gap, air_gap = calculate_plot_point(
            frequency, air, cavity, porous_layer, angle
        )
        return air_gap, no_air_gap

    series = run_sweep(air_gap_first, frequencies, SERIES_NAMES[device_type])

    return DeviceInfo(
        device_type=device_type,
        series=series,
        cavity=cavity,
        porous_layer=porous_layer,
    )
