"""Microperforated panel absorber (Maa).

A thin panel with sub-millimetre holes in front of an air gap. The holes
are small enough for viscous losses inside them to provide the
resistance, so no porous layer is needed. The impedance of the air in
one hole is (Maa, eq. 6.36):

    Z₁ = i ω ρ t / (1 - 2 J₁(k'√-i) / (k'√-i J₀(k'√-i)))

where k' = r √(ρ ω / η). The total surface impedance adds the air gap
reactance, a surface resistance and an end correction:

    Z = (Z₁/ε - i Z₀ cot(k₀ d) + √(2ωρη)/(2ε) + 1.7 i ω ρ r/ε) cos φ

References:
    - Maa, "Potential of microperforated panel absorber",
      J. Acoust. Soc. Am. 104 (1998)
    - Cox & D'Antonio, "Acoustic Absorbers and Diffusers" (2009), chap. 6
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from porous_absorber.acoustics import (
    angular_frequency,
    bessel_j,
    complex_cot,
    difference_over_sum,
    reflectivity_to_absorption,
    wave_number_in_air,
)
from porous_absorber.config import (
    AIR_VISCOSITY,
    AirProperties,
    CavityProperties,
    IncidenceAngle,
    MicroperforatedPanel,
)

from .base import SERIES_NAMES, DeviceInfo, DeviceType, run_sweep

logger = logging.getLogger(__name__)

I = 1j
MINUS_I = -1j
SQRT_MINUS_I = np.sqrt(np.complex128(MINUS_I))

# Reactive end correction factor for the holes
END_CORRECTION = 1.7


def calculate_plot_point(
    frequency: float,
    air: AirProperties,
    cavity: CavityProperties,
    panel: MicroperforatedPanel,
    cos_angle: float,
) -> float:
    """Absorption of a microperforated panel absorber at one frequency.

    Args:
        frequency: Frequency in Hz
        air: AirProperties
        cavity: CavityProperties
        panel: MicroperforatedPanel
        cos_angle: Cosine of the angle of incidence

    Returns:
        Absorption coefficient
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        k_air = wave_number_in_air(air, frequency)
        omega = np.float64(angular_frequency(frequency))

        k_prime = panel.hole_radius * np.sqrt(air.density_over_viscosity * omega)
        bessel_arg = k_prime * SQRT_MINUS_I

        bessel_j0 = np.complex128(bessel_j(0, bessel_arg))
        bessel_j1 = np.complex128(bessel_j(1, bessel_arg))

        panel_z = (I * omega * air.density * panel.thickness) / (
            1.0 - (2.0 * bessel_j1) / (bessel_arg * bessel_j0)
        )

        air_gap_z = MINUS_I * air.impedance * complex_cot(k_air * cavity.air_gap)

        resistance = np.sqrt(2.0 * omega * air.density * AIR_VISCOSITY) / (2.0 * panel.porosity)
        end_reactance = (
            END_CORRECTION * I * omega * air.density * panel.hole_radius
        ) / panel.porosity

        overall_z = (panel_z / panel.porosity + air_gap_z + resistance + end_reactance) * cos_angle

        alpha = reflectivity_to_absorption(difference_over_sum(overall_z, air.impedance))

    logger.debug(
        "f=%.2f Hz: k'=%s J0=%s J1=%s Z=%s alpha=%.2f",
        frequency,
        k_prime,
        bessel_j0,
        bessel_j1,
        overall_z,
        alpha,
    )

    return alpha


def calculate_plot_points(
    frequencies: Sequence[float],
    air: AirProperties,
    cavity: CavityProperties,
    panel: MicroperforatedPanel,
    angle: IncidenceAngle,
) -> DeviceInfo:
    """Absorption curve of a microperforated panel absorber.

    Args:
        frequencies: Ordered frequencies in Hz
        air: AirProperties
        cavity: CavityProperties
        panel: MicroperforatedPanel
        angle: IncidenceAngle

    Returns:
        DeviceInfo with the single series "Microperforated Panel"
    """
    device_type = DeviceType.MICROPERFORATED_PANEL_ABSORBER
    cos_angle = angle.cos_angle

    series = run_sweep(
        lambda frequency: (calculate_plot_point(frequency, air, cavity, panel, cos_angle),),
        frequencies,
        SERIES_NAMES[device_type],
    )

    return DeviceInfo(device_type=device_type, series=series, cavity=cavity, panel=panel)
