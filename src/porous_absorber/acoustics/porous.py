"""Porous absorber properties using the Delany-Bazley model.

The Delany-Bazley empirical power-law fit describes a fibrous absorber
by a single parameter, its static flow resistivity σ. From the
normalised frequency parameter

    X = ρ₀ f / σ

the characteristic impedance and propagation wave number are:

    Z_c = Z₀ [1 + 0.0571 X^-0.754 - i 0.087 X^-0.732]
    k_c = k₀ [1 + 0.0978 X^-0.7   - i 0.189 X^-0.595]

where Z₀ = ρ₀c₀ and k₀ = 2πf/c₀ are the impedance and wave number of
air. The constants are curve-fit values and must not be altered.

References:
    - Delany & Bazley, "Acoustical properties of fibrous absorbent
      materials", Applied Acoustics 3 (1970)
    - Cox & D'Antonio, "Acoustic Absorbers and Diffusers" (2009)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .maths import wave_number_in_air

if TYPE_CHECKING:
    from porous_absorber.config import AirProperties, PorousLayerProperties

# Characteristic impedance fit
_Z_REAL_COEFF = 0.0571
_Z_REAL_EXP = -0.754
_Z_IMAG_COEFF = -0.087
_Z_IMAG_EXP = -0.732

# Propagation wave number fit
_K_REAL_COEFF = 0.0978
_K_REAL_EXP = -0.7
_K_IMAG_COEFF = -0.189
_K_IMAG_EXP = -0.595


def delany_bazley_x(density: float, frequency: float, sigma: float) -> float:
    """Normalised frequency parameter X = ρ₀f/σ."""
    return (density * frequency) / sigma


def absorber_properties(
    air: AirProperties, porous_layer: PorousLayerProperties, frequency: float
) -> tuple[np.complex128, np.complex128]:
    """Characteristic impedance and wave number of a porous layer.

    Args:
        air: AirProperties
        porous_layer: PorousLayerProperties (uses flow resistivity only)
        frequency: Frequency in Hz

    Returns:
        (characteristic_impedance, propagation_wave_number)
    """
    # numpy powers give inf/nan for a non-positive frequency instead of raising
    x = np.float64(delany_bazley_x(air.density, frequency, porous_layer.sigma))

    with np.errstate(divide="ignore", invalid="ignore"):
        z_abs = air.impedance * np.complex128(
            complex(
                1.0 + _Z_REAL_COEFF * x**_Z_REAL_EXP,
                _Z_IMAG_COEFF * x**_Z_IMAG_EXP,
            )
        )

        k_abs = wave_number_in_air(air, frequency) * np.complex128(
            complex(
                1.0 + _K_REAL_COEFF * x**_K_REAL_EXP,
                _K_IMAG_COEFF * x**_K_IMAG_EXP,
            )
        )

    return z_abs, k_abs
