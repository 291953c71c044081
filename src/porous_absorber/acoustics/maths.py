"""Complex arithmetic shared by every absorber calculation.

Impedances are turned into reflection coefficients with a difference
over sum, and reflection coefficients into absorption coefficients.
Layer transforms use the complex cotangent of (wave number × thickness).

All functions operate on numpy scalars so that a resonance singularity
(sin(kd) = 0, a zero impedance sum) yields inf/nan instead of raising
``ZeroDivisionError`` as plain Python ``complex`` would.

Example:
    >>> from porous_absorber.acoustics import maths
    >>> maths.reflectivity_to_absorption(maths.difference_over_sum(800 + 50j, 413.6))
    0.9
"""

from __future__ import annotations

from math import pi
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from porous_absorber.config import AirProperties

TWO_PI = 2.0 * pi

# Absorption is reported at the chart's display resolution
ABSORPTION_DECIMALS = 2
_ABSORPTION_SCALE = 10**ABSORPTION_DECIMALS


def complex_abs(z: complex) -> float:
    """Magnitude of a complex number as √(re² + im²)."""
    z = np.complex128(z)
    return float(np.sqrt(z.real * z.real + z.imag * z.imag))


def difference_over_sum(a: complex, b: float) -> np.complex128:
    """Reflection coefficient (a - b) / (a + b).

    Args:
        a: Surface impedance (or impedance ratio)
        b: Reference impedance

    Returns:
        Complex reflection coefficient. A zero denominator is not
        guarded and produces inf/nan.
    """
    a = np.complex128(a)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (a - b) / (a + b)


def reflectivity_to_absorption(reflectivity: complex) -> float:
    """Convert a reflection coefficient into an absorption coefficient.

    α = 1 - |r|², clamped to 0 when numerical overshoot makes it
    negative, otherwise rounded to two decimal places (halves away
    from zero).

    Args:
        reflectivity: Complex reflection coefficient

    Returns:
        Absorption coefficient in [0, 1], or nan if r is nan
    """
    magnitude = complex_abs(reflectivity)
    alpha = 1.0 - magnitude**2

    if alpha < 0.0:
        return 0.0

    return float(np.floor(alpha * _ABSORPTION_SCALE + 0.5) / _ABSORPTION_SCALE)


def complex_cot(z: complex | float) -> np.complex128 | np.float64:
    """Cotangent cos(z)/sin(z) of a real or complex argument.

    sin(z) = 0 corresponds to a quarter/half-wave resonance of the layer
    and produces inf/nan rather than an exception.
    """
    z = np.asarray(z)[()]
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.cos(z) / np.sin(z)


def wave_number_in_air(air: AirProperties, frequency: float) -> float:
    """Wave number k₀ = 2πf/c in air."""
    return air.two_pi_over_c * frequency


def angular_frequency(frequency: float) -> float:
    """Angular frequency ω = 2πf in rad/s."""
    return TWO_PI * frequency
