"""Numeric core: complex primitives, Bessel series, porous material model."""

from porous_absorber.acoustics.bessel import bessel_j
from porous_absorber.acoustics.maths import (
    angular_frequency,
    complex_abs,
    complex_cot,
    difference_over_sum,
    reflectivity_to_absorption,
    wave_number_in_air,
)
from porous_absorber.acoustics.porous import absorber_properties, delany_bazley_x

__all__ = [
    "absorber_properties",
    "angular_frequency",
    "bessel_j",
    "complex_abs",
    "complex_cot",
    "delany_bazley_x",
    "difference_over_sum",
    "reflectivity_to_absorption",
    "wave_number_in_air",
]
