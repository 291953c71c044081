"""Bessel function of the first kind for complex arguments.

The microperforated panel model (Maa) needs J₀ and J₁ of a complex
argument k'·√(-i). These are evaluated from the ascending power series
(Abramowitz & Stegun, eq. 9.1.10):

    J_n(z) = (z/2)^n · Σ_k (-1)^k (z/2)^{2k} / (k! (n+k)!)

Each term is built from its predecessor:

    term_k = term_{k-1} · (z/2)² / (k (n + k))

Summation stops once a term is negligible relative to the zeroth term,
or after MAX_TERMS iterations.

References:
    - Abramowitz & Stegun, "Handbook of Mathematical Functions" (1964),
      chap. 9, p. 360
"""

from __future__ import annotations

from math import factorial, sqrt

# Relative size of the newest term at which the series is truncated
BESSEL_TOLERANCE = 1e-9

# Result components smaller than this are snapped to zero
BESSEL_PRECISION = 1e-12

MAX_TERMS = 300


def _magnitude(z: complex) -> float:
    return sqrt(z.real * z.real + z.imag * z.imag)


def bessel_j(order: int, z: complex) -> complex:
    """Bessel function of the first kind J_order(z).

    Args:
        order: Non-negative integer order
        z: Complex argument

    Returns:
        J_order(z). Components below BESSEL_PRECISION are returned as 0.0.
        J₀(0) returns 0 (see DESIGN.md); no caller evaluates it.

    Raises:
        ValueError: If order is negative

    Example:
        >>> bessel_j(1, 2 + 0j)
        (0.5767248077568...+0j)
    """
    if order < 0:
        raise ValueError("order must be non-negative")

    z = complex(z)

    if order == 0 and z == 0:
        return 0j

    z_over_2 = z / 2.0
    z_over_2_squared = z_over_2 * z_over_2

    # Zeroth term 1/n! without the common factor (z/2)^n
    term0 = 1.0 / factorial(order)
    term = complex(term0)
    total = complex(term0)
    sign = 1.0

    for k in range(1, MAX_TERMS):
        term = term * z_over_2_squared / (k * (order + k))
        sign = -sign
        total += sign * term

        if _magnitude(term) / term0 < BESSEL_TOLERANCE:
            break

    result = total * z_over_2**order

    real = 0.0 if abs(result.real) < BESSEL_PRECISION else result.real
    imag = 0.0 if abs(result.imag) < BESSEL_PRECISION else result.imag

    return complex(real, imag)
