"""Primitives - field arithmetic, encoding and polynomial building blocks."""

from primitives.field import (
    BN254_SCALAR_PRIME,
    FF,
    FFPoly,
    ff,
    is_zero,
)
from primitives.polynomial import (
    get_circuit_subgroup_size,
    next_pow2,
    shift_polynomial,
    zero_polynomial,
)

__all__ = [
    # Field
    "FF",
    "FFPoly",
    "BN254_SCALAR_PRIME",
    "ff",
    "is_zero",
    # Polynomials
    "get_circuit_subgroup_size",
    "next_pow2",
    "shift_polynomial",
    "zero_polynomial",
]
