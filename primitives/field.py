"""BN254 scalar field GF(r).

Uses galois library for all field arithmetic. FF is the field type; a single
field characteristic is supported.

galois normally searches for a primitive root on construction, which requires
factoring r - 1. The generator of the BN254 scalar field's multiplicative group
is 5, so it is passed in directly and verification is skipped.
"""

import galois

# --- Field Construction ---

BN254_SCALAR_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617
BN254_MULTIPLICATIVE_GENERATOR = 5

FF = galois.GF(
    BN254_SCALAR_PRIME,
    primitive_element=BN254_MULTIPLICATIVE_GENERATOR,
    verify=False,
)
"""Base field GF(r) - BN254 scalar field."""

# Type alias for clarity
FFPoly = FF  # Array of field elements


def ff(value: int) -> FF:
    """Construct a field element from any Python int, reducing modulo r."""
    return FF(value % BN254_SCALAR_PRIME)


def is_zero(value) -> bool:
    """True iff a field scalar is the additive identity."""
    return int(value) == 0
