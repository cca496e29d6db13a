"""Polynomial helpers over the trace domain.

Polynomials are stored in evaluation form over a power-of-two subgroup: index i
holds the column value at row i, zero past the last trace row.
"""

import numpy as np

from primitives.field import FF, FFPoly


def _msb(n: int) -> int:
    """Index of the most significant set bit of n (n > 0)."""
    return n.bit_length() - 1


def get_circuit_subgroup_size(num_rows: int) -> int:
    """Smallest power of two >= num_rows.

    Unchanged when num_rows is already a power of two. An empty or single-row
    trace lives on the trivial subgroup of size 1.
    """
    if num_rows <= 1:
        return 1
    log2 = _msb(num_rows)
    return 1 << (log2 + (0 if (1 << log2) == num_rows else 1))


next_pow2 = get_circuit_subgroup_size


def zero_polynomial(size: int) -> FFPoly:
    return FF.Zeros(size)


def shift_polynomial(poly: FFPoly) -> FFPoly:
    """Left shift by one row: out[i] = poly[i+1], last entry zero.

    Matches the "next row" view used by copy/permutation constraints. Unlike
    np.roll the first value does not wrap around to the end.
    """
    out = FF.Zeros(len(poly))
    if len(poly) > 1:
        out[:-1] = poly[1:]
    return out


def polynomials_equal(a: FFPoly, b: FFPoly) -> bool:
    return len(a) == len(b) and bool(np.array_equal(a, b))
