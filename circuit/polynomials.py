"""Row-major trace -> column-major polynomials over the padded subgroup."""

import logging
from typing import Optional, Sequence

from primitives.field import is_zero
from primitives.polynomial import (
    get_circuit_subgroup_size,
    polynomials_equal,
    shift_polynomial,
    zero_polynomial,
)
from circuit.data import PolynomialSet, Row
from circuit.schema import CircuitSchema, shift_name

logger = logging.getLogger(__name__)


def compute_polynomials(rows: list[Row], schema: CircuitSchema) -> PolynomialSet:
    """Transpose rows into one zero-padded polynomial per column.

    Fixed and witness columns are copied from the rows. Each shift polynomial
    is the shifted view of its base polynomial; after transposition the rows
    are frozen.

    Args:
        rows: Trace with shifts built
        schema: Column names

    Returns:
        PolynomialSet with fixed, witness and shift polynomials of length
        get_circuit_subgroup_size(len(rows))
    """
    num_rows = len(rows)
    subgroup_size = get_circuit_subgroup_size(num_rows)

    polys = PolynomialSet(num_rows=num_rows, subgroup_size=subgroup_size)

    # Allocate mem for each column
    for name in schema.base_columns:
        polys.polynomials[name] = zero_polynomial(subgroup_size)

    for i, row in enumerate(rows):
        for name in schema.base_columns:
            polys.polynomials[name][i] = row[name]

    for name in schema.shifted:
        polys.polynomials[shift_name(name)] = shift_polynomial(polys.polynomials[name])

    for row in rows:
        row.freeze()

    logger.info(
        "Computed %d polynomials: %d rows padded to subgroup size %d",
        len(polys), num_rows, subgroup_size,
    )
    return polys


def check_shift_consistency(
    rows: list[Row],
    polys: PolynomialSet,
    shifted: Sequence[str],
) -> Optional[tuple[str, int]]:
    """Compare row shift values against the shift polynomials.

    Returns:
        (column, index) of the first disagreement, or None if both agree
        on every data row and the padding is zero
    """
    for name in shifted:
        key = shift_name(name)
        poly = polys[key]
        for i, row in enumerate(rows):
            if int(poly[i]) != int(row[key]):
                return key, i
        padding = poly[len(rows):]
        if not polynomials_equal(padding, zero_polynomial(len(padding))):
            offset = next(i for i, v in enumerate(padding) if not is_zero(v))
            return key, len(rows) + offset
    return None
