"""Next-row ("shift") values for copy and permutation constraints."""

from typing import Sequence

from circuit.data import Row
from circuit.schema import shift_name


def build_shifts(rows: list[Row], shifted: Sequence[str]) -> list[Row]:
    """Fill '<col>_shift' on every row with the next row's '<col>' value.

    The last row keeps its zero shift values; nothing wraps to row 0.
    Rows are updated in place and also returned.
    """
    for i in range(1, len(rows)):
        row = rows[i - 1]
        for name in shifted:
            row[shift_name(name)] = rows[i][name]
    return rows
