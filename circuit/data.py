"""Data structures passed through the trace pipeline.

Architecture Overview:
    1. Row (row-major)
       - One execution step: a value per fixed/witness column plus a
         '<col>_shift' slot per shifted column
       - Produced by trace_reader, completed by shifts, frozen on transposition

    2. PolynomialSet (column-major)
       - One FF array per column, padded with zeros to the subgroup size
       - Consumed read-only by the relation evaluator
"""

from dataclasses import dataclass, field

from primitives.field import FF, FFPoly


@dataclass
class Row:
    """Column values for one trace row, keyed by column name."""
    values: dict[str, FF] = field(default_factory=dict)
    frozen: bool = False

    def __getitem__(self, name: str) -> FF:
        return self.values[name]

    def __setitem__(self, name: str, value) -> None:
        if self.frozen:
            raise AttributeError(f"Row is frozen; cannot set column '{name}'")
        self.values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def freeze(self) -> None:
        self.frozen = True


@dataclass
class PolynomialSet:
    """Column polynomials over the padded trace domain.

    Attributes:
        polynomials: FF array per column name, all of length subgroup_size
        num_rows: Number of trace rows before padding
        subgroup_size: Power-of-two polynomial length
    """
    polynomials: dict[str, FFPoly] = field(default_factory=dict)
    num_rows: int = 0
    subgroup_size: int = 0

    def __getitem__(self, name: str) -> FFPoly:
        return self.polynomials[name]

    def __contains__(self, name: str) -> bool:
        return name in self.polynomials

    def __len__(self) -> int:
        return len(self.polynomials)

    @property
    def names(self) -> list[str]:
        return list(self.polynomials)

    def get_row(self, index: int) -> dict[str, FF]:
        """All column values at one domain index (data or padding row)."""
        return {name: poly[index] for name, poly in self.polynomials.items()}
