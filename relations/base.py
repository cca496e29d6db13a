"""Base classes for relation evaluation.

A relation is a fixed set of polynomial identities ("subrelations") that must
vanish at every row of a valid trace. Relations see one row at a time: the
value of every column, including '<col>_shift' next-row values, at a single
domain index.

Example:
    class Increment(Relation):
        NUM_SUBRELATIONS = 1

        def accumulate(self, evals, row, params, scaling_factor):
            not_last = FF(1) - row['ISLAST']
            evals[0] += not_last * (row['x_shift'] - row['x'] - FF(1)) * scaling_factor
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping

from primitives.field import FF, FFPoly

RowValues = Mapping[str, FF]


@dataclass
class RelationParameters:
    """Auxiliary values some relations need beyond the row (e.g. permutation challenges).

    The trace checker always passes an empty instance.

    Attributes:
        challenges: Named challenge values
    """
    challenges: dict[str, FF] = field(default_factory=dict)


class Relation(ABC):
    """Per-circuit relation. One subclass per known relation variant."""

    NUM_SUBRELATIONS: int = 1
    """Number of independent identities; fixes the accumulator length."""

    name: str = ""

    def __init__(self, prefix: str = ""):
        # Generated column names carry the circuit namespace (fib.a -> fib_a)
        self.prefix = prefix

    def col(self, row: RowValues, name: str) -> FF:
        """Value of a (possibly namespaced) column in this row."""
        return row[f"{self.prefix}{name}"]

    @abstractmethod
    def accumulate(
        self,
        evals: FFPoly,
        row: RowValues,
        params: RelationParameters,
        scaling_factor: FF,
    ) -> None:
        """Add each subrelation's value at this row, times scaling_factor, into evals.

        Args:
            evals: Accumulator of length NUM_SUBRELATIONS, updated in place
            row: Column values at one domain index
            params: Auxiliary parameters
            scaling_factor: Weight applied to every contribution
        """
        pass

    def new_accumulator(self) -> FFPoly:
        """Zeroed accumulator with one entry per subrelation."""
        return FF.Zeros(self.NUM_SUBRELATIONS)

    @property
    def relation_name(self) -> str:
        return self.name or type(self).__name__
