"""Relation with no constraints; every trace satisfies it."""

from primitives.field import FF, FFPoly
from .base import Relation, RelationParameters, RowValues


class ZeroRelation(Relation):
    """Adds nothing to the accumulator. Useful to exercise the trace pipeline alone."""

    NUM_SUBRELATIONS = 1
    name = "zero"

    def accumulate(
        self,
        evals: FFPoly,
        row: RowValues,
        params: RelationParameters,
        scaling_factor: FF,
    ) -> None:
        pass
