"""Fibonacci VM relation.

Columns:
    fixed:   FIRST (1 on row 0), ISLAST (1 on the last real row)
    witness: a, b  (both shifted)

Each step moves the pair (a, b) to (b, a + b):

    0: (1 - ISLAST) * (a' - b)           = 0
    1: (1 - ISLAST) * (b' - (a + b))     = 0
    2: FIRST * (a - 1)                   = 0
    3: FIRST * (b - 1)                   = 0

where x' is the next-row value x_shift. Zero padding rows satisfy every
identity; the last real row is exempted by ISLAST since its shifts are zero.
"""

from primitives.field import FF, FFPoly
from .base import Relation, RelationParameters, RowValues


class FibonacciRelation(Relation):
    NUM_SUBRELATIONS = 4
    name = "fibonacci"

    def accumulate(
        self,
        evals: FFPoly,
        row: RowValues,
        params: RelationParameters,
        scaling_factor: FF,
    ) -> None:
        one = FF(1)
        first = self.col(row, 'FIRST')
        not_last = one - self.col(row, 'ISLAST')
        a = self.col(row, 'a')
        b = self.col(row, 'b')
        a_shift = self.col(row, 'a_shift')
        b_shift = self.col(row, 'b_shift')

        evals[0] += not_last * (a_shift - b) * scaling_factor
        evals[1] += not_last * (b_shift - (a + b)) * scaling_factor
        evals[2] += first * (a - one) * scaling_factor
        evals[3] += first * (b - one) * scaling_factor
