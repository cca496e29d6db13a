"""PLONK-style arithmetic gate.

Columns:
    fixed:   q_m, q_l, q_r, q_o, q_c selectors (and the ISLAST marker)
    witness: w_l, w_r, w_o

Single identity per row:

    q_m * w_l * w_r + q_l * w_l + q_r * w_r + q_o * w_o + q_c = 0

There are no shifts; zero padding rows satisfy it trivially.
"""

from primitives.field import FF, FFPoly
from .base import Relation, RelationParameters, RowValues


class ArithmeticRelation(Relation):
    NUM_SUBRELATIONS = 1
    name = "arithmetic"

    def accumulate(
        self,
        evals: FFPoly,
        row: RowValues,
        params: RelationParameters,
        scaling_factor: FF,
    ) -> None:
        w_l = self.col(row, "w_l")
        w_r = self.col(row, "w_r")
        w_o = self.col(row, "w_o")

        gate = (
            self.col(row, "q_m") * w_l * w_r
            + self.col(row, "q_l") * w_l
            + self.col(row, "q_r") * w_r
            + self.col(row, "q_o") * w_o
            + self.col(row, "q_c")
        )
        evals[0] += gate * scaling_factor
