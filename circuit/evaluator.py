"""Check a relation against every row of the padded trace domain.

Fail-fast: the first non-zero subrelation stops the check, and only that
(row, subrelation) pair is reported.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from primitives.field import FF, is_zero
from circuit.data import PolynomialSet
from relations.base import Relation, RelationParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstraintViolation:
    """First failing identity found by the evaluator."""
    relation: str
    row_index: int
    subrelation_index: int

    def __str__(self) -> str:
        return (
            f"Relation {self.relation}, subrelation index {self.subrelation_index} "
            f"failed at row {self.row_index}"
        )


@dataclass(frozen=True)
class RelationCheck:
    """Outcome of checking one relation. Truthy iff the check passed."""
    passed: bool
    violation: Optional[ConstraintViolation] = None

    def __bool__(self) -> bool:
        return self.passed


def evaluate_relation(
    polys: PolynomialSet,
    relation: Relation,
    name: Optional[str] = None,
) -> RelationCheck:
    """Evaluate a relation at every index of the subgroup, padding included.

    Each index gets a fresh zero accumulator, empty RelationParameters and a
    unit scaling factor.

    Args:
        polys: Column polynomials; read only
        relation: Relation to check
        name: Name used in diagnostics (defaults to the relation's name)

    Returns:
        RelationCheck, carrying the first ConstraintViolation on failure
    """
    relation_name = name or relation.relation_name
    params = RelationParameters()
    scaling_factor = FF(1)

    for i in range(polys.subgroup_size):
        result = relation.new_accumulator()
        relation.accumulate(result, polys.get_row(i), params, scaling_factor)

        for j in range(relation.NUM_SUBRELATIONS):
            if not is_zero(result[j]):
                violation = ConstraintViolation(relation_name, i, j)
                logger.error("%s", violation)
                return RelationCheck(passed=False, violation=violation)

    logger.info("Relation %s holds on all %d rows", relation_name, polys.subgroup_size)
    return RelationCheck(passed=True)


def evaluate_relations(
    polys: PolynomialSet,
    relations: Iterable[Relation],
) -> RelationCheck:
    """Check several relations in order, stopping at the first failure."""
    for relation in relations:
        check = evaluate_relation(polys, relation)
        if not check:
            return check
    return RelationCheck(passed=True)
