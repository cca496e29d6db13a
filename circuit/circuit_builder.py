"""Trace circuit builder: owns one verification run.

Example:
    schema = CircuitSchema.from_json("fib.schema.json")
    builder = TraceCircuitBuilder(schema, witness_path="commits.bin",
                                  constants_path="constants.bin")
    assert builder.check_circuit()
"""

import logging
from pathlib import Path
from typing import Optional, Union

from circuit.data import PolynomialSet, Row
from circuit.errors import TraceIOError
from circuit.evaluator import RelationCheck, evaluate_relation
from circuit.polynomials import check_shift_consistency, compute_polynomials
from circuit.schema import CircuitSchema
from circuit.shifts import build_shifts
from circuit.trace_reader import read_trace
from primitives.polynomial import get_circuit_subgroup_size
from relations import Relation, get_relation

logger = logging.getLogger(__name__)

DEFAULT_WITNESS_PATH = "../commits.bin"
DEFAULT_CONSTANTS_PATH = "../constants.bin"


class TraceCircuitBuilder:
    """Reads a trace, transposes it and checks it against one relation.

    Attributes:
        schema: Column schema (validated on construction)
        relation: Relation the trace is checked against
        rows: Trace rows, filled by build_circuit()
        polynomials: PolynomialSet, filled by compute_polynomials()
    """

    def __init__(
        self,
        schema: CircuitSchema,
        relation: Optional[Relation] = None,
        witness_path: Union[str, Path] = DEFAULT_WITNESS_PATH,
        constants_path: Union[str, Path] = DEFAULT_CONSTANTS_PATH,
        prefix: str = "",
    ):
        self.schema = schema
        if relation is None and schema.relation is not None:
            relation = get_relation(schema.relation, prefix=prefix)
        self.relation = relation
        self.witness_path = witness_path
        self.constants_path = constants_path

        self.rows: list[Row] = []
        self.polynomials: Optional[PolynomialSet] = None

    @property
    def num_polys(self) -> int:
        """Fixed plus witness columns."""
        return len(self.schema.base_columns)

    @property
    def num_columns(self) -> int:
        """All polynomials, shifts included."""
        return len(self.schema.all_columns)

    def build_circuit(self) -> list[Row]:
        """Read the trace files and build shifts.

        Raises:
            TraceIOError: If no rows could be read
            DecodeError: If a trace file ends mid-encoding
        """
        rows = read_trace(
            self.witness_path,
            self.constants_path,
            self.schema.fixed,
            self.schema.witness,
            self.schema.shifted,
        )
        if not rows:
            raise TraceIOError(
                f"No trace rows read from {self.witness_path} and {self.constants_path}"
            )

        self.rows = build_shifts(rows, self.schema.shifted)
        self.polynomials = None
        return self.rows

    def compute_polynomials(self) -> PolynomialSet:
        self.polynomials = compute_polynomials(self.rows, self.schema)
        return self.polynomials

    def check_shifts(self) -> Optional[tuple[str, int]]:
        """First (column, index) where row shifts and shift polynomials differ."""
        if self.polynomials is None:
            self.compute_polynomials()
        return check_shift_consistency(self.rows, self.polynomials, self.schema.shifted)

    def check_circuit(self) -> RelationCheck:
        """Build the circuit from file and check the relation on every row.

        Returns:
            RelationCheck; falsy with the first violation on failure

        Raises:
            ValueError: If no relation was configured
        """
        if self.relation is None:
            raise ValueError(
                f"No relation configured for circuit '{self.schema.name}'"
            )

        self.build_circuit()
        polys = self.compute_polynomials()
        name = self.schema.name or self.relation.relation_name
        return evaluate_relation(polys, self.relation, name)

    def get_num_gates(self) -> int:
        """Number of trace rows before padding."""
        return len(self.rows)

    def get_circuit_subgroup_size(self) -> int:
        return get_circuit_subgroup_size(self.get_num_gates())
