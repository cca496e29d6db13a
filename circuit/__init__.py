"""Circuit - trace reading, transposition and relation checking."""

from circuit.circuit_builder import TraceCircuitBuilder
from circuit.data import PolynomialSet, Row
from circuit.errors import (
    ConfigurationError,
    DecodeError,
    TraceCheckError,
    TraceIOError,
)
from circuit.evaluator import (
    ConstraintViolation,
    RelationCheck,
    evaluate_relation,
    evaluate_relations,
)
from circuit.polynomials import check_shift_consistency, compute_polynomials
from circuit.schema import CircuitSchema, column_name, shift_name
from circuit.shifts import build_shifts
from circuit.trace_reader import read_trace, write_trace

__all__ = [
    # Aggregate
    "TraceCircuitBuilder",
    # Data
    "Row",
    "PolynomialSet",
    "CircuitSchema",
    "column_name",
    "shift_name",
    # Errors
    "TraceCheckError",
    "ConfigurationError",
    "TraceIOError",
    "DecodeError",
    # Pipeline
    "read_trace",
    "write_trace",
    "build_shifts",
    "compute_polynomials",
    "check_shift_consistency",
    "evaluate_relation",
    "evaluate_relations",
    "ConstraintViolation",
    "RelationCheck",
]
