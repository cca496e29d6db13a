"""End-to-end tests: trace files -> polynomials -> relation check."""

import json

import pytest

from circuit.circuit_builder import TraceCircuitBuilder
from circuit.errors import ConfigurationError, DecodeError, TraceIOError
from circuit.schema import CircuitSchema
from circuit.trace_reader import write_trace
from primitives.field import FF
from relations import FibonacciRelation, Relation


class IncrementByTen(Relation):
    """W' == W + 10 on populated rows that are not the last.

    C is non-zero on every data row and zero on padding, ISLAST exempts the
    final data row.
    """

    NUM_SUBRELATIONS = 1

    def accumulate(self, evals, row, params, scaling_factor) -> None:
        not_last = FF(1) - row["ISLAST"]
        evals[0] += row["C"] * not_last * (row["W_shift"] - row["W"] - FF(10)) * scaling_factor


@pytest.fixture
def schema() -> CircuitSchema:
    return CircuitSchema(fixed=["C", "ISLAST"], witness=["W"], shifted=["W"], name="increment")


def _write_example(paths, schema: CircuitSchema, w=(10, 20, 30)) -> None:
    rows = [
        {"C": c, "ISLAST": last, "W": v}
        for c, last, v in zip([1, 2, 3], [0, 0, 1], w)
    ]
    write_trace(paths[0], paths[1], schema.fixed, schema.witness, rows)


def _builder(paths, schema, relation=None) -> TraceCircuitBuilder:
    return TraceCircuitBuilder(
        schema, relation, witness_path=paths[0], constants_path=paths[1],
    )


def _ints(poly) -> list[int]:
    return [int(v) for v in poly]


class TestThreeRowExample:
    """C=[1,2,3], W=[10,20,30] shifted, ISLAST=[0,0,1]."""

    def test_build_and_transpose(self, trace_files, schema) -> None:
        _write_example(trace_files, schema)
        builder = _builder(trace_files, schema)

        rows = builder.build_circuit()
        polys = builder.compute_polynomials()

        assert [int(r["W_shift"]) for r in rows] == [20, 30, 0]
        assert builder.get_num_gates() == 3
        assert builder.get_circuit_subgroup_size() == 4
        assert polys.subgroup_size == 4
        assert _ints(polys["W"]) == [10, 20, 30, 0]
        assert _ints(polys["W_shift"]) == [20, 30, 0, 0]
        assert _ints(polys["C"]) == [1, 2, 3, 0]
        assert builder.check_shifts() is None

    def test_relation_passes(self, trace_files, schema) -> None:
        _write_example(trace_files, schema)
        check = _builder(trace_files, schema, IncrementByTen()).check_circuit()
        assert check.passed

    def test_relation_fails_at_bad_row(self, trace_files, schema) -> None:
        _write_example(trace_files, schema, w=(10, 25, 30))
        check = _builder(trace_files, schema, IncrementByTen()).check_circuit()

        assert not check
        assert check.violation.relation == "increment"
        assert check.violation.row_index == 0
        assert check.violation.subrelation_index == 0

    def test_column_counts(self, schema) -> None:
        builder = TraceCircuitBuilder(schema, IncrementByTen())
        assert builder.num_polys == 3
        assert builder.num_columns == 4


class TestFailures:
    """Configuration, I/O and decode failures abort the run."""

    def test_missing_files_raise(self, trace_files, schema) -> None:
        with pytest.raises(TraceIOError):
            _builder(trace_files, schema, IncrementByTen()).check_circuit()

    def test_trace_io_error_is_os_error(self, trace_files, schema) -> None:
        with pytest.raises(OSError):
            _builder(trace_files, schema).build_circuit()

    def test_truncated_witness(self, trace_files, schema) -> None:
        _write_example(trace_files, schema)
        with open(trace_files[0], "ab") as f:
            f.write(b"\x01" * 31)

        with pytest.raises(DecodeError):
            _builder(trace_files, schema, IncrementByTen()).check_circuit()

    def test_missing_marker_before_io(self, trace_files) -> None:
        """Schema errors surface before the trace files are looked at."""
        with pytest.raises(ConfigurationError):
            _builder(trace_files, CircuitSchema(fixed=["C"], witness=["W"]))

    def test_no_relation_configured(self, trace_files, schema) -> None:
        _write_example(trace_files, schema)
        with pytest.raises(ValueError, match="No relation"):
            _builder(trace_files, schema).check_circuit()

    def test_default_paths(self, schema) -> None:
        builder = TraceCircuitBuilder(schema)
        assert str(builder.witness_path) == "../commits.bin"
        assert str(builder.constants_path) == "../constants.bin"


class TestSchemaDrivenRun:
    """Relation selected by name from a JSON schema."""

    def test_fibonacci_from_json(self, tmp_path, trace_files) -> None:
        schema_path = tmp_path / "fib.schema.json"
        schema_path.write_text(json.dumps({
            "name": "fib",
            "relation": "fibonacci",
            "fixed": ["fib.FIRST", "fib.ISLAST"],
            "witness": ["fib.a", "fib.b"],
            "shifted": ["fib.a", "fib.b"],
        }))
        schema = CircuitSchema.from_json(str(schema_path))

        n = 10
        rows, a, b = [], 1, 1
        for i in range(n):
            rows.append({
                "fib_FIRST": int(i == 0), "fib_ISLAST": int(i == n - 1),
                "fib_a": a, "fib_b": b,
            })
            a, b = b, a + b
        write_trace(trace_files[0], trace_files[1], schema.fixed, schema.witness, rows)

        builder = TraceCircuitBuilder(
            schema, witness_path=trace_files[0], constants_path=trace_files[1],
            prefix="fib_",
        )

        assert isinstance(builder.relation, FibonacciRelation)
        assert builder.check_circuit()
        assert builder.get_num_gates() == 10
        assert builder.get_circuit_subgroup_size() == 16
