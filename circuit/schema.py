"""Column schema produced by the external circuit generator.

The schema fixes the order of columns in both trace files; there is no in-band
framing, so schema and files must come from the same generator run.

Example schema.json:
    {
        "name": "fib",
        "relation": "fibonacci",
        "fixed": ["fib.FIRST", "fib.ISLAST"],
        "witness": ["fib.a", "fib.b"],
        "shifted": ["fib.a", "fib.b"]
    }
"""

import json
from dataclasses import dataclass, field
from typing import Optional

from circuit.errors import ConfigurationError

MARKER_COLUMN_TAG = "ISLAST"
SHIFT_SUFFIX = "_shift"


def column_name(name: str) -> str:
    """Normalise a generator column name into an identifier (main.pc -> main_pc)."""
    return name.replace(".", "_")


def shift_name(name: str) -> str:
    return f"{name}{SHIFT_SUFFIX}"


def _check_unique(names: list[str], what: str) -> None:
    seen = set()
    for name in names:
        if name in seen:
            raise ConfigurationError(f"Duplicate {what} column '{name}'")
        seen.add(name)


@dataclass
class CircuitSchema:
    """Ordered fixed/witness/shifted column names for one circuit.

    Attributes:
        fixed: Constant (preprocessed) columns, in constants-file order
        witness: Committed columns, in witness-file order
        shifted: Columns that need a next-row companion '<name>_shift'
        name: Circuit name, used in diagnostics
        relation: Registry name of the relation this circuit is checked against
    """
    fixed: list[str] = field(default_factory=list)
    witness: list[str] = field(default_factory=list)
    shifted: list[str] = field(default_factory=list)
    name: str = ""
    relation: Optional[str] = None

    def __post_init__(self) -> None:
        self.fixed = [column_name(n) for n in self.fixed]
        self.witness = [column_name(n) for n in self.witness]
        self.shifted = [column_name(n) for n in self.shifted]
        self.validate()

    @classmethod
    def from_json(cls, path: str) -> "CircuitSchema":
        """Load a CircuitSchema from a schema JSON file."""
        with open(path) as f:
            j = json.load(f)
        return cls.from_dict(j)

    @classmethod
    def from_dict(cls, j: dict) -> "CircuitSchema":
        return cls(
            fixed=list(j.get("fixed", [])),
            witness=list(j.get("witness", [])),
            shifted=list(j.get("shifted", [])),
            name=j.get("name", ""),
            relation=j.get("relation"),
        )

    def validate(self) -> None:
        """Check schema invariants. Runs before any trace file is touched.

        Raises:
            ConfigurationError: On duplicate names, an unknown shifted column,
                a missing marker column or an empty witness list
        """
        _check_unique(self.fixed + self.witness, "trace")
        _check_unique(self.shifted, "shifted")

        known = set(self.fixed) | set(self.witness)
        for name in self.shifted:
            if name not in known:
                raise ConfigurationError(
                    f"Shifted column '{name}' is not a fixed or witness column"
                )

        if self.marker_column is None:
            raise ConfigurationError(
                f"{MARKER_COLUMN_TAG} column not found in fixed columns {self.fixed}"
            )

        # End of trace is detected on the witness stream only
        if not self.witness:
            raise ConfigurationError("Schema declares no witness columns")

    @property
    def marker_column(self) -> Optional[str]:
        """Name of the end-of-trace flag column, if present."""
        return next((n for n in self.fixed if MARKER_COLUMN_TAG in n), None)

    @property
    def base_columns(self) -> list[str]:
        return self.fixed + self.witness

    @property
    def shift_columns(self) -> list[str]:
        return [shift_name(n) for n in self.shifted]

    @property
    def all_columns(self) -> list[str]:
        """Every polynomial name: fixed, witness, then shifts."""
        return self.base_columns + self.shift_columns
