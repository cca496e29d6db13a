"""Read a trace from its witness and constants files.

Both files are header-less concatenations of 32-byte field encodings, one per
column per row, in schema order. Rows are read in lockstep: the constants
values of a row come from the constants file, the witness values from the
witness file.

End of trace is only noticed while reading the witness file, inside an extra
loop iteration past the last real row. That extra row is always dropped, so
exactly one trailing row is removed after the loop; never more, never fewer.

Caveat: the two files are never checked for matching row counts. A short
constants file is not a read error; the missing rows read as zeros.
"""

import logging
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Iterable, Sequence, Union

from primitives.encoding import read_field, write_field
from primitives.errors import DecodeError
from primitives.field import FF
from circuit.data import Row
from circuit.schema import shift_name

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FieldStream:
    """Binary input stream with iostream-like end-of-file state.

    A read positioned exactly at end of file marks the stream exhausted and
    yields zero. A read that finds a partial encoding raises DecodeError.
    """

    def __init__(self, stream: BinaryIO, name: str = ""):
        self._stream = stream
        self.name = name
        self.exhausted = False
        self.zero_reads = 0

    def read(self) -> FF:
        if self._at_eof():
            self.exhausted = True
            self.zero_reads += 1
            return FF(0)
        return read_field(self._stream)

    def _at_eof(self) -> bool:
        pos = self._stream.tell()
        at_eof = not self._stream.read(1)
        self._stream.seek(pos)
        return at_eof


def read_rows(
    witness_stream: FieldStream,
    constants_stream: FieldStream,
    fixed: Sequence[str],
    witness: Sequence[str],
    shifted: Sequence[str] = (),
) -> list[Row]:
    """Read rows from two open streams until the witness stream is exhausted.

    Args:
        witness_stream: Committed column values
        constants_stream: Fixed column values
        fixed: Fixed column names, in constants-file order
        witness: Witness column names, in witness-file order
        shifted: Columns that get a zero-initialised '<name>_shift' slot

    Returns:
        Rows in trace order, with the extra end-of-file row removed

    Raises:
        DecodeError: If either stream ends in the middle of an encoding,
            or the witness stream ends partway through a row
    """
    rows: list[Row] = []

    while not witness_stream.exhausted:
        current_row = Row()
        for name in fixed:
            current_row[name] = constants_stream.read()
        for k, name in enumerate(witness):
            was_exhausted = witness_stream.exhausted
            current_row[name] = witness_stream.read()
            # End of file is only allowed at a row boundary
            if k > 0 and witness_stream.exhausted and not was_exhausted:
                raise DecodeError(
                    f"Witness file {witness_stream.name} ends mid-row: "
                    f"row {len(rows)} has no value for column '{name}'"
                )
        for name in shifted:
            current_row[shift_name(name)] = FF(0)
        rows.append(current_row)

    # The final iteration ran past the end of the witness file
    if rows:
        rows.pop()

    # Only the extra row's constants reads are expected to hit end of file
    if constants_stream.zero_reads > len(fixed):
        logger.warning(
            "Constants file %s is shorter than witness file %s; "
            "%d missing fixed values read as zero",
            constants_stream.name, witness_stream.name,
            constants_stream.zero_reads - len(fixed),
        )

    return rows


def read_trace(
    witness_path: PathLike,
    constants_path: PathLike,
    fixed: Sequence[str],
    witness: Sequence[str],
    shifted: Sequence[str] = (),
) -> list[Row]:
    """Open both trace files and read them into rows.

    Failure to open either file is logged and yields an empty trace.

    Raises:
        DecodeError: If either file ends in the middle of an encoding
    """
    with ExitStack() as stack:
        try:
            witness_file = stack.enter_context(open(witness_path, "rb"))
        except OSError as e:
            logger.error("Error opening committed file %s: %s", witness_path, e)
            return []
        try:
            constants_file = stack.enter_context(open(constants_path, "rb"))
        except OSError as e:
            logger.error("Error opening constant file %s: %s", constants_path, e)
            return []

        rows = read_rows(
            FieldStream(witness_file, str(witness_path)),
            FieldStream(constants_file, str(constants_path)),
            fixed, witness, shifted,
        )

    logger.info("Read %d rows from %s", len(rows), witness_path)
    return rows


def write_trace(
    witness_path: PathLike,
    constants_path: PathLike,
    fixed: Sequence[str],
    witness: Sequence[str],
    rows: Iterable[dict],
) -> None:
    """Write rows in the format read_trace expects (producer side).

    Args:
        rows: Mappings from column name to int or FF value; every fixed and
            witness column must be present
    """
    with open(witness_path, "wb") as witness_file, open(constants_path, "wb") as constants_file:
        for row in rows:
            for name in fixed:
                write_field(constants_file, row[name])
            for name in witness:
                write_field(witness_file, row[name])
