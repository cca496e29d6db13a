"""Fixed-width on-disk field element encoding.

Trace files store each field element as 32 bytes, most significant byte first.
The in-memory canonical representation is the mirror image (little-endian limb
order), so decoding reverses the buffer before deserialising.

Canonical-range validation is left to the producer: by default an encoding of
an integer >= r is reduced modulo r. Pass strict=True to reject it instead.
"""

from typing import BinaryIO

from primitives.field import FF, BN254_SCALAR_PRIME
from primitives.errors import DecodeError

FIELD_ENCODING_WIDTH = 32


def decode_field(buffer: bytes, strict: bool = False) -> FF:
    """Decode one 32-byte big-endian encoding into a field element.

    Args:
        buffer: Exactly FIELD_ENCODING_WIDTH bytes as laid out on disk
        strict: Raise DecodeError for encodings outside [0, r)

    Returns:
        Field element

    Raises:
        DecodeError: If the buffer is not exactly one encoding wide
    """
    if len(buffer) != FIELD_ENCODING_WIDTH:
        raise DecodeError(
            f"Field encoding needs {FIELD_ENCODING_WIDTH} bytes, got {len(buffer)}"
        )

    # on-disk layout -> canonical little-endian limbs
    canonical = bytes(reversed(buffer))
    value = int.from_bytes(canonical, "little")

    if value >= BN254_SCALAR_PRIME:
        if strict:
            raise DecodeError(f"Non-canonical field encoding: {value:#x} >= modulus")
        value %= BN254_SCALAR_PRIME
    return FF(value)


def encode_field(value) -> bytes:
    """Encode a field element (or int in [0, r)) as 32 bytes big-endian."""
    canonical = int(value).to_bytes(FIELD_ENCODING_WIDTH, "little")
    return bytes(reversed(canonical))


def read_field(stream: BinaryIO, strict: bool = False) -> FF:
    """Consume exactly one encoding from a binary stream.

    Raises:
        DecodeError: If fewer than FIELD_ENCODING_WIDTH bytes remain
    """
    buffer = stream.read(FIELD_ENCODING_WIDTH)
    if len(buffer) < FIELD_ENCODING_WIDTH:
        raise DecodeError(
            f"Truncated field element at offset {stream.tell() - len(buffer)}: "
            f"{len(buffer)} of {FIELD_ENCODING_WIDTH} bytes available"
        )
    return decode_field(buffer, strict=strict)


def write_field(stream: BinaryIO, value) -> None:
    stream.write(encode_field(value))
