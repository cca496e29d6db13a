"""Unit tests for the 32-byte field element encoding."""

import io

import pytest

from primitives.encoding import (
    FIELD_ENCODING_WIDTH,
    decode_field,
    encode_field,
    read_field,
    write_field,
)
from primitives.errors import DecodeError
from primitives.field import BN254_SCALAR_PRIME, FF


class TestDecodeField:
    """Tests for decode_field."""

    def test_small_value_is_big_endian(self) -> None:
        """Least significant byte comes last on disk."""
        buffer = bytes(31) + b"\x05"
        assert int(decode_field(buffer)) == 5

    def test_multi_byte_value(self) -> None:
        buffer = bytes(30) + b"\x01\x00"
        assert int(decode_field(buffer)) == 256

    def test_largest_canonical_value(self) -> None:
        buffer = (BN254_SCALAR_PRIME - 1).to_bytes(32, "big")
        assert int(decode_field(buffer)) == BN254_SCALAR_PRIME - 1

    def test_short_buffer_raises(self) -> None:
        with pytest.raises(DecodeError):
            decode_field(bytes(31))

    def test_long_buffer_raises(self) -> None:
        with pytest.raises(DecodeError):
            decode_field(bytes(33))

    def test_non_canonical_value_is_reduced(self) -> None:
        """Values >= r are not treated as failures by default."""
        buffer = b"\xff" * 32
        assert int(decode_field(buffer)) == (2**256 - 1) % BN254_SCALAR_PRIME

    def test_non_canonical_value_rejected_when_strict(self) -> None:
        buffer = BN254_SCALAR_PRIME.to_bytes(32, "big")
        with pytest.raises(DecodeError):
            decode_field(buffer, strict=True)


class TestRoundTrip:
    """encode/decode are inverse on the canonical range."""

    @pytest.mark.parametrize("value", [0, 1, 0xdeadbeef, 2**128 + 7, BN254_SCALAR_PRIME - 1])
    def test_decode_encode(self, value: int) -> None:
        assert int(decode_field(encode_field(FF(value)))) == value

    def test_encode_decode_bytes(self) -> None:
        buffer = bytes(range(1, 33))
        buffer = (int.from_bytes(buffer, "big") % BN254_SCALAR_PRIME).to_bytes(32, "big")
        assert encode_field(decode_field(buffer)) == buffer

    def test_encoding_width(self) -> None:
        assert len(encode_field(FF(12345))) == FIELD_ENCODING_WIDTH


class TestStreams:
    """Tests for read_field/write_field on binary streams."""

    def test_read_consumes_exactly_one_encoding(self) -> None:
        stream = io.BytesIO(encode_field(7) + encode_field(9))
        assert int(read_field(stream)) == 7
        assert stream.tell() == FIELD_ENCODING_WIDTH
        assert int(read_field(stream)) == 9

    def test_read_truncated_raises(self) -> None:
        stream = io.BytesIO(encode_field(7)[:20])
        with pytest.raises(DecodeError):
            read_field(stream)

    def test_read_empty_raises(self) -> None:
        with pytest.raises(DecodeError):
            read_field(io.BytesIO(b""))

    def test_write_then_read(self) -> None:
        stream = io.BytesIO()
        write_field(stream, FF(42))
        write_field(stream, 43)
        stream.seek(0)
        assert [int(read_field(stream)), int(read_field(stream))] == [42, 43]
