"""
Unit tests for hs_deckstring.utils.varint
"""
import io

import pytest

from hs_deckstring.errors import DeckstringError, VarintOverflowError, VarintReadError
from hs_deckstring.utils.varint import decode_varint, decode_varint_from_bytes, encode_varint


def test_encode_single_byte_values():
    assert encode_varint(0) == b"\x00"
    assert encode_varint(1) == b"\x01"
    assert encode_varint(127) == b"\x7f"


def test_encode_multi_byte_values():
    assert encode_varint(128) == b"\x80\x01"
    assert encode_varint(300) == b"\xac\x02"
    assert encode_varint(55288) == b"\xf8\xaf\x03"


def test_encode_negative_value_rejected():
    with pytest.raises(ValueError):
        encode_varint(-1)


def test_decode_reads_one_value_at_a_time():
    stream = io.BytesIO(b"\x00\x7f\x80\x01\xac\x02")
    assert decode_varint(stream) == 0
    assert decode_varint(stream) == 127
    assert decode_varint(stream) == 128
    assert decode_varint(stream) == 300
    assert stream.read() == b""


def test_decode_largest_64_bit_value():
    data = encode_varint(2 ** 64 - 1)
    assert len(data) == 10
    assert decode_varint(io.BytesIO(data)) == 2 ** 64 - 1


def test_decode_empty_stream_raises_read_error():
    with pytest.raises(VarintReadError):
        decode_varint(io.BytesIO(b""))


def test_decode_truncated_varint_raises_read_error():
    with pytest.raises(VarintReadError):
        decode_varint(io.BytesIO(b"\x80\x80"))


def test_eleven_continuation_bytes_overflow():
    with pytest.raises(VarintOverflowError):
        decode_varint(io.BytesIO(b"\x80" * 11 + b"\x00"))


def test_tenth_byte_above_one_overflows():
    data = b"\xff" * 9 + b"\x02"
    with pytest.raises(VarintOverflowError):
        decode_varint(io.BytesIO(data))


def test_tenth_byte_of_one_is_accepted():
    data = b"\x80" * 9 + b"\x01"
    assert decode_varint(io.BytesIO(data)) == 1 << 63


def test_tenth_continuation_byte_overflows_before_reading_more():
    with pytest.raises(VarintOverflowError):
        decode_varint(io.BytesIO(b"\x80" * 10))


def test_eleventh_terminating_byte_overflows():
    data = b"\x80" * 10 + b"\x00"
    with pytest.raises(VarintOverflowError):
        decode_varint(io.BytesIO(data))


def test_varint_errors_share_base_class():
    assert issubclass(VarintReadError, DeckstringError)
    assert issubclass(VarintOverflowError, DeckstringError)
    assert issubclass(VarintOverflowError, OverflowError)


def test_decode_from_bytes_returns_new_offset():
    data = b"\x05\xac\x02\x07"
    value, offset = decode_varint_from_bytes(data, 1)
    assert value == 300
    assert offset == 3
    assert decode_varint_from_bytes(data, offset) == (7, 4)
