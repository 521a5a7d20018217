"""
Varint encoding/decoding (unsigned LEB128).

Each byte carries 7 value bits, least significant group first. The high bit
is set on every byte except the last one.
"""

import io
import logging
from typing import BinaryIO, Tuple

from hs_deckstring.errors import VarintOverflowError, VarintReadError

logger = logging.getLogger(__name__)

CONTINUATION_BIT = 0x80
VALUE_MASK = 0x7F
# A 64-bit value needs at most 10 bytes, and the 10th may only hold one bit.
MAX_VARINT_BYTES = 10


def encode_varint(value: int) -> bytes:
    """
    Encode a non-negative integer as a varint.

    Args:
        value: Non-negative integer to encode.

    Returns:
        Varint-encoded bytes.
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value as varint: {value}")

    result = bytearray()
    while value >= CONTINUATION_BIT:
        result.append((value & VALUE_MASK) | CONTINUATION_BIT)
        value >>= 7
    result.append(value)
    return bytes(result)


def decode_varint(stream: BinaryIO) -> int:
    """
    Read a single varint from a binary stream.

    Args:
        stream: Readable binary stream positioned at the start of a varint.

    Returns:
        The decoded integer.

    Raises:
        VarintReadError: If the stream ends before the varint terminates.
        VarintOverflowError: If the varint does not fit in 64 bits.
    """
    value = 0
    shift = 0
    index = 0

    while True:
        chunk = stream.read(1)
        if not chunk:
            raise VarintReadError(f"Unexpected end of data after {index} varint byte(s)")
        byte = chunk[0]

        if byte < CONTINUATION_BIT:
            if index == MAX_VARINT_BYTES - 1 and byte > 1:
                raise VarintOverflowError(f"Varint longer than {MAX_VARINT_BYTES} bytes or wider than 64 bits")
            return value | (byte << shift)

        value |= (byte & VALUE_MASK) << shift
        shift += 7
        index += 1
        # a continuation bit on the 10th byte already puts its value above 1
        if index >= MAX_VARINT_BYTES:
            raise VarintOverflowError(f"Varint byte {index} still has the continuation bit set")


def decode_varint_from_bytes(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint from a bytes buffer.

    Args:
        data: Bytes containing the varint.
        offset: Starting offset in data.

    Returns:
        Tuple of (decoded value, offset just past the varint).
    """
    stream = io.BytesIO(data)
    stream.seek(offset)
    value = decode_varint(stream)
    return value, stream.tell()
