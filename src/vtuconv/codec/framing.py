"""Typed-array framing codec.

This module wraps the base64 alphabet engine with VTK's binary ``DataArray``
convention: an 8-byte unsigned length header followed by tightly packed
fixed-width elements, both in the caller's byte order.

The frame structure (before base64) is:
- [Byte length (8 bytes, uint64)] [Element 0] [Element 1] ...

The header holds the payload size in bytes, not the element count. On decode
the header alone decides how many elements are read; any bytes after the
payload (base64 padding, or further packed sections) are ignored.
"""

from __future__ import annotations

import enum
import logging
import struct
from dataclasses import dataclass
from typing import Sequence, Union

from ..exceptions import EncodeError, MalformedLengthError, TypeMismatchError
from .alphabet import decode_u8_raw, encode_u8_raw

logger = logging.getLogger(__name__)

HEADER_SIZE = 8

Number = Union[int, float]


class Endianness(enum.Enum):
    """Byte order of the length header and every multi-byte element.

    Values are the strings VTK uses for the ``byte_order`` attribute.
    """

    LITTLE = "LittleEndian"
    BIG = "BigEndian"

    @property
    def struct_prefix(self) -> str:
        """Byte-order prefix for :mod:`struct` format strings."""
        return ">" if self is Endianness.BIG else "<"

    @classmethod
    def from_byte_order(cls, value: str) -> Endianness:
        """Map a ``byte_order`` attribute to an Endianness.

        Anything other than ``BigEndian`` is treated as little endian.
        """
        return cls.BIG if value == cls.BIG.value else cls.LITTLE


class DataType(enum.Enum):
    """Element types supported by the framing codec.

    Values are the VTK ``DataArray`` type tags.
    """

    FLOAT32 = "Float32"
    INT64 = "Int64"
    UINT8 = "UInt8"

    @property
    def struct_code(self) -> str:
        """Single-element :mod:`struct` format code."""
        return _STRUCT_CODES[self.value]

    @property
    def size(self) -> int:
        """Element width in bytes."""
        return struct.calcsize(self.struct_code)

    @classmethod
    def from_tag(cls, tag: str) -> DataType:
        """Look up a DataType by its VTK type tag.

        Raises:
            TypeMismatchError: If the tag names an unsupported type
        """
        try:
            return cls(tag)
        except ValueError as e:
            supported = ", ".join(member.value for member in cls)
            raise TypeMismatchError(
                f"Unsupported data type {tag!r}. Expected one of: {supported}"
            ) from e


_STRUCT_CODES = {
    "Float32": "f",
    "Int64": "q",
    "UInt8": "B",
}


@dataclass(frozen=True)
class DecodedArray:
    """Result of decoding one framed array.

    Attributes:
        data_type: Element type the text was decoded as
        values: Decoded elements
        consumed: Bytes of the decoded buffer covered by the frame
            (length header plus the byte length it declares)
    """

    data_type: DataType
    values: list[Number]
    consumed: int

    def __len__(self) -> int:
        return len(self.values)


def encode_array(values: Sequence[Number], data_type: DataType, endianness: Endianness) -> str:
    """Encode a typed array as length-prefixed base64 text.

    Args:
        values: Elements to encode (may be empty)
        data_type: Element type to marshal the values as
        endianness: Byte order for the header and the elements

    Returns:
        Base64 text ready to embed in a ``DataArray`` element

    Raises:
        EncodeError: If a value does not fit the element type

    Example:
        >>> encode_array([1, 2, 3], DataType.UINT8, Endianness.LITTLE)
        'AwAAAAAAAAABAgM='
    """
    prefix = endianness.struct_prefix
    byte_len = len(values) * data_type.size

    try:
        payload = struct.pack(f"{prefix}{len(values)}{data_type.struct_code}", *values)
    except (struct.error, OverflowError, TypeError) as e:
        raise EncodeError(f"Cannot encode values as {data_type.value}: {e}") from e

    buffer = struct.pack(f"{prefix}Q", byte_len) + payload

    logger.debug(
        "Encoded %d %s values (%s, %d bytes)",
        len(values),
        data_type.value,
        endianness.value,
        len(buffer),
    )

    return encode_u8_raw(buffer)


def decode_array(text: str, data_type: DataType, endianness: Endianness) -> DecodedArray:
    """Decode length-prefixed base64 text to a typed array.

    Args:
        text: Base64 text produced by :func:`encode_array` or by VTK
        data_type: Element type to reinterpret the payload as
        endianness: Byte order of the header and the elements

    Returns:
        DecodedArray with the elements and the number of bytes consumed

    Raises:
        DecodeError: If the text contains characters outside the alphabet
        MalformedLengthError: If the text or the decoded buffer is too short
            for the header or for the byte length the header declares
    """
    buffer = decode_u8_raw(text)

    if len(buffer) < HEADER_SIZE:
        raise MalformedLengthError(
            f"Decoded buffer too short for length header: {len(buffer)} bytes"
        )

    prefix = endianness.struct_prefix
    (byte_len,) = struct.unpack_from(f"{prefix}Q", buffer, 0)

    if HEADER_SIZE + byte_len > len(buffer):
        raise MalformedLengthError(
            f"Length mismatch: header says {byte_len} bytes, "
            f"but only {len(buffer) - HEADER_SIZE} bytes follow it"
        )

    count = byte_len // data_type.size
    values = list(struct.unpack_from(f"{prefix}{count}{data_type.struct_code}", buffer, HEADER_SIZE))

    logger.debug("Decoded %d %s values (%s)", count, data_type.value, endianness.value)

    return DecodedArray(data_type=data_type, values=values, consumed=HEADER_SIZE + byte_len)


def encode_f32(values: Sequence[float], endianness: Endianness) -> str:
    """Encode 32-bit floats. Values are rounded to the nearest binary32."""
    return encode_array(values, DataType.FLOAT32, endianness)


def decode_f32(text: str, endianness: Endianness) -> list[float]:
    """Decode 32-bit floats."""
    return decode_array(text, DataType.FLOAT32, endianness).values


def encode_i64(values: Sequence[int], endianness: Endianness) -> str:
    """Encode 64-bit signed integers."""
    return encode_array(values, DataType.INT64, endianness)


def decode_i64(text: str, endianness: Endianness) -> list[int]:
    """Decode 64-bit signed integers."""
    return decode_array(text, DataType.INT64, endianness).values


def encode_u8(values: Sequence[int] | bytes, endianness: Endianness) -> str:
    """Encode unsigned bytes.

    Only the length header depends on ``endianness``; single bytes have no
    byte order.
    """
    return encode_array(values, DataType.UINT8, endianness)


def decode_u8(text: str, endianness: Endianness) -> list[int]:
    """Decode unsigned bytes."""
    return decode_array(text, DataType.UINT8, endianness).values
