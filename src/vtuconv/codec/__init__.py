"""Base64 and typed-array codec for vtuconv.

This module provides the byte-level encoding VTK uses for binary ``DataArray``
sections: a base64 alphabet engine and a length-prefixed typed-array framing
layer on top of it.
"""

from __future__ import annotations

from .alphabet import PAD, decode_u8_raw, encode_u8_raw, encoded_length
from .framing import (
    HEADER_SIZE,
    DataType,
    DecodedArray,
    Endianness,
    decode_array,
    decode_f32,
    decode_i64,
    decode_u8,
    encode_array,
    encode_f32,
    encode_i64,
    encode_u8,
)

__all__ = [
    # Alphabet engine
    "PAD",
    "encode_u8_raw",
    "decode_u8_raw",
    "encoded_length",
    # Framing
    "HEADER_SIZE",
    "DataType",
    "DecodedArray",
    "Endianness",
    "encode_array",
    "decode_array",
    "encode_f32",
    "decode_f32",
    "encode_i64",
    "decode_i64",
    "encode_u8",
    "decode_u8",
]
