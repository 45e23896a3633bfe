"""vtuconv: VTK Unstructured Grid Converter

A Python library and command line tool for reading and writing VTK XML
unstructured-grid (``.vtu``) files whose data sections are base64 binary.

Key Features:
- Byte-exact base64 codec for VTK binary DataArray sections
- Length-prefixed Float32, Int64 and UInt8 arrays in either byte order
- Pydantic-based in-memory grid model
- Conversion between little/big endian and binary/ASCII output

Quick Start:
    >>> from vtuconv import Endianness, decode_f32, encode_f32
    >>>
    >>> text = encode_f32([1.0], Endianness.LITTLE)
    >>> text
    'BAAAAAAAAAAAAIA/'
    >>> decode_f32(text, Endianness.LITTLE)
    [1.0]

    >>> from vtuconv import Settings, convert, export, load
    >>>
    >>> grid = load("icosahedron-binary.vtu")
    >>> settings = Settings(input="icosahedron-binary.vtu", output="out.vtu", be=True)
    >>> export(convert(grid, settings), settings.output)
"""

from __future__ import annotations

from .codec import (
    DataType,
    DecodedArray,
    Endianness,
    decode_array,
    decode_f32,
    decode_i64,
    decode_u8,
    decode_u8_raw,
    encode_array,
    encode_f32,
    encode_i64,
    encode_u8,
    encode_u8_raw,
)
from .exceptions import (
    CodecError,
    DecodeError,
    EncodeError,
    MalformedLengthError,
    TypeMismatchError,
    UnsupportedFormatError,
    VtkFileError,
    VtuconvError,
)
from .vtk import DataArrayHeader, DataFormat, Settings, VtkFile, convert, export, load

__version__ = "0.1.0"

__all__ = [
    # Codec
    "DataType",
    "DecodedArray",
    "Endianness",
    "encode_u8_raw",
    "decode_u8_raw",
    "encode_array",
    "decode_array",
    "encode_f32",
    "decode_f32",
    "encode_i64",
    "decode_i64",
    "encode_u8",
    "decode_u8",
    # VTK files
    "VtkFile",
    "DataArrayHeader",
    "DataFormat",
    "Settings",
    "load",
    "export",
    "convert",
    # Exceptions
    "VtuconvError",
    "CodecError",
    "EncodeError",
    "DecodeError",
    "MalformedLengthError",
    "TypeMismatchError",
    "UnsupportedFormatError",
    "VtkFileError",
    # Version
    "__version__",
]
