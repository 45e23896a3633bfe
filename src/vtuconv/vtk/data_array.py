"""Conversion between ``DataArray`` text and typed value lists.

The XML layer hands this module a header (type tag, format tag, name) and
the element text; this module picks the typed codec for it, or reports why
it cannot.
"""

from __future__ import annotations

import struct
from typing import Sequence, Union

from ..codec.framing import DataType, Endianness, decode_array, encode_array
from ..exceptions import EncodeError, TypeMismatchError, UnsupportedFormatError
from .models import DataArrayHeader, DataFormat

Number = Union[int, float]

# DataArray Name -> element type it must be declared with
EXPECTED_TYPES: dict[str, DataType] = {
    "Points": DataType.FLOAT32,
    "connectivity": DataType.INT64,
    "offsets": DataType.INT64,
    "types": DataType.UINT8,
}


def check_type(header: DataArrayHeader, expected: DataType) -> None:
    """Ensure a DataArray is declared with the expected element type.

    Raises:
        TypeMismatchError: If the declared type differs from ``expected``
    """
    if header.dtype != expected.value:
        raise TypeMismatchError(
            f"Expected type {expected.value} for DataArray {header.name}. "
            f"Found type {header.dtype or '(none)'}"
        )


def parse_data_array(
    header: DataArrayHeader, text: str, endianness: Endianness
) -> list[Number]:
    """Decode the text of a DataArray according to its header.

    Args:
        header: Parsed ``type``/``format``/``Name`` attributes
        text: Element text with surrounding whitespace already stripped
        endianness: Byte order declared by the enclosing VTKFile

    Returns:
        Decoded values

    Raises:
        TypeMismatchError: If the type tag is not a supported element type
        UnsupportedFormatError: If the section is not base64 binary
        CodecError: If the binary text is malformed
    """
    data_type = DataType.from_tag(header.dtype)

    if header.format != DataFormat.BINARY.value:
        raise UnsupportedFormatError(
            f"DataArray {header.name}: format {header.format!r} is not implemented"
        )

    return decode_array(text, data_type, endianness).values


def format_float32(value: float) -> str:
    """Format a float with the fewest digits that survive a float32 round trip.

    Example:
        >>> format_float32(0.27639320492744446)
        '0.2763932'
    """
    try:
        packed = struct.pack("<f", value)
    except OverflowError as e:
        raise EncodeError(f"Cannot format {value!r} as Float32: {e}") from e

    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        try:
            if struct.pack("<f", float(text)) == packed:
                return text
        except OverflowError:
            # Rounded past the float32 range near its maximum
            continue
    return repr(value)


def format_data_array(
    values: Sequence[Number],
    data_type: DataType,
    data_format: DataFormat,
    endianness: Endianness,
) -> str:
    """Render values as DataArray text.

    Binary output is the framed base64 text. ASCII output writes every
    element followed by a single space.
    """
    if data_format is DataFormat.BINARY:
        return encode_array(values, data_type, endianness)

    if data_type is DataType.FLOAT32:
        return "".join(f"{format_float32(value)} " for value in values)
    return "".join(f"{value} " for value in values)
