"""Exception hierarchy for vtuconv.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from VtuconvError for easy catching of any vtuconv-specific error.
"""

from __future__ import annotations


class VtuconvError(Exception):
    """Base exception for all vtuconv errors."""

    pass


class CodecError(VtuconvError):
    """Base exception for base64 and typed-array codec failures."""

    pass


class EncodeError(CodecError):
    """Raised when a typed array cannot be encoded.

    Examples:
        - Int64 value outside the signed 64-bit range
        - UInt8 value outside 0-255
        - Element that is not a number
    """

    pass


class DecodeError(CodecError):
    """Raised when base64 text cannot be decoded.

    Examples:
        - Character outside the base64 alphabet
    """

    pass


class MalformedLengthError(DecodeError):
    """Raised when encoded text or its decoded buffer has an impossible length.

    Examples:
        - Text length not a multiple of 4
        - Fewer than 8 decoded bytes (no room for the length header)
        - Length header claims more bytes than the buffer holds
    """

    pass


class TypeMismatchError(VtuconvError):
    """Raised when a data section's type tag does not match the expected type.

    Examples:
        - ``Points`` declared as ``Int64`` instead of ``Float32``
        - Unknown type tag such as ``Float128``
    """

    pass


class UnsupportedFormatError(VtuconvError):
    """Raised when a data section uses an encoding that cannot be read.

    Examples:
        - ``format="ascii"`` on the read path
        - ``format="appended"`` raw binary sections
    """

    pass


class VtkFileError(VtuconvError):
    """Raised when a VTK file cannot be loaded or exported.

    Examples:
        - Unreadable or malformed XML
        - Unsupported VTKFile type (only UnstructuredGrid is handled)
        - Array sizes inconsistent with NumberOfPoints/NumberOfCells
        - I/O failure while writing
    """

    pass
