"""Base64 alphabet engine.

This module converts between raw bytes and base64 text using the alphabet
VTK writes into XML ``DataArray`` sections. The alphabet and padding match
RFC 4648 exactly: ``A-Z``, ``a-z``, ``0-9``, ``+``, ``/`` with ``=`` padding,
no line wrapping and no whitespace.

Every 3 input bytes become 4 characters. Decoding reverses this 4 characters
at a time; padding characters decode to zero bits, so the true payload length
has to come from elsewhere (the 8-byte length header, see ``framing``).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..exceptions import DecodeError, MalformedLengthError

PAD = "="

# Order of the characters is the encoded value
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def _build_tables() -> tuple[tuple[str, ...], Mapping[str, int]]:
    """Build the encode and decode lookup tables.

    Returns:
        Tuple of (encode table indexed 0-63, read-only decode mapping)
    """
    encode_table = tuple(ALPHABET)
    decode_table = {char: value for value, char in enumerate(encode_table)}

    # Same value as "A"; padding is never trusted as data
    decode_table[PAD] = 0

    return encode_table, MappingProxyType(decode_table)


# Built once at import, read-only afterwards
ENCODE_TABLE, DECODE_TABLE = _build_tables()
assert len(ENCODE_TABLE) == 64
assert len(DECODE_TABLE) == 65


def encoded_length(num_bytes: int) -> int:
    """Return the number of base64 characters produced for ``num_bytes`` bytes."""
    return 4 * ((num_bytes + 2) // 3)


def encode_u8_raw(data: bytes | bytearray) -> str:
    """Encode raw bytes as base64 text.

    A trailing group of 1 byte produces two data characters and two padding
    characters; a trailing group of 2 bytes produces three data characters and
    one padding character. Missing low bits are zero-filled.

    Args:
        data: Bytes to encode (may be empty)

    Returns:
        Base64 text of length ``4 * ceil(len(data) / 3)``

    Example:
        >>> encode_u8_raw(b"foob")
        'Zm9vYg=='
    """
    size = len(data)
    chars: list[str] = []

    for start in range(0, size, 3):
        b0 = data[start]
        b1 = data[start + 1] if start + 1 < size else 0
        b2 = data[start + 2] if start + 2 < size else 0

        chars.append(ENCODE_TABLE[b0 >> 2])
        chars.append(ENCODE_TABLE[((b0 & 0b00000011) << 4) | (b1 >> 4)])

        if start + 1 < size:
            chars.append(ENCODE_TABLE[((b1 & 0b00001111) << 2) | (b2 >> 6)])
        else:
            chars.append(PAD)

        if start + 2 < size:
            chars.append(ENCODE_TABLE[b2 & 0b00111111])
        else:
            chars.append(PAD)

    return "".join(chars)


def decode_u8_raw(text: str) -> bytes:
    """Decode base64 text to raw bytes.

    The output always holds ``len(text) * 6 // 8`` bytes. Padding characters
    are decoded as zero bits rather than dropped, so text ending in ``=``
    yields trailing zero bytes beyond the original data. Callers that need the
    exact payload length read it from the framing header.

    Args:
        text: Base64 text; its length must be a multiple of 4

    Returns:
        Decoded bytes

    Raises:
        MalformedLengthError: If the text length is not a multiple of 4
        DecodeError: If the text contains a character outside the alphabet

    Example:
        >>> decode_u8_raw("Zm9vYg==")
        b'foob\\x00\\x00'
    """
    if len(text) % 4 != 0:
        raise MalformedLengthError(
            f"Base64 text length must be a multiple of 4, got {len(text)} characters"
        )

    try:
        values = [DECODE_TABLE[char] for char in text]
    except KeyError as e:
        raise DecodeError(f"Invalid base64 character: {e.args[0]!r}") from e

    result = bytearray(len(text) * 6 // 8)

    for group in range(len(values) // 4):
        c0, c1, c2, c3 = values[4 * group : 4 * group + 4]

        # Step bytes by 3 and characters by 4
        result[3 * group + 0] = (c0 << 2) | ((c1 & 0b110000) >> 4)
        result[3 * group + 1] = ((c1 & 0b001111) << 4) | ((c2 & 0b111100) >> 2)
        result[3 * group + 2] = ((c2 & 0b000011) << 6) | c3

    return bytes(result)
