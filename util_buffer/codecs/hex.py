"""Hexadecimal codec.

Bytes are written as two lowercase, zero padded digits each. Decoding accepts
an optional ``0x``/``0X`` prefix and either letter case.
"""

from __future__ import annotations

import re

from util_buffer.exceptions import InvalidEncodingError

PREFIX = "0x"
_DIGITS = "0123456789abcdef"
_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]*")


def has_prefix(text: str) -> bool:
    return text[:2] in ("0x", "0X")


def encode(data: bytes, with_prefix: bool = False) -> str:
    """Encode bytes as a lowercase hex string.

    Args:
        data: The bytes to encode.
        with_prefix: Prepend ``0x``. Ignored for empty input, which always
            encodes to ``""``.

    Returns:
        A string of exactly ``2 * len(data)`` hex digits, plus the prefix if
        requested.
    """
    if len(data) == 0:
        return ""
    digits = "".join(_DIGITS[byte >> 4] + _DIGITS[byte & 0xF] for byte in data)
    return PREFIX + digits if with_prefix else digits


def decode(text: str) -> bytes:
    """Decode a hex string, with or without a ``0x`` prefix.

    Args:
        text: The hex string to decode.

    Returns:
        The decoded bytes.

    Raises:
        InvalidEncodingError: If the digits after the prefix are of odd
            length or contain a non-hex character.
    """
    digits = text[2:] if has_prefix(text) else text
    if not _HEX_DIGITS_RE.fullmatch(digits):
        raise InvalidEncodingError(text, "hex", "non-hex character")
    if len(digits) % 2 != 0:
        raise InvalidEncodingError(text, "hex", "odd number of hex digits")

    out = bytearray(len(digits) // 2)
    for index in range(len(out)):
        out[index] = int(digits[2 * index : 2 * index + 2], 16)
    return bytes(out)
