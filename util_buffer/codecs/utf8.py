"""UTF-8 codec.

This module converts between text and UTF-8 bytes by hand so that strings
carrying UTF-16 surrogate pairs (for example text that came through a JSON
``\\ud83d\\ude00`` escape or a ``surrogatepass`` decode) encode to the same
bytes as the characters they stand for.

Encoding rules per code unit ``cp``:

    cp < 0x80                   -> 0xxxxxxx
    cp < 0x800                  -> 110xxxxx 10xxxxxx
    cp < 0x10000, no surrogate  -> 1110xxxx 10xxxxxx 10xxxxxx
    high + low surrogate pair   -> 11110xxx 10xxxxxx 10xxxxxx 10xxxxxx

Input is assumed well formed. Decoding does not validate continuation bytes.
"""

from __future__ import annotations

_SURROGATE_MIN = 0xD800
_LOW_SURROGATE_MIN = 0xDC00
_SURROGATE_MAX = 0xDFFF
_SUPPLEMENTARY_BASE = 0x10000
_MAX_CODE_POINT = 0x10FFFF
_REPLACEMENT_CHARACTER = "\ufffd"


def _is_high_surrogate(cp: int) -> bool:
    return _SURROGATE_MIN <= cp < _LOW_SURROGATE_MIN


def _is_low_surrogate(cp: int) -> bool:
    return _LOW_SURROGATE_MIN <= cp <= _SURROGATE_MAX


def _append_four(out: bytearray, cp: int) -> None:
    out.append(0xF0 | (cp >> 18))
    out.append(0x80 | ((cp >> 12) & 0x3F))
    out.append(0x80 | ((cp >> 6) & 0x3F))
    out.append(0x80 | (cp & 0x3F))


def encode(text: str) -> bytes:
    """Encode text to UTF-8 bytes.

    A high surrogate immediately followed by a low surrogate is combined into
    one supplementary code point. A surrogate without a partner is written
    with the three byte form so that it survives :func:`decode`.

    Args:
        text: The text to encode.

    Returns:
        The UTF-8 encoded bytes.
    """
    out = bytearray()
    i = 0
    length = len(text)
    while i < length:
        cp = ord(text[i])
        if cp < 0x80:
            out.append(cp)
        elif cp < 0x800:
            out.append(0xC0 | (cp >> 6))
            out.append(0x80 | (cp & 0x3F))
        elif cp >= _SUPPLEMENTARY_BASE:
            _append_four(out, cp)
        elif _is_high_surrogate(cp) and i + 1 < length and _is_low_surrogate(ord(text[i + 1])):
            # surrogate pair
            i += 1
            cp = _SUPPLEMENTARY_BASE + (((cp & 0x3FF) << 10) | (ord(text[i]) & 0x3FF))
            _append_four(out, cp)
        else:
            out.append(0xE0 | (cp >> 12))
            out.append(0x80 | ((cp >> 6) & 0x3F))
            out.append(0x80 | (cp & 0x3F))
        i += 1
    return bytes(out)


def decode(data: bytes, surrogate_pairs: bool = False) -> str:
    """Decode UTF-8 bytes to text.

    The sequence length is taken from the leading byte only. Continuation
    bytes missing at the end of the input contribute zero bits.

    Args:
        data: The bytes to decode.
        surrogate_pairs: Emit characters outside the Basic Multilingual Plane
            as a UTF-16 surrogate pair instead of a single code point. Use
            this when the text is handed to something that counts 16-bit
            units.

    Returns:
        The decoded text.
    """
    chars: list[str] = []
    i = 0
    length = len(data)

    def continuation(offset: int) -> int:
        return data[offset] & 0x3F if offset < length else 0

    while i < length:
        byte1 = data[i]
        if byte1 <= 0x7F:
            chars.append(chr(byte1))
            i += 1
        elif byte1 <= 0xDF:
            chars.append(chr(((byte1 & 0x1F) << 6) | continuation(i + 1)))
            i += 2
        elif byte1 <= 0xEF:
            chars.append(
                chr(((byte1 & 0xF) << 12) | (continuation(i + 1) << 6) | continuation(i + 2))
            )
            i += 3
        else:
            cp = (
                ((byte1 & 0x7) << 18)
                | (continuation(i + 1) << 12)
                | (continuation(i + 2) << 6)
                | continuation(i + 3)
            )
            i += 4
            if cp > _MAX_CODE_POINT:
                chars.append(_REPLACEMENT_CHARACTER)
            elif surrogate_pairs and cp >= _SUPPLEMENTARY_BASE:
                # Algorithm from https://en.wikipedia.org/wiki/UTF-16
                cp -= _SUPPLEMENTARY_BASE
                chars.append(chr(_SURROGATE_MIN + (cp >> 10)))
                chars.append(chr(_LOW_SURROGATE_MIN + (cp & 0x3FF)))
            else:
                chars.append(chr(cp))
    return "".join(chars)
