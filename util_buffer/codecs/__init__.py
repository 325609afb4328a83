"""Codecs between byte containers and text.

Each module pairs an ``encode`` and a ``decode`` function over plain
``bytes``:

    - utf8: text <-> UTF-8 bytes, surrogate pair aware
    - hex: bytes <-> lowercase hexadecimal
    - base64: bytes <-> Base64 and Base64URL
"""

from . import base64, hex, utf8

__all__ = [
    "base64",
    "hex",
    "utf8",
]
