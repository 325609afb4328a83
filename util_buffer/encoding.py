"""Encoding tags and codec dispatch.

The set of encodings is closed. :func:`encode` and :func:`decode` are the only
places that branch on it.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from util_buffer.codecs import base64 as base64_codec
from util_buffer.codecs import hex as hex_codec
from util_buffer.codecs import utf8 as utf8_codec
from util_buffer.config import UtilBufferConfig
from util_buffer.exceptions import InvalidEncodingError, UnknownEncodingError


class Encoding(str, Enum):
    """Text representations a buffer can be read from or written to."""

    UTF8 = "utf8"
    BASE64 = "base64"
    BASE64URL = "base64url"
    HEX = "hex"
    RAW = "raw"

    @classmethod
    def parse(cls, value: Union[Encoding, str]) -> Encoding:
        """Resolve an encoding tag from an enum member or its string value.

        Args:
            value: An :class:`Encoding` or one of ``"utf8"``, ``"base64"``,
                ``"base64url"``, ``"hex"``, ``"raw"``.

        Returns:
            The matching encoding.

        Raises:
            UnknownEncodingError: If the value names no encoding.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownEncodingError(value) from None


def encode(
    data: bytes,
    encoding: Union[Encoding, str],
    config: UtilBufferConfig,
    with_option: bool = False,
) -> Union[str, bytes]:
    """Write bytes in the requested representation.

    Args:
        data: The bytes to encode.
        encoding: Target representation.
        config: Supplies the Base64 primitive.
        with_option: ``0x`` prefix for HEX, padding for BASE64URL. Ignored
            otherwise.

    Returns:
        The text form, or ``bytes`` for RAW.

    Raises:
        UnknownEncodingError: If the encoding is not recognized.
    """
    encoding = Encoding.parse(encoding)
    if encoding is Encoding.UTF8:
        return utf8_codec.decode(data)
    elif encoding is Encoding.BASE64:
        return base64_codec.encode(data, config.encoding.base64)
    elif encoding is Encoding.BASE64URL:
        return base64_codec.encode_url(data, config.encoding.base64, with_option)
    elif encoding is Encoding.HEX:
        return hex_codec.encode(data, with_option)
    elif encoding is Encoding.RAW:
        return data
    raise UnknownEncodingError(encoding)


def decode(text: str, encoding: Union[Encoding, str], config: UtilBufferConfig) -> bytes:
    """Read bytes from their text representation.

    Args:
        text: The text to decode.
        encoding: Representation the text is in.
        config: Supplies the Base64 primitive.

    Returns:
        The decoded bytes.

    Raises:
        InvalidEncodingError: If the text cannot be decoded, or RAW is
            requested for text.
        UnknownEncodingError: If the encoding is not recognized.
    """
    encoding = Encoding.parse(encoding)
    if encoding is Encoding.UTF8:
        return utf8_codec.encode(text)
    elif encoding is Encoding.BASE64:
        return base64_codec.decode(text, config.encoding.base64)
    elif encoding is Encoding.BASE64URL:
        return base64_codec.decode_url(text, config.encoding.base64)
    elif encoding is Encoding.HEX:
        return hex_codec.decode(text)
    elif encoding is Encoding.RAW:
        raise InvalidEncodingError(text, encoding, "raw data has no text form")
    raise UnknownEncodingError(encoding)
