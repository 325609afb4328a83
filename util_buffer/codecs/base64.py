"""Base64 and Base64URL codec.

Standard Base64 is delegated to an :class:`~util_buffer.interfaces.IBase64`
provider. This module only layers the URL-safe transform on top of it.

Following functions are implemented based on RFC 7515, Appendix C
https://tools.ietf.org/html/rfc7515#appendix-C
"""

from __future__ import annotations

from util_buffer.exceptions import InvalidEncodingError
from util_buffer.interfaces.encoding import IBase64

_TO_URL = str.maketrans("+/", "-_")
_FROM_URL = str.maketrans("-_", "+/")


def base64_to_base64url(base64_str: str, with_padding: bool = False) -> str:
    """Convert standard Base64 to Base64URL.

    Args:
        base64_str: Padded standard Base64 text.
        with_padding: Keep the trailing ``=`` characters.

    Returns:
        The text with ``+`` replaced by ``-`` and ``/`` by ``_``.
    """
    base64url_str = base64_str.translate(_TO_URL)
    return base64url_str if with_padding else base64url_str.rstrip("=")


def base64url_to_base64(base64url_str: str) -> str:
    """Convert Base64URL, padded or not, to padded standard Base64.

    Args:
        base64url_str: The Base64URL text.

    Returns:
        The standard Base64 text with padding restored.

    Raises:
        InvalidEncodingError: If the length is 1 modulo 4, which no byte
            sequence encodes to, or if padding is present but does not
            complete the last 4-character group.
    """
    base64_str = base64url_str.translate(_FROM_URL)
    remainder = len(base64_str) % 4
    if remainder != 0 and "=" in base64_str:
        raise InvalidEncodingError(base64url_str, "base64url", "padding does not complete the last group")
    if remainder == 0:
        return base64_str
    if remainder == 2:
        return base64_str + "=="
    if remainder == 3:
        return base64_str + "="
    raise InvalidEncodingError(base64url_str, "base64url", "length is 1 modulo 4")


def encode(data: bytes, provider: IBase64) -> str:
    """Encode bytes to standard Base64 through the provider."""
    return provider.encode(data)


def decode(base64_str: str, provider: IBase64) -> bytes:
    """Decode standard Base64 through the provider.

    Raises:
        InvalidEncodingError: If the provider rejects the input.
    """
    try:
        return provider.decode(base64_str)
    except ValueError as e:
        raise InvalidEncodingError(base64_str, "base64", str(e)) from e


def encode_url(data: bytes, provider: IBase64, with_padding: bool = False) -> str:
    """Encode bytes to Base64URL.

    Args:
        data: The bytes to encode.
        provider: The standard Base64 primitive.
        with_padding: Keep the trailing ``=`` characters.

    Returns:
        The Base64URL text.
    """
    return base64_to_base64url(encode(data, provider), with_padding)


def decode_url(base64url_str: str, provider: IBase64) -> bytes:
    """Decode Base64URL by normalising it to standard Base64 first."""
    base64_str = base64url_to_base64(base64url_str)
    try:
        return provider.decode(base64_str)
    except ValueError as e:
        raise InvalidEncodingError(base64url_str, "base64url", str(e)) from e
