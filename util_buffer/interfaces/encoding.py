"""Encoding interfaces for util-buffer.

This module defines the protocol for the standard Base64 primitive that the
Base64URL transform is layered on.
"""

from __future__ import annotations

from typing import Protocol


class IBase64(Protocol):
    """Interface for standard (RFC 4648 section 4) Base64 operations."""

    def encode(self, data: bytes) -> str:
        """Encode bytes to a padded standard Base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            The Base64 string, using ``+`` and ``/`` and ``=`` padding.
        """
        ...

    def decode(self, base64_str: str) -> bytes:
        """Decode a padded standard Base64 string.

        Args:
            base64_str: The Base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            Exception: When the input is not valid Base64.
        """
        ...
