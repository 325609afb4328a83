"""Cryptographic interfaces for util-buffer.

This module defines the protocol for the entropy source used by random buffer
generation.
"""

from __future__ import annotations

from typing import Protocol


class IEntropySource(Protocol):
    """Interface for cryptographically secure random byte generation."""

    def get_entropy(self, length: int) -> bytes:
        """Generate cryptographically secure random bytes.

        Implementations must be safe to call from multiple threads if the
        host application shares buffers across threads.

        Args:
            length: The number of random bytes to generate.

        Returns:
            Exactly ``length`` random bytes.
        """
        ...
