"""Entropy generation utilities.

This module provides the default source of cryptographically secure random bytes.
"""

import secrets

from util_buffer.interfaces.crypto import IEntropySource


class SystemEntropy(IEntropySource):
    """Entropy source backed by the operating system CSPRNG."""

    def get_entropy(self, length: int) -> bytes:
        """Generate cryptographically secure random bytes.

        Args:
            length: The number of random bytes to generate.

        Returns:
            A bytes object containing the requested amount of random data.
        """
        return secrets.token_bytes(length)
