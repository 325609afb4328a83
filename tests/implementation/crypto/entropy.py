"""Entropy sources for tests.

This module provides deterministic and misbehaving implementations of
IEntropySource.
"""

from util_buffer.interfaces.crypto import IEntropySource


class CountingEntropy(IEntropySource):
    """Entropy source that returns a predictable counting sequence.

    Each call continues where the previous one stopped, wrapping at 256.

    Attributes:
        requests: The lengths requested so far.
    """

    def __init__(self, start: int = 0) -> None:
        self._next = start
        self.requests: list[int] = []

    def get_entropy(self, length: int) -> bytes:
        """Return the next ``length`` values of the counter.

        Args:
            length: The number of bytes to generate.

        Returns:
            A bytes object of the requested length.
        """
        self.requests.append(length)
        out = bytes((self._next + i) & 0xFF for i in range(length))
        self._next = (self._next + length) & 0xFF
        return out


class ShortEntropy(IEntropySource):
    """Entropy source that always returns one byte less than requested."""

    def get_entropy(self, length: int) -> bytes:
        return bytes(max(length - 1, 0))
