"""Binary operations on byte containers.

All functions take and return immutable ``bytes``. Results are built in a
pre-sized ``bytearray`` and frozen before they are returned.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import constant_time

from util_buffer.exceptions import EntropyError, LengthMismatchError
from util_buffer.interfaces.crypto import IEntropySource

logger = logging.getLogger(__name__)


def concat(a: bytes, b: bytes) -> bytes:
    """Return ``a`` followed by ``b``."""
    out = bytearray(len(a) + len(b))
    out[: len(a)] = a
    out[len(a) :] = b
    return bytes(out)


def xor(a: bytes, b: bytes) -> bytes:
    """XOR two byte sequences of equal length.

    Args:
        a: First operand.
        b: Second operand.

    Returns:
        The byte-wise XOR, the same length as the operands.

    Raises:
        LengthMismatchError: If the operands differ in length.
    """
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))

    out = bytearray(len(a))
    for i in range(len(a)):
        out[i] = a[i] ^ b[i]
    return bytes(out)


def equals(a: bytes, b: bytes) -> bool:
    """Compare two byte sequences.

    Returns ``False`` on the first difference, so the running time leaks
    where the inputs diverge. Use :func:`constant_time_equals` for secrets.
    """
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if x != y:
            return False
    return True


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """Compare two byte sequences in time independent of their content."""
    return constant_time.bytes_eq(bytes(a), bytes(b))


def random(length: int, entropy: IEntropySource) -> bytes:
    """Draw random bytes from an entropy source.

    Args:
        length: Number of bytes, zero or more.
        entropy: The source to draw from.

    Returns:
        Exactly ``length`` random bytes.

    Raises:
        ValueError: If ``length`` is negative.
        EntropyError: If the source returns a different number of bytes.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if length == 0:
        return b""

    random_bytes = bytes(entropy.get_entropy(length))
    if len(random_bytes) != length:
        raise EntropyError(
            f"entropy source {type(entropy).__name__} returned {len(random_bytes)} bytes, expected {length}"
        )
    logger.debug("Drew %d random bytes from %s", length, type(entropy).__name__)
    return random_bytes
