"""Tests for binary operations on byte containers."""

from __future__ import annotations

import pytest

from implementation.crypto import CountingEntropy, ShortEntropy
from util_buffer import operations
from util_buffer.exceptions import EntropyError, LengthMismatchError
from util_buffer.providers import SystemEntropy


def test_concat_preserves_order() -> None:
    """Test that concat places the first operand before the second."""
    assert operations.concat(b"Foo", b"Bar") == b"FooBar"
    assert operations.concat(b"", b"Bar") == b"Bar"
    assert operations.concat(b"Foo", b"") == b"Foo"


def test_xor() -> None:
    """Test byte-wise XOR of equal length operands."""
    assert operations.xor(b"\x00\xff\x00", b"\xff\x00\xff") == b"\xff\xff\xff"
    assert operations.xor(b"", b"") == b""


def test_xor_is_self_inverse() -> None:
    """Test that xor(xor(a, b), b) == a."""
    a = bytes(range(40))
    b = bytes(range(100, 140))

    assert operations.xor(operations.xor(a, b), b) == a


def test_xor_length_mismatch_carries_lengths() -> None:
    """Test that XOR of different lengths raises with both lengths."""
    with pytest.raises(LengthMismatchError) as exc_info:
        operations.xor(b"\x00\xff\x00\xff", b"\xff\x00\xff")

    assert exc_info.value.left == 4
    assert exc_info.value.right == 3
    assert "Can not xor buffers with different lengths" in str(exc_info.value)


def test_equals() -> None:
    """Test content comparison, including length mismatch."""
    assert operations.equals(b"\x00\x11\x22", b"\x00\x11\x22")
    assert not operations.equals(b"\x00\x11\x22", b"\x00\x11\x12")
    assert not operations.equals(b"\x00\x11\x22", b"\x00\x11")
    assert operations.equals(b"", b"")


def test_constant_time_equals() -> None:
    """Test the timing-safe comparison agrees with equals."""
    assert operations.constant_time_equals(b"secret", b"secret")
    assert not operations.constant_time_equals(b"secret", b"secreT")
    assert not operations.constant_time_equals(b"secret", b"secrets")


@pytest.mark.parametrize("length", range(0, 25))
def test_random_length(length: int) -> None:
    """Test that random returns exactly the requested number of bytes."""
    assert len(operations.random(length, SystemEntropy())) == length


def test_random_draws_from_entropy_source() -> None:
    """Test that random bytes come from the supplied source."""
    entropy = CountingEntropy(start=250)

    assert operations.random(8, entropy) == bytes([250, 251, 252, 253, 254, 255, 0, 1])
    assert entropy.requests == [8]


def test_random_zero_does_not_consume_entropy() -> None:
    """Test that an empty request returns b'' without calling the source."""
    entropy = CountingEntropy()

    assert operations.random(0, entropy) == b""
    assert entropy.requests == []


def test_random_rejects_negative_length() -> None:
    """Test that a negative length raises ValueError."""
    with pytest.raises(ValueError):
        operations.random(-1, CountingEntropy())


def test_random_detects_short_entropy() -> None:
    """Test that a source returning too few bytes raises EntropyError."""
    with pytest.raises(EntropyError):
        operations.random(16, ShortEntropy())
