"""Tests for the hexadecimal codec."""

from __future__ import annotations

import pytest

from util_buffer.codecs import hex
from util_buffer.exceptions import InvalidEncodingError


def test_encode_is_lowercase_and_zero_padded() -> None:
    """Test that every byte becomes exactly two lowercase digits."""
    assert hex.encode(b"\x00\x0f\xab\xff") == "000fabff"
    assert hex.encode(b"\x00\x0f\xab\xff", with_prefix=True) == "0x000fabff"


@pytest.mark.parametrize("length", [1, 2, 7, 32])
def test_encode_width(length: int) -> None:
    """Test that n bytes encode to 2n digits, plus two for the prefix."""
    data = bytes(range(length))

    assert len(hex.encode(data)) == 2 * length
    assert len(hex.encode(data, with_prefix=True)) == 2 * length + 2


def test_empty_input_never_gets_a_prefix() -> None:
    """Test that empty input encodes to the empty string."""
    assert hex.encode(b"") == ""
    assert hex.encode(b"", with_prefix=True) == ""


@pytest.mark.parametrize("text", ["00ff10", "0x00ff10", "0X00FF10", "00FF10"])
def test_decode_accepts_prefix_and_either_case(text: str) -> None:
    """Test that prefixed and unprefixed, upper and lower case all decode."""
    assert hex.decode(text) == b"\x00\xff\x10"


def test_decode_empty() -> None:
    """Test that empty digits decode to empty bytes."""
    assert hex.decode("") == b""
    assert hex.decode("0x") == b""


@pytest.mark.parametrize("text", ["abc", "0x1", "0xf0f"])
def test_decode_rejects_odd_length(text: str) -> None:
    """Test that a trailing half byte is rejected rather than dropped."""
    with pytest.raises(InvalidEncodingError) as exc_info:
        hex.decode(text)

    assert exc_info.value.input == text
    assert exc_info.value.encoding == "hex"


@pytest.mark.parametrize("text", ["zz", "0x 1", "+f", "0x0x00"])
def test_decode_rejects_non_hex_characters(text: str) -> None:
    """Test that characters outside 0-9a-fA-F are rejected."""
    with pytest.raises(InvalidEncodingError):
        hex.decode(text)
