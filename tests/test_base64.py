"""Tests for the Base64 and Base64URL codec."""

from __future__ import annotations

import base64 as stdlib_base64

import pytest

from implementation.encoding import RecordingBase64
from util_buffer.codecs import base64
from util_buffer.exceptions import InvalidEncodingError
from util_buffer.providers import StandardBase64


def test_url_transform_substitutes_alphabet() -> None:
    """Test that + and / become - and _ and padding is optional."""
    assert base64.base64_to_base64url("+/+/ab==") == "-_-_ab"
    assert base64.base64_to_base64url("+/+/ab==", with_padding=True) == "-_-_ab=="


@pytest.mark.parametrize(
    ("url", "standard"),
    [
        ("", ""),
        ("abcd", "abcd"),
        ("-_", "+/=="),
        ("ab-", "ab+="),
        ("abcd-_", "abcd+/=="),
        ("SW5wdXQgc3RyaW5nIGZvciBidWZmZXI=", "SW5wdXQgc3RyaW5nIGZvciBidWZmZXI="),
    ],
)
def test_url_to_standard_repads(url: str, standard: str) -> None:
    """Test that padding is restored from the length modulo 4."""
    assert base64.base64url_to_base64(url) == standard


@pytest.mark.parametrize("url", ["a", "abcde", "abcd_"])
def test_url_length_one_mod_four_is_invalid(url: str) -> None:
    """Test that a length of 1 modulo 4 raises InvalidEncodingError."""
    with pytest.raises(InvalidEncodingError) as exc_info:
        base64.base64url_to_base64(url)

    assert exc_info.value.encoding == "base64url"


@pytest.mark.parametrize("length", range(0, 12))
def test_encode_url_matches_standard_library(length: int) -> None:
    """Test against base64.urlsafe_b64encode for every padding shape."""
    data = bytes((i * 37 + 251) & 0xFF for i in range(length))
    provider = StandardBase64()
    expected = stdlib_base64.urlsafe_b64encode(data).decode("ascii")

    assert base64.encode_url(data, provider, with_padding=True) == expected
    assert base64.encode_url(data, provider) == expected.rstrip("=")
    assert "=" not in base64.encode_url(data, provider)
    assert base64.decode_url(base64.encode_url(data, provider), provider) == data


def test_decode_url_goes_through_standard_primitive() -> None:
    """Test that Base64URL input is normalised before reaching the provider."""
    provider = RecordingBase64()

    assert base64.decode_url("-_8", provider) == b"\xfb\xff"
    assert provider.decoded == ["+/8="]


def test_encode_uses_provider() -> None:
    """Test that standard encoding is delegated to the provider."""
    provider = RecordingBase64()

    assert base64.encode(b"\xfb\xff", provider) == "+/8="
    assert provider.encoded == [b"\xfb\xff"]


def test_provider_errors_become_invalid_encoding() -> None:
    """Test that malformed input rejected by the provider is reported uniformly."""
    provider = StandardBase64()

    with pytest.raises(InvalidEncodingError) as exc_info:
        base64.decode("ab=c", provider)
    assert exc_info.value.encoding == "base64"

    with pytest.raises(InvalidEncodingError) as exc_info:
        base64.decode_url("a==", provider)
    assert exc_info.value.encoding == "base64url"


@pytest.mark.parametrize("url", ["ab=", "abcdef=", "abc==", "a=="])
def test_url_padding_must_complete_the_group(url: str) -> None:
    """Test that padding shorter or longer than the final group is rejected."""
    with pytest.raises(InvalidEncodingError) as exc_info:
        base64.base64url_to_base64(url)

    assert exc_info.value.input == url


def test_url_full_padding_is_accepted() -> None:
    """Test that correctly padded Base64URL passes through unchanged."""
    assert base64.base64url_to_base64("ab==") == "ab=="
    assert base64.base64url_to_base64("abc=") == "abc="
