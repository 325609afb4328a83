"""Exception classes for util-buffer.

This module defines custom exception types used throughout the util-buffer library.
"""

from __future__ import annotations

from typing import Any


class UtilBufferError(Exception):
    """Base exception class for all util-buffer errors."""

    pass


class InvalidEncodingError(UtilBufferError, ValueError):
    """Exception raised when text does not match the lexical form of its encoding.

    Attributes:
        input: The rejected input.
        encoding: The encoding the input was declared to be in.
    """

    def __init__(self, input: Any, encoding: Any, reason: str | None = None) -> None:
        self.input = input
        self.encoding = encoding
        message = f"Invalid input: {input!r}\nencoding: {_tag(encoding)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class LengthMismatchError(UtilBufferError, ValueError):
    """Exception raised when XOR operands differ in length.

    Attributes:
        left: Length of the first operand.
        right: Length of the second operand.
    """

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Can not xor buffers with different lengths ({left} != {right})")


class UnsupportedFormatError(UtilBufferError, TypeError):
    """Exception raised when a buffer is built from an unrecognized source shape."""

    def __init__(self, source_type: str) -> None:
        self.source_type = source_type
        super().__init__(f"Not known format: {source_type}")


class UnknownEncodingError(UtilBufferError, ValueError):
    """Exception raised when dispatching on an unrecognized encoding tag."""

    def __init__(self, encoding: Any) -> None:
        self.encoding = encoding
        super().__init__(f"Unknown encoding: {encoding!r}")


class EntropyError(UtilBufferError):
    """Exception raised when an entropy source returns the wrong amount of data."""

    pass


def _tag(encoding: Any) -> str:
    return str(getattr(encoding, "value", encoding))
