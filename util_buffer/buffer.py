"""Buffer facade.

This module provides :class:`UtilBuffer`, an immutable byte buffer that can be
built from, and written to, UTF-8, Base64, Base64URL and hex text, and that
supports concatenation, XOR, comparison and random generation.
"""

from __future__ import annotations

import array
import logging
import re
from typing import Any, Optional, Union

from util_buffer import operations
from util_buffer.codecs import base64 as base64_codec
from util_buffer.codecs import hex as hex_codec
from util_buffer.codecs import utf8 as utf8_codec
from util_buffer.config import UtilBufferConfig, get_config
from util_buffer.encoding import Encoding, decode, encode
from util_buffer.exceptions import InvalidEncodingError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# array.array typecodes and memoryview formats of unsigned integers
_UNSIGNED_FORMATS = frozenset("BHILQ")


def _expand_big_endian(values: Any, itemsize: int) -> bytes:
    out = bytearray(len(values) * itemsize)
    for i, value in enumerate(values):
        out[i * itemsize : (i + 1) * itemsize] = value.to_bytes(itemsize, "big")
    return bytes(out)


def _to_bytes(source: Any) -> bytes:
    """Normalize a binary source into ``bytes``.

    Multi-byte unsigned elements are written most significant byte first, so
    ``array("H", [0xA1B1])`` becomes ``b"\\xa1\\xb1"`` on any host.

    Raises:
        UnsupportedFormatError: If the source is not a recognized binary shape.
    """
    if type(source) is bytes:
        return source
    if isinstance(source, UtilBuffer):
        return source.get_array()
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, array.array):
        if source.typecode not in _UNSIGNED_FORMATS:
            raise UnsupportedFormatError(f"array('{source.typecode}')")
        if source.itemsize == 1:
            return source.tobytes()
        return _expand_big_endian(source, source.itemsize)
    if isinstance(source, memoryview):
        try:
            fmt = source.format.lstrip("@=<>!")
            ndim = source.ndim
        except ValueError:
            # released view
            raise UnsupportedFormatError("memoryview (released)") from None
        if ndim != 1 or fmt not in _UNSIGNED_FORMATS:
            raise UnsupportedFormatError(f"memoryview('{source.format}', ndim={ndim})")
        if source.itemsize == 1:
            return source.tobytes()
        return _expand_big_endian(source.tolist(), source.itemsize)
    raise UnsupportedFormatError(type(source).__name__)


class UtilBuffer:
    """Immutable byte buffer with a default text encoding.

    A buffer is built either from binary data or from text in a declared
    encoding, and never changes afterwards. Every transforming operation
    returns a new buffer.

    Attributes:
        length: Number of bytes held.
        default_encoding: Encoding used by :meth:`to` when none is given.
        config: Providers used for Base64 and random generation.

    Example:
        >>> buff = UtilBuffer.from_string("Input string for buffer")
        >>> buff.to_base64_url()
        'SW5wdXQgc3RyaW5nIGZvciBidWZmZXI'
    """

    BASE64_RE = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")
    HEX_RE = re.compile(r"(?:0[xX])?(?:[0-9a-fA-F]{2})*")
    BASE64URL_RE = re.compile(r"(?:[A-Za-z0-9_-]{4})*(?:[A-Za-z0-9_-]{2}(?:==)?|[A-Za-z0-9_-]{3}=?)?")

    def __init__(
        self,
        input_data: Union[str, bytes, bytearray, memoryview, array.array, UtilBuffer],
        default_encoding: Union[Encoding, str] = Encoding.UTF8,
        config: Optional[UtilBufferConfig] = None,
    ) -> None:
        """Initialize a buffer.

        Args:
            input_data: Text in ``default_encoding``, or binary data.
            default_encoding: Encoding of text input, and the encoding
                :meth:`to` writes when called without one.
            config: Providers to use. Defaults to the process-wide
                configuration.

        Raises:
            InvalidEncodingError: If text input does not match its encoding.
            UnknownEncodingError: If the encoding is not recognized.
            UnsupportedFormatError: If binary input has an unknown shape.
        """
        self._config = config if config is not None else get_config()
        self._default_encoding = Encoding.parse(default_encoding)
        if isinstance(input_data, str):
            UtilBuffer.validate_input(input_data, self._default_encoding)
            self._buffer = decode(input_data, self._default_encoding, self._config)
        else:
            self._buffer = _to_bytes(input_data)

    @property
    def length(self) -> int:
        return len(self._buffer)

    @property
    def default_encoding(self) -> Encoding:
        return self._default_encoding

    @property
    def config(self) -> UtilBufferConfig:
        return self._config

    # Construction

    @classmethod
    def from_bytes(
        cls,
        source: Union[bytes, bytearray, memoryview, array.array, UtilBuffer],
        default_encoding: Union[Encoding, str] = Encoding.UTF8,
        config: Optional[UtilBufferConfig] = None,
    ) -> UtilBuffer:
        """Build a buffer from binary data.

        Raises:
            UnsupportedFormatError: If the source is not bytes-like, an
                unsigned ``array.array`` or an unsigned ``memoryview``.
        """
        if isinstance(source, str):
            raise UnsupportedFormatError("str")
        return cls(source, default_encoding, config)

    @classmethod
    def from_text(
        cls,
        text: str,
        encoding: Union[Encoding, str] = Encoding.UTF8,
        config: Optional[UtilBufferConfig] = None,
    ) -> UtilBuffer:
        """Build a buffer from text in the given encoding.

        Raises:
            InvalidEncodingError: If the text does not match the encoding.
        """
        if not isinstance(text, str):
            raise InvalidEncodingError(text, encoding, "expected str")
        return cls(text, encoding, config)

    @classmethod
    def from_string(cls, input_string: str, config: Optional[UtilBufferConfig] = None) -> UtilBuffer:
        return cls.from_text(input_string, Encoding.UTF8, config)

    @classmethod
    def from_base64(cls, input_string: str, config: Optional[UtilBufferConfig] = None) -> UtilBuffer:
        return cls.from_text(input_string, Encoding.BASE64, config)

    @classmethod
    def from_base64_url(cls, input_string: str, config: Optional[UtilBufferConfig] = None) -> UtilBuffer:
        return cls.from_text(input_string, Encoding.BASE64URL, config)

    @classmethod
    def from_hex(cls, input_string: str, config: Optional[UtilBufferConfig] = None) -> UtilBuffer:
        return cls.from_text(input_string, Encoding.HEX, config)

    @classmethod
    def random(cls, length_in_bytes: int, config: Optional[UtilBufferConfig] = None) -> UtilBuffer:
        """Build a buffer of cryptographically random bytes.

        Args:
            length_in_bytes: Number of bytes, zero or more.
            config: Supplies the entropy source. Defaults to the
                process-wide configuration.

        Returns:
            A buffer of exactly ``length_in_bytes`` bytes.
        """
        config = config if config is not None else get_config()
        return cls(operations.random(length_in_bytes, config.crypto.entropy), config=config)

    @staticmethod
    def validate_input(input: str, encoding: Union[Encoding, str]) -> None:
        """Check text against the lexical form of an encoding.

        Args:
            input: The text to check.
            encoding: The encoding it claims to be in.

        Raises:
            InvalidEncodingError: If the text does not match.
            UnknownEncodingError: If the encoding is not recognized.
        """
        encoding = Encoding.parse(encoding)
        if encoding is Encoding.UTF8:
            return  # Valid strings are always utf8
        elif encoding is Encoding.HEX:
            pattern = UtilBuffer.HEX_RE
        elif encoding is Encoding.BASE64:
            pattern = UtilBuffer.BASE64_RE
        elif encoding is Encoding.BASE64URL:
            pattern = UtilBuffer.BASE64URL_RE
        else:
            pattern = None

        if pattern is None or not pattern.fullmatch(input):
            logger.debug("Rejected %s input of length %d", encoding.value, len(input))
            raise InvalidEncodingError(input, encoding)

    # Output

    def get_array(self) -> bytes:
        return self._buffer

    def to_bytes(self) -> bytes:
        return self._buffer

    def to_bytearray(self) -> bytearray:
        """Return a mutable copy of the bytes. Changes to it do not affect the buffer."""
        return bytearray(self._buffer)

    def to(
        self,
        encoding: Union[Encoding, str, None] = None,
        with_option: bool = False,
    ) -> Union[str, bytes]:
        """Write the buffer in the requested representation.

        Args:
            encoding: Target representation. Defaults to the buffer's default
                encoding.
            with_option: ``0x`` prefix for HEX, padding for BASE64URL.

        Returns:
            The text form, or ``bytes`` for RAW.

        Raises:
            UnknownEncodingError: If the encoding is not recognized.
        """
        if encoding is None:
            encoding = self._default_encoding
        return encode(self._buffer, encoding, self._config, with_option)

    def to_string(self, surrogate_pairs: bool = False) -> str:
        return utf8_codec.decode(self._buffer, surrogate_pairs)

    def to_hex(self, with_prefix: bool = False) -> str:
        return hex_codec.encode(self._buffer, with_prefix)

    def to_base64(self) -> str:
        return base64_codec.encode(self._buffer, self._config.encoding.base64)

    def to_base64_url(self, with_padding: bool = False) -> str:
        return base64_codec.encode_url(self._buffer, self._config.encoding.base64, with_padding)

    # Binary operations

    def copy(self) -> UtilBuffer:
        """Return a buffer holding an independent copy of the bytes."""
        return UtilBuffer(bytes(bytearray(self._buffer)), self._default_encoding, self._config)

    @classmethod
    def concat(cls, a: UtilBuffer, b: UtilBuffer) -> UtilBuffer:
        """Return a new buffer with the bytes of ``a`` followed by those of ``b``."""
        return cls(operations.concat(a.get_array(), b.get_array()), a.default_encoding, a.config)

    @classmethod
    def xor(cls, a: UtilBuffer, b: UtilBuffer) -> UtilBuffer:
        """Return the byte-wise XOR of two buffers of equal length.

        Raises:
            LengthMismatchError: If the buffers differ in length.
        """
        return cls(operations.xor(a.get_array(), b.get_array()), a.default_encoding, a.config)

    def equals(self, buff_to_compare: Any) -> bool:
        """Compare byte content with another buffer or bytes-like object.

        Never raises: anything that cannot be read as bytes compares unequal.
        The comparison is not constant time.
        """
        try:
            other = _to_bytes(buff_to_compare)
        except UnsupportedFormatError:
            return False
        return operations.equals(self._buffer, other)

    def constant_time_equals(self, buff_to_compare: Any) -> bool:
        """Compare byte content in time independent of where the bytes differ."""
        try:
            other = _to_bytes(buff_to_compare)
        except UnsupportedFormatError:
            return False
        return operations.constant_time_equals(self._buffer, other)

    # Python protocols

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return self._buffer

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtilBuffer):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._buffer)

    def __repr__(self) -> str:
        return f"UtilBuffer(hex={self.to_hex()!r}, default_encoding={self._default_encoding.value!r})"
