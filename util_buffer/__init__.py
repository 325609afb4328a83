"""Util-buffer Python implementation.

This package provides an immutable byte buffer with lossless conversion to and
from UTF-8, Base64, Base64URL and hexadecimal text, plus concatenation, XOR,
comparison and random generation.

Main Components:
    - UtilBuffer: The buffer facade
    - Encoding: Closed set of supported text encodings
    - Codecs: UTF-8, hex and Base64/Base64URL conversion over plain bytes
    - Interfaces: Protocol definitions for entropy and Base64 providers
    - Configuration: Provider selection, per buffer or process wide

Example:
    >>> from util_buffer import UtilBuffer
    >>> UtilBuffer.from_string("Input string for buffer").to_base64()
    'SW5wdXQgc3RyaW5nIGZvciBidWZmZXI='
"""

import logging

from util_buffer.buffer import UtilBuffer
from util_buffer.config import (
    CryptoConfig,
    EncodingConfig,
    UtilBufferConfig,
    configure,
    get_config,
    reset_config,
)
from util_buffer.encoding import Encoding
from util_buffer.exceptions import (
    EntropyError,
    InvalidEncodingError,
    LengthMismatchError,
    UnknownEncodingError,
    UnsupportedFormatError,
    UtilBufferError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Buffer
    "UtilBuffer",
    "Encoding",
    # Configuration
    "UtilBufferConfig",
    "CryptoConfig",
    "EncodingConfig",
    "configure",
    "get_config",
    "reset_config",
    # Exceptions
    "UtilBufferError",
    "InvalidEncodingError",
    "LengthMismatchError",
    "UnsupportedFormatError",
    "UnknownEncodingError",
    "EntropyError",
]
