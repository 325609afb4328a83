"""Util-buffer interfaces package.

This package provides protocol definitions for the external capabilities the
codecs consume: an entropy source and a standard Base64 primitive.
"""

from .crypto import IEntropySource
from .encoding import IBase64

__all__ = [
    # crypto
    "IEntropySource",
    # encoding
    "IBase64",
]
