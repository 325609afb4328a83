"""Default provider implementations.

This package provides the standard-library backed implementations of the
util-buffer interfaces used when no other provider is configured.
"""

from .base64 import StandardBase64
from .entropy import SystemEntropy

__all__ = [
    "StandardBase64",
    "SystemEntropy",
]
