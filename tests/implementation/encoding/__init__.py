"""Encoding test implementations package.

This package provides test doubles for the util-buffer encoding interfaces.
"""

from .base64 import RecordingBase64

__all__ = [
    "RecordingBase64",
]
