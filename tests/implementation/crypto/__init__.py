"""Crypto test implementations package.

This package provides test doubles for the util-buffer crypto interfaces.
"""

from .entropy import CountingEntropy, ShortEntropy

__all__ = [
    "CountingEntropy",
    "ShortEntropy",
]
