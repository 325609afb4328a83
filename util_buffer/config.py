"""Util-buffer configuration.

Buffers do not look at the host platform to decide where random bytes or
Base64 come from. Those capabilities are described by the dataclasses in this
module and either passed to a buffer explicitly or installed once, process
wide, with :func:`configure`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from util_buffer.interfaces import IBase64, IEntropySource
from util_buffer.providers import StandardBase64, SystemEntropy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CryptoConfig:
    """Configuration for cryptographic operations.

    Attributes:
        entropy: Source of random bytes for ``random``.
    """

    entropy: IEntropySource


@dataclass(frozen=True)
class EncodingConfig:
    """Configuration for encoding operations.

    Attributes:
        base64: Standard Base64 primitive the Base64URL transform builds on.
    """

    base64: IBase64


@dataclass(frozen=True)
class UtilBufferConfig:
    """Configuration for all util-buffer operations.

    Attributes:
        crypto: Cryptographic configuration.
        encoding: Encoding configuration.
    """

    crypto: CryptoConfig
    encoding: EncodingConfig

    @classmethod
    def default(cls) -> UtilBufferConfig:
        """Build the configuration backed by the standard library.

        Returns:
            A configuration using ``secrets`` for entropy and ``base64`` for
            the Base64 primitive.
        """
        return cls(
            crypto=CryptoConfig(entropy=SystemEntropy()),
            encoding=EncodingConfig(base64=StandardBase64()),
        )


_config: Optional[UtilBufferConfig] = None


def configure(config: UtilBufferConfig) -> None:
    """Install the process-wide configuration.

    Meant to be called once at startup, before buffers are shared between
    threads.

    Args:
        config: The configuration to use when none is passed explicitly.
    """
    global _config
    logger.debug(
        "Configuring util-buffer: entropy=%s base64=%s",
        type(config.crypto.entropy).__name__,
        type(config.encoding.base64).__name__,
    )
    _config = config


def get_config() -> UtilBufferConfig:
    """Return the process-wide configuration, building the default on first use."""
    global _config
    if _config is None:
        _config = UtilBufferConfig.default()
    return _config


def reset_config() -> None:
    """Drop any installed configuration so the default is used again."""
    global _config
    _config = None
