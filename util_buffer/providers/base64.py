"""Base64 encoding utilities.

This module provides the standard-library backed Base64 primitive.
"""

import base64

from util_buffer.interfaces.encoding import IBase64


class StandardBase64(IBase64):
    """Base64 primitive using the standard alphabet.

    Encoding always produces padded output. Decoding is strict: characters
    outside the alphabet and bad padding raise ``binascii.Error``.
    """

    def encode(self, data: bytes) -> str:
        """Encode bytes to a standard Base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            A padded Base64 encoded string.
        """
        return base64.b64encode(data).decode("ascii")

    def decode(self, base64_str: str) -> bytes:
        """Decode a standard Base64 string to bytes.

        Args:
            base64_str: The base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            binascii.Error: If the input is not valid Base64.
        """
        return base64.b64decode(base64_str, validate=True)
