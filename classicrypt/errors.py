"""
Cipher Errors

This module defines the exceptions raised by the ciphers. They derive
from ValueError so callers that already guard against bad input keep
working.
"""


class CipherError(ValueError):
    """Base class for all cipher failures."""


class InvalidLength(CipherError):
    """Ciphertext length is not a multiple of the block or chunk size."""


class MalformedPadding(CipherError):
    """Trailing padding is missing or inconsistent with the buffer."""


class InvalidKeyParameters(CipherError):
    """Key material cannot be used to build a working cipher."""
