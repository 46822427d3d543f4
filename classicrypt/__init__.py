"""
classicrypt - Classical Cipher Library

This library implements two classical ciphers from first principles
behind one encrypt/decrypt interface.

Key Features:
- 64-bit Feistel block cipher with DES tables and 16 rounds
- PKCS#5 padding for arbitrary-length data
- RSA key generation from probable primes
- Chunked RSA encryption of arbitrary-length data
- Text and file helpers over either cipher

"""

from .cipher_core import DESCipher
from .key_schedule import expand_key, generate_key, derive_key_from_password
from .rsa import RSACipher, RsaKeyMaterial, generate_key_material
from .capability import CipherCapability, CipherAdapter
from .errors import CipherError, InvalidLength, MalformedPadding, InvalidKeyParameters

__version__ = '0.1.0'
__author__ = 'classicrypt Team'

__all__ = [
    'DESCipher', 'RSACipher', 'RsaKeyMaterial', 'generate_key_material',
    'expand_key', 'generate_key', 'derive_key_from_password',
    'CipherCapability', 'CipherAdapter',
    'CipherError', 'InvalidLength', 'MalformedPadding', 'InvalidKeyParameters',
]
