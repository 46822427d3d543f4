"""
Key Schedule Package

This package implements the key expansion that turns a 64-bit master key
into the 16 round subkeys of the Feistel cipher.
"""

from .des_key_schedule import expand_key, generate_key, derive_key_from_password

__all__ = ['expand_key', 'generate_key', 'derive_key_from_password']
