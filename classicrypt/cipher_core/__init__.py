"""
Cipher Core Package

This package implements the Feistel block cipher: the bit permutation
engine, the static tables, the round function, padding and the
encryption/decryption operations.
"""

from .block_cipher import DESCipher, encrypt_block, decrypt_block
from .padding import pkcs5_pad, pkcs5_unpad
from .permutation import permute

__all__ = ['DESCipher', 'encrypt_block', 'decrypt_block', 'pkcs5_pad', 'pkcs5_unpad', 'permute']
