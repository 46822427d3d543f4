"""
RSA Package

This package implements RSA key generation and the chunk codec that
encrypts arbitrary-length data with it.
"""

from .key_generation import RsaKeyMaterial, generate_key_material, RSA_DEFAULT_PARAMS
from .chunk_codec import RSACipher

__all__ = ['RSACipher', 'RsaKeyMaterial', 'generate_key_material', 'RSA_DEFAULT_PARAMS']
