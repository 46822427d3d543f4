"""
RSA Chunk Codec

This module encrypts byte strings of any length with RSA by splitting them
into fixed-size chunks and exponentiating each chunk modulo n.

Ciphertext chunks are left-padded with zeros to a fixed width. Decrypted
chunks are serialized in minimal signed big-endian form, and a leading zero
byte (the sign byte) is dropped. A plaintext chunk that starts with zero
bytes therefore loses them on decryption.
"""

import logging
from typing import Optional

from ..errors import InvalidLength
from .key_generation import RSA_DEFAULT_PARAMS, RsaKeyMaterial, generate_key_material

logger = logging.getLogger(__name__)


def _to_signed_bytes(value: int) -> bytes:
    """Serialize a non-negative integer as minimal two's complement big-endian bytes."""
    return value.to_bytes(value.bit_length() // 8 + 1, byteorder='big')


class RSACipher:
    """
    Chunked RSA cipher.

    Key material is generated (or accepted) in the constructor and never
    changes afterwards.
    """

    def __init__(self,
                 bits: int = RSA_DEFAULT_PARAMS['bits'],
                 block_size: int = RSA_DEFAULT_PARAMS['block_size'],
                 exponent_strategy: str = RSA_DEFAULT_PARAMS['exponent_strategy'],
                 public_exponent: int = RSA_DEFAULT_PARAMS['public_exponent'],
                 key_material: Optional[RsaKeyMaterial] = None):
        """
        Initialize the cipher, generating a key pair unless one is supplied.

        Args:
            bits: Modulus length in bits
            block_size: Upper bound on plaintext chunk size in bytes
            exponent_strategy: 'fixed' or 'smallest_coprime'
            public_exponent: The exponent used by the fixed strategy
            key_material: Existing key material; the other arguments are
                ignored when it is given
        """
        if key_material is None:
            key_material = generate_key_material(
                bits=bits,
                block_size=block_size,
                exponent_strategy=exponent_strategy,
                public_exponent=public_exponent,
            )
        self._key_material = key_material

    @property
    def key_material(self) -> RsaKeyMaterial:
        return self._key_material

    @property
    def n(self) -> int:
        return self._key_material.n

    @property
    def e(self) -> int:
        return self._key_material.e

    @property
    def plaintext_chunk_size(self) -> int:
        return self._key_material.plaintext_chunk_size

    @property
    def ciphertext_chunk_size(self) -> int:
        return self._key_material.ciphertext_chunk_size

    def encrypt(self, data: bytes) -> bytes:
        """
        Encrypt data of any length.

        Args:
            data: The plaintext

        Returns:
            The concatenated ciphertext chunks
        """
        key = self._key_material
        output = bytearray()

        for offset in range(0, len(data), key.plaintext_chunk_size):
            chunk = data[offset:offset + key.plaintext_chunk_size]
            value = pow(int.from_bytes(chunk, byteorder='big'), key.e, key.n)
            output += value.to_bytes(key.ciphertext_chunk_size, byteorder='big')

        logger.debug("Encrypted %d bytes into %d chunks",
                     len(data), len(output) // key.ciphertext_chunk_size)
        return bytes(output)

    def decrypt(self, data: bytes) -> bytes:
        """
        Decrypt data produced by encrypt.

        Args:
            data: The concatenated ciphertext chunks

        Returns:
            The plaintext

        Raises:
            InvalidLength: If the data is not a whole number of chunks
        """
        key = self._key_material
        if len(data) % key.ciphertext_chunk_size != 0:
            raise InvalidLength(
                f"Data length must be a multiple of {key.ciphertext_chunk_size} bytes, got {len(data)}")

        output = bytearray()
        for offset in range(0, len(data), key.ciphertext_chunk_size):
            chunk = data[offset:offset + key.ciphertext_chunk_size]
            decoded = _to_signed_bytes(pow(int.from_bytes(chunk, byteorder='big'), key.d, key.n))
            if decoded[0] == 0:
                decoded = decoded[1:]
            output += decoded

        logger.debug("Decrypted %d chunks", len(data) // key.ciphertext_chunk_size)
        return bytes(output)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    rsa = RSACipher(bits=2048)
    message = b"### Compiles and hot-reloads for development"
    ciphertext = rsa.encrypt(message)
    print(f"Message:   {message!r}")
    print(f"Encrypted: {len(ciphertext)} bytes")
    print(f"Decrypted: {rsa.decrypt(ciphertext)!r}")
