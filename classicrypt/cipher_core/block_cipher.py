"""
Block Cipher Implementation

This module provides the Feistel block cipher: a 64-bit block, 16-round
network with DES tables, and byte-level encryption of arbitrary data with
PKCS#5 padding.
"""

import logging
from typing import Sequence, Tuple, Union

from ..errors import InvalidLength
from ..key_schedule.des_key_schedule import expand_key, normalize_key
from .padding import BLOCK_SIZE, pkcs5_pad, pkcs5_unpad
from .permutation import permute
from .round_function import feistel
from .tables import IP, IP_INV

logger = logging.getLogger(__name__)

# Blocks are packed from bytes with byte 0 as the least significant byte
BYTE_ORDER = 'little'

HALF_MASK = 0xFFFFFFFF


def _feistel_rounds(block: int, subkeys: Sequence[int]) -> int:
    """
    Run the Feistel network over one 64-bit block.

    The halves are recombined as R || L after the last round, so the same
    routine decrypts when given the subkeys in reverse order.
    """
    block = permute(block, IP, 64)
    left, right = block >> 32, block & HALF_MASK

    for subkey in subkeys:
        left, right = right, left ^ feistel(right, subkey)

    return permute((right << 32) | left, IP_INV, 64)


class DESCipher:
    """
    DES-style Feistel block cipher with a 64-bit key.

    Subkeys are derived once in the constructor; the instance is read-only
    afterwards and can be shared between threads.
    """

    block_size = BLOCK_SIZE

    def __init__(self, key: Union[int, bytes]):
        """
        Initialize the cipher with a master key.

        Args:
            key: The 64-bit master key as an integer or 8 big-endian bytes
        """
        self._key = normalize_key(key)
        self._subkeys = expand_key(self._key)
        self._reverse_subkeys = tuple(reversed(self._subkeys))
        logger.info("Feistel cipher ready with %d round subkeys", len(self._subkeys))

    @property
    def key(self) -> int:
        return self._key

    @property
    def subkeys(self) -> Tuple[int, ...]:
        return self._subkeys

    def encrypt_block(self, block: int) -> int:
        """Encrypt a single 64-bit block."""
        return _feistel_rounds(block, self._subkeys)

    def decrypt_block(self, block: int) -> int:
        """Decrypt a single 64-bit block."""
        return _feistel_rounds(block, self._reverse_subkeys)

    def _process(self, data: bytes, decrypt: bool) -> bytes:
        crypt_block = self.decrypt_block if decrypt else self.encrypt_block
        output = bytearray()

        for offset in range(0, len(data), BLOCK_SIZE):
            block = int.from_bytes(data[offset:offset + BLOCK_SIZE], BYTE_ORDER)
            output += crypt_block(block).to_bytes(BLOCK_SIZE, BYTE_ORDER)

        return bytes(output)

    def encrypt(self, data: bytes) -> bytes:
        """
        Encrypt data of any length.

        Args:
            data: The plaintext

        Returns:
            The ciphertext, padded to a multiple of 8 bytes
        """
        padded = pkcs5_pad(data, BLOCK_SIZE)
        logger.debug("Encrypting %d blocks", len(padded) // BLOCK_SIZE)
        return self._process(padded, decrypt=False)

    def decrypt(self, data: bytes) -> bytes:
        """
        Decrypt data produced by encrypt.

        Args:
            data: The ciphertext

        Returns:
            The plaintext with padding removed

        Raises:
            InvalidLength: If the ciphertext is not a multiple of 8 bytes
            MalformedPadding: If the decrypted padding is inconsistent
        """
        if len(data) % BLOCK_SIZE != 0:
            raise InvalidLength(f"Data length must be a multiple of {BLOCK_SIZE} bytes, got {len(data)}")

        logger.debug("Decrypting %d blocks", len(data) // BLOCK_SIZE)
        return pkcs5_unpad(self._process(data, decrypt=True), BLOCK_SIZE)


def encrypt_block(block: int, key: Union[int, bytes]) -> int:
    """
    Convenience function to encrypt a single block.

    Args:
        block: The 64-bit plaintext block
        key: The master key

    Returns:
        The encrypted block
    """
    return DESCipher(key).encrypt_block(block)


def decrypt_block(block: int, key: Union[int, bytes]) -> int:
    """
    Convenience function to decrypt a single block.

    Args:
        block: The 64-bit ciphertext block
        key: The master key

    Returns:
        The decrypted block
    """
    return DESCipher(key).decrypt_block(block)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    cipher = DESCipher(2019216864)
    message = b"Hello World!"
    ciphertext = cipher.encrypt(message)
    print(f"Message:   {message!r}")
    print(f"Encrypted: {ciphertext.hex()}")
    print(f"Decrypted: {cipher.decrypt(ciphertext)!r}")
