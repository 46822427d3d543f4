"""
Feistel Key Schedule Implementation

This module expands a 64-bit master key into the 16 round subkeys of the
Feistel cipher, and provides helpers for producing master keys.
"""

import logging
import secrets
from typing import Optional, Tuple, Union

import argon2
from argon2.low_level import Type

from ..cipher_core.permutation import permute
from ..cipher_core.tables import PC1, PC2, SHIFTS
from ..errors import InvalidKeyParameters

logger = logging.getLogger(__name__)

NUM_ROUNDS = 16
KEY_SIZE = 8  # bytes
HALF_KEY_BITS = 28

# Default parameters for Argon2id
KDF_DEFAULT_PARAMS = {
    'time_cost': 4,       # Number of iterations
    'memory_cost': 65536, # 64 MB
    'parallelism': 4,     # Number of threads
    'salt_len': 16        # Salt size in bytes
}


def rotate_left(value: int, shift: int, size: int = HALF_KEY_BITS) -> int:
    """
    Rotate a value left by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by
        size: The bit size of the value (default: 28, one key half)

    Returns:
        The rotated value
    """
    return ((value << shift) | (value >> (size - shift))) & ((1 << size) - 1)


def normalize_key(key: Union[int, bytes]) -> int:
    """
    Convert a master key to a 64-bit integer.

    Args:
        key: An integer in [0, 2**64) or 8 big-endian bytes

    Returns:
        The key as an integer

    Raises:
        InvalidKeyParameters: If the key does not fit in 64 bits
    """
    if isinstance(key, (bytes, bytearray)):
        if len(key) != KEY_SIZE:
            raise InvalidKeyParameters(f"Key must be exactly {KEY_SIZE} bytes")
        return int.from_bytes(key, byteorder='big')

    if isinstance(key, bool) or not isinstance(key, int):
        raise InvalidKeyParameters(f"Unsupported key type: {type(key).__name__}")
    if not 0 <= key < 1 << 64:
        raise InvalidKeyParameters("Key must fit in 64 unsigned bits")
    return key


def expand_key(master_key: Union[int, bytes]) -> Tuple[int, ...]:
    """
    Expand a master key into the round subkeys.

    PC-1 drops the eight parity bits, the remaining 56 bits are split into
    two 28-bit halves that rotate left each round, and PC-2 selects 48 of
    the rotated bits as that round's subkey.

    Args:
        master_key: The 64-bit master key

    Returns:
        A tuple of 16 48-bit subkeys, first round first
    """
    key = normalize_key(master_key)

    selected = permute(key, PC1, 64)
    c = selected >> HALF_KEY_BITS
    d = selected & ((1 << HALF_KEY_BITS) - 1)

    subkeys = []
    for shift in SHIFTS:
        c = rotate_left(c, shift)
        d = rotate_left(d, shift)
        subkeys.append(permute((c << HALF_KEY_BITS) | d, PC2, 56))

    logger.debug("Expanded master key into %d subkeys", len(subkeys))
    return tuple(subkeys)


def generate_key() -> int:
    """
    Generate a cryptographically secure random master key.

    Returns:
        A random 64-bit key
    """
    return secrets.randbits(64)


def derive_key_from_password(password: str,
                             salt: Optional[bytes] = None,
                             time_cost: int = KDF_DEFAULT_PARAMS['time_cost'],
                             memory_cost: int = KDF_DEFAULT_PARAMS['memory_cost'],
                             parallelism: int = KDF_DEFAULT_PARAMS['parallelism']) -> Tuple[int, bytes]:
    """
    Derive a master key from a password using Argon2id.

    Args:
        password: The password to derive the key from
        salt: Optional salt (will be generated if not provided)
        time_cost: Number of iterations
        memory_cost: Memory usage in KiB
        parallelism: Degree of parallelism

    Returns:
        A tuple of (key, salt)
    """
    if salt is None:
        salt = secrets.token_bytes(KDF_DEFAULT_PARAMS['salt_len'])

    raw = argon2.low_level.hash_secret_raw(
        secret=password.encode('utf-8'),
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=KEY_SIZE,
        type=Type.ID  # Argon2id variant
    )

    return int.from_bytes(raw, byteorder='big'), salt


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    master_key = generate_key()
    round_keys = expand_key(master_key)
    for i, rk in enumerate(round_keys):
        print(f"K{i + 1:<2} = {rk:012x}")
