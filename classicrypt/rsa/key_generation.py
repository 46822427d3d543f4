"""
RSA Key Pair Generation

This module generates RSA key material from two probable primes and
derives the chunk sizes used by the chunk codec.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from Cryptodome.Util.number import GCD, getPrime, inverse

from ..errors import InvalidKeyParameters

logger = logging.getLogger(__name__)

FIXED_EXPONENT = 'fixed'
SMALLEST_COPRIME_EXPONENT = 'smallest_coprime'
EXPONENT_STRATEGIES = (FIXED_EXPONENT, SMALLEST_COPRIME_EXPONENT)

# Default parameters for key generation
RSA_DEFAULT_PARAMS = {
    'bits': 1024,                    # Modulus length
    'block_size': 512,               # Upper bound on plaintext chunk size in bytes
    'exponent_strategy': FIXED_EXPONENT,
    'public_exponent': 65537,        # Used by the fixed strategy
}


def plaintext_chunk_size(bits: int, block_size: int) -> int:
    """Largest plaintext chunk, in bytes, for a modulus of `bits` bits."""
    return min((bits - 1) // 8, block_size)


def ciphertext_chunk_size(n: int) -> int:
    """Encoded ciphertext chunk size, one byte wider than the modulus."""
    return (n.bit_length() + 7) // 8 + 1


@dataclass(frozen=True)
class RsaKeyMaterial:
    """RSA key components and the chunk sizes derived from them."""
    n: int
    e: int
    d: int = field(repr=False)
    bits: int
    plaintext_chunk_size: int
    ciphertext_chunk_size: int

    def __post_init__(self):
        if self.plaintext_chunk_size < 1:
            raise InvalidKeyParameters(
                f"A {self.bits}-bit modulus cannot hold a plaintext chunk")
        if self.plaintext_chunk_size >= self.ciphertext_chunk_size:
            raise InvalidKeyParameters("Plaintext chunks must be smaller than ciphertext chunks")
        if 1 << (8 * self.plaintext_chunk_size) >= self.n:
            raise InvalidKeyParameters(
                f"Modulus is too small for {self.plaintext_chunk_size}-byte chunks")

    @classmethod
    def from_components(cls, n: int, e: int, d: int, bits: int,
                        block_size: int = RSA_DEFAULT_PARAMS['block_size']) -> 'RsaKeyMaterial':
        """
        Rebuild key material from components agreed out of band.

        Args:
            n: The modulus
            e: The public exponent
            d: The private exponent
            bits: The modulus length the key was generated for
            block_size: Upper bound on plaintext chunk size in bytes

        Returns:
            Validated key material

        Raises:
            InvalidKeyParameters: If the components do not form a usable key
        """
        if block_size < 1:
            raise InvalidKeyParameters("Block size must be at least 1 byte")
        if n < 3 or pow(pow(2, e, n), d, n) != 2:
            raise InvalidKeyParameters("Exponents are not inverse modulo n")

        return cls(
            n=n,
            e=e,
            d=d,
            bits=bits,
            plaintext_chunk_size=plaintext_chunk_size(bits, block_size),
            ciphertext_chunk_size=ciphertext_chunk_size(n),
        )


def smallest_coprime_exponent(m: int) -> int:
    """
    Find the smallest odd exponent, starting at 3, that is coprime to m.

    Args:
        m: The totient

    Returns:
        The exponent
    """
    e = 3
    while GCD(e, m) != 1:
        e += 2
    return e


def generate_key_material(bits: int = RSA_DEFAULT_PARAMS['bits'],
                          block_size: int = RSA_DEFAULT_PARAMS['block_size'],
                          exponent_strategy: str = RSA_DEFAULT_PARAMS['exponent_strategy'],
                          public_exponent: Optional[int] = RSA_DEFAULT_PARAMS['public_exponent']) -> RsaKeyMaterial:
    """
    Generate an RSA key pair.

    Both primes are probable primes of bits // 2 bits. A composite that
    passes the primality test is an accepted residual risk.

    Args:
        bits: Modulus length in bits
        block_size: Upper bound on plaintext chunk size in bytes
        exponent_strategy: 'fixed' to use public_exponent, or
            'smallest_coprime' to search upward from 3
        public_exponent: The exponent used by the fixed strategy

    Returns:
        The generated key material

    Raises:
        InvalidKeyParameters: If the parameters cannot produce a working key
    """
    if exponent_strategy not in EXPONENT_STRATEGIES:
        raise InvalidKeyParameters(
            f"Exponent strategy must be one of {', '.join(EXPONENT_STRATEGIES)}")
    if block_size < 1:
        raise InvalidKeyParameters("Block size must be at least 1 byte")
    if plaintext_chunk_size(bits, block_size) < 1:
        raise InvalidKeyParameters(f"A {bits}-bit modulus cannot hold a plaintext chunk")

    logger.info("Generating %d-bit RSA key pair", bits)
    p = getPrime(bits // 2)
    q = getPrime(bits // 2)
    if p == q:
        raise InvalidKeyParameters("Generated primes are equal")

    n = p * q
    m = (p - 1) * (q - 1)

    if exponent_strategy == SMALLEST_COPRIME_EXPONENT:
        e = smallest_coprime_exponent(m)
    else:
        e = public_exponent
        if e is None or e < 3 or GCD(e, m) != 1:
            raise InvalidKeyParameters(f"Public exponent {e} is not coprime to the totient")

    d = inverse(e, m)

    material = RsaKeyMaterial(
        n=n,
        e=e,
        d=d,
        bits=bits,
        plaintext_chunk_size=plaintext_chunk_size(bits, block_size),
        ciphertext_chunk_size=ciphertext_chunk_size(n),
    )
    logger.debug("RSA chunk sizes: plaintext %d bytes, ciphertext %d bytes",
                 material.plaintext_chunk_size, material.ciphertext_chunk_size)
    return material
