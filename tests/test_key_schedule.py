"""Tests for the Feistel key schedule."""
import pytest

from classicrypt.errors import InvalidKeyParameters
from classicrypt.key_schedule.des_key_schedule import (
    derive_key_from_password,
    expand_key,
    generate_key,
    normalize_key,
    rotate_left,
)

REFERENCE_KEY = 0x133457799BBCDFF1

FAST_KDF = dict(time_cost=1, memory_cost=1024, parallelism=1)


def test_schedule_has_sixteen_48_bit_subkeys():
    subkeys = expand_key(REFERENCE_KEY)
    assert isinstance(subkeys, tuple)
    assert len(subkeys) == 16
    assert all(0 <= k < 1 << 48 for k in subkeys)


def test_reference_subkeys():
    subkeys = expand_key(REFERENCE_KEY)
    assert subkeys[0] == 0x1B02EFFC7072
    assert subkeys[15] == 0xCB3D8B0E17F5


def test_subkeys_are_distinct():
    subkeys = expand_key(REFERENCE_KEY)
    assert len(set(subkeys)) == 16


def test_parity_bits_are_ignored():
    # Only the least significant bit of each byte is dropped by PC-1
    assert expand_key(REFERENCE_KEY) == expand_key(REFERENCE_KEY ^ 0x0101010101010101)
    assert set(expand_key(0x0101010101010101)) == {0}


def test_bytes_key_matches_integer_key():
    assert expand_key(REFERENCE_KEY.to_bytes(8, 'big')) == expand_key(REFERENCE_KEY)


def test_rotate_left_wraps_within_28_bits():
    assert rotate_left(1 << 27, 1) == 1
    assert rotate_left(0b11, 2) == 0b1100
    assert rotate_left(0xFFFFFFF, 2) == 0xFFFFFFF
    assert rotate_left(0x80000001, 1, size=32) == 0x00000003


@pytest.mark.parametrize("key", [-1, 1 << 64, b"short", b"123456789", "key", True])
def test_invalid_keys(key):
    with pytest.raises(InvalidKeyParameters):
        normalize_key(key)


def test_generate_key_fits_64_bits():
    for _ in range(10):
        assert 0 <= generate_key() < 1 << 64


def test_password_derivation_is_deterministic_for_a_salt():
    salt = b"0123456789abcdef"
    key1, salt1 = derive_key_from_password("correct horse", salt=salt, **FAST_KDF)
    key2, _ = derive_key_from_password("correct horse", salt=salt, **FAST_KDF)
    other, _ = derive_key_from_password("battery staple", salt=salt, **FAST_KDF)

    assert salt1 == salt
    assert key1 == key2
    assert key1 != other
    assert 0 <= key1 < 1 << 64
    assert len(expand_key(key1)) == 16


def test_password_derivation_generates_salt():
    key, salt = derive_key_from_password("correct horse", **FAST_KDF)
    assert len(salt) == 16
    assert derive_key_from_password("correct horse", salt=salt, **FAST_KDF)[0] == key
