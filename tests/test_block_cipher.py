"""Tests for the Feistel block cipher."""
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings
from hypothesis.strategies import binary, integers

from classicrypt.cipher_core.block_cipher import DESCipher, decrypt_block, encrypt_block
from classicrypt.errors import InvalidLength, MalformedPadding

KEY = 2019216864


@pytest.fixture(scope="module")
def cipher():
    return DESCipher(KEY)


def _raw_block(cipher, plaintext_block):
    """Encrypt one unpadded 8-byte block with the cipher's byte order."""
    block = cipher.encrypt_block(int.from_bytes(plaintext_block, 'little'))
    return block.to_bytes(8, 'little')


@pytest.mark.parametrize("key, plaintext, ciphertext", [
    (0x133457799BBCDFF1, 0x0123456789ABCDEF, 0x85E813540F0AB405),
    (0x0E329232EA6D0D73, 0x8787878787878787, 0x0000000000000000),
])
def test_known_answer_vectors(key, plaintext, ciphertext):
    des = DESCipher(key)
    assert des.encrypt_block(plaintext) == ciphertext
    assert des.decrypt_block(ciphertext) == plaintext


def test_convenience_functions():
    assert encrypt_block(0x0123456789ABCDEF, 0x133457799BBCDFF1) == 0x85E813540F0AB405
    assert decrypt_block(0x85E813540F0AB405, 0x133457799BBCDFF1) == 0x0123456789ABCDEF


def test_hello_world(cipher):
    message = "Hello World!".encode()
    ciphertext = cipher.encrypt(message)

    assert len(message) == 12
    assert len(ciphertext) == 16
    assert cipher.decrypt(ciphertext) == message


def test_blocks_are_packed_little_endian(cipher):
    plaintext = b"ABCDEFGH"
    ciphertext = cipher.encrypt(plaintext)
    assert ciphertext[:8] == _raw_block(cipher, plaintext)
    assert ciphertext[8:] == _raw_block(cipher, b"\x08" * 8)


def test_empty_input_encrypts_to_one_padding_block(cipher):
    ciphertext = cipher.encrypt(b"")
    assert len(ciphertext) == 8
    assert cipher.decrypt(ciphertext) == b""


def test_ten_byte_ciphertext_is_rejected(cipher):
    with pytest.raises(InvalidLength):
        cipher.decrypt(bytes(10))


def test_invalid_length_is_a_value_error(cipher):
    with pytest.raises(ValueError):
        cipher.decrypt(b"\x01")


@pytest.mark.parametrize("last_byte", [0x00, 0x09, 0xFF])
def test_inconsistent_padding_is_rejected(cipher, last_byte):
    ciphertext = _raw_block(cipher, b"ABCDEFG" + bytes([last_byte]))
    with pytest.raises(MalformedPadding):
        cipher.decrypt(ciphertext)


def test_different_keys_give_different_ciphertexts():
    message = b"attack at dawn"
    assert DESCipher(1).encrypt(message) != DESCipher(2).encrypt(message)


def test_key_state_is_read_only(cipher):
    assert cipher.key == KEY
    assert len(cipher.subkeys) == 16
    with pytest.raises(AttributeError):
        cipher.subkeys = ()
    with pytest.raises(AttributeError):
        cipher.key = 0


def test_bytes_key(cipher):
    assert DESCipher(KEY.to_bytes(8, 'big')).encrypt(b"same key") == cipher.encrypt(b"same key")


def test_shared_instance_across_threads(cipher):
    messages = [bytes([i]) * i for i in range(40)]
    ciphertexts = [cipher.encrypt(m) for m in messages]

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(cipher.decrypt, ciphertexts))

    assert results == messages


@given(binary(max_size=128))
@settings(deadline=None)
def test_round_trip(data):
    des = DESCipher(KEY)
    assert des.decrypt(des.encrypt(data)) == data


@given(binary(max_size=128))
@settings(deadline=None)
def test_ciphertext_growth(data):
    ciphertext = DESCipher(KEY).encrypt(data)
    assert len(ciphertext) > 0
    assert len(ciphertext) % 8 == 0
    assert len(ciphertext) == (len(data) // 8 + 1) * 8


@given(integers(min_value=0, max_value=(1 << 64) - 1), integers(min_value=0, max_value=(1 << 64) - 1))
@settings(deadline=None)
def test_block_round_trip(key, block):
    des = DESCipher(key)
    assert des.decrypt_block(des.encrypt_block(block)) == block
