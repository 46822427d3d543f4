"""Tests for PKCS#5 padding."""
import pytest

from classicrypt.cipher_core.padding import pkcs5_pad, pkcs5_unpad
from classicrypt.errors import MalformedPadding


def test_aligned_input_gets_full_block():
    data = b"12345678"
    padded = pkcs5_pad(data)
    assert padded == data + b"\x08" * 8
    assert pkcs5_unpad(padded) == data


@pytest.mark.parametrize("length", range(0, 17))
def test_padding_sizes(length):
    data = bytes(range(length))
    padded = pkcs5_pad(data)
    padding_size = 8 - length % 8

    assert len(padded) == length + padding_size
    assert padded[length:] == bytes([padding_size]) * padding_size
    assert pkcs5_unpad(padded) == data


def test_only_trailing_byte_is_consulted():
    assert pkcs5_unpad(b"abc\x01\x02\x02") == b"abc\x01"
    assert pkcs5_unpad(b"abcdefg\x01") == b"abcdefg"


@pytest.mark.parametrize("data", [
    b"",
    b"abcdefg\x00",
    b"abcdefg\x09",
    b"\xff",
    b"\x05\x05",
])
def test_malformed_padding(data):
    with pytest.raises(MalformedPadding):
        pkcs5_unpad(data)


def test_accepts_bytearray():
    assert pkcs5_unpad(bytearray(pkcs5_pad(bytearray(b"abc")))) == b"abc"
