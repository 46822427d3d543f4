"""
PKCS#5 Padding

Whole-byte padding to the 8-byte block boundary of the Feistel cipher.
Already aligned input receives a full extra block, so unpadding is always
unambiguous.
"""

from Cryptodome.Util.Padding import pad

from ..errors import MalformedPadding

BLOCK_SIZE = 8


def pkcs5_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Pad data to a multiple of the block size.

    Args:
        data: The data to pad
        block_size: Block size in bytes (default: 8)

    Returns:
        The padded data, 1 to block_size bytes longer than the input
    """
    return pad(bytes(data), block_size, style='pkcs7')


def pkcs5_unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Strip padding added by pkcs5_pad.

    Only the trailing byte is consulted; it gives the number of bytes to
    remove.

    Args:
        data: The padded data
        block_size: Block size in bytes (default: 8)

    Returns:
        The data without its padding

    Raises:
        MalformedPadding: If the data is empty or the trailing byte is not
            a usable padding length
    """
    if not data:
        raise MalformedPadding("Cannot unpad empty data")

    padding_size = data[-1]
    if not 1 <= padding_size <= block_size:
        raise MalformedPadding(f"Padding length {padding_size} is outside [1, {block_size}]")
    if padding_size > len(data):
        raise MalformedPadding(
            f"Padding length {padding_size} exceeds data length {len(data)}")

    return bytes(data[:-padding_size])
