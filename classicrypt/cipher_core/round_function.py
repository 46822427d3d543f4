"""
Feistel Round Function

F(R, K) = P(S(E(R) xor K)), operating on a 32-bit half block and a 48-bit
round subkey.
"""

from .permutation import permute
from .tables import E, P, S_BOXES


def expand(half_block: int) -> int:
    """Expand a 32-bit half block to 48 bits."""
    return permute(half_block, E, 32)


def sbox_lookup(index: int, group: int) -> int:
    """
    Substitute one 6-bit group through S-box `index`.

    The outer bits of the group pick the row and the four middle bits pick
    the column.
    """
    row = ((group >> 4) & 0x02) | (group & 0x01)
    column = (group >> 1) & 0x0F
    return S_BOXES[index][row][column]


def substitute(block: int) -> int:
    """Compress 48 bits to 32 through the eight S-boxes."""
    output = 0
    for i in range(8):
        group = (block >> (42 - 6 * i)) & 0x3F
        output = (output << 4) | sbox_lookup(i, group)
    return output


def feistel(half_block: int, subkey: int) -> int:
    """
    Apply the round function to a half block.

    Args:
        half_block: The 32-bit right half
        subkey: The 48-bit round subkey

    Returns:
        32 bits to fold into the other half
    """
    return permute(substitute(expand(half_block) ^ subkey), P, 32)
