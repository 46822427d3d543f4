"""
Bit Permutation Engine

This module implements the table-driven bit reordering shared by every
stage of the Feistel cipher: the initial and final permutations, the
expansion, the round permutation and both key-schedule selections.
"""

from typing import Sequence


def permute(block: int, table: Sequence[int], width: int) -> int:
    """
    Reorder the bits of a block according to a permutation table.

    Output bit i (counted from the most significant bit) is taken from
    source position table[i], where positions are 1-indexed from the most
    significant bit of a `width`-bit source. The output is len(table) bits
    wide, so the same routine serves expanding and compressing tables.

    Args:
        block: The source value
        table: 1-indexed source positions
        width: Bit width of the source value

    Returns:
        The permuted value
    """
    result = 0
    for position in table:
        result = (result << 1) | ((block >> (width - position)) & 1)
    return result


def invert_table(table: Sequence[int]) -> tuple:
    """
    Create the inverse of a bijective permutation table.

    Args:
        table: A permutation of 1..len(table)

    Returns:
        The table that undoes `table`
    """
    if sorted(table) != list(range(1, len(table) + 1)):
        raise ValueError("Only a bijective table can be inverted")

    inverse = [0] * len(table)
    for i, position in enumerate(table):
        inverse[position - 1] = i + 1
    return tuple(inverse)
