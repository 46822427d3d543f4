"""
S-box Analysis

This module measures the cryptographic properties of the Feistel S-boxes:
differential uniformity, linear bias and output balance. Each S-box maps a
6-bit group to a 4-bit nibble; the group's outer bits select the row and
its middle bits select the column.
"""

import logging
from typing import Dict, Union

import numpy as np

from ..cipher_core.round_function import sbox_lookup
from ..cipher_core.tables import S_BOXES

logger = logging.getLogger(__name__)

INPUT_SIZE = 64   # 6-bit input
OUTPUT_SIZE = 16  # 4-bit output

_PARITY = np.array([bin(v).count('1') & 1 for v in range(INPUT_SIZE)], dtype=np.int8)


def sbox_lookup_table(index: int) -> np.ndarray:
    """
    Flatten S-box `index` into a 64-entry table indexed by the 6-bit group.

    Args:
        index: S-box number, 0 to 7

    Returns:
        Array of 64 output nibbles
    """
    if not 0 <= index < len(S_BOXES):
        raise ValueError(f"S-box index must be in [0, {len(S_BOXES)})")
    return np.array([sbox_lookup(index, group) for group in range(INPUT_SIZE)], dtype=np.int64)


def difference_distribution_table(index: int) -> np.ndarray:
    """
    Build the difference distribution table of an S-box.

    Entry [dx, dy] counts the inputs x for which S(x) ^ S(x ^ dx) == dy.

    Args:
        index: S-box number, 0 to 7

    Returns:
        A 64 x 16 array of counts
    """
    table = sbox_lookup_table(index)
    inputs = np.arange(INPUT_SIZE)
    ddt = np.zeros((INPUT_SIZE, OUTPUT_SIZE), dtype=np.int32)

    for dx in range(INPUT_SIZE):
        dy = table[inputs] ^ table[inputs ^ dx]
        ddt[dx] = np.bincount(dy, minlength=OUTPUT_SIZE)

    return ddt


def differential_uniformity(index: int) -> int:
    """
    Calculate the differential uniformity of an S-box.

    Lower values indicate better resistance to differential cryptanalysis.

    Args:
        index: S-box number, 0 to 7

    Returns:
        The largest DDT entry for a non-zero input difference
    """
    return int(np.max(difference_distribution_table(index)[1:, :]))


def linear_approximation_table(index: int) -> np.ndarray:
    """
    Build the linear approximation table of an S-box.

    Entry [a, b] is the number of inputs x with parity(x & a) equal to
    parity(S(x) & b), minus 32.

    Args:
        index: S-box number, 0 to 7

    Returns:
        A 64 x 16 array of signed biases
    """
    table = sbox_lookup_table(index)
    inputs = np.arange(INPUT_SIZE)
    lat = np.zeros((INPUT_SIZE, OUTPUT_SIZE), dtype=np.int32)

    for input_mask in range(INPUT_SIZE):
        input_parity = _PARITY[inputs & input_mask]
        for output_mask in range(OUTPUT_SIZE):
            output_parity = _PARITY[table & output_mask]
            lat[input_mask, output_mask] = np.count_nonzero(input_parity == output_parity) - INPUT_SIZE // 2

    return lat


def linear_bias(index: int) -> float:
    """
    Calculate the normalized linear bias of an S-box.

    Lower values indicate better resistance to linear cryptanalysis.

    Args:
        index: S-box number, 0 to 7

    Returns:
        The largest absolute LAT entry over non-trivial masks, scaled to [0, 1]
    """
    lat = linear_approximation_table(index)
    return float(np.max(np.abs(lat[1:, 1:]))) / (INPUT_SIZE // 2)


def is_balanced(index: int) -> bool:
    """Every output nibble occurs equally often over all 64 inputs."""
    counts = np.bincount(sbox_lookup_table(index), minlength=OUTPUT_SIZE)
    return bool(np.all(counts == INPUT_SIZE // OUTPUT_SIZE))


def rows_are_permutations(index: int) -> bool:
    """Each row of the S-box is a permutation of 0..15."""
    rows = np.array(S_BOXES[index])
    return all(np.array_equal(np.sort(row), np.arange(OUTPUT_SIZE)) for row in rows)


def evaluate_sbox(index: int) -> Dict[str, Union[int, float, bool]]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        index: S-box number, 0 to 7

    Returns:
        A dictionary of scores (lower is better for differential and linear)
    """
    metrics = {
        'differential': differential_uniformity(index),
        'linear': linear_bias(index),
        'balanced': is_balanced(index),
        'rows_are_permutations': rows_are_permutations(index),
    }
    logger.debug("S-box %d metrics: %s", index + 1, metrics)
    return metrics


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    for i in range(len(S_BOXES)):
        metrics = evaluate_sbox(i)
        print(f"S{i + 1}: differential uniformity {metrics['differential']}, "
              f"linear bias {metrics['linear']:.3f}, balanced {metrics['balanced']}")
