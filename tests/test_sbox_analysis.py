"""Tests for S-box analysis."""
import numpy as np
import pytest

from classicrypt.sbox_gen.sbox_analysis import (
    difference_distribution_table,
    differential_uniformity,
    evaluate_sbox,
    is_balanced,
    linear_approximation_table,
    linear_bias,
    rows_are_permutations,
    sbox_lookup_table,
)

ALL_SBOXES = range(8)


@pytest.mark.parametrize("index", ALL_SBOXES)
def test_rows_are_permutations(index):
    assert rows_are_permutations(index)
    assert is_balanced(index)


@pytest.mark.parametrize("index", ALL_SBOXES)
def test_difference_distribution_table_shape(index):
    ddt = difference_distribution_table(index)
    assert ddt.shape == (64, 16)
    assert ddt[0, 0] == 64
    assert np.all(ddt[0, 1:] == 0)
    assert np.all(ddt.sum(axis=1) == 64)
    assert np.all(ddt % 2 == 0)


@pytest.mark.parametrize("index", ALL_SBOXES)
def test_differential_uniformity_bound(index):
    assert 0 < differential_uniformity(index) <= 16


def test_best_differential_of_first_sbox():
    assert difference_distribution_table(0)[0x34, 0x2] == 16


def test_best_linear_approximation_of_fifth_sbox():
    lat = linear_approximation_table(4)
    assert lat[16, 15] == -20
    assert linear_bias(4) >= 20 / 32


def test_lookup_table_matches_row_and_column_rule():
    table = sbox_lookup_table(0)
    assert table[0] == 14
    assert table[0b100001] == 15
    assert len(table) == 64


def test_invalid_index():
    with pytest.raises(ValueError):
        sbox_lookup_table(8)


def test_evaluate_sbox():
    metrics = evaluate_sbox(0)
    assert set(metrics) == {'differential', 'linear', 'balanced', 'rows_are_permutations'}
    assert metrics['balanced'] is True
    assert 0 < metrics['linear'] <= 1
