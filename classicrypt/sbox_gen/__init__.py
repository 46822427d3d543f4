"""
S-box Analysis Package

This package measures differential and linear properties of the Feistel
cipher's S-boxes.
"""

from .sbox_analysis import evaluate_sbox, differential_uniformity, linear_bias

__all__ = ['evaluate_sbox', 'differential_uniformity', 'linear_bias']
