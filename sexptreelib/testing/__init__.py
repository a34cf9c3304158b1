"""Testing utilities for sexptreelib.

This module provides fixtures and helpers for testing code that works
with S-expression trees.
"""

from .fixtures import (
    DEFAULT_ALPHABET,
    random_sexp,
    random_proper_list,
    deep_list,
    deep_left_nest,
    reference_preorder,
    reference_notation,
    bracket_balance,
)

__all__ = [
    'DEFAULT_ALPHABET',
    'random_sexp',
    'random_proper_list',
    'deep_list',
    'deep_left_nest',
    'reference_preorder',
    'reference_notation',
    'bracket_balance',
]
