"""Core abstractions for sexptreelib.

This package holds the node substrate, the traversal engine and the
collectors that the algorithm modules are built on.
"""

from .node import (
    EMPTY,
    Empty,
    Symbol,
    Pair,
    Node,
    make_empty,
    make_symbol,
    make_pair,
    make_list,
    sym,
    is_empty,
    is_symbol,
    is_pair,
    is_atomic,
    first,
    rest,
    atomic_equals,
    to_text,
)
from .traverser import (
    SExpTraverser,
    PreorderTraverser,
    SpineTraverser,
    create_traverser,
    walk_preorder,
    walk_spine,
)
from .collector import (
    DataCollector,
    SymbolCounter,
    ConsAccumulator,
    CustomCollector,
)

__all__ = [
    "EMPTY",
    "Empty",
    "Symbol",
    "Pair",
    "Node",
    "make_empty",
    "make_symbol",
    "make_pair",
    "make_list",
    "sym",
    "is_empty",
    "is_symbol",
    "is_pair",
    "is_atomic",
    "first",
    "rest",
    "atomic_equals",
    "to_text",
    "SExpTraverser",
    "PreorderTraverser",
    "SpineTraverser",
    "create_traverser",
    "walk_preorder",
    "walk_spine",
    "DataCollector",
    "SymbolCounter",
    "ConsAccumulator",
    "CustomCollector",
]
