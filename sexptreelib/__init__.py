"""sexptreelib - Algorithms over S-expression trees.

sexptreelib works on binary trees built from three kinds of node: the
empty list, atomic symbols, and pairs (cons cells). It measures them,
compares and transforms them, looks values up in association lists, and
renders them in parenthesized notation.

Every traversal uses an explicit work stack, so tree depth is limited by
memory rather than by the interpreter's recursion limit:

    from sexptreelib import make_list, make_pair, sym, flatten, to_notation

    tree = make_list("x", make_list("y", "z"), make_pair(sym("a"), sym("b")))
    to_notation(tree)           # '(x (y z) (a . b))'
    to_notation(flatten(tree))  # '(x y z a b)'
"""

__version__ = "0.1.0"

from .core.node import (
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
from .core.traverser import (
    SExpTraverser,
    PreorderTraverser,
    SpineTraverser,
    create_traverser,
    walk_preorder,
    walk_spine,
)
from .core.collector import (
    DataCollector,
    SymbolCounter,
    ConsAccumulator,
    CustomCollector,
)
from .config import TraversalStrategy, ClosingPolicy, NotationConfig
from .errors import SExpError, MalformedListError, InvalidConfigError
from .measure import length, height
from .transform import equal, replace, reverse, concat, flatten, map_list
from .lookup import lookup, lookup_many
from .notation import NotationPrinter, to_notation
from .api import find_symbols, contains, get_sexp_stats

__all__ = [
    "__version__",
    # Nodes
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
    # Traversal
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
    # Config and errors
    "TraversalStrategy",
    "ClosingPolicy",
    "NotationConfig",
    "SExpError",
    "MalformedListError",
    "InvalidConfigError",
    # Algorithms
    "length",
    "height",
    "equal",
    "replace",
    "reverse",
    "concat",
    "flatten",
    "map_list",
    "lookup",
    "lookup_many",
    "NotationPrinter",
    "to_notation",
    # Queries
    "find_symbols",
    "contains",
    "get_sexp_stats",
]
