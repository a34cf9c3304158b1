"""High-level queries for sexptreelib.

This module provides simple functional helpers built on the traversal
engine for common questions about a tree.
"""

from typing import Any, Callable, Dict, Iterator

from .core.node import Empty, Node, Symbol, atomic_equals
from .core.traverser import PreorderTraverser, SpineTraverser, walk_preorder
from .measure import height


def find_symbols(
    root: Node,
    predicate: Callable[[Symbol], bool],
) -> Iterator[Symbol]:
    """Find the Symbols of a tree that match a predicate.

    Args:
        root: Tree to search
        predicate: Function that returns True for matching symbols

    Yields:
        Matching symbols in preorder

    Example:
        >>> tree = make_list("alpha", make_list("beta", "apple"))
        >>> [s.value for s in find_symbols(tree, lambda s: s.value.startswith("a"))]
        ['alpha', 'apple']
    """
    for node, _ in PreorderTraverser().traverse(root):
        if isinstance(node, Symbol) and predicate(node):
            yield node


def contains(root: Node, symbol: Symbol) -> bool:
    """Check whether ``symbol`` occurs anywhere in ``root``.

    The walk stops at the first match.
    """
    found = False

    def visit(node: Node) -> bool:
        nonlocal found
        if isinstance(node, Symbol) and atomic_equals(node, symbol):
            found = True
            return False
        return True

    walk_preorder(root, visit)
    return found


def get_sexp_stats(root: Node) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Tree to inspect

    Returns:
        Dictionary with the keys length (same as symbols), height, pairs,
        symbols, empties, max_depth (deepest atom, in Pair edges) and
        is_proper_list

    Example:
        >>> stats = get_sexp_stats(make_list("a", make_list("b")))
        >>> stats['length'], stats['height'], stats['pairs']
        (2, 4, 3)
    """
    stats = {
        'symbols': 0,
        'empties': 0,
        'max_depth': 0,
    }

    for node, depth in PreorderTraverser().traverse(root):
        if isinstance(node, Empty):
            stats['empties'] += 1
        else:
            stats['symbols'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)

    # A binary tree with n leaves has n - 1 internal nodes
    stats['pairs'] = stats['symbols'] + stats['empties'] - 1
    stats['length'] = stats['symbols']
    stats['height'] = height(root)

    terminator = root
    for terminator, _ in SpineTraverser().traverse(root):
        pass
    stats['is_proper_list'] = isinstance(terminator, Empty)

    return stats
