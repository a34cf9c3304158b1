"""Size measurements of S-expressions."""

from typing import List, Tuple

from .core.collector import SymbolCounter
from .core.node import Empty, Node, Pair
from .core.traverser import walk_preorder


def length(x: Node) -> int:
    """Count the Symbols reachable from ``x``.

    Empty markers do not count, so ``length(())`` is 0 and a lone Symbol
    has length 1. Nested sub-lists contribute all of their Symbols.

    Args:
        x: The expression to measure

    Returns:
        Number of Symbol leaves in x
    """
    counter = SymbolCounter()
    walk_preorder(x, counter)
    return counter.count


def height(x: Node) -> int:
    """Measure the height of ``x``.

    Rules:
    - Height of Empty is 0.
    - Height of a Symbol is 1.
    - Height of a Pair is ``1 + max(height(first), height(rest))``.

    Unfolding the recursion, the height is the largest value of
    ``depth + 1`` over Symbol leaves and ``depth`` over Empty leaves,
    where depth counts Pair edges from the root. That is what the loop
    computes, with an explicit stack so long lists do not exhaust the
    call stack.

    Args:
        x: The expression to measure

    Returns:
        Height of x
    """
    best = 0
    stack: List[Tuple[Node, int]] = [(x, 0)]

    while stack:
        node, depth = stack.pop()
        if isinstance(node, Pair):
            stack.append((node.rest, depth + 1))
            stack.append((node.first, depth + 1))
        elif isinstance(node, Empty):
            best = max(best, depth)
        else:
            best = max(best, depth + 1)

    return best
