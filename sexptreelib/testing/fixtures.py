"""Test fixtures for sexptreelib consumers.

Seeded generators and reference helpers for property-style tests. They
are part of the package so downstream projects can test their own code
against the same tree shapes.
"""

import random
from typing import List, Optional, Sequence, Tuple

from ..config import NotationConfig
from ..core.node import EMPTY, Empty, Node, Pair, Symbol

DEFAULT_ALPHABET = ("a", "b", "c", "x", "y", "z", "foo", "bar")


def random_sexp(
    rng: random.Random,
    max_depth: int = 5,
    alphabet: Sequence[str] = DEFAULT_ALPHABET,
    empty_weight: float = 0.2,
) -> Node:
    """Generate an arbitrary (not necessarily proper) tree.

    Args:
        rng: Random source; pass a seeded instance for reproducible tests
        max_depth: Maximum number of Pair edges from root to any leaf
        alphabet: Symbol values to draw from
        empty_weight: Chance that a leaf is Empty rather than a Symbol

    Returns:
        A tree of height at most max_depth + 1
    """
    def leaf() -> Node:
        if rng.random() < empty_weight:
            return EMPTY
        return Symbol(rng.choice(alphabet))

    def build(depth: int) -> Node:
        if depth >= max_depth or rng.random() < 0.3:
            return leaf()
        return Pair(build(depth + 1), build(depth + 1))

    return build(0)


def random_proper_list(
    rng: random.Random,
    max_length: int = 6,
    max_depth: int = 3,
    alphabet: Sequence[str] = DEFAULT_ALPHABET,
) -> Node:
    """Generate a proper list whose elements may be nested proper lists.

    Args:
        rng: Random source
        max_length: Maximum number of elements per list
        max_depth: Maximum nesting of sub-lists
        alphabet: Symbol values to draw from

    Returns:
        A proper list (possibly EMPTY)
    """
    def build(depth: int) -> Node:
        items: List[Node] = []
        for _ in range(rng.randint(0, max_length)):
            roll = rng.random()
            if depth < max_depth and roll < 0.25:
                items.append(build(depth + 1))
            elif roll < 0.35:
                items.append(EMPTY)
            else:
                items.append(Symbol(rng.choice(alphabet)))

        result: Node = EMPTY
        for item in reversed(items):
            result = Pair(item, result)
        return result

    return build(0)


def deep_list(size: int, value: str = "a") -> Node:
    """A flat proper list of ``size`` identical symbols."""
    result: Node = EMPTY
    for _ in range(size):
        result = Pair(Symbol(value), result)
    return result


def deep_left_nest(depth: int, value: str = "a") -> Node:
    """A list nested ``depth`` levels deep in first position: ((((a))))."""
    result: Node = Pair(Symbol(value), EMPTY)
    for _ in range(depth - 1):
        result = Pair(result, EMPTY)
    return result


def reference_preorder(root: Node) -> List[Node]:
    """Atoms of ``root`` in the order a recursive first-then-rest walk sees them.

    Recursive on purpose; only use it on shallow trees.
    """
    if isinstance(root, Pair):
        return reference_preorder(root.first) + reference_preorder(root.rest)
    return [root]


def reference_notation(root: Node) -> str:
    """Recursive notation renderer used as an oracle for shallow trees."""
    if isinstance(root, Empty):
        return "()"
    if isinstance(root, Symbol):
        return root.value

    parts = [reference_notation(root.first)]
    current = root.rest
    while isinstance(current, Pair):
        parts.append(reference_notation(current.first))
        current = current.rest
    if isinstance(current, Symbol):
        parts.extend([".", current.value])
    return "(" + " ".join(parts) + ")"


def bracket_balance(text: str, config: Optional[NotationConfig] = None) -> Tuple[int, int]:
    """Count opening and closing tokens in rendered text.

    Returns:
        Tuple of (opening count, closing count)
    """
    config = config or NotationConfig.default()
    return text.count(config.open_token), text.count(config.close_token)
