"""Structural predicates and transforms over S-expressions.

None of these functions mutate their inputs. Results are new trees that
may share untouched subtrees with the arguments. Every function walks
with an explicit stack or loop, so tree depth is bounded only by memory.
"""

import logging
from typing import Callable, List, Tuple

from .core.collector import ConsAccumulator
from .core.node import EMPTY, Empty, Node, Pair, Symbol, atomic_equals
from .core.traverser import walk_preorder, walk_spine
from .errors import MalformedListError

logger = logging.getLogger(__name__)


def equal(x: Node, y: Node) -> bool:
    """Structural (deep) equality.

    Rules:
    - Empty equals only Empty.
    - A Symbol equals a Symbol with the same value.
    - Two Pairs are equal iff their firsts are equal and their rests are
      equal.
    - A Pair never equals an atom.

    Args:
        x: The first expression
        y: The second expression

    Returns:
        True if x and y describe the same binary tree
    """
    stack: List[Tuple[Node, Node]] = [(x, y)]

    while stack:
        a, b = stack.pop()

        # Shared subtree
        if a is b:
            continue

        if isinstance(a, Pair):
            if not isinstance(b, Pair):
                return False
            stack.append((a.rest, b.rest))
            stack.append((a.first, b.first))
        elif isinstance(b, Pair) or not atomic_equals(a, b):
            return False

    return True


def replace(target: Symbol, replacement: Node, tree: Node) -> Node:
    """Replace every occurrence of ``target`` in ``tree`` with ``replacement``.

    Every Pair is rebuilt, so the path to each substituted leaf is new;
    leaves that do not match are reused as-is. ``tree`` itself is left
    untouched.

    Args:
        target: The symbol to replace
        replacement: Node put in place of each occurrence
        tree: Expression where the replacement takes place

    Returns:
        The new expression

    Raises:
        TypeError: If target is not a Symbol
    """
    if not isinstance(target, Symbol):
        raise TypeError(f"replace() target must be a Symbol, got {target!r}")

    def substitute(leaf: Node) -> Node:
        return replacement if atomic_equals(leaf, target) else leaf

    # Postorder rebuild: a Pair is pushed twice, once to expand it and
    # once (expanded=True) to assemble its two rebuilt children.
    built: List[Node] = []
    stack: List[Tuple[Node, bool]] = [(tree, False)]

    while stack:
        node, expanded = stack.pop()

        if not isinstance(node, Pair):
            built.append(substitute(node))
        elif expanded:
            new_rest = built.pop()
            new_first = built.pop()
            built.append(Pair(new_first, new_rest))
        else:
            stack.append((node, True))
            stack.append((node.rest, False))
            stack.append((node.first, False))

    return built[0]


def reverse(x: Node) -> Node:
    """Reverse the top-level order of a list.

    Sub-lists are not reversed internally: the reverse of
    ``(1 2 (3 4) 5)`` is ``(5 (3 4) 2 1)``. Atoms, including Empty, are
    returned unchanged.

    Args:
        x: The list to reverse

    Returns:
        The reversed list

    Raises:
        MalformedListError: If x is an improper list
    """
    if not isinstance(x, Pair):
        return x

    result: Node = EMPTY
    current = x
    while isinstance(current, Pair):
        result = Pair(current.first, result)
        current = current.rest

    if not isinstance(current, Empty):
        logger.debug("reverse() rejected improper list ending in %r", current)
        raise MalformedListError(
            f"Cannot reverse an improper list ending in {current!r}"
        )

    return result


def concat(x: Node, y: Node) -> Node:
    """Concatenate list ``y`` onto the end of list ``x``.

    Example: concatenating ``(1 2 3)`` and ``(4 5 6)`` gives
    ``(1 2 3 4 5 6)``. Elements of either list are shared, not copied.

    Both lists are walked along their spines into one accumulator. The
    last node visited for each input is its terminator; it is checked
    and dropped before the accumulator is reversed once.

    Args:
        x: The leading elements of the new list
        y: The trailing elements of the new list

    Returns:
        The concatenated proper list

    Raises:
        MalformedListError: If either argument is not a proper list
    """
    accumulator = ConsAccumulator()

    for operand in (x, y):
        walk_spine(operand, accumulator)
        terminator = accumulator.pop()
        if not isinstance(terminator, Empty):
            logger.debug("concat() rejected operand ending in %r", terminator)
            raise MalformedListError(
                f"concat() requires proper lists, got one ending in {terminator!r}"
            )

    return reverse(accumulator.result)


def flatten(x: Node) -> Node:
    """Flatten a nested expression into a one-level list of its Symbols.

    Empty markers are dropped and all nesting is removed, keeping the
    left-to-right order. Example: the flattened form of
    ``(1 ((() (() 2)) (3 (4 (5)))))`` is ``(1 2 3 4 5)``.

    Args:
        x: The expression to flatten

    Returns:
        A proper list of x's Symbols
    """
    accumulator = ConsAccumulator(skip_empty=True)
    walk_preorder(x, accumulator)
    return reverse(accumulator.result)


def map_list(f: Callable[[Node], Node], lst: Node) -> Node:
    """Apply ``f`` to each top-level element of ``lst``.

    ``f`` is called on the elements front to back. It is not applied
    inside nested sub-lists; ``f`` can recurse itself if it needs to.
    The atomic tail of the list, ordinarily Empty, is kept as-is. An
    atomic ``lst`` is returned unchanged.

    Args:
        f: Maps an element to its replacement
        lst: The list to map over

    Returns:
        The mapped list
    """
    if not isinstance(lst, Pair):
        return lst

    mapped: List[Node] = []
    current = lst
    while isinstance(current, Pair):
        mapped.append(f(current.first))
        current = current.rest

    result = current
    for item in reversed(mapped):
        result = Pair(item, result)
    return result
