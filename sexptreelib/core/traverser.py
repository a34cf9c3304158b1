"""Traversal strategies for sexptreelib.

Traversers walk an S-expression with an explicit work stack instead of
recursion, so trees of any depth can be processed without hitting the
interpreter's recursion limit. Every algorithm that has to visit the
atoms of a tree goes through this module.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Tuple, Union

from ..config import TraversalStrategy
from .node import Node, Pair

Visitor = Callable[[Node], bool]


class SExpTraverser(ABC):
    """Abstract base class for S-expression traversal strategies."""

    @abstractmethod
    def traverse(self, root: Node) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Yields:
            Tuples of (node, position); what position means depends on
            the strategy
        """
        pass

    def walk(self, root: Node, visit: Visitor) -> bool:
        """Feed every yielded node to ``visit`` until it returns false.

        Args:
            root: Starting node
            visit: Callback; a falsy return stops the walk immediately

        Returns:
            True if the walk ran to completion, False if visit stopped it
        """
        for node, _ in self.traverse(root):
            if not visit(node):
                return False
        return True


class PreorderTraverser(SExpTraverser):
    """Depth-first preorder walk over the atoms of a tree.

    Pairs are expanded transparently and never yielded; only Empty and
    Symbol nodes come out. The order is exactly that of a recursive
    "visit first, then visit rest" walk: each Pair pushes ``rest`` and
    then ``first`` so that ``first`` is popped next.
    """

    def traverse(self, root: Node) -> Iterator[Tuple[Node, int]]:
        """Yield (atom, depth) pairs, depth counting Pair edges from root."""
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if isinstance(node, Pair):
                stack.append((node.rest, depth + 1))
                stack.append((node.first, depth + 1))
            else:
                yield (node, depth)


class SpineTraverser(SExpTraverser):
    """Walk along the top-level ``rest`` chain of a list.

    Yields each top-level element with its index and finally the
    terminator, the first non-Pair reached along ``rest``. For a proper
    list the terminator is Empty. Elements are yielded whole; nested
    sub-lists are not expanded.
    """

    def traverse(self, root: Node) -> Iterator[Tuple[Node, int]]:
        """Yield (element, index) pairs followed by (terminator, length)."""
        index = 0
        current = root

        while isinstance(current, Pair):
            yield (current.first, index)
            index += 1
            current = current.rest

        yield (current, index)


def create_traverser(strategy: Union[TraversalStrategy, str]) -> SExpTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (preorder, dfs_pre, spine)

    Returns:
        SExpTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'preorder': PreorderTraverser,
        'dfs_pre': PreorderTraverser,
        'depth_first_pre': PreorderTraverser,
        'spine': SpineTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()


def walk_preorder(root: Node, visit: Visitor) -> bool:
    """Call ``visit`` on every atom of ``root`` in preorder.

    This is the shared engine behind length, flatten and the api queries.

    Args:
        root: Tree to walk
        visit: Receives each Empty/Symbol node; return False to stop

    Returns:
        True if every atom was visited, False if visit stopped early
    """
    return PreorderTraverser().walk(root, visit)


def walk_spine(root: Node, visit: Visitor) -> bool:
    """Call ``visit`` on each top-level element of ``root``, then on its terminator.

    Args:
        root: List to walk
        visit: Receives each element and finally the terminator; return
            False to stop

    Returns:
        True if the terminator was visited, False if visit stopped early
    """
    return SpineTraverser().walk(root, visit)
