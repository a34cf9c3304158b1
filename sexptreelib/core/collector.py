"""Data collection strategies for sexptreelib.

Collectors decide what to keep from the nodes a traverser visits. They
are callables, so an instance can be handed straight to walk_preorder or
walk_spine as the visit callback.
"""

from abc import ABC, abstractmethod
from typing import Callable

from .node import EMPTY, Empty, Node, Pair, Symbol


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    The same traversal can count symbols, gather atoms into a list, or
    run arbitrary user logic, depending on the collector passed in.
    """

    @abstractmethod
    def collect(self, node: Node) -> bool:
        """Collect data from a visited node.

        Args:
            node: The node being visited

        Returns:
            True to continue the traversal, False to stop it
        """
        pass

    def __call__(self, node: Node) -> bool:
        return self.collect(node)


class SymbolCounter(DataCollector):
    """Counts visited Symbols, ignoring Empty markers."""

    def __init__(self):
        self.count = 0

    def collect(self, node: Node) -> bool:
        if isinstance(node, Symbol):
            self.count += 1
        return True


class ConsAccumulator(DataCollector):
    """Conses every visited node onto a persistent list.

    The newest node sits at the head, so ``result`` holds the visit order
    reversed. Callers reverse it once when they are done, which keeps
    each step O(1) without mutating any node.
    """

    def __init__(self, skip_empty: bool = False):
        """Initialize an empty accumulator.

        Args:
            skip_empty: Drop Empty nodes instead of accumulating them
        """
        self.skip_empty = skip_empty
        self.result: Node = EMPTY

    def collect(self, node: Node) -> bool:
        if self.skip_empty and isinstance(node, Empty):
            return True
        self.result = Pair(node, self.result)
        return True

    def pop(self) -> Node:
        """Remove and return the most recently accumulated node.

        Raises:
            IndexError: If nothing has been accumulated
        """
        if not isinstance(self.result, Pair):
            raise IndexError("pop from empty accumulator")
        head = self.result.first
        self.result = self.result.rest
        return head


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom visit logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[Node], bool]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node) -> bool, False stops the walk
        """
        self.collect_func = collect_func

    def collect(self, node: Node) -> bool:
        """Use custom function to collect data."""
        return bool(self.collect_func(node))
