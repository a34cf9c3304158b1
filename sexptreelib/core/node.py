"""Node substrate for sexptreelib.

An S-expression is a binary tree built from exactly three kinds of node:

- Empty: the empty list ``()``. Every Empty is equal to every other Empty.
- Symbol: an atomic leaf carrying an immutable string.
- Pair: a cons cell joining two sub-expressions, ``first`` and ``rest``.

The three variants form a closed union. Algorithms dispatch on them with
``isinstance`` and must handle all three. Nodes are immutable; transforms
build new trees that share unchanged subtrees with their inputs.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Empty:
    """The empty list. Use the EMPTY singleton or make_empty()."""

    def __str__(self) -> str:
        return "()"

    def __repr__(self) -> str:
        return "Empty()"


@dataclass(frozen=True)
class Symbol:
    """An atomic leaf. Two Symbols are equal iff their values are equal."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(
                f"Symbol value must be str, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Symbol({self.value!r})"


@dataclass(frozen=True, eq=False)
class Pair:
    """A cons cell.

    Pairs compare by identity with ``==``. Use
    :func:`sexptreelib.transform.equal` for structural equality, which
    works without recursion on arbitrarily deep trees.
    """

    first: 'Node'
    rest: 'Node'

    def __post_init__(self):
        for name in ("first", "rest"):
            child = getattr(self, name)
            if not isinstance(child, _NODE_TYPES):
                raise TypeError(
                    f"Pair.{name} must be a node, got {type(child).__name__}"
                )

    def __str__(self) -> str:
        # Imported lazily: the printer depends on this module
        from ..notation import to_notation
        return to_notation(self)

    def __repr__(self) -> str:
        return f"Pair({str(self)!r})"


Node = Union[Empty, Symbol, Pair]

_NODE_TYPES = (Empty, Symbol, Pair)

EMPTY = Empty()


# Constructors

def make_empty() -> Empty:
    """Return the empty list."""
    return EMPTY


def make_symbol(value: str) -> Symbol:
    """Create a Symbol holding ``value``.

    Raises:
        TypeError: If value is not a str
    """
    return Symbol(value)


def make_pair(first: Node, rest: Node) -> Pair:
    """Create a Pair (cons cell) from two existing nodes."""
    return Pair(first, rest)


# Short alias used by fixtures and at the REPL
sym = make_symbol


def make_list(*items: Union[Node, str]) -> Node:
    """Build a proper list from the given items.

    Each item is either a ready-made node or a ``str``, which is wrapped
    as a Symbol. The list is built back-to-front without recursion, so
    any number of items is fine.

    Args:
        *items: Elements of the new list, in order

    Returns:
        The proper list ``(item0 item1 ...)``, or EMPTY when no items
        are given

    Raises:
        TypeError: If an item is neither a node nor a str

    Example:
        >>> str(make_list("a", make_list("b", "c"), make_empty()))
        '(a (b c) ())'
    """
    result: Node = EMPTY
    for item in reversed(items):
        if isinstance(item, str):
            item = Symbol(item)
        elif not isinstance(item, _NODE_TYPES):
            raise TypeError(
                f"List items must be nodes or str, got {type(item).__name__}"
            )
        result = Pair(item, result)
    return result


# Predicates

def is_empty(node: Node) -> bool:
    """True only for Empty."""
    return isinstance(node, Empty)


def is_symbol(node: Node) -> bool:
    return isinstance(node, Symbol)


def is_pair(node: Node) -> bool:
    return isinstance(node, Pair)


def is_atomic(node: Node) -> bool:
    """True for Empty and Symbol, i.e. anything that is not a Pair."""
    return not isinstance(node, Pair)


# Accessors

def first(node: Node) -> Node:
    """Head of a Pair.

    Raises:
        TypeError: If node is not a Pair
    """
    if not isinstance(node, Pair):
        raise TypeError(f"first() requires a Pair, got {node!r}")
    return node.first


def rest(node: Node) -> Node:
    """Tail of a Pair.

    Raises:
        TypeError: If node is not a Pair
    """
    if not isinstance(node, Pair):
        raise TypeError(f"rest() requires a Pair, got {node!r}")
    return node.rest


# Atom primitives

def atomic_equals(a: Node, b: Node) -> bool:
    """Value equality between two atomic nodes.

    Empty equals Empty, two Symbols are equal iff their strings are equal,
    and an Empty never equals a Symbol.

    Raises:
        TypeError: If either argument is a Pair
    """
    if isinstance(a, Pair) or isinstance(b, Pair):
        raise TypeError("atomic_equals() is only defined on atomic nodes")
    if isinstance(a, Empty):
        return isinstance(b, Empty)
    return isinstance(b, Symbol) and a.value == b.value


def to_text(node: Node) -> str:
    """Textual form of an atomic node, used verbatim by the printer.

    Raises:
        TypeError: If node is a Pair
    """
    if isinstance(node, Pair):
        raise TypeError("to_text() is only defined on atomic nodes")
    return str(node)
