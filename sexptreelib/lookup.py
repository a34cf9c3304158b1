"""Key-value lookup over association lists.

An association list (table) is a proper list of pairs whose first item is
a Symbol key and whose rest is the associated value::

    ((CoolGuy . xxx) (RealCoolGuy . yyy) (AbsoluteRealCoolGuy . Theodore))
"""

import logging

from .core.node import EMPTY, Empty, Node, Pair, Symbol, atomic_equals
from .errors import MalformedListError
from .transform import map_list

logger = logging.getLogger(__name__)


def _malformed(reason: str) -> MalformedListError:
    logger.debug("Malformed lookup table: %s", reason)
    return MalformedListError(f"Malformed list: {reason}")


def lookup(key: Symbol, table: Node) -> Node:
    """Find the value bound to ``key`` in an association list.

    The table is scanned front to back and its shape is checked as the
    scan goes; entries after the first match are not inspected.

    Args:
        key: The key to look for
        table: Association list of (Symbol . value) pairs

    Returns:
        The value of the first entry whose key equals ``key``, or EMPTY
        when the table holds no such entry

    Raises:
        TypeError: If key is not a Symbol
        MalformedListError: If the table is empty or atomic, an element is
            not a Pair, an element's key is not a Symbol, or the list is
            improper
    """
    if not isinstance(key, Symbol):
        raise TypeError(f"lookup() key must be a Symbol, got {key!r}")

    if not isinstance(table, Pair):
        raise _malformed(f"table must be a non-empty list, got {table!r}")

    current = table
    while not isinstance(current, Empty):
        if not isinstance(current, Pair):
            raise _malformed(f"table is an improper list ending in {current!r}")

        entry = current.first
        if not isinstance(entry, Pair):
            raise _malformed(f"entry {entry!r} is not a pair")

        entry_key = entry.first
        if not isinstance(entry_key, Symbol):
            raise _malformed(f"entry key {entry_key!r} is not a symbol")

        if atomic_equals(entry_key, key):
            return entry.rest

        current = current.rest

    return EMPTY


def lookup_many(keys: Node, table: Node) -> Node:
    """Look up every key of ``keys`` in ``table``.

    Args:
        keys: List of Symbol keys
        table: Association list in the form accepted by lookup()

    Returns:
        List of the values, in key order; absent keys yield EMPTY
    """
    return map_list(lambda key: lookup(key, table), keys)
