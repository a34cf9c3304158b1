"""Exception hierarchy for sexptreelib.

All library errors derive from SExpError so callers can catch them as a
group. Programmer errors (calling an accessor on an atom, passing a
non-Symbol where a Symbol is required) raise the builtin TypeError instead.
"""


class SExpError(Exception):
    """Base class for all sexptreelib errors."""
    pass


class MalformedListError(SExpError, ValueError):
    """Raised when an argument does not have the list shape an operation needs.

    Examples: a lookup table that is not a proper list of (Symbol . value)
    pairs, or an improper list handed to reverse/concat.
    """
    pass


class InvalidConfigError(SExpError, ValueError):
    """Raised when a configuration object fails validation."""
    pass
