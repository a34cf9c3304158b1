"""Configuration system for sexptreelib.

This module defines how users pick a traversal strategy and how the
notation printer lays out its text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class TraversalStrategy(Enum):
    """How to walk an S-expression.

    Different strategies serve different algorithms.
    """
    PREORDER = "preorder"   # Every atom, first before rest
    SPINE = "spine"         # Top-level elements, then the terminator


class ClosingPolicy(Enum):
    """How the notation printer closes lists.

    BALANCED always emits matching brackets. HEURISTIC uses the fast
    trim-then-close bookkeeping, which drops a closing bracket when a
    dotted pair is followed by the end of a list.
    """
    BALANCED = "balanced"
    HEURISTIC = "heuristic"


@dataclass
class NotationConfig:
    """Configuration for rendering trees as parenthesized text."""

    open_token: str = "("
    close_token: str = ")"
    separator: str = " "
    closing_policy: ClosingPolicy = ClosingPolicy.BALANCED

    def __post_init__(self):
        if isinstance(self.closing_policy, str):
            self.closing_policy = parse_closing_policy(self.closing_policy)

    @property
    def empty_token(self) -> str:
        """Text of the empty list."""
        return self.open_token + self.close_token

    @property
    def dot_token(self) -> str:
        """Text placed between the two halves of a dotted pair."""
        return f"{self.separator}.{self.separator}"

    @classmethod
    def default(cls) -> 'NotationConfig':
        """Create the standard balanced configuration."""
        return cls()

    @classmethod
    def heuristic(cls) -> 'NotationConfig':
        """Create a config for the fast trim-then-close printer.

        Returns:
            NotationConfig using ClosingPolicy.HEURISTIC
        """
        return cls(closing_policy=ClosingPolicy.HEURISTIC)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for name in ("open_token", "close_token", "separator"):
            token = getattr(self, name)
            if not isinstance(token, str) or len(token) != 1:
                errors.append(f"{name} must be a single character")

        # The remaining checks only make sense on well-formed tokens
        if errors:
            return errors

        if self.open_token == self.close_token:
            errors.append("open_token and close_token must differ")
        if self.open_token.isspace() or self.close_token.isspace():
            errors.append("open_token and close_token cannot be whitespace")
        if not self.separator.isspace():
            errors.append("separator must be whitespace")

        if not isinstance(self.closing_policy, ClosingPolicy):
            errors.append(f"unknown closing_policy: {self.closing_policy!r}")

        return errors


def parse_closing_policy(policy: Union[ClosingPolicy, str]) -> ClosingPolicy:
    """Parse a closing policy from its enum or string name.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(policy, ClosingPolicy):
        return policy

    policy_lower = policy.lower() if isinstance(policy, str) else str(policy)
    for candidate in ClosingPolicy:
        if candidate.value == policy_lower:
            return candidate

    raise ValueError(
        f"Unknown closing policy: {policy}. "
        f"Choose from: {', '.join(p.value for p in ClosingPolicy)}"
    )
