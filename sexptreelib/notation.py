"""Parenthesized-notation printer for S-expressions.

Renders a tree as text such as ``(a (b c) () (d . e))``. A Pair whose
first and rest are both Symbols is written in dotted-pair shorthand
``(first . rest)``. Rendering uses an explicit work stack, never the call
stack, so arbitrarily deep trees can be printed.
"""

import logging
from typing import List, Optional, Tuple

from .config import ClosingPolicy, NotationConfig
from .core.node import Empty, Node, Pair, Symbol, to_text
from .errors import InvalidConfigError

logger = logging.getLogger(__name__)

# Work-item roles for the balanced printer
_ELEMENT = 0  # node appears as a list element (or is the root)
_TAIL = 1     # node is the rest of an open list


def _is_dotted(pair: Pair) -> bool:
    return isinstance(pair.first, Symbol) and isinstance(pair.rest, Symbol)


class NotationPrinter:
    """Stack-driven serializer producing parenthesized text.

    Example:
        >>> printer = NotationPrinter()
        >>> printer.render(make_pair(sym("dotted"), sym("pair")))
        '(dotted . pair)'
    """

    def __init__(self, config: Optional[NotationConfig] = None):
        """Create a printer.

        Args:
            config: Token and closing-policy settings (default: balanced
                output with ``(``, ``)`` and a space separator)

        Raises:
            InvalidConfigError: If config fails validation
        """
        self.config = config or NotationConfig.default()

        config_errors = self.config.validate()
        if config_errors:
            raise InvalidConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    def render(self, x: Node) -> str:
        """Render ``x`` as parenthesized text.

        Args:
            x: The expression to render

        Returns:
            Notation text with no surrounding whitespace
        """
        if isinstance(x, Empty):
            return self.config.empty_token
        if isinstance(x, Symbol):
            return to_text(x)

        if self.config.closing_policy is ClosingPolicy.HEURISTIC:
            logger.debug("Rendering with heuristic closing; brackets may not balance")
            return self._render_heuristic(x)
        return self._render_balanced(x)

    def _render_balanced(self, root: Node) -> str:
        """Render with bracket counts that always match.

        ELEMENT items print a whole node. TAIL items continue an open
        list: a Pair adds another element, Empty closes the list, and a
        Symbol closes it as a dotted tail.
        """
        cfg = self.config
        out: List[str] = []
        stack: List[Tuple[int, Node]] = [(_ELEMENT, root)]

        while stack:
            role, node = stack.pop()

            if role == _TAIL:
                if isinstance(node, Empty):
                    out.append(cfg.close_token)
                elif isinstance(node, Symbol):
                    out.append(cfg.dot_token + to_text(node) + cfg.close_token)
                else:
                    out.append(cfg.separator)
                    stack.append((_TAIL, node.rest))
                    stack.append((_ELEMENT, node.first))
            elif isinstance(node, Empty):
                out.append(cfg.empty_token)
            elif isinstance(node, Symbol):
                out.append(to_text(node))
            elif _is_dotted(node):
                out.append(
                    cfg.open_token + to_text(node.first) + cfg.dot_token
                    + to_text(node.rest) + cfg.close_token
                )
            else:
                out.append(cfg.open_token)
                stack.append((_TAIL, node.rest))
                stack.append((_ELEMENT, node.first))

        return "".join(out).strip()

    def _render_heuristic(self, root: Node) -> str:
        """Render with trim-then-close bookkeeping in a single pass.

        A popped Empty closes the innermost list, first trimming a
        trailing close token or separator. The trim also eats the close
        token written by a dotted pair, which is why this policy can emit
        one close fewer than it opens.
        """
        cfg = self.config
        trimmable = (cfg.close_token, cfg.separator)
        out: List[str] = [cfg.open_token]
        stack: List[Node] = [root]

        while stack:
            node = stack.pop()

            if isinstance(node, Empty):
                last = out[-1]
                if last[-1] in trimmable:
                    # Fragments are never empty; drop one the trim used up
                    if len(last) > 1:
                        out[-1] = last[:-1]
                    else:
                        out.pop()
                out.append(cfg.close_token + cfg.separator)
            elif isinstance(node, Symbol):
                out.append(to_text(node) + cfg.separator)
            else:
                if _is_dotted(node):
                    out.append(
                        to_text(node.first) + cfg.dot_token
                        + to_text(node.rest) + cfg.close_token
                    )
                else:
                    stack.append(node.rest)
                    stack.append(node.first)

                # Open a list for a nested or empty first element
                if isinstance(node.first, (Pair, Empty)):
                    out.append(cfg.open_token)

        return "".join(out).strip()


def to_notation(x: Node, config: Optional[NotationConfig] = None) -> str:
    """Render ``x`` as parenthesized text.

    Empty renders as ``()`` and a lone Symbol as its bare value.

    Args:
        x: The expression to render
        config: Optional printer configuration

    Returns:
        The notation text

    Example:
        >>> to_notation(make_list("a", make_list("b", "c")))
        '(a (b c))'
    """
    return NotationPrinter(config).render(x)
