"""
CellGraph Cycle-Safe Formatter

This module renders a value graph to text. Every distinct node is rendered
at most once per call; any later encounter of the same node, whether it is
a true cycle or plain sharing, is written as a back-reference marker.

Output grammar with the default tokens:

    value := integer | "uninit" | "*" | list
    list  := "[" [ value { ", " value } ] "]"
"""

from typing import List, Optional, Set
import logging

from .config import FormatterConfig, get_config
from .core import UNINIT, Value, node_identity

logger = logging.getLogger(__name__)


class _Chunk(str):
    """Literal text scheduled on the work stack."""


class ValueFormatter:
    """
    Per-call rendering state: the set of node identities already entered
    and the output chunks in visit order.

    Traversal uses an explicit work stack. A node is marked visited when it
    is popped, before anything it contains is scheduled, so the output is
    the same as a recursive pre-order walk without its depth limit.
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or get_config().formatter
        self.visited: Set[int] = set()
        self.chunks: List[str] = []

    def add(self, chunk: str) -> None:
        """Append a chunk of output."""
        self.chunks.append(chunk)

    def string(self) -> str:
        """Get the rendered text."""
        return "".join(self.chunks)

    def visit(self, root: Value) -> None:
        """Render ``root`` and everything reachable from it."""
        cfg = self.config
        stack = [root]

        while stack:
            item = stack.pop()

            if isinstance(item, _Chunk):
                self.add(item)
                continue

            ident = node_identity(item)
            if ident in self.visited:
                self.add(cfg.back_reference)
                continue
            self.visited.add(ident)

            if item.is_int:
                self.add(str(item.payload))

            elif item.is_cell:
                contents = item.payload.contents
                if contents is UNINIT:
                    self.add(cfg.uninit_token)
                else:
                    stack.append(contents)

            elif item.is_list:
                # Pushed in reverse so the first item is popped first
                stack.append(_Chunk(cfg.close_bracket))
                for index in range(len(item.items) - 1, -1, -1):
                    stack.append(item.items[index])
                    if index > 0:
                        stack.append(_Chunk(cfg.separator))
                self.add(cfg.open_bracket)

            else:
                raise ValueError(f"Unknown value kind: {item.kind}")


def format_value(root: Value, config: Optional[FormatterConfig] = None) -> str:
    """
    Render a value graph to a string.

    Never fails on a well-formed graph and never modifies it: uninitialized
    cells render as the uninit token and revisited nodes as the
    back-reference token.

    Args:
        root: The value to render
        config: Rendering tokens (defaults to the global configuration)

    Returns:
        The rendered text
    """
    formatter = ValueFormatter(config)
    formatter.visit(root)
    logger.debug(f"Formatted {len(formatter.visited)} distinct nodes")
    return formatter.string()
