"""
CellGraph Core Value Model

This module implements the recursive value algebra: integer leaves, ordered
lists, and cells. A cell is a shared, late-bound placeholder and the only way
a value graph can alias itself or contain a cycle.
"""

from typing import Any, Iterable, List, Optional
import logging

from .config import get_config
from .exceptions import CellAlreadyResolvedError, InvalidOperation

logger = logging.getLogger(__name__)

UNINIT = object()

INT = 'int'
CELL = 'cell'
LIST = 'list'


class CellSlot:
    """Shared storage behind every handle of one cell."""

    __slots__ = ("contents",)

    def __init__(self, contents: Any = UNINIT):
        self.contents = contents

    def __repr__(self) -> str:
        return "<CellSlot UNINIT>" if self.contents is UNINIT else f"<CellSlot {self.contents!r}>"


class Value:
    """
    A node in a value graph.

    Each value has a kind:
    - 'int': an immutable integer leaf held in ``payload``
    - 'cell': a handle onto a ``CellSlot`` held in ``payload``
    - 'list': an ordered sequence of owned values held in ``items``

    Copying a cell handle keeps the slot, so every copy is the same node.
    """

    __slots__ = ("kind", "payload", "items")

    def __init__(self, kind: str, payload: Any = None, items: Optional[List['Value']] = None):
        self.kind = kind
        self.payload = payload
        self.items = items if items is not None else []

    @property
    def is_int(self) -> bool:
        return self.kind == INT

    @property
    def is_cell(self) -> bool:
        return self.kind == CELL

    @property
    def is_list(self) -> bool:
        return self.kind == LIST

    @property
    def is_initialized(self) -> bool:
        """False only for a cell that has not been resolved yet."""
        return not self.is_cell or self.payload.contents is not UNINIT

    @property
    def contents(self) -> Optional['Value']:
        """Current contents of a cell, or None while it is uninitialized."""
        if not self.is_cell:
            raise InvalidOperation(self.kind, 'read contents of')
        contents = self.payload.contents
        return None if contents is UNINIT else contents

    @property
    def children(self) -> List['Value']:
        """Values directly reachable from this node, in render order."""
        if self.is_list:
            return self.items
        if self.is_cell and self.payload.contents is not UNINIT:
            return [self.payload.contents]
        return []

    def resolve(self, value: 'Value') -> None:
        """
        Bind a cell to a value.

        The cell stores a clone of ``value``, so only cells can make two
        places in a graph refer to the same node. Cell handles inside the
        clone keep their slot, so binding a cell to a structure that
        contains the cell itself is still how cycles are made. Every handle
        of the cell observes the new contents.

        Args:
            value: The value the cell should hold

        Raises:
            InvalidOperation: If this value is not a cell
            TypeError: If ``value`` is not a Value
            CellAlreadyResolvedError: If the cell is already bound and
                rebinding is disabled in the configuration
        """
        if not self.is_cell:
            raise InvalidOperation(self.kind, 'resolve')
        if not isinstance(value, Value):
            raise TypeError(f"A cell can only hold a Value, got {type(value).__name__}")

        slot = self.payload
        if slot.contents is not UNINIT:
            if not get_config().cells.allow_rebind:
                raise CellAlreadyResolvedError()
            logger.debug(f"Rebinding cell {id(slot):#x}")

        slot.contents = clone_value(value)
        logger.debug(f"Resolved cell {id(slot):#x} to a value of kind '{value.kind}'")

    def clone(self) -> 'Value':
        return clone_value(self)

    def __repr__(self) -> str:
        """
        Render through format_value with the global formatter settings, so
        the text follows any custom tokens set via set_config.
        """
        from .formatter import format_value
        return format_value(self)

    __str__ = __repr__


# Helper functions for creating values
def int_(x: int) -> Value:
    """Create an integer leaf. Only real ints are accepted; bools are rejected."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"int_() expects an int, got {type(x).__name__}")
    return Value(INT, x)

def cell() -> Value:
    """Create a fresh, uninitialized cell."""
    return Value(CELL, CellSlot())

def list_(items: Iterable[Value] = ()) -> Value:
    """Create a list owning clones of the given values."""
    return Value(LIST, None, [clone_value(item) for item in items])


def clone_value(value: Value) -> Value:
    """
    Copy a value.

    Integers are copied by value and lists element by element. Cells copy
    only the handle: the clone shares the original's slot, so both refer to
    the same node and see the same contents.

    Args:
        value: The value to clone

    Returns:
        A new Value
    """
    if value.is_cell:
        return Value(CELL, value.payload)
    if value.is_list:
        return Value(LIST, None, [clone_value(item) for item in value.items])
    return Value(value.kind, value.payload)


def node_identity(value: Value) -> int:
    """
    Identity of the node a value refers to.

    All handles of one cell share the identity of their slot. Any other value
    is its own node. The identity is only meaningful while the graph is alive.
    """
    if value.is_cell:
        return id(value.payload)
    return id(value)
