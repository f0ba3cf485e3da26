"""
CellGraph: a recursive value algebra with shared, late-bound cells.

This package implements integer, list and cell values, where cells can be
resolved after the structures referring to them are built, and a formatter
that renders such graphs safely even when they contain cycles.
"""

from .core import Value, CellSlot, UNINIT, int_, cell, list_, clone_value, node_identity
from .exceptions import CellGraphError, InvalidOperation, CellAlreadyResolvedError
from .formatter import ValueFormatter, format_value
from .traverse import iter_nodes, count_nodes
from .verify import verify_value

__version__ = "0.1.0"
__all__ = [
    "Value", "CellSlot", "UNINIT", "int_", "cell", "list_", "clone_value", "node_identity",
    "CellGraphError", "InvalidOperation", "CellAlreadyResolvedError",
    "ValueFormatter", "format_value", "iter_nodes", "count_nodes", "verify_value"
]
