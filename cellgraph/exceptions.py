"""
CellGraph Exceptions

Error types raised by the value model when its contract is violated.
"""


class CellGraphError(Exception):
    """Base exception for all CellGraph errors."""
    pass


class InvalidOperation(CellGraphError):
    """An operation was applied to a value kind that does not support it."""
    def __init__(self, kind: str, operation: str, reason: str = ""):
        self.kind = kind
        self.operation = operation
        message = f"Cannot {operation} a value of kind '{kind}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CellAlreadyResolvedError(InvalidOperation):
    """Attempt to rebind a cell while rebinding is disabled."""
    def __init__(self):
        super().__init__('cell', 'resolve', "cell is already resolved and rebinding is disabled")
