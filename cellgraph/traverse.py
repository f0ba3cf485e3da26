"""
CellGraph Traversal

Cycle-safe iteration over the distinct nodes of a value graph.
"""

from typing import Iterator, Optional, Tuple

from .core import Value, node_identity


def iter_nodes(root: Value) -> Iterator[Tuple[Optional[Value], Optional[int], Value]]:
    """
    Generator that yields (parent, child_idx, node) for every distinct node
    reachable from ``root``.

    Nodes come out in depth-first pre-order, the same order the formatter
    renders them in. A node reached again through a cycle or a shared cell
    is not yielded a second time.

    Args:
        root: The value to start from

    Yields:
        Tuple of (parent, child_idx, node) where:
        - parent: The value the node was reached from (None for root)
        - child_idx: Position in parent.children (None for root, 0 for
          the contents of a cell)
        - node: The node being visited

    Example:
        >>> x = cell()
        >>> x.resolve(list_([int_(1), x]))
        >>> [node.kind for _, _, node in iter_nodes(x)]
        ['cell', 'list', 'int']
    """
    seen = set()
    stack = [(None, None, root)]

    while stack:
        parent, child_idx, node = stack.pop()
        ident = node_identity(node)
        if ident in seen:
            continue
        seen.add(ident)

        yield (parent, child_idx, node)

        children = node.children
        for idx in range(len(children) - 1, -1, -1):
            stack.append((node, idx, children[idx]))


def count_nodes(root: Value) -> int:
    """Number of distinct nodes reachable from ``root``."""
    return sum(1 for _ in iter_nodes(root))
