"""
CellGraph Verification

Structural checks over value graphs. Each check returns a tuple of
(is_valid, error_messages) and never modifies the graph.
"""

from typing import Iterator, List, Optional, Tuple
import logging

from .config import get_config
from .core import Value, node_identity
from .traverse import count_nodes, iter_nodes

logger = logging.getLogger(__name__)


def _child_path(parent_path: str, parent: Value, child_idx: int) -> str:
    if parent.is_cell:
        return f"{parent_path}.contents"
    return f"{parent_path}[{child_idx}]"


def iter_paths(root: Value) -> Iterator[Tuple[str, Value]]:
    """
    Yield (path, node) for every distinct node reachable from ``root``.

    Paths read like ``root.contents[3]``: ``[i]`` steps into a list item and
    ``.contents`` steps through a cell.
    """
    paths = {}
    for parent, child_idx, node in iter_nodes(root):
        if parent is None:
            path = "root"
        else:
            path = _child_path(paths[node_identity(parent)], parent, child_idx)
        paths[node_identity(node)] = path
        yield path, node


def check_initialized(root: Value) -> Tuple[bool, List[str]]:
    """
    Check that every reachable cell has been resolved.

    Args:
        root: The graph to check

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    for path, node in iter_paths(root):
        if not node.is_initialized:
            errors.append(f"Uninitialized cell at {path}")

    return len(errors) == 0, errors


def check_acyclic(root: Value) -> Tuple[bool, List[str]]:
    """
    Check that no node is reachable from within itself.

    Sharing a node between siblings is not a cycle; only a path that leads
    back to a node still being walked is reported.

    Args:
        root: The graph to check

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    root_ident = node_identity(root)
    on_path = {root_ident: "root"}
    done = set()
    stack = [(root, "root", enumerate(root.children))]

    while stack:
        node, path, children = stack[-1]
        step = next(children, None)

        if step is None:
            stack.pop()
            ident = node_identity(node)
            del on_path[ident]
            done.add(ident)
            continue

        child_idx, child = step
        child_path = _child_path(path, node, child_idx)
        ident = node_identity(child)

        if ident in on_path:
            errors.append(f"Cycle: {child_path} leads back to {on_path[ident]}")
        elif ident not in done:
            on_path[ident] = child_path
            stack.append((child, child_path, enumerate(child.children)))

    return len(errors) == 0, errors


def check_depth(root: Value, max_depth: int = 64) -> Tuple[bool, List[str]]:
    """
    Check that the graph's nesting depth doesn't exceed the maximum allowed.

    Depth is measured along the walk the formatter takes: a node seen before
    counts as a leaf, so cyclic graphs have a finite depth.

    Args:
        root: The graph to check
        max_depth: Maximum allowed depth

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    seen = set()
    actual_depth = 0
    stack = [(root, 1)]

    while stack:
        node, depth = stack.pop()
        actual_depth = max(actual_depth, depth)
        ident = node_identity(node)
        if ident in seen:
            continue
        seen.add(ident)
        for child in reversed(node.children):
            stack.append((child, depth + 1))

    if actual_depth > max_depth:
        errors.append(f"Graph depth {actual_depth} exceeds maximum allowed depth {max_depth}")

    return len(errors) == 0, errors


def check_node_count(root: Value, max_nodes: int = 10_000) -> Tuple[bool, List[str]]:
    """
    Check that the graph doesn't have too many distinct nodes.

    Args:
        root: The graph to check
        max_nodes: Maximum allowed number of nodes

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    node_count = count_nodes(root)

    if node_count > max_nodes:
        errors.append(f"Graph has {node_count} nodes, exceeds maximum allowed {max_nodes}")

    return len(errors) == 0, errors


def verify_value(root: Value, max_depth: Optional[int] = None,
                 max_nodes: Optional[int] = None) -> Tuple[bool, List[str]]:
    """
    Perform comprehensive verification of a value graph.

    Cycles are legal and are not reported here; use check_acyclic for that.

    Args:
        root: The graph to verify
        max_depth: Maximum allowed depth (defaults to the configured limit)
        max_nodes: Maximum allowed number of nodes (defaults to the configured limit)

    Returns:
        Tuple of (is_valid, error_messages)
    """
    if not isinstance(root, Value):
        return False, ["Root must be a Value"]

    limits = get_config().verifier
    if max_depth is None:
        max_depth = limits.max_depth
    if max_nodes is None:
        max_nodes = limits.max_nodes

    all_errors = []

    checks = [
        check_initialized(root),
        check_depth(root, max_depth),
        check_node_count(root, max_nodes),
    ]

    for is_valid, errors in checks:
        if not is_valid:
            all_errors.extend(errors)

    if all_errors:
        logger.warning(f"Verification found {len(all_errors)} problem(s)")

    return len(all_errors) == 0, all_errors
