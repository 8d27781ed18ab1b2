"""Structural invariant checks for the binary search tree.

The checks are read-only. Every violation is described to a diagnostics
sink, a plain ``Callable[[str], None]``, so callers can log it, collect it
in a list, or raise on it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from realty.logging_config import get_logger
from realty.models.exceptions import InvariantError
from realty.models.listing import Listing

if TYPE_CHECKING:
    from realty.models.sortedcontainers.binary_search_tree import BinarySearchTree
    from realty.models.sortedcontainers.node import Node

logger = get_logger(__name__)

DiagnosticsSink = Callable[[str], None]


def log_violation(message: str) -> None:
    """Default sink: report through the package logger."""
    logger.error("Invariant error found: %s", message)


def check_range(
    tree: BinarySearchTree,
    node: Node | None,
    lo: int,
    hi: int,
    sink: DiagnosticsSink = log_violation,
) -> int | None:
    """Check the subtree rooted at *node* and count its nodes.

    Every price must lie strictly inside ``(lo, hi)``; the bounds narrow to
    ``(lo, price)`` on the left and ``(price, hi)`` on the right. Each node's
    parent link must agree with the child link it was reached through.

    Returns
    -------
    The number of nodes in the subtree, or ``None`` after reporting the
    first violation to *sink*.
    """
    if node is None:
        return 0

    root = tree.root
    seen: set[int] = set()
    count = 0
    # (node, lo, hi, node it was reached from)
    stack: list[tuple[Node, int, int, Node | None]] = [(node, lo, hi, node.parent)]

    while stack:
        current, low, high, came_from = stack.pop()

        if id(current) in seen:
            sink(f"Entry {current.entry} reached twice (cycle)")
            return None
        seen.add(id(current))

        entry = current.entry
        if entry is None:
            sink("None entry in tree")
            return None

        price = entry.price
        if price <= low:
            sink(f"Entry {entry} not greater than {low}")
            return None
        if price >= high:
            sink(f"Entry {entry} not less than {high}")
            return None

        parent = current.parent
        if current is root and parent is not None:
            sink(f"Root entry {entry} has parent {parent.entry}")
            return None
        if current is not root and parent is None:
            sink(f"Entry {entry} has no parent")
            return None
        if parent is current:
            sink(f"Entry {entry} is its own parent")
            return None
        if parent is not None:
            if parent is current.left or parent is current.right:
                sink(f"Entry {entry} has its parent as a child")
                return None
            if parent.left is not current and parent.right is not current:
                sink(f"Entry {entry} is not a child of its parent {parent.entry}")
                return None
            if parent is not came_from:
                sink(f"Entry {entry} has imposter parent {parent.entry}")
                return None

        count += 1
        if current.right is not None:
            stack.append((current.right, price, high, current))
        if current.left is not None:
            stack.append((current.left, low, price, current))

    return count


def well_formed(tree: BinarySearchTree, sink: DiagnosticsSink | None = None) -> bool:
    """Check the whole tree, including the live-node count."""
    if sink is None:
        sink = tree.sink
    root = tree.root
    if root is not None and root.parent is not None:
        sink(f"Root entry {root.entry} has parent {root.parent.entry}")
        return False

    n = check_range(tree, root, -1, Listing.CEILING, sink)
    if n is None:
        return False
    if n != tree.size():
        sink(f"size is {tree.size()} but should be {n}")
        return False
    return True


def assert_well_formed(tree: BinarySearchTree, context: str) -> None:
    """Raise :class:`InvariantError` if the tree is broken.

    Violations are still passed to the tree's own sink before raising.
    """
    messages: list[str] = []

    def collect(message: str) -> None:
        messages.append(message)
        tree.sink(message)

    if not well_formed(tree, collect):
        raise InvariantError(f"invariant false {context}: {'; '.join(messages)}")


def is_in_tree(tree: BinarySearchTree, node: Node | None) -> bool:
    """Return whether *node* is reachable from the root (None counts as in).

    Descends by price, so the tree must already be well formed.
    """
    if node is None:
        return True
    current = tree.root
    price = node.entry.price
    while current is not None:
        if current is node:
            return True
        current = current.right if price > current.entry.price else current.left
    return False
