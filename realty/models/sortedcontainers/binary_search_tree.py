"""
Binary search tree of listings keyed by price.

The tree is not rebalanced; bulk_load on sorted input is the way to get a
balanced shape. O(h) point operations where h is the tree height.
"""

import os
from collections.abc import AsyncIterator, Iterator, Sequence

from realty.interfaces.sorted_container import SortedContainer
from realty.logging_config import get_logger
from realty.models.listing import Listing
from realty.models.sortedcontainers.invariants import (
    DiagnosticsSink,
    assert_well_formed,
    log_violation,
)
from realty.models.sortedcontainers.node import Node, leftmost, successor
from realty.models.sortedcontainers.tree_iterator import (
    AsyncTreeIterator,
    TreeIterator,
)

logger = get_logger(__name__)

CHECK_INVARIANTS_ENV = "REALTY_CHECK_INVARIANTS"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


class BinarySearchTree(SortedContainer):
    """
    Unbalanced binary search tree implementation of SortedContainer.

    Properties maintained:
    1. Every price lies strictly between the bounds inherited from its
       ancestors (so prices are unique)
    2. Each node's parent link matches the parent's child link
    3. Every node is reachable from the root
    4. size() equals the number of reachable nodes

    Every insert or delete that changes the structure bumps ``version``,
    which iterators use to fail fast.
    """

    def __init__(
        self,
        check_invariants: bool | None = None,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        """
        Initialize an empty tree.

        Args:
            check_invariants: Verify the structure before and after every
                public operation, raising InvariantError on failure. If None,
                read from the REALTY_CHECK_INVARIANTS environment variable.
            sink: Receives invariant violation messages. Defaults to logging.
        """
        if check_invariants is None:
            check_invariants = _env_flag(CHECK_INVARIANTS_ENV)
        if sink is not None and not callable(sink):
            raise TypeError(f"sink must be callable, got {type(sink).__name__}")

        self._root: Node | None = None
        self._size: int = 0
        self._version: int = 0
        self._check_invariants = check_invariants
        self.sink: DiagnosticsSink = sink or log_violation

        self._check("at end of constructor")

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def version(self) -> int:
        """Structural version, incremented by every insert and delete."""
        return self._version

    @property
    def checks_enabled(self) -> bool:
        return self._check_invariants

    def insert(self, entry: Listing) -> bool:
        """Insert a listing unless its price is taken. O(h)"""
        if not isinstance(entry, Listing):
            raise TypeError(f"expected a Listing, got {type(entry).__name__}")
        self._check("at start of insert()")

        price = entry.price
        parent = None
        current = self._root

        while current is not None:
            if price == current.entry.price:
                self._check("at end of insert()")
                return False
            parent = current
            if price > current.entry.price:
                current = current.right
            else:
                current = current.left

        new_node = Node(entry=entry, parent=parent)
        if parent is None:
            self._root = new_node
        elif price >= parent.entry.price:
            parent.right = new_node
        else:
            parent.left = new_node

        self._size += 1
        self._version += 1
        logger.debug("Inserted %s", entry)

        self._check("at end of insert()")
        return True

    def delete(self, price: int) -> bool:
        """Remove the listing at a price. O(h)"""
        self._check("at start of delete()")

        node = self._find_node(price)
        if node is None:
            return False

        self._delete_node(node)
        self._size -= 1
        self._version += 1
        logger.debug("Deleted %s", node.entry)

        self._check("at end of delete()")
        return True

    def get(self, price: int) -> Listing | None:
        node = self._find_node(price)
        return node.entry if node else None

    def has(self, price: int) -> bool:
        return self._find_node(price) is not None

    def minimum(self) -> Listing | None:
        """Return the lowest priced listing. O(h)"""
        self._check("at start of minimum()")
        if self._root is None:
            return None
        return leftmost(self._root).entry

    def maximum(self) -> Listing | None:
        """Return the highest priced listing. O(h)"""
        current = self._root
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current.entry

    def next_greater(self, floor: int) -> Listing | None:
        """Return the listing with the smallest price above floor. O(h)"""
        self._check("at start of next_greater()")
        node = self._next_greater_node(floor)
        return node.entry if node else None

    def bulk_load(
        self, entries: Sequence[Listing], lo: int = 0, hi: int | None = None
    ) -> int:
        """
        Insert entries[lo:hi], middle element first, then each half.

        Sorted, duplicate-free input produces a height-balanced tree.
        Entries whose price is already present are skipped and not counted.
        """
        if hi is None:
            hi = len(entries)
        if lo < 0 or hi > len(entries) or lo > hi:
            raise ValueError(
                f"invalid range [{lo}, {hi}) for {len(entries)} entries"
            )

        added = 0
        # Pending half-open ranges; the left half is popped before the right.
        pending = [(lo, hi)]
        while pending:
            start, end = pending.pop()
            if start >= end:
                continue
            mid = start + (end - start) // 2
            if self.insert(entries[mid]):
                added += 1
            pending.append((mid + 1, end))
            pending.append((start, mid))

        logger.debug("Bulk loaded %d of %d listings", added, hi - lo)
        return added

    def export_sorted(self, out: list[Listing] | None = None) -> list[Listing]:
        """Return all listings in ascending price order. O(n)"""
        self._check("at start of export_sorted()")
        if out is None or len(out) < self._size:
            out = [None] * self._size

        index = 0
        node = leftmost(self._root) if self._root else None
        while node is not None:
            out[index] = node.entry
            index += 1
            node = successor(node)
        return out

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0
        tallest = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return tallest

    def clear(self) -> None:
        """Remove every listing."""
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.detach()

        self._root = None
        self._size = 0
        self._version += 1
        self._check("at end of clear()")

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Listing]:
        return self.iterator()

    def iterator(self, floor: int | None = None) -> TreeIterator:
        start = self._first_node(floor)
        return TreeIterator(self, start)

    def __aiter__(self) -> AsyncIterator[Listing]:
        return self.async_iterator()

    def async_iterator(self, floor: int | None = None) -> AsyncTreeIterator:
        return AsyncTreeIterator(self.iterator(floor))

    def _check(self, context: str) -> None:
        if self._check_invariants:
            assert_well_formed(self, context)

    def _first_node(self, floor: int | None) -> Node | None:
        if floor is not None:
            return self._next_greater_node(floor)
        return leftmost(self._root) if self._root else None

    def _find_node(self, price: int) -> Node | None:
        """Find node by price."""
        current = self._root
        while current is not None:
            if price < current.entry.price:
                current = current.left
            elif price > current.entry.price:
                current = current.right
            else:
                return current
        return None

    def _next_greater_node(self, floor: int) -> Node | None:
        best = None
        current = self._root
        while current is not None:
            if current.entry.price > floor:
                # Something smaller may still be above floor
                best = current
                current = current.left
            else:
                current = current.right
        return best

    def _delete_node(self, node: Node) -> None:
        """Splice a node out of the tree."""
        if node.right is None:
            self._replace_node(node, node.left)
        else:
            heir = leftmost(node.right)
            if heir is not node.right:
                # Detach the successor first; its right child takes its slot.
                self._replace_node(heir, heir.right)
                heir.right = node.right
                heir.right.parent = heir

            heir.left = node.left
            if heir.left is not None:
                heir.left.parent = heir
            self._replace_node(node, heir)

        node.detach()

    def _replace_node(self, node: Node, child: Node | None) -> None:
        """Put child in node's slot under node's parent."""
        if node.parent is None:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        if child is not None:
            child.parent = node.parent
