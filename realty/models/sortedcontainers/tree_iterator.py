"""
Fail-fast in-order iterators over a BinarySearchTree.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from enum import IntEnum
from typing import TYPE_CHECKING

from realty.models.exceptions import (
    ConcurrentModificationError,
    IllegalStateError,
    InvariantError,
)
from realty.models.listing import Listing
from realty.models.sortedcontainers.invariants import assert_well_formed, is_in_tree
from realty.models.sortedcontainers.node import Node, successor

if TYPE_CHECKING:
    from realty.models.sortedcontainers.binary_search_tree import BinarySearchTree


class IteratorState(IntEnum):
    """Progress of an iterator."""

    FRESH = 0  # next() not called yet
    ACTIVE = 1  # positioned after a yielded listing
    EXHAUSTED = 2  # nothing left to yield


class Validity(IntEnum):
    """Whether the iterator still matches its tree."""

    VALID = 0
    STALE = 1  # tree changed behind the iterator's back; permanent


class TreeIterator(Iterator[Listing]):
    """
    Iterator over a tree in ascending price order.

    Design:
    - ``_cursor`` is the node next() will yield; None means no more.
    - ``_last`` is the node most recently yielded, or None if nothing was
      yielded yet or it has been removed. Only ``_last`` can be removed.
    - ``_version`` is the tree version the iterator last agreed with. Any
      other mismatch makes the iterator STALE for good.

    Removing ``_last`` never disturbs ``_cursor``: when ``_last`` has a right
    subtree its successor is relocated into its slot, not discarded.
    """

    def __init__(self, tree: BinarySearchTree, start: Node | None) -> None:
        """
        Initialize iterator.

        Args:
            tree: The tree to walk.
            start: First node to yield (normally the tree minimum).
        """
        self._tree = tree
        self._cursor = start
        self._last: Node | None = None
        self._version = tree.version
        self._validity = Validity.VALID
        self._state = IteratorState.FRESH

        self._check("at end of constructor")

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def is_stale(self) -> bool:
        """Whether the tree changed through another path (no exception)."""
        return (
            self._validity == Validity.STALE or self._tree.version != self._version
        )

    def __iter__(self) -> TreeIterator:
        return self

    def has_next(self) -> bool:
        self._ensure_valid()
        self._check("in has_next()")
        return self._cursor is not None

    def __next__(self) -> Listing:
        self._ensure_valid()
        self._check("at start of next()")

        if self._cursor is None:
            self._state = IteratorState.EXHAUSTED
            raise StopIteration

        self._last = self._cursor
        self._cursor = successor(self._cursor)
        self._state = (
            IteratorState.ACTIVE if self._cursor is not None else IteratorState.EXHAUSTED
        )

        self._check("at end of next()")
        return self._last.entry

    def remove(self) -> None:
        """
        Delete the listing most recently returned by next().

        Raises:
            IllegalStateError: next() has not been called since the last
                remove(), or was never called.
            ConcurrentModificationError: The tree changed through another path.
        """
        self._ensure_valid()
        if self._last is None:
            raise IllegalStateError("remove() requires a preceding next()")

        price = self._last.entry.price
        self._last = None
        self._tree.delete(price)
        self._version = self._tree.version

        self._check("at end of remove()")

    def _ensure_valid(self) -> None:
        if self._tree.version != self._version:
            self._validity = Validity.STALE
        if self._validity == Validity.STALE:
            raise ConcurrentModificationError(self._version, self._tree.version)

    def _check(self, context: str) -> None:
        """Verify the tree and the iterator's position when checks are on."""
        if not self._tree.checks_enabled:
            return
        assert_well_formed(self._tree, f"{context} of iterator")

        sink = self._tree.sink
        if not is_in_tree(self._tree, self._cursor):
            sink(f"iterator cursor {self._cursor.entry} is not in the tree")
            raise InvariantError(f"iterator invariant false {context}")
        if not is_in_tree(self._tree, self._last):
            sink(f"iterator last {self._last.entry} is not in the tree")
            raise InvariantError(f"iterator invariant false {context}")
        if self._last is not None and successor(self._last) is not self._cursor:
            sink(f"iterator cursor does not follow {self._last.entry}")
            raise InvariantError(f"iterator invariant false {context}")


class AsyncTreeIterator(AsyncIterator[Listing]):
    """Async iterator over a tree (in-memory, no I/O), with the same checks."""

    def __init__(self, inner: TreeIterator) -> None:
        self._inner = inner

    def __aiter__(self) -> AsyncTreeIterator:
        return self

    async def __anext__(self) -> Listing:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None

    def has_next(self) -> bool:
        return self._inner.has_next()

    def remove(self) -> None:
        self._inner.remove()
