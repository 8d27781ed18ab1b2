"""
Realty - a set of listings ordered by price, backed by a sorted container.
"""

from collections.abc import AsyncIterator, Iterable, Iterator, Sequence

from realty.interfaces.ordered_iterable import OrderedIterable
from realty.interfaces.sorted_container import SortedContainer
from realty.models.listing import Listing
from realty.models.sortedcontainers import BinarySearchTree


class Realty(OrderedIterable):
    """
    Set of property listings with at most one listing per price.

    Supports:
    - O(h) add, remove and membership tests
    - Lowest price and next-higher-price lookups
    - Fail-fast ordered iteration with remove()
    """

    def __init__(
        self,
        container: SortedContainer | None = None,
        check_invariants: bool | None = None,
    ) -> None:
        """
        Initialize Realty.

        Args:
            container: The backing sorted data structure. Defaults to a new
                BinarySearchTree.
            check_invariants: Passed to the default BinarySearchTree; must be
                None when a container is given.
        """
        if container is None:
            container = BinarySearchTree(check_invariants=check_invariants)
        elif check_invariants is not None:
            raise ValueError("check_invariants only applies to the default container")
        self._container = container

    @classmethod
    def from_strings(cls, lines: Iterable[str], **kwargs) -> "Realty":
        """
        Build a Realty from "$price:address" records.

        Raises:
            ListingFormatError: A record is malformed.
            ValueError: A price is out of range.
        """
        realty = cls(**kwargs)
        for line in lines:
            realty.add(Listing.from_string(line))
        return realty

    def add(self, listing: Listing) -> bool:
        """
        Add a listing unless another one already has its price.

        Args:
            listing: The listing to add.

        Returns:
            True if the listing was added.
        """
        if not isinstance(listing, Listing):
            raise TypeError(f"expected a Listing, got {type(listing).__name__}")
        return self._container.insert(listing)

    def add_all(
        self, listings: Sequence[Listing], lo: int = 0, hi: int | None = None
    ) -> int:
        """
        Add listings[lo:hi] so that sorted input gives a balanced tree.

        Returns:
            Number of listings actually added.
        """
        return self._container.bulk_load(listings, lo, hi)

    def remove(self, listing: object) -> bool:
        """
        Remove a listing equal to the given one (same price and address).

        Returns:
            True if it was present and removed.
        """
        if not isinstance(listing, Listing):
            return False
        if self._container.get(listing.price) != listing:
            return False
        return self._container.delete(listing.price)

    def discard(self, listing: object) -> None:
        self.remove(listing)

    def __contains__(self, listing: object) -> bool:
        if not isinstance(listing, Listing):
            return False
        return self._container.get(listing.price) == listing

    def get(self, price: int) -> Listing | None:
        return self._container.get(price)

    def minimum(self) -> Listing | None:
        """Return the lowest priced listing, or None if empty."""
        return self._container.minimum()

    def next_greater(self, floor: int) -> Listing | None:
        """Return the listing priced next above floor, or None."""
        return self._container.next_greater(floor)

    def to_list(self, out: list[Listing] | None = None) -> list[Listing]:
        """
        Copy all listings, in price order, into a list.

        Args:
            out: List to fill, used only if it has room for every listing.

        Returns:
            The filled list.
        """
        return self._container.export_sorted(out)

    def to_strings(self) -> list[str]:
        return [str(listing) for listing in self._container.export_sorted()]

    def size(self) -> int:
        return self._container.size()

    def __len__(self) -> int:
        return self._container.size()

    def __iter__(self) -> Iterator[Listing]:
        return self._container.__iter__()

    def iterator(self, floor: int | None = None) -> Iterator[Listing]:
        return self._container.iterator(floor)

    def __aiter__(self) -> AsyncIterator[Listing]:
        return self._container.__aiter__()

    def async_iterator(self, floor: int | None = None) -> AsyncIterator[Listing]:
        return self._container.async_iterator(floor)

    def __repr__(self) -> str:
        return f"Realty({self.to_strings()!r})"
