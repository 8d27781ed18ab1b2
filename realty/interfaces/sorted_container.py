"""
SortedContainer abstract base class for price-keyed listing containers.
"""

from abc import abstractmethod
from collections.abc import Sequence

from realty.interfaces.ordered_iterable import OrderedIterable
from realty.models.listing import Listing


class SortedContainer(OrderedIterable):
    """
    Abstract base class for containers of listings with unique prices.

    Inherits ordered iteration from OrderedIterable.

    Implementations:
    - BinarySearchTree: unbalanced, parent-linked search tree
    """

    @abstractmethod
    def insert(self, entry: Listing) -> bool:
        """
        Insert a listing unless its price is already present.

        Args:
            entry: The listing to insert.

        Returns:
            True if inserted, False if the price was already taken.
        """
        pass

    @abstractmethod
    def delete(self, price: int) -> bool:
        """
        Remove the listing with the given price.

        Args:
            price: The price to remove.

        Returns:
            True if a listing was removed, False otherwise.
        """
        pass

    @abstractmethod
    def get(self, price: int) -> Listing | None:
        """
        Retrieve the listing at a price.

        Returns:
            The listing if found, None otherwise.
        """
        pass

    @abstractmethod
    def minimum(self) -> Listing | None:
        """Return the lowest priced listing, or None if empty."""
        pass

    @abstractmethod
    def next_greater(self, floor: int) -> Listing | None:
        """
        Return the listing with the smallest price strictly above floor.

        Args:
            floor: Exclusive lower bound.

        Returns:
            The listing, or None if no price exceeds floor.
        """
        pass

    @abstractmethod
    def bulk_load(
        self, entries: Sequence[Listing], lo: int = 0, hi: int | None = None
    ) -> int:
        """
        Insert entries[lo:hi] middle-first so sorted input yields a balanced tree.

        Returns:
            Number of listings actually inserted.
        """
        pass

    @abstractmethod
    def export_sorted(self, out: list[Listing] | None = None) -> list[Listing]:
        """
        Return all listings in ascending price order.

        Args:
            out: Destination list, used if it has room for every listing.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of listings.

        Time complexity: O(1)
        """
        pass
