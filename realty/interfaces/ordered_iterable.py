"""
OrderedIterable protocol for containers that iterate in ascending key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator

from realty.models.listing import Listing


class OrderedIterable(ABC):
    """
    Protocol for containers that can be walked in ascending price order.

    Implementations must support:
    - Full iteration via __iter__
    - Iteration from a floor via iterator(floor)
    - Async iteration via __aiter__ / async_iterator(floor)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Listing]:
        """Return an iterator over all listings in ascending price order."""
        pass

    @abstractmethod
    def iterator(self, floor: int | None = None) -> Iterator[Listing]:
        """
        Return an iterator over listings priced strictly above a floor.

        Args:
            floor: Exclusive lower bound. If None, starts from the minimum.

        Returns:
            Iterator yielding listings in ascending price order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Listing]:
        """Return an async iterator over all listings in ascending order."""
        pass

    @abstractmethod
    def async_iterator(self, floor: int | None = None) -> AsyncIterator[Listing]:
        """
        Return an async iterator over listings priced strictly above a floor.

        Args:
            floor: Exclusive lower bound. If None, starts from the minimum.

        Returns:
            AsyncIterator yielding listings in ascending price order.
        """
        pass
