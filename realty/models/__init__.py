"""
Data models for the listing container.
"""

from realty.models.exceptions import (
    ConcurrentModificationError,
    IllegalStateError,
    InvariantError,
    ListingFormatError,
)
from realty.models.listing import Listing

__all__ = [
    "ConcurrentModificationError",
    "IllegalStateError",
    "InvariantError",
    "Listing",
    "ListingFormatError",
]
