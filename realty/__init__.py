"""
Price-ordered set of property listings.

This package provides a binary search tree keyed by price with:
- add(listing) - O(h), duplicate prices are ignored
- remove(listing) - O(h), matches price and address
- minimum() / next_greater(price) - ordered lookups
- add_all(listings) - middle-first loading for a balanced tree
- Fail-fast iteration with iterator-driven removal
"""

from realty.models.listing import Listing
from realty.models.realty import Realty

__all__ = ["Listing", "Realty"]
