"""
Abstract base classes and protocols for listing containers.
"""

from realty.interfaces.ordered_iterable import OrderedIterable
from realty.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
