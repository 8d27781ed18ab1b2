"""
Sorted container implementations for listings.
"""

from realty.models.sortedcontainers.binary_search_tree import BinarySearchTree
from realty.models.sortedcontainers.tree_iterator import AsyncTreeIterator, TreeIterator

__all__ = ["AsyncTreeIterator", "BinarySearchTree", "TreeIterator"]
