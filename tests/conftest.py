"""
Shared pytest fixtures for listing container tests.
"""

import pytest

from realty.models.listing import Listing
from realty.models.realty import Realty
from realty.models.sortedcontainers import BinarySearchTree

SCENARIO_PRICES = [50, 12, 25, 75, 37, 43]


@pytest.fixture
def messages():
    """Collect diagnostics sink output."""
    return []


@pytest.fixture
def tree(messages):
    """Provide an empty tree that verifies itself after every operation."""
    return BinarySearchTree(check_invariants=True, sink=messages.append)


@pytest.fixture
def scenario_listings():
    """Provide the six listings of the reference scenario, in insert order."""
    return [Listing(price, address) for price, address in zip(SCENARIO_PRICES, "abcdef")]


@pytest.fixture
def scenario_tree(tree, scenario_listings):
    """Provide a checked tree holding the reference scenario."""
    for listing in scenario_listings:
        assert tree.insert(listing)
    return tree


@pytest.fixture
def realty():
    """Provide a fresh, self-checking Realty instance."""
    return Realty(check_invariants=True)
