"""
Tests for the Realty set of listings.
"""

import pytest

from realty import Listing, Realty
from realty.models.exceptions import ListingFormatError
from realty.models.sortedcontainers import BinarySearchTree


class TestRealty:
    """Tests for Realty set operations."""

    def test_add(self, realty):
        """Test adding listings with distinct and repeated prices."""
        assert realty.add(Listing(100, "a"))
        assert not realty.add(Listing(100, "b"))
        assert len(realty) == 1
        assert realty.size() == 1

    def test_add_rejects_other_types(self, realty):
        """Test that only listings can be added."""
        with pytest.raises(TypeError):
            realty.add("$100:a")

    def test_contains(self, realty):
        """Test membership by price and address."""
        realty.add(Listing(100, "a"))
        assert Listing(100, "a") in realty
        assert Listing(100, "b") not in realty
        assert Listing(101, "a") not in realty
        assert "$100:a" not in realty

    def test_remove_matches_address(self, realty):
        """Test that removal needs an equal listing, not just the price."""
        realty.add(Listing(100, "a"))
        assert not realty.remove(Listing(100, "b"))
        assert len(realty) == 1
        assert realty.remove(Listing(100, "a"))
        assert len(realty) == 0
        assert not realty.remove(Listing(100, "a"))
        assert not realty.remove(None)

    def test_discard(self, realty):
        """Test discard of present and absent listings."""
        realty.add(Listing(5, "a"))
        realty.discard(Listing(6, "a"))
        realty.discard(Listing(5, "a"))
        assert len(realty) == 0

    def test_lookups(self, realty, scenario_listings):
        """Test minimum, next_greater and get."""
        for listing in scenario_listings:
            realty.add(listing)
        assert realty.minimum() == Listing(12, "b")
        assert realty.next_greater(25) == Listing(37, "e")
        assert realty.next_greater(75) is None
        assert realty.get(43) == Listing(43, "f")

    def test_scenario(self, realty, scenario_listings):
        """Test the delete then iterator-remove walkthrough."""
        for listing in scenario_listings:
            realty.add(listing)
        assert realty.size() == 6

        assert realty.remove(Listing(37, "e"))
        assert [l.price for l in realty.to_list()] == [12, 25, 43, 50, 75]

        it = realty.iterator()
        for listing in it:
            if listing == Listing(43, "f"):
                it.remove()
        assert realty.size() == 4
        assert [l.price for l in realty.to_list()] == [12, 25, 50, 75]

    def test_add_all(self, realty):
        """Test balanced loading of sorted listings."""
        listings = [Listing(p, "x") for p in (12, 25, 37, 43, 50, 75)]
        assert realty.add_all(listings) == 6
        assert realty.add_all(listings) == 0
        assert realty.to_list() == listings

    def test_to_list_into_existing(self, realty):
        """Test filling a caller-supplied list."""
        realty.add(Listing(2, "b"))
        realty.add(Listing(1, "a"))
        out = [None, None, None]
        assert realty.to_list(out) is out
        assert out == [Listing(1, "a"), Listing(2, "b"), None]

    def test_strings(self):
        """Test building from records and printing them back."""
        realty = Realty.from_strings(["$500:1 Main St", "$250:2 Elm St", "$500:dup"])
        assert len(realty) == 2
        assert realty.to_strings() == ["$250:2 Elm St", "$500:1 Main St"]
        assert repr(realty) == "Realty(['$250:2 Elm St', '$500:1 Main St'])"

    def test_from_strings_rejects_bad_record(self):
        """Test that a malformed record stops the load."""
        with pytest.raises(ListingFormatError):
            Realty.from_strings(["$1:a", "2:b"])

    def test_out_of_range_prices(self, realty):
        """Test that out-of-range prices never reach the container."""
        with pytest.raises(ValueError):
            realty.add(Listing(2_000_000_000, "x"))
        with pytest.raises(ValueError):
            realty.add(Listing(-1, "x"))
        assert len(realty) == 0

    def test_custom_container(self):
        """Test supplying the backing container."""
        tree = BinarySearchTree()
        realty = Realty(tree)
        realty.add(Listing(1, "a"))
        assert tree.size() == 1

    def test_container_and_flag_conflict(self):
        """Test that check_invariants cannot be combined with a container."""
        with pytest.raises(ValueError):
            Realty(BinarySearchTree(), check_invariants=True)

    async def test_async_iteration(self, realty):
        """Test async iteration through the facade."""
        realty.add(Listing(2, "b"))
        realty.add(Listing(1, "a"))
        assert [l.price async for l in realty] == [1, 2]
        assert [l.price async for l in realty.async_iterator(1)] == [2]
