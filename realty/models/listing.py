"""
Listing - a priced property record, and its "$price:address" text form.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from realty.models.exceptions import ListingFormatError

# Optional sign, ASCII digits only.
_PRICE_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Listing:
    """
    A property for sale.

    Attributes:
        price: Whole dollars, 0 <= price < CEILING. Orders listings in a tree.
        address: Arbitrary text describing the location.

    Two listings are equal only if both price and address match.
    """

    CEILING: ClassVar[int] = 2_000_000_000

    price: int
    address: str

    def __post_init__(self) -> None:
        """Validate price range and address presence."""
        if isinstance(self.price, bool) or not isinstance(self.price, int):
            raise TypeError(f"price must be an int, got {type(self.price).__name__}")
        if self.price < 0:
            raise ValueError(f"Price cannot be negative, got {self.price}")
        if self.price >= self.CEILING:
            raise ValueError(f"Price cannot be $2B or more, got {self.price}")
        if self.address is None:
            raise ValueError("Address cannot be None")
        if not isinstance(self.address, str):
            raise TypeError(
                f"address must be a str, got {type(self.address).__name__}"
            )

    def __str__(self) -> str:
        """Serialize to "$<price>:<address>"."""
        return f"${self.price}:{self.address}"

    @classmethod
    def from_string(cls, text: str) -> "Listing":
        """
        Parse a listing from "$<price>:<address>".

        The address is everything after the first colon.

        Raises:
            ListingFormatError: No leading '$', no colon, or a price that
                is not an integer.
            ValueError: The price is outside [0, CEILING).
        """
        if not text:
            raise ListingFormatError(text, "empty record")
        colon = text.find(":")
        if colon < 0:
            raise ListingFormatError(text, "can't find end of price")
        if text[0] != "$":
            raise ListingFormatError(text, "price must be in US dollars")

        digits = text[1:colon]
        if not _PRICE_PATTERN.fullmatch(digits):
            raise ListingFormatError(text, f"price {digits!r} is not an integer")

        return cls(price=int(digits), address=text[colon + 1 :])
