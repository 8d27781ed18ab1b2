"""
Custom exceptions for the listing container.
"""


class ListingFormatError(ValueError):
    """
    Raised when a listing record cannot be parsed from its text form.

    The expected form is "$<price>:<address>".
    """

    def __init__(self, text: str, reason: str):
        """
        Initialize format error.

        Args:
            text: The record text that failed to parse.
            reason: Why the text was rejected.
        """
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed listing {text!r}: {reason}")


class IllegalStateError(RuntimeError):
    """Raised when an iterator operation is not valid in its current state."""


class ConcurrentModificationError(RuntimeError):
    """
    Raised when an iterator is used after its tree changed structurally
    through some other path than the iterator itself.

    This is a fail-fast error: the iterator cannot be resumed.
    """

    def __init__(self, expected: int, actual: int):
        """
        Initialize modification error.

        Args:
            expected: Tree version captured by the iterator.
            actual: Current tree version.
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tree modified during iteration: "
            f"expected version {expected}, found {actual}"
        )


class InvariantError(AssertionError):
    """Raised when a self-check finds the tree structure broken."""
