"""Exceptions raised by the typed accessors and decode entrypoints."""

from typing import Optional


class JsonFeedError(Exception):
    """Base exception for jsonfeed_model errors."""
    pass


class TypeMismatchError(JsonFeedError, TypeError):
    """Raised when a stored value's shape disagrees with the expected field kind.

    Missing keys are never a mismatch; only present values of the wrong
    shape are. For array fields, ``index`` points at the offending element.
    """
    def __init__(
        self,
        key: Optional[str],
        expected: str,
        found: str,
        index: Optional[int] = None,
    ):
        self.key = key
        self.expected = expected
        self.found = found
        self.index = index
        location = repr(key) if key is not None else "value"
        if index is not None:
            location += f"[{index}]"
        super().__init__(f"Expected {expected} for {location}, found {found}")


class DecodeError(JsonFeedError, ValueError):
    """Raised when the input cannot be decoded as JSON.

    The underlying parser error is chained as ``__cause__``.
    """
    pass


class BorrowError(JsonFeedError, RuntimeError):
    """Raised when an owned entity is used after being consumed."""
    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(
            f"{entity} was consumed by into_inner() and can no longer be used"
        )
