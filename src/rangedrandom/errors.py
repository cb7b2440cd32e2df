"""
RangedRandom errors.

Validation errors are raised before any draw, so a rejected call never
advances the generator.
"""

from __future__ import annotations

from typing import Any


class RangedRandomError(Exception):
    """Base error for ranged random operations."""

    pass


class NullInputError(RangedRandomError, TypeError):
    """A required collection, text or enum type was None."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} must not be null")
        self.kind = kind


class EmptyInputError(RangedRandomError, ValueError):
    """A required collection, text or enum type had no elements."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} must not be empty")
        self.kind = kind


class InvalidRangeError(RangedRandomError, ValueError):
    """The min/max pair is not valid for the requested interval."""

    def __init__(self, message: str, min_value: Any = None, max_value: Any = None) -> None:
        super().__init__(message)
        self.min_value = min_value
        self.max_value = max_value


class InternalInconsistencyError(RangedRandomError, RuntimeError):
    """A sized source iterated fewer elements than its length reported.

    Fatal: signals a broken collection, never caught by this package.
    """

    pass
