"""
RangedRandom - Range-bounded draws and uniform selection.

TigerStyle: Composition over a UniformSource, explicit bounds, validation
before any draw so a rejected call never advances the generator.

Usage:
    rng = RangedRandom(seed=12345)
    rng.next_int(0, 10)          # [0, 10)
    rng.next_int_closed(1, 6)    # [1, 6]
    rng.next_element(["a", "b"])
    rng.shuffle(deck)

Instances are not locked. Share one across threads only with external
synchronization; otherwise use RangedRandom.get_instance() or an
InstanceRegistry.
"""

from __future__ import annotations

import random
from collections.abc import Collection, MutableSequence, Sequence
from enum import Enum
from typing import Any, Optional, TypeVar, Union

from .constants import (
    CHAR_CODE_MAX,
    CHAR_CODE_MIN,
    INT8_VALUE_MAX,
    INT8_VALUE_MIN,
    INT16_VALUE_MAX,
    INT16_VALUE_MIN,
    INT32_VALUE_MAX,
    INT32_VALUE_MIN,
    INT64_VALUE_MAX,
    INT64_VALUE_MIN,
    SEED_VALUE_MAX,
    SEED_VALUE_MIN,
)
from .errors import (
    EmptyInputError,
    InternalInconsistencyError,
    InvalidRangeError,
    NullInputError,
)
from .source import MersenneSource, UniformSource

T = TypeVar("T")
E = TypeVar("E", bound=Enum)
S = TypeVar("S", bound=MutableSequence)

CharBound = Union[str, int]


def _require_open(min_value: Any, max_value: Any) -> None:
    if max_value <= min_value:
        raise InvalidRangeError("Max must be greater than min", min_value, max_value)


def _require_closed(min_value: Any, max_value: Any) -> None:
    if max_value < min_value:
        raise InvalidRangeError("Max must be greater or equal than min", min_value, max_value)


def _require_width(kind: str, low: int, high: int, min_value: int, max_value: int) -> None:
    if not (low <= min_value <= high and low <= max_value <= high):
        raise InvalidRangeError(
            f"{kind} bounds must be within [{low}, {high}]", min_value, max_value
        )


def _char_code(value: CharBound) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise InvalidRangeError(f"Char bound must be a single character, got {value!r}")
        return ord(value)
    return value


def _random_seed() -> int:
    return random.randint(SEED_VALUE_MIN, SEED_VALUE_MAX)


class RangedRandom:
    """Uniform generator with range-bounded draws and selection helpers.

    Wraps a UniformSource. A None seed picks a fresh random seed, which is
    still exposed through ``seed`` so any run can be replayed.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        source: Optional[UniformSource] = None,
    ) -> None:
        if source is not None:
            self._seed = seed
            self._source = source
            if seed is not None:
                self._source.seed(seed)
        else:
            self._seed = seed if seed is not None else _random_seed()
            self._source = MersenneSource(self._seed)

    def __repr__(self) -> str:
        return f"RangedRandom(seed={self._seed!r})"

    @classmethod
    def get_instance(cls) -> RangedRandom:
        """Return the calling thread's instance, creating it on first use."""
        from .registry import get_thread_instance

        return get_thread_instance()

    # =========================================================================
    # Seeding
    # =========================================================================

    @property
    def seed(self) -> Optional[int]:
        """The seed this generator was last seeded with."""
        return self._seed

    @property
    def source(self) -> UniformSource:
        return self._source

    def set_seed(self, seed: Optional[int] = None) -> None:
        """Restart the generator from the given seed (None picks a new one)."""
        self._seed = seed if seed is not None else _random_seed()
        self._source.seed(self._seed)

    def fork(self) -> RangedRandom:
        """Create an independent generator seeded from this one.

        Deterministic: the same parent state always forks the same child.
        Use it to hand each worker its own generator.
        """
        return RangedRandom(seed=self._source.next_below(SEED_VALUE_MAX + 1))

    # =========================================================================
    # Core Draws
    # =========================================================================

    def next_bool(self) -> bool:
        return self._source.next_bool()

    def next_int32(self) -> int:
        return self._source.next_int32()

    def next_int64(self) -> int:
        return self._source.next_int64()

    def next_float32(self) -> float:
        return self._source.next_float32()

    def next_float64(self) -> float:
        return self._source.next_float64()

    def next_bool_with_probability(self, probability: float) -> bool:
        """Return True with the given probability.

        The probability is not validated: values <= 0.0 are (almost) never
        True and values >= 1.0 are always True.
        """
        return self._source.next_float64() <= probability

    def next_gaussian(self, mean: float = 0.0, deviation: float = 1.0) -> float:
        """Normal draw scaled to ``mean`` and ``deviation``.

        Any deviation is accepted; a negative one mirrors the draw.
        """
        return mean + deviation * self._source.next_gaussian()

    # =========================================================================
    # Integer Ranges
    # =========================================================================

    def _int_open(self, min_value: int, max_value: int) -> int:
        return min_value + self._source.next_below(max_value - min_value)

    def _int_closed(self, min_value: int, max_value: int) -> int:
        return min_value + self._source.next_below(max_value - min_value + 1)

    def next_byte(self, min_value: int, max_value: int) -> int:
        """Random 8-bit integer in [min_value, max_value)."""
        _require_open(min_value, max_value)
        _require_width("Byte", INT8_VALUE_MIN, INT8_VALUE_MAX, min_value, max_value)
        return self._int_open(min_value, max_value)

    def next_byte_closed(self, min_value: int, max_value: int) -> int:
        """Random 8-bit integer in [min_value, max_value]."""
        _require_closed(min_value, max_value)
        _require_width("Byte", INT8_VALUE_MIN, INT8_VALUE_MAX, min_value, max_value)
        return self._int_closed(min_value, max_value)

    def next_short(self, min_value: int, max_value: int) -> int:
        """Random 16-bit integer in [min_value, max_value)."""
        _require_open(min_value, max_value)
        _require_width("Short", INT16_VALUE_MIN, INT16_VALUE_MAX, min_value, max_value)
        return self._int_open(min_value, max_value)

    def next_short_closed(self, min_value: int, max_value: int) -> int:
        """Random 16-bit integer in [min_value, max_value]."""
        _require_closed(min_value, max_value)
        _require_width("Short", INT16_VALUE_MIN, INT16_VALUE_MAX, min_value, max_value)
        return self._int_closed(min_value, max_value)

    def next_char(self, min_value: CharBound, max_value: CharBound) -> str:
        """Random character with code point in [min_value, max_value).

        Bounds may be one-character strings or integer code points.
        """
        low, high = _char_code(min_value), _char_code(max_value)
        _require_open(low, high)
        _require_width("Char", CHAR_CODE_MIN, CHAR_CODE_MAX, low, high)
        return chr(self._int_open(low, high))

    def next_char_closed(self, min_value: CharBound, max_value: CharBound) -> str:
        """Random character with code point in [min_value, max_value]."""
        low, high = _char_code(min_value), _char_code(max_value)
        _require_closed(low, high)
        _require_width("Char", CHAR_CODE_MIN, CHAR_CODE_MAX, low, high)
        return chr(self._int_closed(low, high))

    def next_int(self, min_value: int, max_value: int) -> int:
        """Random 32-bit integer in [min_value, max_value).

        Raises:
            InvalidRangeError: If max_value <= min_value or a bound is
                outside the 32-bit range.
        """
        _require_open(min_value, max_value)
        _require_width("Int", INT32_VALUE_MIN, INT32_VALUE_MAX, min_value, max_value)
        return self._int_open(min_value, max_value)

    def next_int_closed(self, min_value: int, max_value: int) -> int:
        """Random 32-bit integer in [min_value, max_value].

        Raises:
            InvalidRangeError: If max_value < min_value or a bound is
                outside the 32-bit range.
        """
        _require_closed(min_value, max_value)
        _require_width("Int", INT32_VALUE_MIN, INT32_VALUE_MAX, min_value, max_value)
        return self._int_closed(min_value, max_value)

    def next_long(self, min_value: int, max_value: int) -> int:
        """Random 64-bit integer in [min_value, max_value).

        Scales a [0, 1) float draw by the span, so spans beyond 2**53 lose
        uniformity.
        """
        _require_open(min_value, max_value)
        _require_width("Long", INT64_VALUE_MIN, INT64_VALUE_MAX, min_value, max_value)
        return min_value + int((max_value - min_value) * self._source.next_float64())

    def next_long_closed(self, min_value: int, max_value: int) -> int:
        """Random 64-bit integer in [min_value, max_value], float-scaled like next_long."""
        _require_closed(min_value, max_value)
        _require_width("Long", INT64_VALUE_MIN, INT64_VALUE_MAX, min_value, max_value)
        return min_value + int((max_value - min_value + 1) * self._source.next_float64())

    # =========================================================================
    # Float Ranges
    # =========================================================================

    def next_float(self, min_value: float, max_value: float) -> float:
        """Random float in [min_value, max_value) from a float32-granular draw."""
        _require_open(min_value, max_value)
        return min_value + (max_value - min_value) * self._source.next_float32()

    def next_double(self, min_value: float, max_value: float) -> float:
        """Random float in [min_value, max_value)."""
        _require_open(min_value, max_value)
        return min_value + (max_value - min_value) * self._source.next_float64()

    # =========================================================================
    # Selection
    # =========================================================================

    def next_element(self, source: Collection[T]) -> T:
        """Return a uniformly chosen element of ``source``.

        Sequences (list, tuple, str, bytes, range, ...) are indexed directly.
        Other sized collections (set, dict views, ...) are walked in iteration
        order up to the drawn index.

        Raises:
            NullInputError: If source is None.
            EmptyInputError: If source has no elements.
            TypeError: If source is not a sized collection.
        """
        if source is None:
            raise NullInputError("Collection")
        if isinstance(source, Sequence):
            size = len(source)
            if size == 0:
                raise EmptyInputError("Sequence")
            return source[self._source.next_below(size)]
        if not isinstance(source, Collection):
            raise TypeError(
                f"Cannot select from {type(source).__name__}: a sized collection is required"
            )

        size = len(source)
        if size == 0:
            raise EmptyInputError("Collection")
        target = self._source.next_below(size)
        for index, element in enumerate(source):
            if index == target:
                return element
        raise InternalInconsistencyError(
            f"Could not retrieve element {target} from collection of reported size {size}"
        )

    def next_char_from(self, text: str) -> str:
        """Return a uniformly chosen character of ``text``."""
        if text is None:
            raise NullInputError("Text")
        if len(text) == 0:
            raise EmptyInputError("Text")
        return text[self._source.next_below(len(text))]

    def next_enum(self, enum_type: type[E]) -> E:
        """Return a uniformly chosen member of ``enum_type``.

        Members are taken in declaration order; aliases are not counted.
        """
        if enum_type is None:
            raise NullInputError("Enum type")
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"{enum_type!r} is not an Enum type")
        members = list(enum_type)
        if not members:
            raise EmptyInputError("Enum type")
        return self.next_element(members)

    def shuffle(self, seq: S) -> S:
        """Shuffle ``seq`` in place with Fisher-Yates and return it.

        Walks positions from the last index down to 1, swapping each with a
        uniformly drawn index in [0, position].
        """
        if seq is None:
            raise NullInputError("List")
        if not isinstance(seq, MutableSequence):
            raise TypeError(f"Cannot shuffle {type(seq).__name__}: a mutable sequence is required")
        for position in range(len(seq) - 1, 0, -1):
            swap = self._source.next_below(position + 1)
            seq[position], seq[swap] = seq[swap], seq[position]
        return seq
