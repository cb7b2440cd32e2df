"""
UniformSource - the underlying uniform generator.

RangedRandom never generates bits itself; it maps draws from a source into
ranges. The default source is the standard library Mersenne Twister.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable

from .constants import (
    FLOAT32_MANTISSA_BITS,
    INT32_VALUE_MIN,
    INT64_VALUE_MIN,
)


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for uniform generators.

    Allows swapping the Mersenne Twister for a scripted source in tests.
    """

    def next_bool(self) -> bool:
        """Uniform boolean."""
        ...

    def next_int32(self) -> int:
        """Uniform signed 32-bit integer."""
        ...

    def next_int64(self) -> int:
        """Uniform signed 64-bit integer."""
        ...

    def next_below(self, bound: int) -> int:
        """Uniform integer in [0, bound)."""
        ...

    def next_float32(self) -> float:
        """Uniform float in [0, 1) with float32 granularity."""
        ...

    def next_float64(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def next_gaussian(self) -> float:
        """Standard normal draw (mean 0, deviation 1)."""
        ...

    def seed(self, value: Optional[int]) -> None:
        """Reset the source to the sequence of the given seed."""
        ...


class MersenneSource:
    """UniformSource backed by random.Random.

    A None seed draws fresh entropy from the operating system.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def next_bool(self) -> bool:
        return self._random.getrandbits(1) == 1

    def next_int32(self) -> int:
        return self._random.getrandbits(32) + INT32_VALUE_MIN

    def next_int64(self) -> int:
        return self._random.getrandbits(64) + INT64_VALUE_MIN

    def next_below(self, bound: int) -> int:
        assert bound > 0, f"bound ({bound}) must be positive"
        return self._random.randrange(bound)

    def next_float32(self) -> float:
        return self._random.getrandbits(FLOAT32_MANTISSA_BITS) / (1 << FLOAT32_MANTISSA_BITS)

    def next_float64(self) -> float:
        return self._random.random()

    def next_gaussian(self) -> float:
        return self._random.gauss(0.0, 1.0)

    def seed(self, value: Optional[int]) -> None:
        # random.Random.seed() also clears the cached second gauss() value
        self._random.seed(value)
