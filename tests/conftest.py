"""
Shared test fixtures for the RangedRandom test suite.

Provides fixtures for:
- Seeded generators (replay with RANGEDRANDOM_TEST_SEED=<seed>)
- Scripted and counting uniform sources
- Clean settings and thread-instance state per test
"""

import os
from typing import Iterable, Optional

import pytest

from rangedrandom import (
    MersenneSource,
    RangedRandom,
    discard_thread_instance,
    get_settings,
)

TEST_SEED_DEFAULT = 12345


# =============================================================================
# Sources
# =============================================================================


class CountingSource(MersenneSource):
    """MersenneSource that counts every draw."""

    def __init__(self, seed: Optional[int] = 0) -> None:
        super().__init__(seed)
        self.draws = 0

    def next_bool(self) -> bool:
        self.draws += 1
        return super().next_bool()

    def next_int32(self) -> int:
        self.draws += 1
        return super().next_int32()

    def next_int64(self) -> int:
        self.draws += 1
        return super().next_int64()

    def next_below(self, bound: int) -> int:
        self.draws += 1
        return super().next_below(bound)

    def next_float32(self) -> float:
        self.draws += 1
        return super().next_float32()

    def next_float64(self) -> float:
        self.draws += 1
        return super().next_float64()

    def next_gaussian(self) -> float:
        self.draws += 1
        return super().next_gaussian()


class ScriptedSource(CountingSource):
    """Source whose next_below and next_float64 answers come from scripts."""

    def __init__(self, below: Iterable[int] = (), floats: Iterable[float] = ()) -> None:
        super().__init__(0)
        self._below = list(below)
        self._floats = list(floats)
        self.bounds: list[int] = []

    def next_below(self, bound: int) -> int:
        self.draws += 1
        self.bounds.append(bound)
        return self._below.pop(0)

    def next_float64(self) -> float:
        self.draws += 1
        return self._floats.pop(0)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_state():
    """Reset cached settings and the thread instance around each test."""
    get_settings.cache_clear()
    discard_thread_instance()
    yield
    get_settings.cache_clear()
    discard_thread_instance()


@pytest.fixture
def seed() -> int:
    """Seed for the test run, overridable for replay."""
    return int(os.environ.get("RANGEDRANDOM_TEST_SEED", TEST_SEED_DEFAULT))


@pytest.fixture
def rng(seed: int) -> RangedRandom:
    """Seeded generator."""
    return RangedRandom(seed)


@pytest.fixture
def counting_rng(seed: int) -> RangedRandom:
    """Seeded generator over a CountingSource."""
    return RangedRandom(source=CountingSource(seed))


@pytest.fixture
def scripted():
    """Factory for generators over a ScriptedSource."""

    def _make(below: Iterable[int] = (), floats: Iterable[float] = ()) -> RangedRandom:
        return RangedRandom(source=ScriptedSource(below, floats))

    return _make
