"""
RangedRandom - range-bounded random draws and uniform selection.

Usage:
    from rangedrandom import RangedRandom

    rng = RangedRandom(seed=12345)
    rng.next_int(0, 10)
    rng.next_enum(Color)
    rng.shuffle(cards)

Per-thread instance:
    rng = RangedRandom.get_instance()

Replay lazily created instances with:
    RANGEDRANDOM_SEED=12345 python app.py
"""

from .config import Settings, get_settings
from .errors import (
    RangedRandomError,
    NullInputError,
    EmptyInputError,
    InvalidRangeError,
    InternalInconsistencyError,
)
from .source import UniformSource, MersenneSource
from .ranged import RangedRandom
from .registry import (
    InstanceRegistry,
    derive_seed,
    get_thread_instance,
    discard_thread_instance,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "RangedRandomError",
    "NullInputError",
    "EmptyInputError",
    "InvalidRangeError",
    "InternalInconsistencyError",
    # Sources
    "UniformSource",
    "MersenneSource",
    # Generator
    "RangedRandom",
    # Lifecycle
    "InstanceRegistry",
    "derive_seed",
    "get_thread_instance",
    "discard_thread_instance",
]
