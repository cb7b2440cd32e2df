"""
Instance lifecycle - one RangedRandom per thread or per worker key.

TigerStyle: Each owner gets an exclusive generator, so draws never need a
lock. Seeds are always logged so any run can be replayed with
RANGEDRANDOM_SEED=<seed>.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from typing import Hashable, Optional

from .config import get_settings
from .constants import SEED_VALUE_MAX
from .ranged import RangedRandom

logger = logging.getLogger(__name__)

_thread_local = threading.local()

# Instances created so far per thread name, so same-named threads still differ
_thread_name_counts: dict[str, int] = {}
_thread_name_lock = threading.Lock()


def derive_seed(base_seed: int, key: Hashable) -> int:
    """Derive a stable per-owner seed from a base seed and an owner key.

    The key is hashed through its repr, so use str or int keys (or tuples of
    them): an object with the default repr embeds its memory address and
    derives a different seed on every run.
    """
    digest = hashlib.sha256(f"{base_seed}:{key!r}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") & SEED_VALUE_MAX


def _create_instance(base_seed: Optional[int], key: Hashable) -> RangedRandom:
    seed = derive_seed(base_seed, key) if base_seed is not None else None
    instance = RangedRandom(seed)
    if get_settings().log_seeds:
        logger.debug(f"Created RangedRandom for {key!r} (seed={instance.seed})")
    return instance


def _next_thread_key() -> tuple[str, int]:
    name = threading.current_thread().name
    with _thread_name_lock:
        index = _thread_name_counts.get(name, 0)
        _thread_name_counts[name] = index + 1
    return name, index


def get_thread_instance() -> RangedRandom:
    """Return the calling thread's RangedRandom, creating it on first call.

    With RANGEDRANDOM_SEED set, each thread's seed is derived from it and
    the key ``(thread name, n)``, where n counts earlier instances created
    for that name; otherwise a fresh seed is drawn.
    """
    instance = getattr(_thread_local, "instance", None)
    if instance is None:
        instance = _create_instance(get_settings().seed, _next_thread_key())
        _thread_local.instance = instance
    return instance


def discard_thread_instance() -> bool:
    """Drop the calling thread's instance. Returns True if one existed."""
    if getattr(_thread_local, "instance", None) is None:
        return False
    del _thread_local.instance
    return True


class InstanceRegistry:
    """Registry handing out one RangedRandom per worker or task key.

    Instances are created lazily on first lookup. With a base seed, every
    key gets a deterministic seed; otherwise each instance is freshly seeded.

    Usage:
        registry = InstanceRegistry(base_seed=42)
        rng = registry.get("worker-1")
    """

    def __init__(self, base_seed: Optional[int] = None) -> None:
        if base_seed is None:
            base_seed = get_settings().seed
        assert base_seed is None or 0 <= base_seed <= SEED_VALUE_MAX, \
            f"base_seed ({base_seed}) must be in [0, {SEED_VALUE_MAX}]"
        self._base_seed = base_seed
        self._instances: dict[Hashable, RangedRandom] = {}
        self._lock = threading.Lock()

    @property
    def base_seed(self) -> Optional[int]:
        return self._base_seed

    def get(self, key: Hashable) -> RangedRandom:
        """Return the instance owned by ``key``, creating it on first use."""
        with self._lock:
            instance = self._instances.get(key)
            if instance is None:
                instance = _create_instance(self._base_seed, key)
                self._instances[key] = instance
            return instance

    def discard(self, key: Hashable) -> bool:
        """Drop the instance owned by ``key``. Returns True if it existed."""
        with self._lock:
            existed = self._instances.pop(key, None) is not None
        if existed:
            logger.debug(f"Discarded RangedRandom for {key!r}")
        return existed

    def keys(self) -> list[Hashable]:
        with self._lock:
            return list(self._instances)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
