"""
lowperf: runnable catalogue of common performance anti-patterns.

Five isolated procedures each allocate throwaway data in a deliberately
wasteful way and print a short summary:

- string_accumulation: string += inside a loop, then split/filter/rebuild
- object_creation: one transient object graph per iteration, half retained
- collection_usage: unsized containers and a narrow, duplicate-heavy key space
- leak_simulation: grow-only retention in a long-lived cache
- boxing_waste: wrap/unwrap of every integer in a boxed sequence

Example:
    >>> from lowperf import FixedClock, RetentionCache, leak_simulation
    >>>
    >>> cache = RetentionCache()
    >>> leak_simulation(cache, iterations=10, clock=FixedClock())["cache_size"]
    Simulating memory leaks...
    Added 10 items to global cache
    10

Determinism:
    Time and randomness are injected. Pass a FixedClock and a factory from
    seeded_random_factory() to make a run reproducible; the allocation
    pattern is the same either way.

Retention:
    RetentionCache never shrinks. process_cache() returns the instance the
    demo entry point shares across runs, so repeated runs in one process
    keep accumulating.
"""

from __future__ import annotations

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("lowperf")
except Exception:
    __version__ = "0+unknown"

from lowperf._api import (
    Clock,
    FixedClock,
    RandomFactory,
    SystemClock,
    fresh_random,
    seeded_random_factory,
)
from lowperf.errors import LowPerfError, ProfileError
from lowperf.procedures import (
    accumulate_records,
    boxing_waste,
    build_users,
    collection_usage,
    leak_simulation,
    object_creation,
    string_accumulation,
    uppercase_marked,
)
from lowperf.records import Address, BoxedFloat, BoxedInt, UserRecord, make_address, make_tags
from lowperf.retention import RetentionCache, process_cache

__all__ = [
    "__version__",
    # Capabilities
    "Clock",
    "SystemClock",
    "FixedClock",
    "RandomFactory",
    "fresh_random",
    "seeded_random_factory",
    # Errors
    "LowPerfError",
    "ProfileError",
    # Records
    "Address",
    "UserRecord",
    "BoxedInt",
    "BoxedFloat",
    "make_address",
    "make_tags",
    # Retention
    "RetentionCache",
    "process_cache",
    # Procedures
    "string_accumulation",
    "accumulate_records",
    "uppercase_marked",
    "object_creation",
    "build_users",
    "collection_usage",
    "leak_simulation",
    "boxing_waste",
]
