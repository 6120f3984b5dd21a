"""
The five anti-pattern procedures.

Each procedure is an isolated loop that allocates throwaway data, prints a
"starting" line and a summary line, and returns a result dict. The
wastefulness is the payload: none of these loops should be optimized.

Result dicts always carry ``records`` (the iteration count that drives the
throughput figures) and ``iterations``.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Optional

from lowperf._api import Clock, RandomFactory, SystemClock, fresh_random
from lowperf.records import (
    BoxedFloat,
    BoxedInt,
    UserRecord,
    make_address,
    make_tags,
)
from lowperf.retention import RetentionCache

STRING_ITERATIONS = 50_000
OBJECT_ITERATIONS = 100_000
COLLECTION_ITERATIONS = 100_000
LEAK_ITERATIONS = 50_000
BOXING_ITERATIONS = 100_000
SQRT_KEYS = 50_000

DEFAULT_TAG_COUNT = 10
DEFAULT_KEY_SPACE = 1000
PLACEHOLDER_SIZE = 100
LEAK_PADDING = 100

SEPARATOR = ";"
MARKER = "User"


def _check_count(name: str, value: object) -> int:
    """Coerce a loop count to int and reject negatives and bools."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be int (bool not allowed)")
    n = operator.index(value)
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}")
    return n


# -------------------------
# Strings
# -------------------------

def accumulate_records(iterations: int, clock: Clock) -> str:
    """Build one string with += per iteration."""
    result = ""
    for i in range(iterations):
        result += "User" + str(i) + "_Data_Processing_" + str(clock.millis()) + SEPARATOR
    return result


def uppercase_marked(text: str, marker: str = MARKER) -> tuple[str, int, int]:
    """
    Split text on the separator and re-accumulate marked fragments.

    Returns (final_text, fragment_count, matched_count). Each fragment that
    contains ``marker`` is uppercased and followed by a newline.
    """
    parts = text.split(SEPARATOR)
    final = ""
    matched = 0
    for part in parts:
        if marker in part:
            final += part.upper() + "\n"
            matched += 1
    return final, len(parts), matched


def string_accumulation(
    iterations: int = STRING_ITERATIONS,
    clock: Optional[Clock] = None,
    marker: str = MARKER,
) -> dict[str, Any]:
    iterations = _check_count("iterations", iterations)
    clock = clock or SystemClock()
    print("Executing inefficient string operations...")

    accumulated = accumulate_records(iterations, clock)
    final, fragments, matched = uppercase_marked(accumulated, marker)

    print(f"String operations completed. Result length: {len(final)}")
    return {
        "records": iterations,
        "iterations": iterations,
        "accumulated_length": len(accumulated),
        "fragments": fragments,
        "matched_fragments": matched,
        "result_length": len(final),
    }


# -------------------------
# Objects
# -------------------------

def build_users(
    iterations: int,
    tag_count: int = DEFAULT_TAG_COUNT,
    rng_factory: RandomFactory = fresh_random,
) -> list[UserRecord]:
    """Create one record per iteration and keep only even-indexed ones."""
    users: list[UserRecord] = []
    for i in range(iterations):
        user = UserRecord(
            name="User" + str(i),
            age=rng_factory().randrange(100),
            address=make_address(i),
            tags=make_tags(tag_count, rng_factory),
        )
        if i % 2 == 0:
            users.append(user)
    return users


def object_creation(
    iterations: int = OBJECT_ITERATIONS,
    tag_count: int = DEFAULT_TAG_COUNT,
    rng_factory: Optional[RandomFactory] = None,
) -> dict[str, Any]:
    iterations = _check_count("iterations", iterations)
    tag_count = _check_count("tag_count", tag_count)
    print("Creating wasteful objects...")

    users = build_users(iterations, tag_count, rng_factory or fresh_random)

    print(f"Created {len(users)} user objects")
    return {
        "records": iterations,
        "iterations": iterations,
        "created": iterations,
        "retained": len(users),
        "tag_count": tag_count,
    }


# -------------------------
# Collections
# -------------------------

def collection_usage(
    iterations: int = COLLECTION_ITERATIONS,
    key_space: int = DEFAULT_KEY_SPACE,
    placeholder_size: int = PLACEHOLDER_SIZE,
) -> dict[str, Any]:
    iterations = _check_count("iterations", iterations)
    placeholder_size = _check_count("placeholder_size", placeholder_size)
    key_space = _check_count("key_space", key_space)
    if key_space == 0:
        raise ValueError("key_space must be > 0")
    print("Demonstrating bad collection usage...")

    # Unsized containers grow by repeated reallocation.
    numbers: list[int] = []
    data: dict[str, list[None]] = {}
    unique_items: set[str] = set()

    for i in range(iterations):
        numbers.append(i)
        data["key" + str(i)] = [None] * placeholder_size
        unique_items.add("item" + str(i % key_space))

    even_numbers: list[int] = []
    for num in numbers:
        if num % 2 == 0:
            even_numbers.append(num)

    print(f"Collections processed: {len(even_numbers)} even numbers")
    return {
        "records": iterations,
        "iterations": iterations,
        "numbers": len(numbers),
        "mapping_size": len(data),
        "unique_items": len(unique_items),
        "key_space": key_space,
        "even_numbers": len(even_numbers),
    }


# -------------------------
# Retention
# -------------------------

def leak_simulation(
    cache: RetentionCache,
    iterations: int = LEAK_ITERATIONS,
    clock: Optional[Clock] = None,
    padding: int = LEAK_PADDING,
) -> dict[str, Any]:
    iterations = _check_count("iterations", iterations)
    padding = _check_count("padding", padding)
    clock = clock or SystemClock()
    print("Simulating memory leaks...")

    before = len(cache)
    for i in range(iterations):
        data = "LargeDataString_" + str(i) + "_" + "x" * padding + "_" + str(clock.nanos())
        cache.add(data)

    print(f"Added {len(cache)} items to global cache")
    return {
        "records": iterations,
        "iterations": iterations,
        "added": len(cache) - before,
        "cache_size": len(cache),
        "index_size": len(cache.by_index),
    }


# -------------------------
# Boxing
# -------------------------

def boxing_waste(
    iterations: int = BOXING_ITERATIONS,
    sqrt_keys: int = SQRT_KEYS,
) -> dict[str, Any]:
    iterations = _check_count("iterations", iterations)
    sqrt_keys = _check_count("sqrt_keys", sqrt_keys)
    print("Demonstrating boxing/unboxing waste...")

    boxed_integers: list[BoxedInt] = []
    for i in range(iterations):
        boxed_integers.append(BoxedInt(i))

    total = 0
    for boxed in boxed_integers:
        total += boxed.unwrap()
        total += boxed.unwrap() * 2

    calculations: dict[int, BoxedFloat] = {}
    for i in range(sqrt_keys):
        calculations[i] = BoxedFloat(math.sqrt(i))

    print(f"Boxing operations completed. Sum: {total}")
    return {
        "records": iterations,
        "iterations": iterations,
        "sum": total,
        "boxed": len(boxed_integers),
        "calculations": len(calculations),
    }
