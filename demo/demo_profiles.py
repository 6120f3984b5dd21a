#!/usr/bin/env python3
"""Run profile definitions (iteration counts per procedure)."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from lowperf import ProfileError
from lowperf import procedures as proc

QUICK_DIVISOR = 10

_COUNT_FIELDS = (
    "string_iterations",
    "object_iterations",
    "collection_iterations",
    "leak_iterations",
    "boxing_iterations",
    "sqrt_keys",
)


@dataclass
class DemoProfile:
    name: str
    string_iterations: int = proc.STRING_ITERATIONS
    object_iterations: int = proc.OBJECT_ITERATIONS
    collection_iterations: int = proc.COLLECTION_ITERATIONS
    leak_iterations: int = proc.LEAK_ITERATIONS
    boxing_iterations: int = proc.BOXING_ITERATIONS
    sqrt_keys: int = proc.SQRT_KEYS
    tag_count: int = proc.DEFAULT_TAG_COUNT
    key_space: int = proc.DEFAULT_KEY_SPACE
    placeholder_size: int = proc.PLACEHOLDER_SIZE
    leak_padding: int = proc.LEAK_PADDING


def default_profile(profile_name: str) -> DemoProfile:
    if profile_name == "full":
        return DemoProfile(name="full")
    if profile_name == "quick":
        quick = scaled(DemoProfile(name="full"), 1.0 / QUICK_DIVISOR)
        return replace(quick, name="quick")

    # custom default fallback (replaced via config file)
    return DemoProfile(name="custom")


def scaled(profile: DemoProfile, factor: float) -> DemoProfile:
    """Scale every iteration count by factor (sizes and key space untouched)."""
    if factor <= 0:
        raise ProfileError(f"scale factor must be positive, got {factor}")
    changes = {name: int(round(getattr(profile, name) * factor)) for name in _COUNT_FIELDS}
    return replace(profile, **changes)


def _int_field(raw: dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProfileError(f"{key} must be an integer, got {value!r}")
    if value < 0:
        raise ProfileError(f"{key} must be >= 0, got {value}")
    return value


def load_custom_profile(config_path: Path) -> DemoProfile:
    with config_path.open() as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ProfileError(f"{config_path}: profile must be a JSON object")

    known = {f.name for f in fields(DemoProfile)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ProfileError(f"{config_path}: unknown profile keys: {', '.join(unknown)}")

    base = DemoProfile(name=str(raw.get("name", "custom")))
    values = {
        f.name: _int_field(raw, f.name, getattr(base, f.name))
        for f in fields(DemoProfile)
        if f.name != "name"
    }
    if values["key_space"] == 0:
        raise ProfileError("key_space must be > 0")
    return replace(base, **values)


def profile_to_dict(profile: DemoProfile) -> dict[str, Any]:
    return {f.name: getattr(profile, f.name) for f in fields(DemoProfile)}
