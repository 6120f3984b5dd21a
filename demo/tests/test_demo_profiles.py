#!/usr/bin/env python3

from __future__ import annotations

import json
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from demo_profiles import (  # noqa: E402
    DemoProfile,
    default_profile,
    load_custom_profile,
    profile_to_dict,
    scaled,
)
from lowperf import ProfileError  # noqa: E402


class DefaultProfileTests(unittest.TestCase):
    def test_full_uses_default_counts(self) -> None:
        p = default_profile("full")
        self.assertEqual(p.string_iterations, 50_000)
        self.assertEqual(p.object_iterations, 100_000)
        self.assertEqual(p.collection_iterations, 100_000)
        self.assertEqual(p.leak_iterations, 50_000)
        self.assertEqual(p.boxing_iterations, 100_000)
        self.assertEqual(p.sqrt_keys, 50_000)
        self.assertEqual(p.tag_count, 10)
        self.assertEqual(p.key_space, 1000)

    def test_quick_is_a_tenth(self) -> None:
        p = default_profile("quick")
        self.assertEqual(p.name, "quick")
        self.assertEqual(p.string_iterations, 5_000)
        self.assertEqual(p.boxing_iterations, 10_000)
        # Shape parameters are not scaled.
        self.assertEqual(p.key_space, 1000)
        self.assertEqual(p.placeholder_size, 100)


class ScaledProfileTests(unittest.TestCase):
    def test_scale_counts(self) -> None:
        p = scaled(DemoProfile(name="x"), 0.5)
        self.assertEqual(p.leak_iterations, 25_000)
        self.assertEqual(p.tag_count, 10)

    def test_non_positive_scale_rejected(self) -> None:
        with self.assertRaises(ProfileError):
            scaled(DemoProfile(name="x"), 0)


class CustomProfileTests(unittest.TestCase):
    def _write(self, payload: object) -> Path:
        tmp = tempfile.NamedTemporaryFile("w", suffix=".json", delete=False)
        with tmp:
            json.dump(payload, tmp)
        path = Path(tmp.name)
        self.addCleanup(path.unlink)
        return path

    def test_missing_keys_fall_back_to_defaults(self) -> None:
        p = load_custom_profile(self._write({"name": "tiny", "leak_iterations": 10}))
        self.assertEqual(p.name, "tiny")
        self.assertEqual(p.leak_iterations, 10)
        self.assertEqual(p.boxing_iterations, 100_000)

    def test_unknown_key_rejected(self) -> None:
        with self.assertRaisesRegex(ProfileError, "unknown profile keys: bogus"):
            load_custom_profile(self._write({"bogus": 1}))

    def test_negative_value_rejected(self) -> None:
        with self.assertRaises(ProfileError):
            load_custom_profile(self._write({"object_iterations": -1}))

    def test_non_integer_value_rejected(self) -> None:
        with self.assertRaises(ProfileError):
            load_custom_profile(self._write({"tag_count": "ten"}))

    def test_zero_key_space_rejected(self) -> None:
        with self.assertRaises(ProfileError):
            load_custom_profile(self._write({"key_space": 0}))

    def test_non_object_rejected(self) -> None:
        with self.assertRaises(ProfileError):
            load_custom_profile(self._write([1, 2]))

    def test_round_trip_through_dict(self) -> None:
        p = default_profile("quick")
        path = self._write(profile_to_dict(p))
        self.assertEqual(load_custom_profile(path), p)


if __name__ == "__main__":
    unittest.main()
