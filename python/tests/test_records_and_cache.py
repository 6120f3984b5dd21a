"""Tests for the record types, capabilities and the retention cache."""

import random

from lowperf import (
    BoxedFloat,
    BoxedInt,
    FixedClock,
    RetentionCache,
    SystemClock,
    fresh_random,
    make_address,
    make_tags,
    process_cache,
    seeded_random_factory,
)
import lowperf


class TestAddress:
    def test_derivation(self):
        a = make_address(12_345)
        assert a.street == "Street 12345"
        assert a.city == "City 45"
        assert a.state == "State 45"
        assert a.zip_code == "12345"

    def test_zip_is_zero_padded_and_wraps(self):
        assert make_address(7).zip_code == "00007"
        assert make_address(100_042).zip_code == "00042"


class TestTags:
    def test_count_and_range(self):
        tags = make_tags(25, seeded_random_factory(0))
        assert len(tags) == 25
        for tag in tags:
            assert tag.startswith("Tag")
            assert 0 <= int(tag[3:]) < 1000

    def test_one_generator_per_call(self):
        calls = []

        def factory():
            calls.append(1)
            return random.Random(0)

        make_tags(10, factory)
        make_tags(10, factory)
        assert len(calls) == 2


class TestBoxes:
    def test_unwrap(self):
        assert BoxedInt(7).unwrap() == 7
        assert BoxedFloat(1.5).unwrap() == 1.5

    def test_repr(self):
        assert repr(BoxedInt(3)) == "BoxedInt(3)"


class TestCapabilities:
    def test_fixed_clock(self):
        clock = FixedClock(millis=5, nanos=6)
        assert clock.millis() == 5
        assert clock.nanos() == 6

    def test_system_clock_moves_forward(self):
        clock = SystemClock()
        a = clock.nanos()
        b = clock.nanos()
        assert b >= a
        assert clock.millis() > 1_600_000_000_000

    def test_fresh_random_returns_new_objects(self):
        assert fresh_random() is not fresh_random()

    def test_seeded_factory_is_deterministic(self):
        f1 = seeded_random_factory(11)
        f2 = seeded_random_factory(11)
        assert [f1().random() for _ in range(5)] == [f2().random() for _ in range(5)]


class TestRetentionCache:
    def test_add_returns_position(self):
        cache = RetentionCache()
        assert cache.add("a") == 0
        assert cache.add("b") == 1
        assert list(cache) == ["a", "b"]
        assert cache.by_index == {0: "a", 1: "b"}

    def test_no_clear_api(self):
        cache = RetentionCache()
        assert not hasattr(cache, "clear")
        assert not hasattr(cache, "remove")

    def test_repr(self):
        cache = RetentionCache()
        cache.add("x")
        assert repr(cache) == "RetentionCache(items=1, indexed=1)"

    def test_process_cache_is_a_singleton(self):
        assert process_cache() is process_cache()
        assert isinstance(process_cache(), RetentionCache)


class TestPackage:
    def test_all_exported(self):
        for name in lowperf.__all__:
            assert hasattr(lowperf, name), f"{name} in __all__ but not in module"

    def test_errors_hierarchy(self):
        assert issubclass(lowperf.ProfileError, lowperf.LowPerfError)
        assert issubclass(lowperf.ProfileError, ValueError)
