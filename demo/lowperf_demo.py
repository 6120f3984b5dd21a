#!/usr/bin/env python3
"""
Low Performance Demo: runs five classic performance anti-patterns and
reports what each one cost.

Features (run in this order by default):
  P1 (S): String concatenation in a loop
  P2 (O): Massive temporary object creation
  P3 (C): Collection usage without sizing, duplicate-heavy set
  P4 (L): Grow-only retention cache (simulated leak)
  P5 (B): Boxing/unboxing waste

Usage:
    python demo/lowperf_demo.py [--profile=quick] [--feature=P3] [--verbose]

Options:
    --profile=NAME          full (default), quick (1/10 counts) or custom
    --config=PATH           Custom profile JSON (with --profile=custom)
    --scale=F               Multiply every iteration count by F
    --category=X            Run only category X (S, O, C, L, B)
    --feature=PN            Run only feature PN (e.g., P4)
    --seed=N                Reproducible random values for P2
    --repeat=N              Run the selection N times in this process
    --export-json=PATH      Export results to JSON file
    --export-csv=PATH       Export results to CSV file
    --verbose               Show detailed profiling output per feature
    --list                  List all features and exit
    --no-perf               Skip performance measurement
    --no-tracemalloc        Disable tracemalloc and GC tracking

Exit status: 0 on success, 1 if any feature raised, 2 if any result
failed its correctness check.
"""

from __future__ import annotations

import argparse
import csv
import gc
import json
import os
import platform
import sys
import time
import tracemalloc
import traceback
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

import psutil

# Add parent directory to path for lowperf import
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from lowperf import (
    Clock,
    RandomFactory,
    RetentionCache,
    SystemClock,
    boxing_waste,
    collection_usage,
    fresh_random,
    leak_simulation,
    object_creation,
    process_cache,
    seeded_random_factory,
    string_accumulation,
)

from demo_profiles import DemoProfile, default_profile, load_custom_profile, profile_to_dict, scaled

# =============================================================================
# Performance Profiling Infrastructure
# =============================================================================


@dataclass
class PerfMetrics:
    """Performance metrics for a single feature run."""

    name: str
    wall_time_s: float = 0.0
    cpu_time_s: float = 0.0
    records: int = 0
    memory_peak_mb: float = 0.0
    memory_allocated_mb: float = 0.0
    rss_start_mb: float = 0.0
    rss_end_mb: float = 0.0
    rss_delta_mb: float = 0.0
    gc_collections: tuple[int, int, int] = (0, 0, 0)  # gen0, gen1, gen2

    @property
    def records_per_sec(self) -> float:
        return self.records / self.wall_time_s if self.wall_time_s > 0 else 0

    @property
    def ns_per_record(self) -> float:
        return (self.wall_time_s * 1e9) / self.records if self.records > 0 else 0

    @property
    def cpu_efficiency(self) -> float:
        """CPU utilization (cpu_time / wall_time)."""
        return self.cpu_time_s / self.wall_time_s if self.wall_time_s > 0 else 0


class PerfProfiler:
    """
    Context manager collecting:
    - Wall clock time (perf_counter_ns)
    - CPU time (process_time_ns)
    - Traced allocations (tracemalloc)
    - Process RSS (psutil)
    - GC collections per generation
    """

    def __init__(self, name: str, track_memory: bool = True, track_gc: bool = True):
        self.name = name
        self.track_memory = track_memory
        self.track_gc = track_gc
        self._start_wall: int = 0
        self._start_cpu: int = 0
        self._start_gc: tuple[int, int, int] = (0, 0, 0)
        self._mem_tracking: bool = False
        self._owns_tracing: bool = False
        self._mem_baseline: int = 0
        self._rss_start_mb: float = 0.0
        self.metrics: Optional[PerfMetrics] = None
        self.records: int = 0

    def __enter__(self):
        if self.track_gc:
            # Start from a collected heap so the deltas belong to this feature
            gc.collect()
            self._start_gc = _gc_collection_counts()

        if self.track_memory:
            # An outer tracer is left running; measure relative to it
            self._owns_tracing = not tracemalloc.is_tracing()
            if self._owns_tracing:
                tracemalloc.start()
            else:
                tracemalloc.reset_peak()
            self._mem_baseline = tracemalloc.get_traced_memory()[0]
            self._mem_tracking = True

        self._rss_start_mb = get_process_rss_mb()

        # Timing last
        self._start_cpu = time.process_time_ns()
        self._start_wall = time.perf_counter_ns()
        return self

    def __exit__(self, *args):
        end_wall = time.perf_counter_ns()
        end_cpu = time.process_time_ns()

        if self._mem_tracking:
            current, peak = tracemalloc.get_traced_memory()
            current = max(0, current - self._mem_baseline)
            peak = max(0, peak - self._mem_baseline)
            if self._owns_tracing:
                tracemalloc.stop()
            self._mem_tracking = False
        else:
            current = peak = 0

        rss_end_mb = get_process_rss_mb()

        if self.track_gc:
            end_gc = _gc_collection_counts()
            gc_delta = (
                end_gc[0] - self._start_gc[0],
                end_gc[1] - self._start_gc[1],
                end_gc[2] - self._start_gc[2],
            )
        else:
            gc_delta = (0, 0, 0)

        self.metrics = PerfMetrics(
            name=self.name,
            wall_time_s=(end_wall - self._start_wall) / 1e9,
            cpu_time_s=(end_cpu - self._start_cpu) / 1e9,
            records=self.records,
            memory_peak_mb=peak / (1024 * 1024),
            memory_allocated_mb=current / (1024 * 1024),
            rss_start_mb=self._rss_start_mb,
            rss_end_mb=rss_end_mb,
            rss_delta_mb=rss_end_mb - self._rss_start_mb,
            gc_collections=gc_delta,
        )

    def report(self) -> dict:
        if not self.metrics:
            return {"name": self.name, "error": "No metrics collected"}

        m = self.metrics
        m.records = self.records
        return {
            "name": self.name,
            "wall_time_s": m.wall_time_s,
            "cpu_time_s": m.cpu_time_s,
            "cpu_efficiency": m.cpu_efficiency,
            "records": m.records,
            "records_per_sec": m.records_per_sec,
            "ns_per_record": m.ns_per_record,
            "memory_peak_mb": m.memory_peak_mb,
            "memory_allocated_mb": m.memory_allocated_mb,
            "rss_start_mb": m.rss_start_mb,
            "rss_end_mb": m.rss_end_mb,
            "rss_delta_mb": m.rss_delta_mb,
            "gc_gen0": m.gc_collections[0],
            "gc_gen1": m.gc_collections[1],
            "gc_gen2": m.gc_collections[2],
        }


def _gc_collection_counts() -> tuple[int, int, int]:
    stats = gc.get_stats()
    return (
        stats[0]["collections"],
        stats[1]["collections"],
        stats[2]["collections"],
    )


def get_process_rss_mb() -> float:
    """Current process RSS in MB (0 when the platform denies access)."""
    try:
        return psutil.Process().memory_info().rss / (1024 * 1024)
    except psutil.Error:
        return 0.0


def get_system_info() -> dict:
    """Capture system information for run context."""
    info = {
        "python_version": sys.version,
        "platform": platform.platform(),
        "processor": platform.processor(),
        "cpu_count": os.cpu_count(),
        "machine": platform.machine(),
        "psutil_version": psutil.__version__,
    }
    vm = psutil.virtual_memory()
    info.update(
        {
            "mem_total_gb": round(vm.total / (1024 ** 3), 2),
            "mem_available_gb": round(vm.available / (1024 ** 3), 2),
            "mem_percent": vm.percent,
        }
    )
    return info


# =============================================================================
# Anti-pattern catalogue
# =============================================================================

ANTI_PATTERNS = {
    "P1": {
        "time": "O(N^2) without in-place resize",
        "space": "O(N)",
        "notes": "str += copies the text unless CPython can resize a sole reference in place",
    },
    "P2": {"time": "O(N*T)", "space": "O(N/2)", "notes": "T=tags; fresh generator per record and per tag list"},
    "P3": {"time": "O(N)", "space": "O(N*P)", "notes": "P=placeholder size; set sees N inserts for K keys"},
    "P4": {"time": "O(M)", "space": "O(total M)", "notes": "cache is never cleared for the life of the process"},
    "P5": {"time": "O(N)", "space": "O(N)", "notes": "one wrapper object per int, two unwraps per element"},
}


# =============================================================================
# Correctness checks
# =============================================================================


def _p1_assert(result: dict[str, Any]) -> tuple[bool, str]:
    n = result.get("iterations", 0)
    ok = (
        result.get("matched_fragments") == n
        and result.get("result_length") == result.get("accumulated_length")
    )
    return ok, "all fragments matched and result_length==accumulated_length"


def _p2_assert(result: dict[str, Any]) -> tuple[bool, str]:
    n = result.get("iterations", 0)
    return result.get("retained") == (n + 1) // 2, "retained==ceil(N/2)"


def _p3_assert(result: dict[str, Any]) -> tuple[bool, str]:
    n = result.get("iterations", 0)
    ok = (
        result.get("unique_items") == min(result.get("key_space", 0), n)
        and result.get("even_numbers") == (n + 1) // 2
    )
    return ok, "unique_items==min(K,N) and even_numbers==ceil(N/2)"


def _p4_assert(result: dict[str, Any]) -> tuple[bool, str]:
    ok = (
        result.get("added") == result.get("iterations")
        and result.get("index_size") == result.get("cache_size")
    )
    return ok, "added==M and index_size==cache_size"


def _p5_assert(result: dict[str, Any]) -> tuple[bool, str]:
    n = result.get("iterations", 0)
    return result.get("sum") == 3 * n * (n - 1) // 2, "sum==3*N*(N-1)/2"


CORRECTNESS_CHECKS: dict[str, Callable[[dict[str, Any]], tuple[bool, str]]] = {
    "P1": _p1_assert,
    "P2": _p2_assert,
    "P3": _p3_assert,
    "P4": _p4_assert,
    "P5": _p5_assert,
}


# =============================================================================
# Demo Runner
# =============================================================================

def result_sort_key(key: str) -> tuple[str, int]:
    """Order result keys like "P5", "P5#2", "P5#10" by code, then run number."""
    code, _, run = key.partition("#")
    return code, int(run) if run.isdigit() else 1


FEATURES: dict[str, dict] = {}
CATEGORY_ORDER = "SOCLB"


def feature(code: str, name: str, category: str):
    """Decorator to register a demo feature."""

    def decorator(func: Callable):
        FEATURES[code] = {
            "code": code,
            "name": name,
            "category": category,
            "func": func,
            "anti_pattern": ANTI_PATTERNS.get(code, {}),
            "check": CORRECTNESS_CHECKS.get(code),
        }
        return func

    return decorator


class DemoRunner:
    """Runs features with profiling, correctness checks and reporting."""

    def __init__(
        self,
        profile: Optional[DemoProfile] = None,
        verbose: bool = False,
        no_perf: bool = False,
        track_memory: bool = True,
        track_gc: bool = True,
        seed: Optional[int] = None,
        cache: Optional[RetentionCache] = None,
        clock: Optional[Clock] = None,
    ):
        self.profile = profile or default_profile("full")
        self.verbose = verbose
        self.no_perf = no_perf
        self.track_memory = track_memory
        self.track_gc = track_gc
        self.seed = seed
        self.cache = cache if cache is not None else process_cache()
        self.clock: Clock = clock or SystemClock()
        self.rng_factory: RandomFactory = (
            seeded_random_factory(seed) if seed is not None else fresh_random
        )
        self.results: dict[str, dict] = {}
        self.run_index = 0

    def _result_key(self, code: str) -> str:
        return code if self.run_index == 0 else f"{code}#{self.run_index + 1}"

    def run_feature(self, code: str) -> dict:
        """Run a single feature and collect results."""
        key = self._result_key(code)
        if code not in FEATURES:
            self.results[key] = {"error": f"Unknown feature: {code}"}
            print(f"  ERROR: Unknown feature: {code}")
            return self.results[key]

        f = FEATURES[code]
        print()
        print("=" * 80)
        print(f"Feature {code}: {f['name']}")
        print("=" * 80)

        ap = f["anti_pattern"]
        if ap and self.verbose:
            print("ANTI-PATTERN COST:")
            print(f"  Time:  {ap.get('time', 'N/A'):20} {ap.get('notes', '')}")
            print(f"  Space: {ap.get('space', 'N/A')}")
            print()

        try:
            if self.no_perf:
                result = f["func"](self)
            else:
                with PerfProfiler(
                    code,
                    track_memory=self.track_memory,
                    track_gc=self.track_gc,
                ) as profiler:
                    result = f["func"](self)
                    profiler.records = int(result.get("records", 0))
                result.update(profiler.report())

            check = f["check"]
            if check is not None:
                ok, msg = check(result)
                result["correctness"] = "pass" if ok else "fail"
                if not ok:
                    result["correctness_failure"] = msg

            self.results[key] = result

            if self.verbose:
                self._print_verbose_result(result)
            else:
                self._print_brief_result(result)

            return result

        except Exception as e:
            print(f"  ERROR: {e}")
            traceback.print_exc()
            self.results[key] = {"error": str(e)}
            return self.results[key]

    def _print_brief_result(self, result: dict) -> None:
        records = result.get("records", 0)
        wall = result.get("wall_time_s", 0)
        rps = result.get("records_per_sec", 0)
        peak = result.get("memory_peak_mb", 0)

        if not self.no_perf:
            print(
                f"  Iterations: {records:,}  Wall: {wall:.3f}s  Rate: {rps:,.0f} it/sec"
                f"  Peak: {peak:.1f} MB"
            )
        if result.get("correctness") == "fail":
            print(f"  [FAIL] {result.get('correctness_failure')}")

    def _print_verbose_result(self, result: dict) -> None:
        """Print detailed result with box formatting."""
        if not self.no_perf:
            print("PERFORMANCE METRICS:")
            print("  +" + "-" * 60 + "+")
            print("  | TIMING" + " " * 53 + "|")
            print(f"  |   Wall time:      {result.get('wall_time_s', 0):>10.3f}s" + " " * 29 + "|")
            print(f"  |   CPU time:       {result.get('cpu_time_s', 0):>10.3f}s" + " " * 29 + "|")
            print(f"  |   CPU efficiency: {result.get('cpu_efficiency', 0):>10.1%}" + " " * 29 + "|")
            print("  +" + "-" * 60 + "+")
            print("  | THROUGHPUT" + " " * 49 + "|")
            print(f"  |   Iterations:     {result.get('records', 0):>12,}" + " " * 27 + "|")
            print(f"  |   Rate:           {result.get('records_per_sec', 0):>12,.0f} it/sec" + " " * 20 + "|")
            print(f"  |   Cost:           {result.get('ns_per_record', 0):>12,.0f} ns/it" + " " * 21 + "|")
            print("  +" + "-" * 60 + "+")
            print("  | MEMORY" + " " * 53 + "|")
            print(f"  |   Peak:           {result.get('memory_peak_mb', 0):>10.1f} MB" + " " * 27 + "|")
            print(f"  |   Still held:     {result.get('memory_allocated_mb', 0):>10.1f} MB" + " " * 27 + "|")
            print(f"  |   RSS delta:      {result.get('rss_delta_mb', 0):>10.1f} MB" + " " * 27 + "|")
            gc0 = result.get("gc_gen0", 0)
            gc1 = result.get("gc_gen1", 0)
            gc2 = result.get("gc_gen2", 0)
            print(f"  |   GC collections: gen0={gc0}, gen1={gc1}, gen2={gc2}" + " " * 24 + "|")
            print("  +" + "-" * 60 + "+")

        status = result.get("correctness", "na").upper()
        print(f"CORRECTNESS: [{status}]", result.get("correctness_failure", ""))

    def run_category(self, category: str) -> None:
        """Run all features in a category."""
        codes = [code for code, f in sorted(FEATURES.items()) if f["category"] == category]
        if not codes:
            key = self._result_key(category)
            self.results[key] = {"error": f"Unknown category: {category}"}
            print(f"  ERROR: Unknown category: {category}")
            return
        for code in codes:
            self.run_feature(code)

    def run_all(self) -> None:
        """Run all features in order."""
        for code in sorted(FEATURES.keys()):
            self.run_feature(code)

    def failure_counts(self) -> tuple[int, int]:
        """Return (errors, correctness failures) across collected results."""
        errors = sum(1 for r in self.results.values() if "error" in r)
        failed = sum(1 for r in self.results.values() if r.get("correctness") == "fail")
        return errors, failed

    def summary(self) -> str:
        """Generate performance summary table."""
        lines = []
        lines.append("=" * 100)
        lines.append("LOW PERFORMANCE DEMO - SUMMARY")
        seed = "random" if self.seed is None else self.seed
        lines.append(f"Profile: {self.profile.name}  Seed: {seed}")
        lines.append("=" * 100)
        lines.append(
            f"{'Feature':<12} {'Iterations':>12} {'Wall(s)':>10} {'CPU(s)':>10} "
            f"{'It/sec':>12} {'Peak MB':>9} {'GC 0/1/2':>14} {'Check':>8}"
        )
        lines.append("-" * 100)

        for key in sorted(self.results.keys(), key=result_sort_key):
            r = self.results[key]
            if "error" in r:
                lines.append(f"{key:<12} {'ERROR':>12}")
                continue

            gcs = f"{r.get('gc_gen0', 0)}/{r.get('gc_gen1', 0)}/{r.get('gc_gen2', 0)}"
            check = f"[{r.get('correctness', 'na').upper()}]"
            lines.append(
                f"{key:<12} {r.get('records', 0):>12,} {r.get('wall_time_s', 0):>10.3f} "
                f"{r.get('cpu_time_s', 0):>10.3f} {r.get('records_per_sec', 0):>12,.0f} "
                f"{r.get('memory_peak_mb', 0):>9.1f} {gcs:>14} {check:>8}"
            )

        errors, failed = self.failure_counts()
        lines.append("-" * 100)
        lines.append(
            f"TOTAL: {len(self.results)} runs, {errors} errors, {failed} correctness failures, "
            f"retention cache holds {len(self.cache):,} items"
        )
        lines.append("=" * 100)
        return "\n".join(lines)


# =============================================================================
# Export Functions
# =============================================================================


def export_results_json(results: dict, system_info: dict, config: dict, path: Path) -> None:
    """Export results to JSON for later analysis."""
    export = {
        "timestamp": datetime.now().isoformat(),
        "system": system_info,
        "config": config,
        "results": results,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(export, f, indent=2, default=str)
    print(f"Results exported to: {path}")


CSV_FIELDS = [
    "feature",
    "records",
    "wall_time_s",
    "cpu_time_s",
    "cpu_efficiency",
    "records_per_sec",
    "ns_per_record",
    "memory_peak_mb",
    "memory_allocated_mb",
    "rss_delta_mb",
    "gc_gen0",
    "gc_gen1",
    "gc_gen2",
    "correctness",
]


def export_results_csv(results: dict, path: Path) -> None:
    """Export results to CSV for spreadsheet analysis."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for key in sorted(results.keys(), key=result_sort_key):
            r = results[key]
            if "error" in r:
                continue
            row = {name: r.get(name, 0) for name in CSV_FIELDS}
            row["feature"] = key
            row["correctness"] = r.get("correctness", "na")
            writer.writerow(row)
    print(f"Results exported to: {path}")


def print_system_info(info: dict, config: Optional[dict] = None) -> None:
    """Print system information header."""
    print("=" * 80)
    print("SYSTEM INFORMATION")
    print("=" * 80)
    print(f"  Python:    {info.get('python_version', 'unknown').split()[0]}")
    print(f"  Platform:  {info.get('platform', 'unknown')}")
    print(f"  Processor: {info.get('processor', 'unknown')}")
    print(f"  CPU Count: {info.get('cpu_count', 'unknown')}")
    print(f"  psutil:    {info.get('psutil_version', 'unknown')}")
    if "mem_total_gb" in info:
        print(
            f"  Memory:    {info.get('mem_available_gb')} GB free / "
            f"{info.get('mem_total_gb')} GB total ({info.get('mem_percent')}%)"
        )
    if config:
        print("-" * 80)
        print("RUN CONFIG")
        for key in sorted(config.keys()):
            print(f"  {key}: {config[key]}")
    print("=" * 80)


def list_features() -> None:
    """Print list of all features."""
    print("=" * 80)
    print("LOW PERFORMANCE DEMO - FEATURE LIST")
    print("=" * 80)

    for cat in CATEGORY_ORDER:
        entries = sorted((code, f) for code, f in FEATURES.items() if f["category"] == cat)
        if not entries:
            continue
        print(f"\nCategory {cat}:")
        for code, f in entries:
            print(f"  {code}: {f['name']}  [{f['anti_pattern'].get('time', '?')}]")

    print()
    print(f"Total: {len(FEATURES)} features")
    print("=" * 80)


# =============================================================================
# Features
# =============================================================================


@feature("P1", "String concatenation in a loop", "S")
def demo_p1_string_concatenation(runner: DemoRunner) -> dict:
    p = runner.profile
    return string_accumulation(p.string_iterations, clock=runner.clock)


@feature("P2", "Massive temporary object creation", "O")
def demo_p2_object_creation(runner: DemoRunner) -> dict:
    p = runner.profile
    return object_creation(p.object_iterations, tag_count=p.tag_count, rng_factory=runner.rng_factory)


@feature("P3", "Unsized collections and duplicate inserts", "C")
def demo_p3_collection_usage(runner: DemoRunner) -> dict:
    p = runner.profile
    return collection_usage(
        p.collection_iterations,
        key_space=p.key_space,
        placeholder_size=p.placeholder_size,
    )


@feature("P4", "Grow-only retention cache", "L")
def demo_p4_leak_simulation(runner: DemoRunner) -> dict:
    p = runner.profile
    return leak_simulation(runner.cache, p.leak_iterations, clock=runner.clock, padding=p.leak_padding)


@feature("P5", "Boxing/unboxing waste", "B")
def demo_p5_boxing(runner: DemoRunner) -> dict:
    p = runner.profile
    return boxing_waste(p.boxing_iterations, sqrt_keys=p.sqrt_keys)


# =============================================================================
# Entry point
# =============================================================================


def _resolve_profile(args: argparse.Namespace) -> DemoProfile:
    if args.profile == "custom" and args.config is not None:
        profile = load_custom_profile(Path(args.config))
    else:
        profile = default_profile(args.profile)
    if args.scale is not None:
        profile = scaled(profile, args.scale)
    return profile


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Low Performance Demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--profile", choices=["full", "quick", "custom"], default="full")
    parser.add_argument("--config", type=str, help="Path to custom profile JSON config")
    parser.add_argument("--scale", type=float, help="Multiply every iteration count by this factor")
    parser.add_argument("--category", type=str, help="Run only category X (S, O, C, L, B)")
    parser.add_argument("--feature", type=str, help="Run only feature PN (e.g., P3)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible random values")
    parser.add_argument("--repeat", type=int, default=1, help="Run the selection N times")
    parser.add_argument("--export-json", type=str, help="Export results to JSON file")
    parser.add_argument("--export-csv", type=str, help="Export results to CSV file")
    parser.add_argument("--verbose", action="store_true", help="Show detailed profiling output")
    parser.add_argument("--list", action="store_true", help="List all features and exit")
    parser.add_argument("--no-perf", action="store_true", help="Skip performance measurement")
    parser.add_argument(
        "--no-tracemalloc",
        action="store_true",
        help="Disable tracemalloc and GC tracking to reduce measurement overhead",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        list_features()
        return 0

    if args.scale is not None and args.scale <= 0:
        raise SystemExit("--scale must be positive")
    if args.repeat < 1:
        raise SystemExit("--repeat must be >= 1")
    if args.config is not None and args.profile != "custom":
        raise SystemExit("--config requires --profile=custom")

    profile = _resolve_profile(args)

    print("Starting Low Performance Application...")

    system_info = get_system_info()
    run_config = {
        "profile": profile_to_dict(profile),
        "seed": args.seed,
        "repeat": args.repeat,
        "tracemalloc": not args.no_tracemalloc,
        "perf": not args.no_perf,
    }
    print_system_info(system_info, run_config)

    runner = DemoRunner(
        profile=profile,
        verbose=args.verbose,
        no_perf=args.no_perf,
        track_memory=not args.no_tracemalloc,
        track_gc=not args.no_tracemalloc,
        seed=args.seed,
    )

    for run_index in range(args.repeat):
        runner.run_index = run_index
        if args.repeat > 1:
            print(f"\n[demo] Run {run_index + 1}/{args.repeat}")
        if args.feature:
            runner.run_feature(args.feature.upper())
        elif args.category:
            runner.run_category(args.category.upper())
        else:
            runner.run_all()

    print()
    print(runner.summary())

    if args.export_json:
        export_results_json(runner.results, system_info, run_config, Path(args.export_json))
    if args.export_csv:
        export_results_csv(runner.results, Path(args.export_csv))

    print("Application completed. Check the GC and memory columns for performance issues.")

    errors, failed = runner.failure_counts()
    if errors > 0:
        return 1
    if failed > 0:
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
