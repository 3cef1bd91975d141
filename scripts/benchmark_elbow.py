#!/usr/bin/env python3
"""
Benchmark elbow routing and report which templates get used.

Usage:
    uv run python scripts/benchmark_elbow.py [--count N] [--overshoot O] [--seed S]

Examples:
    uv run python scripts/benchmark_elbow.py
    uv run python scripts/benchmark_elbow.py --count 100000 --overshoot 0.2
    uv run python scripts/benchmark_elbow.py --output results.json
"""

from __future__ import annotations

import argparse
import json
import random
import time
from collections import Counter
from typing import Any

from elbow_routing import ElbowCase, Endpoint, calculate_elbow, path_quality_summary

FACINGS = [None, "x+", "x-", "y+", "y-"]


def _random_endpoint(rng: random.Random, extent: float) -> Endpoint:
    return Endpoint(
        rng.uniform(-extent, extent), rng.uniform(-extent, extent), rng.choice(FACINGS)
    )


def random_endpoints(
    rng: random.Random, count: int, extent: float
) -> list[tuple[Endpoint, Endpoint]]:
    """Generate endpoint pairs with random positions and facings."""
    pairs = []
    for _ in range(count):
        pairs.append((_random_endpoint(rng, extent), _random_endpoint(rng, extent)))
    return pairs


def run_benchmark(
    count: int = 10000,
    overshoot: float = 10.0,
    extent: float = 500.0,
    seed: int = 42,
) -> dict[str, Any]:
    """Route ``count`` random connectors and collect timing and case counts."""
    rng = random.Random(seed)
    pairs = random_endpoints(rng, count, extent)

    cases: Counter[ElbowCase] = Counter()
    total_bends = 0

    def record(case: ElbowCase) -> None:
        cases[case] += 1

    start = time.perf_counter()
    for p1, p2 in pairs:
        path = calculate_elbow(p1, p2, overshoot, on_case=record)
        total_bends += len(path) - 2
    elapsed = time.perf_counter() - start

    # Spot-check path quality outside the timed loop
    broken = 0
    for p1, p2 in pairs[: min(count, 1000)]:
        summary = path_quality_summary(calculate_elbow(p1, p2, overshoot))
        if not summary["orthogonal"] or summary["has_duplicates"]:
            broken += 1

    return {
        "count": count,
        "overshoot": overshoot,
        "time_seconds": elapsed,
        "per_call_us": elapsed / count * 1e6 if count else 0.0,
        "mean_bends": total_bends / count if count else 0.0,
        "broken_paths": broken,
        "cases": {case.value: cases[case] for case in ElbowCase},
    }


def main():
    parser = argparse.ArgumentParser(description="Benchmark elbow connector routing")
    parser.add_argument("--count", type=int, default=10000, help="Number of connectors to route")
    parser.add_argument("--overshoot", type=float, default=10.0, help="Overshoot distance")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    result = run_benchmark(count=args.count, overshoot=args.overshoot, seed=args.seed)

    print(f"\nRouted {result['count']} connectors (overshoot {result['overshoot']})")
    print("=" * 60)
    print(f"Total time:   {result['time_seconds']:.4f}s")
    print(f"Per call:     {result['per_call_us']:.2f}us")
    print(f"Mean bends:   {result['mean_bends']:.2f}")
    print(f"Broken paths: {result['broken_paths']}")

    print("\nTemplate usage")
    print("-" * 60)
    for label, hits in result["cases"].items():
        print(f"  {label:>5s}: {hits:>8d}")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(result, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
