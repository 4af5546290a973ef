"""Bloom filter benchmark suite.

Builds filters over synthetic UUID data with a deterministic 80/20 split:
the first 80% is inserted, the remaining 20% are values never added.
For each configuration it reports:

1. Membership on the inserted set (should be all present)
2. Empirical false positive rate on the held-out set versus the target ``p``
3. Filter properties and memory usage
4. Add / contains throughput for small, medium and large values

Run with:

    python -m benchmarks.benchmark_suite
"""
from __future__ import annotations

import os
import time
import uuid
from typing import List, Tuple

from bloomfilter import BloomFilter


SYNTHETIC_ITEMS = 100_000
CONFIGURATIONS = [
    (1_000, 0.1),
    (1_000, 0.0001),
    (1_000_000, 0.1),
    (1_000_000, 0.0001),
]
VALUE_SIZES = [1, 1_000, 1_000_000]
THROUGHPUT_OPS = 10_000


def generate_synthetic_data(n: int = SYNTHETIC_ITEMS) -> list[bytes]:
    """Generate n unique random values."""
    print(f"Generating {n} synthetic items...")
    return [uuid.uuid4().bytes for _ in range(n)]


def build_split(
    items: list[bytes], p: float, hash_function: str = "xxh64"
) -> Tuple[BloomFilter, list[bytes], list[bytes]]:
    """Split ``items`` 80/20 and fill a filter sized for the 80% part."""
    split = int(len(items) * 0.8)
    train = items[:split]
    held_out = items[split:]

    bloom = BloomFilter(max(1, len(train)), p, hash_function=hash_function)
    bloom.update(train)
    return bloom, train, held_out


def check_membership(bloom: BloomFilter, train: list[bytes]) -> None:
    """Verify all inserted items are reported present."""
    print("A: Membership on inserted set")
    missing = [v for v in train if not bloom.contains(v)]
    print(f"  Inserted items: {len(train)}")
    print(f"  Missing after insertion: {len(missing)} (expected 0)")
    print()


def measure_false_positives(bloom: BloomFilter, held_out: list[bytes], p: float) -> float:
    """Measure the empirical false positive rate on values never added."""
    print("B: False positive rate on held-out values")
    false_positives = sum(1 for v in held_out if bloom.contains(v))
    fpr = false_positives / len(held_out) if held_out else 0.0
    print(f"  Held-out values: {len(held_out)}")
    print(f"  False positives: {false_positives}")
    print(f"  Empirical FPR: {fpr:.6f} (target {p}, estimate {bloom.estimated_false_positive_rate():.6f})")
    print()
    return fpr


def show_properties(bloom: BloomFilter, train: list[bytes]) -> None:
    """Display filter memory and configuration properties."""
    print("C: Filter properties")
    bytes_len = len(bloom.bit_array.to_bytes())
    print(f"  Filter size (bits): {bloom.size}")
    print(f"  Filter size (bytes): {bytes_len}")
    print(f"  Filter size (MB): {bytes_len / (1024 * 1024):.2f}")
    print(f"  Number of hash functions: {bloom.num_hashes}")
    print(f"  Fill ratio: {bloom.fill_ratio:.4f}")
    print(f"  Bytes per item: {bytes_len / len(train):.4f}")
    print()


def _ops_per_sec(count: int, elapsed: float) -> float:
    return float("inf") if elapsed <= 0 else count / elapsed


def measure_throughput(n: int, p: float, value_size: int) -> dict:
    """Time repeated add and contains calls for one value of ``value_size`` bytes."""
    bloom = BloomFilter(n, p)
    value = os.urandom(value_size)
    ops = max(1, THROUGHPUT_OPS // max(1, value_size // 1_000))

    start = time.perf_counter()
    for _ in range(ops):
        bloom.add(value)
    add_time = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(ops):
        bloom.contains(value)
    contains_time = time.perf_counter() - start

    return {
        "n": n,
        "p": p,
        "value_size": value_size,
        "ops": ops,
        "add_ops_per_sec": _ops_per_sec(ops, add_time),
        "contains_ops_per_sec": _ops_per_sec(ops, contains_time),
    }


def print_throughput(rows: List[dict]) -> None:
    print(f"{'n':>10}{'p':>10}{'bytes':>10}{'add ops/s':>16}{'contains ops/s':>18}")
    print("-" * 64)
    for row in rows:
        print(
            f"{row['n']:>10}{row['p']:>10}{row['value_size']:>10}"
            f"{row['add_ops_per_sec']:>16,.0f}{row['contains_ops_per_sec']:>18,.0f}"
        )
    print()


def run_all() -> None:
    """Run all benchmarks."""
    items = generate_synthetic_data()

    for hash_function in ("xxh64", "murmur3"):
        for p in (0.1, 0.01, 0.0001):
            print("=" * 60)
            print(f"Bloom filter, hash={hash_function}, p={p} (80/20 split)")
            print("=" * 60)
            print()
            bloom, train, held_out = build_split(items, p, hash_function)
            check_membership(bloom, train)
            measure_false_positives(bloom, held_out, p)
            show_properties(bloom, train)

    print("=" * 60)
    print("Throughput")
    print("=" * 60)
    rows = [
        measure_throughput(n, p, size)
        for n, p in CONFIGURATIONS
        for size in VALUE_SIZES
    ]
    print_throughput(rows)

    print("=" * 60)
    print("Benchmark suite completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    run_all()
