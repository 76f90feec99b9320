"""Benchmark insert, search and delete probe counts of the hash table strategies."""

from __future__ import annotations

import argparse
import contextlib
import math
import random
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial

from probebench.dualstream import DualStream
from probebench.hashing import generate_words, mod_hash, next_prime, poly_hash
from probebench.hashtable import CollisionStrategy, HashTable

HashFunction = Callable[[str], int]

LOAD_FACTORS = (0.4, 0.5, 0.6, 0.7, 0.8, 0.9)


@dataclass(frozen=True)
class BenchmarkResult:
    """Figures gathered by one benchmark run."""

    strategy: CollisionStrategy
    table_size: int
    load_factor: float
    unique_inserts: int
    insert_probes: int
    insert_collisions: int
    avg_search_time_us: float
    avg_search_probes: float
    avg_mixed_time_us: float
    avg_mixed_probes: float


def _time_searches(
    table: HashTable, keys: Sequence[str], repeats: int
) -> tuple[float, float]:
    """Search every key ``repeats`` times; return (avg time in us, avg probes)."""
    total_probes = 0
    start = time.perf_counter_ns()
    for _ in range(repeats):
        for key in keys:
            total_probes += table.search(key)
    elapsed_us = (time.perf_counter_ns() - start) / 1000.0
    if not keys:
        return math.nan, math.nan
    return elapsed_us / len(keys), total_probes / (len(keys) * repeats)


def benchmark(
    table_size: int,
    load_factor: float,
    strategy: CollisionStrategy,
    words: Sequence[str],
    primary_hash: HashFunction,
    secondary_hash: HashFunction | None = None,
    repeats: int = 1000,
    rng: random.Random | None = None,
) -> BenchmarkResult:
    """Fill a table to ``load_factor``, then time searches before and after deletions.

    The first ``floor(load_factor * table_size)`` words are inserted. A tenth of
    them, picked at random, are searched; half of those are then removed and a
    mix of removed and still-present keys is searched again.
    """
    if repeats <= 0:
        raise ValueError("repeats must be positive")
    count = math.floor(load_factor * table_size)
    if count < 0:
        raise ValueError("load factor must not be negative")
    if count > len(words):
        raise ValueError(
            f"load factor {load_factor} needs {count} words, only {len(words)} given"
        )
    rng = rng or random.Random()

    table = HashTable(table_size, strategy, primary_hash, secondary_hash)
    inserted: list[str] = []
    insert_probes = 0
    insert_collisions = 0

    for word in words[:count]:
        if strategy is CollisionStrategy.SEPARATE_CHAINING_RBT:
            if not table.is_bucket_empty(primary_hash(word)):
                insert_collisions += 1
            table.insert(word)
        else:
            probes = table.insert(word)
            insert_probes += probes
            if probes > 0:
                insert_collisions += 1
        inserted.append(word)

    n = len(inserted)
    order = list(range(n))
    rng.shuffle(order)
    tenth = n // 10
    search_set = [inserted[i] for i in order[:tenth]]

    search_time, search_probes = _time_searches(table, search_set, repeats)

    half = len(search_set) // 2
    for word in search_set[:half]:
        table.remove(word)

    mixed = search_set[:half] + [inserted[i] for i in order[tenth : tenth + half]]
    mixed_time, mixed_probes = _time_searches(table, mixed, repeats)

    return BenchmarkResult(
        strategy=strategy,
        table_size=table_size,
        load_factor=load_factor,
        unique_inserts=n,
        insert_probes=insert_probes,
        insert_collisions=insert_collisions,
        avg_search_time_us=search_time,
        avg_search_probes=search_probes,
        avg_mixed_time_us=mixed_time,
        avg_mixed_probes=mixed_probes,
    )


def format_result(result: BenchmarkResult) -> str:
    """Render a result as the report block printed for each run."""
    parts = [
        f"\n[Mode={result.strategy.value}] Table Size: {result.table_size}, "
        f"Total Unique Inserts: {result.unique_inserts}\n"
    ]
    if result.strategy is not CollisionStrategy.SEPARATE_CHAINING_RBT:
        parts.append(f"Insert Total Collisions: {result.insert_probes}\n")
    parts.append(f"Insert Total Collisions: {result.insert_collisions}\n")
    parts.append(
        f"Search Before Deletion: Avg Time (us): {result.avg_search_time_us:g}, "
        f"Avg Probes: {result.avg_search_probes:g}\n"
    )
    parts.append(
        f"Search After Deletion: Avg Time (us): {result.avg_mixed_time_us:g}, "
        f"Avg Probes: {result.avg_mixed_probes:g}\n"
    )
    return "".join(parts)


def _configurations(
    table_size: int,
) -> list[tuple[str, CollisionStrategy, HashFunction, HashFunction | None]]:
    mod = partial(mod_hash, table_size=table_size)
    poly = partial(poly_hash, table_size=table_size)
    return [
        ("LINEAR with modHash", CollisionStrategy.LINEAR_PROBING, mod, None),
        ("LINEAR with polyHash", CollisionStrategy.LINEAR_PROBING, poly, None),
        ("DOUBLE with modHash + polyHash", CollisionStrategy.DOUBLE_HASHING, mod, poly),
        ("DOUBLE with polyHash + modHash", CollisionStrategy.DOUBLE_HASHING, poly, mod),
        ("CHAINING with modHash", CollisionStrategy.SEPARATE_CHAINING_RBT, mod, None),
        ("CHAINING with polyHash", CollisionStrategy.SEPARATE_CHAINING_RBT, poly, None),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Run every strategy and hash pairing at each load factor and print the report."""
    parser = argparse.ArgumentParser(
        prog="probebench",
        description="Compare collision strategies and hash functions of a hash table.",
    )
    parser.add_argument("--size", type=int, default=10000,
                        help="table size before rounding up to a prime")
    parser.add_argument("--words", type=int, default=10000,
                        help="number of random words to generate")
    parser.add_argument("--repeats", type=int, default=1000,
                        help="how often each search set is searched")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--log", default=None,
                        help="also write the report to this file")
    args = parser.parse_args(argv)

    if args.size <= 0:
        parser.error("--size must be positive")
    if args.words < 0:
        parser.error("--words must not be negative")

    rng = random.Random(args.seed)
    table_size = next_prime(args.size)
    words = generate_words(args.words, rng)

    with contextlib.ExitStack() as stack:
        if args.log:
            log_file = stack.enter_context(open(args.log, "w", encoding="utf-8"))
            out = DualStream(sys.stdout, log_file)
        else:
            out = sys.stdout
        try:
            for alpha in LOAD_FACTORS:
                out.write(f"\n=== Load Factor: {alpha:g} ===\n")
                for title, strategy, h1, h2 in _configurations(table_size):
                    out.write(f"\n--- {title} ---")
                    result = benchmark(
                        table_size, alpha, strategy, words, h1, h2,
                        repeats=args.repeats, rng=rng,
                    )
                    out.write(format_result(result))
        except ValueError as exc:
            print(f"probebench: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())