"""Average comparison counts of the sorting algorithms over random inputs."""

from __future__ import annotations

import argparse
import csv
import random
import sys
from collections.abc import Iterable, Iterator
from dataclasses import astuple, dataclass
from typing import TextIO

from algokit.sorting import heap_sort, insertion_sort, merge_sort, quick_sort, random_array

_HEADER = ("Size", "Insertion", "Merge", "Heap", "Quick")


@dataclass(frozen=True)
class BenchmarkRow:
    """Mean comparisons per algorithm for one input size, rounded down."""

    size: int
    insertion: int
    merge: int
    heap: int
    quick: int


def run_benchmark(
    sizes: Iterable[int],
    trials: int = 10,
    rng: random.Random | None = None,
    upper: int = 10000,
) -> Iterator[BenchmarkRow]:
    """Yield one row per size, averaging ``trials`` random arrays of that size."""
    if trials <= 0:
        raise ValueError("trials must be positive")
    source = rng if rng is not None else random.Random()
    for size in sizes:
        totals = [0, 0, 0, 0]
        for _ in range(trials):
            data = random_array(size, source, upper)
            for slot, sort in enumerate((insertion_sort, merge_sort, heap_sort, quick_sort)):
                totals[slot] += sort(data).comparisons
        yield BenchmarkRow(size, *(total // trials for total in totals))


def write_csv(rows: Iterable[BenchmarkRow], stream: TextIO) -> None:
    """Write a header and one line per row in comma-separated form."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(_HEADER)
    for row in rows:
        writer.writerow(astuple(row))


def _report(rows: Iterable[BenchmarkRow], out: TextIO) -> Iterator[BenchmarkRow]:
    for row in rows:
        yield row
        print(f"Size: {row.size} done.", file=out, flush=True)


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark and write the averages to a CSV file."""
    parser = argparse.ArgumentParser(
        prog="sort-benchmark",
        description="Count comparisons made by four sorting algorithms.",
    )
    parser.add_argument("--output", default="sorting_results.csv")
    parser.add_argument("--min-size", type=int, default=30)
    parser.add_argument("--max-size", type=int, default=1000)
    parser.add_argument("--step", type=int, default=10)
    parser.add_argument(
        "--random-sizes",
        type=int,
        metavar="COUNT",
        help="use COUNT sizes drawn at random between the minimum and maximum",
    )
    parser.add_argument("--trials", type=int, default=10)
    parser.add_argument("--upper", type=int, default=10000)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    if args.min_size < 0 or args.max_size < args.min_size or args.step <= 0:
        print("error: invalid size range", file=sys.stderr)
        return 1
    if args.trials <= 0 or args.upper <= 0:
        print("error: trials and upper must be positive", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    if args.random_sizes is not None:
        if args.random_sizes < 0:
            print("error: the number of sizes must not be negative", file=sys.stderr)
            return 1
        sizes = [rng.randint(args.min_size, args.max_size) for _ in range(args.random_sizes)]
    else:
        sizes = list(range(args.min_size, args.max_size + 1, args.step))

    rows = run_benchmark(sizes, args.trials, rng, args.upper)
    with open(args.output, "w", newline="", encoding="utf-8") as stream:
        write_csv(_report(rows, sys.stdout), stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())