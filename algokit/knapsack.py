"""0/1 knapsack solved by dynamic programming."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the largest total value of items whose weights fit in ``capacity``.

    Each item is taken at most once.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        best = [0] + [
            max(value + best[limit - weight], best[limit]) if weight <= limit else best[limit]
            for limit in range(1, capacity + 1)
        ]
    return best[capacity]


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _prompt(text: str, out: TextIO) -> None:
    print(text, end="", file=out, flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read items and a capacity from standard input and print the best value."""
    parser = argparse.ArgumentParser(
        prog="knapsack",
        description="Solve a 0/1 knapsack problem read from standard input.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the number of items", file=out, flush=True)
        count = _next_int(tokens)
        if count < 0:
            raise ValueError("the number of items must not be negative")
        values: list[int] = []
        weights: list[int] = []
        for item in range(1, count + 1):
            _prompt(f"Enter the value and weight of item {item} : ", out)
            values.append(_next_int(tokens))
            weights.append(_next_int(tokens))
        _prompt("Enter the capacity : ", out)
        capacity = _next_int(tokens)
        print(file=out)
        best = knapsack(capacity, weights, values)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(f"Maximum value that can be put in the knapsack: {best}", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())