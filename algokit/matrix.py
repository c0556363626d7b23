"""Square integer matrices with Strassen multiplication."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class Matrix:
    """A square matrix of integers whose size is a power of two."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int) -> None:
        if not _is_power_of_two(size):
            raise ValueError("size must be a positive power of 2")
        self._rows: list[list[int]] = [[0] * size for _ in range(size)]

    @classmethod
    def _wrap(cls, rows: list[list[int]]) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._rows = rows
        return matrix

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Matrix:
        """Build a matrix from its rows; it must be square with a power-of-two size."""
        data = [list(row) for row in rows]
        size = len(data)
        if not _is_power_of_two(size):
            raise ValueError("size must be a positive power of 2")
        if any(len(row) != size for row in data):
            raise ValueError("matrix must be square")
        return cls._wrap(data)

    @property
    def size(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> list[int]:
        if not 0 <= index < self.size:
            raise IndexError("index out of range")
        return self._rows[index]

    def _check_same_size(self, other: Matrix) -> None:
        if self.size != other.size:
            raise ValueError("matrix sizes must match")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return Matrix._wrap(
            [[x + y for x, y in zip(mine, theirs)] for mine, theirs in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return Matrix._wrap(
            [[x - y for x, y in zip(mine, theirs)] for mine, theirs in zip(self._rows, other._rows)]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._rows!r})"

    def __str__(self) -> str:
        return "\n".join("".join(f"{value}\t" for value in row) for row in self._rows)

    def _check_block(self, row_start: int, col_start: int, sub_size: int) -> None:
        if sub_size < 0 or row_start < 0 or col_start < 0:
            raise IndexError("block out of range")
        if row_start + sub_size > self.size or col_start + sub_size > self.size:
            raise IndexError("block out of range")

    def submatrix(self, row_start: int, col_start: int, sub_size: int) -> Matrix:
        """Copy of the ``sub_size`` square block starting at the given corner."""
        self._check_block(row_start, col_start, sub_size)
        return Matrix._wrap(
            [
                row[col_start : col_start + sub_size]
                for row in self._rows[row_start : row_start + sub_size]
            ]
        )

    def set_submatrix(self, sub: Matrix, row_start: int, col_start: int) -> None:
        """Overwrite the block starting at the given corner with ``sub``."""
        self._check_block(row_start, col_start, sub.size)
        for offset, row in enumerate(sub._rows):
            self._rows[row_start + offset][col_start : col_start + sub.size] = row


def strassen_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Multiply two equally sized matrices with Strassen's algorithm."""
    if a.size != b.size:
        raise ValueError("matrix sizes must match")
    size = a.size
    if size == 1:
        result = Matrix(1)
        result[0][0] = a[0][0] * b[0][0]
        return result

    half = size // 2
    a11 = a.submatrix(0, 0, half)
    a12 = a.submatrix(0, half, half)
    a21 = a.submatrix(half, 0, half)
    a22 = a.submatrix(half, half, half)
    b11 = b.submatrix(0, 0, half)
    b12 = b.submatrix(0, half, half)
    b21 = b.submatrix(half, 0, half)
    b22 = b.submatrix(half, half, half)

    p1 = strassen_multiply(a11 + a22, b11 + b22)
    p2 = strassen_multiply(a21 + a22, b11)
    p3 = strassen_multiply(a11, b12 - b22)
    p4 = strassen_multiply(a22, b21 - b11)
    p5 = strassen_multiply(a11 + a12, b22)
    p6 = strassen_multiply(a21 - a11, b11 + b12)
    p7 = strassen_multiply(a12 - a22, b21 + b22)

    result = Matrix(size)
    result.set_submatrix(p1 + p4 - p5 + p7, 0, 0)
    result.set_submatrix(p3 + p5, 0, half)
    result.set_submatrix(p2 + p4, half, 0)
    result.set_submatrix(p1 + p3 - p2 + p6, half, half)
    return result


def main(argv: list[str] | None = None) -> int:
    """Multiply two sample matrices of the given size and print all three."""
    parser = argparse.ArgumentParser(
        prog="strassen",
        description="Multiply two sample matrices with Strassen's algorithm.",
    )
    parser.add_argument("--size", type=int, default=4, help="a power of 2 (default 4)")
    args = parser.parse_args(argv)

    try:
        a = Matrix(args.size)
        b = Matrix(args.size)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    cells = args.size * args.size
    for index in range(cells):
        row, col = divmod(index, args.size)
        a[row][col] = index + 1
        b[row][col] = cells - index

    print("Matrix A:")
    print(a)
    print("\nMatrix B:")
    print(b)
    print("\nResult of A × B:")
    print(strassen_multiply(a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())