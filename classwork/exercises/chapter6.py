"""Array exercises: sequences, sorting, matrices, strings and sieves."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence

_DIAMOND = (
    "  *  ",
    " * * ",
    "*   *",
    " * * ",
    "  *  ",
)


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting 1, 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    numbers: list[int] = []
    a, b = 1, 1
    for _ in range(count):
        numbers.append(a)
        a, b = b, a + b
    return numbers


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by repeated adjacent swaps."""
    items = list(values)
    for passes in range(len(items) - 1):
        swapped = False
        for i in range(len(items) - 1 - passes):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def _check_rectangular(matrix: Sequence[Sequence[int]]) -> None:
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows of the matrix must have the same length")


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Swap the rows and columns of a rectangular matrix."""
    _check_rectangular(matrix)
    return [list(column) for column in zip(*matrix)]


def matrix_max(matrix: Sequence[Sequence[int]]) -> tuple[int, int, int]:
    """The largest element with its row and column, first occurrence winning."""
    _check_rectangular(matrix)
    best, best_row, best_column = matrix[0][0], 0, 0
    for row_index, row in enumerate(matrix):
        for column_index, value in enumerate(row):
            if value > best:
                best, best_row, best_column = value, row_index, column_index
    return best, best_row, best_column


def diamond() -> list[str]:
    """The five rows of a small diamond drawn with asterisks."""
    return list(_DIAMOND)


def count_words(line: str) -> int:
    """Number of words in ``line``, where words are separated by spaces."""
    count = 0
    in_word = False
    for ch in line:
        if ch == " ":
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def largest_string(strings: Iterable[str]) -> str:
    """The string that sorts last; the earliest one wins a tie."""
    items = list(strings)
    if not items:
        raise ValueError("no strings given")
    return max(items)


def sieve_primes(limit: int) -> list[int]:
    """Primes from 2 to ``limit`` inclusive, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    marks = [True] * (limit + 1)
    marks[0] = marks[1] = False
    n = 2
    while n * n <= limit:
        if marks[n]:
            marks[n * n::n] = [False] * len(range(n * n, limit + 1, n))
        n += 1
    return [n for n, prime in enumerate(marks) if prime]


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by repeated selection of the minimum."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum of the main diagonal of a square matrix."""
    _check_rectangular(matrix)
    if len(matrix) != len(matrix[0]):
        raise ValueError("matrix must be square")
    return sum(row[i] for i, row in enumerate(matrix))


def insert_sorted(values: Sequence[int], number: int) -> list[int]:
    """A copy of the ascending ``values`` with ``number`` inserted in order.

    The number goes before the first element greater than it.
    """
    items = list(values)
    bisect.insort_right(items, number)
    return items


def reverse(values: Iterable[int]) -> list[int]:
    """The values in reverse order."""
    items = list(values)
    items.reverse()
    return items