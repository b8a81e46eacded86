"""Function exercises: recursion, Hanoi, averages, divisors and roots."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from classwork.exercises.chapter5 import is_prime as _trial_division_is_prime
from classwork.exercises.chapter6 import transpose

__all__ = [
    "banner",
    "max4",
    "age",
    "factorial",
    "hanoi",
    "index_of_max",
    "average",
    "max_value",
    "hcf",
    "lcm",
    "quadratic_roots",
    "is_prime",
    "transpose_square",
]

STAR_LINE = "*" * 17
FIRST_AGE = 10
AGE_STEP = 2


def banner(message: str) -> str:
    """The message framed by a line of stars above and below."""
    return "\n".join([STAR_LINE, message, STAR_LINE])


def max4(a: int, b: int, c: int, d: int) -> int:
    """The largest of four numbers, found by nested pairwise comparison."""

    def max2(x: int, y: int) -> int:
        return x if x > y else y

    return max2(max2(max2(a, b), c), d)


def age(n: int) -> int:
    """Age of the n-th person: the first is 10, each next is 2 years older."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return FIRST_AGE
    return age(n - 1) + AGE_STEP


def factorial(n: int) -> int:
    """n! computed recursively."""
    if n < 0:
        raise ValueError("n<0, data error!")
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def hanoi(n: int, one: str, two: str, three: str) -> list[tuple[str, str]]:
    """Moves that carry ``n`` disks from peg ``one`` to peg ``three`` via ``two``.

    Each move is a (from, to) pair of peg names.
    """
    if n < 1:
        raise ValueError("the number of disks must be at least 1")
    if n == 1:
        return [(one, three)]
    return [
        *hanoi(n - 1, one, three, two),
        (one, three),
        *hanoi(n - 1, two, one, three),
    ]


def index_of_max(values: Sequence[int]) -> int:
    """Zero-based position of the largest value; the first one wins a tie."""
    if not values:
        raise ValueError("no values given")
    best = 0
    for position, value in enumerate(values):
        if value > values[best]:
            best = position
    return best


def average(scores: Iterable[float]) -> float:
    """Arithmetic mean of the scores."""
    items = list(scores)
    if not items:
        raise ValueError("no scores given")
    return sum(items) / len(items)


def max_value(matrix: Sequence[Sequence[int]]) -> int:
    """The largest element of a matrix."""
    values = [value for row in matrix for value in row]
    if not values:
        raise ValueError("matrix must not be empty")
    return max(values)


def hcf(u: int, v: int) -> int:
    """Highest common factor of two integers by Euclid's algorithm."""
    if u < v:
        u, v = v, u
    while v != 0:
        u, v = v, u % v
    return u


def lcm(u: int, v: int) -> int:
    """Least common multiple of two integers."""
    divisor = hcf(u, v)
    if divisor == 0:
        raise ValueError("the least common multiple of 0 and 0 is undefined")
    return u * v // divisor


def quadratic_roots(
    a: float, b: float, c: float
) -> tuple[float, float] | tuple[complex, complex]:
    """Both roots of ax^2+bx+c=0; complex when the discriminant is negative."""
    if a == 0:
        raise ValueError("not a quadratic equation")
    disc = b * b - 4 * a * c
    if disc > 0:
        root_disc = math.sqrt(disc)
        return (-b + root_disc) / (2 * a), (-b - root_disc) / (2 * a)
    if disc == 0:
        root = -b / (2 * a)
        return root, root
    real = -b / (2 * a)
    imag = math.sqrt(-disc) / (2 * a)
    return complex(real, imag), complex(real, -imag)


def is_prime(n: int) -> bool:
    """Whether ``n`` is prime, by trial division up to its square root."""
    return _trial_division_is_prime(n)


def transpose_square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Swap rows and columns of a square matrix."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    return transpose(matrix)