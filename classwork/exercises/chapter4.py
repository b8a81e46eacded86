"""Branching exercises: roots, ordering, grades, menus and leap years."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPSILON = 1e-6

_GRADE_RANGES = {
    "A": "85~100",
    "B": "70~84",
    "C": "60~74",
    "D": "<60",
}


def quadratic_real_roots(a: float, b: float, c: float) -> tuple[float, float]:
    """Both real roots of ax^2+bx+c=0, the larger first for positive a."""
    disc = b * b - 4 * a * c
    if disc < 0:
        raise ValueError("This equation hasn't real roots")
    p = -b / (2.0 * a)
    q = math.sqrt(disc) / (2.0 * a)
    return p + q, p - q


def ascending(*args: float) -> tuple[float, ...]:
    """Return the given numbers from smallest to largest."""
    return tuple(sorted(args))


def step(x: int) -> int:
    """Sign step function: -1 below zero, 0 at zero, 1 above."""
    if x < 0:
        return -1
    return 0 if x == 0 else 1


def grade_range(grade: str) -> str:
    """Score range for a letter grade A to D."""
    try:
        return _GRADE_RANGES[grade]
    except KeyError:
        raise ValueError(f"enter data error: {grade!r}") from None


def menu_action(choice: str, a: int, b: int) -> int:
    """Run menu item 'a' (sum) or 'b' (difference), in either case."""
    key = choice.lower() if len(choice) == 1 else choice
    if key == "a":
        return a + b
    if key == "b":
        return a - b
    raise ValueError(f"unknown menu choice {choice!r}")


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@dataclass(frozen=True)
class QuadraticSolution:
    """Roots of a quadratic and their kind: 'equal', 'distinct' or 'complex'."""

    kind: str
    roots: tuple[complex, complex] | tuple[float, float]


def solve_quadratic(a: float, b: float, c: float) -> QuadraticSolution:
    """Solve ax^2+bx+c=0 over the complex numbers."""
    if abs(a) < EPSILON:
        raise ValueError("is not a quadratic")
    disc = b * b - 4 * a * c
    if abs(disc) <= EPSILON:
        root = -b / (2 * a)
        return QuadraticSolution("equal", (root, root))
    if disc > EPSILON:
        root_disc = math.sqrt(disc)
        return QuadraticSolution(
            "distinct",
            ((-b + root_disc) / (2 * a), (-b - root_disc) / (2 * a)),
        )
    real = -b / (2 * a)
    imag = math.sqrt(-disc) / (2 * a)
    return QuadraticSolution("complex", (complex(real, imag), complex(real, -imag)))