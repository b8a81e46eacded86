"""Loop exercises: sums, series, primes, ciphers and classic puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

CAESAR_SHIFT = 4


def sum_to(n: int) -> int:
    """Sum of the integers 1 to ``n``."""
    return sum(range(1, n + 1))


def sum_from(start: int, limit: int) -> int:
    """Sum from ``start`` upwards while the counter stays at most ``limit``.

    The first term is always added, even when ``start`` exceeds ``limit``.
    """
    return start + sum(range(start + 1, limit + 1))


def collect_donations(
    amounts: Iterable[float], target: float, limit: int
) -> tuple[int, float]:
    """Take donations until ``target`` is reached or ``limit`` people have given.

    Returns the number of donors and the average donation.
    """
    total = 0.0
    count = 0
    for amount in amounts:
        if count >= limit:
            break
        total += amount
        count += 1
        if total >= target:
            break
    if count == 0:
        raise ValueError("no donations were made")
    return count, total / count


def not_divisible_by_three(start: int, stop: int) -> list[int]:
    """Numbers from ``start`` to ``stop`` inclusive that 3 does not divide."""
    return [n for n in range(start, stop + 1) if n % 3]


def multiplication_grid(rows: int, columns: int) -> list[list[int]]:
    """Grid whose cell in row i, column j (both from 1) holds i*j."""
    return [[i * j for j in range(1, columns + 1)] for i in range(1, rows + 1)]


def leibniz_pi(tolerance: float) -> tuple[float, int]:
    """Approximate pi by 4(1 - 1/3 + 1/5 - ...).

    Terms are added while their magnitude is at least ``tolerance``.
    Returns the approximation and the number of terms added.
    """
    if tolerance <= 0:
        raise ValueError("tolerance must be positive")
    total = 0.0
    count = 0
    sign = 1
    denominator = 1.0
    term = 1.0
    while abs(term) >= tolerance:
        total += term
        denominator += 2
        sign = -sign
        term = sign / denominator
        count += 1
    return total * 4, count


def rabbit_pairs(months: int) -> list[int]:
    """Pairs of rabbits in each of the first ``months`` months (Fibonacci)."""
    result: list[int] = []
    a, b = 1, 1
    for _ in range(months):
        result.append(a)
        a, b = b, a + b
    return result


def is_prime(n: int) -> bool:
    """True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def primes_between(start: int, stop: int) -> list[int]:
    """Prime numbers from ``start`` to ``stop`` inclusive."""
    return [n for n in range(start, stop + 1) if is_prime(n)]


def _shift_letter(ch: str) -> str:
    for first, last in (("a", "z"), ("A", "Z")):
        if first <= ch <= last:
            base = ord(first)
            return chr(base + (ord(ch) - base + CAESAR_SHIFT) % 26)
    return ch


def caesar_shift(text: str) -> str:
    """Replace each ASCII letter with the letter four places later, wrapping."""
    return "".join(_shift_letter(ch) for ch in text)


def gcd_lcm(m: int, n: int) -> tuple[int, int]:
    """Greatest common divisor and least common multiple of two positive ints."""
    if m <= 0 or n <= 0:
        raise ValueError("both numbers must be positive")
    larger, smaller = max(m, n), min(m, n)
    while smaller:
        larger, smaller = smaller, larger % smaller
    return larger, m * n // larger


@dataclass(frozen=True)
class CharCounts:
    """How many letters, spaces, digits and other characters a line holds."""

    letters: int = 0
    spaces: int = 0
    digits: int = 0
    others: int = 0


def classify_chars(line: str) -> CharCounts:
    """Count ASCII letters, spaces, digits and everything else in ``line``."""
    letters = spaces = digits = others = 0
    for ch in line:
        if "a" <= ch <= "z" or "A" <= ch <= "Z":
            letters += 1
        elif ch == " ":
            spaces += 1
        elif "0" <= ch <= "9":
            digits += 1
        else:
            others += 1
    return CharCounts(letters, spaces, digits, others)


def repeated_digit_sum(digit: int, count: int) -> int:
    """Sum a + aa + aaa + ... with ``count`` terms built from ``digit``."""
    total = 0
    term = 0
    place = digit
    for _ in range(count):
        term += place
        total += term
        place *= 10
    return total


def factorial_sum(n: int) -> int:
    """Sum 1! + 2! + ... + n!."""
    total = 0
    factorial = 1
    for i in range(1, n + 1):
        factorial *= i
        total += factorial
    return total


def series_total(n1: int, n2: int, n3: int) -> float:
    """Sum of k for k<=n1, k^2 for k<=n2 and 1/k for k<=n3."""
    linear = sum(range(1, n1 + 1))
    squares = sum(k * k for k in range(1, n2 + 1))
    harmonic = math.fsum(1 / k for k in range(1, n3 + 1))
    return linear + squares + harmonic


def narcissistic_numbers() -> list[int]:
    """Three-digit numbers equal to the sum of the cubes of their digits."""
    return [
        n for n in range(100, 1000)
        if sum(int(d) ** 3 for d in str(n)) == n
    ]


def perfect_numbers(limit: int) -> list[tuple[int, list[int]]]:
    """Perfect numbers below ``limit``, each with its proper divisors."""
    result = []
    for m in range(2, limit):
        factors = [i for i in range(1, m) if m % i == 0]
        if sum(factors) == m:
            result.append((m, factors))
    return result


def fraction_series_sum(terms: int) -> float:
    """Sum the first ``terms`` of 2/1 + 3/2 + 5/3 + 8/5 + ..."""
    numerator, denominator = 2.0, 1.0
    total = 0.0
    for _ in range(terms):
        total += numerator / denominator
        numerator, denominator = numerator + denominator, numerator
    return total


def bouncing_ball(height: float, bounces: int) -> tuple[float, float]:
    """Distance travelled at the ``bounces``-th landing and the rebound after it.

    The ball falls from ``height`` and each rebound reaches half the
    previous height.
    """
    if bounces < 1:
        raise ValueError("bounces must be at least 1")
    distance = height
    rebound = height / 2
    for _ in range(2, bounces + 1):
        distance += 2 * rebound
        rebound /= 2
    return distance, rebound


def peaches(days: int) -> int:
    """Peaches on the first day if half plus one are eaten each day
    and a single peach is left on day ``days``."""
    if days < 1:
        raise ValueError("days must be at least 1")
    count = 1
    for _ in range(days - 1):
        count = (count + 1) * 2
    return count