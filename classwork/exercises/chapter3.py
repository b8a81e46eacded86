"""Arithmetic and character exercises: conversions, interest, geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass

CURRENT_RATE = 0.0036
ONE_YEAR_RATE = 0.0025
HALF_YEAR_RATE = 0.0198

FIVE_YEAR_RATE = 0.03
THREE_YEAR_RATE = 0.0275
TWO_YEAR_RATE = 0.021
ONE_YEAR_DEPOSIT_RATE = 0.015
CURRENT_DEPOSIT_RATE = 0.0035


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a Fahrenheit temperature to Celsius."""
    return (5.0 / 9) * (fahrenheit - 32)


def deposit_totals(principal: float) -> tuple[float, float, float]:
    """Return the balance after one year for three ways of saving.

    The three balances are a current account, a one-year fixed deposit,
    and two consecutive half-year fixed deposits.
    """
    current = principal * (1 + CURRENT_RATE)
    one_year = principal * (1 + ONE_YEAR_RATE)
    half_years = principal * (1 + HALF_YEAR_RATE / 2) ** 2
    return current, one_year, half_years


def to_lowercase(letter: str) -> str:
    """Return the lowercase form of one uppercase ASCII letter."""
    if len(letter) != 1 or not "A" <= letter <= "Z":
        raise ValueError(f"expected one uppercase letter, got {letter!r}")
    return chr(ord(letter) + 32)


def triangle_area(a: float, b: float, c: float) -> float:
    """Area of a triangle from its three sides, by Heron's formula."""
    s = (a + b + c) / 2
    product = s * (s - a) * (s - b) * (s - c)
    if min(a, b, c) <= 0 or product < 0:
        raise ValueError(f"sides {a}, {b}, {c} do not form a triangle")
    return math.sqrt(product)


def quadratic_roots_simple(a: float, b: float, c: float) -> tuple[float, float]:
    """Both real roots of ax^2+bx+c=0, the larger first.

    The discriminant must not be negative.
    """
    disc = b * b - 4 * a * c
    if disc < 0:
        raise ValueError("the equation has no real roots")
    p = -b / (2.0 * a)
    q = math.sqrt(disc) / (2.0 * a)
    return p + q, p - q


def compound_growth(rate: float, years: int) -> float:
    """Growth factor after compounding ``rate`` for ``years`` periods."""
    return (1 + rate) ** years


def five_year_deposits(principal: float) -> tuple[float, float, float, float, float]:
    """Balances after five years under five saving plans.

    In order: one five-year deposit; two years then three years; three
    years then two years; five one-year deposits; and a current account
    compounded quarterly.
    """
    once = principal * (1 + FIVE_YEAR_RATE * 5)
    two_then_three = principal * (1 + TWO_YEAR_RATE * 2) * (1 + THREE_YEAR_RATE * 3)
    three_then_two = principal * (1 + THREE_YEAR_RATE * 3) * (1 + TWO_YEAR_RATE * 2)
    yearly = principal * (1 + ONE_YEAR_DEPOSIT_RATE) ** 5
    quarterly = principal * (1 + CURRENT_DEPOSIT_RATE / 4) ** (4 * 5)
    return once, two_then_three, three_then_two, yearly, quarterly


def repayment_months(debt: float, payment: float, rate: float) -> float:
    """Months needed to repay ``debt`` with a fixed monthly ``payment``."""
    if rate <= 0:
        raise ValueError("rate must be positive")
    if payment <= debt * rate:
        raise ValueError("payment does not cover the monthly interest")
    return math.log10(payment / (payment - debt * rate)) / math.log10(1 + rate)


def shift_letters(text: str, shift: int) -> str:
    """Move every character of ``text`` ``shift`` code points along."""
    return "".join(chr(ord(ch) + shift) for ch in text)


@dataclass(frozen=True)
class Measures:
    """Measurements of a circle, a sphere and a cylinder sharing one radius."""

    circumference: float
    area: float
    sphere_surface: float
    sphere_volume: float
    cylinder_volume: float


def cylinder_measures(radius: float, height: float) -> Measures:
    """Circle, sphere and cylinder measurements for the given radius and height."""
    area = math.pi * radius * radius
    return Measures(
        circumference=2 * math.pi * radius,
        area=area,
        sphere_surface=4 * area,
        sphere_volume=4.0 / 3.0 * area * radius,
        cylinder_volume=area * height,
    )