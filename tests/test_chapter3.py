import string

import pytest

from classwork.exercises.chapter3 import (
    Measures,
    compound_growth,
    cylinder_measures,
    deposit_totals,
    fahrenheit_to_celsius,
    five_year_deposits,
    quadratic_roots_simple,
    repayment_months,
    shift_letters,
    to_lowercase,
    triangle_area,
)


@pytest.mark.parametrize("fahrenheit", [64.0, 0.0, 98.6, 451.0])
def test_celsius_round_trip(fahrenheit):
    celsius = fahrenheit_to_celsius(fahrenheit)
    assert celsius * 9 / 5 + 32 == pytest.approx(fahrenheit)


def test_minus_forty_is_fixed_point():
    assert fahrenheit_to_celsius(-40.0) == pytest.approx(-40.0)


def test_deposit_totals_ordering():
    current, one_year, half_years = deposit_totals(1000)
    assert one_year < current < half_years
    assert all(total > 1000 for total in (current, one_year, half_years))


def test_deposit_totals_scale_linearly():
    small = deposit_totals(1000)
    large = deposit_totals(2000)
    assert large == pytest.approx(tuple(2 * value for value in small))


def test_to_lowercase_all_letters():
    assert [to_lowercase(ch) for ch in string.ascii_uppercase] == list(string.ascii_lowercase)


@pytest.mark.parametrize("bad", ["a", "AB", "", "1"])
def test_to_lowercase_rejects(bad):
    with pytest.raises(ValueError):
        to_lowercase(bad)


def test_triangle_area_right_triangle():
    assert triangle_area(3, 4, 5) == pytest.approx(6.0)


def test_triangle_area_symmetric():
    a, b, c = 3.67, 5.43, 6.21
    assert triangle_area(a, b, c) == pytest.approx(triangle_area(c, a, b))
    assert triangle_area(a, b, c) == pytest.approx(triangle_area(b, c, a))


def test_triangle_area_rejects_impossible():
    with pytest.raises(ValueError):
        triangle_area(1, 2, 10)


def test_quadratic_roots_simple_satisfy_equation():
    a, b, c = 1.0, -3.0, 2.0
    x1, x2 = quadratic_roots_simple(a, b, c)
    assert x1 > x2
    for x in (x1, x2):
        assert a * x * x + b * x + c == pytest.approx(0.0, abs=1e-9)


def test_quadratic_roots_simple_non_unit_leading():
    a, b, c = 2.0, 1.0, -6.0
    for x in quadratic_roots_simple(a, b, c):
        assert a * x * x + b * x + c == pytest.approx(0.0, abs=1e-9)


def test_quadratic_roots_simple_negative_discriminant():
    with pytest.raises(ValueError):
        quadratic_roots_simple(1, 0, 1)


def test_compound_growth_invariants():
    assert compound_growth(0.07, 0) == 1
    assert compound_growth(0.07, 10) == pytest.approx(compound_growth(0.07, 5) ** 2)


def test_five_year_deposits_commutative_plans():
    once, two_three, three_two, yearly, quarterly = five_year_deposits(1000)
    assert two_three == pytest.approx(three_two)
    assert quarterly < yearly < once


def test_five_year_deposits_scale():
    assert five_year_deposits(3000) == pytest.approx(
        tuple(3 * value for value in five_year_deposits(1000))
    )


def test_repayment_months_worked_example():
    assert round(repayment_months(300000, 6000, 0.01), 1) == 69.7


def test_repayment_months_larger_payment_is_faster():
    assert repayment_months(300000, 8000, 0.01) < repayment_months(300000, 6000, 0.01)


def test_repayment_months_payment_too_small():
    with pytest.raises(ValueError):
        repayment_months(300000, 3000, 0.01)


def test_shift_letters_round_trip():
    encoded = shift_letters("China", 4)
    assert shift_letters(encoded, -4) == "China"
    assert [ord(e) - ord(o) for e, o in zip(encoded, "China")] == [4] * 5


def test_cylinder_measures_relations():
    m = cylinder_measures(2.0, 5.0)
    assert isinstance(m, Measures)
    assert m.circumference == pytest.approx(m.area)
    assert m.sphere_surface == pytest.approx(4 * m.area)
    assert m.sphere_volume / m.sphere_surface == pytest.approx(2.0 / 3)
    assert m.cylinder_volume == pytest.approx(m.area * 5.0)