import pytest

from classwork.exercises.chapter4 import (
    QuadraticSolution,
    ascending,
    grade_range,
    is_leap_year,
    menu_action,
    quadratic_real_roots,
    solve_quadratic,
    step,
)


def _residual(a, b, c, x):
    return a * x * x + b * x + c


def test_quadratic_real_roots_satisfy():
    for x in quadratic_real_roots(1.0, -5.0, 6.0):
        assert _residual(1.0, -5.0, 6.0, x) == pytest.approx(0.0, abs=1e-9)


def test_quadratic_real_roots_none():
    with pytest.raises(ValueError, match="hasn't real roots"):
        quadratic_real_roots(1.0, 1.0, 1.0)


def test_ascending_two_and_three():
    assert ascending(3.5, 1.25) == (1.25, 3.5)
    assert ascending(3.0, 1.0, 2.0) == (1.0, 2.0, 3.0)


def test_ascending_is_ordered_permutation():
    values = (9.0, -2.0, 4.5, 4.5, 0.0)
    result = ascending(*values)
    assert sorted(values) == list(result)
    assert all(x <= y for x, y in zip(result, result[1:]))


@pytest.mark.parametrize("x, expected", [(-5, -1), (0, 0), (7, 1)])
def test_step(x, expected):
    assert step(x) == expected


@pytest.mark.parametrize(
    "grade, expected",
    [("A", "85~100"), ("B", "70~84"), ("C", "60~74"), ("D", "<60")],
)
def test_grade_range(grade, expected):
    assert grade_range(grade) == expected


def test_grade_range_error():
    with pytest.raises(ValueError):
        grade_range("E")


def test_menu_action_case_insensitive():
    assert menu_action("a", 15, 23) == menu_action("A", 15, 23)
    assert menu_action("b", 15, 23) == menu_action("B", 15, 23)


def test_menu_action_sum_and_difference_relation():
    total = menu_action("a", 15, 23)
    difference = menu_action("b", 15, 23)
    assert total - difference == 2 * 23
    assert total + difference == 2 * 15


def test_menu_action_unknown():
    with pytest.raises(ValueError):
        menu_action("c", 15, 23)


@pytest.mark.parametrize(
    "year, leap",
    [(2000, True), (1900, False), (2024, True), (2023, False)],
)
def test_is_leap_year(year, leap):
    assert is_leap_year(year) is leap


def test_solve_quadratic_distinct():
    solution = solve_quadratic(2.0, -3.0, -5.0)
    assert solution.kind == "distinct"
    for x in solution.roots:
        assert _residual(2.0, -3.0, -5.0, x) == pytest.approx(0.0, abs=1e-9)


def test_solve_quadratic_equal():
    solution = solve_quadratic(1.0, 2.0, 1.0)
    assert solution.kind == "equal"
    first, second = solution.roots
    assert first == second
    assert _residual(1.0, 2.0, 1.0, first) == pytest.approx(0.0, abs=1e-9)


def test_solve_quadratic_complex_conjugates():
    solution = solve_quadratic(1.0, 2.0, 2.0)
    assert isinstance(solution, QuadraticSolution)
    assert solution.kind == "complex"
    first, second = solution.roots
    assert first == second.conjugate()
    for x in solution.roots:
        assert abs(_residual(1.0, 2.0, 2.0, x)) == pytest.approx(0.0, abs=1e-9)


def test_solve_quadratic_not_quadratic():
    with pytest.raises(ValueError, match="not a quadratic"):
        solve_quadratic(0.0, 2.0, 1.0)