import pytest

from classwork.exercises.chapter5 import is_prime
from classwork.exercises.chapter6 import (
    bubble_sort,
    count_words,
    diagonal_sum,
    diamond,
    fibonacci,
    insert_sorted,
    largest_string,
    matrix_max,
    reverse,
    selection_sort,
    sieve_primes,
    transpose,
)

SOURCE_SORTED = [1, 4, 6, 9, 13, 16, 19, 28, 40, 100]


def test_fibonacci_starts_with_two_ones():
    assert fibonacci(2) == [1, 1]


def test_fibonacci_recurrence_holds():
    numbers = fibonacci(20)
    assert len(numbers) == 20
    for a, b, c in zip(numbers, numbers[1:], numbers[2:]):
        assert c == a + b


def test_fibonacci_empty_and_negative():
    assert fibonacci(0) == []
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("values", [
    [5, 3, 9, -1, 0, 7, 7, 2, 8, 1],
    [],
    [42],
    [3, 2, 1],
    [1, 2, 3],
])
def test_bubble_sort_matches_sorted(values):
    original = list(values)
    assert bubble_sort(values) == sorted(values)
    assert values == original


@pytest.mark.parametrize("values", [
    [5, 3, 9, -1, 0, 7, 7, 2, 8, 1],
    [],
    [42],
    [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
])
def test_selection_sort_matches_sorted(values):
    assert selection_sort(values) == sorted(values)


def test_transpose_source_example():
    assert transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_transpose_twice_is_identity():
    matrix = [[1, 2, 3, 4], [9, 8, 7, 6], [-10, 10, -5, 2]]
    assert transpose(transpose(matrix)) == matrix


def test_transpose_ragged_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_matrix_max_source_example():
    matrix = [[1, 2, 3, 4], [9, 8, 7, 6], [-10, 10, -5, 2]]
    value, row, column = matrix_max(matrix)
    assert value == max(max(r) for r in matrix)
    assert matrix[row][column] == value
    assert (row, column) == (2, 1)


def test_matrix_max_first_occurrence():
    value, row, column = matrix_max([[3, 7], [7, 1]])
    assert (value, row, column) == (7, 0, 1)


def test_matrix_max_empty_rejected():
    with pytest.raises(ValueError):
        matrix_max([])


def test_diamond_shape():
    rows = diamond()
    assert rows[2] == "*   *"
    assert len(rows) == 5
    assert all(len(row) == 5 for row in rows)
    assert rows == rows[::-1]
    assert all(row == row[::-1] for row in rows)


def test_count_words_basic():
    assert count_words("I am a student.") == 4


def test_count_words_extra_spaces():
    assert count_words("  I   am a  student.  ") == count_words("I am a student.")
    assert count_words("") == 0
    assert count_words("     ") == 0


def test_largest_string():
    strings = ["China", "America", "Germany"]
    assert largest_string(strings) == "Germany"
    assert largest_string(["abc"]) == "abc"


def test_largest_string_empty_rejected():
    with pytest.raises(ValueError):
        largest_string([])


def test_sieve_matches_trial_division():
    assert sieve_primes(100) == [n for n in range(101) if is_prime(n)]


def test_sieve_small_limits():
    assert sieve_primes(1) == []
    assert sieve_primes(2) == [2]


def test_diagonal_sum():
    assert diagonal_sum([[1, 0, 0], [0, 2, 0], [0, 0, 3]]) == 1 + 2 + 3


def test_diagonal_sum_non_square_rejected():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2, 3], [4, 5, 6]])


@pytest.mark.parametrize("number", [5, 0, 1, 100, 200, 13])
def test_insert_sorted(number):
    result = insert_sorted(SOURCE_SORTED, number)
    assert result == sorted(SOURCE_SORTED + [number])
    assert len(SOURCE_SORTED) == 10


def test_reverse_source_example():
    assert reverse([8, 6, 5, 4, 1]) == [1, 4, 5, 6, 8]


def test_reverse_twice_is_identity():
    values = [3, 1, 4, 1, 5, 9]
    assert reverse(reverse(values)) == values