import pytest

from algokit.numbers import (
    count_operations,
    find_complement,
    harshad_digit_sum,
    is_happy,
    is_palindrome_number,
    number_of_steps,
    self_dividing_numbers,
)


@pytest.mark.parametrize("x", [0, 7, 121, 12321, 1001])
def test_palindrome_numbers(x):
    assert is_palindrome_number(x)


@pytest.mark.parametrize("x", [-121, 10, 123, -1])
def test_non_palindrome_numbers(x):
    assert not is_palindrome_number(x)


@pytest.mark.parametrize("n", [1, 7, 19, 100])
def test_happy_numbers(n):
    assert is_happy(n)


@pytest.mark.parametrize("n", [0, 2, 4, 20])
def test_unhappy_numbers(n):
    assert not is_happy(n)


def test_is_happy_rejects_negative():
    with pytest.raises(ValueError):
        is_happy(-7)


def test_find_complement_example():
    assert find_complement(5) == 2


@pytest.mark.parametrize("num", range(1, 300))
def test_find_complement_fills_the_bit_width(num):
    result = find_complement(num)
    assert num & result == 0
    assert num | result == (1 << num.bit_length()) - 1


def test_self_dividing_numbers_keeps_non_positive():
    assert self_dividing_numbers(-2, 0) == [-2, -1, 0]


def test_self_dividing_numbers_empty_range():
    assert self_dividing_numbers(5, 4) == []


def test_number_of_steps_zero():
    assert number_of_steps(0) == 0


@pytest.mark.parametrize("k", range(0, 12))
def test_number_of_steps_powers_of_two(k):
    assert number_of_steps(2**k) == k + 1


@pytest.mark.parametrize("n", [1, 3, 7, 14, 123, 1000])
def test_number_of_steps_recurrence(n):
    assert number_of_steps(2 * n) == number_of_steps(n) + 1
    assert number_of_steps(2 * n + 1) == number_of_steps(2 * n) + 1


def test_number_of_steps_rejects_negative():
    with pytest.raises(ValueError):
        number_of_steps(-3)


def test_count_operations_example():
    assert count_operations(2, 3) == 3


@pytest.mark.parametrize("a, b", [(0, 5), (5, 0), (0, 0)])
def test_count_operations_with_zero(a, b):
    assert count_operations(a, b) == 0


@pytest.mark.parametrize("a, b", [(2, 3), (10, 10), (7, 19), (100, 3)])
def test_count_operations_scale_invariant(a, b):
    assert count_operations(4 * a, 4 * b) == count_operations(a, b)


def test_count_operations_rejects_negative():
    with pytest.raises(ValueError):
        count_operations(-1, 1)


def test_harshad_example():
    assert harshad_digit_sum(18) == 9


def test_harshad_not_divisible():
    assert harshad_digit_sum(23) == -1


@pytest.mark.parametrize("x", range(1, 200))
def test_harshad_result_divides_or_is_minus_one(x):
    result = harshad_digit_sum(x)
    digit_sum = sum(int(d) for d in str(x))
    if x % digit_sum:
        assert result == -1
    else:
        assert result == digit_sum


def test_harshad_zero_raises():
    with pytest.raises(ZeroDivisionError):
        harshad_digit_sum(0)


def test_harshad_negative_raises():
    with pytest.raises(ValueError):
        harshad_digit_sum(-18)