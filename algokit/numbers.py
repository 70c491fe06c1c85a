"""Integer puzzles: palindromes, happy numbers, bit complements and digit rules."""

from __future__ import annotations


def _digits(n: int) -> list[int]:
    return [int(d) for d in str(n)]


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing the squares of the digits of ``n`` reaches 1.

    Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    seen: set[int] = set()
    while n != 1 and n not in seen:
        seen.add(n)
        n = sum(d * d for d in _digits(n))
    return n == 1


def find_complement(num: int) -> int:
    """Flip the bits of ``num`` below the smallest power of two not less than it (at least one bit)."""
    width = (num - 1).bit_length() if num > 2 else 1
    return ~num & ((1 << width) - 1)


def _is_self_dividing(n: int) -> bool:
    return n <= 0 or all(d != "0" and n % int(d) == 0 for d in str(n))


def self_dividing_numbers(left: int, right: int) -> list[int]:
    """Numbers in ``left..right`` divisible by each of their digits, none of which is zero.

    Numbers that are not positive have no digits to test and are always kept.
    """
    return [n for n in range(left, right + 1) if _is_self_dividing(n)]


def number_of_steps(num: int) -> int:
    """Steps to reach zero by halving even numbers and decrementing odd ones.

    Raises ValueError for a negative ``num``.
    """
    if num < 0:
        raise ValueError("num must not be negative")
    if num == 0:
        return 0
    return num.bit_length() + bin(num).count("1") - 1


def count_operations(num1: int, num2: int) -> int:
    """Times the smaller number is subtracted from the other until one reaches zero.

    Raises ValueError if either number is negative.
    """
    if num1 < 0 or num2 < 0:
        raise ValueError("numbers must not be negative")
    operations = 0
    while num1 and num2:
        if num1 >= num2:
            quotient, num1 = divmod(num1, num2)
        else:
            quotient, num2 = divmod(num2, num1)
        operations += quotient
    return operations


def harshad_digit_sum(x: int) -> int:
    """The digit sum of ``x`` if it divides ``x``, otherwise -1.

    Raises ValueError for a negative ``x`` and ZeroDivisionError for zero.
    """
    if x < 0:
        raise ValueError("x must not be negative")
    total = sum(_digits(x))
    return -1 if x % total else total