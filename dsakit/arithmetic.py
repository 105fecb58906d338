"""Integer routines: factorials, digit properties and classic number tests."""

from __future__ import annotations

import math
from collections.abc import Iterator


def _digits(n: int) -> Iterator[int]:
    """Yield the decimal digits of ``n``, least significant first.

    Digits of a negative number carry its sign, so ``-123`` yields
    ``-3, -2, -1``, as truncating division and remainder would give.
    """
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    while remaining:
        remaining, digit = divmod(remaining, 10)
        yield sign * digit


def factorial(n: int) -> int:
    """Return ``n!``; zero and negative ``n`` give 1."""
    return math.prod(range(1, n + 1))


def factorial_table(limit: int) -> list[tuple[int, int]]:
    """Return ``(i, i!)`` for every ``i`` from 1 to ``limit``."""
    table = []
    running = 1
    for i in range(1, limit + 1):
        running *= i
        table.append((i, running))
    return table


def fibonacci(n: int) -> list[int]:
    """Return the Fibonacci terms F(0) through F(n); at least F(0) and F(1)."""
    terms = [0, 1]
    for _ in range(2, n + 1):
        terms.append(terms[-1] + terms[-2])
    return terms


def divisor_sum(n: int) -> int:
    """Return the sum of the positive divisors of ``n`` smaller than ``n``."""
    return sum(i for i in range(1, n) if n % i == 0)


def is_perfect(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its proper divisors."""
    return n == divisor_sum(n)


def perfect_numbers(limit: int) -> list[int]:
    """Return the perfect numbers from 1 to ``limit``."""
    return [n for n in range(1, limit + 1) if is_perfect(n)]


def cube_digit_sum(n: int) -> int:
    """Return the sum of the cubes of the decimal digits of ``n``."""
    return sum(digit**3 for digit in _digits(n))


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its digits."""
    return n == cube_digit_sum(n)


def armstrong_numbers(limit: int) -> list[int]:
    """Return the Armstrong numbers from 1 to ``limit``."""
    return [n for n in range(1, limit + 1) if is_armstrong(n)]


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits and return the value.

    Each digit is weighted by a power of two without validation, so a
    digit other than 0 or 1 simply contributes ``digit * 2**position``.
    """
    return sum(digit * 2**position for position, digit in enumerate(_digits(n)))


def count_digits(n: int) -> int:
    """Return the number of decimal digits of ``n``; zero has none."""
    return sum(1 for _ in _digits(n))


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits in reverse order."""
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def digit_factorial_sum(n: int) -> int:
    """Return the sum of the factorials of the decimal digits of ``n``."""
    return sum(factorial(digit) for digit in _digits(n))


def is_strong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the factorials of its digits."""
    return n == digit_factorial_sum(n)


def strong_numbers(limit: int) -> list[int]:
    """Return the strong numbers from 1 to ``limit``."""
    return [n for n in range(1, limit + 1) if is_strong(n)]


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``."""
    return sum(_digits(n))


def multiplication_table(n: int) -> list[str]:
    """Return the lines ``"n * i = product"`` for ``i`` from 1 to 10."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 11)]