import pytest

from dsakit.arithmetic import (
    armstrong_numbers,
    binary_to_decimal,
    count_digits,
    cube_digit_sum,
    digit_factorial_sum,
    digit_sum,
    divisor_sum,
    factorial,
    factorial_table,
    fibonacci,
    is_armstrong,
    is_perfect,
    is_prime,
    is_strong,
    multiplication_table,
    perfect_numbers,
    reverse_number,
    strong_numbers,
)


@pytest.mark.parametrize("n", range(1, 15))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_of_zero_and_negative_match_one():
    assert factorial(0) == factorial(1)
    assert factorial(-4) == factorial(1)


def test_factorial_table_matches_factorial():
    table = factorial_table(8)
    assert [i for i, _ in table] == list(range(1, 9))
    assert all(value == factorial(i) for i, value in table)


def test_factorial_table_empty_for_zero():
    assert factorial_table(0) == []


def test_fibonacci_length_and_recurrence():
    terms = fibonacci(12)
    assert len(terms) == 13
    assert terms[:2] == [0, 1]
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert c == a + b


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_fibonacci_always_has_first_two_terms(n):
    assert fibonacci(n) == [0, 1]


def test_perfect_numbers_up_to_1000():
    assert perfect_numbers(1000) == [6, 28, 496]


def test_perfect_numbers_agree_with_is_perfect():
    found = perfect_numbers(600)
    assert found == [n for n in range(1, 601) if is_perfect(n)]
    assert all(divisor_sum(n) == n for n in found)


@pytest.mark.parametrize("p", [n for n in range(2, 200) if is_prime(n)])
def test_divisor_sum_of_prime_is_one(p):
    assert divisor_sum(p) == 1


def test_armstrong_numbers_up_to_1000():
    assert armstrong_numbers(1000) == [1, 153, 370, 371, 407]


@pytest.mark.parametrize("n", [7, 42, 153, 908])
def test_cube_digit_sum_ignores_trailing_zero(n):
    assert cube_digit_sum(n * 10) == cube_digit_sum(n)


@pytest.mark.parametrize("n", [5, 153, 407, 1234])
def test_cube_digit_sum_follows_sign(n):
    assert cube_digit_sum(-n) == -cube_digit_sum(n)
    assert is_armstrong(-n) == is_armstrong(n)


@pytest.mark.parametrize("k", range(0, 200))
def test_binary_to_decimal_round_trip(k):
    assert binary_to_decimal(int(format(k, "b"))) == k


@pytest.mark.parametrize("k", range(0, 12))
def test_count_digits_of_powers_of_ten(k):
    assert count_digits(10**k) == k + 1


def test_count_digits_of_zero_is_zero():
    assert count_digits(0) == 0


@pytest.mark.parametrize("n", [1, 9, 98765, 1000001])
def test_count_digits_matches_text_length(n):
    assert count_digits(n) == len(str(n))
    assert count_digits(-n) == count_digits(n)


def test_primes_below_twenty():
    assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]


@pytest.mark.parametrize("a", [2, 3, 7, 13])
@pytest.mark.parametrize("b", [2, 5, 11])
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("n", [1, 12, 12345, 907, 5000001])
def test_reverse_number_matches_reversed_text(n):
    assert reverse_number(n) == int(str(n)[::-1])
    assert reverse_number(-n) == -reverse_number(n)


@pytest.mark.parametrize("n", [1, 123, 4567, 98001])
def test_reverse_number_is_involution_without_trailing_zero(n):
    assert reverse_number(reverse_number(n)) == n


@pytest.mark.parametrize("n", [1, 14, 145, 999])
def test_digit_factorial_sum_trailing_zero_adds_zero_factorial(n):
    assert digit_factorial_sum(n * 10) == digit_factorial_sum(n) + factorial(0)


def test_strong_numbers_agree_with_is_strong():
    found = strong_numbers(1000)
    assert found == [n for n in range(1, 1001) if is_strong(n)]
    assert all(digit_factorial_sum(n) == n for n in found)


@pytest.mark.parametrize("n", [1, 18, 999, 123456, 7777777])
def test_digit_sum_congruent_mod_nine(n):
    assert digit_sum(n) % 9 == n % 9
    assert digit_sum(-n) == -digit_sum(n)


@pytest.mark.parametrize("k", range(0, 8))
def test_digit_sum_of_power_of_ten(k):
    assert digit_sum(10**k) == 1


def test_multiplication_table_lines():
    lines = multiplication_table(7)
    assert len(lines) == 10
    assert lines[0] == "7 * 1 = 7"
    for i, line in enumerate(lines, start=1):
        left, star, right, equals, product = line.split()
        assert (star, equals) == ("*", "=")
        assert (int(left), int(right)) == (7, i)
        assert int(product) == int(left) * int(right)