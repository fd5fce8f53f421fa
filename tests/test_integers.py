import math

import pytest

from cdrills.integers import (
    count_up,
    digit_sum,
    divisors,
    factorial,
    flip_bits,
    hcf,
    is_armstrong,
    is_palindrome,
    is_prime,
    lcm,
    odd_digit_product,
    product_of_evens,
    reverse_digits,
    sum_of_odds,
    to_binary,
)


@pytest.mark.parametrize("n", [1, 2, 7, 20])
def test_count_up_runs_from_one_to_n(n):
    result = count_up(n)
    assert len(result) == n
    assert result[0] == 1
    assert result[-1] == n
    assert result == sorted(result)


@pytest.mark.parametrize("n", [0, -3])
def test_count_up_empty_below_one(n):
    assert count_up(n) == []


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_sum_of_odds_is_square(n):
    assert sum_of_odds(n) == n * n


@pytest.mark.parametrize("n", [0, 1, 2, 9, 16])
def test_product_of_evens_matches_factorial_identity(n):
    k = n // 2
    assert product_of_evens(n) == 2**k * math.factorial(k)


@pytest.mark.parametrize("n", [0, 1, 5, 15])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_is_one():
    assert factorial(-4) == factorial(0)


@pytest.mark.parametrize("n", [1234, 7, 98761, -352])
def test_reverse_digits_round_trip(n):
    assert reverse_digits(reverse_digits(n)) == n


def test_reverse_digits_drops_trailing_zeros():
    assert reverse_digits(1200) == reverse_digits(12)


@pytest.mark.parametrize("n", [0, 1, 2, 10, 255, 1024])
def test_to_binary_round_trip(n):
    assert int(to_binary(n), 2) == n


def test_to_binary_zero_and_negative():
    assert to_binary(0) == "0"
    assert to_binary(-5) == ""


@pytest.mark.parametrize("n", [121, 1331, 7, 0])
def test_palindromes(n):
    assert is_palindrome(n)


@pytest.mark.parametrize("n", [123, 10, 1332])
def test_not_palindromes(n):
    assert not is_palindrome(n)


def test_armstrong_numbers():
    assert is_armstrong(153)
    assert is_armstrong(9)
    assert not is_armstrong(154)


@pytest.mark.parametrize("n", range(2, 60))
def test_is_prime_agrees_with_divisors(n):
    assert is_prime(n) == (divisors(n) == [1, n])


@pytest.mark.parametrize("n", [-7, 0, 1])
def test_is_prime_false_below_two(n):
    assert not is_prime(n)


@pytest.mark.parametrize("n", [1, 12, 36, 97])
def test_divisors_all_divide_and_bounded(n):
    result = divisors(n)
    assert all(n % d == 0 for d in result)
    assert result[0] == 1
    assert result[-1] == n


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (5, 5)])
def test_hcf_matches_gcd(a, b):
    assert hcf(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(0, 4), (4, -2)])
def test_hcf_rejects_non_positive(a, b):
    with pytest.raises(ValueError):
        hcf(a, b)


@pytest.mark.parametrize("a,b", [(4, 6), (7, 13), (12, 12), (9, 3)])
def test_lcm_matches_math(a, b):
    assert lcm(a, b) == math.lcm(a, b)


def test_lcm_zero_divides():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 5)


@pytest.mark.parametrize("n", [0, 5, 123, 9876])
def test_digit_sum_ignores_trailing_zero_and_order(n):
    assert digit_sum(n * 10) == digit_sum(n)
    assert digit_sum(n) == digit_sum(reverse_digits(n))


def test_digit_sum_negative_mirrors_positive():
    assert digit_sum(-472) == -digit_sum(472)


@pytest.mark.parametrize("n", [0, 2468, 20])
def test_odd_digit_product_without_odd_digits_is_one(n):
    assert odd_digit_product(n) == 1


def test_odd_digit_product_ignores_even_digits():
    assert odd_digit_product(3527) == odd_digit_product(357)


@pytest.mark.parametrize("bits", ["1010", "0", "111000", ""])
def test_flip_bits_is_involution(bits):
    flipped = flip_bits(bits)
    assert flip_bits(flipped) == bits
    assert flipped.count("1") == bits.count("0")


def test_flip_bits_keeps_other_characters():
    assert flip_bits("10a2") == "01a2"