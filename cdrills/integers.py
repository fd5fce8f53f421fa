"""Integer drills: counting, digits, divisibility, primes and binary strings."""

from itertools import count
from math import prod

from cdrills.basics import c_div, c_mod


def _digits(n: int):
    """Yield the decimal digits of n from the least significant, signed like n."""
    while n != 0:
        yield c_mod(n, 10)
        n = c_div(n, 10)


def count_up(n: int) -> list[int]:
    """The integers 1..n in order; empty when n < 1."""
    return list(range(1, n + 1))


def sum_of_odds(n: int) -> int:
    """Sum of the first n odd numbers."""
    return sum(range(1, 2 * n, 2))


def product_of_evens(n: int) -> int:
    """Product of the even numbers from 2 up to n; 1 when there are none."""
    return prod(range(2, n + 1, 2))


def factorial(n: int) -> int:
    """n! computed by repeated multiplication; 1 for n < 1."""
    return prod(range(1, n + 1))


def reverse_digits(n: int) -> int:
    """The number whose decimal digits are those of n in reverse order."""
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def to_binary(n: int) -> str:
    """Binary digits of a non-negative integer; empty for negative input."""
    if n == 0:
        return "0"
    bits = []
    while n > 0:
        bits.append(str(n % 2))
        n //= 2
    return "".join(reversed(bits))


def is_palindrome(n: int) -> bool:
    """True when n reads the same with its digits reversed."""
    return reverse_digits(n) == n


def is_armstrong(n: int) -> bool:
    """True when n equals the sum of its digits each raised to the digit count."""
    digits = list(_digits(n))
    return sum(digit ** len(digits) for digit in digits) == n


def is_prime(n: int) -> bool:
    """Trial division primality test."""
    if n <= 1:
        return False
    return all(n % i != 0 for i in range(2, n // 2 + 1))


def divisors(n: int) -> list[int]:
    """Positive divisors of n in ascending order; empty when n < 1."""
    return [i for i in range(1, n + 1) if n % i == 0]


def hcf(a: int, b: int) -> int:
    """Highest common factor of two positive integers."""
    if a < 1 or b < 1:
        raise ValueError("both numbers must be positive")
    return max(i for i in range(1, min(a, b) + 1) if a % i == 0 and b % i == 0)


def lcm(a: int, b: int) -> int:
    """Smallest number from max(a, b) upward that both a and b divide."""
    if a == 0 or b == 0:
        raise ZeroDivisionError("integer division by zero")
    return next(
        m for m in count(max(a, b)) if c_mod(m, a) == 0 and c_mod(m, b) == 0
    )


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of n."""
    return sum(_digits(n))


def odd_digit_product(n: int) -> int:
    """Product of the odd decimal digits of n; 1 when there are none."""
    return prod(digit for digit in _digits(n) if c_mod(digit, 2) != 0)


_FLIP = str.maketrans("01", "10")


def flip_bits(bits: str) -> str:
    """Swap every 0 and 1 in the string; other characters are kept."""
    return bits.translate(_FLIP)