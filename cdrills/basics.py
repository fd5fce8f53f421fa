"""Arithmetic and conversion drills: sums, areas, swaps, interest and durations."""

from dataclasses import dataclass
from math import floor

PI = 3.14


def c_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def c_mod(a: int, b: int) -> int:
    """Remainder that matches truncating division: a == b * c_div(a, b) + c_mod(a, b)."""
    return a - b * c_div(a, b)


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


@dataclass(frozen=True)
class Arithmetic:
    """The four basic results of combining two integers."""

    sum: int
    difference: int
    product: int
    quotient: int

    def __str__(self) -> str:
        return (
            f"Sum={self.sum}, Diff={self.difference}, "
            f"Product={self.product}, Quotient={self.quotient}"
        )


def arithmetic(a: int, b: int) -> Arithmetic:
    """Sum, difference, product and truncated quotient of two integers."""
    return Arithmetic(a + b, a - b, a * b, c_div(a, b))


def rectangle(length: int, breadth: int) -> tuple[int, int]:
    """Return (area, perimeter) of a rectangle."""
    return length * breadth, 2 * (length + breadth)


def circle(radius: float) -> tuple[float, float]:
    """Return (area, circumference) of a circle, using pi as 3.14."""
    return PI * radius * radius, 2 * PI * radius


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature from Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def swap(a, b) -> tuple:
    """Return the two values in exchanged order."""
    return b, a


def swap_arithmetic(a: int, b: int) -> tuple[int, int]:
    """Exchange two integers using only addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def sum_to_n(n: int) -> int:
    """Sum of the integers 1..n by the closed formula."""
    return c_div(n * (n + 1), 2)


@dataclass(frozen=True)
class Interest:
    """Simple and annually compounded interest on a principal."""

    simple: float
    compound: float

    def __str__(self) -> str:
        return (
            f"Simple Interest = {self.simple:.2f}\n"
            f"Compound Interest = {self.compound:.2f}"
        )


def interest(principal: float, rate: float, time: float) -> Interest:
    """Simple interest over time, and interest compounded once per whole year."""
    simple = principal * rate * time / 100
    amount = principal
    for _ in range(max(0, floor(time))):
        amount *= 1 + rate / 100
    return Interest(simple, amount - principal)


@dataclass(frozen=True)
class Duration:
    """A span of time split into hours, minutes and seconds."""

    hours: int
    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes}:{self.seconds}"


def split_seconds(seconds: int) -> Duration:
    """Split a number of seconds into hours, minutes and seconds."""
    hours = c_div(seconds, 3600)
    remaining = c_mod(seconds, 3600)
    return Duration(hours, c_div(remaining, 60), c_mod(remaining, 60))