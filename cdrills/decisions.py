"""Decision drills: classifications, lookups, tariffs and a small calculator."""

from dataclasses import dataclass
from enum import Enum

from cdrills.basics import c_div, c_mod


def is_even(num: int) -> bool:
    """True when the integer is even."""
    return num % 2 == 0


class Sign(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    ZERO = "Zero"


def sign(num: int) -> Sign:
    """Classify a number as positive, negative or zero."""
    if num > 0:
        return Sign.POSITIVE
    if num < 0:
        return Sign.NEGATIVE
    return Sign.ZERO


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _single_char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def is_vowel(ch: str) -> bool:
    """True for a, e, i, o, u in either case."""
    return _single_char(ch) in "aeiouAEIOU"


class CharKind(Enum):
    UPPERCASE = "Uppercase alphabet"
    LOWERCASE = "Lowercase alphabet"
    DIGIT = "Digit"
    SPECIAL = "Special character"


def classify_char(ch: str) -> CharKind:
    """Classify an ASCII character as upper case, lower case, digit or other."""
    ch = _single_char(ch)
    if "A" <= ch <= "Z":
        return CharKind.UPPERCASE
    if "a" <= ch <= "z":
        return CharKind.LOWERCASE
    if "0" <= ch <= "9":
        return CharKind.DIGIT
    return CharKind.SPECIAL


def largest(a: int, b: int, c: int) -> int:
    """The largest of three numbers."""
    return max(a, b, c)


_GRADE_FLOORS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"), (0, "F"))


def grade(percentage: int) -> str:
    """Letter grade for a percentage from 0 to 100."""
    if not 0 <= percentage <= 100:
        raise ValueError("Invalid percentage")
    return next(letter for floor, letter in _GRADE_FLOORS if percentage >= floor)


class Triangle(Enum):
    EQUILATERAL = "Equilateral"
    ISOSCELES = "Isosceles"
    SCALENE = "Scalene"


def triangle_type(a: int, b: int, c: int) -> Triangle:
    """Classify a triangle by its sides; raise if the sides cannot form one."""
    if not (a + b > c and a + c > b and b + c > a):
        raise ValueError("Not a valid triangle")
    if a == b == c:
        return Triangle.EQUILATERAL
    if a == b or b == c or a == c:
        return Triangle.ISOSCELES
    return Triangle.SCALENE


_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_MONTHS = (
    ("January", 31),
    ("February", 28),
    ("March", 31),
    ("April", 30),
    ("May", 31),
    ("June", 30),
    ("July", 31),
    ("August", 31),
    ("September", 30),
    ("October", 31),
    ("November", 30),
    ("December", 31),
)


def day_name(day: int) -> str:
    """Weekday name for 1 (Monday) to 7 (Sunday)."""
    if not 1 <= day <= len(_DAYS):
        raise ValueError("Invalid input")
    return _DAYS[day - 1]


def month_info(month: int) -> tuple[str, int]:
    """Name and day count (non-leap) of month 1 to 12."""
    if not 1 <= month <= len(_MONTHS):
        raise ValueError("Invalid month number")
    return _MONTHS[month - 1]


class Trade(Enum):
    PROFIT = "Profit"
    LOSS = "Loss"
    EVEN = "No Profit No Loss"


@dataclass(frozen=True)
class _TradeResult:
    outcome: Trade
    percentage: float

    def __str__(self) -> str:
        if self.outcome is Trade.EVEN:
            return self.outcome.value
        return f"{self.outcome.value} {self.percentage:.0f}%"


def profit_or_loss(cost_price: float, selling_price: float) -> _TradeResult:
    """Outcome of a sale and the gain or loss as a percentage of cost."""
    if selling_price > cost_price:
        return _TradeResult(Trade.PROFIT, (selling_price - cost_price) / cost_price * 100)
    if selling_price < cost_price:
        return _TradeResult(Trade.LOSS, (cost_price - selling_price) / cost_price * 100)
    return _TradeResult(Trade.EVEN, 0.0)


def library_fine(days: int) -> int:
    """Fine for a late book; beyond 30 days the membership is cancelled."""
    if days <= 5:
        return days * 2
    if days <= 10:
        return 5 * 2 + (days - 5) * 4
    if days <= 30:
        return 5 * 2 + 5 * 4 + (days - 10) * 6
    raise ValueError("Membership Cancelled")


def electricity_bill(units: int) -> int:
    """Bill for consumed units on a four-slab tariff."""
    if units <= 100:
        return units * 5
    if units <= 200:
        return 100 * 5 + (units - 100) * 7
    if units <= 300:
        return 100 * 5 + 100 * 7 + (units - 200) * 10
    return 100 * 5 + 100 * 7 + 100 * 10 + (units - 300) * 12


def calculate(a: int, b: int, op: str) -> int:
    """Apply one of + - * / % to two integers, dividing with truncation."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op in ("/", "%"):
        if b == 0:
            raise ZeroDivisionError("Division by zero not allowed")
        return c_div(a, b) if op == "/" else c_mod(a, b)
    raise ValueError("Invalid operator")