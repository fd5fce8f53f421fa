# cdrills

A collection of small, self-contained drills on integers, arithmetic and
simple decisions: sums and quotients with truncating integer division, simple
and compound interest, leap years, grades, triangle kinds, electricity bills,
library fines, primes, divisors, palindromes, Armstrong numbers, binary
conversion and more.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the library

The drills live in three modules.

### `cdrills.basics`

- `c_div(a, b)` and `c_mod(a, b)` – integer division and remainder that
  truncate toward zero; `c_div` raises `ZeroDivisionError` when `b` is 0.
- `add(a, b)` – the sum of two numbers.
- `arithmetic(a, b)` – an `Arithmetic` with `sum`, `difference`, `product`
  and `quotient`; `str()` of it reads `Sum=.., Diff=.., Product=.., Quotient=..`.
- `rectangle(length, breadth)` – `(area, perimeter)`.
- `circle(radius)` – `(area, circumference)`, taking pi as 3.14.
- `celsius_to_fahrenheit(celsius)`.
- `swap(a, b)` and `swap_arithmetic(a, b)` – the pair in exchanged order, the
  second using only addition and subtraction.
- `sum_to_n(n)` – `n * (n + 1) / 2` with truncating division.
- `interest(principal, rate, time)` – an `Interest` with `simple` and
  `compound` amounts; compounding is applied once per whole year of `time`.
- `split_seconds(seconds)` – a `Duration` with `hours`, `minutes` and
  `seconds`; `str()` of it reads `h:m:s`.

### `cdrills.decisions`

- `is_even(num)`, `is_leap_year(year)`.
- `sign(num)` – a `Sign` member: `POSITIVE`, `NEGATIVE` or `ZERO`.
- `is_vowel(ch)` and `classify_char(ch)` – the latter returns a `CharKind`
  member: `UPPERCASE`, `LOWERCASE`, `DIGIT` or `SPECIAL`. Both raise
  `ValueError` unless given exactly one character.
- `largest(a, b, c)`.
- `grade(percentage)` – `"A"` to `"D"`, or `"F"` below 60; `ValueError`
  outside 0–100.
- `triangle_type(a, b, c)` – a `Triangle` member (`EQUILATERAL`, `ISOSCELES`,
  `SCALENE`); `ValueError` when the sides cannot form a triangle.
- `day_name(day)` – `"Monday"` for 1 up to `"Sunday"` for 7.
- `month_info(month)` – `(name, days)` for 1–12, February having 28 days.
  Both lookups raise `ValueError` out of range.
- `profit_or_loss(cost_price, selling_price)` – a result with `outcome`
  (a `Trade` member: `PROFIT`, `LOSS` or `EVEN`) and `percentage` of cost;
  `str()` of it reads, for example, `Profit 25%` or `No Profit No Loss`.
- `library_fine(days)` – 2 per day for the first 5 days, 4 per day up to
  day 10, 6 per day up to day 30; beyond 30 days it raises `ValueError`
  ("Membership Cancelled").
- `electricity_bill(units)` – 5 per unit for the first 100, 7 for the next
  100, 10 for the next 100 and 12 beyond that.
- `calculate(a, b, op)` – applies `+ - * / %`; `/` and `%` truncate toward
  zero and raise `ZeroDivisionError` when `b` is 0; any other operator raises
  `ValueError`.

### `cdrills.integers`

`count_up`, `sum_of_odds`, `product_of_evens`, `factorial`,
`reverse_digits`, `to_binary`, `is_palindrome`, `is_armstrong`, `is_prime`,
`divisors`, `hcf`, `lcm`, `digit_sum`, `odd_digit_product` and `flip_bits`.
`hcf` raises `ValueError` unless both numbers are positive; `lcm` raises
`ZeroDivisionError` when either is 0. `to_binary` returns an empty string for
negative input, and `flip_bits` swaps every `0` and `1` in a string, leaving
other characters alone.

```python
from cdrills.basics import add, c_div
from cdrills.decisions import is_leap_year
from cdrills.integers import hcf, is_prime

add(2, 3)            # 5
c_div(-7, 2)         # -3, truncating toward zero
is_leap_year(2000)   # True
is_leap_year(1900)   # False
hcf(12, 18)          # 6
is_prime(13)         # True
```

## Command line

Installing the package provides a `cdrills` command with four sub-commands:

```
cdrills add 2 3              # Sum = 5
cdrills interest 1000 10 2   # Simple Interest = 200.00
                             # Compound Interest = 210.00
cdrills calc 7 2 /           # 3
cdrills binary 10            # 1010
```

Quote `*` and `%` for `calc` so the shell passes them through. When a drill
rejects its input, such as `cdrills calc 5 0 /`, the message is printed to
standard error and the command exits with status 1. See `cdrills --help` for
the full usage.

## What it does not do

Only the four drills above are reachable from the command line; the rest are
available as library functions only. There is no interactive prompting: every
value is passed as an argument.