"""Small arithmetic routines: sequences, factorials, primes and a calculator."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from itertools import islice
from typing import Iterator


@dataclass(frozen=True)
class Complex:
    """A complex number with integer parts."""

    real: int = 0
    imaginary: int = 0

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def __str__(self) -> str:
        return f"{self.real} + i{self.imaginary}"


def _fibonacci_terms() -> Iterator[int]:
    previous, current = 0, 1
    while True:
        yield previous
        previous, current = current, previous + current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0."""
    return list(islice(_fibonacci_terms(), max(count, 0)))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """Return n!, refusing negative numbers."""
    if n < 0:
        raise ValueError("factorial of a negative number doesn't exist")
    return math.prod(range(1, n + 1))


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def is_prime(n: int) -> bool:
    """Tell whether ``n`` has exactly two divisors."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def armstrong_numbers(limit: int = 500) -> list[int]:
    """Return the numbers from 1 to ``limit`` equal to the sum of the cubes of their digits."""
    return [
        number
        for number in range(1, limit + 1)
        if sum(int(digit) ** 3 for digit in str(number)) == number
    ]


def karatsuba(x: int, y: int) -> int:
    """Multiply two integers with Karatsuba's divide-and-conquer method."""
    if x < 0 or y < 0:
        sign = -1 if (x < 0) != (y < 0) else 1
        return sign * karatsuba(abs(x), abs(y))
    if x < 10 or y < 10:
        return x * y
    half = max(len(str(x)), len(str(y))) // 2
    shift = 10**half
    x_high, x_low = divmod(x, shift)
    y_high, y_low = divmod(y, shift)
    high = karatsuba(x_high, y_high)
    low = karatsuba(x_low, y_low)
    middle = karatsuba(x_high + x_low, y_high + y_low) - high - low
    return high * shift * shift + middle * shift + low


_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def calculate(op: str, a: float, b: float) -> float:
    """Apply one of the operators + - * / to two operands."""
    try:
        function = _OPERATORS[op]
    except KeyError:
        raise ValueError(f"Error! operator is not correct: {op!r}") from None
    return function(a, b)