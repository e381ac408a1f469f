"""String routines: number words, Roman numerals, vowels and infix conversion."""

from __future__ import annotations

import re
from collections import Counter

_UNITS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
_POWERS = ("hundred", "thousand")

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_VOWELS = frozenset("aeiouAEIOU")


def number_to_words(digits: str) -> str:
    """Spell out a string of up to four decimal digits in English words."""
    if not digits:
        return ""
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not a string of digits: {digits!r}")
    if len(digits) > len(_POWERS) + 2:
        raise ValueError("only numbers of up to four digits are supported")
    if len(digits) == 1:
        return _UNITS[int(digits)]

    *high, tens, units = (int(char) for char in digits)
    words = []
    for place, digit in zip(reversed(range(len(high))), high):
        if digit:
            words += [_UNITS[digit], _POWERS[place]]
    if tens == 1:
        words.append(_TEENS[units])
    else:
        if tens:
            words.append(_TENS[tens])
        if units:
            words.append(_UNITS[units])
    return " ".join(words)


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral."""
    try:
        values = [_ROMAN[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def count_vowels(text: str) -> int:
    """Count the vowels in ``text``."""
    return sum(char in _VOWELS for char in text)


def remove_vowels(text: str) -> str:
    """Return ``text`` without its vowels."""
    return "".join(char for char in text if char not in _VOWELS)


def sum_of_integers(text: str) -> int:
    """Add up every run of decimal digits found in ``text``."""
    return sum(int(run) for run in re.findall(r"[0-9]+", text))


def frequency_sort(s: str) -> str:
    """Order characters by falling frequency, ties by falling character."""
    ordered = sorted(((count, char) for char, count in Counter(s).items()), reverse=True)
    return "".join(char * count for count, char in ordered)


def precedence(op: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    if op == "^":
        return 3
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char.isascii() and char.isalpha():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)