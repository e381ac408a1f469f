"""Booth's algorithm for multiplying two's-complement binary numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SUBTRACT = "A = A - BR"
ADD = "A = A + BR"

_BINARY_DIGITS = frozenset("01")


@dataclass(frozen=True)
class BoothStep:
    """One cycle of Booth's algorithm, recorded after its arithmetic right shift.

    ``q0`` and ``q_minus_1`` are the bit pair examined at the start of the
    cycle; ``operation`` is the accumulator update performed, if any; and
    ``count`` is the number of cycles still to run.
    """

    q0: int
    q_minus_1: int
    operation: Optional[str]
    accumulator: str
    multiplier: str
    count: int


def _parse(bits: str, name: str) -> int:
    if not bits or not set(bits) <= _BINARY_DIGITS:
        raise ValueError(f"{name} must be a non-empty binary string, got {bits!r}")
    return int(bits, 2)


def booth_multiply(multiplicand_bits: str, multiplier_bits: str) -> tuple[str, list[BoothStep]]:
    """Multiply two equally wide two's-complement numbers given most significant bit first.

    Return the product, twice as wide as the operands, and the cycles that led to it.
    """
    width = len(multiplicand_bits)
    if len(multiplier_bits) != width:
        raise ValueError("multiplicand and multiplier must have the same number of bits")
    multiplicand = _parse(multiplicand_bits, "multiplicand")
    multiplier = _parse(multiplier_bits, "multiplier")

    mask = (1 << width) - 1
    sign_bit = 1 << (width - 1)

    def bits(value: int) -> str:
        return format(value, f"0{width}b")

    accumulator = 0
    q_minus_1 = 0
    steps: list[BoothStep] = []
    for count in reversed(range(width)):
        q0 = multiplier & 1
        examined = q_minus_1
        operation: Optional[str] = None
        if (q0, examined) == (1, 0):
            accumulator = (accumulator - multiplicand) & mask
            operation = SUBTRACT
        elif (q0, examined) == (0, 1):
            accumulator = (accumulator + multiplicand) & mask
            operation = ADD
        q_minus_1 = q0
        multiplier = (multiplier >> 1) | ((accumulator & 1) << (width - 1))
        accumulator = (accumulator >> 1) | (accumulator & sign_bit)
        steps.append(
            BoothStep(q0, examined, operation, bits(accumulator), bits(multiplier), count)
        )
    return bits(accumulator) + bits(multiplier), steps