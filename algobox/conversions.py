"""Conversions between binary, octal and decimal notations."""

_BINARY_DIGITS = frozenset("01")


def _check_bits(bits: str) -> None:
    if not set(bits) <= _BINARY_DIGITS:
        raise ValueError(f"not a binary string: {bits!r}")


def _reinterpret(value: int, from_base: int, to_base: int) -> int:
    """Write ``value`` in ``from_base`` and read those digits back in ``to_base``."""
    sign = -1 if value < 0 else 1
    value = abs(value)
    result, place = 0, 1
    while value:
        value, digit = divmod(value, from_base)
        if digit >= to_base:
            raise ValueError(f"digit {digit} is out of range for base {to_base}")
        result += digit * place
        place *= to_base
    return sign * result


def binary_to_decimal(bits: str) -> int:
    """Return the value of a string of binary digits."""
    _check_bits(bits)
    value = 0
    for bit in bits:
        value = value * 2 + int(bit)
    return value


def binary_to_octal(bits: str) -> str:
    """Convert a binary string to octal by grouping its bits in threes."""
    _check_bits(bits)
    padded = bits.zfill(len(bits) + (-len(bits)) % 3)
    groups = (padded[start:start + 3] for start in range(0, len(padded), 3))
    return "".join(str(int(group, 2)) for group in groups)


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer; zero gives an empty string."""
    if n < 0:
        raise ValueError("negative numbers have no binary form here")
    digits = []
    while n:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits))


def decimal_to_octal(n: int) -> int:
    """Return the octal digits of ``n`` written as a decimal integer."""
    return _reinterpret(n, 8, 10)


def octal_to_decimal(octal: int) -> int:
    """Read the decimal digits of ``octal`` as an octal number."""
    return _reinterpret(octal, 10, 8)


def octal_to_binary(octal: int) -> int:
    """Convert octal digits (given as an int) to binary digits (as an int)."""
    return _reinterpret(octal_to_decimal(octal), 2, 10)


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])