"""Integer arithmetic, numeral systems and number puzzles."""

from __future__ import annotations

import math
from string import ascii_uppercase

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ROMAN_VALUES = {"M": 1000, "D": 500, "C": 100, "L": 50, "X": 10, "V": 5, "I": 1}

_ROMAN_DIGITS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def divide(dividend: int, divisor: int) -> int:
    """Quotient truncated toward zero, clamped to the signed 32-bit range."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return max(_INT_MIN, min(quotient, _INT_MAX))


def title_to_number(column_title: str) -> int:
    """Column number of a spreadsheet column title such as ``"AB"``."""
    number = 0
    for char in column_title:
        if char not in ascii_uppercase:
            raise ValueError(f"invalid column letter {char!r}")
        number = number * 26 + ord(char) - ord("A") + 1
    return number


def convert_to_title(column_number: int) -> str:
    """Spreadsheet column title of a column number; empty for numbers below 1."""
    letters: list[str] = []
    while column_number > 0:
        column_number, remainder = divmod(column_number - 1, 26)
        letters.append(ascii_uppercase[remainder])
    return "".join(reversed(letters))


def _digit_square_sum(n: int) -> int:
    if n <= 0:
        return 0
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Whether repeatedly summing the squares of the digits reaches 1."""
    seen: set[int] = set()
    while n not in seen:
        if n == 1:
            return True
        seen.add(n)
        n = _digit_square_sum(n)
    return False


def int_to_roman(num: int) -> str:
    """Roman numeral for a non-negative integer; zero gives an empty string."""
    if num < 0:
        raise ValueError("Roman numerals cannot express negative numbers")
    parts: list[str] = []
    for value, symbol in _ROMAN_DIGITS:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Integer value of a Roman numeral."""
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman digit {exc.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same backwards."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def power(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    if n < 0:
        x = 1 / x
    remaining = abs(n)
    result = 1.0
    while remaining:
        if remaining & 1:
            result *= x
        remaining >>= 1
        x *= x
    return result


def reverse_integer(x: int) -> int:
    """Digits of ``x`` reversed, keeping the sign; 0 if outside 32 bits."""
    reversed_value = int(str(abs(x))[::-1])
    if x < 0:
        reversed_value = -reversed_value
    if not _INT_MIN <= reversed_value <= _INT_MAX:
        return 0
    return reversed_value


def int_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to 32 bits.

    Leading spaces are skipped; parsing stops at the first non-digit.
    Text with no digits gives 0.
    """
    text = s.lstrip(" ")
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    number = 0
    for char in text:
        if char not in "0123456789":
            break
        number = number * 10 + ord(char) - ord("0")
        if number > _INT_MAX + 1:
            break
    if negative:
        return max(-number, _INT_MIN)
    return min(number, _INT_MAX)


def pascal_row(row_index: int) -> list[int]:
    """Row ``row_index`` of Pascal's triangle, counting from 0."""
    if row_index < 0:
        raise ValueError("row index must not be negative")
    row = [1]
    for _ in range(row_index):
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]
    return row