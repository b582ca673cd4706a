"""
Kernel Component: BitTable Codec

Non-negative number <-> ordered list of binary digits.

BitTable representation:
  - list[int], each entry 0 or 1
  - Index 0 holds the most significant digit
  - Never empty; no leading zero except the single-digit table [0]

Everything here is built from floor division, modulo and base-2 parsing.
"""

import math
import numbers


class InvalidArgument(ValueError):
    """Raised when an argument is outside the domain of the bit operations."""
    pass


def natural(x, name: str = "argument") -> int:
    """
    Coerce x to a non-negative int.

    Accepts ints and integral-valued reals (16.0, Fraction(4, 2), ...).

    Raises:
        InvalidArgument: If x is not a number, is a bool, is negative,
            is not finite, or has a fractional part.
    """
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {type(x).__name__}")
    if isinstance(x, float) and not math.isfinite(x):
        raise InvalidArgument(f"{name} must be finite, got {x!r}")
    if x < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {x!r}")
    n = int(x)
    if n != x:
        raise InvalidArgument(f"{name} must be integral, got {x!r}")
    return n


def floored(x, name: str = "argument") -> int:
    """
    Return floor(x) for a non-negative real x.

    Raises:
        InvalidArgument: If x is not a finite non-negative number.
    """
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {type(x).__name__}")
    if isinstance(x, float) and not math.isfinite(x):
        raise InvalidArgument(f"{name} must be finite, got {x!r}")
    if x < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {x!r}")
    return math.floor(x)


def to_digits(x) -> list[int]:
    """
    Encode a non-negative integer as a BitTable.

    Args:
        x: Non-negative integral number.

    Returns:
        list[int]: Digits, most significant first.

    Raises:
        InvalidArgument: If x is not a non-negative integral number.

    Examples:
        >>> to_digits(0)
        [0]
        >>> to_digits(11)
        [1, 0, 1, 1]
    """
    x = natural(x)
    if x == 0:
        return [0]

    # Remainders come out least significant first
    digits = []
    while x > 0:
        digits.append(x % 2)
        x = x // 2
    digits.reverse()
    return digits


def from_digits(table: list[int]) -> int:
    """
    Decode a list of 0/1 digits (most significant first) to an integer.

    Leading zeros are allowed here; the result of a combinator step may
    carry them before it is decoded.

    Raises:
        InvalidArgument: If table is empty or holds anything but 0 and 1.
    """
    if len(table) == 0:
        raise InvalidArgument("BitTable must not be empty")
    for i, d in enumerate(table):
        if isinstance(d, bool) or d not in (0, 1):
            raise InvalidArgument(f"BitTable digit {i} must be 0 or 1, got {d!r}")
    return int(digits_to_string(table), 2)


def digits_to_string(table: list[int]) -> str:
    """Join a BitTable into a '0'/'1' string."""
    return "".join("1" if d else "0" for d in table)


def bit_length(x) -> int:
    """Number of digits in x's BitTable (1 for zero)."""
    return len(to_digits(x))


def floor_log2(x) -> int:
    """
    Exact floor(log2(x)) for x >= 1.

    Raises:
        InvalidArgument: If x < 1 (log of zero is undefined).
    """
    digits = _positive_digits(x)
    return len(digits) - 1


def ceil_log2(x) -> int:
    """
    Exact ceil(log2(x)) for x >= 1.

    Raises:
        InvalidArgument: If x < 1.
    """
    digits = _positive_digits(x)
    # Powers of two have exactly one set digit
    if digits.count(1) == 1:
        return len(digits) - 1
    return len(digits)


def _positive_digits(x) -> list[int]:
    digits = to_digits(x)
    if digits == [0]:
        raise InvalidArgument("log2 of zero is undefined; an explicit width is required")
    return digits
