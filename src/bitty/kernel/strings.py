"""
Kernel Component: Binary-String Conversion

  - tobin: number -> '0'/'1' string, optionally zero-padded
  - frombin: '0'/'1' string -> number
"""

from ..core.registry import width_policy
from .bittable import InvalidArgument, natural, to_digits, from_digits, digits_to_string


def tobin(x, bits=None) -> str:
    """
    Convert a number to its base 2 representation.

    Args:
        x: Non-negative integer to convert.
        bits: Minimum width. Under the legacy policy the string is padded to
            bits + 1 characters (2 when omitted); under the exact policy to `bits`
            characters (no padding when omitted).

    Returns:
        str: Binary digits, most significant first.

    Examples:
        >>> tobin(11)
        '1011'
    """
    r = digits_to_string(to_digits(x))
    if width_policy() == "exact":
        target = 0 if bits is None else natural(bits, "tobin bits")
    else:
        # An explicit 0 still counts as a width: pads to 1 character
        target = (1 if bits is None else natural(bits, "tobin bits")) + 1
    return "0" * (target - len(r)) + r


def frombin(s: str) -> int:
    """
    Convert a base 2 string back to a number.

    Leading zeros are stripped; an all-zero string is 0.

    Raises:
        InvalidArgument: If s is not a str, is empty, or holds any character
            other than '0' and '1'.

    Example:
        >>> frombin("1011")
        11
    """
    if not isinstance(s, str):
        raise InvalidArgument(f"frombin expects a str, got {type(s).__name__}")
    if not s:
        raise InvalidArgument("frombin expects at least one digit")

    rest = s.lstrip("0")
    if not rest:
        return 0
    bad = [ch for ch in rest if ch not in "01"]
    if bad:
        raise InvalidArgument(f"Not a binary string: {s!r} (bad character {bad[0]!r})")
    return from_digits([1 if ch == "1" else 0 for ch in rest])
