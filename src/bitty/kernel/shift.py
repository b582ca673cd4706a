"""
Kernel Component: NOT and Shifts

  - bnot: XOR against an all-ones mask of a given (or inferred) width
  - blshift: floor(x) * 2**bits
  - brshift: floor(floor(x) / 2**bits)

Shifts never wrap and never overflow; the host int is unbounded.
"""

from ..core.registry import width_policy
from .bittable import natural, floored, bit_length, floor_log2
from .combinator import bxor


def bnot(x, bits=None) -> int:
    """
    Bitwise negation of x within a mask of `bits` ones.

    Args:
        x: Number to negate.
        bits: Width of the mask. If omitted it is inferred from x:
          - legacy policy: floor(log2(x)), one short of x's own width
            (bnot(5) == 6). bnot(0) has no inferable width.
          - exact policy: the bit length of x (bnot(5) == 2, bnot(0) == 1).

    Returns:
        int: bxor(x, 2**bits - 1)

    Raises:
        InvalidArgument: If x or bits is not a non-negative integer, or the
            width cannot be inferred.

    Examples:
        >>> bnot(5, 8)  # ~101 = 11111010
        250
        >>> bnot(0, 8)
        255
    """
    x = natural(x, "bnot x")
    if bits is None:
        if width_policy() == "exact":
            bits = bit_length(x)
        else:
            bits = floor_log2(x)
    else:
        bits = natural(bits, "bnot bits")
    return bxor(x, 2 ** bits - 1)


def blshift(x, bits) -> int:
    """
    Shift x's bits to the left.

    Roughly equivalent to x * 2**bits.

    Example:
        >>> blshift(5, 2)  # 0b101 -> 0b10100
        20
    """
    bits = natural(bits, "blshift bits")
    return floored(x, "blshift x") * 2 ** bits


def brshift(x, bits) -> int:
    """
    Shift x's bits to the right; shifted-out bits are dropped.

    Roughly equivalent to x / 2**bits, floored.

    Example:
        >>> brshift(5, 2)  # 0b101 -> 0b001
        1
    """
    bits = natural(bits, "brshift bits")
    return floored(x, "brshift x") // 2 ** bits
