"""
Kernel Component: Bit Query/Mutation (TEST/SET/UNSET)

Position 0 is the rightmost (least significant) bit, 1 is second from the
right, and so on. Each helper takes any number of positions and processes
them left to right.
"""

from ..core.registry import width_policy
from .bittable import natural, bit_length, ceil_log2
from .combinator import band, bor
from .shift import bnot, brshift


def bisset(x, *positions) -> bool | tuple[bool, ...]:
    """
    Test whether bits are set.

    Args:
        x: Number to inspect.
        *positions: Bit position(s) to test.

    Returns:
        bool: For a single position.
        tuple[bool, ...]: One flag per position, in argument order, when
            zero or several positions are given.

    Example:
        >>> bisset(0b10101, 0, 1, 2)
        (True, False, True)
    """
    x = natural(x, "bisset x")
    flags = tuple(
        brshift(x, natural(p, "bisset position")) % 2 == 1 for p in positions
    )
    if len(flags) == 1:
        return flags[0]
    return flags


def bset(x, *positions) -> int:
    """
    Set bits.

    Example:
        >>> bset(11, 2)  # 1011 -> 1111
        15
    """
    x = natural(x, "bset x")
    for p in positions:
        x = bor(x, 2 ** natural(p, "bset position"))
    return x


def bunset(x, *positions) -> int:
    """
    Unset bits.

    Each step ANDs the running value with bnot(2**p, width), where the width
    is recomputed from the running value, not the original x:
      - legacy policy: ceil(log2(x)). A bit at or above that width is not
        covered by the mask (bunset(2, 1) == 2, bunset(4, 3) == 0).
      - exact policy: wide enough for both x and bit p; clears exactly bit p.

    A running value of 0 stays 0.

    Example:
        >>> bunset(11, 1)  # 1011 -> 1001
        9
    """
    x = natural(x, "bunset x")
    exact = width_policy() == "exact"
    for p in positions:
        p = natural(p, "bunset position")
        if x == 0:
            continue
        if exact:
            width = max(bit_length(x), p + 1)
        else:
            width = ceil_log2(x)
        x = band(x, bnot(2 ** p, width))
    return x
