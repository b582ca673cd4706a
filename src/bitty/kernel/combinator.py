"""
Kernel Component: Binary-Op Combinator (AND/OR/XOR)

One combinator turns a boolean truth function into a variadic bitwise
operator over non-negative integers:

  - Encode both operands as BitTables
  - Align at the least significant digit; a missing digit reads as 0
  - Apply the truth function digit by digit
  - Decode, then fold the running result against the next operand

No native bitwise operators are used.
"""

import os
from typing import Callable, Iterable

from .bittable import InvalidArgument, natural, to_digits, from_digits, digits_to_string


class BitwiseOp:
    """
    Variadic bitwise operator built from a boolean reduction.

    op(x) returns x; op(x, y) combines two operands; op(x, y, z, ...) folds
    left to right, i.e. op(op(x, y), z, ...).
    """

    def __init__(self, name: str, reduction: Callable[[bool, bool], bool]):
        self.name = name
        self.reduction = reduction

    def __call__(self, x, *others) -> int:
        return self.reduce((x, *others))

    def __repr__(self) -> str:
        return f"BitwiseOp({self.name!r})"

    def reduce(self, values: Iterable) -> int:
        """
        Fold the operator over a non-empty sequence of numbers.

        Raises:
            InvalidArgument: If values is empty or holds a non-natural number.
        """
        values = list(values)
        if not values:
            raise InvalidArgument(f"{self.name} needs at least one value")

        acc = natural(values[0], f"{self.name} argument 0")
        for i, y in enumerate(values[1:], start=1):
            acc = self.pair(acc, natural(y, f"{self.name} argument {i}"))
        return acc

    def pair(self, x: int, y: int) -> int:
        """Apply the reduction to two operands digit by digit."""
        xt, yt = to_digits(x), to_digits(y)
        xl, yl = len(xt), len(yt)
        tl = max(xl, yl)
        t = [0] * tl

        # i counts from the least significant end
        for i in range(tl):
            b1 = xt[xl - 1 - i] if i < xl else None
            b2 = yt[yl - 1 - i] if i < yl else None
            if b1 is None and b2 is None:
                break
            t[tl - 1 - i] = 1 if self.reduction((b1 or 0) != 0, (b2 or 0) != 0) else 0

        if os.environ.get("BITTY_DEBUG"):
            width = tl
            print(f"\n=== {self.name} ===")
            print(f"  x:      {digits_to_string(xt).rjust(width)}")
            print(f"  y:      {digits_to_string(yt).rjust(width)}")
            print(f"  result: {digits_to_string(t)}")

        return from_digits(t)


def make_op(reduction: Callable[[bool, bool], bool], name: str = "op") -> BitwiseOp:
    """
    Build a variadic bitwise operator from a boolean-pair reduction.

    Args:
        reduction: Truth function applied to each aligned digit pair.
        name: Label used in error messages and debug output.

    Returns:
        BitwiseOp: Callable as op(x, *others).

    Example:
        >>> nand = make_op(lambda a, b: not (a and b), "bnand")
        >>> nand(0b1100, 0b1010)
        7
    """
    return BitwiseOp(name, reduction)


# Truth table:
#   band(0, 0) -> 0, band(0, 1) -> 0, band(1, 0) -> 0, band(1, 1) -> 1
# band(11, 6) -> 2  (1011 & 0110 = 0010)
band = make_op(lambda a, b: a and b, "band")

# Truth table:
#   bor(0, 0) -> 0, bor(0, 1) -> 1, bor(1, 0) -> 1, bor(1, 1) -> 1
# bor(11, 6) -> 15  (1011 | 0110 = 1111)
bor = make_op(lambda a, b: a or b, "bor")

# Truth table:
#   bxor(0, 0) -> 0, bxor(0, 1) -> 1, bxor(1, 0) -> 1, bxor(1, 1) -> 0
# bxor(11, 6) -> 13  (1011 ^ 0110 = 1101)
bxor = make_op(lambda a, b: a != b, "bxor")
