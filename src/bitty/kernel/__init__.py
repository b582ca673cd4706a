"""
Bit operations kernel.

Pure operations on non-negative integers, built from arithmetic only.

Components:
  - bittable: BitTable codec (to_digits / from_digits) and width helpers
  - combinator: make_op, band, bor, bxor
  - shift: bnot, blshift, brshift
  - strings: tobin, frombin
  - bits: bisset, bset, bunset
  - selfcheck: reference vectors, kernel_receipts, self_check
"""

from .bittable import (
    InvalidArgument,
    to_digits,
    from_digits,
    digits_to_string,
    bit_length,
    floor_log2,
    ceil_log2
)
from .combinator import (
    BitwiseOp,
    make_op,
    band,
    bor,
    bxor
)
from .shift import (
    bnot,
    blshift,
    brshift
)
from .strings import (
    tobin,
    frombin
)
from .bits import (
    bisset,
    bset,
    bunset
)
from .selfcheck import (
    REFERENCE_VECTORS,
    kernel_receipts,
    self_check,
    SelfCheckError
)

__all__ = [
    # Codec
    "InvalidArgument",
    "to_digits",
    "from_digits",
    "digits_to_string",
    "bit_length",
    "floor_log2",
    "ceil_log2",

    # Combinator
    "BitwiseOp",
    "make_op",
    "band",
    "bor",
    "bxor",

    # NOT and shifts
    "bnot",
    "blshift",
    "brshift",

    # Strings
    "tobin",
    "frombin",

    # Bit helpers
    "bisset",
    "bset",
    "bunset",

    # Self check
    "REFERENCE_VECTORS",
    "kernel_receipts",
    "self_check",
    "SelfCheckError",
]
