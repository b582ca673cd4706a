"""
bitty: bitwise operations in pure arithmetic.

Not suitable for time critical code. Intended as a fallback where native
bitwise operators are unavailable or must be avoided.
"""

from types import MappingProxyType

__version__ = "0.1.0"
_NAME = "bitty"
_LICENSE = "Unlicense <http://unlicense.org/>"

from .kernel import (
    InvalidArgument,
    BitwiseOp,
    make_op,
    to_digits,
    from_digits,
    band,
    bor,
    bxor,
    bnot,
    blshift,
    brshift,
    tobin,
    frombin,
    bset,
    bunset,
    bisset,
    kernel_receipts,
    self_check,
    SelfCheckError
)

# Exported operator table; read-only
OPS = MappingProxyType({
    "bor": bor,
    "band": band,
    "bxor": bxor,
    "bnot": bnot,
    "blshift": blshift,
    "brshift": brshift,
    "tobin": tobin,
    "frombin": frombin,
    "bset": bset,
    "bunset": bunset,
    "bisset": bisset,
})

__all__ = [
    "OPS",
    "InvalidArgument",
    "BitwiseOp",
    "make_op",
    "to_digits",
    "from_digits",
    "band",
    "bor",
    "bxor",
    "bnot",
    "blshift",
    "brshift",
    "tobin",
    "frombin",
    "bset",
    "bunset",
    "bisset",
    "kernel_receipts",
    "self_check",
    "SelfCheckError",
]
