"""
Core foundation: parameter registry, hashing, receipts.
"""

from .registry import (
    param_registry,
    width_policy,
    WIDTH_POLICIES,
    DEFAULT_WIDTH_POLICY,
    RegistryError
)
from .hashing import blake3_hash, stable_json_bytes, stable_json_hash
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "width_policy",
    "WIDTH_POLICIES",
    "DEFAULT_WIDTH_POLICY",
    "RegistryError",

    # Hashing
    "blake3_hash",
    "stable_json_bytes",
    "stable_json_hash",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
