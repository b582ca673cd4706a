"""
Core Component: Parameter Registry

Frozen constants for the bit operations, plus the one switch the caller may
flip: the width policy (BITTY_WIDTH_POLICY).

No randomness, no optionals. The registry is hashed into every receipt so a
digest always records which policy produced it.
"""

import os


WIDTH_POLICIES = ("legacy", "exact")
DEFAULT_WIDTH_POLICY = "legacy"


def width_policy() -> str:
    """
    Return the active width policy.

    Read from the BITTY_WIDTH_POLICY environment variable at call time;
    defaults to "legacy".

    Policies:
      - legacy: bnot infers floor(log2(x)) bits, tobin pads to bits+1,
        bunset masks with ceil(log2(x)) bits. Keeps the historical results
        of these functions.
      - exact: bnot infers the bit length of x, tobin pads to bits,
        bunset masks wide enough to cover both x and the target bit.

    Raises:
        RegistryError: If the variable holds an unknown policy.
    """
    policy = os.environ.get("BITTY_WIDTH_POLICY", DEFAULT_WIDTH_POLICY).strip().lower()
    if not policy:
        return DEFAULT_WIDTH_POLICY
    if policy not in WIDTH_POLICIES:
        raise RegistryError(
            f"Unknown BITTY_WIDTH_POLICY '{policy}'. Must be one of {list(WIDTH_POLICIES)}"
        )
    return policy


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the library.

    Keys and values are JSON-serializable primitives or lists.

    Returns:
        dict: Parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency
            check) or the width policy is invalid.
    """
    from .. import __version__, _LICENSE, _NAME

    registry = {
        "library": _NAME,
        "version": __version__,
        "license": _LICENSE,

        # BitTable layout: index 0 holds the most significant digit
        "digit_order": "msb-first",

        # Bit positions count from the least significant bit, starting at 0
        "position_origin": "lsb-0",

        "width_policy": width_policy(),

        # Hashing
        "hash_algo": "BLAKE3",
        "receipt_format": "1",
    }

    required_keys = {
        "library", "version", "license", "digit_order", "position_origin",
        "width_policy", "hash_algo", "receipt_format"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing keys or a bad setting."""
    pass
