"""
Core Component: Receipts

A receipt is an ordered record of results for one named section, committed
with a BLAKE3 hash that also binds the parameter registry (so the width
policy a result was computed under is part of its hash).

Payload values are limited to exact JSON types: int, bool, str, None and
lists/tuples/dicts of those. Floats are refused; every bit operation result
is an integer, a string or a flag.
"""

from typing import Any, Callable

from .registry import param_registry
from .hashing import stable_json_hash


class Receipts:
    """
    Ordered key/value record for one section.

    digest() layout:
        section, receipt_format, param_registry_hash, payload, section_hash
    where section_hash covers the four fields before it.
    """

    def __init__(self, section: str):
        self.section = section
        self.payload: dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Record one result.

        Raises:
            ReceiptError: If key was already recorded or value holds a
                type outside the exact JSON subset.
        """
        if key in self.payload:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")
        bad = _first_bad_path(value, key)
        if bad is not None:
            path, kind = bad
            raise ReceiptError(f"{kind} not allowed in receipts (at '{path}')")
        self.payload[key] = value

    def digest(self) -> dict:
        registry = param_registry()
        body = {
            "section": self.section,
            "receipt_format": registry["receipt_format"],
            "param_registry_hash": stable_json_hash(registry),
            "payload": dict(self.payload),
        }
        body["section_hash"] = stable_json_hash(body)
        return body


def assert_double_run_equal(build_section_callable: Callable[[], Receipts]) -> dict:
    """
    Build the same section twice and require identical section hashes.

    Returns:
        dict: The digest of the first run.

    Raises:
        DeterminismError: If the two runs hash differently; carries the first
            payload key whose values differ.
    """
    first = build_section_callable().digest()
    second = build_section_callable().digest()
    if first["section_hash"] == second["section_hash"]:
        return first

    a, b = first["payload"], second["payload"]
    missing = "<MISSING>"
    differing_key = next(
        (k for k in [*a, *(k for k in b if k not in a)] if a.get(k, missing) != b.get(k, missing)),
        None,
    )
    raise DeterminismError(
        section=first["section"],
        first_differing_key=differing_key,
        value_a=a.get(differing_key, missing) if differing_key else None,
        value_b=b.get(differing_key, missing) if differing_key else None,
        hash_a=first["section_hash"],
        hash_b=second["section_hash"],
    )


def _first_bad_path(value: Any, path: str) -> tuple[str, str] | None:
    """Return (path, description) of the first disallowed value, or None."""
    if value is None or isinstance(value, (bool, int, str)):
        return None
    if isinstance(value, float):
        return path, "float"
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            bad = _first_bad_path(item, f"{path}[{i}]")
            if bad is not None:
                return bad
        return None
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                return f"{path}.{k!r}", "non-str dict key"
            bad = _first_bad_path(v, f"{path}.{k}")
            if bad is not None:
                return bad
        return None
    return path, type(value).__name__


class ReceiptError(Exception):
    """Raised on a duplicate receipt key or a disallowed payload value."""
    pass


class DeterminismError(Exception):
    """Raised when two runs of the same section hash differently."""

    def __init__(
        self,
        section: str,
        first_differing_key: str | None,
        value_a: Any,
        value_b: Any,
        hash_a: str,
        hash_b: str
    ):
        self.section = section
        self.first_differing_key = first_differing_key
        self.value_a = value_a
        self.value_b = value_b
        self.hash_a = hash_a
        self.hash_b = hash_b
        super().__init__(
            f"Section '{section}' is not deterministic: "
            f"'{first_differing_key}' was {value_a!r}, then {value_b!r} "
            f"({hash_a[:16]} != {hash_b[:16]})"
        )
