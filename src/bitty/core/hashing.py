"""
Core Component: BLAKE3 Hashing

Deterministic hashes for receipts: raw bytes, and JSON values through a
stable encoding (sorted keys, compact separators, UTF-8).
"""

import json
from typing import Any

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Return hex-encoded BLAKE3 digest of the byte stream.

    Example:
        >>> blake3_hash(b"test")
        '4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215'
    """
    hasher = blake3.blake3()
    hasher.update(data)
    return hasher.hexdigest()


def stable_json_bytes(obj: Any) -> bytes:
    """Serialize obj to JSON bytes that do not depend on dict insertion order."""
    return json.dumps(
        obj,
        sort_keys=True,
        ensure_ascii=False,
        separators=(',', ':')
    ).encode('utf-8')


def stable_json_hash(obj: Any) -> str:
    """BLAKE3 of stable_json_bytes(obj)."""
    return blake3_hash(stable_json_bytes(obj))
