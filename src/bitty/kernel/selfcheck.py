"""
Kernel Component: Reference Vectors & Self Check

Known-answer vectors for every operation. kernel_receipts() commits the
results to a BLAKE3 receipt; self_check() evaluates them twice, requires
both runs to hash alike, and raises if any vector does not reproduce.

Every vector runs under either width policy and carries one expected value
per policy; most agree.
"""

from ..core import Receipts, assert_double_run_equal, width_policy
from .combinator import band, bor, bxor
from .shift import bnot, blshift, brshift
from .strings import tobin, frombin
from .bits import bisset, bset, bunset


# (label, function, args, expected under legacy, expected under exact)
REFERENCE_VECTORS = [
    ("tobin_deadbeef", tobin, (0xDEADBEEF,),
     "11011110101011011011111011101111", "11011110101011011011111011101111"),
    ("frombin_deadbeef", frombin, ("11011110101011011011111011101111",),
     0xDEADBEEF, 0xDEADBEEF),
    ("bor_deadbeef_cafebabe", bor, (0xDEADBEEF, 0xCAFEBABE), 0xDEFFBEFF, 0xDEFFBEFF),
    ("band_deadbeef_cafebabe", band, (0xDEADBEEF, 0xCAFEBABE), 0xCAACBAAE, 0xCAACBAAE),
    ("bxor_deadbeef_cafebabe", bxor, (0xDEADBEEF, 0xCAFEBABE), 0x14530451, 0x14530451),
    ("blshift_dead_16", blshift, (0xDEAD, 16), 0xDEAD0000, 0xDEAD0000),
    ("brshift_dead0000_16", brshift, (0xDEAD0000, 16), 0xDEAD, 0xDEAD),
    ("brshift_dead_8", brshift, (0xDEAD, 8), 0xDE, 0xDE),
    ("bnot_0_8", bnot, (0, 8), 0xFF, 0xFF),
    ("bnot_5_8", bnot, (5, 8), 250, 250),
    ("bnot_5", bnot, (5,), 6, 2),
    ("bisset_10_4", bisset, (0x10, 4), True, True),
    ("bisset_10101_all", bisset, (0b10101, 0, 1, 2, 3, 4),
     (True, False, True, False, True), (True, False, True, False, True)),
    ("bset_0_4", bset, (0, 4), 0x10, 0x10),
    ("bset_11_2", bset, (11, 2), 15, 15),
    ("bunset_12_1", bunset, (0x12, 1), 0x10, 0x10),
    ("bunset_11_1", bunset, (11, 1), 9, 9),
    ("bunset_2_1", bunset, (2, 1), 2, 0),
    ("tobin_11", tobin, (11,), "1011", "1011"),
    ("tobin_11_8", tobin, (11, 8), "000001011", "00001011"),
    ("tobin_0", tobin, (0,), "00", "0"),
    ("tobin_1_width_0", tobin, (1, 0), "1", "1"),
    ("tobin_0_width_0", tobin, (0, 0), "0", "0"),
]


def _expected(vector, policy: str):
    _, _, _, legacy, exact = vector
    return exact if policy == "exact" else legacy


def kernel_receipts(section_label: str = "bitty-kernel") -> dict:
    """
    Evaluate every reference vector and record the results in a receipt.

    Args:
        section_label: ASCII identifier for the receipt section.

    Returns:
        dict: Receipt digest. Payload keys:
            - width_policy: policy the vectors ran under
            - vectors: list of {label, result, expected, ok}
            - all_ok: True iff every vector reproduced
    """
    return _vector_receipts(section_label).digest()


def _vector_receipts(section_label: str) -> Receipts:
    policy = width_policy()
    receipts = Receipts(section_label)

    results = []
    for vector in REFERENCE_VECTORS:
        label, fn, args, _, _ = vector
        result = fn(*args)
        expected = _expected(vector, policy)
        results.append({
            "label": label,
            "result": result,
            "expected": expected,
            "ok": result == expected,
        })

    receipts.put("width_policy", policy)
    receipts.put("vectors", results)
    receipts.put("all_ok", all(r["ok"] for r in results))

    return receipts


def self_check(section_label: str = "bitty-self-check") -> dict:
    """
    Run the reference vectors twice and fail loudly on any mismatch.

    Both runs must hash identically before the expected values are compared.

    Returns:
        dict: Receipt digest of the first run.

    Raises:
        DeterminismError: If the two runs disagree.
        SelfCheckError: If any vector did not reproduce.
    """
    digest = assert_double_run_equal(lambda: _vector_receipts(section_label))
    failures = [v for v in digest["payload"]["vectors"] if not v["ok"]]
    if failures:
        raise SelfCheckError(digest["payload"]["width_policy"], failures)
    return digest


class SelfCheckError(AssertionError):
    """Raised when a reference vector does not reproduce."""

    def __init__(self, policy: str, failures: list[dict]):
        self.policy = policy
        self.failures = failures

        lines = [f"Self check failed under width policy '{policy}':"]
        for f in failures:
            lines.append(
                f"  {f['label']}: expected {f['expected']!r}, got {f['result']!r}"
            )
        super().__init__("\n".join(lines))
