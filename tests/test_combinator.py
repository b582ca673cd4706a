"""
Binary-op combinator tests (AND/OR/XOR)

  ✓ literal 32-bit vectors
  ✓ identity with a single argument
  ✓ left-to-right fold over many arguments
  ✓ idempotence / self-cancellation laws
  ✓ unequal operand widths
  ✓ make_op with a custom truth function
  ✓ BITTY_DEBUG output
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bitty.kernel import InvalidArgument, BitwiseOp, make_op, band, bor, bxor


# ═══════════════════════════════════════════════════════════════════════
# Known vectors
# ═══════════════════════════════════════════════════════════════════════

def test_bor_deadbeef_cafebabe():
    assert bor(0xDEADBEEF, 0xCAFEBABE) == 0xDEFFBEFF


def test_band_deadbeef_cafebabe():
    assert band(0xDEADBEEF, 0xCAFEBABE) == 0xCAACBAAE


def test_bxor_deadbeef_cafebabe():
    assert bxor(0xDEADBEEF, 0xCAFEBABE) == 0x14530451


def test_documented_small_examples():
    assert band(11, 6) == 2
    assert bor(11, 6) == 15
    assert bxor(11, 6) == 13


@pytest.mark.parametrize("a, b", [(0, 0), (0, 1), (1, 0), (1, 1)])
def test_truth_tables(a, b):
    assert band(a, b) == (1 if a and b else 0)
    assert bor(a, b) == (1 if a or b else 0)
    assert bxor(a, b) == (1 if a != b else 0)


# ═══════════════════════════════════════════════════════════════════════
# Variadic behavior
# ═══════════════════════════════════════════════════════════════════════

def test_single_argument_is_identity():
    for op in (band, bor, bxor):
        assert op(0xDEADBEEF) == 0xDEADBEEF
        assert op(0) == 0


def test_fold_left_to_right():
    assert bor(1, 2, 4, 8) == 15
    assert band(0xFF, 0xF0, 0x3C) == 0x30
    assert bxor(1, 3, 7) == 5
    assert bor(1, 2, 4) == bor(bor(1, 2), 4)


def test_reduce_over_sequence():
    assert bor.reduce([1, 2, 4]) == 7
    assert band.reduce(iter([0xFF, 0x0F])) == 0x0F
    assert bxor.reduce([9]) == 9


def test_reduce_empty_rejected():
    with pytest.raises(InvalidArgument):
        bor.reduce([])


def test_non_numeric_operand_rejected():
    with pytest.raises(InvalidArgument):
        band(1, "2")
    with pytest.raises(InvalidArgument):
        bor(-1, 2)


# ═══════════════════════════════════════════════════════════════════════
# Algebraic laws
# ═══════════════════════════════════════════════════════════════════════

def test_self_laws():
    for x in [0, 1, 2, 5, 255, 0xDEADBEEF, 2 ** 80 + 12345]:
        assert band(x, x) == x
        assert bor(x, x) == x
        assert bxor(x, x) == 0


def test_agrees_with_native_operators():
    """The arithmetic construction matches Python's own &, |, ^."""
    values = [0, 1, 2, 3, 6, 11, 100, 1023, 0xCAFEBABE, 2 ** 65 + 7]
    for x in values:
        for y in values:
            assert band(x, y) == x & y
            assert bor(x, y) == x | y
            assert bxor(x, y) == x ^ y


def test_unequal_widths_align_at_lsb():
    assert bor(0b1, 0b1000000) == 0b1000001
    assert band(0b1011, 0b1) == 1
    assert bxor(0b100000, 0b11) == 0b100011


# ═══════════════════════════════════════════════════════════════════════
# make_op
# ═══════════════════════════════════════════════════════════════════════

def test_make_op_custom_reduction():
    nand = make_op(lambda a, b: not (a and b), "bnand")
    assert isinstance(nand, BitwiseOp)
    assert nand(0b1100, 0b1010) == 0b0111
    assert repr(nand) == "BitwiseOp('bnand')"


def test_make_op_andn():
    andn = make_op(lambda a, b: a and not b, "bandn")
    assert andn(0b1111, 0b0101) == 0b1010
    assert andn(0b1111, 0b0101, 0b0010) == 0b1000


# ═══════════════════════════════════════════════════════════════════════
# Debug output
# ═══════════════════════════════════════════════════════════════════════

def test_debug_output_gated_by_env(monkeypatch, capsys):
    monkeypatch.delenv("BITTY_DEBUG", raising=False)
    band(11, 6)
    assert capsys.readouterr().out == ""

    monkeypatch.setenv("BITTY_DEBUG", "1")
    band(11, 6)
    out = capsys.readouterr().out
    assert "=== band ===" in out
    lines = out.splitlines()
    assert any(line.strip() == "x:      1011" for line in lines)
    assert any(line.endswith(" 110") and "y:" in line for line in lines)
    assert "result: 0010" in out
