"""
Bit query/mutation tests (bisset / bset / bunset)

  ✓ literal vectors
  ✓ single vs multiple position return shapes
  ✓ left-to-right folds
  ✓ bunset width coupling under legacy, exact clearing under exact
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bitty.kernel import InvalidArgument, bisset, bset, bunset, frombin


@pytest.fixture
def legacy(monkeypatch):
    monkeypatch.delenv("BITTY_WIDTH_POLICY", raising=False)


@pytest.fixture
def exact(monkeypatch):
    monkeypatch.setenv("BITTY_WIDTH_POLICY", "exact")


# ═══════════════════════════════════════════════════════════════════════
# bisset
# ═══════════════════════════════════════════════════════════════════════

def test_bisset_single_position_is_bool():
    assert bisset(0x10, 4) is True
    assert bisset(0x10, 3) is False


def test_bisset_many_positions_is_tuple():
    assert bisset(frombin("10101"), 0, 1, 2, 3, 4) == (True, False, True, False, True)


def test_bisset_no_positions():
    assert bisset(5) == ()


def test_bisset_past_width():
    assert bisset(1, 64) is False


def test_bisset_rejects_negative_position():
    with pytest.raises(InvalidArgument):
        bisset(1, -1)


# ═══════════════════════════════════════════════════════════════════════
# bset
# ═══════════════════════════════════════════════════════════════════════

def test_bset_vectors():
    assert bset(0, 4) == 0x10
    assert bset(11, 2) == 15


def test_bset_no_positions():
    assert bset(11) == 11


def test_bset_many_positions():
    assert bset(0, 0, 2, 4) == 0b10101
    assert bset(1, 0) == 1


# ═══════════════════════════════════════════════════════════════════════
# bunset
# ═══════════════════════════════════════════════════════════════════════

def test_bunset_vectors(legacy):
    assert bunset(0x12, 1) == 0x10
    assert bunset(11, 1) == 9


def test_bunset_no_positions():
    assert bunset(11) == 11


def test_bunset_zero_stays_zero(legacy):
    assert bunset(0, 3) == 0
    assert bunset(0, 0, 1) == 0


def test_bunset_legacy_width_coupling(legacy):
    # ceil(log2(2)) = 1: mask misses bit 1
    assert bunset(2, 1) == 2
    # ceil(log2(4)) = 2: bnot(8, 2) = 0b1011 also drops bit 2
    assert bunset(4, 3) == 0
    # ceil(log2(1)) = 0: nothing is cleared
    assert bunset(1, 0) == 1


def test_bunset_legacy_recomputes_width_per_step(legacy):
    # 0b110: width 3, clear bit 1 -> 0b100; width 2 now, bit 2 not covered
    assert bunset(0b110, 1, 2) == 0b100
    # 0b110: clear bit 2 -> 0b010; width 1 now, bit 1 not covered
    assert bunset(0b110, 2, 1) == 0b010


def test_bunset_exact(exact):
    assert bunset(2, 1) == 0
    assert bunset(4, 3) == 4
    assert bunset(1, 0) == 0
    assert bunset(0b110, 1, 2) == 0
    assert bunset(0x12, 1) == 0x10


# ═══════════════════════════════════════════════════════════════════════
# Set/unset laws
# ═══════════════════════════════════════════════════════════════════════

def test_set_then_test():
    for x in [0, 1, 5, 0xDEADBEEF]:
        for n in range(0, 40):
            assert bisset(bset(x, n), n) is True


def test_set_unset_then_test_exact(exact):
    for x in [0, 1, 2, 5, 8, 0xDEADBEEF]:
        for n in range(0, 40):
            assert bisset(bunset(bset(x, n), n), n) is False


def test_set_unset_then_test_legacy(legacy):
    """Holds under legacy whenever bset(x, n) is not a power of two."""
    for x in [3, 5, 0xDEADBEEF]:
        for n in range(0, 40):
            y = bset(x, n)
            if y == 2 ** n:
                continue
            assert bisset(bunset(y, n), n) is False
