import pytest
from src.hack_asm.isa import COMP, JUMP, comp_bits, dest_bits, jump_bits, is_known_jump

def test_core_tables():
    assert len(COMP) == 28
    assert len(JUMP) == 7
    assert comp_bits("0") == 0b0101010
    assert comp_bits("D|M") == 0b1010101
    # el bit 'a' distingue A de M
    assert comp_bits("M") == comp_bits("A") | 0b1000000

def test_unknown_comp_raises():
    with pytest.raises(KeyError):
        comp_bits("D@A")

@pytest.mark.parametrize("a, b", [
    ("MD", "DM"),
    ("AMD", "DMA"),
    ("MM", "M"),
    ("ADM", "MAD"),
])
def test_dest_order_independent(a, b):
    assert dest_bits(a) == dest_bits(b)

@pytest.mark.parametrize("dest, bits", [
    (None, 0b000), ("", 0b000), ("M", 0b001), ("D", 0b010),
    ("A", 0b100), ("AM", 0b101), ("AMD", 0b111), ("X", 0b000),
])
def test_dest_bits(dest, bits):
    assert dest_bits(dest) == bits

def test_jump_bits_lenient():
    assert jump_bits(None) == 0
    assert jump_bits("JMP") == 0b111
    assert jump_bits("JGE") == 0b011
    assert jump_bits("jmp") == 0
    assert not is_known_jump("NOPE")
    assert is_known_jump(None)
