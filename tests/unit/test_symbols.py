import pytest
from src.hack_asm.symbols import SymbolTable, PREDEFINED, is_literal

def test_predefined_constants():
    t = SymbolTable()
    for i in range(16):
        assert t.address(f"R{i}") == i
    assert [t.address(n) for n in ("SP", "LCL", "ARG", "THIS", "THAT")] == [0, 1, 2, 3, 4]
    assert t.address("SCREEN") == 16384
    assert t.address("KBD") == 24576
    assert len(t) == len(PREDEFINED) == 23
    assert all(s.origin == "predefined" for s in t)

@pytest.mark.parametrize("sym, expected", [
    ("0", True), ("32767", True), ("99999", True),
    ("-1", False), ("R1", False), ("1a", False), ("", False),
])
def test_is_literal(sym, expected):
    assert is_literal(sym) == expected

def test_labels_overwrite_but_constants_do_not():
    t = SymbolTable()
    t.define("LOOP", 3, "label")
    t.define("LOOP", 7, "label")
    assert t.address("LOOP") == 7
    with pytest.raises(ValueError):
        t.define("SCREEN", 1, "label")

def test_variables_are_immutable():
    t = SymbolTable()
    t.advance("labels")
    t.define("i", 16, "variable")
    with pytest.raises(ValueError):
        t.define("i", 17, "variable")
    assert t.get("i").origin == "variable"

def test_phases_and_read_only():
    t = SymbolTable()
    assert t.phase == "predefined"
    with pytest.raises(ValueError):
        t.advance("resolved")
    t.advance("labels")
    t.advance("resolved")
    with pytest.raises(ValueError):
        t.define("late", 99, "variable")
    assert "late" not in t
