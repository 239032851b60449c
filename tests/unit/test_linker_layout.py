import pytest
from src.hack_asm.parser import parse
from src.hack_asm.linker import link, label_pass, variable_pass
from src.hack_asm.symbols import SymbolTable
from src.hack_asm.diagnostics import AssemblyError

def _link(src: str, **kw):
    nodes, diags = parse(src)
    assert not diags
    return nodes, link(nodes, **kw)

def test_labels_and_rom_size():
    src = "@sum\nD=M\n(LOOP)\nA=D+1;JMP\nM=D\n@LOOP\n0;JMP\n"
    _, r = _link(src)
    assert r.symtab.address("LOOP") == 2
    assert r.symtab.address("sum") == 16
    assert r.symtab.get("LOOP").origin == "label"
    assert r.symtab.get("sum").origin == "variable"
    assert r.rom_size == 6
    assert r.var_count == 1

def test_consecutive_labels_share_address():
    _, r = _link("(A1)\n(A2)\n@0\n(B)\nD=A\n")
    assert r.symtab.address("A1") == 0
    assert r.symtab.address("A2") == 0
    assert r.symtab.address("B") == 1

def test_label_at_end_resolves_to_instruction_count():
    nodes, _ = parse("@END\n0;JMP\nD=M\n(END)\n")
    r = link(nodes)
    assert r.symtab.address("END") == 3
    assert [d.severity for d in r.diagnostics] == ["nota"]

def test_forward_label_reference_is_not_a_variable():
    _, r = _link("@FWD\n0;JMP\n@x\n(FWD)\n@y\n")
    assert r.symtab.address("FWD") == 3
    assert r.symtab.address("x") == 16
    assert r.symtab.address("y") == 17

def test_variables_first_occurrence_order_and_reuse():
    src = "@i\n@j\n@i\n@R3\n@KBD\n@100\n@k\n@j\n"
    _, r = _link(src)
    assert [r.symtab.address(n) for n in ("i", "j", "k")] == [16, 17, 18]
    assert r.var_count == 3
    assert "100" not in r.symtab
    assert r.symtab.get("R3").origin == "predefined"

def test_var_base_is_configurable():
    _, r = _link("@a\n@b\n", var_base=1024)
    assert r.symtab.address("a") == 1024
    assert r.symtab.address("b") == 1025

def test_duplicate_label_last_write_wins():
    _, r = _link("(L)\n@1\n(L)\n@2\n")
    assert r.symtab.address("L") == 1
    assert not r.diagnostics

def test_label_named_like_constant_is_ignored():
    nodes, _ = parse("@0\n(SCREEN)\n@SCREEN\n")
    r = link(nodes)
    assert r.symtab.address("SCREEN") == 16384
    assert any("predefinida" in d.message for d in r.diagnostics)

def test_variable_pass_requires_label_pass():
    nodes, _ = parse("@x\n")
    t = SymbolTable()
    with pytest.raises(AssemblyError):
        variable_pass(nodes, t)
    label_pass(nodes, t)
    variable_pass(nodes, t)
    assert t.phase == "resolved"
    with pytest.raises(AssemblyError):
        label_pass(nodes, t)

def test_phase_error_names_the_file():
    nodes, _ = parse("@x\n")
    with pytest.raises(AssemblyError) as exc:
        variable_pass(nodes, SymbolTable(), filename="Prog.asm")
    assert exc.value.diagnostic.file == "Prog.asm"
    assert str(exc.value).startswith("Prog.asm: ERROR:")
