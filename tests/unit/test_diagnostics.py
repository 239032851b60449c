from src.hack_asm.diagnostics import error, warning, AssemblyError

def test_error_str():
    d = error("comp desconocido", line=12, col=8, file="prog.asm", hint="revise la tabla comp")
    s = str(d)
    assert "prog.asm:12:8:" in s
    assert "ERROR: comp desconocido" in s
    assert "(pista: revise la tabla comp)" in s

def test_warning_promoted_in_strict_mode():
    w = warning("salto desconocido", line=3)
    assert not w.is_error
    assert w.promoted().is_error
    assert str(w.promoted()) == "3: ERROR: salto desconocido"

def test_assembly_error_carries_diagnostic():
    d = error("boom", line=1)
    ex = AssemblyError(d)
    assert ex.diagnostic is d
    assert str(ex) == "1: ERROR: boom"

def test_file_without_line():
    assert str(error("fase", file="Prog.asm")) == "Prog.asm: ERROR: fase"
