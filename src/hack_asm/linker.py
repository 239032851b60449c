# src/hack_asm/linker.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .ast import AddressRef, LabelDef, Instruction, occupies_rom
from .symbols import SymbolTable, is_literal
from .diagnostics import Diagnostic, AssemblyError, error, warning, note

# Primera dirección de RAM libre para variables
VAR_BASE = 16

# ---------- Resultado de la resolución de símbolos ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: SymbolTable
    rom_size: int        # instrucciones A/C del programa
    var_base: int
    var_count: int       # variables nuevas asignadas
    diagnostics: List[Diagnostic]

# ---------- Helpers internos ----------

def _require_phase(symtab: SymbolTable, phase: str, step: str, *, filename: Optional[str] = None) -> None:
    if symtab.phase != phase:
        raise AssemblyError(error(
            f"{step} requiere la tabla en fase '{phase}' (está en '{symtab.phase}')",
            file=filename,
            hint="ejecuta label_pass antes que variable_pass",
        ))

# ---------- Pasada 1: etiquetas ----------

def label_pass(
    nodes: Sequence[Instruction],
    symtab: SymbolTable,
    *,
    filename: Optional[str] = None,
    diags: Optional[List[Diagnostic]] = None,
) -> int:
    """Asigna a cada '(ETIQUETA)' la dirección de ROM de la siguiente instrucción real.

    Devuelve el número de instrucciones que ocupan ROM.
    """
    _require_phase(symtab, "predefined", "label_pass", filename=filename)
    if diags is None:
        diags = []
    pc = 0
    for n in nodes:
        if isinstance(n, LabelDef):
            cur = symtab.get(n.symbol)
            if cur is not None and cur.origin == "predefined":
                diags.append(warning(f"La etiqueta '{n.symbol}' coincide con una constante predefinida; se ignora",
                                     line=n.line, col=n.col, file=filename))
                continue
            symtab.define(n.symbol, pc, "label")
            continue
        if occupies_rom(n):
            pc += 1
    # etiquetas tras la última instrucción apuntan a rom_size
    for n in reversed(nodes):
        if occupies_rom(n):
            break
        if not isinstance(n, LabelDef):
            continue
        sym = symtab.get(n.symbol)
        if sym is not None and sym.origin == "label":
            diags.append(note(f"La etiqueta '{n.symbol}' no precede a ninguna instrucción (dirección {pc})",
                              line=n.line, col=n.col, file=filename))
    symtab.advance("labels")
    return pc

# ---------- Pasada 2: variables ----------

def variable_pass(
    nodes: Sequence[Instruction],
    symtab: SymbolTable,
    *,
    var_base: int = VAR_BASE,
    filename: Optional[str] = None,
) -> int:
    """Da una dirección de RAM (desde var_base) a cada símbolo '@x' sin resolver,
    en orden de primera aparición. Devuelve cuántas variables se crearon."""
    _require_phase(symtab, "labels", "variable_pass", filename=filename)
    free = var_base
    for n in nodes:
        if not isinstance(n, AddressRef):
            continue
        sym = n.symbol
        if is_literal(sym) or sym in symtab:
            continue
        symtab.define(sym, free, "variable")
        free += 1
    symtab.advance("resolved")
    return free - var_base

def link(
    nodes: Sequence[Instruction],
    *,
    var_base: int = VAR_BASE,
    filename: Optional[str] = None,
) -> LinkResult:
    """Pasada de etiquetas y, después, pasada de variables sobre la misma lista."""
    symtab = SymbolTable()
    diags: List[Diagnostic] = []
    rom_size = label_pass(nodes, symtab, filename=filename, diags=diags)
    var_count = variable_pass(nodes, symtab, var_base=var_base, filename=filename)
    return LinkResult(
        symtab=symtab,
        rom_size=rom_size,
        var_base=var_base,
        var_count=var_count,
        diagnostics=diags,
    )
