# src/hack_asm/parser.py
from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from .lexer import (
    strip_comment,
    first_col,
    split_label,
    split_address,
    split_compute,
    LABEL_OPEN,
    ADDRESS_MARK,
)
from .ast import AddressRef, LabelDef, Compute, Instruction
from .diagnostics import warning, Diagnostic

def classify_line(raw: str, lineno: int = 0, *, filename: Optional[str] = None,
                  diags: Optional[List[Diagnostic]] = None) -> Optional[Instruction]:
    """Clasifica una línea del fuente. Devuelve None si no hay instrucción.

    Las líneas vacías, los comentarios y las líneas que no se pueden
    clasificar se descartan sin error.
    """
    core = strip_comment(raw)
    if not core:
        return None
    col = first_col(raw)

    if core.startswith(LABEL_OPEN):
        name, closed = split_label(core)
        if diags is not None:
            if not closed:
                diags.append(warning(f"Etiqueta sin ')' de cierre: '{core}'", line=lineno, col=col,
                                     file=filename, hint=f"se usa '{name}' como nombre"))
            if not name:
                diags.append(warning("Etiqueta con nombre vacío", line=lineno, col=col, file=filename))
        return LabelDef(symbol=name, line=lineno, col=col)

    if core.startswith(ADDRESS_MARK):
        return AddressRef(symbol=split_address(core), line=lineno, col=col)

    # un comp vacío ("D=") se conserva; el codificador lo rechaza
    dest, comp, jump = split_compute(core)
    return Compute(dest=dest, comp=comp, jump=jump, line=lineno, col=col)

def iter_instructions(text: str, *, filename: Optional[str] = None,
                      diags: Optional[List[Diagnostic]] = None) -> Iterator[Instruction]:
    """Flujo perezoso de instrucciones, en orden de fuente; se consume una sola vez."""
    for lineno, raw in enumerate(text.splitlines(), start=1):
        ins = classify_line(raw, lineno, filename=filename, diags=diags)
        if ins is not None:
            yield ins

def parse(text: str, *, filename: Optional[str] = None) -> Tuple[List[Instruction], List[Diagnostic]]:
    """
    Devuelve (nodes, diagnostics) con el flujo ya materializado en una lista,
    porque las dos pasadas del enlazador y el codificador lo recorren por separado.

    Reglas:
      - Comentarios: '//' hasta fin de línea.
      - Etiquetas: '(NOMBRE)'.
      - Instrucciones A: '@símbolo' o '@número'.
      - Instrucciones C: resto, '[dest=]comp[;jump]'.
    """
    diags: List[Diagnostic] = []
    nodes = list(iter_instructions(text, filename=filename, diags=diags))
    return nodes, diags
