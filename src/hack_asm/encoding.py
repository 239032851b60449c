# src/hack_asm/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .ast import AddressRef, LabelDef, Compute, Instruction
from .isa import C_PREFIX, comp_bits, dest_bits, jump_bits, is_known_jump
from .symbols import SymbolTable, is_literal
from .utils import a_value, is_unsigned_nbit
from .diagnostics import Diagnostic, AssemblyError, error, warning

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int     # u16
    pc: int       # dirección de ROM de esta instrucción
    line: int
    col: int
    text: str     # instrucción tal como se leyó

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    diagnostics: List[Diagnostic]

# ---------------- Empaquetado de bits ----------------

def _pack_A(value: int) -> int:
    return a_value(value)

def _pack_C(comp: int, dest: int, jump: int) -> int:
    return ((C_PREFIX & 0x7) << 13 |
            (comp & 0x7F) << 6 |
            (dest & 0x7) << 3 |
            (jump & 0x7))

# ---------------- Codificador principal ----------------

def encode(
    nodes: Sequence[Instruction],
    symtab: SymbolTable,
    *,
    filename: Optional[str] = None,
) -> EncodeResult:
    """Traduce cada instrucción A/C a su palabra de 16 bits.

    La tabla debe venir de link() (fase 'resolved'). Un comp desconocido o
    un símbolo sin dirección abortan con AssemblyError en esa instrucción.
    """
    if symtab.phase != "resolved":
        raise AssemblyError(error(
            f"encode requiere la tabla resuelta (fase '{symtab.phase}')",
            file=filename, hint="ejecuta link() antes de encode()",
        ))

    diags: List[Diagnostic] = []
    words: List[Encoded] = []
    pc = 0

    for n in nodes:
        if isinstance(n, LabelDef):
            continue

        if isinstance(n, AddressRef):
            sym = n.symbol
            if is_literal(sym):
                value = int(sym)
                if not is_unsigned_nbit(value, 15):
                    diags.append(warning(f"Literal {value} no cabe en 15 bits; se trunca a {a_value(value)}",
                                         line=n.line, col=n.col, file=filename))
            else:
                try:
                    value = symtab.address(sym)
                except KeyError:
                    raise AssemblyError(error(f"Símbolo sin dirección: '{sym}'", line=n.line, col=n.col,
                                              file=filename, hint="la pasada de variables debió asignarlo")) from None
            word = _pack_A(value)

        elif isinstance(n, Compute):
            try:
                comp = comp_bits(n.comp)
            except KeyError:
                raise AssemblyError(error(f"Mnemónico comp desconocido: '{n.comp}'", line=n.line, col=n.col,
                                          file=filename, hint=f"en '{n.text}'")) from None
            if not is_known_jump(n.jump):
                diags.append(warning(f"Salto desconocido '{n.jump}'; se codifica sin salto",
                                     line=n.line, col=n.col, file=filename))
            word = _pack_C(comp, dest_bits(n.dest), jump_bits(n.jump))

        else:
            raise AssemblyError(error(f"Nodo desconocido en el codificador: {n!r}", file=filename))

        # Registrar palabra y avanzar PC
        words.append(Encoded(word=word, pc=pc, line=n.line, col=n.col, text=n.text))
        pc += 1

    return EncodeResult(words=words, diagnostics=diags)
