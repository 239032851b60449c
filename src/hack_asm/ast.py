'''
dataclases de instrucciones Hack (AddressRef, LabelDef, Compute)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

# ---- Nodos a nivel de fuente ----

@dataclass(frozen=True)
class AddressRef:
    """Instrucción A: '@símbolo' o '@123'."""
    symbol: str
    line: int = 0
    col: int = 0

    @property
    def text(self) -> str:
        return f"@{self.symbol}"

@dataclass(frozen=True)
class LabelDef:
    """Etiqueta '(NOMBRE)': no ocupa dirección de ROM."""
    symbol: str
    line: int = 0
    col: int = 0

@dataclass(frozen=True)
class Compute:
    """Instrucción C: '[dest=]comp[;jump]'.

    comp puede quedar vacío ("D=", ";JMP"); encode() lo trata como
    mnemónico desconocido.

    dest/jump son None cuando la cláusula no aparece en el fuente; una
    cadena vacía ('=M' o 'D;') significa que sí apareció, pero vacía.
    """
    dest: Optional[str]
    comp: str
    jump: Optional[str]
    line: int = 0
    col: int = 0

    @property
    def text(self) -> str:
        s = self.comp
        if self.dest is not None:
            s = f"{self.dest}={s}"
        if self.jump is not None:
            s = f"{s};{self.jump}"
        return s

Instruction = Union[AddressRef, LabelDef, Compute]

def occupies_rom(ins: Instruction) -> bool:
    """True si la instrucción consume una dirección de ROM (A o C)."""
    return isinstance(ins, (AddressRef, Compute))
