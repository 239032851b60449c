'''
símbolos predefinidos de Hack y tabla de símbolos por fases
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Literal, Optional
import re

Origin = Literal["predefined", "label", "variable"]
Phase = Literal["predefined", "labels", "resolved"]

# R0..R15 más los alias de la VM y los mapas de E/S
PREDEFINED: Dict[str, int] = {
    **{f"R{i}": i for i in range(16)},
    "SP": 0, "LCL": 1, "ARG": 2, "THIS": 3, "THAT": 4,
    "SCREEN": 16384,
    "KBD": 24576,
}

DEC_RE = re.compile(r"^[0-9]+$")

def is_literal(symbol: str) -> bool:
    """Indica si el operando de '@' es un entero decimal sin signo."""
    return bool(DEC_RE.match(symbol))

@dataclass(frozen=True)
class Symbol:
    """Entrada de la tabla: nombre, dirección de 16 bits y origen."""
    name: str
    address: int
    origin: Origin

class SymbolTable:
    """Tabla nombre -> dirección que crece en dos fases y luego queda de solo lectura.

    Fases: 'predefined' (recién creada), 'labels' (tras la pasada de
    etiquetas) y 'resolved' (tras la pasada de variables). Las constantes
    predefinidas nunca se sobrescriben.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Symbol] = {
            name: Symbol(name, addr, "predefined") for name, addr in PREDEFINED.items()
        }
        self._phase: Phase = "predefined"

    @property
    def phase(self) -> Phase:
        return self._phase

    def advance(self, phase: Phase) -> None:
        order = ("predefined", "labels", "resolved")
        if order.index(phase) != order.index(self._phase) + 1:
            raise ValueError(f"Cambio de fase inválido: {self._phase} -> {phase}")
        self._phase = phase

    def define(self, name: str, address: int, origin: Origin) -> Symbol:
        """Registra un símbolo. Las etiquetas repetidas se sobrescriben (gana la última)."""
        if self._phase == "resolved":
            raise ValueError("La tabla de símbolos es de solo lectura tras la resolución")
        if origin == "predefined":
            raise ValueError("Las constantes predefinidas se fijan al crear la tabla")
        cur = self._entries.get(name)
        if cur is not None and cur.origin == "predefined":
            raise ValueError(f"No se puede redefinir la constante predefinida {name}")
        if cur is not None and cur.origin == "variable":
            raise ValueError(f"La variable {name} ya tiene dirección {cur.address}")
        sym = Symbol(name, address & 0xFFFF, origin)
        self._entries[name] = sym
        return sym

    def get(self, name: str) -> Optional[Symbol]:
        return self._entries.get(name)

    def address(self, name: str) -> int:
        """Dirección de un símbolo; KeyError si no está en la tabla."""
        return self._entries[name].address

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
