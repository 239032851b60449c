'''
tablas de la ISA Hack (comp a/c1..c6, dest d1..d3, jump j1..j3)
'''

from __future__ import annotations
from typing import Dict, Optional

# Prefijo de toda instrucción C (bits 15..13)
C_PREFIX = 0b111

# comp -> 7 bits 'a c1 c2 c3 c4 c5 c6'
COMP: Dict[str, int] = {
    "0":   0b0101010,
    "1":   0b0111111,
    "-1":  0b0111010,
    "D":   0b0001100,
    "A":   0b0110000,
    "M":   0b1110000,
    "!D":  0b0001101,
    "!A":  0b0110001,
    "!M":  0b1110001,
    "-D":  0b0001111,
    "-A":  0b0110011,
    "-M":  0b1110011,
    "D+1": 0b0011111,
    "A+1": 0b0110111,
    "M+1": 0b1110111,
    "D-1": 0b0001110,
    "A-1": 0b0110010,
    "M-1": 0b1110010,
    "D+A": 0b0000010,
    "D+M": 0b1000010,
    "D-A": 0b0010011,
    "D-M": 0b1010011,
    "A-D": 0b0000111,
    "M-D": 0b1000111,
    "D&A": 0b0000000,
    "D&M": 0b1000000,
    "D|A": 0b0010101,
    "D|M": 0b1010101,
}

# dest: un bit por registro destino, orden A D M
DEST_BITS: Dict[str, int] = {
    "A": 0b100,
    "D": 0b010,
    "M": 0b001,
}

# jump -> 3 bits; la ausencia de salto es 000
JUMP: Dict[str, int] = {
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
}

def comp_bits(mnemonic: str) -> int:
    """Devuelve los 7 bits de comp; KeyError si el mnemónico no existe."""
    if mnemonic not in COMP:
        raise KeyError(f"comp desconocido: {mnemonic}")
    return COMP[mnemonic]

def dest_bits(dest: Optional[str]) -> int:
    """Cada bit vale 1 si su letra aparece en el texto, sin importar orden ni repeticiones."""
    if not dest:
        return 0
    bits = 0
    for reg, bit in DEST_BITS.items():
        if reg in dest:
            bits |= bit
    return bits

def is_known_jump(jump: Optional[str]) -> bool:
    return jump is None or jump in JUMP

def jump_bits(jump: Optional[str]) -> int:
    """Los saltos no reconocidos equivalen a 'sin salto'."""
    if jump is None:
        return 0
    return JUMP.get(jump, 0)
