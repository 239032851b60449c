'''
bit-twiddling (u16, máscara de instrucción A, formato binario/hex)
'''

from __future__ import annotations

# Máscara para 16 bits sin signo
U16_MASK = 0xFFFF
# Las instrucciones A sólo llevan 15 bits de valor; el bit 15 es 0
A_VALUE_MASK = 0x7FFF

def u16(x: int) -> int:
    """Fuerza el valor al rango de 16 bits sin signo."""
    return x & U16_MASK

def a_value(x: int) -> int:
    """Valor de una instrucción A: módulo 2^15, con el bit alto a 0."""
    return x & A_VALUE_MASK

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def to_bin16(x: int) -> str:
    """Representación binaria de 16 bits (cadena), MSB primero."""
    return format(u16(x), "016b")

def to_hex16(x: int, *, prefix: bool = True) -> str:
    """Representación hexadecimal de 16 bits (cadena), con o sin prefijo 0x."""
    s = format(u16(x), "04x")
    return ("0x" + s) if prefix else s
