from __future__ import annotations
from typing import Iterable, List
from .utils import to_hex16, to_bin16
from .encoding import Encoded

def to_bin_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_bin16(w.word) for w in words]

def to_hex_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_hex16(w.word) for w in words]

def _write_lines(lines: List[str], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

def write_hack(words: Iterable[Encoded], path: str) -> None:
    """Formato .hack: una palabra binaria de 16 caracteres por línea."""
    _write_lines(to_bin_lines(words), path)

def write_hex(words: Iterable[Encoded], path: str) -> None:
    _write_lines(to_hex_lines(words), path)
