from __future__ import annotations
from typing import Optional, Tuple

COMMENT_MARK = "//"
LABEL_OPEN = "("
LABEL_CLOSE = ")"
ADDRESS_MARK = "@"

def strip_comment(line: str) -> str:
    """Remove a '//' comment and surrounding whitespace."""
    idx = line.find(COMMENT_MARK)
    if idx != -1:
        line = line[:idx]
    return line.strip()

def first_col(line: str) -> int:
    """1-based column of the first non-blank character (1 for blank lines)."""
    stripped = line.lstrip()
    if not stripped:
        return 1
    return len(line) - len(stripped) + 1

def split_label(line: str) -> Tuple[str, bool]:
    """'(NAME)' -> ('NAME', True). A missing ')' is tolerated: ('NAME', False)."""
    body = line[1:] if line.startswith(LABEL_OPEN) else line
    if body.endswith(LABEL_CLOSE):
        return body[:-1], True
    return body, False

def split_address(line: str) -> str:
    """'@sym' -> 'sym', verbatim."""
    return line[1:] if line.startswith(ADDRESS_MARK) else line

def split_compute(line: str) -> Tuple[Optional[str], str, Optional[str]]:
    """Split 'dest=comp;jump' into its three fields.

    Only the last '=' and the last ';' count. dest/jump are None when the
    delimiter is absent.
    """
    eq_idx = None
    semi_idx = None
    for i, ch in enumerate(line):
        if ch == '=':
            eq_idx = i
        elif ch == ';':
            semi_idx = i
    comp_start = eq_idx + 1 if eq_idx is not None else 0
    comp_end = semi_idx if semi_idx is not None else len(line)
    dest = line[:eq_idx] if eq_idx is not None else None
    jump = line[semi_idx + 1:] if semi_idx is not None else None
    # si ';' precede a '=' el rango queda vacío
    comp = line[comp_start:comp_end] if comp_start <= comp_end else ""
    return dest, comp, jump
