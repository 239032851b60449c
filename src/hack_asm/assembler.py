from __future__ import annotations
import argparse, os, sys
from typing import List, Tuple

from .ast import Instruction
from .parser import parse
from .linker import link, LinkResult, VAR_BASE
from .encoding import encode, EncodeResult
from .diagnostics import Diagnostic, AssemblyError
from .writers import write_hack, write_hex

def assemble_text(text: str, *, filename: str | None = None,
                  var_base: int = VAR_BASE) -> Tuple[List[Instruction], List[Diagnostic], LinkResult, EncodeResult]:
    """Parsea, hace la pasada de etiquetas, la de variables y codifica.
    Devuelve (nodes, diagnostics_totales, link_result, enc_result).
    Los errores fatales del codificador se propagan como AssemblyError."""
    nodes, diags_parse = parse(text, filename=filename)
    link_res = link(nodes, var_base=var_base, filename=filename)
    enc = encode(nodes, link_res.symtab, filename=filename)
    diags = list(diags_parse) + list(link_res.diagnostics) + list(enc.diagnostics)
    return nodes, diags, link_res, enc

def default_output(source: str) -> str:
    """'prog.asm' -> 'prog.hack' (cualquier otra extensión también se sustituye)."""
    root, _ = os.path.splitext(source)
    return root + ".hack"

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Hack two-pass assembler")
    ap.add_argument("source", help="archivo .asm de entrada")
    ap.add_argument("-o", "--output", help="archivo .hack de salida (por defecto: <source>.hack)")
    ap.add_argument("--hex", dest="out_hex", help="además, listado en hexadecimal")
    ap.add_argument("--var-base", type=int, default=VAR_BASE,
                    help=f"primera dirección de RAM para variables (por defecto {VAR_BASE})")
    ap.add_argument("--strict", action="store_true",
                    help="trata las advertencias como errores")
    args = ap.parse_args(argv)

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    print(f"Ensamblando: {args.source}", file=sys.stderr)
    try:
        nodes, diags, link_res, enc = assemble_text(text, filename=args.source, var_base=args.var_base)
    except AssemblyError as ex:
        print(ex.diagnostic, file=sys.stderr)
        return 1

    had_error = False
    for d in diags:
        if args.strict and d.severity == "advertencia":
            d = d.promoted()
        # imprimimos todo; si hay error, devolvemos código 1
        print(d, file=sys.stderr)
        if d.is_error:
            had_error = True

    if had_error:
        return 1

    out = args.output or default_output(args.source)
    try:
        write_hack(enc.words, out)
        if args.out_hex:
            write_hex(enc.words, args.out_hex)
    except OSError as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    print(f"OK: {len(enc.words)} instrucciones → {out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
