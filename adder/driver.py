"""Command-line driver: .snek source in, NASM .s file out.

    adderc input.snek output.s
    adderc --emit body input.snek
"""

import argparse
import sys
from pathlib import Path

from .builder import build
from .codegen import generate
from .diagnostics import CompileError, SourceError, render
from .reader import read

ENTRY_LABEL = "our_code_starts_here"
INDENT = "    "


def wrap(body):
    """Embed an instruction body in a complete NASM file with an exported entry."""
    lines = [
        "section .text",
        f"global {ENTRY_LABEL}",
        f"{ENTRY_LABEL}:",
    ]
    lines += [INDENT + line for line in body]
    lines.append(INDENT + "ret")
    return "\n".join(lines) + "\n"


def compile_source(text, *, annotate=False):
    return wrap(generate(build(read(text)), annotate=annotate))


def translate(text, emit="asm", annotate=False):
    expr = build(read(text))
    if emit == "ast":
        return repr(expr) + "\n"
    body = generate(expr, annotate=annotate)
    if emit == "body":
        return "\n".join(body) + "\n"
    return wrap(body)


def main(argv=None):
    argp = argparse.ArgumentParser(
        prog="adderc", description="Compile an Adder program into NASM assembly"
    )
    argp.add_argument("input", help="Path to the .snek source file")
    argp.add_argument("output", nargs="?", help="Destination .s file (defaults to stdout)")
    argp.add_argument(
        "--annotate", action="store_true", help="comment each emitted instruction"
    )
    argp.add_argument(
        "--emit",
        choices=("asm", "ast", "body"),
        default="asm",
        help="what to print: the wrapped file, the parsed AST or the bare instructions",
    )
    args = argp.parse_args(argv)

    src_path = Path(args.input)
    try:
        text = src_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        reason = getattr(ex, "strerror", None) or ex
        print(render(SourceError(f"cannot read {src_path}: {reason}"), ""), file=sys.stderr)
        return 1

    try:
        result = translate(text, args.emit, args.annotate)
    except CompileError as ex:
        print(render(ex, text), file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
    else:
        print(result, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
