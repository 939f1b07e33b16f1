"""S-expression reader: text -> generic value.

A generic value is an int, a str (a symbol) or a list of generic values.
The reader hands back subclasses of those builtins that also remember
where in the source they were read, so later stages can point at them.
"""

from pathlib import Path

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .diagnostics import ReadError

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")

parser = Lark(
    _GRAMMAR_PATH.read_text(),
    start="start",
    parser="lalr",
    propagate_positions=True,
)


class Integer(int):
    def __new__(cls, value, line=None, column=None, width=1):
        self = super().__new__(cls, value)
        self.line = line
        self.column = column
        self.width = width
        return self


class Symbol(str):
    def __new__(cls, name, line=None, column=None):
        self = super().__new__(cls, name)
        self.line = line
        self.column = column
        self.width = len(name)
        return self


class SList(list):
    def __init__(self, items=(), line=None, column=None):
        super().__init__(items)
        self.line = line
        self.column = column
        self.width = 1


@v_args(meta=True)
class _ToValue(Transformer):

    def start(self, meta, children):
        return children[0]

    def integer(self, meta, children):
        tok = children[0]
        return Integer(int(tok.value), tok.line, tok.column, len(tok.value))

    def symbol(self, meta, children):
        tok = children[0]
        return Symbol(tok.value, tok.line, tok.column)

    def slist(self, meta, children):
        if meta.empty:
            return SList(children)
        return SList(children, meta.line, meta.column)


def _end_of(text):
    lines = text.splitlines() or [""]
    return len(lines), len(lines[-1]) + 1


def read(text):
    """Read exactly one datum from `text`."""
    try:
        tree = parser.parse(text)
    except UnexpectedInput as ex:
        raise _read_error(ex, text) from None
    return _ToValue().transform(tree)


def _read_error(ex, text):
    line, column, width = getattr(ex, "line", None), getattr(ex, "column", None), 1
    if isinstance(ex, UnexpectedCharacters):
        message = f"unexpected character {text[ex.pos_in_stream]!r}"
    elif isinstance(ex, UnexpectedEOF) or (
        isinstance(ex, UnexpectedToken) and ex.token.type == "$END"
    ):
        message = "unexpected end of input" if text.strip() else "empty program"
        line = None
    elif isinstance(ex, UnexpectedToken):
        message = f"unexpected {ex.token.value!r}"
        if ex.token.type in ("INT", "SYMBOL", "LPAR"):
            message += "; a program is a single expression"
        width = len(ex.token.value)
    else:
        message = str(ex)
    if not isinstance(line, int) or line < 1:
        line, column = _end_of(text)
    return ReadError(message, line=line, column=column, width=width)


def dumps(value):
    """Write a generic value back out as S-expression text."""
    if isinstance(value, list):
        return "(" + " ".join(dumps(v) for v in value) + ")"
    if isinstance(value, bool):
        return repr(value)
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        return str(value)
    return repr(value)
