"""Compile errors and their console rendering.

Every error that aborts a compilation is a CompileError carrying a stable
code (see CODES) and, when the offending value came out of the reader, the
1-based line and column it was read from.
"""

CODES = {
    "E000": "input file cannot be read",
    "E001": "text is not a single well-formed datum",
    "E002": "malformed expression",
    "E003": "integer literal outside the 32-bit signed range",
}


class CompileError(Exception):
    code = "E000"

    def __init__(self, message, *, line=None, column=None, width=1):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.width = width

    def __str__(self):
        return f"{self.message} [{self.code}]"


class SourceError(CompileError):
    code = "E000"


class ReadError(CompileError):
    code = "E001"


class MalformedExpression(CompileError):
    """The value matches none of the four expression forms."""

    code = "E002"

    def __init__(self, value, message, at=None):
        node = value if at is None else at
        super().__init__(message, **position_of(node))
        self.value = value


class OutOfRange(CompileError):
    """An integer literal does not fit in a 32-bit signed integer."""

    code = "E003"

    def __init__(self, value, message):
        super().__init__(message, **position_of(value))
        self.value = value


def position_of(node):
    """
    Return the line/column/width keywords for a reader value, or an empty
    dict when the value carries no position (e.g. it was built by hand).
    """
    line = getattr(node, "line", None)
    if line is None:
        return {}
    return {
        "line": line,
        "column": getattr(node, "column", 1),
        "width": getattr(node, "width", 1),
    }


def render(error, source):
    label = f"error: {error.message} [{error.code}]"
    if error.line is None:
        return label
    lines = source.splitlines()
    src = lines[error.line - 1] if 0 < error.line <= len(lines) else ""
    ptr = " " * (error.column - 1) + "^" * max(error.width, 1)
    return f"{error.line:>4} | {src}\n     | {ptr} {label}"
