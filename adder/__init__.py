"""Adder: compile add1/sub1/negate expressions to x86-64 NASM."""

from .adder_ast import Decrement, Expr, Increment, Negate, Number
from .builder import build
from .codegen import generate
from .diagnostics import CompileError, MalformedExpression, OutOfRange, ReadError
from .driver import compile_source, wrap
from .reader import read

__all__ = [
    "Decrement",
    "Expr",
    "Increment",
    "Negate",
    "Number",
    "build",
    "generate",
    "CompileError",
    "MalformedExpression",
    "OutOfRange",
    "ReadError",
    "compile_source",
    "wrap",
    "read",
]
