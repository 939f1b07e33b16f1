"""Generic value -> Expr, checking the grammar and literal ranges."""

from . import adder_ast as ast
from .diagnostics import MalformedExpression, OutOfRange
from .reader import dumps

OPERATORS = {
    "add1": ast.Increment,
    "sub1": ast.Decrement,
    "negate": ast.Negate,
}

_EXPECTED = "expected an integer or one of " + ", ".join(f"({op} <expr>)" for op in OPERATORS)


def build(value):
    match value:
        case bool():
            raise MalformedExpression(value, f"{value!r} is not an expression; {_EXPECTED}")
        case int():
            if not ast.I32_MIN <= value <= ast.I32_MAX:
                raise OutOfRange(
                    value,
                    f"integer literal {int(value)} does not fit in 32 bits "
                    f"({ast.I32_MIN}..{ast.I32_MAX})",
                )
            return ast.Number(int(value))
        case str():
            raise MalformedExpression(value, f"unexpected symbol `{value}`; {_EXPECTED}")
        case list():
            return build_form(value)
        case _:
            raise MalformedExpression(value, f"{value!r} is not an expression; {_EXPECTED}")


def build_form(form):
    match form:
        case [str() as op, operand] if op in OPERATORS:
            return OPERATORS[op](build(operand))
        case [str() as op, *operands] if op in OPERATORS:
            raise MalformedExpression(
                form,
                f"`{op}` takes exactly one operand, got {len(operands)}: {dumps(form)}",
            )
        case [str() as op, *_]:
            raise MalformedExpression(
                form,
                f"unknown operator `{op}`; expected one of {', '.join(OPERATORS)}",
                at=op,
            )
        case [head, *_]:
            raise MalformedExpression(
                form,
                f"expected an operator name at the head of {dumps(form)}, got {dumps(head)}",
                at=head,
            )
        case _:
            raise MalformedExpression(form, f"empty form (); {_EXPECTED}")
