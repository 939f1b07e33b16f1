"""Expr -> x86-64 NASM instruction lines, result left in the accumulator.

Every operator is unary, so one register is enough: after the code for a
subexpression runs, the accumulator holds its value and nothing else has
been touched.
"""

from .adder_ast import Decrement, Increment, Negate, Number

ACCUMULATOR = "rax"


class CodeGenerator:
    def __init__(self, annotate=False):
        self.output = []
        self.annotate = annotate
        self.accumulator = ACCUMULATOR

    def emit(self, instruction, comment=None):
        if comment and self.annotate:
            self.output.append(f"{instruction:20} ; {comment}")
        else:
            self.output.append(instruction)

    def generate_expr(self, expr):
        acc = self.accumulator
        if isinstance(expr, Number):
            self.emit(f"mov {acc}, {expr.value}", "Load constant")
        elif isinstance(expr, Increment):
            self.generate_expr(expr.operand)
            self.emit(f"add {acc}, 1", "add1")
        elif isinstance(expr, Decrement):
            self.generate_expr(expr.operand)
            self.emit(f"sub {acc}, 1", "sub1")
        elif isinstance(expr, Negate):
            self.generate_expr(expr.operand)
            self.emit(f"neg {acc}", "negate")
        else:
            raise TypeError(f"not an Adder expression: {expr!r}")


def generate(expr, *, annotate=False):
    cg = CodeGenerator(annotate)
    cg.generate_expr(expr)
    return cg.output
