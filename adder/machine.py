"""A small simulator for the instructions the code generator emits.

Only what Adder needs is modelled: a 64-bit two's-complement `rax` and the
mov/add/sub/neg/ret instructions. Directives and labels of a wrapped file
are skipped, so both a bare body and a complete .s file can be run.
"""

from .adder_ast import Decrement, Increment, Negate, Number

WORD_BITS = 64
_MASK = (1 << WORD_BITS) - 1
_SIGN = 1 << (WORD_BITS - 1)

DIRECTIVES = {"section", "global", "extern", "default", "bits"}


class MachineError(Exception):
    pass


def signed(n):
    n &= _MASK
    return n - (1 << WORD_BITS) if n & _SIGN else n


class Machine:
    def __init__(self):
        self.registers = {"rax": 0}
        self.halted = False

    def read(self, operand):
        if operand in self.registers:
            return self.registers[operand]
        try:
            return int(operand)
        except ValueError:
            raise MachineError(f"invalid operand '{operand}'") from None

    def register(self, operand):
        if operand not in self.registers:
            raise MachineError(f"expected a register, got '{operand}'")
        return operand

    def step(self, line):
        text = line.split(";", 1)[0].strip()
        if not text or text.endswith(":"):
            return
        try:
            inst_name, args_string = text.split(" ", 1)
        except ValueError:
            inst_name, args_string = text, ""
        if inst_name in DIRECTIVES:
            return
        args = [x.strip() for x in args_string.split(",") if x.strip()]

        match inst_name, args:
            case "mov", [dst, src]:
                self.registers[self.register(dst)] = signed(self.read(src))
            case "add", [dst, src]:
                dst = self.register(dst)
                self.registers[dst] = signed(self.registers[dst] + self.read(src))
            case "sub", [dst, src]:
                dst = self.register(dst)
                self.registers[dst] = signed(self.registers[dst] - self.read(src))
            case "neg", [dst]:
                dst = self.register(dst)
                self.registers[dst] = signed(-self.registers[dst])
            case "ret", []:
                self.halted = True
            case ("mov" | "add" | "sub" | "neg" | "ret"), _:
                raise MachineError(f"wrong operands for '{inst_name}': {args_string!r}")
            case _:
                raise MachineError(f"unknown opcode '{inst_name}'")

    def run(self, lines):
        for line in lines:
            self.step(line)
            if self.halted:
                break
        return self.registers["rax"]


def run(lines):
    """Execute instruction lines from a zeroed machine and return rax."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    return Machine().run(lines)


def evaluate(expr):
    """Evaluate an Expr directly, with the same wraparound as the machine."""
    if isinstance(expr, Number):
        return signed(expr.value)
    if isinstance(expr, Increment):
        return signed(evaluate(expr.operand) + 1)
    if isinstance(expr, Decrement):
        return signed(evaluate(expr.operand) - 1)
    if isinstance(expr, Negate):
        return signed(-evaluate(expr.operand))
    raise TypeError(f"not an Adder expression: {expr!r}")
