from __future__ import annotations
from dataclasses import dataclass
from typing import Union


I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Number:
    value: int

@dataclass(frozen=True)
class Increment:
    operand: Expr

@dataclass(frozen=True)
class Decrement:
    operand: Expr

@dataclass(frozen=True)
class Negate:
    operand: Expr


Expr = Union[Number, Increment, Decrement, Negate]
