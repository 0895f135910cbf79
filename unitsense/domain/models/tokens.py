"""Token types produced by the tokenizer and consumed by the parser."""

from enum import Enum
from typing import TypeAlias

from .units import UnitValue


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        return 1 if self in (Operator.ADD, Operator.SUB) else 2

    def __str__(self) -> str:
        return self.value


class Paren(Enum):
    LEFT = "("
    RIGHT = ")"

    def __str__(self) -> str:
        return self.value


Token: TypeAlias = UnitValue | Operator | Paren
