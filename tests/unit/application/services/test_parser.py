import pytest

from unitsense.application.services.parser import ShuntingYardParser
from unitsense.domain.exceptions import MismatchedParenthesesError
from unitsense.domain.models.tokens import Operator, Paren
from unitsense.domain.models.units import BaseType, UnitValue

a = UnitValue(1.0, BaseType.UNIT)
b = UnitValue(2.0, BaseType.UNIT)
c = UnitValue(3.0, BaseType.UNIT)

ADD, SUB, MUL, DIV = Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV
LEFT, RIGHT = Paren.LEFT, Paren.RIGHT


@pytest.fixture
def parser():
    return ShuntingYardParser()


@pytest.mark.parametrize(
    "tokens, expected",
    [
        ([a], [a]),
        ([a, ADD, b, MUL, c], [a, b, c, MUL, ADD]),
        ([a, MUL, b, ADD, c], [a, b, MUL, c, ADD]),
        # Equal precedence associates to the left
        ([a, SUB, b, SUB, c], [a, b, SUB, c, SUB]),
        ([a, DIV, b, MUL, c], [a, b, DIV, c, MUL]),
        ([LEFT, a, ADD, b, RIGHT, MUL, c], [a, b, ADD, c, MUL]),
        ([a, MUL, LEFT, b, SUB, c, RIGHT], [a, b, c, SUB, MUL]),
        ([LEFT, LEFT, a, RIGHT, RIGHT], [a]),
    ],
)
def test_to_rpn(parser, tokens, expected):
    assert parser.to_rpn(tokens) == expected


@pytest.mark.parametrize(
    "tokens",
    [
        [a, RIGHT],
        [LEFT, a],
        [LEFT, a, ADD, b],
        [a, ADD, b, RIGHT, MUL, c],
    ],
)
def test_mismatched_parentheses(parser, tokens):
    with pytest.raises(MismatchedParenthesesError, match="Mismatched parentheses."):
        parser.to_rpn(tokens)
