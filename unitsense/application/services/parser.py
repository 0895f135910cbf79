from unitsense.domain.exceptions import MismatchedParenthesesError
from unitsense.domain.models.tokens import Operator, Paren, Token
from unitsense.domain.models.units import UnitValue


class ShuntingYardParser:
    """
    Reorders infix tokens into postfix (RPN) order.

    Operators of equal precedence are popped before the new one is pushed,
    so ``a - b - c`` groups as ``(a - b) - c``.
    """

    def to_rpn(self, tokens: list[Token]) -> list[UnitValue | Operator]:
        output: list[UnitValue | Operator] = []
        stack: list[Operator | Paren] = []

        for token in tokens:
            if isinstance(token, UnitValue):
                output.append(token)
            elif token is Paren.LEFT:
                stack.append(token)
            elif token is Paren.RIGHT:
                while stack and stack[-1] is not Paren.LEFT:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParenthesesError()
                stack.pop()
            else:
                while (
                    stack
                    and stack[-1] is not Paren.LEFT
                    and stack[-1].precedence >= token.precedence
                ):
                    output.append(stack.pop())
                stack.append(token)

        while stack:
            top = stack.pop()
            if top is Paren.LEFT:
                raise MismatchedParenthesesError()
            output.append(top)

        return output
