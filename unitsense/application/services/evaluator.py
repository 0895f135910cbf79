from unitsense.domain.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    MissingOperandError,
    TooManyOperandsError,
    UnsupportedOperatorError,
)
from unitsense.domain.models.tokens import Operator
from unitsense.domain.models.units import BaseType, UnitValue
from unitsense.logging_config import get_logger

logger = get_logger(__name__)


class RPNEvaluator:
    """
    Evaluates a postfix token sequence on a value stack.

    Dimension rules:
        +, -   both operands share a dimension, which the result keeps
        *      a count scales the other operand; any other product is a count
        /      byte / second is a data rate; dividing by a count keeps the
               dimension; any other ratio is a count

    Products and ratios of two physical quantities are not tracked as
    composite dimensions (m * m is a count, not an area).
    """

    def _add_sub(self, op: Operator, left: UnitValue, right: UnitValue) -> UnitValue:
        if left.base_type is not right.base_type:
            raise DimensionMismatchError(
                str(op), left.base_type.display_name, right.base_type.display_name
            )
        if op is Operator.ADD:
            value = left.value + right.value
        else:
            value = left.value - right.value
        return UnitValue(value, left.base_type)

    def _multiply(self, left: UnitValue, right: UnitValue) -> UnitValue:
        if left.base_type is BaseType.UNIT:
            result_type = right.base_type
        elif right.base_type is BaseType.UNIT:
            result_type = left.base_type
        else:
            result_type = BaseType.UNIT
        return UnitValue(left.value * right.value, result_type)

    def _divide(self, left: UnitValue, right: UnitValue) -> UnitValue:
        if right.value == 0:
            raise DivisionByZeroError()

        if left.base_type is BaseType.BYTE and right.base_type is BaseType.SECOND:
            result_type = BaseType.DATA_RATE
        elif right.base_type is BaseType.UNIT:
            result_type = left.base_type
        else:
            result_type = BaseType.UNIT
        return UnitValue(left.value / right.value, result_type)

    def apply(self, op: Operator, left: UnitValue, right: UnitValue) -> UnitValue:
        """Applies one binary operator to its left and right operands."""
        if op is Operator.ADD or op is Operator.SUB:
            return self._add_sub(op, left, right)
        elif op is Operator.MUL:
            return self._multiply(left, right)
        elif op is Operator.DIV:
            return self._divide(left, right)
        else:
            raise UnsupportedOperatorError(op)

    def evaluate(self, rpn: list[UnitValue | Operator]) -> UnitValue:
        stack: list[UnitValue] = []

        for token in rpn:
            if isinstance(token, UnitValue):
                stack.append(token)
                continue
            if not isinstance(token, Operator):
                raise UnsupportedOperatorError(token)
            if len(stack) < 2:
                raise MissingOperandError(str(token))

            right = stack.pop()
            left = stack.pop()
            stack.append(self.apply(token, left, right))

        if len(stack) != 1:
            raise TooManyOperandsError()

        result = stack[0]
        logger.debug("Evaluated %d RPN tokens to %s", len(rpn), result)
        return result
