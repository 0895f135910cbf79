"""Orchestration service (runs the calculation pipeline stage by stage)"""

from unitsense.domain.exceptions import CalcError, EmptyInputError
from unitsense.domain.models.result import CalculationResult
from unitsense.domain.registry import DEFAULT_REGISTRY, UnitRegistry
from unitsense.application.services.tokenizer import Tokenizer
from unitsense.application.services.parser import ShuntingYardParser
from unitsense.application.services.evaluator import RPNEvaluator
from unitsense.infrastructure.output.formatters import ResultFormatter
from unitsense.logging_config import get_logger

logger = get_logger(__name__)

_WRAPPER_PREFIXES = ("Exception: ", "Error: ")


def _user_message(error: Exception) -> str:
    message = str(error)
    for prefix in _WRAPPER_PREFIXES:
        if message.startswith(prefix):
            message = message[len(prefix):]
    return message


class CalculationService:
    """
    Coordinates the calculation workflow.

    Stages run strictly in order and the first failure ends the call:
    text -> tokens -> RPN -> dimensioned value -> formatted result.
    The service keeps no state between calls and can be shared by threads.
    """

    def __init__(
        self,
        registry: UnitRegistry = DEFAULT_REGISTRY,
        tokenizer: Tokenizer | None = None,
        parser: ShuntingYardParser | None = None,
        evaluator: RPNEvaluator | None = None,
        formatter: ResultFormatter | None = None,
    ):
        self.tokenizer = tokenizer or Tokenizer(registry)
        self.parser = parser or ShuntingYardParser()
        self.evaluator = evaluator or RPNEvaluator()
        self.formatter = formatter or ResultFormatter(registry)

    def evaluate(self, expression: str) -> CalculationResult:
        """
        Evaluate one expression.

        Args:
            expression: Free-form text such as "10 GB / hour"

        Returns:
            CalculationResult with display strings and, for data rates,
            the minute/hour/day/week projections

        Raises:
            CalcError: For any failure; ``str(error)`` is the user-facing message
        """
        if not expression or not expression.strip():
            raise EmptyInputError()

        try:
            tokens = self.tokenizer.tokenize(expression)
            rpn = self.parser.to_rpn(tokens)
            value = self.evaluator.evaluate(rpn)
            result = self.formatter.format(value)
        except CalcError as e:
            logger.info("Could not evaluate %r: %s", expression, e)
            raise
        except (ArithmeticError, ValueError) as e:
            logger.info("Could not evaluate %r: %s", expression, e)
            raise CalcError(_user_message(e)) from e

        logger.debug("%r = %s", expression, result.main_display)
        return result


_default_service = CalculationService()


def evaluate(expression: str) -> CalculationResult:
    """Evaluate ``expression`` with the default unit registry."""
    return _default_service.evaluate(expression)
