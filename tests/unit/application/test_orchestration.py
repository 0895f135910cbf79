from unittest.mock import MagicMock

import pytest

from unitsense.application.orchestration import CalculationService
from unitsense.domain.exceptions import (
    CalcError,
    DivisionByZeroError,
    EmptyInputError,
    UnknownUnitError,
)
from unitsense.domain.models.units import BaseType, UnitValue


@pytest.fixture
def service():
    return CalculationService()


@pytest.mark.parametrize("expression", ["", "   ", "\t\n"])
def test_blank_input_is_rejected(service, expression):
    with pytest.raises(EmptyInputError, match="Input cannot be empty."):
        service.evaluate(expression)


def test_stages_run_in_order():
    tokenizer, parser, evaluator, formatter = (MagicMock() for _ in range(4))
    service = CalculationService(
        tokenizer=tokenizer, parser=parser, evaluator=evaluator, formatter=formatter
    )

    result = service.evaluate("1 + 1")

    tokenizer.tokenize.assert_called_once_with("1 + 1")
    parser.to_rpn.assert_called_once_with(tokenizer.tokenize.return_value)
    evaluator.evaluate.assert_called_once_with(parser.to_rpn.return_value)
    formatter.format.assert_called_once_with(evaluator.evaluate.return_value)
    assert result is formatter.format.return_value


def test_first_failure_short_circuits():
    tokenizer, parser, evaluator, formatter = (MagicMock() for _ in range(4))
    tokenizer.tokenize.side_effect = UnknownUnitError("parsec")
    service = CalculationService(
        tokenizer=tokenizer, parser=parser, evaluator=evaluator, formatter=formatter
    )

    with pytest.raises(UnknownUnitError, match="Unknown unit: parsec"):
        service.evaluate("3 parsec")

    parser.to_rpn.assert_not_called()
    evaluator.evaluate.assert_not_called()
    formatter.format.assert_not_called()


def test_calc_errors_pass_through_unchanged(service):
    with pytest.raises(DivisionByZeroError) as exc_info:
        service.evaluate("10 / 0")
    assert str(exc_info.value) == "Division by zero."


@pytest.mark.parametrize(
    "raised, message",
    [
        (ValueError("Exception: bad number"), "bad number"),
        (ValueError("Error: bad number"), "bad number"),
        (OverflowError("result too large"), "result too large"),
    ],
)
def test_other_errors_are_wrapped_without_prefix(raised, message):
    evaluator = MagicMock()
    evaluator.evaluate.side_effect = raised
    service = CalculationService(evaluator=evaluator)

    with pytest.raises(CalcError) as exc_info:
        service.evaluate("1 + 1")
    assert str(exc_info.value) == message
    assert exc_info.value.__cause__ is raised


def test_result_keeps_base_value(service):
    result = service.evaluate("2 min")
    assert result.value == UnitValue(120.0, BaseType.SECOND, "min")
