"""End-to-end evaluation of expressions through the public entry point"""

import pytest

from unitsense import evaluate
from unitsense.domain.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    EmptyInputError,
    MismatchedParenthesesError,
    MissingOperandError,
    TooManyOperandsError,
    UnknownUnitError,
    UnrecognizedTokenError,
)
from unitsense.domain.models.units import BaseType

KB = 1024.0
MB = 1024.0**2
GB = 1024.0**3


def test_parentheses_do_not_change_sums():
    plain = evaluate("1 gb + 1 gb")
    grouped = evaluate("(1 gb + 1 gb)")
    assert plain.value == grouped.value
    assert plain.main_display == grouped.main_display == "2.000 GB"


def test_data_rate_projection():
    result = evaluate("10 gb / hour")
    rate = 10 * GB / 3600

    assert result.is_data_rate is True
    assert result.value.base_type is BaseType.DATA_RATE
    assert result.value.value == pytest.approx(rate)
    assert result.main_display == "2.844 MB/second"
    assert [p.period for p in result.projections] == ["minute", "hour", "day", "week"]

    formatter_totals = [p.total_bytes for p in result.projections]
    assert formatter_totals == pytest.approx([rate * 60, rate * 3600, rate * 86400, rate * 604800])
    assert [p.formatted_data for p in result.projections] == [
        "170.667 MB",
        "10.000 GB",
        "240.000 GB",
        "1.641 TB",
    ]


def test_subtracting_data_sizes():
    result = evaluate("5 gb - 100 mb")
    assert result.value.base_type is BaseType.BYTE
    assert result.value.value == 5 * GB - 100 * MB
    assert result.main_display == "4.902 GB"
    assert result.base_value_display == "(5263851520 base bytes)"


def test_exact_threshold_formats_as_one():
    assert evaluate("1024 byte").main_display == "1.000 KB"
    assert evaluate("60 sec").main_display == "1.000 minutes"
    assert evaluate("1000 m").main_display == "1.000 km"


def test_ties_round_away_from_zero():
    assert evaluate("1088 byte").main_display == "1.063 KB"
    assert evaluate("1 kb - 2112 byte").main_display == "-1.063 KB"
    assert evaluate("2.5 sec").base_value_display == "(3 base seconds)"
    assert evaluate("0.5").base_value_display == "(1 base units)"


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("(5 GB - 100 MB) / 10", "502.000 MB"),
        ("2 * 3 + 4", "10.000"),
        ("2 + 3 * 4", "14.000"),
        ("10 - 4 - 3", "3.000"),
        ("100 / 10 / 5", "2.000"),
        ("2 * (3 + 4)", "14.000"),
        ("3 million * 2", "6000000.000"),
        ("2 hour + 30 min", "2.500 hours"),
        ("1 mile + 1 km", "1.621 miles"),
        ("5 km * 2", "6.214 miles"),
        ("2 * 5 km", "6.214 miles"),
        ("0.6 km * 2", "1.200 km"),
        ("1 gb / 1 mb", "1024.000"),
        ("10 m * 10 m", "100.000"),
        ("hour", "1.000 hours"),
        ("1 week / 7", "1.000 days"),
        ("2 GB/sec", "2.000 GB/second"),
    ],
)
def test_expressions(expression, expected):
    assert evaluate(expression).main_display == expected


@pytest.mark.parametrize(
    "expression, error, message",
    [
        ("", EmptyInputError, "Input cannot be empty."),
        ("   ", EmptyInputError, "Input cannot be empty."),
        (
            "5 m + 3 sec",
            DimensionMismatchError,
            "Cannot perform + between different unit types: meter and second.",
        ),
        (
            "1 gb - 1 hour",
            DimensionMismatchError,
            "Cannot perform - between different unit types: byte and second.",
        ),
        ("10 / 0", DivisionByZeroError, "Division by zero."),
        ("5 GB / 0 sec", DivisionByZeroError, "Division by zero."),
        ("(5 - 2", MismatchedParenthesesError, "Mismatched parentheses."),
        ("5 - 2)", MismatchedParenthesesError, "Mismatched parentheses."),
        ("5 foo", UnknownUnitError, "Unknown unit: foo"),
        ("5 # 2", UnrecognizedTokenError, "Unrecognized token: #"),
        (
            "5 +",
            MissingOperandError,
            "Invalid expression structure (missing operand for operator +).",
        ),
        (
            "5 3",
            TooManyOperandsError,
            "Invalid expression structure (too many operands remaining).",
        ),
        (
            "()",
            TooManyOperandsError,
            "Invalid expression structure (too many operands remaining).",
        ),
    ],
)
def test_errors(expression, error, message):
    with pytest.raises(error) as exc_info:
        evaluate(expression)
    assert str(exc_info.value) == message
