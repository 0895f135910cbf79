class CalcError(ValueError):
    """
    Base exception for all calculation errors.

    ``str(error)`` is the message shown to the user.
    """


class EmptyInputError(CalcError):
    def __init__(self) -> None:
        super().__init__("Input cannot be empty.")


class UnknownUnitError(CalcError):
    """
    Raised when a word in the expression is not a registered unit key.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown unit: {key}")


class UnrecognizedTokenError(CalcError):
    """
    Raised when text cannot be classified as a number, word or operator.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unrecognized token: {text}")


class MismatchedParenthesesError(CalcError):
    def __init__(self) -> None:
        super().__init__("Mismatched parentheses.")


class MissingOperandError(CalcError):
    """
    Raised when an operator has fewer than two values to work on.
    """

    def __init__(self, op: str) -> None:
        self.op = op
        super().__init__(
            f"Invalid expression structure (missing operand for operator {op})."
        )


class DimensionMismatchError(CalcError):
    """
    Raised when + or - is applied to values of different dimensions.
    """

    def __init__(self, op: str, left: str, right: str) -> None:
        self.op = op
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot perform {op} between different unit types: {left} and {right}."
        )


class DivisionByZeroError(CalcError):
    def __init__(self) -> None:
        super().__init__("Division by zero.")


class UnsupportedOperatorError(CalcError):
    """
    Raised for an operator the evaluator has no rule for.
    Unreachable through the tokenizer, reported rather than ignored.
    """

    def __init__(self, op: object) -> None:
        self.op = op
        super().__init__(f"Unsupported operator: {op}")


class TooManyOperandsError(CalcError):
    """
    Raised when evaluation does not end with exactly one value.
    """

    def __init__(self) -> None:
        super().__init__(
            "Invalid expression structure (too many operands remaining)."
        )
