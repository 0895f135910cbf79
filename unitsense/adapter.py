"""Facade adapter for simplified API integration."""

from environs import Env

from unitsense.application.orchestration import CalculationService
from unitsense.domain.exceptions import CalcError
from unitsense.domain.models.result import CalculationResult
from unitsense.domain.registry import DEFAULT_REGISTRY, UnitRegistry
from unitsense.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    OutputFormatter,
    format_supported_units,
)


class CalculatorAPI:
    """
    Simplified facade for embedding the calculator.

    Hides service wiring and offers plain function-call semantics; the
    ``try_*`` variant returns the error message instead of raising, which is
    what a display layer usually wants.
    """

    def __init__(
        self,
        registry: UnitRegistry = DEFAULT_REGISTRY,
        output_formatter: OutputFormatter | None = None,
    ):
        """
        Initialize facade.

        Args:
            registry: Unit registry used for lookups and display thresholds
            output_formatter: Formatter used by ``render``; console by default
        """
        self._registry = registry
        self._service = CalculationService(registry)
        self.output_formatter = output_formatter or ConsoleOutputFormatter()

    @classmethod
    def create_from_env(cls, env: Env) -> "CalculatorAPI":
        """
        Factory method: one-line initialization from environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> api = CalculatorAPI.create_from_env(env)
        """
        output = env.str("UNITSENSE_OUTPUT", "console").lower()
        if output == "json":
            return cls(output_formatter=JSONOutputFormatter())
        if output == "console":
            return cls(output_formatter=ConsoleOutputFormatter())
        raise ValueError(f"Unknown output format: {output}")

    def calculate(self, expression: str) -> CalculationResult:
        """
        Raises:
            CalcError: If the expression cannot be evaluated
        """
        return self._service.evaluate(expression)

    def try_calculate(
        self, expression: str
    ) -> tuple[CalculationResult | None, str | None]:
        """Returns exactly one of (result, error message)."""
        try:
            return self._service.evaluate(expression), None
        except CalcError as e:
            return None, str(e)

    def render(self, expression: str) -> tuple[bool, str | None]:
        """
        Evaluate and pass the outcome to the output formatter.

        Returns:
            Tuple of (success, formatter output)
        """
        result, error = self.try_calculate(expression)
        if error is not None:
            return False, self.output_formatter.format_error(expression, error)
        return True, self.output_formatter.format_result(result)

    def supported_units(self) -> str:
        return format_supported_units(self._registry)
