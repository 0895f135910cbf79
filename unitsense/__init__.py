"""Unit-aware expression calculator with data-rate projections."""

from unitsense.adapter import CalculatorAPI
from unitsense.application.orchestration import CalculationService, evaluate
from unitsense.domain.exceptions import CalcError
from unitsense.domain.models.result import CalculationResult

__all__ = [
    "CalculatorAPI",
    "CalculationService",
    "CalculationResult",
    "CalcError",
    "evaluate",
]
