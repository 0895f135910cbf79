"""Domain models for calculation results"""

from dataclasses import dataclass, field
from typing import Any

from .units import UnitValue


@dataclass(frozen=True, slots=True)
class Projection:
    """Bytes accumulated by a data rate over one period"""

    period: str
    formatted_data: str
    total_bytes: float


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    Result of evaluating one expression.

    A pure data structure: the display strings are final, and ``value`` keeps
    the unformatted base-unit result for callers that need the number.
    """

    main_display: str
    base_value_display: str
    value: UnitValue
    is_data_rate: bool = False
    projections: tuple[Projection, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "main_display": self.main_display,
            "base_value_display": self.base_value_display,
            "is_data_rate": self.is_data_rate,
            "projections": [
                {"period": p.period, "data": p.formatted_data}
                for p in self.projections
            ],
            "base_value": self.value.value,
            "base_type": self.value.base_type.display_name,
        }
