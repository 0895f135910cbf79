"""Formatting services: human-readable magnitudes, projections and output."""

import json
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Protocol

import numpy as np

from unitsense.domain.constants import DISPLAY_PRECISION, PROJECTION_PERIODS
from unitsense.domain.models.result import CalculationResult, Projection
from unitsense.domain.models.units import (
    BaseType,
    Bytes,
    BytesPerSecond,
    FormatRule,
    UnitValue,
)
from unitsense.domain.registry import DEFAULT_REGISTRY, UnitRegistry


# Wide enough for every finite float at DISPLAY_PRECISION decimals
_FIXED_CONTEXT = Context(prec=400)


def format_fixed(value: float, digits: int = DISPLAY_PRECISION) -> str:
    """
    Fixed-point rendering with ties rounded away from zero (1.0625 -> "1.063").

    The exact binary value of ``value`` is rounded, so only true ties move up.
    """
    if not math.isfinite(value):
        return f"{value:.{digits}f}"
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT
    )
    return format(rounded, "f")


def _render(value: float, rule: FormatRule) -> str:
    return f"{format_fixed(value / rule.threshold)} {rule.suffix}"


def format_magnitude(value: float, rules: tuple[FormatRule, ...]) -> str:
    """
    Render ``value`` against the largest threshold its magnitude reaches.

    Args:
        value: Quantity in base units
        rules: Ascending (threshold, suffix) pairs of one dimension

    Returns:
        e.g. "1.000 KB" for 1024 bytes. Below the smallest threshold the
        value is still scaled by that smallest threshold; with no rules the
        bare number is rendered.
    """
    if not rules:
        return format_fixed(value)

    magnitude = abs(value)
    for rule in reversed(rules):
        if magnitude >= rule.threshold:
            return _render(value, rule)
    return _render(value, rules[0])


class ResultFormatter:
    """Turns an evaluated UnitValue into a CalculationResult."""

    def __init__(self, registry: UnitRegistry = DEFAULT_REGISTRY) -> None:
        self.registry = registry

    def format_bytes(self, value: Bytes) -> str:
        return format_magnitude(value, self.registry.format_rules(BaseType.BYTE))

    def format_generic(self, value: float, base_type: BaseType) -> str:
        if base_type is BaseType.UNIT:
            return format_fixed(value)
        return format_magnitude(value, self.registry.format_rules(base_type))

    def project(self, rate: BytesPerSecond) -> tuple[Projection, ...]:
        """Bytes accumulated at ``rate`` over each reporting period."""
        periods = [name for name, _ in PROJECTION_PERIODS]
        seconds = np.array([length for _, length in PROJECTION_PERIODS])
        totals = rate * seconds
        return tuple(
            Projection(
                period=period,
                formatted_data=self.format_bytes(Bytes(float(total))),
                total_bytes=float(total),
            )
            for period, total in zip(periods, totals)
        )

    def base_value_display(self, result: UnitValue) -> str:
        return f"({format_fixed(result.value, 0)} base {result.base_type.display_name}s)"

    def format(self, result: UnitValue) -> CalculationResult:
        base_display = self.base_value_display(result)

        if result.base_type is BaseType.DATA_RATE:
            rate = BytesPerSecond(result.value)
            return CalculationResult(
                main_display=f"{self.format_bytes(Bytes(rate))}/second",
                base_value_display=base_display,
                value=result,
                is_data_rate=True,
                projections=self.project(rate),
            )

        return CalculationResult(
            main_display=self.format_generic(result.value, result.base_type),
            base_value_display=base_display,
            value=result,
        )


_DIMENSION_TITLES = {
    BaseType.BYTE: "Data",
    BaseType.UNIT: "Numbers",
    BaseType.SECOND: "Time",
    BaseType.METER: "Length",
}


def format_supported_units(registry: UnitRegistry = DEFAULT_REGISTRY) -> str:
    """
    Listing of every unit key the registry accepts, one line per dimension,
    followed by the names results are displayed in.
    """
    output = ["Supported Units:"]
    for base_type, keys in registry.units_by_base().items():
        title = _DIMENSION_TITLES.get(base_type, base_type.display_name)
        scales = [r.suffix for r in registry.format_rules(base_type) if r.suffix]
        output.append(f"  {title + ':':<9}{', '.join(keys)}")
        if scales:
            output.append(f"  {'':<9}shown as {', '.join(scales)}")
    return "\n".join(output)


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, result: CalculationResult) -> str | None:
        """Format and display a calculation result"""
        ...

    def format_error(self, expression: str, message: str) -> str | None:
        """Format and display a failed calculation"""
        ...


class ConsoleOutputFormatter:
    """Format calculation results for console output"""

    def format_result(self, result: CalculationResult) -> None:
        print(f"\n{'=' * 40}")
        print("Result:")
        print(f"  {result.main_display}")
        print(f"  {result.base_value_display}")

        if result.is_data_rate and result.projections:
            print("\nStorage Projections:")
            for projection in result.projections:
                print(f"  {projection.period.upper():<10}{projection.formatted_data:>16}")

        print(f"{'=' * 40}\n")

    def format_error(self, expression: str, message: str) -> None:
        print(f"Error: {message}")


class JSONOutputFormatter:
    """Format calculation results as JSON (for API/automation)"""

    def format_result(self, result: CalculationResult) -> str:
        return json.dumps(result.to_dict(), indent=2)

    def format_error(self, expression: str, message: str) -> str:
        return json.dumps({"expression": expression, "error": message}, indent=2)
