"""
Dimension and value types for unit arithmetic.

Every runtime quantity is a UnitValue whose ``value`` is already expressed in
the base unit of its dimension (bytes, seconds, meters or a bare count).

Usage:
    from unitsense.domain.models.units import BaseType, UnitValue

    size = UnitValue(Bytes(5 * 1024**3), BaseType.BYTE, unit_key="gb")
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

# Base-unit magnitudes
Bytes = NewType("Bytes", float)
Seconds = NewType("Seconds", float)
BytesPerSecond = NewType("BytesPerSecond", float)


class BaseType(Enum):
    """Closed set of dimensions a value can carry."""

    BYTE = "byte"
    SECOND = "second"
    METER = "meter"
    UNIT = "unit"  # dimensionless count
    DATA_RATE = "dataRate"  # only produced by Byte / Second

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class UnitDef:
    """How many base units one surface unit equals (immutable)"""

    base: BaseType
    multiplier: float
    name: str

    def __post_init__(self):
        if self.multiplier <= 0:
            raise ValueError(
                f"Unit multiplier must be positive, got {self.multiplier}"
            )
        if self.base is BaseType.DATA_RATE:
            raise ValueError("Data rate cannot be used as a unit base")


@dataclass(frozen=True, slots=True)
class UnitValue:
    """A number normalized to the base unit of its dimension."""

    value: float
    base_type: BaseType
    unit_key: str | None = None

    def __str__(self) -> str:
        return f"{self.value} {self.base_type.display_name}"


@dataclass(frozen=True, slots=True)
class FormatRule:
    """Threshold (in base units) from which ``suffix`` is used for display"""

    threshold: float
    suffix: str
