# unitsense/domain/models/__init__.py
from .units import BaseType, UnitDef, UnitValue, FormatRule, Bytes, Seconds, BytesPerSecond
from .tokens import Operator, Paren, Token
from .result import CalculationResult, Projection

__all__ = [
    "BaseType",
    "UnitDef",
    "UnitValue",
    "FormatRule",
    "Bytes",
    "Seconds",
    "BytesPerSecond",
    "Operator",
    "Paren",
    "Token",
    "CalculationResult",
    "Projection",
]
