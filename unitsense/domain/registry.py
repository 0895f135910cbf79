"""Registry of recognized unit keys and per-dimension display thresholds."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from unitsense.domain.constants import DATA_BASE, TIME_BASE
from unitsense.domain.models.units import BaseType, FormatRule, UnitDef


class UnitRegistry:
    """
    Read-only lookup from surface unit keys to unit definitions.

    Keys are matched case-insensitively. The registry is never mutated after
    construction, so a single instance can be shared freely.
    """

    def __init__(
        self,
        units: Mapping[str, UnitDef],
        format_rules: Mapping[BaseType, tuple[FormatRule, ...]],
    ) -> None:
        self._units = MappingProxyType(dict(units))
        self._format_rules = MappingProxyType(
            {
                base: tuple(sorted(rules, key=lambda r: r.threshold))
                for base, rules in format_rules.items()
            }
        )

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[str, UnitDef]],
        format_rules: Mapping[BaseType, tuple[FormatRule, ...]],
    ) -> "UnitRegistry":
        """
        Build a registry from (key, definition) pairs.

        Raises:
            ValueError: If a key appears more than once
        """
        units: dict[str, UnitDef] = {}
        for key, unit in entries:
            key = key.lower()
            if key in units:
                raise ValueError(
                    f"Duplicate unit key '{key}': already defined as "
                    f"{units[key].base.display_name}"
                )
            units[key] = unit
        return cls(units, format_rules)

    def lookup(self, key: str) -> UnitDef | None:
        return self._units.get(key.lower())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._units

    def __len__(self) -> int:
        return len(self._units)

    def format_rules(self, base_type: BaseType) -> tuple[FormatRule, ...]:
        """Ascending display thresholds for a dimension (empty if none)."""
        return self._format_rules.get(base_type, ())

    def units_by_base(self) -> dict[BaseType, list[str]]:
        """Unit keys grouped by dimension, in registration order."""
        grouped: dict[BaseType, list[str]] = {}
        for key, unit in self._units.items():
            grouped.setdefault(unit.base, []).append(key)
        return grouped


# Data units, 1024-based
_DATA_UNITS = [
    ("byte", UnitDef(BaseType.BYTE, 1.0, "B")),
    ("kb", UnitDef(BaseType.BYTE, DATA_BASE, "KB")),
    ("mb", UnitDef(BaseType.BYTE, DATA_BASE**2, "MB")),
    ("gb", UnitDef(BaseType.BYTE, DATA_BASE**3, "GB")),
    ("tb", UnitDef(BaseType.BYTE, DATA_BASE**4, "TB")),
    ("pb", UnitDef(BaseType.BYTE, DATA_BASE**5, "PB")),
]

# Large-number words; "b" means billion and "m" (below) means meter, so the
# single byte is spelled "byte"
_NUMBER_WORDS = [
    ("thousand", UnitDef(BaseType.UNIT, 1e3, "")),
    ("k", UnitDef(BaseType.UNIT, 1e3, "")),
    ("million", UnitDef(BaseType.UNIT, 1e6, "")),
    ("billion", UnitDef(BaseType.UNIT, 1e9, "")),
    ("b", UnitDef(BaseType.UNIT, 1e9, "")),
    ("trillion", UnitDef(BaseType.UNIT, 1e12, "")),
    ("t", UnitDef(BaseType.UNIT, 1e12, "")),
]

_TIME_UNITS = [
    ("sec", UnitDef(BaseType.SECOND, 1.0, "sec")),
    ("min", UnitDef(BaseType.SECOND, TIME_BASE, "min")),
    ("hour", UnitDef(BaseType.SECOND, TIME_BASE * 60, "hr")),
    ("day", UnitDef(BaseType.SECOND, TIME_BASE * 60 * 24, "day")),
    ("week", UnitDef(BaseType.SECOND, TIME_BASE * 60 * 24 * 7, "wk")),
]

_LENGTH_UNITS = [
    ("mm", UnitDef(BaseType.METER, 1e-3, "mm")),
    ("cm", UnitDef(BaseType.METER, 1e-2, "cm")),
    ("m", UnitDef(BaseType.METER, 1.0, "m")),
    ("km", UnitDef(BaseType.METER, 1e3, "km")),
    ("inch", UnitDef(BaseType.METER, 0.0254, "in")),
    ("ft", UnitDef(BaseType.METER, 0.3048, "ft")),
    ("yd", UnitDef(BaseType.METER, 0.9144, "yd")),
    ("mile", UnitDef(BaseType.METER, 1609.34, "mile")),
]

FORMAT_RULES: Mapping[BaseType, tuple[FormatRule, ...]] = MappingProxyType(
    {
        BaseType.BYTE: (
            FormatRule(1.0, "B"),
            FormatRule(DATA_BASE, "KB"),
            FormatRule(DATA_BASE**2, "MB"),
            FormatRule(DATA_BASE**3, "GB"),
            FormatRule(DATA_BASE**4, "TB"),
            FormatRule(DATA_BASE**5, "PB"),
        ),
        BaseType.SECOND: (
            FormatRule(1.0, "seconds"),
            FormatRule(TIME_BASE, "minutes"),
            FormatRule(TIME_BASE * 60, "hours"),
            FormatRule(TIME_BASE * 60 * 24, "days"),
            FormatRule(TIME_BASE * 60 * 24 * 7, "weeks"),
        ),
        BaseType.METER: (
            FormatRule(0.001, "mm"),
            FormatRule(0.01, "cm"),
            FormatRule(1.0, "m"),
            FormatRule(1000.0, "km"),
            FormatRule(1609.34, "miles"),
        ),
        BaseType.UNIT: (
            FormatRule(1.0, ""),
            FormatRule(1e3, "thousand"),
            FormatRule(1e6, "million"),
            FormatRule(1e9, "billion"),
            FormatRule(1e12, "trillion"),
        ),
    }
)

DEFAULT_REGISTRY = UnitRegistry.from_entries(
    [*_DATA_UNITS, *_NUMBER_WORDS, *_TIME_UNITS, *_LENGTH_UNITS],
    FORMAT_RULES,
)
