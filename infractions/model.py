from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .config import KEY_FIELD_MONTH, KEY_FIELD_YEAR, THEMES, TOTAL_FIELD

RowKey = Union[int, str]


def _check_count(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Count for {name!r} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Count for {name!r} must be non-negative, got {value}")
    return value


def _frozen_counts(values: Mapping[str, Any], allowed: Iterable[str]) -> Mapping[str, int]:
    allowed = set(allowed)
    checked: Dict[str, int] = {}
    for name, value in values.items():
        if name not in allowed:
            raise ValueError(f"Unknown field {name!r}")
        checked[name] = _check_count(name, value)
    return MappingProxyType(checked)


@dataclass(frozen=True)
class ThemeRow:
    """
    One time bucket of infraction counts per theme.

    counts: theme -> count; themes left out read as 0
    total:  the provided total ("Totaal"), authoritative when present
    """
    key: RowKey
    counts: Mapping[str, int] = field(default_factory=dict)
    total: Optional[int] = None

    key_field = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", _frozen_counts(self.counts, THEMES))
        if self.total is not None:
            _check_count(TOTAL_FIELD, self.total)

    def count(self, theme: str) -> int:
        return self.counts.get(theme, 0)

    def full_total(self) -> int:
        if self.total is not None:
            return self.total
        return sum(self.count(t) for t in THEMES)

    def as_record(self) -> Dict[str, Any]:
        """Flat dict in the dashboard's record shape (key field, themes, Totaal)."""
        record: Dict[str, Any] = {self.key_field: self.key}
        record.update(self.counts)
        if self.total is not None:
            record[TOTAL_FIELD] = self.total
        return record


@dataclass(frozen=True)
class YearlyRow(ThemeRow):
    key_field = KEY_FIELD_YEAR

    @property
    def year(self) -> int:
        return int(self.key)


@dataclass(frozen=True)
class MonthlyRow(ThemeRow):
    key_field = KEY_FIELD_MONTH

    @property
    def maand(self) -> str:
        return str(self.key)


@dataclass(frozen=True)
class BandRow:
    """Fixed-shape bucket row (speed bands or severity grades)."""
    key_field: str
    key: RowKey
    values: Mapping[str, int]
    buckets: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _frozen_counts(self.values, self.buckets))

    def value(self, bucket: str) -> int:
        return self.values.get(bucket, 0)

    def as_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {self.key_field: self.key}
        for bucket in self.buckets:
            record[bucket] = self.value(bucket)
        return record


@dataclass(frozen=True)
class Dataset:
    yearly: Tuple[YearlyRow, ...]
    monthly: Tuple[MonthlyRow, ...]
    speed_yearly: Tuple[BandRow, ...] = ()
    speed_monthly: Tuple[BandRow, ...] = ()
    severity_yearly: Tuple[BandRow, ...] = ()
    severity_monthly: Tuple[BandRow, ...] = ()
    current_year: int = 2023

    def year_row(self, year: int) -> Optional[YearlyRow]:
        for row in self.yearly:
            if row.year == year:
                return row
        return None

    def month_row(self, maand: str) -> Optional[MonthlyRow]:
        for row in self.monthly:
            if row.maand == maand:
                return row
        return None
