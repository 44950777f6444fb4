from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import pandas as pd

from ..config import METRIC_ABS, METRIC_PCT, METRICS, THEMES, TOTAL_FIELD, theme_color
from ..dataset import DATASET
from ..model import ThemeRow


def to_percent(value: float, total: float) -> float:
    return (100.0 * value) / total if total > 0 else 0.0


def derive_row(row: ThemeRow, selected: Sequence[str], metric: str = METRIC_ABS) -> Dict[str, Any]:
    """
    Project one theme row for display.

    Returns {key_field: key, <theme>: value for each selected theme, "Totaal": ...}
      abs: raw counts; Totaal = provided total (or sum over *all* themes)
      pct: share of the all-theme total; Totaal fixed to 100
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}; expected one of {METRICS}")

    total = row.full_total()
    out: Dict[str, Any] = {row.key_field: row.key}
    for theme in selected:
        raw = row.count(theme)
        out[theme] = to_percent(raw, total) if metric == METRIC_PCT else raw
    out[TOTAL_FIELD] = 100 if metric == METRIC_PCT else total
    return out


def derive_series(
    rows: Iterable[ThemeRow],
    selected: Sequence[str],
    metric: str = METRIC_ABS,
) -> List[Dict[str, Any]]:
    selected = list(selected)
    return [derive_row(row, selected, metric) for row in rows]


def distribution(row: ThemeRow, themes: Sequence[str] = THEMES) -> List[Dict[str, Any]]:
    """Pie entries for a single row; colour follows the theme's position, zero slices dropped."""
    entries = [
        {"name": theme, "value": row.count(theme), "color": theme_color(i)}
        for i, theme in enumerate(themes)
    ]
    return [e for e in entries if e["value"] > 0]


def to_frame(rows: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    return pd.DataFrame(list(rows))


def column_sums(rows: Sequence[ThemeRow], themes: Sequence[str] = THEMES) -> Dict[str, int]:
    """
    Footer totals for a table of theme rows: one sum per theme plus the sum
    of the row totals.
    """
    df = to_frame({t: row.count(t) for t in themes} for row in rows)
    df = df.reindex(columns=list(themes)).fillna(0)
    sums = {t: int(v) for t, v in df.sum().items()}
    sums[TOTAL_FIELD] = int(sum(row.full_total() for row in rows))
    return sums


# Memoized views over the embedded dataset, keyed on (selection, metric).
@lru_cache(maxsize=64)
def yearly_series(selected: Tuple[str, ...], metric: str = METRIC_ABS) -> Tuple[Dict[str, Any], ...]:
    return tuple(derive_series(DATASET.yearly, selected, metric))


@lru_cache(maxsize=64)
def monthly_series(selected: Tuple[str, ...], metric: str = METRIC_ABS) -> Tuple[Dict[str, Any], ...]:
    return tuple(derive_series(DATASET.monthly, selected, metric))
