from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..config import PEAK_THEME, THEMES
from ..model import Dataset, MonthlyRow, YearlyRow


@dataclass
class Insights:
    year: int
    total: int
    total_change: int
    peak: Optional[Tuple[str, int]]
    best: Optional[Tuple[str, int]]
    worst: Optional[Tuple[str, int]]


def _find_year(yearly: Iterable[YearlyRow], year: int) -> Optional[YearlyRow]:
    for row in yearly:
        if row.year == year:
            return row
    return None


def total_change(yearly: Sequence[YearlyRow], year: int, prev_year: int) -> int:
    """Signed difference of the provided totals; 0 when either year is missing."""
    last = _find_year(yearly, year)
    prev = _find_year(yearly, prev_year)
    if last is None or prev is None:
        return 0
    return last.full_total() - prev.full_total()


def peak_month(monthly: Sequence[MonthlyRow], theme: str = PEAK_THEME) -> Optional[Tuple[str, int]]:
    """
    Month with the highest count for `theme`.

    Left fold that only replaces on a strictly greater value, so the earliest
    month wins a tie.
    """
    if not monthly:
        return None
    peak = (monthly[0].maand, monthly[0].count(theme))
    for row in monthly[1:]:
        val = row.count(theme)
        if val > peak[1]:
            peak = (row.maand, val)
    return peak


def category_deltas(
    yearly: Sequence[YearlyRow],
    year: int,
    prev_year: int,
    themes: Sequence[str] = THEMES,
) -> Dict[str, int]:
    last = _find_year(yearly, year)
    prev = _find_year(yearly, prev_year)
    if last is None or prev is None:
        return {}
    return {t: last.count(t) - prev.count(t) for t in themes}


def best_worst(deltas: Dict[str, int]) -> Tuple[Optional[Tuple[str, int]], Optional[Tuple[str, int]]]:
    """
    best  = theme with the largest decrease (lowest delta)
    worst = theme with the largest increase (highest delta)
    First theme seen keeps the title unless strictly beaten.
    """
    best: Optional[Tuple[str, int]] = None
    worst: Optional[Tuple[str, int]] = None
    for theme, delta in deltas.items():
        if best is None or delta < best[1]:
            best = (theme, delta)
        if worst is None or delta > worst[1]:
            worst = (theme, delta)
    return best, worst


def summarize(dataset: Dataset, theme: str = PEAK_THEME) -> Insights:
    year = dataset.current_year
    current = dataset.year_row(year)
    best, worst = best_worst(category_deltas(dataset.yearly, year, year - 1))
    return Insights(
        year=year,
        total=current.full_total() if current is not None else 0,
        total_change=total_change(dataset.yearly, year, year - 1),
        peak=peak_month(dataset.monthly, theme),
        best=best,
        worst=worst,
    )


# ---------------------------------------------------------------------------
# KPI cards
# ---------------------------------------------------------------------------


def format_nl(value: float, decimals: int = 0) -> str:
    """Belgian-Dutch number formatting: 958111 -> '958.111', 12.5 -> '12,5'."""
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "\0").replace(".", ",").replace("\0", ".")


def format_signed(value: int) -> str:
    return ("+" if value > 0 else "") + format_nl(value)


def kpi_cards(insights: Insights) -> List[Dict[str, str]]:
    year = insights.year
    if insights.peak is not None:
        peak_text = f"{insights.peak[0]} — {format_nl(insights.peak[1])}"
    else:
        peak_text = "—"
    return [
        {"title": f"Totaal {year}", "value": format_nl(insights.total)},
        {"title": f"Δ t.o.v. {year - 1}", "value": format_signed(insights.total_change)},
        {"title": f"Piekmaand snelheid ({year})", "value": peak_text},
    ]
