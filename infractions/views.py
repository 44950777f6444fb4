from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .config import (
    EXPORT_FILENAME,
    FOOTER,
    KEY_FIELD_MONTH,
    KEY_FIELD_YEAR,
    SEVERITY_GRADES,
    SPEED_BANDS,
    SUBTITLE,
    THEMES,
    TITLE,
    VIEWS,
    theme_color,
)
from .dataset import DATASET
from .export import csv_header
from .model import BandRow, Dataset
from .state import SelectionState
from .transforms.derived_metrics import (
    column_sums,
    derive_series,
    distribution,
    monthly_series,
    yearly_series,
)
from .transforms.insights import kpi_cards, summarize


@dataclass
class Series:
    key: str            # field in each row
    name: str           # legend label
    color: str
    stack: Optional[str] = None


@dataclass
class Chart:
    kind: str           # "bar" | "line" | "pie" | "table"
    key_field: str
    rows: List[Dict[str, Any]]
    series: List[Series] = field(default_factory=list)
    stacked: bool = False
    columns: List[str] = field(default_factory=list)
    footer: Optional[Dict[str, Any]] = None


@dataclass
class ViewPayload:
    view: str
    title: str
    metric: str
    charts: List[Chart]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _theme_series(themes: Sequence[str], stacked: bool) -> List[Series]:
    # colour follows the theme's fixed position, not its place in the selection
    return [
        Series(key=t, name=t, color=theme_color(THEMES.index(t)), stack="a" if stacked else None)
        for t in themes
    ]


def _band_series(buckets, stacked: bool) -> List[Series]:
    return [Series(key=b, name=label, color=color, stack="a" if stacked else None) for b, label, color in buckets]


def _band_charts(yearly: Sequence[BandRow], monthly: Sequence[BandRow], buckets) -> List[Chart]:
    return [
        Chart(
            kind="line",
            key_field=KEY_FIELD_YEAR,
            rows=[r.as_record() for r in yearly],
            series=_band_series(buckets, stacked=False),
        ),
        Chart(
            kind="bar",
            key_field=KEY_FIELD_MONTH,
            rows=[r.as_record() for r in monthly],
            series=_band_series(buckets, stacked=True),
            stacked=True,
        ),
    ]


def _trend_chart(rows: List[Dict[str, Any]], key_field: str, state: SelectionState) -> Chart:
    return Chart(
        kind="bar" if state.stacked else "line",
        key_field=key_field,
        rows=rows,
        series=_theme_series(state.themes, state.stacked),
        stacked=state.stacked,
    )


def build_view(state: SelectionState, dataset: Dataset = DATASET, view: Optional[str] = None) -> ViewPayload:
    """
    Project the dataset into the payload for one view (the active view by
    default). Raises ValueError for a view outside VIEWS.
    """
    view = view or state.view
    if view not in VIEWS:
        raise ValueError(f"Unknown view {view!r}")

    if view == "jaartrend":
        if dataset is DATASET:
            rows = [dict(r) for r in yearly_series(state.themes, state.metric)]
        else:
            rows = derive_series(dataset.yearly, state.themes, state.metric)
        charts = [_trend_chart(rows, KEY_FIELD_YEAR, state)]

    elif view == "maand2023":
        if dataset is DATASET:
            rows = [dict(r) for r in monthly_series(state.themes, state.metric)]
        else:
            rows = derive_series(dataset.monthly, state.themes, state.metric)
        charts = [_trend_chart(rows, KEY_FIELD_MONTH, state)]

    elif view == "pie2023":
        row = dataset.year_row(dataset.current_year)
        entries = distribution(row) if row is not None else []
        charts = [
            Chart(
                kind="pie",
                key_field="name",
                rows=entries,
                series=[Series(key="value", name=str(dataset.current_year), color="")],
            )
        ]

    elif view == "snelheidsbanden":
        charts = _band_charts(dataset.speed_yearly, dataset.speed_monthly, SPEED_BANDS)

    elif view == "nietsnelheid":
        charts = _band_charts(dataset.severity_yearly, dataset.severity_monthly, SEVERITY_GRADES)

    else:  # tabel
        charts = [
            Chart(
                kind="table",
                key_field=KEY_FIELD_MONTH,
                rows=[r.as_record() for r in dataset.monthly],
                columns=csv_header(KEY_FIELD_MONTH),
                footer=column_sums(dataset.monthly),
            )
        ]

    return ViewPayload(view=view, title=VIEWS[view], metric=state.metric, charts=charts)


def build_all_views(state: SelectionState, dataset: Dataset = DATASET) -> List[ViewPayload]:
    return [build_view(state, dataset, view) for view in VIEWS]


def build_summary(state: SelectionState, dataset: Dataset = DATASET, export_filename: str = EXPORT_FILENAME) -> Dict[str, Any]:
    """Page-level data: headings, selection, KPI cards and the view index."""
    insights = summarize(dataset)
    return {
        "title": TITLE,
        "subtitle": SUBTITLE,
        "footer": FOOTER,
        "selection": {
            "themes": list(state.themes),
            "metric": state.metric,
            "stacked": state.stacked,
            "view": state.view,
        },
        "themes": [{"name": t, "color": theme_color(i)} for i, t in enumerate(THEMES)],
        "kpis": kpi_cards(insights),
        "insights": asdict(insights),
        "views": [{"view": v, "title": t} for v, t in VIEWS.items()],
        "export_filename": export_filename,
    }
