from __future__ import annotations

import html as html_lib
from pathlib import Path
from typing import Any, Dict, List

import plotly.graph_objects as go

from ..config import TOTAL_FIELD
from ..transforms.insights import format_nl
from ..views import Chart, ViewPayload


def style_figure(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        template="simple_white",
        font=dict(family="system-ui, -apple-system, Segoe UI, Roboto, Ubuntu", size=12, color="#0b1220"),
        margin=dict(t=50, l=40, r=20, b=40),
        height=380,
        legend=dict(orientation="h", yanchor="bottom", y=-0.25, xanchor="center", x=0.5),
    )
    fig.update_xaxes(showgrid=False, zeroline=False, type="category")
    fig.update_yaxes(showgrid=True, gridcolor="rgba(0,0,0,0.06)", zeroline=False)
    return fig


def _column(rows: List[Dict[str, Any]], key: str) -> List[Any]:
    return [r.get(key, 0) for r in rows]


def build_figure(chart: Chart, title: str = "") -> go.Figure:
    """Turn one chart of a view payload into a Plotly figure."""
    fig = go.Figure()
    x = _column(chart.rows, chart.key_field)

    if chart.kind == "bar":
        for s in chart.series:
            fig.add_trace(go.Bar(x=x, y=_column(chart.rows, s.key), name=s.name, marker_color=s.color))
        fig.update_layout(barmode="stack" if chart.stacked else "group")

    elif chart.kind == "line":
        for s in chart.series:
            fig.add_trace(
                go.Scatter(x=x, y=_column(chart.rows, s.key), name=s.name, mode="lines", line=dict(color=s.color))
            )

    elif chart.kind == "pie":
        fig.add_trace(
            go.Pie(
                labels=x,
                values=_column(chart.rows, "value"),
                marker=dict(colors=_column(chart.rows, "color")),
                hole=0.35,
                sort=False,
            )
        )

    elif chart.kind == "table":
        body = [[format_nl(v) if isinstance(v, int) else v for v in _column(chart.rows, col)] for col in chart.columns]
        if chart.footer:
            for col, values in zip(chart.columns, body):
                values.append(TOTAL_FIELD if col == chart.key_field else format_nl(chart.footer.get(col, 0)))
        fig.add_trace(go.Table(header=dict(values=chart.columns), cells=dict(values=body)))

    else:
        raise ValueError(f"Unknown chart kind {chart.kind!r}")

    if title:
        fig.update_layout(title=title)
    return style_figure(fig)


def write_html(payloads: List[ViewPayload], summary: Dict[str, Any], path: Path) -> Path:
    """Write every view as one standalone HTML page (plotly.js from the CDN)."""
    parts: List[str] = [
        f"<h1>{html_lib.escape(summary['title'])}</h1>",
        f"<p>{html_lib.escape(summary['subtitle'])}</p>",
    ]
    cards = "".join(
        f"<div class=\"kpi\"><div>{html_lib.escape(k['title'])}</div><strong>{html_lib.escape(k['value'])}</strong></div>"
        for k in summary["kpis"]
    )
    parts.append(f"<div class=\"kpis\">{cards}</div>")

    for payload in payloads:
        parts.append(f"<h2>{html_lib.escape(payload.title)}</h2>")
        for chart in payload.charts:
            fig = build_figure(chart)
            parts.append(fig.to_html(full_html=False, include_plotlyjs="cdn"))

    parts.append(f"<footer>{html_lib.escape(summary['footer'])}</footer>")
    page = (
        "<!DOCTYPE html><html lang=\"nl\"><head><meta charset=\"utf-8\">"
        f"<title>{html_lib.escape(summary['title'])}</title></head><body>"
        + "".join(parts)
        + "</body></html>"
    )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(page, encoding="utf-8")
    return path
