"""
Selection state for the dashboard and the transitions that change it.

State is an immutable value; every transition returns a new one.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .config import (
    DEFAULT_METRIC,
    DEFAULT_STACKED,
    DEFAULT_THEMES,
    DEFAULT_VIEW,
    METRICS,
    THEMES,
    VIEWS,
)


@dataclass(frozen=True)
class SelectionState:
    themes: Tuple[str, ...]
    metric: str = DEFAULT_METRIC
    stacked: bool = DEFAULT_STACKED
    view: str = DEFAULT_VIEW


def initial_state() -> SelectionState:
    return SelectionState(themes=tuple(DEFAULT_THEMES))


def toggle_category(state: SelectionState, theme: str) -> SelectionState:
    """Remove `theme` if selected, otherwise append it at the end."""
    if theme not in THEMES:
        raise ValueError(f"Unknown theme {theme!r}")
    if theme in state.themes:
        themes = tuple(t for t in state.themes if t != theme)
    else:
        themes = state.themes + (theme,)
    return replace(state, themes=themes)


def set_metric_mode(state: SelectionState, metric: str) -> SelectionState:
    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}; expected one of {METRICS}")
    return replace(state, metric=metric)


def set_stacked(state: SelectionState, stacked: bool) -> SelectionState:
    return replace(state, stacked=bool(stacked))


def set_active_view(state: SelectionState, view: str) -> SelectionState:
    if view not in VIEWS:
        raise ValueError(f"Unknown view {view!r}; expected one of {list(VIEWS)}")
    return replace(state, view=view)
