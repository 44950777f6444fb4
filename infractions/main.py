from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from .config import HTML_FILE, METRICS, VIEWS, GeneratorConfig, load_config
from .dataset import DATASET
from .export import HEADER_FIXED, HEADER_UNION, export_csv
from .model import Dataset
from .render.json_adapter import write_views
from .render.plotly_adapter import write_html
from .state import (
    SelectionState,
    initial_state,
    set_active_view,
    set_metric_mode,
    set_stacked,
    toggle_category,
)
from .views import build_all_views, build_summary


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="infractions-dashboard",
        description="Generate the PZ Antwerpen traffic-infraction dashboard data.",
    )
    parser.add_argument("--out-dir", help="Output directory (default: data/processed or $DASHBOARD_DATA_DIR)")
    parser.add_argument("--themes", help="Comma-separated themes to select instead of the default three")
    parser.add_argument("--metric", choices=METRICS, default=None)
    parser.add_argument("--unstacked", action="store_true", help="Draw theme trends as lines")
    parser.add_argument("--view", choices=list(VIEWS), default=None)
    parser.add_argument("--html", action="store_true", help="Also write a standalone Plotly HTML page")
    parser.add_argument("--header", choices=[HEADER_FIXED, HEADER_UNION], default=HEADER_FIXED)
    return parser.parse_args(argv)


def state_from_args(args: argparse.Namespace) -> SelectionState:
    state = initial_state()
    if args.themes is not None:
        wanted = [t.strip() for t in args.themes.split(",") if t.strip()]
        # deselect the defaults, then select in the order given
        for theme in state.themes:
            state = toggle_category(state, theme)
        for theme in wanted:
            if theme not in state.themes:
                state = toggle_category(state, theme)
    if args.metric:
        state = set_metric_mode(state, args.metric)
    if args.unstacked:
        state = set_stacked(state, False)
    if args.view:
        state = set_active_view(state, args.view)
    return state


def generate(state: SelectionState, config: GeneratorConfig, dataset: Dataset = DATASET) -> List[Path]:
    """Write every view payload, the summary, the CSV export and (optionally) the HTML page."""
    payloads = build_all_views(state, dataset)
    summary = build_summary(state, dataset, config.export_filename)

    written = write_views(payloads, summary, config.out_dir)
    print(f"[generate] Wrote {len(payloads)} views + summary → {config.out_dir}")

    csv_path = export_csv(config.out_dir / config.export_filename, dataset.monthly, header=config.header)
    written.append(csv_path)
    print(f"[generate] Wrote {len(dataset.monthly)} rows → {csv_path}")

    if config.write_html:
        html_path = write_html(payloads, summary, config.out_dir / HTML_FILE)
        written.append(html_path)
        print(f"[generate] Wrote dashboard page → {html_path}")

    return written


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    try:
        state = state_from_args(args)
    except ValueError as e:
        raise SystemExit(f"[generate] {e}")
    config = load_config(args.out_dir, write_html=args.html, header=args.header)
    generate(state, config)


if __name__ == "__main__":
    main()
