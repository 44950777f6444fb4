"""Tests for the generator entry point."""

import json

import pytest

from infractions.config import load_config
from infractions.main import generate, main, parse_args, state_from_args
from infractions.state import initial_state


class TestArgs:

    def test_defaults(self):
        state = state_from_args(parse_args([]))
        assert state == initial_state()

    def test_themes_metric_view(self):
        args = parse_args(["--themes", "GSM, Alcohol", "--metric", "pct", "--unstacked", "--view", "tabel"])
        state = state_from_args(args)
        assert state.themes == ("GSM", "Alcohol")
        assert state.metric == "pct"
        assert state.stacked is False
        assert state.view == "tabel"

    def test_duplicate_theme_selected_once(self):
        state = state_from_args(parse_args(["--themes", "GSM,GSM"]))
        assert state.themes == ("GSM",)

    def test_unknown_theme_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--out-dir", str(tmp_path), "--themes", "Fietsen"])

    def test_unknown_metric_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            parse_args(["--metric", "ratio"])


class TestConfig:

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DASHBOARD_DATA_DIR", str(tmp_path))
        assert load_config().out_dir == tmp_path

    def test_explicit_dir_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DASHBOARD_DATA_DIR", "/somewhere/else")
        assert load_config(str(tmp_path)).out_dir == tmp_path


class TestGenerate:

    def test_writes_all_outputs(self, tmp_path, capsys):
        main(["--out-dir", str(tmp_path), "--html"])
        names = {p.name for p in tmp_path.iterdir()}
        assert "dashboard.json" in names
        assert "jaartrend.json" in names
        assert "verkeersinbreuken_pz_antwerpen_2023.csv" in names
        assert "dashboard.html" in names
        out = capsys.readouterr().out
        assert out.count("[generate] Wrote") == 3

    def test_without_html(self, tmp_path):
        config = load_config(str(tmp_path))
        written = generate(initial_state(), config)
        assert len(written) == 8
        assert not (tmp_path / "dashboard.html").exists()

    def test_csv_contents(self, tmp_path):
        main(["--out-dir", str(tmp_path)])
        lines = (tmp_path / "verkeersinbreuken_pz_antwerpen_2023.csv").read_text(encoding="utf-8").split("\n")
        assert lines[0].startswith("maand,Snelheid,")
        assert len(lines) == 13

    def test_union_header(self, tmp_path):
        main(["--out-dir", str(tmp_path), "--header", "union"])
        text = (tmp_path / "verkeersinbreuken_pz_antwerpen_2023.csv").read_text(encoding="utf-8")
        assert text.split("\n")[0].endswith("Onbekend,Totaal")

    def test_selection_recorded_in_summary(self, tmp_path):
        main(["--out-dir", str(tmp_path), "--themes", "Drugs", "--metric", "pct"])
        summary = json.loads((tmp_path / "dashboard.json").read_text(encoding="utf-8"))
        assert summary["selection"]["themes"] == ["Drugs"]
        assert summary["selection"]["metric"] == "pct"
