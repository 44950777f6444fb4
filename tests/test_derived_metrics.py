"""Tests for the metric deriver and its table helpers."""

import pytest

from infractions.config import THEMES
from infractions.dataset import DATASET
from infractions.model import MonthlyRow, YearlyRow
from infractions.transforms.derived_metrics import (
    column_sums,
    derive_row,
    derive_series,
    distribution,
    monthly_series,
    to_frame,
    to_percent,
    yearly_series,
)

SELECTED = ["Snelheid", "Stilstaan en parkeren", "Verkeerslichten"]


class TestAbsoluteMode:

    def test_fields_and_order(self):
        out = derive_row(DATASET.year_row(2023), SELECTED, "abs")
        assert list(out) == ["year", *SELECTED, "Totaal"]
        assert out["year"] == 2023
        assert out["Snelheid"] == 799244
        assert out["Totaal"] == 958111

    def test_selected_sum_is_exact(self):
        for row in DATASET.yearly:
            out = derive_row(row, SELECTED, "abs")
            assert sum(out[t] for t in SELECTED) == sum(row.count(t) for t in SELECTED)

    def test_missing_theme_is_zero(self):
        row = YearlyRow(key=2020, counts={"Snelheid": 3})
        assert derive_row(row, ["Alcohol"], "abs")["Alcohol"] == 0

    def test_total_falls_back_to_all_themes(self):
        row = YearlyRow(key=2020, counts={"Snelheid": 3, "GSM": 7})
        out = derive_row(row, ["Snelheid"], "abs")
        assert out["Totaal"] == 10


class TestPercentageMode:

    def test_each_field_is_share_of_total(self):
        row = DATASET.year_row(2023)
        out = derive_row(row, SELECTED, "pct")
        for t in SELECTED:
            assert out[t] == pytest.approx(100 * row.count(t) / 958111)
        assert out["Totaal"] == 100

    def test_all_themes_sum_to_hundred(self):
        for row in DATASET.yearly + DATASET.monthly:
            out = derive_row(row, THEMES, "pct")
            assert sum(out[t] for t in THEMES) == pytest.approx(100.0)

    def test_subset_does_not_sum_to_totaal(self):
        out = derive_row(DATASET.year_row(2023), ["GSM"], "pct")
        assert out["Totaal"] == 100
        assert out["GSM"] < 100

    def test_zero_total_gives_zero_percentages(self):
        row = MonthlyRow(key="Jan", counts={}, total=0)
        out = derive_row(row, ["Snelheid", "GSM"], "pct")
        assert out["Snelheid"] == 0
        assert out["GSM"] == 0
        assert out["Totaal"] == 100

    def test_to_percent(self):
        assert to_percent(25, 200) == 12.5
        assert to_percent(5, 0) == 0


class TestDeriveSeries:

    def test_preserves_row_and_selection_order(self):
        selected = ["Verkeerslichten", "Snelheid"]
        out = derive_series(DATASET.monthly, selected, "abs")
        assert [r["maand"] for r in out] == [r.maand for r in DATASET.monthly]
        assert list(out[0]) == ["maand", "Verkeerslichten", "Snelheid", "Totaal"]

    def test_empty_selection(self):
        out = derive_series(DATASET.yearly, [], "pct")
        assert out[0] == {"year": 2015, "Totaal": 100}
        assert len(out) == 9

    def test_unknown_metric(self):
        with pytest.raises(ValueError):
            derive_series(DATASET.yearly, SELECTED, "ratio")

    def test_inputs_untouched(self):
        row = DATASET.year_row(2023)
        before = dict(row.counts)
        derive_series([row], SELECTED, "pct")
        assert dict(row.counts) == before

    def test_memoized_series_match_plain_derivation(self):
        cached = yearly_series(tuple(SELECTED), "abs")
        assert list(cached) == derive_series(DATASET.yearly, SELECTED, "abs")
        assert yearly_series(tuple(SELECTED), "abs") is cached
        assert list(monthly_series(("GSM",), "pct")) == derive_series(DATASET.monthly, ["GSM"], "pct")


class TestTableHelpers:

    def test_distribution_drops_zero_slices(self):
        row = YearlyRow(key=2023, counts={"Snelheid": 5, "GSM": 0, "Drugs": 2})
        entries = distribution(row)
        assert [e["name"] for e in entries] == ["Snelheid", "Drugs"]
        assert entries[0]["color"] == "#2563eb"
        assert entries[1]["color"] == "#059669"

    def test_distribution_of_2023(self):
        entries = distribution(DATASET.year_row(2023))
        assert len(entries) == 16
        assert sum(e["value"] for e in entries) == 958111

    def test_column_sums_of_2023_months(self):
        sums = column_sums(DATASET.monthly)
        assert sums["Snelheid"] == 799244
        assert sums["Totaal"] == 958111
        assert set(sums) == set(THEMES) | {"Totaal"}
        assert all(isinstance(v, int) for v in sums.values())

    def test_column_sums_empty(self):
        sums = column_sums([])
        assert sums["Snelheid"] == 0
        assert sums["Totaal"] == 0

    def test_to_frame(self):
        df = to_frame(derive_series(DATASET.yearly, ["GSM"], "abs"))
        assert list(df.columns) == ["year", "GSM", "Totaal"]
        assert len(df) == 9
