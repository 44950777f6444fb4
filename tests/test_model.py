"""Tests for the typed dataset rows."""

import pytest

from infractions.dataset import DATASET, load_dataset, records_to_band_rows, records_to_rows
from infractions.model import BandRow, MonthlyRow, YearlyRow


class TestThemeRow:
    """Construction-time validation and total handling."""

    def test_missing_theme_reads_as_zero(self):
        row = YearlyRow(key=2020, counts={"Snelheid": 10})
        assert row.count("Snelheid") == 10
        assert row.count("Alcohol") == 0

    def test_provided_total_is_authoritative(self):
        row = YearlyRow(key=2020, counts={"Snelheid": 10, "GSM": 5}, total=99)
        assert row.full_total() == 99

    def test_total_falls_back_to_sum_of_all_themes(self):
        row = MonthlyRow(key="Jan", counts={"Snelheid": 10, "GSM": 5, "Drugs": 1})
        assert row.full_total() == 16

    def test_unknown_theme_rejected(self):
        with pytest.raises(ValueError):
            YearlyRow(key=2020, counts={"Fietsen": 3})

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            YearlyRow(key=2020, counts={"Snelheid": -1})

    def test_non_integer_count_rejected(self):
        with pytest.raises(ValueError):
            YearlyRow(key=2020, counts={"Snelheid": 1.5})
        with pytest.raises(ValueError):
            YearlyRow(key=2020, counts={"Snelheid": True})

    def test_negative_total_rejected(self):
        with pytest.raises(ValueError):
            YearlyRow(key=2020, counts={}, total=-3)

    def test_counts_are_read_only(self):
        row = YearlyRow(key=2020, counts={"Snelheid": 10})
        with pytest.raises(TypeError):
            row.counts["Snelheid"] = 11

    def test_as_record_shape(self):
        row = MonthlyRow(key="Feb", counts={"GSM": 4}, total=4)
        assert row.as_record() == {"maand": "Feb", "GSM": 4, "Totaal": 4}
        assert row.key_field == "maand"
        assert YearlyRow(key=2021).key_field == "year"


class TestBandRow:

    def test_unknown_bucket_rejected(self):
        with pytest.raises(ValueError):
            BandRow(key_field="year", key=2020, values={"_99": 1}, buckets=("_0_10",))

    def test_record_fills_missing_buckets(self):
        row = BandRow(key_field="year", key=2020, values={"_0_10": 3}, buckets=("_0_10", "_unk"))
        assert row.as_record() == {"year": 2020, "_0_10": 3, "_unk": 0}


class TestDataset:
    """The embedded dataset loads and its lookups work."""

    def test_table_sizes(self):
        assert len(DATASET.yearly) == 9
        assert len(DATASET.monthly) == 12
        assert len(DATASET.speed_yearly) == 9
        assert len(DATASET.speed_monthly) == 12
        assert len(DATASET.severity_yearly) == 9
        assert len(DATASET.severity_monthly) == 12

    def test_year_and_month_lookup(self):
        assert DATASET.year_row(2023).full_total() == 958111
        assert DATASET.year_row(2022).full_total() == 1010857
        assert DATASET.year_row(2010) is None
        assert DATASET.month_row("Maa").count("Snelheid") == 79760
        assert DATASET.month_row("Xyz") is None

    def test_provided_totals_match_theme_sums(self):
        for row in DATASET.yearly + DATASET.monthly:
            assert row.total == sum(row.counts.values())

    def test_monthly_totals_add_up_to_the_year(self):
        assert sum(r.full_total() for r in DATASET.monthly) == DATASET.year_row(2023).full_total()

    def test_monthly_band_rows_built_from_columns(self):
        jan = DATASET.speed_monthly[0]
        assert jan.key == "Jan"
        assert jan.value("_0_10") == 66261
        dec = DATASET.severity_monthly[-1]
        assert dec.key == "Dec"
        assert dec.value("graad4") == 8

    def test_load_dataset_builds_a_fresh_copy(self):
        ds = load_dataset()
        assert ds is not DATASET
        assert ds.current_year == 2023
        assert [r.key for r in ds.yearly] == list(range(2015, 2024))

    def test_records_to_rows_rejects_unknown_key_field(self):
        with pytest.raises(ValueError):
            records_to_rows([{"week": 1}], "week")

    def test_records_to_rows_requires_key(self):
        with pytest.raises(ValueError):
            records_to_rows([{"Snelheid": 1}], "year")

    def test_records_to_rows_reads_totaal(self):
        rows = records_to_rows([{"maand": "Jan", "GSM": 2, "Totaal": 7}], "maand")
        assert rows[0].total == 7
        assert rows[0].count("GSM") == 2

    def test_records_to_band_rows(self):
        rows = records_to_band_rows([{"year": 2015, "graad1": 1}], "year", ["graad1", "unk"])
        assert rows[0].as_record() == {"year": 2015, "graad1": 1, "unk": 0}
