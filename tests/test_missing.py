"""Tests for the integrity scanner reports."""

import numpy as np
import pandas as pd
import pytest

from cervical_eda.exceptions import FormatError
from cervical_eda.missing import (
    missing_table,
    zero_blank_table,
    scan,
    save_missing_report,
    heuristic_missingness_assessment,
)


class TestMissingTable:
    """Null/placeholder report."""

    def test_counts_nulls_and_placeholders(self):
        df = pd.DataFrame({"a": ["?", "1", None, "2"], "b": [1.0, np.nan, 2.0, 3.0], "c": [1, 2, 3, 4]})
        table = missing_table(df).set_index("column")

        assert table.loc["a", "missing_count"] == 2
        assert table.loc["b", "missing_count"] == 1
        assert table.loc["c", "missing_count"] == 0
        assert table.loc["a", "missing_fraction"] == pytest.approx(0.5)
        assert table.loc["a", "missing_percent"] == pytest.approx(50.0)

    def test_sorted_descending(self, raw_df):
        table = missing_table(raw_df)

        assert table["column"].iloc[0] == "STDs: Time since first diagnosis"
        fractions = table["missing_fraction"].tolist()
        assert fractions == sorted(fractions, reverse=True)

    def test_ties_keep_column_order(self, raw_df):
        table = missing_table(raw_df)
        complete = table[table["missing_count"] == 0]["column"].tolist()

        assert complete == ["Age", "Dx:Cancer", "Hinselmann", "Schiller", "Citology", "Biopsy"]

    def test_fractions_sum_to_one(self, raw_df):
        for table in scan(raw_df).values():
            total = table["missing_fraction"] + table["complete_fraction"]
            assert np.allclose(total, 1.0)

    def test_one_row_per_column(self, raw_df):
        table = missing_table(raw_df)
        assert sorted(table["column"]) == sorted(raw_df.columns)

    def test_custom_token(self):
        df = pd.DataFrame({"a": ["NA", "1"]})
        assert missing_table(df, token="NA")["missing_count"].iloc[0] == 1
        assert missing_table(df)["missing_count"].iloc[0] == 0

    def test_empty_table(self):
        df = pd.DataFrame({"a": pd.Series([], dtype=float)})
        table = missing_table(df)

        assert table["missing_fraction"].iloc[0] == 0.0
        assert table["complete_fraction"].iloc[0] == 1.0

    def test_duplicate_columns_rejected(self):
        df = pd.DataFrame([[1, 2]], columns=["a", "a"])
        with pytest.raises(FormatError):
            missing_table(df)

    def test_does_not_mutate(self, raw_df):
        before = raw_df.copy()
        scan(raw_df)
        pd.testing.assert_frame_equal(raw_df, before)


class TestZeroBlankTable:
    """Zero/blank report."""

    def test_counts_zero_and_blank(self):
        df = pd.DataFrame({"a": ["0.0", "", "  ", "?", "3"], "b": [0, 0, 1, 2, 0]})
        table = zero_blank_table(df).set_index("column")

        assert table.loc["a", "missing_count"] == 3
        assert table.loc["b", "missing_count"] == 3
        assert table.loc["b", "missing_fraction"] == pytest.approx(0.6)

    def test_placeholder_not_counted(self):
        df = pd.DataFrame({"a": ["?", "?"]})
        assert zero_blank_table(df)["missing_count"].iloc[0] == 0


class TestReports:
    """Saving and the text assessment."""

    def test_save_missing_report(self, tmp_path, raw_df):
        path = save_missing_report(missing_table(raw_df), str(tmp_path), "missing_report.csv")

        saved = pd.read_csv(path)
        assert list(saved.columns) == ["column", "missing_count", "missing_fraction",
                                       "complete_fraction", "missing_percent"]
        txt = (tmp_path / "missing_report.txt").read_text(encoding="utf-8")
        assert txt.startswith("column,missing_count,missing_percent")
        assert "STDs: Time since first diagnosis,4,80.0%" in txt

    def test_assessment_no_missing(self):
        df = pd.DataFrame({"a": [1, 2]})
        assert heuristic_missingness_assessment(df) == "No missing values detected."

    def test_assessment_concentrated(self, raw_df):
        df = raw_df.assign(target=[0, 0, 2, 4, 2])
        note = heuristic_missingness_assessment(df, threshold_pct=5.0)

        assert note.startswith("Missingness concentrated in columns:")
        assert "STDs: Time since first diagnosis" in note
        assert "Missingness by target" in note

    def test_assessment_without_target(self, raw_df):
        note = heuristic_missingness_assessment(raw_df, target_col="missing_col")
        assert "Target column not found" in note
