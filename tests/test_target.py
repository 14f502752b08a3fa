"""Tests for the composite target."""

import numpy as np
import pandas as pd
import pytest

from cervical_eda.exceptions import DataAssumptionError
from cervical_eda.repair import repair_placeholders
from cervical_eda.target import derive_label, label_distribution

EXAMS = ["Hinselmann", "Schiller", "Citology", "Biopsy"]


class TestDeriveLabel:

    def test_scenario(self, scenario_df):
        out = derive_label(scenario_df, ["Hinselmann", "Schiller", "Citology", "Biopsy"])

        assert out["target"].tolist() == [1, 1, 0]
        assert list(out.columns) == ["A", "target"]

    def test_label_is_row_sum_in_domain(self, raw_df):
        out = derive_label(raw_df)
        expected = raw_df[EXAMS].sum(axis=1)

        assert out["target"].tolist() == expected.tolist()
        assert out["target"].between(0, 4).all()
        assert pd.api.types.is_integer_dtype(out["target"])

    def test_sources_dropped_but_input_kept(self, raw_df):
        out = derive_label(raw_df)

        for col in EXAMS:
            assert col not in out.columns
            assert col in raw_df.columns

    def test_custom_label_name(self, raw_df):
        out = derive_label(raw_df, EXAMS, label_col="n_positive")
        assert "n_positive" in out.columns

    def test_requires_four_columns(self, raw_df):
        with pytest.raises(ValueError, match="exactly 4"):
            derive_label(raw_df, EXAMS[:3])

    def test_missing_source_column(self, raw_df):
        with pytest.raises(KeyError):
            derive_label(raw_df.drop(columns=["Biopsy"]))

    def test_sentinel_in_exam_rejected(self, raw_df):
        df = raw_df.copy()
        df["Biopsy"] = df["Biopsy"].astype(object)
        df.loc[2, "Biopsy"] = "?"
        repaired, _ = repair_placeholders(df)

        with pytest.raises(DataAssumptionError) as exc:
            derive_label(repaired)
        assert exc.value.column == "Biopsy"
        assert exc.value.value == -1.0

    def test_null_in_exam_rejected(self, raw_df):
        df = raw_df.astype({"Schiller": float})
        df.loc[0, "Schiller"] = np.nan

        with pytest.raises(DataAssumptionError) as exc:
            derive_label(df)
        assert exc.value.column == "Schiller"

    def test_non_binary_rejected(self, raw_df):
        df = raw_df.copy()
        df.loc[1, "Citology"] = 2

        with pytest.raises(DataAssumptionError, match="expected only 0 or 1"):
            derive_label(df)


class TestLabelDistribution:

    def test_counts_and_percent(self, raw_df):
        dist = label_distribution(derive_label(raw_df))

        assert dist["target"].tolist() == [0, 2, 4]
        assert dist["count"].tolist() == [2, 2, 1]
        assert dist["percent"].tolist() == [40.0, 40.0, 20.0]
