"""
target.py
Composite target: the number of positive exam results (Hinselmann, Schiller,
Citology, Biopsy), an ordinal label in 0..4. The exams are perfect predictors
of the label, so they are dropped from the returned modeling table.
"""

from typing import Sequence

import pandas as pd

from .config import EXAM_COLUMNS, TARGET_COL
from .exceptions import DataAssumptionError


def _check_binary(series: pd.Series):
    col = series.name
    nulls = series.isna()
    if nulls.any():
        raise DataAssumptionError(f"Exam column '{col}' has missing values; expected fully populated 0/1",
                                  column=col, value=None)
    numeric = pd.to_numeric(series, errors="coerce")
    bad = numeric.isna() | ~numeric.isin([0, 1])
    if bad.any():
        value = series[bad].iloc[0]
        raise DataAssumptionError(f"Exam column '{col}' has value {value!r}; expected only 0 or 1",
                                  column=col, value=value)
    return numeric.astype(int)


def derive_label(df: pd.DataFrame, source_columns: Sequence[str] = EXAM_COLUMNS,
                 label_col: str = TARGET_COL) -> pd.DataFrame:
    """
    Append label_col = row-wise sum of the four binary source columns and drop
    the sources. Returns a new DataFrame; df keeps its exam columns for audit.
    """
    source_columns = list(source_columns)
    if len(source_columns) != 4:
        raise ValueError(f"Expected exactly 4 source columns, got {len(source_columns)}: {source_columns}")
    missing = [c for c in source_columns if c not in df.columns]
    if missing:
        raise KeyError(f"Source columns not found in table: {missing}")

    exams = pd.concat([_check_binary(df[c]) for c in source_columns], axis=1)

    out = df.drop(columns=source_columns)
    out[label_col] = exams.sum(axis=1).astype(int)
    return out


def label_distribution(df: pd.DataFrame, label_col: str = TARGET_COL) -> pd.DataFrame:
    """Counts and percentages per label value, sorted by value."""
    counts = df[label_col].value_counts(dropna=False).sort_index()
    percents = df[label_col].value_counts(normalize=True, dropna=False).sort_index() * 100
    return pd.DataFrame({label_col: counts.index, "count": counts.values, "percent": percents.values.round(2)})
