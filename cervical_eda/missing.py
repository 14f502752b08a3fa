"""
missing.py
Integrity scan of the raw table. "Missing" is encoded more than one way in the
risk-factor file, so two reports are produced:
- null report: true nulls plus the placeholder token ("?")
- zero/blank report: empty strings and values numerically equal to zero
Each report is sorted by missing_fraction descending. Also a short heuristic
assessment of whether missingness appears random or systematic.
"""

import os
from typing import Dict

import pandas as pd

from .config import PLACEHOLDER_TOKEN, TARGET_COL, MISSING_THRESHOLD_PCT
from .exceptions import FormatError


def ensure_dir(path: str):
    """Create directory path if it doesn't exist."""
    os.makedirs(path, exist_ok=True)


def _check_columns(df: pd.DataFrame):
    if df.columns.duplicated().any():
        dupes = df.columns[df.columns.duplicated()].tolist()
        raise FormatError(f"Table has duplicate column names: {dupes}", column=dupes[0])


def _null_mask(series: pd.Series, token: str = PLACEHOLDER_TOKEN) -> pd.Series:
    return series.isna() | series.eq(token)


def _zero_blank_mask(series: pd.Series) -> pd.Series:
    blank = series.map(lambda v: isinstance(v, str) and v.strip() == "")
    zero = pd.to_numeric(series, errors="coerce").eq(0)
    return blank.astype(bool) | zero


def _build_table(df: pd.DataFrame, mask_fn) -> pd.DataFrame:
    total = len(df)
    rows = []
    for col in df.columns:
        miss = int(mask_fn(df[col]).sum())
        frac = miss / total if total else 0.0
        rows.append({
            "column": col,
            "missing_count": miss,
            "missing_fraction": frac,
            "complete_fraction": 1.0 - frac,
            "missing_percent": round(frac * 100, 3),
        })
    table = pd.DataFrame(rows, columns=["column", "missing_count", "missing_fraction",
                                        "complete_fraction", "missing_percent"])
    # mergesort keeps the original column order among ties
    return table.sort_values("missing_fraction", ascending=False, kind="mergesort").reset_index(drop=True)


def missing_table(df: pd.DataFrame, token: str = PLACEHOLDER_TOKEN) -> pd.DataFrame:
    """
    Build a DataFrame with columns: column, missing_count, missing_fraction,
    complete_fraction, missing_percent.
    - missing_count: number of NaNs (or None) plus placeholder tokens in the column
    - complete_fraction: 1 - missing_fraction
    Returns the table sorted by missing_fraction descending.
    """
    _check_columns(df)
    return _build_table(df, lambda s: _null_mask(s, token))


def zero_blank_table(df: pd.DataFrame) -> pd.DataFrame:
    """Same layout as missing_table, counting empty strings and numeric zeros instead."""
    _check_columns(df)
    return _build_table(df, _zero_blank_mask)


def scan(df: pd.DataFrame, token: str = PLACEHOLDER_TOKEN) -> Dict[str, pd.DataFrame]:
    """Run both integrity reports. Does not modify df."""
    return {"null": missing_table(df, token=token), "zero_blank": zero_blank_table(df)}


def save_missing_report(table: pd.DataFrame, outdir: str, filename: str = "missing_report.csv"):
    """
    Save a report produced by missing_table / zero_blank_table as CSV and as a
    readable text summary. Creates outdir if needed. Returns the path to the CSV.
    """
    ensure_dir(outdir)
    csv_path = os.path.join(outdir, filename)
    txt_path = os.path.join(outdir, filename.replace(".csv", ".txt"))

    table.to_csv(csv_path, index=False)

    with open(txt_path, "w", encoding="utf-8") as f:
        f.write("column,missing_count,missing_percent\n")
        for _, row in table.iterrows():
            f.write(f"{row['column']},{row['missing_count']},{row['missing_percent']}%\n")

    return csv_path


def heuristic_missingness_assessment(df: pd.DataFrame, token: str = PLACEHOLDER_TOKEN,
                                     target_col: str = TARGET_COL,
                                     threshold_pct: float = MISSING_THRESHOLD_PCT) -> str:
    """
    Provide a short heuristic assessment string about missingness:
    - If no column has missing values: 'no missing values'
    - If all columns are <= threshold_pct missing: 'likely random or low'
    - If one or few columns exceed the threshold: 'concentrated in columns: ...'
    - Otherwise: systematic, many columns affected
    When target_col is present the sample-wide missing percent per class is appended.
    This is a heuristic, not a formal MCAR/MNAR test.
    """
    table = missing_table(df, token=token)
    if table["missing_count"].sum() == 0:
        return "No missing values detected."

    high = table[table["missing_percent"] > threshold_pct]

    if target_col in df.columns:
        mask = df.apply(lambda s: _null_mask(s, token))
        by_target = []
        for val in sorted(df[target_col].dropna().unique()):
            subset = mask[df[target_col] == val]
            pct_missing = subset.values.sum() / subset.size * 100 if subset.size > 0 else 0
            by_target.append((val, round(pct_missing, 3)))
        target_note = "Missingness by target sample-wide percent: " + "; ".join(f"{v}:{p}%" for v, p in by_target)
    else:
        target_note = "Target column not found; cannot compare missingness by class."

    if len(high) == 0:
        return f"Missing values present but all columns <= {threshold_pct}% missing (likely low or random). {target_note}"
    elif len(high) <= 3:
        cols = ", ".join(high["column"].tolist())
        return f"Missingness concentrated in columns: {cols} (each > {threshold_pct}%). {target_note}"
    else:
        cols = ", ".join(high["column"].tolist())
        return f"Multiple columns ({len(high)}) have > {threshold_pct}% missing: {cols}. Investigate systematic causes. {target_note}"
