import csv
import os

import pandas as pd

from .exceptions import FormatError


def _check_rows(reader, csv_path):
    header = next(reader, None)
    if not header:
        raise FormatError(f"CSV has no header row: {csv_path}")

    names = [h.strip() for h in header]
    if any(name == "" for name in names):
        raise FormatError(f"CSV header contains a blank column name: {header}")
    seen = set()
    for name in names:
        if name in seen:
            raise FormatError(f"CSV header contains duplicate column name: {name!r}", column=name)
        seen.add(name)

    for row in reader:
        if not row:
            # blank lines are skipped by pandas as well
            continue
        if len(row) != len(header):
            raise FormatError(
                f"Line {reader.line_num}: expected {len(header)} fields, found {len(row)}",
                value=row,
            )
    return names


def _validate_structure(csv_path):
    """Check the header and that every data row has as many fields as the header."""
    try:
        with open(csv_path, "r", encoding="utf-8", newline="") as f:
            return _check_rows(csv.reader(f), csv_path)
    except UnicodeDecodeError as e:
        raise FormatError(f"CSV is not valid UTF-8: {csv_path} ({e.reason} at byte {e.start})") from e


def load_data(csv_path):
    if not os.path.isfile(csv_path):
        raise FileNotFoundError(f"CSV not found at: {csv_path}")

    _validate_structure(csv_path)
    df = pd.read_csv(csv_path)

    df_raw = df.copy()

    return df_raw


def clean_column_names(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with surrounding whitespace stripped from column names."""
    renamed = [str(c).strip() for c in df.columns]
    if len(set(renamed)) != len(renamed):
        dupes = sorted({c for c in renamed if renamed.count(c) > 1})
        raise FormatError(f"Stripping column names produced duplicates: {dupes}", column=dupes[0])
    out = df.copy()
    out.columns = renamed
    return out
