"""
repair.py
Rewrite placeholder-encoded columns ("?" in the raw file) to numeric.

Every placeholder becomes a fixed sentinel (-1.0 by default) and the column is
coerced to a numeric dtype. Coercion is checked per column: a residual value
that is neither the placeholder nor a number raises FormatError instead of
silently turning into NaN.
"""

from typing import Iterable, List

import pandas as pd

from .config import PLACEHOLDER_TOKEN, SENTINEL_VALUE
from .exceptions import FormatError, DataAssumptionError


def find_placeholder_columns(df: pd.DataFrame, token: str = PLACEHOLDER_TOKEN) -> List[str]:
    """Columns holding at least one placeholder token, in table order."""
    return [col for col in df.columns if df[col].eq(token).any()]


def _repair_column(series: pd.Series, token: str, sentinel: float) -> pd.Series:
    col = series.name
    is_token = series.eq(token)

    legit = series[~is_token & series.notna()]
    coerced = pd.to_numeric(legit, errors="coerce")
    failed = coerced.isna()
    if failed.any():
        value = legit[failed].iloc[0]
        raise FormatError(
            f"Column '{col}' has non-numeric value {value!r} after placeholder substitution",
            column=col, value=value,
        )
    if coerced.eq(sentinel).any():
        raise DataAssumptionError(
            f"Column '{col}' already contains the sentinel {sentinel} as a real value; "
            f"repaired rows would be indistinguishable",
            column=col, value=sentinel,
        )

    return pd.to_numeric(series.where(~is_token, sentinel))


def repair(df: pd.DataFrame, columns: Iterable[str], token: str = PLACEHOLDER_TOKEN,
           sentinel: float = SENTINEL_VALUE, add_indicators: bool = False) -> pd.DataFrame:
    """
    Return a copy of df where each column in columns has every token replaced
    by sentinel and is coerced to numeric.

    Columns that are already numeric and hold no token are left as they are,
    so repairing a repaired table is a no-op. With add_indicators=True a 0/1
    column named "<column>_missing" is appended for each column that held tokens.
    Raises FormatError naming the column and value when coercion fails; df is
    never modified.
    """
    out = df.copy()
    for col in columns:
        series = out[col]
        is_token = series.eq(token)
        if not is_token.any() and pd.api.types.is_numeric_dtype(series):
            continue
        out[col] = _repair_column(series, token, sentinel)
        if add_indicators and is_token.any():
            out[f"{col}_missing"] = is_token.astype(int)
    return out


def repair_placeholders(df: pd.DataFrame, token: str = PLACEHOLDER_TOKEN,
                        sentinel: float = SENTINEL_VALUE, add_indicators: bool = False):
    """Find and repair every placeholder column. Returns (repaired_df, repaired_columns)."""
    columns = find_placeholder_columns(df, token=token)
    return repair(df, columns, token=token, sentinel=sentinel, add_indicators=add_indicators), columns
