"""
ranking.py
All-relevant feature selection on the repaired modeling table.

The selection itself is delegated to Boruta (boruta.BorutaPy over a random
forest). This module only guarantees that leakage columns never reach the
ranker, that the seed is fixed, and that the per-feature decisions and the
importance history come back unmodified.

Any object with rank(X, y) -> {"decisions": DataFrame, "importance_history": DataFrame}
can stand in for BorutaRanker.
"""

from typing import Dict, Optional, Sequence

import numpy as np
import pandas as pd
from boruta import BorutaPy
from sklearn.ensemble import RandomForestClassifier

from .config import (
    TARGET_COL, LEAKAGE_COLUMNS, MAX_ITERATIONS, SEED,
    BORUTA_PERC, BORUTA_ALPHA, RF_MAX_DEPTH,
)
from .exceptions import DataAssumptionError

CONFIRMED = "Confirmed"
TENTATIVE = "Tentative"
REJECTED = "Rejected"
DECISIONS = [CONFIRMED, TENTATIVE, REJECTED]


class BorutaRanker:
    """Boruta over a balanced, depth-limited random forest."""

    def __init__(self, max_iterations: int = MAX_ITERATIONS, seed: int = SEED,
                 perc: int = BORUTA_PERC, alpha: float = BORUTA_ALPHA,
                 max_depth: int = RF_MAX_DEPTH, verbose: int = 0):
        self.max_iterations = max_iterations
        self.seed = seed
        self.perc = perc
        self.alpha = alpha
        self.max_depth = max_depth
        self.verbose = verbose

    def _build_selector(self) -> BorutaPy:
        rf = RandomForestClassifier(n_jobs=-1, class_weight="balanced",
                                    max_depth=self.max_depth, random_state=self.seed)
        return BorutaPy(rf, n_estimators="auto", perc=self.perc, alpha=self.alpha,
                        max_iter=self.max_iterations, random_state=self.seed,
                        verbose=self.verbose)

    def rank(self, X: pd.DataFrame, y: pd.Series) -> Dict[str, pd.DataFrame]:
        selector = self._build_selector()
        # BorutaPy accepts numpy arrays only
        selector.fit(X.to_numpy(dtype=float), y.to_numpy())

        features = list(X.columns)
        decisions = np.where(selector.support_, CONFIRMED,
                             np.where(selector.support_weak_, TENTATIVE, REJECTED))
        decisions_df = pd.DataFrame({
            "feature": features,
            "decision": decisions,
            "rank": selector.ranking_.astype(int),
        })

        history = getattr(selector, "importance_history_", None)
        if history is None:
            history_df = pd.DataFrame(columns=features)
        else:
            history_df = pd.DataFrame(np.atleast_2d(history), columns=features)
        history_df.index.name = "iteration"

        return {"decisions": decisions_df, "importance_history": history_df}


def _check_features(X: pd.DataFrame):
    for col in X.columns:
        series = X[col]
        if not pd.api.types.is_numeric_dtype(series):
            bad = series[pd.to_numeric(series, errors="coerce").isna()]
            value = bad.iloc[0] if len(bad) else (series.iloc[0] if len(series) else None)
            raise DataAssumptionError(f"Feature '{col}' is not numeric (e.g. {value!r}); repair it before ranking",
                                      column=col, value=value)
        if series.isna().any():
            raise DataAssumptionError(f"Feature '{col}' has missing values; the ranker needs a complete table",
                                      column=col, value=None)


def rank_features(df: pd.DataFrame, label_col: str = TARGET_COL,
                  max_iterations: int = MAX_ITERATIONS, seed: int = SEED,
                  leakage_columns: Sequence[str] = LEAKAGE_COLUMNS,
                  ranker: Optional[object] = None) -> Dict:
    """
    Rank every column except label_col and the leakage columns.

    Returns a dict with keys: decisions, importance_history, features,
    excluded, seed, max_iterations. Residual Tentative decisions after
    max_iterations are a valid outcome, not an error.
    """
    if label_col not in df.columns:
        raise KeyError(f"Label column '{label_col}' not found in table")

    excluded = [c for c in leakage_columns if c in df.columns and c != label_col]
    X = df.drop(columns=[label_col] + excluded)
    y = df[label_col]

    if X.shape[1] == 0:
        raise ValueError("No candidate features left after excluding the label and leakage columns")
    if y.isna().any():
        raise DataAssumptionError(f"Label column '{label_col}' has missing values", column=label_col)
    _check_features(X)

    if ranker is None:
        ranker = BorutaRanker(max_iterations=max_iterations, seed=seed)
    result = ranker.rank(X, y)

    return {
        "decisions": result["decisions"],
        "importance_history": result["importance_history"],
        "features": list(X.columns),
        "excluded": excluded,
        "seed": seed,
        "max_iterations": max_iterations,
    }


def decision_summary(decisions: pd.DataFrame) -> Dict[str, int]:
    """Number of features per decision (all three keys always present)."""
    counts = decisions["decision"].value_counts()
    return {d: int(counts.get(d, 0)) for d in DECISIONS}
