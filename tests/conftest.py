"""Shared fixtures: small risk-factor tables shaped like the raw CSV."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

EXAMS = ["Hinselmann", "Schiller", "Citology", "Biopsy"]


@pytest.fixture
def scenario_df():
    """Three-row table: one placeholder column and four exams."""
    return pd.DataFrame({
        "A": ["?", "5", "3"],
        "Hinselmann": [1, 0, 0],
        "Schiller": [0, 0, 0],
        "Citology": [0, 1, 0],
        "Biopsy": [0, 0, 0],
    })


@pytest.fixture
def raw_df():
    """Mixed table as read_csv returns it: "?" keeps columns as text."""
    return pd.DataFrame({
        "Age": [18, 15, 34, 52, 46],
        "Number of sexual partners": ["4.0", "1.0", "1.0", "5.0", "?"],
        "Smokes (years)": ["0.0", "0.0", "?", "37.0", "0.0"],
        "STDs: Time since first diagnosis": ["?", "?", "?", "?", "21.0"],
        "Dx:Cancer": [0, 0, 0, 1, 0],
        "Hinselmann": [0, 0, 1, 1, 0],
        "Schiller": [0, 0, 1, 1, 1],
        "Citology": [0, 0, 0, 1, 0],
        "Biopsy": [0, 0, 0, 1, 1],
    })


@pytest.fixture
def raw_csv(tmp_path, raw_df):
    path = tmp_path / "risk_factors.csv"
    raw_df.to_csv(path, index=False)
    return str(path)


@pytest.fixture
def informative_df():
    """
    120 rows where 'signal' drives the label and 'noise_*' columns are random.
    Large enough for Boruta to confirm the signal in a handful of iterations.
    """
    rng = np.random.RandomState(0)
    n = 120
    label = rng.randint(0, 2, size=n)
    return pd.DataFrame({
        "signal": label * 5.0 + rng.normal(0, 0.5, size=n),
        "noise_1": rng.normal(size=n),
        "noise_2": rng.normal(size=n),
        "target": label,
    })


class StubRanker:
    """Records what it was given and confirms everything."""

    def __init__(self):
        self.X = None
        self.y = None

    def rank(self, X, y):
        self.X = X.copy()
        self.y = y.copy()
        decisions = pd.DataFrame({
            "feature": list(X.columns),
            "decision": ["Confirmed"] * X.shape[1],
            "rank": [1] * X.shape[1],
        })
        history = pd.DataFrame([[1.0] * X.shape[1]], columns=list(X.columns))
        history.index.name = "iteration"
        return {"decisions": decisions, "importance_history": history}


@pytest.fixture
def stub_ranker():
    return StubRanker()
