"""
eda.py
Functions to create and save the report figures:
- missingness bar chart (from a missing_table report)
- histograms of numeric risk factors
- countplot of the composite target
- correlation heatmap
- Boruta importance boxplot
Each plotting function saves a PNG into the provided outdir and returns the filepath.
"""

import os
from typing import List, Sequence, Optional

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd

from .config import SENTINEL_VALUE, TARGET_COL

sns.set(style="whitegrid", context="talk")

DECISION_COLORS = {"Confirmed": "#31a354", "Tentative": "#feb24c", "Rejected": "#de2d26"}


def ensure_dir(path: str):
    """Create directory if missing."""
    os.makedirs(path, exist_ok=True)


def _save_fig(fig, filepath: str):
    """Tighten, save and close a Matplotlib figure to avoid memory leaks."""
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_missingness(report: pd.DataFrame, outdir: str, filename: str = "missingness.png",
                     title: str = "Missing values per column") -> str:
    """Horizontal bar of missing_percent for columns with any missing value."""
    ensure_dir(outdir)
    shown = report[report["missing_count"] > 0]
    fig, ax = plt.subplots(figsize=(8, max(3, 0.35 * len(shown) + 1)))
    if len(shown):
        sns.barplot(x="missing_percent", y="column", data=shown, color="#2b8cbe", ax=ax)
    ax.set_title(title)
    ax.set_xlabel("Missing (%)")
    ax.set_ylabel("")
    return _save_fig(fig, os.path.join(outdir, filename))


def plot_histograms(df: pd.DataFrame, cols: Sequence[str], outdir: str,
                    sentinel: Optional[float] = SENTINEL_VALUE) -> List[str]:
    """One histogram per column; sentinel-filled rows are left out. Returns list of filepaths."""
    ensure_dir(outdir)
    saved = []
    for col in cols:
        if col not in df.columns:
            continue
        values = df[col].dropna()
        if sentinel is not None:
            values = values[values != sentinel]
        fig, ax = plt.subplots(figsize=(6, 4))
        sns.histplot(values, kde=True, ax=ax, color="#2b8cbe")
        ax.set_title(f"Histogram of {col}")
        ax.set_xlabel(col)
        ax.set_ylabel("Count")
        safe = col.replace(" ", "_").replace("(", "").replace(")", "").replace(":", "")
        path = os.path.join(outdir, f"hist_{safe}.png")
        saved.append(_save_fig(fig, path))
    return saved


def plot_label_distribution(df: pd.DataFrame, outdir: str, label_col: str = TARGET_COL) -> str:
    """Countplot of the composite label."""
    ensure_dir(outdir)
    fig, ax = plt.subplots(figsize=(6, 4))
    sns.countplot(x=df[label_col], order=sorted(df[label_col].dropna().unique()), color="#756bb1", ax=ax)
    ax.set_title("Number of positive exam results")
    ax.set_xlabel(label_col)
    ax.set_ylabel("Count")
    return _save_fig(fig, os.path.join(outdir, f"count_{label_col}.png"))


def plot_corr_heatmap(df: pd.DataFrame, cols: Sequence[str], outdir: str, annot: bool = False) -> str:
    """Compute correlation matrix over cols, plot heatmap, save and return filepath."""
    ensure_dir(outdir)
    corr = df[list(cols)].corr()
    size = max(6, 0.4 * len(cols))
    fig, ax = plt.subplots(figsize=(size, size * 0.8))
    sns.heatmap(corr, annot=annot, fmt=".2f", cmap="vlag", center=0, ax=ax)
    ax.set_title("Correlation heatmap")
    return _save_fig(fig, os.path.join(outdir, "corr_heatmap.png"))


def plot_importance_history(history: pd.DataFrame, decisions: pd.DataFrame, outdir: str) -> str:
    """
    Boxplot of the per-iteration Boruta importances, one box per feature,
    ordered by median importance and coloured by decision.
    """
    ensure_dir(outdir)
    long = history.reset_index(drop=True).melt(var_name="feature", value_name="importance").dropna()
    long = long[long["importance"] > 0]
    fig, ax = plt.subplots(figsize=(8, max(4, 0.35 * history.shape[1] + 1)))
    if len(long):
        order = long.groupby("feature")["importance"].median().sort_values(ascending=False).index.tolist()
        hue = dict(zip(decisions["feature"], decisions["decision"]))
        long["decision"] = long["feature"].map(hue)
        sns.boxplot(x="importance", y="feature", hue="decision", data=long, order=order,
                    palette=DECISION_COLORS, dodge=False, ax=ax)
    ax.set_title("Boruta importance history")
    ax.set_xlabel("Importance")
    ax.set_ylabel("")
    return _save_fig(fig, os.path.join(outdir, "boruta_importance.png"))
