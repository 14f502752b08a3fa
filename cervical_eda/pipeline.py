"""
pipeline.py
End-to-end driver. Each stage gets the table returned by the previous one:

    load_data -> scan (side report)
    load_data -> repair -> derive_label -> rank_features

Writes the missingness reports, an audit of the modeling table, the modeling
table itself, the Boruta decisions and importance history, figures, and a
plain-text pipeline log under outdir.
"""

import os
from typing import Dict, Optional, Sequence

from .config import (
    RAW_CSV, REPORTS_DIR, PLACEHOLDER_TOKEN, SENTINEL_VALUE, MAX_ITERATIONS, SEED,
    EXAM_COLUMNS, TARGET_COL, LEAKAGE_COLUMNS, ADD_MISSING_INDICATORS, NUMERICAL,
    MISSING_THRESHOLD_PCT,
)
from .load_data import load_data, clean_column_names
from .missing import scan, save_missing_report, heuristic_missingness_assessment
from .repair import repair_placeholders
from .target import derive_label
from .ranking import rank_features, decision_summary
from .utils import save_initial_audit, save_log, save_table, save_text
from . import eda


def run_pipeline(csv_path: str = RAW_CSV, outdir: str = REPORTS_DIR,
                 token: str = PLACEHOLDER_TOKEN, sentinel: float = SENTINEL_VALUE,
                 max_iterations: int = MAX_ITERATIONS, seed: int = SEED,
                 exam_columns: Sequence[str] = EXAM_COLUMNS, label_col: str = TARGET_COL,
                 leakage_columns: Optional[Sequence[str]] = None,
                 add_indicators: bool = ADD_MISSING_INDICATORS,
                 ranker: Optional[object] = None, make_figures: bool = True) -> Dict:
    """
    Run every stage and save artifacts. Returns a dict with the intermediate
    tables (raw, repaired, modeling), the two missingness reports, the ranking
    result and a "paths" dict of written files. Errors from any stage propagate.
    Nothing is written until ranking has succeeded.
    """
    if leakage_columns is None:
        leakage_columns = list(dict.fromkeys(list(exam_columns) + LEAKAGE_COLUMNS))

    results_dir = os.path.join(outdir, "results")
    figs_dir = os.path.join(outdir, "figs")
    paths = {}

    raw = clean_column_names(load_data(csv_path))
    reports = scan(raw, token=token)

    repaired, repaired_cols = repair_placeholders(raw, token=token, sentinel=sentinel,
                                                  add_indicators=add_indicators)
    modeling = derive_label(repaired, exam_columns, label_col=label_col)

    ranking = rank_features(modeling, label_col=label_col, max_iterations=max_iterations, seed=seed,
                            leakage_columns=leakage_columns, ranker=ranker)
    summary = decision_summary(ranking["decisions"])

    note = heuristic_missingness_assessment(raw.assign(**{label_col: modeling[label_col]}), token=token,
                                            target_col=label_col, threshold_pct=MISSING_THRESHOLD_PCT)

    paths["missing_report"] = save_missing_report(reports["null"], outdir, "missing_report.csv")
    paths["zero_blank_report"] = save_missing_report(reports["zero_blank"], outdir, "zero_blank_report.csv")
    paths["missing_assessment"] = os.path.join(outdir, "missing_assessment.txt")
    save_text(paths["missing_assessment"], note + "\n")

    save_initial_audit(modeling, outdir, target_col=label_col)
    paths["modeling_table"] = save_table(modeling, os.path.join(outdir, "processed", "modeling_table.csv"))

    paths["decisions"] = save_table(ranking["decisions"], os.path.join(results_dir, "feature_decisions.csv"))
    paths["importance_history"] = os.path.join(results_dir, "importance_history.csv")
    ranking["importance_history"].to_csv(paths["importance_history"])

    if make_figures:
        paths["figures"] = [
            eda.plot_missingness(reports["null"], figs_dir),
            eda.plot_label_distribution(modeling, figs_dir, label_col=label_col),
            eda.plot_corr_heatmap(modeling, ranking["features"] + [label_col], figs_dir),
            eda.plot_importance_history(ranking["importance_history"], ranking["decisions"], figs_dir),
        ] + eda.plot_histograms(modeling, NUMERICAL, figs_dir, sentinel=sentinel)

    log_lines = [
        f"csv_path: {csv_path}",
        f"rows: {raw.shape[0]}",
        f"raw_columns: {raw.shape[1]}",
        f"placeholder_token: {token!r}",
        f"sentinel_value: {sentinel}",
        f"repaired_columns: {repaired_cols}",
        f"missing_indicators: {add_indicators}",
        f"exam_columns_dropped: {list(exam_columns)}",
        f"label_column: {label_col}",
        f"excluded_from_ranking: {ranking['excluded']}",
        f"ranked_features: {len(ranking['features'])}",
        f"max_iterations: {max_iterations}",
        f"seed: {seed}",
        f"decisions: {summary}",
    ]
    paths["log"] = os.path.join(outdir, "pipeline_log.txt")
    save_log(log_lines, paths["log"])

    return {
        "raw": raw,
        "repaired": repaired,
        "modeling": modeling,
        "reports": reports,
        "repaired_columns": repaired_cols,
        "ranking": ranking,
        "summary": summary,
        "paths": paths,
    }
