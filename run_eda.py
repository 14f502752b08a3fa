"""
run_eda.py
Descriptive figures for the repaired table: missingness, histograms of the
main numeric risk factors, target distribution and correlation heatmap.
Run from project root (where cervical_eda/ is importable).
"""

import os

from cervical_eda.config import RAW_CSV, FIGS_DIR, REPORTS_DIR, NUMERICAL, TARGET_COL
from cervical_eda.load_data import load_data, clean_column_names
from cervical_eda.missing import missing_table
from cervical_eda.repair import repair_placeholders
from cervical_eda.target import derive_label
import cervical_eda.eda as eda

FIG_DIR = FIGS_DIR
REPORT_SUMMARY = os.path.join(REPORTS_DIR, "eda_summary.txt")


def write_observations(obs_lines, outpath):
    """Write observation lines to a summary text file overwriting any existing file."""
    os.makedirs(os.path.dirname(outpath), exist_ok=True)
    with open(outpath, "w", encoding="utf-8") as f:
        for line in obs_lines:
            f.write(line + "\n")


def main():
    raw = clean_column_names(load_data(RAW_CSV))
    repaired, repaired_cols = repair_placeholders(raw)
    df = derive_label(repaired)

    eda.plot_missingness(missing_table(raw), FIG_DIR)
    eda.plot_histograms(df, NUMERICAL, FIG_DIR)
    eda.plot_label_distribution(df, FIG_DIR)
    eda.plot_corr_heatmap(df, NUMERICAL + [TARGET_COL], FIG_DIR, annot=True)

    observations = [
        f"Placeholder columns repaired: {len(repaired_cols)} of {raw.shape[1]}.",
        "Missingness: the two STD diagnosis-time columns are almost entirely '?', check the missingness figure.",
        "Histograms: age and number of pregnancies are right skewed; sentinel rows are excluded from the plots.",
        "Target: most subjects have 0 positive exams, so classes 1-4 are small.",
        "Correlation heatmap: inspect smoking and hormonal contraceptive years against the target.",
    ]

    write_observations(observations, REPORT_SUMMARY)
    print("EDA finished. Figures saved to:", FIG_DIR)
    print("EDA summary saved to:", REPORT_SUMMARY)


if __name__ == "__main__":
    main()
