"""
run_missing.py
Run only the missing-value reports and heuristic assessment on the raw file.
"""

import os

from cervical_eda.config import RAW_CSV, REPORTS_DIR
from cervical_eda.load_data import load_data, clean_column_names
from cervical_eda.missing import scan, save_missing_report, heuristic_missingness_assessment


def main():
    df = clean_column_names(load_data(RAW_CSV))
    reports = scan(df)
    csv_path = save_missing_report(reports["null"], REPORTS_DIR, "missing_report.csv")
    zb_path = save_missing_report(reports["zero_blank"], REPORTS_DIR, "zero_blank_report.csv")
    note = heuristic_missingness_assessment(df)
    with open(os.path.join(REPORTS_DIR, "missing_assessment.txt"), "w", encoding="utf-8") as f:
        f.write(note + "\n")
    print("Missing report saved to:", csv_path)
    print("Zero/blank report saved to:", zb_path)
    print("Missingness assessment:", note)


if __name__ == "__main__":
    main()
