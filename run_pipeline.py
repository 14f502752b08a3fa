"""
run_pipeline.py
End-to-end runner. Run from project root where cervical_eda/ is importable.

Sequence:
1. Load the raw CSV
2. Missingness reports (null/placeholder and zero/blank)
3. Repair "?" columns to numeric with the sentinel
4. Derive the composite target and drop the four exam columns
5. Boruta feature ranking
6. Check that the key outputs exist
"""

import argparse
import sys
from pathlib import Path

from cervical_eda.config import RAW_CSV, REPORTS_DIR, PLACEHOLDER_TOKEN, SENTINEL_VALUE, MAX_ITERATIONS, SEED
from cervical_eda.pipeline import run_pipeline


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--csv", default=RAW_CSV, help="raw risk-factor CSV")
    parser.add_argument("--outdir", default=REPORTS_DIR, help="directory for reports and figures")
    parser.add_argument("--placeholder-token", default=PLACEHOLDER_TOKEN)
    parser.add_argument("--sentinel-value", type=float, default=SENTINEL_VALUE)
    parser.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS)
    parser.add_argument("--seed", type=int, default=SEED)
    parser.add_argument("--missing-indicators", action="store_true",
                        help="append a <column>_missing flag for every repaired column")
    parser.add_argument("--no-figures", action="store_true")
    return parser.parse_args(argv)


def check_expected_outputs(paths):
    errs = [p for key, p in paths.items() if key != "figures" and not Path(p).exists()]
    if errs:
        print("Warning: expected outputs missing:")
        for e in errs:
            print(" -", e)
    else:
        print("All key outputs present.")


def main(argv=None):
    args = parse_args(argv)
    try:
        res = run_pipeline(
            csv_path=args.csv,
            outdir=args.outdir,
            token=args.placeholder_token,
            sentinel=args.sentinel_value,
            max_iterations=args.max_iterations,
            seed=args.seed,
            add_indicators=args.missing_indicators,
            make_figures=not args.no_figures,
        )
    except Exception as e:
        print("Pipeline failed:", e)
        sys.exit(1)

    print("Repaired columns:", len(res["repaired_columns"]))
    print("Modeling table:", res["modeling"].shape)
    print("Feature decisions:")
    for _, row in res["ranking"]["decisions"].sort_values("rank").iterrows():
        print(f"- {row['feature']}: {row['decision']} (rank {row['rank']})")
    print("Decision counts:", res["summary"])
    check_expected_outputs(res["paths"])
    print("Pipeline finished successfully.")


if __name__ == "__main__":
    main()
