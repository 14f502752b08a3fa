import os
import io

import pandas as pd

from .config import TARGET_COL
from .target import label_distribution


def ensure_dir(path):
    os.makedirs(path, exist_ok=True)


def save_text(path, text):
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def save_log(lines, path):
    save_text(path, "".join(line.rstrip() + "\n" for line in lines))


def save_initial_audit(df, outdir, target_col=TARGET_COL):
    ensure_dir(outdir)

    head_text = df.head(10).to_csv(index=False)
    save_text(os.path.join(outdir, "head.txt"), head_text)

    buf = io.StringIO()
    df.info(buf=buf)
    save_text(os.path.join(outdir, "info.txt"), buf.getvalue())

    describe_text = df.describe(include="all").to_string()
    save_text(os.path.join(outdir, "describe.txt"), describe_text)

    if target_col in df.columns:
        dist = label_distribution(df, target_col)
        lines = ["Value\tCount\tPercent"]
        for val, count, pct in zip(dist[target_col], dist["count"], dist["percent"]):
            lines.append(f"{val}\t{count}\t{pct:.2f}%")
        save_text(os.path.join(outdir, "class_distribution.txt"), "\n".join(lines))
    else:
        save_text(
            os.path.join(outdir, "class_distribution.txt"),
            f"Target column '{target_col}' not found in DataFrame columns: {list(df.columns)}",
        )


def save_table(df: pd.DataFrame, path: str) -> str:
    ensure_dir(os.path.dirname(path) or ".")
    df.to_csv(path, index=False)
    return path
