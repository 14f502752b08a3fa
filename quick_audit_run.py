# quick_audit_run.py: audit of the modeling table (head, info, describe, target distribution)
from cervical_eda.config import RAW_CSV, REPORTS_DIR
from cervical_eda.load_data import load_data, clean_column_names
from cervical_eda.repair import repair_placeholders
from cervical_eda.target import derive_label
from cervical_eda.utils import save_initial_audit

df_raw = clean_column_names(load_data(RAW_CSV))
df_repaired, _ = repair_placeholders(df_raw)
df_model = derive_label(df_repaired)

save_initial_audit(df_model, REPORTS_DIR, target_col="target")
print("Initial audit saved to reports/ (head.txt, info.txt, describe.txt, class_distribution.txt)")
