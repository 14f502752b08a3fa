import os

# Reproducibility
SEED = 42

# File locations
RAW_CSV = os.path.join("data", "raw", "risk_factors_cervical_cancer.csv")
REPORTS_DIR = "reports"
FIGS_DIR = os.path.join(REPORTS_DIR, "figs")

# Missing value encoding
PLACEHOLDER_TOKEN = "?"     # raw file uses "?" for unanswered questions
SENTINEL_VALUE = -1.0       # outside the range of every affected variable (counts, ages, years, 0/1 flags)
ADD_MISSING_INDICATORS = False

# Target derivation
EXAM_COLUMNS = ["Hinselmann", "Schiller", "Citology", "Biopsy"]
TARGET_COL = "target"       # sum of the four exam results, 0..4

# Columns that must never reach the feature ranker
LEAKAGE_COLUMNS = list(EXAM_COLUMNS)

# Boruta settings
MAX_ITERATIONS = 200
BORUTA_PERC = 100           # percentile of shadow importance used as the threshold
BORUTA_ALPHA = 0.05
RF_MAX_DEPTH = 5

# Missingness assessment
MISSING_THRESHOLD_PCT = 5.0

# Features plotted in the EDA figures
NUMERICAL = [
    "Age",
    "Number of sexual partners",
    "First sexual intercourse",
    "Num of pregnancies",
    "Smokes (years)",
    "Hormonal Contraceptives (years)",
]
