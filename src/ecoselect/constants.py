"""
Global constants and defaults for ecoselect.
"""

# Information criteria
CRITERIA = ["AIC", "AICc", "BIC"]
AUTO_CRITERION = "auto"
DEFAULT_CRITERION = "AIC"
AICC_RATIO_THRESHOLD = 40  # n / k below this calls for AICc

# Ranking
WEIGHT_TOLERANCE = 1e-9
DEFAULT_CONFIDENCE_LEVEL = 0.95

# Non-finite log-likelihood handling
NONFINITE_POLICIES = ["raise", "drop"]
DEFAULT_NONFINITE_POLICY = "raise"

# Summary table column aliases (after sanitize_columns, matched case-insensitively)
IDENTIFIER_ALIASES = ["model", "identifier", "name", "id", "candidate"]
LOGLIK_ALIASES = ["log_likelihood", "loglik", "log_lik", "llf", "value"]
NPARAM_ALIASES = ["num_parameters", "df", "k", "n_params", "npar"]
NOBS_ALIASES = ["num_observations", "nobs", "n", "n_obs"]

# Column Sanitization
COL_REPLACE_MAP = {
    " ": "_",
    "-": "_",
    "(": "",
    ")": "",
    ":": "_",
    "/": "_",
    ".": "_",
    "*": "",
}

# CLI output files
SELECTION_TABLE_FILE = "model_selection.csv"
CONFIDENCE_SET_FILE = "confidence_set.csv"
LRT_TABLE_FILE = "likelihood_ratio_tests.csv"
