"""
ecoselect - Information-criterion model selection for ecology and evolution.

This package ranks candidate statistical models fitted to the same data by
AIC, AICc or BIC, derives Akaike weights and model confidence sets, and
runs likelihood-ratio tests between nested candidates. Model fitting stays
with statsmodels (or any other library); only fit summaries are consumed.
"""

from .constants import *
from .criteria import (
    CriterionRow,
    aic,
    aicc,
    bic,
    choose_criterion,
    criterion_row,
    criterion_rows,
    needs_small_sample_correction,
)
from .data_loader import (
    coerce_numeric_columns,
    load_summary_table,
    sanitize_columns,
)
from .exceptions import (
    DatasetMismatchError,
    DomainError,
    EmptySetError,
    InsufficientObservationsError,
    InvalidCandidateError,
    MixedCriterionError,
    ModelSelectionError,
    NestingError,
    NonFiniteLikelihoodError,
)
from .extraction import (
    CandidateModel,
    candidates_from_fits,
    candidates_from_frame,
    check_unique_identifiers,
    count_parameters,
    extract_candidate,
)
from .nested import (
    LRTResult,
    likelihood_ratio_table,
    likelihood_ratio_test,
)
from .ranking import (
    SelectionRow,
    akaike_weights,
    check_same_observations,
    confidence_set,
    model_selection_table,
    rank_rows,
    select_models,
    selection_frame,
)

__version__ = "1.0.0"
__author__ = "Ecoselect Team"

__all__ = [
    # Candidate records
    "CandidateModel",
    "extract_candidate",
    "candidates_from_fits",
    "candidates_from_frame",
    "count_parameters",
    "check_unique_identifiers",
    # Criteria
    "CriterionRow",
    "aic",
    "aicc",
    "bic",
    "choose_criterion",
    "criterion_row",
    "criterion_rows",
    "needs_small_sample_correction",
    # Ranking
    "SelectionRow",
    "akaike_weights",
    "rank_rows",
    "select_models",
    "selection_frame",
    "model_selection_table",
    "confidence_set",
    "check_same_observations",
    # Nested models
    "LRTResult",
    "likelihood_ratio_test",
    "likelihood_ratio_table",
    # Data loading
    "load_summary_table",
    "sanitize_columns",
    "coerce_numeric_columns",
    # Errors
    "ModelSelectionError",
    "DomainError",
    "EmptySetError",
    "MixedCriterionError",
    "DatasetMismatchError",
    "NonFiniteLikelihoodError",
    "NestingError",
    "InvalidCandidateError",
    "InsufficientObservationsError",
]
