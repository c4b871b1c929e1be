"""
Fit summary extraction.

Turns fitted models (statsmodels results, lightweight objects, mappings or
rows of a summary table) into immutable candidate records exposing exactly
the three quantities the criteria need.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
import pandas as pd
from statsmodels.genmod import families
from statsmodels.genmod.generalized_linear_model import GLM
from statsmodels.regression.linear_model import RegressionModel
from statsmodels.regression.mixed_linear_model import MixedLM

from .constants import IDENTIFIER_ALIASES, LOGLIK_ALIASES, NOBS_ALIASES, NPARAM_ALIASES
from .exceptions import InsufficientObservationsError, InvalidCandidateError

_SCALED_GLM_FAMILIES = (families.Gaussian, families.Gamma, families.InverseGaussian)


def _as_count(value: Any, field: str, identifier: str) -> int:
    """Convert an integral value (int, numpy int, 3.0) to int."""
    try:
        as_float = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCandidateError(
            f"Candidate '{identifier}': {field} must be an integer, got {value!r}"
        ) from exc
    if not np.isfinite(as_float) or not as_float.is_integer():
        raise InvalidCandidateError(
            f"Candidate '{identifier}': {field} must be an integer, got {value!r}"
        )
    return int(as_float)


@dataclass(frozen=True)
class CandidateModel:
    """Summary of one fitted candidate model."""

    identifier: str
    log_likelihood: float
    num_parameters: int
    num_observations: int

    def __post_init__(self) -> None:
        identifier = str(self.identifier)
        try:
            log_likelihood = float(self.log_likelihood)
        except (TypeError, ValueError) as exc:
            raise InvalidCandidateError(
                f"Candidate '{identifier}': log_likelihood must be a number, "
                f"got {self.log_likelihood!r}"
            ) from exc

        k = _as_count(self.num_parameters, "num_parameters", identifier)
        n = _as_count(self.num_observations, "num_observations", identifier)
        if k < 1:
            raise InvalidCandidateError(f"Candidate '{identifier}': num_parameters must be >= 1, got {k}")
        if n < 1:
            raise InvalidCandidateError(f"Candidate '{identifier}': num_observations must be >= 1, got {n}")
        if n < k + 2:
            raise InsufficientObservationsError(
                f"Candidate '{identifier}': num_observations ({n}) must be at least "
                f"num_parameters + 2 ({k + 2})"
            )

        object.__setattr__(self, "identifier", identifier)
        object.__setattr__(self, "log_likelihood", log_likelihood)
        object.__setattr__(self, "num_parameters", k)
        object.__setattr__(self, "num_observations", n)

    @property
    def is_finite(self) -> bool:
        return bool(np.isfinite(self.log_likelihood))


def _estimates_scale(model: Any) -> bool:
    """True when the fitted model estimates a residual scale not listed in ``params``."""
    if isinstance(model, (RegressionModel, MixedLM)):
        return True
    if isinstance(model, GLM):
        return isinstance(model.family, _SCALED_GLM_FAMILIES)
    return False


def count_parameters(fit: Any) -> int:
    """
    Count the free parameters of a fitted statsmodels model.

    Estimated coefficients plus one for an estimated residual scale
    (linear models, linear mixed models, Gaussian/Gamma/inverse Gaussian
    GLMs), the same convention as the ``df`` of R's ``logLik``.

    Parameters
    ----------
    fit
        statsmodels results object with ``params`` and ``model``.

    Returns
    -------
    int
        Number of free parameters.
    """
    k = int(np.size(np.asarray(fit.params)))
    if _estimates_scale(getattr(fit, "model", None)):
        k += 1
    return k


def _lookup(mapping: Mapping, aliases: list[str]) -> Any:
    lowered = {str(key).lower(): key for key in mapping}
    for alias in aliases:
        key = lowered.get(alias.lower())
        if key is not None:
            return mapping[key]
    return None


def _first_attr(obj: Any, names: list[str]) -> Any:
    for name in names:
        value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def extract_candidate(
    identifier: str,
    fit: Any,
    num_parameters: Optional[int] = None,
    num_observations: Optional[int] = None,
) -> CandidateModel:
    """
    Build a candidate record from a fitted model.

    Accepts statsmodels results (``llf``, ``nobs``, ``params``), objects
    with ``loglik``/``llf``, ``nobs`` and ``df`` attributes, or mappings
    keyed by any of the known aliases (``logLik``, ``df``, ``nobs``...).

    Parameters
    ----------
    identifier : str
        Name of the candidate in the comparison.
    fit
        Fitted model or summary.
    num_parameters : Optional[int]
        Overrides the extracted parameter count.
    num_observations : Optional[int]
        Overrides the extracted observation count.

    Returns
    -------
    CandidateModel

    Raises
    ------
    InvalidCandidateError
        If a required quantity cannot be found.
    """
    if isinstance(fit, Mapping):
        log_likelihood = _lookup(fit, LOGLIK_ALIASES)
        k = _lookup(fit, NPARAM_ALIASES)
        n = _lookup(fit, NOBS_ALIASES)
    else:
        log_likelihood = _first_attr(fit, ["llf", "loglik", "log_likelihood"])
        n = _first_attr(fit, ["nobs", "num_observations"])
        if hasattr(fit, "params") and hasattr(fit, "model"):
            k = count_parameters(fit)
        else:
            k = _first_attr(fit, ["df", "num_parameters"])

    if num_parameters is not None:
        k = num_parameters
    if num_observations is not None:
        n = num_observations

    missing = [
        name
        for name, value in [
            ("log_likelihood", log_likelihood),
            ("num_parameters", k),
            ("num_observations", n),
        ]
        if value is None
    ]
    if missing:
        raise InvalidCandidateError(
            f"Candidate '{identifier}': could not extract {', '.join(missing)} "
            f"from {type(fit).__name__}"
        )

    return CandidateModel(
        identifier=identifier,
        log_likelihood=log_likelihood,
        num_parameters=k,
        num_observations=n,
    )


def candidates_from_fits(fits: Mapping[str, Any]) -> list[CandidateModel]:
    """Extract candidates from an ``identifier -> fit`` mapping, keeping its order."""
    return [extract_candidate(name, fit) for name, fit in fits.items()]


def check_unique_identifiers(candidates: Sequence[CandidateModel]) -> None:
    """Raise InvalidCandidateError if two candidates share an identifier."""
    seen = set()
    duplicated = []
    for c in candidates:
        if c.identifier in seen and c.identifier not in duplicated:
            duplicated.append(c.identifier)
        seen.add(c.identifier)
    if duplicated:
        raise InvalidCandidateError(f"Duplicate candidate identifier(s): {duplicated}")


def resolve_column(df: pd.DataFrame, aliases: list[str]) -> Optional[str]:
    """First column of ``df`` matching one of ``aliases`` (case-insensitive), or None."""
    lowered = {str(col).lower(): col for col in df.columns}
    for alias in aliases:
        col = lowered.get(alias.lower())
        if col is not None:
            return col
    return None


def candidates_from_frame(
    df: pd.DataFrame,
    num_observations: Optional[int] = None,
) -> list[CandidateModel]:
    """
    Build candidates from a summary table with one row per model.

    Parameters
    ----------
    df : pd.DataFrame
        Summary table. Column names are matched against the identifier,
        log-likelihood, parameter-count and observation-count aliases.
    num_observations : Optional[int]
        Observation count shared by all models, used when the table has
        no observation column (or to override it).

    Returns
    -------
    list[CandidateModel]
        Candidates in row order.

    Raises
    ------
    InvalidCandidateError
        If a required column is missing or two rows share a model name.
    """
    id_col = resolve_column(df, IDENTIFIER_ALIASES)
    ll_col = resolve_column(df, LOGLIK_ALIASES)
    k_col = resolve_column(df, NPARAM_ALIASES)
    n_col = resolve_column(df, NOBS_ALIASES)

    missing = []
    if ll_col is None:
        missing.append("log-likelihood")
    if k_col is None:
        missing.append("parameter count")
    if n_col is None and num_observations is None:
        missing.append("observation count")
    if missing:
        raise InvalidCandidateError(
            f"Summary table lacks {', '.join(missing)} column(s). "
            f"Available: {list(df.columns)}"
        )

    candidates = []
    for position, (_, row) in enumerate(df.iterrows(), start=1):
        identifier = row[id_col] if id_col is not None else f"model_{position}"
        candidates.append(
            CandidateModel(
                identifier=identifier,
                log_likelihood=row[ll_col],
                num_parameters=row[k_col],
                num_observations=num_observations if num_observations is not None else row[n_col],
            )
        )
    check_unique_identifiers(candidates)
    return candidates
