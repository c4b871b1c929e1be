"""
Likelihood-ratio tests between nested candidate models.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterable, Sequence

import pandas as pd
from scipy import stats

from .exceptions import (
    DatasetMismatchError,
    InvalidCandidateError,
    NestingError,
    NonFiniteLikelihoodError,
)
from .extraction import CandidateModel, check_unique_identifiers


@dataclass(frozen=True)
class LRTResult:
    restricted: str
    full: str
    statistic: float
    df: int
    p_value: float


def likelihood_ratio_test(restricted: CandidateModel, full: CandidateModel) -> LRTResult:
    """
    Likelihood-ratio test of a restricted model against the model it is nested in.

    statistic = 2 * (logL_full - logL_restricted), compared with a chi-square
    distribution on k_full - k_restricted degrees of freedom.

    Parameters
    ----------
    restricted : CandidateModel
        The constrained model (e.g. a coefficient fixed at zero).
    full : CandidateModel
        The more general model.

    Returns
    -------
    LRTResult

    Raises
    ------
    NestingError
        If the full model does not have more parameters.
    DatasetMismatchError
        If the models were fit to different numbers of observations.
    NonFiniteLikelihoodError
        If either log-likelihood is NaN or infinite.
    """
    if not (restricted.is_finite and full.is_finite):
        raise NonFiniteLikelihoodError(
            f"Non-finite log-likelihood in '{restricted.identifier}' vs '{full.identifier}'"
        )
    if restricted.num_observations != full.num_observations:
        raise DatasetMismatchError(
            f"'{restricted.identifier}' (n={restricted.num_observations}) and "
            f"'{full.identifier}' (n={full.num_observations}) were fit to different data"
        )

    df = full.num_parameters - restricted.num_parameters
    if df <= 0:
        raise NestingError(
            f"'{full.identifier}' must have more parameters than '{restricted.identifier}' "
            f"(got {full.num_parameters} vs {restricted.num_parameters})"
        )

    statistic = 2.0 * (full.log_likelihood - restricted.log_likelihood)
    if statistic < 0:
        warnings.warn(
            f"Restricted model '{restricted.identifier}' fits better than '{full.identifier}'; "
            "the models may not be nested or the full fit did not converge"
        )
        p_value = 1.0
    else:
        p_value = float(stats.chi2.sf(statistic, df))

    return LRTResult(
        restricted=restricted.identifier,
        full=full.identifier,
        statistic=statistic,
        df=df,
        p_value=p_value,
    )


def likelihood_ratio_table(
    candidates: Iterable[CandidateModel],
    pairs: Sequence[tuple[str, str]],
) -> pd.DataFrame:
    """
    Likelihood-ratio tests for ``(restricted, full)`` identifier pairs.

    Returns
    -------
    pd.DataFrame
        Columns: restricted, full, statistic, df, p_value.

    Raises
    ------
    InvalidCandidateError
        If a pair names an unknown candidate or identifiers are duplicated.
    """
    candidates = list(candidates)
    check_unique_identifiers(candidates)
    by_id = {c.identifier: c for c in candidates}
    rows = []
    for restricted_id, full_id in pairs:
        unknown = [name for name in (restricted_id, full_id) if name not in by_id]
        if unknown:
            raise InvalidCandidateError(f"Unknown candidate(s) {unknown}. Available: {list(by_id)}")
        result = likelihood_ratio_test(by_id[restricted_id], by_id[full_id])
        rows.append(
            {
                "restricted": result.restricted,
                "full": result.full,
                "statistic": result.statistic,
                "df": result.df,
                "p_value": result.p_value,
            }
        )
    return pd.DataFrame(rows, columns=["restricted", "full", "statistic", "df", "p_value"])
