"""
Information criteria for candidate models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .constants import AICC_RATIO_THRESHOLD, AUTO_CRITERION, CRITERIA
from .exceptions import DomainError
from .extraction import CandidateModel


def aic(log_likelihood: float, num_parameters: int) -> float:
    """Akaike Information Criterion, -2*logL + 2*k."""
    return -2.0 * log_likelihood + 2.0 * num_parameters


def aicc(log_likelihood: float, num_parameters: int, num_observations: int) -> float:
    """
    Small-sample corrected AIC.

    AICc = AIC + 2k(k+1) / (n - k - 1)

    Parameters
    ----------
    log_likelihood : float
        Maximized log-likelihood.
    num_parameters : int
        Number of free parameters (k).
    num_observations : int
        Number of observations (n).

    Returns
    -------
    float
        AICc value.

    Raises
    ------
    DomainError
        If n - k - 1 <= 0, where the correction term is undefined.
    """
    k = num_parameters
    denominator = num_observations - k - 1
    if denominator <= 0:
        raise DomainError(
            f"AICc is undefined for n={num_observations}, k={k}: "
            f"n - k - 1 = {denominator} must be positive"
        )
    return aic(log_likelihood, k) + (2.0 * k * (k + 1)) / denominator


def bic(log_likelihood: float, num_parameters: int, num_observations: int) -> float:
    """Bayesian Information Criterion, -2*logL + ln(n)*k."""
    return -2.0 * log_likelihood + np.log(num_observations) * num_parameters


def needs_small_sample_correction(
    candidate: CandidateModel,
    ratio: float = AICC_RATIO_THRESHOLD,
) -> bool:
    """True when observations per parameter fall below ``ratio``."""
    return candidate.num_observations / candidate.num_parameters < ratio


def choose_criterion(candidates: Iterable[CandidateModel], criterion: str = AUTO_CRITERION) -> str:
    """
    Resolve the criterion used for a whole comparison.

    ``"auto"`` picks AICc as soon as one candidate has fewer than 40
    observations per parameter, and AIC otherwise.
    """
    if criterion == AUTO_CRITERION:
        if any(needs_small_sample_correction(c) for c in candidates):
            return "AICc"
        return "AIC"
    if criterion not in CRITERIA:
        valid = CRITERIA + [AUTO_CRITERION]
        raise ValueError(f"Invalid information criterion: {criterion}. Must be one of {valid}")
    return criterion


@dataclass(frozen=True)
class CriterionRow:
    """Criterion values of one candidate, tagged with the criterion used for ranking."""

    identifier: str
    log_likelihood: float
    num_parameters: int
    num_observations: int
    aic: float
    criterion: str
    aicc: Optional[float] = None
    bic: Optional[float] = None

    @property
    def value(self) -> float:
        if self.criterion == "AICc":
            return self.aicc
        if self.criterion == "BIC":
            return self.bic
        return self.aic


def criterion_row(candidate: CandidateModel, criterion: str = "AIC") -> CriterionRow:
    """
    Compute the criterion row of one candidate.

    AICc and BIC are only computed when selected, so a plain AIC comparison
    never fails on the small-sample correction.
    """
    if criterion not in CRITERIA:
        raise ValueError(f"Invalid information criterion: {criterion}. Must be one of {CRITERIA}")

    ll = candidate.log_likelihood
    k = candidate.num_parameters
    n = candidate.num_observations
    return CriterionRow(
        identifier=candidate.identifier,
        log_likelihood=ll,
        num_parameters=k,
        num_observations=n,
        aic=aic(ll, k),
        criterion=criterion,
        aicc=aicc(ll, k, n) if criterion == "AICc" else None,
        bic=bic(ll, k, n) if criterion == "BIC" else None,
    )


def criterion_rows(candidates: Iterable[CandidateModel], criterion: str = "AIC") -> list[CriterionRow]:
    """Criterion rows for a candidate set, all scored with the same resolved criterion."""
    candidates = list(candidates)
    criterion = choose_criterion(candidates, criterion)
    return [criterion_row(c, criterion) for c in candidates]
