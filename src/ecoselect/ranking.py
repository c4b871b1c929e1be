"""
Ranking candidates by an information criterion and deriving Akaike weights.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .constants import (
    DEFAULT_CONFIDENCE_LEVEL,
    DEFAULT_CRITERION,
    DEFAULT_NONFINITE_POLICY,
    NONFINITE_POLICIES,
    WEIGHT_TOLERANCE,
)
from .criteria import CriterionRow, criterion_rows
from .exceptions import (
    DatasetMismatchError,
    EmptySetError,
    MixedCriterionError,
    NonFiniteLikelihoodError,
)
from .extraction import CandidateModel, check_unique_identifiers


@dataclass(frozen=True)
class SelectionRow:
    """One ranked row of a model selection table."""

    rank: int
    delta: float
    relative_likelihood: float
    weight: float
    cumulative_weight: float
    evidence_ratio: float
    row: CriterionRow

    @property
    def identifier(self) -> str:
        return self.row.identifier

    @property
    def criterion(self) -> str:
        return self.row.criterion

    @property
    def value(self) -> float:
        return self.row.value


def akaike_weights(values: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    """
    Deltas and normalized weights for raw criterion values.

    delta_i = IC_i - min(IC), w_i = exp(-delta_i / 2) / sum_j exp(-delta_j / 2)

    Parameters
    ----------
    values : Sequence[float]
        Criterion values, in any order.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        (deltas, weights), aligned with ``values``.

    Raises
    ------
    EmptySetError
        If ``values`` is empty.
    NonFiniteLikelihoodError
        If a value is NaN or infinite.
    """
    ic = np.asarray(values, dtype=float)
    if ic.size == 0:
        raise EmptySetError("Cannot compute Akaike weights for an empty candidate set")
    if not np.all(np.isfinite(ic)):
        raise NonFiniteLikelihoodError(f"Criterion values must be finite, got {ic.tolist()}")
    deltas = ic - np.min(ic)
    likelihoods = np.exp(-0.5 * deltas)
    return deltas, likelihoods / np.sum(likelihoods)


def rank_rows(rows: Iterable[CriterionRow]) -> list[SelectionRow]:
    """
    Order criterion rows and attach deltas and Akaike weights.

    Sorting is ascending by criterion value and stable, so tied candidates
    keep their input order.

    Raises
    ------
    EmptySetError
        If no rows are given.
    MixedCriterionError
        If the rows were computed with different criteria.
    NonFiniteLikelihoodError
        If a criterion value is NaN or infinite.
    """
    rows = list(rows)
    if not rows:
        raise EmptySetError("Cannot rank an empty candidate set")

    used = sorted({r.criterion for r in rows})
    if len(used) > 1:
        raise MixedCriterionError(f"Candidates were scored with different criteria: {used}")

    ordered = sorted(rows, key=lambda r: r.value)
    deltas, weights = akaike_weights([r.value for r in ordered])
    cumulative = np.cumsum(weights)
    with np.errstate(over="ignore"):
        evidence = np.exp(0.5 * deltas)

    return [
        SelectionRow(
            rank=i + 1,
            delta=float(deltas[i]),
            relative_likelihood=float(np.exp(-0.5 * deltas[i])),
            weight=float(weights[i]),
            cumulative_weight=float(cumulative[i]),
            evidence_ratio=float(evidence[i]),
            row=row,
        )
        for i, row in enumerate(ordered)
    ]


def _handle_nonfinite(candidates: list[CandidateModel], policy: str) -> list[CandidateModel]:
    if policy not in NONFINITE_POLICIES:
        raise ValueError(f"Invalid non-finite policy: {policy}. Must be one of {NONFINITE_POLICIES}")

    bad = [c.identifier for c in candidates if not c.is_finite]
    if not bad:
        return candidates
    if policy == "raise":
        raise NonFiniteLikelihoodError(
            f"Non-finite log-likelihood for {bad}; check convergence or use nonfinite='drop'"
        )
    warnings.warn(f"Dropping candidates with non-finite log-likelihood: {bad}")
    return [c for c in candidates if c.is_finite]


def check_same_observations(candidates: Sequence[CandidateModel]) -> None:
    """
    Raise DatasetMismatchError if candidates report different observation counts.

    Equal counts do not prove the same rows were used; this only catches the
    common mistake of comparing fits after different NA handling.
    """
    counts = {c.identifier: c.num_observations for c in candidates}
    if len(set(counts.values())) > 1:
        raise DatasetMismatchError(
            f"Candidates were fit to different numbers of observations: {counts}"
        )


def select_models(
    candidates: Iterable[CandidateModel],
    criterion: str = DEFAULT_CRITERION,
    nonfinite: str = DEFAULT_NONFINITE_POLICY,
    check_observations: bool = True,
) -> list[SelectionRow]:
    """
    Rank a candidate set by an information criterion.

    Parameters
    ----------
    candidates : Iterable[CandidateModel]
        Candidates fit to the same observations.
    criterion : str, default="AIC"
        "AIC", "AICc", "BIC" or "auto" (AICc when n/k < 40 for any candidate).
    nonfinite : str, default="raise"
        "raise" fails on NaN/inf log-likelihoods, "drop" excludes them with a warning.
    check_observations : bool, default=True
        Fail when candidates report different observation counts.

    Returns
    -------
    list[SelectionRow]
        Rows ordered from best to worst supported.
    """
    candidates = list(candidates)
    if not candidates:
        raise EmptySetError("Cannot rank an empty candidate set")

    check_unique_identifiers(candidates)
    candidates = _handle_nonfinite(candidates, nonfinite)
    if not candidates:
        raise EmptySetError("No candidates left after dropping non-finite log-likelihoods")

    if check_observations:
        check_same_observations(candidates)

    return rank_rows(criterion_rows(candidates, criterion))


def selection_frame(rows: Sequence[SelectionRow]) -> pd.DataFrame:
    """Render ranked rows as a DataFrame."""
    records = []
    for r in rows:
        record = {
            "rank": r.rank,
            "model": r.identifier,
            "logLik": r.row.log_likelihood,
            "k": r.row.num_parameters,
            "n": r.row.num_observations,
            "AIC": r.row.aic,
        }
        if r.row.aicc is not None:
            record["AICc"] = r.row.aicc
        if r.row.bic is not None:
            record["BIC"] = r.row.bic
        record.update(
            {
                "criterion": r.criterion,
                "delta": r.delta,
                "weight": r.weight,
                "cumulative_weight": r.cumulative_weight,
                "evidence_ratio": r.evidence_ratio,
            }
        )
        records.append(record)
    return pd.DataFrame(records)


def model_selection_table(
    candidates: Iterable[CandidateModel],
    criterion: str = DEFAULT_CRITERION,
    nonfinite: str = DEFAULT_NONFINITE_POLICY,
    check_observations: bool = True,
) -> pd.DataFrame:
    """
    Model selection table for a candidate set.

    Same arguments as :func:`select_models`.

    Returns
    -------
    pd.DataFrame
        Columns: rank, model, logLik, k, n, AIC, [AICc], [BIC], criterion,
        delta, weight, cumulative_weight, evidence_ratio.
    """
    rows = select_models(
        candidates,
        criterion=criterion,
        nonfinite=nonfinite,
        check_observations=check_observations,
    )
    return selection_frame(rows)


def confidence_set(
    rows: Sequence[SelectionRow],
    level: float = DEFAULT_CONFIDENCE_LEVEL,
) -> list[SelectionRow]:
    """Smallest run of top-ranked rows whose cumulative weight reaches ``level``."""
    if not 0 < level <= 1:
        raise ValueError(f"Confidence level must be in (0, 1], got {level}")
    if not rows:
        raise EmptySetError("Cannot build a confidence set from an empty table")

    selected = []
    for r in rows:
        selected.append(r)
        if r.cumulative_weight >= level - WEIGHT_TOLERANCE:
            break
    return selected
