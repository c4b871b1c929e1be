"""
Pytest configuration and shared fixtures for ecoselect tests.
"""

import numpy as np
import pandas as pd
import pytest

from ecoselect import CandidateModel


@pytest.fixture
def nested_candidates():
    """Five nested models fit to the same 200 observations."""
    log_liks = [-340.1, -338.5, -338.4, -345.0, -360.2]
    ks = [6, 4, 2, 2, 1]
    return [
        CandidateModel(identifier=f"m{i + 1}", log_likelihood=ll, num_parameters=k, num_observations=200)
        for i, (ll, k) in enumerate(zip(log_liks, ks))
    ]


@pytest.fixture
def selection_data():
    """Simulated plant data: relative fitness, seed counts and three traits."""
    rng = np.random.default_rng(42)
    n = 80
    df = pd.DataFrame({
        "flowers": rng.normal(10, 2, n),
        "corolla_length": rng.normal(30, 4, n),
        "corolla_width": rng.normal(3, 0.5, n),
    })
    df["relfit"] = 1 + 0.3 * (df["flowers"] - 10) + rng.normal(0, 0.3, n)
    df["seeds"] = rng.poisson(np.exp(1.5 + 0.05 * (df["corolla_length"] - 30)))
    return df


@pytest.fixture
def summary_csv(tmp_path):
    """Fit-summary table as exported from an R session."""
    path = tmp_path / "fits.csv"
    pd.DataFrame({
        "model": ["full", "no_width", "length_only", "flowers_only", "null"],
        "logLik": [-340.1, -338.5, -338.4, -345.0, -360.2],
        "df": [6, 4, 2, 2, 1],
        "nobs": [200, 200, 200, 200, 200],
    }).to_csv(path, index=False)
    return path
