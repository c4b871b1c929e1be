"""
Tests for likelihood-ratio tests between nested candidates.
"""

import pytest
from scipy import stats

from ecoselect import (
    CandidateModel,
    DatasetMismatchError,
    InvalidCandidateError,
    NestingError,
    NonFiniteLikelihoodError,
    likelihood_ratio_table,
    likelihood_ratio_test,
)


class TestLikelihoodRatioTest:

    def test_statistic_and_p_value(self):
        restricted = CandidateModel("null", -360.2, 1, 200)
        full = CandidateModel("length", -338.4, 2, 200)
        result = likelihood_ratio_test(restricted, full)
        assert result.statistic == pytest.approx(43.6)
        assert result.df == 1
        assert result.p_value == pytest.approx(stats.chi2.sf(43.6, 1))
        assert result.p_value < 1e-9

    def test_non_significant_extra_terms(self):
        result = likelihood_ratio_test(
            CandidateModel("m2", -338.5, 4, 200),
            CandidateModel("m1", -338.1, 6, 200),
        )
        assert result.df == 2
        assert result.p_value > 0.05

    def test_not_nested(self):
        with pytest.raises(NestingError):
            likelihood_ratio_test(CandidateModel("a", -10.0, 3, 50), CandidateModel("b", -9.0, 3, 50))

    def test_different_data(self):
        with pytest.raises(DatasetMismatchError):
            likelihood_ratio_test(CandidateModel("a", -10.0, 2, 50), CandidateModel("b", -9.0, 3, 48))

    def test_nonfinite(self):
        with pytest.raises(NonFiniteLikelihoodError):
            likelihood_ratio_test(CandidateModel("a", -10.0, 2, 50), CandidateModel("b", float("nan"), 3, 50))

    def test_restricted_fits_better(self):
        with pytest.warns(UserWarning, match="fits better"):
            result = likelihood_ratio_test(CandidateModel("a", -9.0, 2, 50), CandidateModel("b", -10.0, 3, 50))
        assert result.p_value == 1.0


class TestLikelihoodRatioTable:

    def test_pairs(self, nested_candidates):
        table = likelihood_ratio_table(nested_candidates, [("m5", "m3"), ("m3", "m2")])
        assert list(table.columns) == ["restricted", "full", "statistic", "df", "p_value"]
        assert table["full"].tolist() == ["m3", "m2"]
        assert table["df"].tolist() == [1, 2]

    def test_no_pairs(self, nested_candidates):
        assert likelihood_ratio_table(nested_candidates, []).empty

    def test_duplicate_identifiers(self, nested_candidates):
        candidates = nested_candidates + [CandidateModel("m5", -355.0, 1, 200)]
        with pytest.raises(InvalidCandidateError, match="Duplicate"):
            likelihood_ratio_table(candidates, [("m5", "m3")])

    def test_unknown_identifier(self, nested_candidates):
        with pytest.raises(InvalidCandidateError, match="m9"):
            likelihood_ratio_table(nested_candidates, [("m5", "m9")])
