"""
Tests for the information criteria.
"""

import numpy as np
import pytest

from ecoselect import (
    CandidateModel,
    DomainError,
    aic,
    aicc,
    bic,
    choose_criterion,
    criterion_row,
    criterion_rows,
    needs_small_sample_correction,
)


class TestAIC:

    def test_formula(self):
        assert aic(-100.0, 3) == pytest.approx(206.0)

    def test_nested_scenario_values(self, nested_candidates):
        values = [aic(c.log_likelihood, c.num_parameters) for c in nested_candidates]
        assert values == pytest.approx([692.2, 685.0, 680.8, 694.0, 722.4])


class TestAICc:

    def test_correction_term(self):
        # AIC = 206, correction = 2*3*4 / (50 - 3 - 1)
        assert aicc(-100.0, 3, 50) == pytest.approx(206.0 + 24.0 / 46.0)

    def test_few_observations_per_parameter(self):
        """n=30, k=27 leaves n - k - 1 = 2."""
        value = aicc(-100.0, 27, 30)
        assert value == pytest.approx(aic(-100.0, 27) + 2 * 27 * 28 / 2)

    def test_undefined_correction_raises(self):
        """n=28, k=27 makes the denominator zero."""
        with pytest.raises(DomainError):
            aicc(-100.0, 27, 28)

    def test_negative_denominator_raises(self):
        with pytest.raises(DomainError):
            aicc(-100.0, 10, 5)

    def test_converges_to_aic(self):
        assert aicc(-100.0, 3, 10**7) == pytest.approx(aic(-100.0, 3), abs=1e-4)


class TestBIC:

    def test_formula(self):
        assert bic(-100.0, 3, 50) == pytest.approx(200.0 + np.log(50) * 3)

    def test_heavier_penalty_than_aic_for_large_n(self):
        assert bic(-100.0, 3, 200) > aic(-100.0, 3)


class TestCriterionChoice:

    def test_small_sample_flag(self):
        assert needs_small_sample_correction(CandidateModel("a", -10.0, 3, 100))
        assert not needs_small_sample_correction(CandidateModel("a", -10.0, 3, 120))

    def test_auto_picks_aicc_when_any_candidate_needs_it(self):
        candidates = [CandidateModel("a", -10.0, 2, 100), CandidateModel("b", -9.0, 5, 100)]
        assert choose_criterion(candidates, "auto") == "AICc"

    def test_auto_picks_aic_for_large_samples(self):
        """At least 40 observations per parameter for every candidate."""
        candidates = [CandidateModel("a", -10.0, 6, 240), CandidateModel("b", -9.0, 2, 240)]
        assert choose_criterion(candidates, "auto") == "AIC"

    def test_auto_uses_ratio_of_largest_model(self, nested_candidates):
        """n=200 with k=6 gives 33 observations per parameter."""
        assert choose_criterion(nested_candidates, "auto") == "AICc"

    def test_explicit_choice_is_kept(self, nested_candidates):
        assert choose_criterion(nested_candidates, "BIC") == "BIC"

    def test_unknown_criterion(self, nested_candidates):
        with pytest.raises(ValueError, match="Invalid information criterion"):
            choose_criterion(nested_candidates, "DIC")


class TestCriterionRows:

    def test_aic_row_skips_correction(self):
        row = criterion_row(CandidateModel("tiny", -5.0, 3, 5), "AIC")
        assert row.aicc is None
        assert row.value == pytest.approx(16.0)

    def test_aicc_row(self):
        row = criterion_row(CandidateModel("a", -100.0, 27, 30), "AICc")
        assert row.criterion == "AICc"
        assert row.value == row.aicc
        assert row.aic == pytest.approx(254.0)

    def test_record_with_undefined_correction_is_rejected(self):
        """n=28, k=27 cannot even form a candidate record."""
        with pytest.raises(DomainError):
            CandidateModel("a", -100.0, 27, 28)

    def test_rows_share_one_criterion(self):
        candidates = [CandidateModel("a", -10.0, 2, 30), CandidateModel("b", -9.0, 3, 30)]
        rows = criterion_rows(candidates, "auto")
        assert {r.criterion for r in rows} == {"AICc"}
        assert [r.identifier for r in rows] == ["a", "b"]
