"""
Error taxonomy for model selection.

Every error derives from ``ValueError`` so callers that already guard
statistical routines with ``except ValueError`` keep working.
"""


class ModelSelectionError(ValueError):
    """Base class for all ecoselect errors."""


class DomainError(ModelSelectionError):
    """A criterion term is mathematically undefined (e.g. n - k - 1 <= 0 for AICc)."""


class EmptySetError(ModelSelectionError):
    """No candidate models to rank."""


class MixedCriterionError(ModelSelectionError):
    """Rows of one comparison were computed with different criteria."""


class DatasetMismatchError(ModelSelectionError):
    """Candidates were fit to different observation sets."""


class NonFiniteLikelihoodError(ModelSelectionError):
    """A candidate reports a NaN or infinite log-likelihood."""


class NestingError(ModelSelectionError):
    """Two candidates cannot be compared as restricted/full nested models."""


class InvalidCandidateError(ModelSelectionError):
    """A candidate record or summary table is malformed."""


class InsufficientObservationsError(InvalidCandidateError, DomainError):
    """A candidate has fewer than num_parameters + 2 observations."""
