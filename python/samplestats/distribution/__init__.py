"""Frequency and probability distribution package."""

from __future__ import annotations

from .probability import (
    NORMALIZATION_TOLERANCE,
    cumulative_distribution,
    frequency,
    inverse_cumulative_distribution,
    normalize_probability,
    probability,
    probability_mean,
    probability_variance,
)
from .tables import FrequencyTable, ProbabilityTable, Sample, as_distribution

__all__ = [
    "NORMALIZATION_TOLERANCE",
    "FrequencyTable",
    "ProbabilityTable",
    "Sample",
    "as_distribution",
    "cumulative_distribution",
    "frequency",
    "inverse_cumulative_distribution",
    "normalize_probability",
    "probability",
    "probability_mean",
    "probability_variance",
]
