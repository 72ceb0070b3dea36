"""samplestats: percentiles, ranks, frequency and probability distributions.

The free functions work on any sized, indexable sample (lists, tuples, 1-D
numpy arrays) and take an optional ``key`` callable to project records to
numbers. ``Aggregates``, ``Frequencies`` and ``Percentiles`` wrap a fixed
sample and cache what they compute.
"""

from .distribution import (
    FrequencyTable,
    ProbabilityTable,
    Sample,
    cumulative_distribution,
    frequency,
    inverse_cumulative_distribution,
    normalize_probability,
    probability,
    probability_mean,
    probability_variance,
)
from .numeric import delta, maximum, minimum, minmax, relative_risk, risk_ratio, summation
from .ranking import (
    bracket,
    linear_rank,
    linear_search,
    nearest_rank,
    nist_alternate_rank,
    nist_primary_rank,
    ordinal_rank,
    percent_rank,
    ranks,
)
from .summary import Aggregates, Frequencies, Percentiles

__version__ = "0.1.0"

__all__ = [
    "Aggregates",
    "Frequencies",
    "FrequencyTable",
    "Percentiles",
    "ProbabilityTable",
    "Sample",
    "bracket",
    "cumulative_distribution",
    "delta",
    "frequency",
    "inverse_cumulative_distribution",
    "linear_rank",
    "linear_search",
    "maximum",
    "minimum",
    "minmax",
    "nearest_rank",
    "nist_alternate_rank",
    "nist_primary_rank",
    "normalize_probability",
    "ordinal_rank",
    "percent_rank",
    "probability",
    "probability_mean",
    "probability_variance",
    "ranks",
    "relative_risk",
    "risk_ratio",
    "summation",
]
