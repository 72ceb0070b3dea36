"""Frequency tables, probability mass functions and cumulative distribution.

Functions take a raw sample (any sized sequence, or :class:`Sample`) and,
where it makes sense, a :class:`FrequencyTable` or :class:`ProbabilityTable`.
An optional ``key`` projects sample items, or table keys, to the value that
is counted.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from ..numeric import delta, minmax
from .tables import Distribution, FrequencyTable, ProbabilityTable, Sample, as_distribution

logger = logging.getLogger(__name__)

NORMALIZATION_TOLERANCE = 0.01


def _is_empty(dist: Distribution | None) -> bool:
    return dist is None or len(dist) == 0


def _shape(table: dict, as_pairs: bool) -> dict | list[tuple[Any, Any]]:
    return list(table.items()) if as_pairs else table


def _project_keys(counts: Mapping, key: Callable | None) -> dict:
    """Re-key a table through ``key``, adding up entries that collide."""
    if key is None:
        return dict(counts)
    projected: dict = {}
    for value, amount in counts.items():
        value = key(value)
        projected[value] = projected.get(value, 0) + amount
    return projected


def frequency(
    data: Any, key: Callable | None = None, as_pairs: bool = False
) -> dict | list[tuple[Any, int]] | None:
    """Count occurrences of each distinct (projected) value.

    Keys keep first-occurrence order. Returns None for an empty sample.

    >>> frequency([13, 18, 13, 14, 13, 16, 14, 21, 13])
    {13: 4, 18: 1, 14: 2, 16: 1, 21: 1}
    """
    dist = as_distribution(data)
    if _is_empty(dist):
        return None
    if not isinstance(dist, Sample):
        raise TypeError(f"frequency expects a raw sample, got {type(dist).__name__}")

    counts: dict = {}
    for item in dist.values:
        value = key(item) if key is not None else item
        counts[value] = counts.get(value, 0) + 1
    return _shape(counts, as_pairs)


def probability(
    data: Any,
    key: Callable | None = None,
    cumulative: bool = False,
    as_pairs: bool = False,
) -> dict | list[tuple[Any, float]] | None:
    """Probability mass function of a sample or of a frequency table.

    For a :class:`FrequencyTable`, ``key`` re-projects the table keys and
    colliding keys have their counts added. With ``cumulative=True`` each
    value maps to the total probability of all values at or below it and the
    result is ordered by ascending value.
    """
    dist = as_distribution(data)
    if _is_empty(dist):
        return None
    if isinstance(dist, FrequencyTable):
        total = dist.total
        counts = _project_keys(dist.counts, key)
    elif isinstance(dist, Sample):
        total = len(dist)
        counts = frequency(dist, key)
    else:
        raise TypeError("probability expects a sample or a FrequencyTable")

    pmf = {value: float(count) / total for value, count in counts.items()}

    if cumulative:
        running = 0.0
        ordered: dict = {}
        for value in sorted(pmf):
            running += pmf[value]
            ordered[value] = running
        pmf = ordered

    return _shape(pmf, as_pairs)


def normalize_probability(pmf: ProbabilityTable | Mapping[Any, float]) -> dict:
    """Rescale a denormalized PMF (e.g. after conditioning) so it sums to one.

    A single-entry table gets probability exactly 1. A table already within
    ``NORMALIZATION_TOLERANCE`` of one, or one whose entries sum to zero and
    so cannot be rescaled, is returned as an unchanged copy.
    """
    probabilities = pmf.probabilities if isinstance(pmf, ProbabilityTable) else pmf
    if len(probabilities) == 0:
        return {}
    if len(probabilities) == 1:
        return {next(iter(probabilities)): 1.0}

    total = sum(probabilities.values())
    if delta(total, 1.0) < NORMALIZATION_TOLERANCE:
        return dict(probabilities)
    if total == 0:
        logger.warning(
            "normalize_probability: %d entries sum to zero; returned unscaled", len(probabilities)
        )
        return dict(probabilities)

    logger.debug(
        "normalize_probability: rescaling %d entries summing to %s", len(probabilities), total
    )
    factor = 1.0 / total
    return {value: p * factor for value, p in probabilities.items()}


def _pmf_items(dist: Distribution, key: Callable | None) -> Iterator[tuple[Any, float]]:
    if isinstance(dist, ProbabilityTable):
        for value, p in dist.probabilities.items():
            yield (key(value) if key is not None else value), p
    else:
        yield from probability(dist, key).items()


def probability_mean(data: Any, key: Callable | None = None) -> float:
    """Mean of a distribution: sum of ``value * probability``. 0 when empty."""
    dist = as_distribution(data)
    if _is_empty(dist):
        return 0.0
    return sum((value * p for value, p in _pmf_items(dist, key)), 0.0)


def probability_variance(data: Any, key: Callable | None = None) -> float:
    """Variance of a distribution about its probability mean. 0 when empty."""
    dist = as_distribution(data)
    if _is_empty(dist):
        return 0.0
    items = list(_pmf_items(dist, key))
    mean = sum((value * p for value, p in items), 0.0)
    return sum((p * (value - mean) ** 2 for value, p in items), 0.0)


def cumulative_distribution(data: Any, value: Any, key: Callable | None = None) -> float:
    """Fraction of observations at or below ``value`` (the empirical CDF).

    Accepts a raw sample or a :class:`FrequencyTable`. Exactly 0.0 when no
    observation qualifies (or the sample is empty), exactly 1.0 when all do.
    """
    dist = as_distribution(data)
    if _is_empty(dist):
        return 0.0
    if isinstance(dist, FrequencyTable):
        weighted = dist.counts.items()
    elif isinstance(dist, Sample):
        weighted = ((item, 1) for item in dist.values)
    else:
        raise TypeError("cumulative_distribution expects a sample or a FrequencyTable")

    count = size = 0
    for item, weight in weighted:
        observed = key(item) if key is not None else item
        size += weight
        if observed <= value:
            count += weight

    if count == 0:
        return 0.0
    if count == size:
        return 1.0
    return count / float(size)


def inverse_cumulative_distribution(
    data: Any, prob: float, key: Callable | None = None, presorted: bool = False
) -> Any:
    """Smallest observed value whose cumulative probability reaches ``prob``.

    Returns the minimum for ``prob == 0`` and the maximum for ``prob == 1``.
    None for an empty sample or ``prob`` outside [0, 1].
    """
    dist = as_distribution(data)
    if _is_empty(dist) or prob < 0 or prob > 1:
        return None

    if isinstance(dist, FrequencyTable):
        lo, hi = minmax(list(dist.counts), key)
    elif isinstance(dist, Sample) and presorted:
        first, last = dist.values[0], dist.values[-1]
        lo, hi = (key(first), key(last)) if key is not None else (first, last)
    elif isinstance(dist, Sample):
        lo, hi = minmax(dist.values, key)
    else:
        raise TypeError("inverse_cumulative_distribution expects a sample or a FrequencyTable")

    if prob == 0:
        return lo
    if prob == 1:
        return hi

    cdf = probability(dist, key, cumulative=True)
    values = list(cdf)
    index = bisect.bisect_left(list(cdf.values()), prob)
    return values[min(index, len(values) - 1)]
