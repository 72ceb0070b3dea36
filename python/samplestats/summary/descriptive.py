"""Central tendency and dispersion helpers over plain numeric samples."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from ..distribution import frequency
from ..numeric import delta, is_empty, minmax

MAX_TRUNCATION_PERCENT = 50.0
TRUNCATION_STEP_TOLERANCE = 0.1


def mean(values: Sequence) -> float:
    """Arithmetic mean, 0.0 for an empty sample."""
    if is_empty(values):
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def truncated_mean(values: Sequence, truncation: float, presorted: bool = False) -> float:
    """Mean after trimming ``truncation`` percent of the sample from each end.

    A ``truncation`` below 1.0 is read as a fraction (0.1 == 10%). When the
    trim boundary falls within 0.1 of a whole element the trim is exact;
    otherwise the result averages the means trimmed at the floor and at the
    ceiling of the boundary. If the ceiling trim would leave nothing (tiny
    samples near 50%), only the floor-trimmed mean is used.
    """
    if is_empty(values):
        return 0.0
    if truncation < 1.0:
        truncation = truncation * 100.0
    if truncation >= MAX_TRUNCATION_PERCENT:
        raise ValueError(
            f"invalid truncation: expected less than {MAX_TRUNCATION_PERCENT}%, got {truncation}%"
        )

    arr = np.asarray(values, dtype=float)
    if not presorted:
        arr = np.sort(arr)
    size = len(arr)
    steps = truncation / (100.0 / size)

    low_cut = math.floor(steps)
    if delta(steps, int(steps)) < TRUNCATION_STEP_TOLERANCE:
        return mean(arr[low_cut : size - low_cut])

    floor_mean = mean(arr[low_cut : size - low_cut])
    high_cut = math.ceil(steps)
    if size - 2 * high_cut <= 0:
        return floor_mean
    return mean([floor_mean, mean(arr[high_cut : size - high_cut])])


def midrange(values: Sequence) -> float:
    """Halfway point between the minimum and the maximum."""
    if is_empty(values):
        return 0.0
    lo, hi = minmax(values)
    return (lo + hi) / 2.0


def median(values: Sequence) -> float:
    if is_empty(values):
        return 0.0
    return float(np.median(np.asarray(values, dtype=float)))


def mode(values: Sequence) -> list:
    """Every value tied for the highest frequency, in first-occurrence order."""
    counts = frequency(values)
    if not counts:
        return []
    top = max(counts.values())
    return [value for value, count in counts.items() if count == top]


def variance(values: Sequence, center: float | None = None) -> float:
    """Population variance about the sample mean, or about ``center`` when given."""
    if is_empty(values):
        return 0.0
    arr = np.asarray(values, dtype=float)
    mu = float(np.mean(arr)) if center is None else center
    return float(np.mean((arr - mu) ** 2))


def value_range(values: Sequence) -> float:
    """Maximum minus minimum; 0.0 for fewer than two values."""
    if is_empty(values) or len(values) <= 1:
        return 0.0
    lo, hi = minmax(values)
    return float(hi - lo)
