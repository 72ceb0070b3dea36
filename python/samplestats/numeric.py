"""Small numeric helpers shared by the rank and distribution engines.

Every function accepts an optional ``key`` callable that projects a sample
item to the number actually used, so records (dicts, objects) can be passed
straight through without building an intermediate list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

logger = logging.getLogger(__name__)


def is_empty(sample: Sequence | None) -> bool:
    """Return True for ``None`` or a zero-length sample (numpy arrays included)."""
    return sample is None or len(sample) == 0


def delta(a: Any, b: Any, key: Callable | None = None) -> Any:
    """Absolute difference between two values."""
    if key is not None:
        a, b = key(a), key(b)
    return abs(a - b)


def relative_risk(a: Any, b: Any, key: Callable | None = None) -> float:
    """Ratio ``a / b`` as a float. A zero ``b`` raises ZeroDivisionError."""
    if key is not None:
        a, b = key(a), key(b)
    return float(a) / float(b)


risk_ratio = relative_risk


def minimum(sample: Sequence | None, key: Callable | None = None) -> Any:
    """Smallest (projected) value of the sample, or None when empty."""
    return minmax(sample, key)[0]


def maximum(sample: Sequence | None, key: Callable | None = None) -> Any:
    """Largest (projected) value of the sample, or None when empty."""
    return minmax(sample, key)[1]


def minmax(sample: Sequence | None, key: Callable | None = None) -> tuple[Any, Any]:
    """Return ``(min, max)`` of the projected values in a single pass.

    The result holds projected values, not the original items. Ties keep the
    first occurrence. ``(None, None)`` for an empty sample.
    """
    if is_empty(sample):
        return (None, None)
    items = iter(sample)
    first = next(items)
    lo = hi = key(first) if key is not None else first
    for item in items:
        value = key(item) if key is not None else item
        if value < lo:
            lo = value
        elif value > hi:
            hi = value
    return (lo, hi)


def summation(
    sample: Sequence | None,
    lower: int | None = None,
    upper: int | None = None,
    key: Callable | None = None,
) -> Any:
    """Sum ``sample[lower..upper]`` inclusive.

    Bounds default to the whole sample. An empty sample or an invalid bound
    pair (``lower < 0``, ``upper >= len``, ``lower > upper``) yields 0, the
    additive identity, rather than an error.
    """
    if is_empty(sample):
        return 0
    lower = 0 if lower is None else lower
    upper = len(sample) - 1 if upper is None else upper
    if lower < 0 or upper >= len(sample) or lower > upper:
        logger.debug(
            "summation: bounds [%d, %d] outside sample of size %d; returning 0",
            lower,
            upper,
            len(sample),
        )
        return 0

    total = 0
    for i in range(lower, upper + 1):
        total += key(sample[i]) if key is not None else sample[i]
    return total
