"""Searches over sorted samples, with optional per-item projection."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ..numeric import is_empty


def _search_range(
    sample: Sequence, imin: int | None, imax: int | None
) -> tuple[int, int]:
    lo = max(int(imin or 0), 0)
    hi = len(sample) - 1 if imax is None else min(imax, len(sample) - 1)
    return lo, hi


def bracket(
    sample: Sequence | None,
    target: Any,
    key: Callable | None = None,
    imin: int | None = None,
    imax: int | None = None,
) -> tuple[int | None, int | None] | None:
    """Binary-search a sorted sample and return the pair of indexes around ``target``.

    ``imin``/``imax`` restrict the search and are clamped to the sample
    bounds. The result is:

    * ``(i, i)`` when ``target`` is found at index ``i``;
    * ``(None, imin)`` when ``target`` is below the range;
    * ``(imax, None)`` when ``target`` is above the range;
    * ``(below, above)`` for the two adjacent indexes that enclose ``target``.

    Returns None for an empty sample or an inverted range.
    """
    if is_empty(sample):
        return None
    imin, imax = _search_range(sample, imin, imax)
    if imin > imax:
        return None

    def value_at(i: int) -> Any:
        return key(sample[i]) if key is not None else sample[i]

    low, high = value_at(imin), value_at(imax)
    if target < low:
        return (None, imin)
    if target == low:
        return (imin, imin)
    if target > high:
        return (imax, None)
    if target == high:
        return (imax, imax)

    while imax >= imin:
        imid = (imin + imax) // 2
        current = value_at(imid)
        if current < target:
            imin = imid + 1
        elif current > target:
            imax = imid - 1
        else:
            return (imid, imid)

    # the loop exits with imax just below target and imin just above it
    return (imax, imin)


binary_search = bracket


def linear_search(
    sample: Sequence | None,
    target: Any,
    key: Callable | None = None,
    imin: int | None = None,
    imax: int | None = None,
) -> int | None:
    """Index of the first element equal to ``target`` in a sorted sample, else None.

    Uses the same range clamping as :func:`bracket` and stops at the first
    value greater than ``target``.
    """
    if is_empty(sample):
        return None
    imin, imax = _search_range(sample, imin, imax)
    if imin > imax:
        return None

    for i in range(imin, imax + 1):
        value = key(sample[i]) if key is not None else sample[i]
        if value == target:
            return i
        if value > target:
            return None
    return None
