"""Percentile rank computations: rank tables, percent rank, nearest and linear rank.

A *rank table* is a list of ``(value, percentile)`` pairs, one per element of
the ascending-sorted sample, where the element at 0-based index ``i`` of a
sample of size ``n`` sits at percentile ``100 * (i + 0.5) / n``.

All functions sort a private copy of the sample unless ``presorted=True``.
When ``key`` is given, items are projected first and the projected values
are sorted; the caller's sequence is never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from operator import itemgetter
from typing import Any

from ..numeric import is_empty
from .formulas import DEFAULT_RANK_FORMULA, rank_formula, round_rank
from .search import bracket

logger = logging.getLogger(__name__)

RankTable = list[tuple[Any, float]]


def _ordered_values(sample: Sequence, presorted: bool, key: Callable | None) -> list:
    values = [key(item) for item in sample] if key is not None else list(sample)
    if not presorted:
        values.sort()
    return values


def ranks(
    sample: Sequence | None,
    presorted: bool = False,
    flatten: bool = False,
    key: Callable | None = None,
) -> RankTable:
    """Return the percentile of every element as ``(value, percentile)`` pairs.

    With ``flatten=True`` a run of equal values collapses to a single pair
    carrying the highest percentile of the run.

    >>> ranks([5, 1, 9, 3, 14, 9, 7])[:2]
    [(1, 7.142857142857143), (3, 21.428571428571427)]
    """
    if is_empty(sample):
        return []
    values = _ordered_values(sample, presorted, key)
    size = len(values)

    table: RankTable = []
    for index, value in enumerate(values):
        percentile = 100.0 * ((index + 1) - 0.5) / size
        if flatten and table and table[-1][0] == value:
            table.pop()
        table.append((value, percentile))
    return table


def percent_rank(
    sample: Sequence | None, index: int, presorted: bool = False
) -> float | None:
    """Percentile of the element at 1-based ``index`` of the sorted sample.

    The result depends only on ``index`` and the sample size, so no sort is
    performed; ``presorted`` is accepted for call-site symmetry. Returns None
    for an empty sample or an index outside ``[1, len(sample)]``.
    """
    if is_empty(sample):
        return None
    size = len(sample)
    if index <= 0 or index > size:
        return None
    return (100.0 / size) * (index - 0.5)


def nearest_rank(
    sample: Sequence | None,
    percentile: float,
    presorted: bool = False,
    key: Callable | None = None,
    formula: str = DEFAULT_RANK_FORMULA,
) -> Any:
    """Return the sample element at the rank nearest to ``percentile``.

    ``formula`` names the rank formula (``ordinal``, ``nist_primary`` or
    ``nist_alternate``). Percentiles 0 and 100 return the minimum and the
    maximum directly.
    """
    if is_empty(sample):
        return None
    to_rank = rank_formula(formula)
    values = _ordered_values(sample, presorted, key)
    if percentile == 0:
        return values[0]
    if percentile == 100:
        return values[-1]

    size = len(values)
    position = round_rank(to_rank(percentile, size))
    if position < 1 or position > size:
        logger.warning(
            "nearest_rank: %s formula gave rank %d for percentile %s (n=%d); clamping",
            formula,
            position,
            percentile,
            size,
        )
        position = min(max(position, 1), size)
    return values[position - 1]


def linear_rank(
    sample: Sequence | None,
    percentile: float,
    presorted: bool = False,
    key: Callable | None = None,
    preranked: bool = False,
) -> Any:
    """Interpolate the value at ``percentile`` between the two enclosing ranks.

    The sample is turned into a flattened rank table unless ``preranked`` is
    true, in which case ``sample`` already is one. Percentiles below the first
    rank or above the last return the first or last value. Between ranks the
    result is ``v_low + n * (p - p_low) / 100 * (v_high - v_low)`` where ``n``
    is the number of rows in the rank table.
    """
    if is_empty(sample):
        return None
    if preranked:
        table = sample
    else:
        table = ranks(sample, presorted=presorted, flatten=True, key=key)

    low, high = bracket(table, percentile, key=itemgetter(1))
    if high is None:
        return table[-1][0]
    if low is None:
        return table[0][0]
    if low == high:
        return table[low][0]

    v_low, p_low = table[low]
    v_high = table[high][0]
    size = len(table)
    return v_low + (size * (percentile - p_low) / 100.0 * (v_high - v_low))
