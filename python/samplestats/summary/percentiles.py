"""Memoized percentile and quartile lookups over a fixed, sorted sample."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any

import numpy as np
from scipy import stats

from ..ranking import DEFAULT_RANK_FORMULA, linear_rank, nearest_rank, percent_rank, ranks
from . import descriptive
from ._cache import MemoCache


class Percentiles:
    """Sorted private copy of a sample with cached rank lookups.

    ``key`` is applied once per item at construction. The copy is sorted
    unless ``presorted`` is true, so every lookup can skip sorting.
    """

    def __init__(
        self,
        sample: Iterable | None,
        key: Callable | None = None,
        presorted: bool = False,
    ) -> None:
        if sample is None:
            raise ValueError("sample cannot be None")
        values = [key(item) for item in sample] if key is not None else list(sample)
        if not presorted:
            values.sort()
        self._values = tuple(values)
        self._ranks = tuple(ranks(self._values, presorted=True))
        self._cache = MemoCache()

    @property
    def values(self) -> tuple:
        return self._values

    @property
    def ranks(self) -> tuple[tuple[Any, float], ...]:
        """``(value, percentile)`` for every element of the sorted sample."""
        return self._ranks

    def __len__(self) -> int:
        return len(self._values)

    def percent_rank(self, index: int) -> float | None:
        return self._cache.get(
            ("percent_rank", index), lambda: percent_rank(self._values, index, presorted=True)
        )

    def nearest_rank(self, percentile: float, formula: str = DEFAULT_RANK_FORMULA) -> Any:
        return self._cache.get(
            ("nearest_rank", percentile, formula),
            lambda: nearest_rank(self._values, percentile, presorted=True, formula=formula),
        )

    def linear_rank(self, percentile: float) -> Any:
        return self._cache.get(
            ("linear_rank", percentile),
            lambda: linear_rank(self._values, percentile, presorted=True),
        )

    def percentile_of(self, value: float) -> float:
        """Percentage of the sample at or below ``value``."""
        if not self._values:
            return 0.0
        return self._cache.get(
            ("percentile_of", value),
            lambda: float(
                stats.percentileofscore(np.asarray(self._values, dtype=float), value, kind="weak")
            ),
        )

    def first_quartile(self) -> float:
        """Median of the lower half, ``values[0 .. floor(n/2) - 1]``."""
        midpoint = math.floor(len(self._values) / 2.0)
        return self._cache.get(
            ("first_quartile",), lambda: descriptive.median(self._values[:midpoint])
        )

    lower_quartile = first_quartile

    def second_quartile(self) -> float:
        return self._cache.get(("second_quartile",), lambda: descriptive.median(self._values))

    def third_quartile(self) -> float:
        """Median of the upper half, ``values[ceil(n/2) .. n - 1]``."""
        midpoint = math.ceil(len(self._values) / 2.0)
        return self._cache.get(
            ("third_quartile",), lambda: descriptive.median(self._values[midpoint:])
        )

    upper_quartile = third_quartile
