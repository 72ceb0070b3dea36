"""Memoized central tendency and dispersion over a fixed sample."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from . import descriptive
from ._cache import MemoCache

_UNSET = object()


class Aggregates:
    """Read-only view of a sample with cached averages and spreads.

    When ``key`` is given it is applied once per item at construction and only
    the projected values are kept. Every statistic is computed on first use and
    cached per distinct argument (``variance(center=...)``, ``truncated_mean(t)``).
    """

    def __init__(self, sample: Iterable | None, key: Callable | None = None) -> None:
        if sample is None:
            raise ValueError("sample cannot be None")
        if key is not None:
            self._values = tuple(key(item) for item in sample)
        else:
            self._values = tuple(sample)
        self._cache = MemoCache()

    @property
    def values(self) -> tuple:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def length(self) -> int:
        return len(self._values)

    def count(self, item: Any = _UNSET, predicate: Callable[[Any], bool] | None = None) -> int:
        """Number of values, of values equal to ``item``, or of values matching ``predicate``.

        ``item`` wins when both are given.
        """
        if item is not _UNSET:
            return self._cache.get(
                ("count", item), lambda: sum(1 for value in self._values if value == item)
            )
        if predicate is not None:
            return sum(1 for value in self._values if predicate(value))
        return len(self._values)

    def _sorted(self) -> np.ndarray:
        return self._cache.get(("sorted",), lambda: np.sort(np.asarray(self._values, dtype=float)))

    def mean(self) -> float:
        return self._cache.get(("mean",), lambda: descriptive.mean(self._values))

    def truncated_mean(self, truncation: float) -> float:
        return self._cache.get(
            ("truncated_mean", truncation),
            lambda: descriptive.truncated_mean(self._sorted(), truncation, presorted=True),
        )

    def midrange(self) -> float:
        return self._cache.get(("midrange",), lambda: descriptive.midrange(self._values))

    def median(self) -> float:
        return self._cache.get(("median",), lambda: descriptive.median(self._values))

    def mode(self) -> list:
        return list(self._cache.get(("mode",), lambda: tuple(descriptive.mode(self._values))))

    def variance(self, center: float | None = None) -> float:
        return self._cache.get(
            ("variance", center), lambda: descriptive.variance(self._values, center)
        )

    def standard_deviation(self, center: float | None = None) -> float:
        return self._cache.get(
            ("standard_deviation", center),
            lambda: float(np.sqrt(self.variance(center))),
        )

    def range(self) -> float:
        return self._cache.get(("range",), lambda: descriptive.value_range(self._values))
