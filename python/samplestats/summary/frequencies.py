"""Memoized frequency and probability statistics over a fixed sample."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType
from typing import Any

from ..distribution import (
    FrequencyTable,
    ProbabilityTable,
    cumulative_distribution,
    frequency,
    probability,
    probability_mean,
    probability_variance,
)
from ._cache import MemoCache


class Frequencies:
    """Read-only frequency distribution of a sample.

    The frequency table is built once at construction (after applying ``key``
    to every item); everything derived from it is computed lazily and cached.
    Iterating yields ``(value, frequency, probability)`` triples.
    """

    def __init__(self, sample: Iterable | None, key: Callable | None = None) -> None:
        if sample is None:
            raise ValueError("sample cannot be None")
        counts = frequency(list(sample), key) or {}
        self._table = FrequencyTable(MappingProxyType(counts))
        self._cache = MemoCache()

    def distribution(self, as_pairs: bool = False) -> MappingProxyType | list[tuple[Any, int]]:
        """Value -> count mapping, or ``(value, count)`` pairs with ``as_pairs``."""
        if as_pairs:
            return list(self._cache.get(("pairs",), lambda: tuple(self._table.counts.items())))
        return self._table.counts

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[tuple[Any, int, float]]:
        probabilities = self.probability()
        for value, count in self._table.counts.items():
            yield value, count, probabilities[value]

    def frequency_mean(self) -> float:
        return self._cache.get(("frequency_mean",), lambda: probability_mean(self._table))

    def probability(self) -> MappingProxyType:
        return self._cache.get(
            ("probability",), lambda: MappingProxyType(probability(self._table) or {})
        )

    def probability_mean(self) -> float:
        return self._cache.get(
            ("probability_mean",),
            lambda: probability_mean(ProbabilityTable(self.probability())),
        )

    def probability_variance(self) -> float:
        return self._cache.get(
            ("probability_variance",),
            lambda: probability_variance(ProbabilityTable(self.probability())),
        )

    def cumulative_distribution(self, value: Any) -> float:
        return self._cache.get(
            ("cdf", value), lambda: cumulative_distribution(self._table, value)
        )

    def frequency_of(self, value: Any) -> int:
        """Occurrence count of ``value``; 0 if it never occurred."""
        return self._table.counts.get(value, 0)

    def probability_of(self, value: Any) -> float:
        return self.probability().get(value, 0.0)

    def values(self) -> Iterator[Any]:
        return iter(self._table.counts.keys())

    def frequencies(self) -> Iterator[int]:
        return iter(self._table.counts.values())

    def probabilities(self) -> Iterator[float]:
        return iter(self.probability().values())
