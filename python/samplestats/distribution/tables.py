"""Tagged input shapes for the frequency/probability functions.

A bare sequence is read as a raw :class:`Sample`. Mappings must be wrapped in
:class:`FrequencyTable` or :class:`ProbabilityTable` so it is always explicit
whether the values are occurrence counts or probabilities.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Sample:
    """Raw observations, possibly unsorted."""

    values: Sequence

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class FrequencyTable:
    """Distinct value -> occurrence count."""

    counts: Mapping[Any, int]

    def __len__(self) -> int:
        return len(self.counts)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass(frozen=True)
class ProbabilityTable:
    """Distinct value -> probability."""

    probabilities: Mapping[Any, float]

    def __len__(self) -> int:
        return len(self.probabilities)


Distribution = Union[Sample, FrequencyTable, ProbabilityTable]


def as_distribution(data: Any) -> Distribution | None:
    """Coerce ``data`` to one of the tagged shapes (None stays None)."""
    if data is None or isinstance(data, (Sample, FrequencyTable, ProbabilityTable)):
        return data
    if isinstance(data, Mapping):
        raise TypeError(
            "ambiguous mapping input: wrap it in FrequencyTable(...) or ProbabilityTable(...)"
        )
    return Sample(data)
