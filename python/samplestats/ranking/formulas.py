"""Closed-form percentile-to-rank formulas.

Each formula maps a percentile ``P`` (0 < P < 100) and a sample size ``N`` to
a fractional, 1-based rank:

    ordinal         n = (P / 100 * N) + 0.5
    nist_primary    n = (P / 100) * (N + 1)
    nist_alternate  n = ((P / 100) * (N - 1)) + 1
"""

from __future__ import annotations

import math
from collections.abc import Callable

DEFAULT_RANK_FORMULA = "ordinal"


def ordinal_rank(percentile: float, size: int) -> float:
    """Rank by the ordinal method."""
    return (percentile / 100.0 * size) + 0.5


def nist_primary_rank(percentile: float, size: int) -> float:
    """Rank by the NIST primary method."""
    return (percentile / 100.0) * (size + 1)


def nist_alternate_rank(percentile: float, size: int) -> float:
    """Rank by the NIST alternate method."""
    return ((percentile / 100.0) * (size - 1)) + 1


RANK_FORMULAS: dict[str, Callable[[float, int], float]] = {
    "ordinal": ordinal_rank,
    "nist_primary": nist_primary_rank,
    "nist_alternate": nist_alternate_rank,
}


def rank_formula(name: str) -> Callable[[float, int], float]:
    """Look up a rank formula by name."""
    try:
        return RANK_FORMULAS[name]
    except KeyError:
        raise ValueError(
            f"unknown rank formula '{name}': expected one of {sorted(RANK_FORMULAS)}"
        ) from None


def round_rank(rank: float) -> int:
    """Round a fractional rank half-up (2.5 -> 3), not to even."""
    return int(math.floor(rank + 0.5))
