"""Percentile and rank package.

Rank formulas, bracketing binary search, and the rank-table based percentile
functions built on them.
"""

from __future__ import annotations

from .formulas import (
    DEFAULT_RANK_FORMULA,
    RANK_FORMULAS,
    nist_alternate_rank,
    nist_primary_rank,
    ordinal_rank,
    rank_formula,
    round_rank,
)
from .rank import linear_rank, nearest_rank, percent_rank, ranks
from .search import binary_search, bracket, linear_search

__all__ = [
    "DEFAULT_RANK_FORMULA",
    "RANK_FORMULAS",
    "binary_search",
    "bracket",
    "linear_rank",
    "linear_search",
    "nearest_rank",
    "nist_alternate_rank",
    "nist_primary_rank",
    "ordinal_rank",
    "percent_rank",
    "rank_formula",
    "ranks",
    "round_rank",
]
