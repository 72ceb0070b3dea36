"""Read-only, memoized summary objects over a fixed sample.

``Aggregates`` covers averages and spread, ``Frequencies`` the frequency and
probability distribution, ``Percentiles`` ranks and quartiles.
"""

from __future__ import annotations

from .aggregates import Aggregates
from .frequencies import Frequencies
from .percentiles import Percentiles

__all__ = ["Aggregates", "Frequencies", "Percentiles"]
