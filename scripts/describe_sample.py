"""Descriptive-statistics report for a JSON sample.

Usage:
    uv run python scripts/describe_sample.py experiments/racers.json --field age > racers_report.json

Implementation lives in ``samplestats.cli``; this file is a thin dispatcher.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "python"))

from samplestats.cli import build_report, load_sample, main  # noqa: E402

__all__ = ["build_report", "load_sample", "main"]

if __name__ == "__main__":
    raise SystemExit(main())
