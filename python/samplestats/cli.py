"""Descriptive-statistics report for a sample stored as a JSON array.

Usage:
    samplestats data/racers.json --field age --percentile 10 --percentile 90 > report.json

The input is a JSON array of numbers, or of objects from which ``--field``
picks the numeric attribute (``-`` reads stdin). The report goes to stdout as
JSON; a one-line summary goes to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .ranking import DEFAULT_RANK_FORMULA, RANK_FORMULAS
from .summary import Aggregates, Frequencies, Percentiles

logger = logging.getLogger(__name__)

DEFAULT_PERCENTILES = (25.0, 50.0, 75.0, 90.0)
DEFAULT_TRUNCATION = 10.0


def load_sample(source: str, field: str | None = None) -> list:
    """Read the JSON array at ``source`` and project ``field`` from each record."""
    if source == "-":
        records = json.load(sys.stdin)
    else:
        with open(source) as f:
            records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"expected a JSON array in {source}, got {type(records).__name__}")
    if field is None:
        return records

    values = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"record {i} is not an object: cannot read field '{field}'")
        if record.get(field) is None:
            logger.warning("record %d has no value for field '%s'; skipped", i, field)
            continue
        values.append(record[field])
    return values


def build_report(
    values: list,
    percentiles: list[float],
    formula: str = DEFAULT_RANK_FORMULA,
    truncation: float = DEFAULT_TRUNCATION,
    cdf_points: list[float] | None = None,
) -> dict:
    """Assemble the report dictionary for one sample."""
    aggregates = Aggregates(values)
    frequencies = Frequencies(values)
    ranked = Percentiles(values)

    return {
        "count": len(aggregates),
        "mean": aggregates.mean(),
        "truncated_mean": {
            "truncation": truncation,
            "value": aggregates.truncated_mean(truncation),
        },
        "median": aggregates.median(),
        "modes": aggregates.mode(),
        "midrange": aggregates.midrange(),
        "variance": aggregates.variance(),
        "standard_deviation": aggregates.standard_deviation(),
        "range": aggregates.range(),
        "quartiles": {
            "q1": ranked.first_quartile(),
            "q2": ranked.second_quartile(),
            "q3": ranked.third_quartile(),
        },
        "rank_formula": formula,
        "percentiles": [
            {
                "percentile": p,
                "nearest_rank": ranked.nearest_rank(p, formula=formula),
                "linear_rank": ranked.linear_rank(p),
            }
            for p in percentiles
        ],
        "frequency": [[value, count] for value, count in frequencies.distribution(as_pairs=True)],
        "probability": [[value, p] for value, p in frequencies.probability().items()],
        "probability_mean": frequencies.probability_mean(),
        "probability_variance": frequencies.probability_variance(),
        "cdf": [
            {"value": v, "probability": frequencies.cumulative_distribution(v)}
            for v in (cdf_points or [])
        ],
    }


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(
        description="Report descriptive statistics for a JSON sample."
    )
    parser.add_argument("input", help="JSON file holding an array (use - for stdin)")
    parser.add_argument("--field", default=None, help="Attribute to read from each record")
    parser.add_argument(
        "--percentile",
        type=float,
        action="append",
        default=None,
        help=f"Percentile to report; repeatable (default: {list(DEFAULT_PERCENTILES)})",
    )
    parser.add_argument(
        "--formula",
        choices=sorted(RANK_FORMULAS),
        default=DEFAULT_RANK_FORMULA,
        help=f"Nearest-rank formula (default: {DEFAULT_RANK_FORMULA})",
    )
    parser.add_argument(
        "--truncate",
        type=float,
        default=DEFAULT_TRUNCATION,
        help=(
            "Percent trimmed from each end of the sample; values below 1 are read as "
            f"fractions, so 0.1 means 10%% (default: {DEFAULT_TRUNCATION})"
        ),
    )
    parser.add_argument(
        "--cdf", type=float, action="append", default=None, help="Value to evaluate the CDF at"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load a sample, print its JSON report, and return the exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        values = load_sample(args.input, args.field)
        report = build_report(
            values,
            args.percentile or list(DEFAULT_PERCENTILES),
            formula=args.formula,
            truncation=args.truncate,
            cdf_points=args.cdf,
        )
    except (OSError, TypeError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(report, indent=2))
    print(
        f"n={report['count']}, mean={report['mean']:.3f}, median={report['median']:.3f}, "
        f"sd={report['standard_deviation']:.3f}",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
