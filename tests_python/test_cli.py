"""Tests for the samplestats command-line report."""

from __future__ import annotations

import io
import json
import sys
from unittest.mock import patch

import pytest

from samplestats import cli

RACERS = [
    {"name": "a", "age": 40},
    {"name": "b", "age": 15},
    {"name": "c", "age": 35},
    {"name": "d", "age": 20},
    {"name": "e", "age": 50},
]


@pytest.fixture
def racers_file(tmp_path):
    path = tmp_path / "racers.json"
    path.write_text(json.dumps(RACERS))
    return path


class TestLoadSample:
    def test_plain_array(self, tmp_path):
        path = tmp_path / "values.json"
        path.write_text("[3, 1, 2]")
        assert cli.load_sample(str(path)) == [3, 1, 2]

    def test_field_projection(self, racers_file):
        assert cli.load_sample(str(racers_file), field="age") == [40, 15, 35, 20, 50]

    def test_missing_field_is_skipped(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps([{"age": 1}, {"name": "x"}, {"age": 3}]))
        assert cli.load_sample(str(path), field="age") == [1, 3]

    def test_null_field_is_skipped(self, tmp_path):
        path = tmp_path / "nulls.json"
        path.write_text(json.dumps([{"age": 30}, {"age": None}, {"age": 41}]))
        assert cli.load_sample(str(path), field="age") == [30, 41]

    def test_non_array_rejected(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text('{"age": 1}')
        with pytest.raises(ValueError, match="expected a JSON array"):
            cli.load_sample(str(path))

    def test_non_object_record_rejected(self, tmp_path):
        path = tmp_path / "mixed.json"
        path.write_text('[{"age": 1}, 2]')
        with pytest.raises(ValueError, match="record 1"):
            cli.load_sample(str(path), field="age")

    def test_stdin(self):
        with patch.object(sys, "stdin", io.StringIO("[4, 5]")):
            assert cli.load_sample("-") == [4, 5]


class TestBuildReport:
    def test_report_contents(self):
        report = cli.build_report([40, 15, 35, 20, 50], [40.0], cdf_points=[20])
        assert report["count"] == 5
        assert report["mean"] == pytest.approx(32.0)
        assert report["median"] == pytest.approx(35.0)
        assert report["rank_formula"] == "ordinal"
        assert report["percentiles"] == [
            {"percentile": 40.0, "nearest_rank": 35, "linear_rank": pytest.approx(27.5)}
        ]
        assert report["cdf"] == [{"value": 20, "probability": pytest.approx(0.4)}]
        assert report["frequency"][0] == [40, 1]

    def test_formula_is_applied(self):
        report = cli.build_report([15, 20, 35, 40, 50], [40.0], formula="nist_primary")
        assert report["percentiles"][0]["nearest_rank"] == 20

    def test_report_is_json_serializable(self):
        report = cli.build_report([1, 2, 2, 3], list(cli.DEFAULT_PERCENTILES))
        json.dumps(report)


class TestMain:
    def test_writes_report(self, racers_file, capsys):
        status = cli.main([str(racers_file), "--field", "age", "--percentile", "40"])
        assert status == 0
        captured = capsys.readouterr()
        report = json.loads(captured.out)
        assert report["count"] == 5
        assert report["percentiles"][0]["nearest_rank"] == 35
        assert "n=5" in captured.err

    def test_default_percentiles(self, racers_file, capsys):
        assert cli.main([str(racers_file), "--field", "age"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert [row["percentile"] for row in report["percentiles"]] == [25.0, 50.0, 75.0, 90.0]

    def test_argv_entry(self, racers_file, capsys):
        with patch.object(sys, "argv", ["samplestats", str(racers_file), "--field", "age"]):
            assert cli.main() == 0
        assert json.loads(capsys.readouterr().out)["count"] == 5

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / "absent.json")]) == 1
        assert "ERROR:" in capsys.readouterr().err

    def test_invalid_truncation(self, racers_file, capsys):
        assert cli.main([str(racers_file), "--field", "age", "--truncate", "60"]) == 1
        assert "invalid truncation" in capsys.readouterr().err

    def test_null_field_values(self, tmp_path, capsys):
        path = tmp_path / "nulls.json"
        path.write_text(json.dumps([{"age": 30}, {"age": None}, {"age": 41}]))
        assert cli.main([str(path), "--field", "age"]) == 0
        assert json.loads(capsys.readouterr().out)["count"] == 2

    def test_unorderable_values(self, tmp_path, capsys):
        path = tmp_path / "mixed.json"
        path.write_text(json.dumps([30, "forty", 41]))
        assert cli.main([str(path)]) == 1
        assert "ERROR:" in capsys.readouterr().err

    def test_help_lists_fraction_convention(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["--help"])
        help_text = " ".join(capsys.readouterr().out.split())
        assert "0.1 means 10%" in help_text

    def test_unknown_formula_rejected_by_parser(self, racers_file):
        with pytest.raises(SystemExit):
            cli.main([str(racers_file), "--formula", "bogus"])
