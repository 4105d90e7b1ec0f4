"""CLI smoke tests: query, dump and interactive over a small dataset."""
from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from trajclass import __version__
from trajclass.cli import app

runner = CliRunner()

DATASET = """
3
2  0 0 0  10 0 5
2  0 0 0  4 0 2
2  0 0 0  1 0 1
"""


def _write_file(path: Path, content: str) -> None:
    path.write_text(content.strip() + "\n", encoding="utf-8")


def _dataset(tmp_path: Path) -> Path:
    path = tmp_path / "tracks.txt"
    _write_file(path, DATASET)
    return path


class TestCliSmoke:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"trajclass {__version__}" in result.output

    def test_query_prints_retained_ids(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["query", str(_dataset(tmp_path)), "0", "length"])
        assert result.exit_code == 0
        assert result.output == "2 1\n"

    def test_query_accepts_menu_code(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["query", str(_dataset(tmp_path)), "2", "1"])
        assert result.exit_code == 0
        assert result.output == "0 1\n"

    def test_query_negative_index_is_out_of_range(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["query", str(_dataset(tmp_path)), "-1", "length"])
        assert result.exit_code == 1
        assert "ERROR: Trajectory index -1 outside [0, 3)" in result.output

    def test_query_non_ascii_digit_metric_is_unknown_metric(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["query", str(_dataset(tmp_path)), "0", "\u00b2"])
        assert result.exit_code == 1
        assert "ERROR: Unsupported metric" in result.output

    def test_non_utf8_dataset_exits_with_query_error(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 1 0 0 \xff")
        result = runner.invoke(app, ["dump", str(path)])
        assert result.exit_code == 1
        assert "ERROR:" in result.output
        assert "not valid UTF-8 text" in result.output

    def test_query_out_of_range_exits_with_query_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["query", str(_dataset(tmp_path)), "3", "length"])
        assert result.exit_code == 1
        assert "ERROR: Trajectory index 3 outside [0, 3)" in result.output

    def test_query_unknown_metric_exits_with_query_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["query", str(_dataset(tmp_path)), "0", "area"])
        assert result.exit_code == 1
        assert "Unsupported metric" in result.output

    def test_malformed_dataset_exits_with_query_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        _write_file(path, "-4")
        result = runner.invoke(app, ["query", str(path), "0", "length"])
        assert result.exit_code == 1
        assert "must be non-negative" in result.output

    def test_missing_dataset_exits_with_query_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["dump", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "nope.txt" in result.output

    def test_dump_text(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["dump", str(_dataset(tmp_path))])
        assert result.exit_code == 0
        assert "Lengths :" in result.output
        assert "Speeds :" in result.output
        assert "traj[0] : 9 (2), 6 (1), -1 (-)" in result.output

    def test_dump_json(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["dump", str(_dataset(tmp_path)), "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["trajectory_count"] == 3
        assert payload["pair_count"] == 3
        first = payload["trajectories"][0]
        assert first["neighbors"]["length"][0] == {"neighbor_id": 2, "score": 9.0}
