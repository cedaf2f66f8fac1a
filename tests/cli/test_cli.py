"""Tests for the chronal command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chronal.cli import cli
from chronal.errors import InvalidConfigError

BASE = "2024-01-05T10:30:00Z"
ENV_VARS = ("CHRONAL_DISTANCE", "CHRONAL_MATCH_BY_ORDER", "CHRONAL_LANGUAGES")


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch) -> Path:
    """Config location that starts out missing, with no environment overrides."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "chronal" / "config.json"


def _parse(runner, config_path, *args):
    return runner.invoke(cli, ["parse", *args, "--base", BASE, "--config", str(config_path)])


class TestParseCommand:
    def test_prints_resolved_time(self, runner, config_path):
        result = _parse(runner, config_path, "call me next wednesday at 2:25pm")

        assert result.exit_code == 0
        assert "2024-01-10T14:25:00+00:00" in result.output
        assert "next wednesday at 2:25pm" in result.output
        assert "index: 8" in result.output

    def test_json_output(self, runner, config_path):
        result = _parse(runner, config_path, "in 5 minutes", "--json")

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["result"]["time"] == "2024-01-05T10:35:00+00:00"
        assert payload["result"]["text"] == "in 5 minutes"

    def test_nothing_found_exits_1(self, runner, config_path):
        result = _parse(runner, config_path, "hello world")

        assert result.exit_code == 1

    def test_invalid_date_exits_2(self, runner, config_path):
        result = _parse(runner, config_path, "april 31")

        assert result.exit_code == 2
        assert "MALFORMED_FIELD" in result.output

    def test_unknown_language_exits_2(self, runner, config_path):
        result = _parse(runner, config_path, "tomorrow", "--lang", "xx")

        assert result.exit_code == 2
        assert "UNSUPPORTED_LANGUAGE" in result.output

    def test_distance_option(self, runner, config_path):
        result = _parse(runner, config_path, "February 23, 2019 | 1:46pm", "--distance", "2")

        assert result.exit_code == 0
        assert "2019-02-23T10:30:00+00:00" in result.output

    def test_match_by_position_option(self, runner, config_path):
        result = _parse(runner, config_path, "14:30 5pm", "--match-by-position")

        assert result.exit_code == 0
        assert "2024-01-05T17:00:00+00:00" in result.output

    def test_settings_file_is_used(self, runner, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"languages": ["en"], "options": {"distance": 2}}))

        result = _parse(runner, config_path, "February 23, 2019 | 1:46pm")

        assert "2019-02-23T10:30:00+00:00" in result.output

    def test_invalid_base(self, runner, config_path):
        result = runner.invoke(cli, ["parse", "tomorrow", "--base", "yesterday-ish", "--config", str(config_path)])

        assert result.exit_code == 2

    def test_debug_flag(self, runner, config_path):
        result = runner.invoke(cli, ["--debug", "parse", "tomorrow", "--base", BASE, "--config", str(config_path)])

        assert result.exit_code == 0
        assert "2024-01-06T10:30:00+00:00" in result.output


class TestCasesCommand:
    def test_cases_file(self, runner, config_path, tmp_path):
        cases = tmp_path / "cases.txt"
        cases.write_text("# weekdays\nlast monday\n\nqwerty\n")

        result = runner.invoke(cli, ["cases", str(cases), "--base", BASE, "--config", str(config_path)])

        assert result.exit_code == 0
        assert "last monday" in result.output
        assert "2024-01-01T10:30:00+00:00" in result.output
        assert "qwerty" in result.output
        assert "X" in result.output
        assert "weekdays" not in result.output

    def test_inputs_replace_the_file(self, runner, config_path, tmp_path):
        cases = tmp_path / "cases.txt"
        cases.write_text("last monday\n")

        result = runner.invoke(
            cli,
            ["cases", str(cases), "--input", "tomorrow", "--base", BASE, "--config", str(config_path)],
        )

        assert result.exit_code == 0
        assert "2024-01-06T10:30:00+00:00" in result.output
        assert "last monday" not in result.output

    def test_errors_are_shown_per_case(self, runner, config_path):
        result = runner.invoke(
            cli,
            ["cases", "--input", "april 31", "--input", "noon", "--base", BASE, "--config", str(config_path)],
        )

        assert result.exit_code == 0
        assert "MALFORMED_FIELD" in result.output
        assert "2024-01-05T12:00:00+00:00" in result.output

    def test_no_inputs_exits_1(self, runner, config_path, tmp_path):
        cases = tmp_path / "cases.txt"
        cases.write_text("# nothing but comments\n\n")

        result = runner.invoke(cli, ["cases", str(cases), "--config", str(config_path)])

        assert result.exit_code == 1


class TestConfigCommands:
    def test_init_writes_defaults(self, runner, config_path):
        result = runner.invoke(cli, ["config", "init", "--config", str(config_path)])

        assert result.exit_code == 0
        assert json.loads(config_path.read_text())["languages"] == ["en"]

    def test_init_refuses_to_overwrite(self, runner, config_path):
        runner.invoke(cli, ["config", "init", "--config", str(config_path)])

        result = runner.invoke(cli, ["config", "init", "--config", str(config_path)])

        assert result.exit_code == 1
        assert runner.invoke(cli, ["config", "init", "--force", "--config", str(config_path)]).exit_code == 0

    def test_set_and_show(self, runner, config_path):
        result = runner.invoke(cli, ["config", "set", "options.distance", "3", "--config", str(config_path)])
        assert result.exit_code == 0

        shown = runner.invoke(cli, ["config", "show", "--config", str(config_path)])

        assert shown.exit_code == 0
        assert json.loads(shown.stdout)["options"]["distance"] == 3

    def test_set_languages(self, runner, config_path):
        runner.invoke(cli, ["config", "set", "languages", "en,EN", "--config", str(config_path)])

        assert json.loads(config_path.read_text())["languages"] == ["en", "en"]

    def test_set_rejects_invalid_value(self, runner, config_path):
        result = runner.invoke(cli, ["config", "set", "--config", str(config_path), "--", "options.distance", "-1"])

        assert result.exit_code == 1
        assert not config_path.exists()

    def test_set_reports_a_corrupt_file(self, runner, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{not json")

        result = runner.invoke(cli, ["config", "set", "options.distance", "3", "--config", str(config_path)])

        assert result.exit_code == 2
        assert not isinstance(result.exception, InvalidConfigError)
        assert config_path.read_text() == "{not json"

    def test_validate(self, runner, config_path):
        runner.invoke(cli, ["config", "init", "--config", str(config_path)])

        result = runner.invoke(cli, ["config", "validate", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "Configuration valid" in result.output

    def test_validate_unknown_language(self, runner, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"languages": ["xx"]}))

        result = runner.invoke(cli, ["config", "validate", "--config", str(config_path)])

        assert result.exit_code == 1

    def test_validate_missing_file(self, runner, config_path):
        result = runner.invoke(cli, ["config", "validate", "--config", str(config_path)])

        assert result.exit_code == 1
