# SPDX-License-Identifier: MIT
"""Tests for the versioncmp command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from versioncmp.cli import cli


@pytest.fixture(autouse=True)
def _isolate_env(clean_env: pytest.MonkeyPatch) -> None:
    """Run every CLI test without inherited VERSIONCMP_* settings."""


class TestParseCommand:
    """Tests for versioncmp parse."""

    def test_parse_text(self, cli_runner: CliRunner) -> None:
        """Test parsing with text output."""
        result = cli_runner.invoke(cli, ["parse", "v1.2.3-rc.1+build.5"])

        assert result.exit_code == 0
        assert "major: 1" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build: build.5" in result.output

    def test_parse_absent_fields(self, cli_runner: CliRunner) -> None:
        """Test that absent labels are shown as '-'."""
        result = cli_runner.invoke(cli, ["parse", "1.2"])

        assert result.exit_code == 0
        assert "patch: 0" in result.output
        assert "prerelease: -" in result.output

    def test_parse_json(self, cli_runner: CliRunner) -> None:
        """Test parsing with JSON output."""
        result = cli_runner.invoke(cli, ["--json", "parse", "1.2.3-alpha"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": "alpha",
            "build": None,
        }

    def test_parse_strict_rejects_partial(self, cli_runner: CliRunner) -> None:
        """Test that --strict rejects a partial version."""
        result = cli_runner.invoke(cli, ["--strict", "parse", "1.2"])

        assert result.exit_code == 1
        assert "1.2 is not a valid version" in result.output

    def test_parse_strict_from_env(self, cli_runner: CliRunner) -> None:
        """Test that VERSIONCMP_STRICT sets the default mode."""
        result = cli_runner.invoke(cli, ["parse", "1.2"], env={"VERSIONCMP_STRICT": "true"})

        assert result.exit_code == 1

    def test_loose_flag_overrides_env(self, cli_runner: CliRunner) -> None:
        """Test that --loose wins over VERSIONCMP_STRICT."""
        result = cli_runner.invoke(
            cli, ["--loose", "parse", "1.2"], env={"VERSIONCMP_STRICT": "true"}
        )

        assert result.exit_code == 0

    def test_invalid_env(self, cli_runner: CliRunner) -> None:
        """Test that a bad VERSIONCMP_FORMAT is reported."""
        result = cli_runner.invoke(cli, ["parse", "1.2.3"], env={"VERSIONCMP_FORMAT": "xml"})

        assert result.exit_code == 1
        assert "VERSIONCMP_FORMAT" in result.output


class TestCmpCommand:
    """Tests for versioncmp cmp."""

    @pytest.mark.parametrize(
        "v1, v2, expected",
        [("1.0.0-alpha", "1.0.0", "-1"), ("1.0.0", "1.0.0+build", "0"), ("2.0.0", "1.9.9", "1")],
    )
    def test_cmp(self, cli_runner: CliRunner, v1: str, v2: str, expected: str) -> None:
        """Test printing the comparison result."""
        result = cli_runner.invoke(cli, ["cmp", v1, v2])

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_cmp_json(self, cli_runner: CliRunner) -> None:
        """Test comparison with JSON output."""
        result = cli_runner.invoke(cli, ["--json", "cmp", "1.0.0-2", "1.0.0-9"])

        assert result.exit_code == 0
        assert json.loads(result.output)["result"] == -1

    def test_cmp_invalid(self, cli_runner: CliRunner) -> None:
        """Test that an invalid version is reported."""
        result = cli_runner.invoke(cli, ["cmp", "1.0.0", "foo"])

        assert result.exit_code == 1
        assert "foo is not a valid version" in result.output


class TestSortCommand:
    """Tests for versioncmp sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        """Test sorting lowest first."""
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0.0-rc.1", "0.9"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9", "1.0.0-rc.1", "1.0.0"]

    def test_sort_reverse_json(self, cli_runner: CliRunner) -> None:
        """Test sorting highest first with JSON output."""
        result = cli_runner.invoke(cli, ["--json", "sort", "-r", "1.0.0-beta", "1.0.0-alpha"])

        assert result.exit_code == 0
        assert json.loads(result.output) == ["1.0.0-beta", "1.0.0-alpha"]

    def test_sort_requires_arguments(self, cli_runner: CliRunner) -> None:
        """Test that sort needs at least one version."""
        result = cli_runner.invoke(cli, ["sort"])

        assert result.exit_code != 0


class TestCheckCommand:
    """Tests for versioncmp check."""

    def test_check_valid(self, cli_runner: CliRunner) -> None:
        """Test checking valid versions."""
        result = cli_runner.invoke(cli, ["check", "1.2.3", "v2.0.0-rc.1"])

        assert result.exit_code == 0
        assert "All 2 version(s) are valid" in result.output

    def test_check_invalid(self, cli_runner: CliRunner) -> None:
        """Test that each invalid version is reported."""
        result = cli_runner.invoke(cli, ["--strict", "check", "1.2.3", "1.2", "1.2.3-%?"])

        assert result.exit_code == 1
        assert "1.2 is not a valid version" in result.output
        assert "1.2.3-%?" in result.output

    def test_check_json(self, cli_runner: CliRunner) -> None:
        """Test check with JSON output."""
        result = cli_runner.invoke(cli, ["--json", "check", "1.2.3+build.0-rc1"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False
        assert "1.2.3+build.0-rc1" in data["errors"]
