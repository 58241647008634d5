"""CLI integration tests for mdplain using Click's CliRunner."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdplain import __version__
from mdplain.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    """Create a fresh CliRunner for each test."""
    return CliRunner()


@pytest.fixture()
def sample_md(tmp_path: Path) -> Path:
    """Create a sample Markdown file for CLI tests."""
    p = tmp_path / "readme.md"
    p.write_text(
        "# mdplain CLI test\n\nThis is **sample** content with a [link](https://example.com).\n",
        encoding="utf-8",
    )
    return p


# ---------------------------------------------------------------------------
# Group options
# ---------------------------------------------------------------------------


class TestCliHelp:
    """Verify the CLI shows help text when invoked with no arguments."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "mdplain" in result.output
        assert "convert" in result.output


class TestCliVersion:
    """Verify the CLI --version flag prints the version string."""

    def test_cli_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert "mdplain" in result.output.lower()


class TestCliRules:
    """Verify the 'rules' subcommand lists the pipeline."""

    def test_cli_rules(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rules"])

        assert result.exit_code == 0
        assert "headings" in result.output
        assert "escapes" in result.output
        assert "blank_lines" in result.output


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


class TestCliConvert:
    """Verify Markdown conversion via the CLI."""

    def test_convert_file(self, runner: CliRunner, sample_md: Path) -> None:
        result = runner.invoke(cli, ["convert", str(sample_md)])

        assert result.exit_code == 0
        assert "mdplain CLI test" in result.output
        assert "sample content with a link (https://example.com)." in result.output
        assert "**" not in result.output
        assert "#" not in result.output

    def test_convert_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert"], input="# Title\n\nBody")

        assert result.exit_code == 0
        assert result.output == "Title\n\nBody\n"

    def test_convert_dash_reads_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "-"], input="- one\n- two\n")

        assert result.exit_code == 0
        assert result.output == "one\ntwo\n"

    def test_convert_json_format(self, runner: CliRunner, sample_md: Path) -> None:
        result = runner.invoke(cli, ["convert", str(sample_md), "-f", "json", "-q"])

        assert result.exit_code == 0
        parsed = json.loads(result.output)
        assert parsed["success"] is True
        assert parsed["filename"] == "readme.md"
        assert parsed["content"].startswith("mdplain CLI test")
        assert parsed["stats"]["reductionPercent"] > 0

    def test_convert_output_file(
        self, runner: CliRunner, sample_md: Path, tmp_path: Path
    ) -> None:
        output_file = tmp_path / "out.txt"
        result = runner.invoke(cli, ["convert", str(sample_md), "-o", str(output_file)])

        assert result.exit_code == 0
        assert "Output written" in result.output
        assert output_file.read_text(encoding="utf-8").startswith("mdplain CLI test")

    def test_convert_stats(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--stats"], input="**bold**")

        assert result.exit_code == 0
        assert "bold" in result.output
        assert "8 -> 4 chars" in result.output
        assert "50.0% reduction" in result.output

    def test_convert_disable_rule(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["convert", "--disable", "links"], input="[Docs](https://example.com)"
        )

        assert result.exit_code == 0
        assert result.output == "[Docs](https://example.com)\n"

    def test_convert_disable_unknown_rule(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "--disable", "footnotes"], input="x")

        assert result.exit_code != 0

    def test_convert_nonexistent_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["convert", str(tmp_path / "nope.md")])

        # click.Path(exists=True) rejects the argument
        assert result.exit_code != 0

    def test_convert_undecodable_file(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.md"
        bad.write_bytes(b"\xff\xfe\xfa")
        result = runner.invoke(cli, ["convert", str(bad)])

        assert result.exit_code == 1
        assert "FAIL" in result.output


class TestCliConvertMultipleFiles:
    """Verify converting several files produces combined output."""

    @pytest.fixture()
    def two_files(self, tmp_path: Path) -> list[Path]:
        a = tmp_path / "a.md"
        b = tmp_path / "b.md"
        a.write_text("# First\n\n*one*", encoding="utf-8")
        b.write_text("# Second\n\n`two`", encoding="utf-8")
        return [a, b]

    def test_text_output(self, runner: CliRunner, two_files: list[Path]) -> None:
        result = runner.invoke(cli, ["convert", *map(str, two_files)])

        assert result.exit_code == 0
        assert "OK" in result.output
        assert "a.md\n\nFirst\n\none\n\n---\n\nb.md\n\nSecond\n\ntwo" in result.output

    def test_json_output(self, runner: CliRunner, two_files: list[Path]) -> None:
        result = runner.invoke(cli, ["convert", *map(str, two_files), "-f", "json", "-q"])

        assert result.exit_code == 0
        parsed = json.loads(result.output)
        assert [item["content"] for item in parsed] == ["First\n\none", "Second\n\ntwo"]
