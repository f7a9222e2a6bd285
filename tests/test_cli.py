# tests/test_cli.py
"""
Tests for the fallible command-line interface (CLI).

Scope
-----
1.  **Command Registration**: `divide`, `parse` and `meaning` appear in `--help`.
2.  **Rendering**: container values are printed as `Some(..)`/`Nothing`/`Ok(..)`.
3.  **Exit Codes**: 1 for an `Err`, 2 for usage errors.
4.  **Fatal Faults**: a `Panic` is not caught by the CLI or the runner.

`CliRunner` only traps `Exception`, so a panic surfaces from `invoke` itself.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from fallible.cli import app
from fallible.core.panic import Panic


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """Create a fresh CliRunner for each test."""
    return CliRunner()


def test_cli_help_shows_usage(runner: CliRunner) -> None:
    """Invoking --help should list every command and exit 0."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0, f"Help failed: {result.output}"
    for command in ("divide", "parse", "meaning"):
        assert command in result.output


def test_divide_prints_option(runner: CliRunner) -> None:
    """`divide` prints the Option it got back."""
    result = runner.invoke(app, ["divide", "8", "3"])
    assert result.exit_code == 0, result.output
    assert "Some(2)" in result.output

    result = runner.invoke(app, ["divide", "4", "0"])
    assert result.exit_code == 0, result.output
    assert "Nothing" in result.output


def test_divide_no_remorse(runner: CliRunner) -> None:
    """`--no-remorse` prints the bare quotient, and panics on zero."""
    result = runner.invoke(app, ["divide", "8", "3", "--no-remorse"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "2"

    with pytest.raises(Panic):
        runner.invoke(app, ["divide", "4", "0", "--no-remorse"])


def test_parse_ok_and_err(runner: CliRunner) -> None:
    """`parse` exits 0 with the value, or 1 with the decoder message."""
    result = runner.invoke(app, ["parse", '{"a": 1}'])
    assert result.exit_code == 0, result.output
    assert "Ok" in result.output and '"a": 1' in result.output

    result = runner.invoke(app, ["parse", "'asdf'"])
    assert result.exit_code == 1, result.output
    assert "Err" in result.output and "Expecting value" in result.output


def test_meaning_from_text_and_file(runner: CliRunner, tmp_path: Path) -> None:
    """`meaning` reads the document from TEXT or from --file."""
    result = runner.invoke(app, ["meaning", '{"meaningOfLife": 42}'])
    assert result.exit_code == 0, result.output
    assert "Ok(42)" in result.output

    doc = tmp_path / "doc.json"
    doc.write_text('{"meaningOfLife": 42}', encoding="utf-8")
    result = runner.invoke(app, ["meaning", "--file", str(doc)])
    assert result.exit_code == 0, result.output
    assert "Ok(42)" in result.output


def test_meaning_recover_reports_field_error(runner: CliRunner) -> None:
    """With --recover a missing field is an `Err`, exit 1."""
    result = runner.invoke(app, ["meaning", "{}", "--recover"])
    assert result.exit_code == 1, result.output
    assert "missing" in result.output


def test_meaning_without_recover_panics(runner: CliRunner) -> None:
    """Without --recover a missing field crashes."""
    with pytest.raises(Panic):
        runner.invoke(app, ["meaning", "{}"])


def test_meaning_requires_exactly_one_input(runner: CliRunner, tmp_path: Path) -> None:
    """Neither or both of TEXT / --file is a usage error."""
    result = runner.invoke(app, ["meaning"])
    assert result.exit_code == 2

    doc = tmp_path / "doc.json"
    doc.write_text("{}", encoding="utf-8")
    result = runner.invoke(app, ["meaning", "{}", "--file", str(doc)])
    assert result.exit_code == 2


def test_divide_accepts_negative_operands(runner: CliRunner) -> None:
    """Negative numbers are operands, not options, and truncate toward zero."""
    result = runner.invoke(app, ["divide", "-7", "2"])
    assert result.exit_code == 0, result.output
    assert "Some(-3)" in result.output

    result = runner.invoke(app, ["divide", "7", "-2", "--no-remorse"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "-3"
