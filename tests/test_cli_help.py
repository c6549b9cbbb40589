from __future__ import annotations

from typer.testing import CliRunner

from fakenews.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert "fakenews lines" in result.stdout
    assert "random-line" in result.stdout
    assert "chain" in result.stdout


def test_lines_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["lines", "--help"])
    assert "--limit" in result.stdout
    assert "--infinite" in result.stdout
    assert "--config" in result.stdout


def test_chain_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["chain", "--help"])
    assert "--mode" in result.stdout
    assert "--seed" in result.stdout
