"""Tests for CLI commands."""

from importlib.metadata import PackageNotFoundError

import pytest
from typer.testing import CliRunner

from intcalc import _version
from intcalc._version import get_version
from intcalc.cli import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_prompt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INTCALC_PROMPT", raising=False)


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "intcalc" in result.output

    def test_version_from_metadata(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(_version, "version", lambda name: "9.8.7")
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.strip() == "intcalc 9.8.7"

    def test_uninstalled_checkout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(_version, "version", missing)
        assert get_version() == "0.0.0"


class TestEvalCommand:
    def test_expression(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "2 + 3 * 4"])
        assert result.exit_code == 0
        assert result.output.strip() == "14"

    def test_with_assignments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "x * y", "--set", "x = 4", "-s", "y = x + 1"])
        assert result.exit_code == 0
        assert result.output.strip() == "20"

    def test_division_by_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1 / 0"])
        assert result.exit_code == 1
        assert "Division by zero" in result.output

    def test_unknown_variable(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "y + 1"])
        assert result.exit_code == 1
        assert "Unknown variable" in result.output

    def test_bad_assignment(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1", "--set", "x = 1 / 0"])
        assert result.exit_code == 1
        assert "Invalid assignment" in result.output

    def test_huge_result_on_one_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "10 ^ 5000"])
        assert result.exit_code == 0
        assert result.output.strip() == "1" + "0" * 5000


class TestReplCommand:
    def test_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            app,
            ["repl"],
            input="x = 4\n\nx * x\n/foo\n1 / 0\n/exit\n2 + 2\n",
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == ["16", "Unknown command", "Division by zero", "Bye!"]

    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="/help\n/exit\n")
        assert result.exit_code == 0
        assert "Saving an expression" in result.output

    def test_end_of_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="1 + 1\n")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["2", "Bye!"]

    def test_prompt_printed_literally(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("INTCALC_PROMPT", "[calc] ")
        result = cli_runner.invoke(app, ["repl"], input="1 + 1\n/exit\n")
        assert result.exit_code == 0
        assert result.output.startswith("[calc] 2")
        assert result.output.count("[calc] ") == 2
