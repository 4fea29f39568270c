"""Tests for the basicsdemo CLI."""

from typer.testing import CliRunner

from basicsdemo.__main__ import app

runner = CliRunner()

EXPECTED = [
    "Hello, World! My name is Alice.",
    "Sum: 15",
    "Count is greater than 5",
    "Iteration 0",
    "Iteration 1",
    "Iteration 2",
    "John Doe is 30 years old.",
]


def test_run_prints_all_lines():
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == EXPECTED


def test_run_verbose_keeps_stdout_to_demo_lines():
    result = runner.invoke(app, ["run", "-v"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == EXPECTED


def test_run_single_step():
    result = runner.invoke(app, ["run", "--step", "sum"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Sum: 15"]


def test_run_overrides():
    result = runner.invoke(app, ["run", "-s", "threshold", "--count", "5"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Count is not greater than 5"]

    result = runner.invoke(app, ["run", "-s", "greeting", "--name", "Bob"])
    assert result.stdout.splitlines() == ["Hello, World! My name is Bob."]


def test_run_unknown_step_exits_nonzero():
    result = runner.invoke(app, ["run", "--step", "bogus"])
    assert result.exit_code == 1
    assert "Unknown step: bogus" in result.output


def test_list_shows_steps():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "loop" in result.output
