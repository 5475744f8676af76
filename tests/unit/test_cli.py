"""Tests for the factorial-hash CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from src.core.contracts import validate_digit_sum_report, validators
from src.core.math import MAX_SCALAR
from src.factorial_hash import __version__
from src.factorial_hash.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Print the sum of the decimal digits" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_digit_sum_text(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["10"])
    assert result.exit_code == 0
    assert result.output.strip() == "Sum of digits of factorial of 10 = 27"


def test_zero(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["0"])
    assert result.exit_code == 0
    assert "Sum of digits of factorial of 0 = 1" in result.output


def test_show_factorial(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["5", "--show-factorial"])
    assert result.exit_code == 0
    assert "Factorial of 5 = 120" in result.output
    assert "Sum of digits of factorial of 5 = 3" in result.output


def test_prompt_when_n_missing(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [], input="20\n")
    assert result.exit_code == 0
    assert "Enter a number within range [0,2000]" in result.output
    assert "Sum of digits of factorial of 20 = 54" in result.output


# --- Bound handling ---


def test_out_of_range(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["2001"])
    assert result.exit_code == 1
    assert "Given number (2001) is out of range [0,2000]!" in result.output


def test_negative_is_out_of_range(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--", "-1"])
    assert result.exit_code == 1
    assert "out of range" in result.output


def test_upper_bound_option(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--upper-bound", "3", "5"])
    assert result.exit_code == 1
    assert "Given number (5) is out of range [0,3]!" in result.output


def test_upper_bound_from_env(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [], input="4\n", env={"FACTORIAL_HASH_UPPER_BOUND": "9"})
    assert result.exit_code == 0
    assert "Enter a number within range [0,9]" in result.output


def test_non_integer_argument(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["abc"])
    assert result.exit_code == 2


# --- Output modes ---


def test_json_output(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--show-factorial", "20"])
    assert result.exit_code == 0

    payload = json.loads(result.output)
    validate_digit_sum_report(payload)
    assert payload["digit_sum"] == 54
    assert payload["factorial_decimal"] == "2432902008176640000"
    assert payload["limb_count"] == 3


def test_verbose_logs_to_stderr(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "10"])
    assert result.exit_code == 0
    assert "digit sum computed" in result.output


# --- Settings errors ---


def test_negative_upper_bound_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--upper-bound=-1", "5"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid setting upper_bound" in result.output
    assert "Traceback" not in result.output


def test_upper_bound_above_max_scalar_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--upper-bound", str(MAX_SCALAR + 1), "5"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid setting upper_bound" in result.output


def test_non_integer_upper_bound_from_env(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["5"], env={"FACTORIAL_HASH_UPPER_BOUND": "abc"})
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid setting upper_bound" in result.output


def test_max_scalar_upper_bound_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--upper-bound", str(MAX_SCALAR), "10"])
    assert result.exit_code == 0
    assert "Sum of digits of factorial of 10 = 27" in result.output


# --- Installed layout ---


def test_text_output_without_schema_dir(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Каталог схем нужен только для --json"""
    monkeypatch.setattr(validators, "DEFAULT_SCHEMA_DIR", tmp_path / "missing")
    monkeypatch.setattr(validators, "_SCHEMA_LOADER", None)

    result = cli_runner.invoke(cli, ["10"])
    assert result.exit_code == 0
    assert result.output.strip() == "Sum of digits of factorial of 10 = 27"


def test_json_output_without_schema_dir(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(validators, "DEFAULT_SCHEMA_DIR", tmp_path / "missing")
    monkeypatch.setattr(validators, "_SCHEMA_LOADER", None)

    result = cli_runner.invoke(cli, ["--json", "10"])
    assert result.exit_code == 1
    assert "Schema directory not found" in result.output
    assert "Traceback" not in result.output
