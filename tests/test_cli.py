import json
from pathlib import Path

from typer.testing import CliRunner

from pw_entropy.cli import app

runner = CliRunner()


def test_cli_analyze_outputs_json():
    """analyze prints the measured fields plus entropy as JSON."""
    result = runner.invoke(app, ["analyze", "--password", "LetMeIn"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["reduced_length"] == 7
    assert payload["base"] == 52
    assert payload["has_upper"] is True
    assert round(payload["entropy"], 1) == 39.9


def test_cli_analyze_prompts_for_password():
    result = runner.invoke(app, ["analyze"], input="letmein\n")
    assert result.exit_code == 0
    assert '"base": 26' in result.stdout


def test_cli_analyze_applies_config_and_overrides(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("ignore_sequence_case: true\n", encoding="utf-8")

    result = runner.invoke(
        app, ["analyze", "-p", "QWERTY", "--config", str(config_path)]
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["reduced_length"] == 0

    result = runner.invoke(
        app,
        [
            "analyze",
            "-p",
            "QWERTY",
            "--config",
            str(config_path),
            "--case-sensitive-sequences",
            "--zeroize",
        ],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["reduced_length"] == 6


def test_cli_analyze_rejects_bad_config(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- not a mapping\n", encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "-p", "letmein", "--config", str(config_path)]
    )
    assert result.exit_code != 0


def test_cli_print_config():
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "zeroize" in result.stdout


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name}")


def test_cli_analyze_reports_null_entropy_for_unclassified_password():
    """Infinite entropy is emitted as null so strict JSON parsers accept it."""
    result = runner.invoke(app, ["analyze", "--password", "äöü"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout, parse_constant=_reject_constant)
    assert payload["entropy"] is None
    assert payload["base"] == 0
    assert payload["strength"] == "bad"
