"""CLI flows with the validator wired to fakes."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fake_validator(monkeypatch, validator):
    """Route both commands to the fake-backed validator and silence logging."""

    monkeypatch.setenv("ISLANDORA_SETTINGS_LOG_LEVEL", "CRITICAL")
    monkeypatch.setattr(cli_main, "build_validator", lambda settings=None: validator)
    monkeypatch.setattr(doctor, "build_validator", lambda settings=None: validator)


def _json_output(result) -> dict:
    return json.loads(result.stdout)


def test_validate_valid_settings() -> None:
    result = runner.invoke(
        cli_main.app,
        [
            "validate",
            "--broker-url",
            "tcp://localhost:61613",
            "--jwt-expiry",
            "2 days",
            "--gemini-url",
            "http://localhost:8000/gemini",
            "--bundle",
            "article:node",
            "--json",
        ],
    )

    assert result.exit_code == 0
    assert _json_output(result) == {"failures": [], "valid": True}


def test_validate_reports_all_failures(broker_factory) -> None:
    broker_factory.fail_on = "connect"

    result = runner.invoke(
        cli_main.app,
        [
            "validate",
            "--broker-url",
            "tcp://localhost:61613",
            "--jwt-expiry",
            "-1 day",
            "--bundle",
            "article:node",
            "--json",
        ],
    )

    assert result.exit_code == cli_main.EXIT_INVALID
    payload = _json_output(result)
    assert payload["valid"] is False
    assert [f["field"] for f in payload["failures"]] == ["broker_url", "jwt_expiry", "gemini_url"]


def test_validate_from_input_file_with_override(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"broker_url": "tcp://localhost:61613", "jwt_expiry": "0 days"}),
        encoding="utf-8",
    )
    output = tmp_path / "result.json"

    result = runner.invoke(
        cli_main.app,
        ["validate", "--input", str(path), "--jwt-expiry", "10 hours", "--output", str(output), "--quiet"],
    )

    assert result.exit_code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["valid"] is True


def test_validate_table_output_on_failure() -> None:
    result = runner.invoke(
        cli_main.app,
        ["validate", "--broker-url", "tcp://localhost:61613", "--jwt-expiry", "5 fortnights", "--quiet"],
    )

    assert result.exit_code == cli_main.EXIT_INVALID
    assert "no_recognized_unit" in result.stdout


def test_validate_unreadable_input(tmp_path) -> None:
    result = runner.invoke(cli_main.app, ["validate", "--input", str(tmp_path / "missing.json")])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT


def test_validate_malformed_bundle() -> None:
    result = runner.invoke(cli_main.app, ["validate", "--bundle", "article", "--jwt-expiry", "1 day"])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT


def test_doctor_probes_requested_broker(broker_factory, lookup_factory) -> None:
    result = runner.invoke(
        cli_main.app,
        ["doctor", "run", "--broker-url", "tcp://localhost:61613", "--gemini-url", "http://localhost:8000"],
    )

    assert result.exit_code == 0
    assert broker_factory.urls[0][0] == "tcp://localhost:61613"
    assert lookup_factory.lookups == ["http://example.org"]


def test_validate_input_with_scalar_bundles(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"jwt_expiry": "1 day", "selected_bundles": 5}), encoding="utf-8")

    result = runner.invoke(cli_main.app, ["validate", "--input", str(path)])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT
