"""Loading settings input from JSON and exporting results."""

from __future__ import annotations

import json

import pytest

from adapters.json_exporter import export_result_json, result_to_json
from adapters.settings_loader import load_settings_input, settings_input_from_mapping
from core.domain.errors import NegativeInterval
from core.domain.models import ValidationResult


def test_load_settings_with_checkbox_mapping(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "broker_url": "tcp://localhost:61613",
                "jwt_expiry": "2 days",
                "gemini_url": "http://localhost:8000/gemini",
                "gemini_pseudo_bundles": {"article:node": "article:node", "page:node": 0},
                "fedora_url": "http://localhost:8080/fcrepo/rest",
            }
        ),
        encoding="utf-8",
    )

    data = load_settings_input(path)

    assert data.broker_url == "tcp://localhost:61613"
    assert data.jwt_expiry == "2 days"
    assert data.selected_bundles == {"article:node"}


def test_selected_bundles_key_is_accepted() -> None:
    data = settings_input_from_mapping({"selected_bundles": ["image:media"]})

    assert data.selected_bundles == {"image:media"}


def test_load_rejects_non_object(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings_input(path)


def test_result_json_is_stable(tmp_path) -> None:
    result = ValidationResult(failures=[NegativeInterval().to_failure()])

    out = export_result_json(result=result, output_path=tmp_path / "out" / "result.json")
    payload = json.loads(out.read_text(encoding="utf-8"))

    assert payload == {
        "valid": False,
        "failures": [
            {
                "field": "jwt_expiry",
                "kind": "negative_interval",
                "message": "Time or interval expression cannot be negative",
            }
        ],
    }
    assert json.loads(result_to_json(ValidationResult())) == {"failures": [], "valid": True}
