"""Loading operator input from JSON.

Supported shape (keys match the settings fields):

    {
      "broker_url": "tcp://localhost:61613",
      "jwt_expiry": "2 days",
      "gemini_url": "http://localhost:8000/gemini",
      "gemini_pseudo_bundles": {"article:node": "article:node", "page:node": 0}
    }

`gemini_pseudo_bundles` and `selected_bundles` are both accepted, as a list
or as a checkbox mapping.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import SettingsInput

_BUNDLE_KEYS = ("selected_bundles", "gemini_pseudo_bundles")


def settings_input_from_mapping(data: dict[str, Any]) -> SettingsInput:
    values = dict(data)
    for key in _BUNDLE_KEYS:
        if key in values:
            values["selected_bundles"] = values.pop(key)
            break
    return SettingsInput.model_validate(values)


def load_settings_input(path: Path) -> SettingsInput:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return settings_input_from_mapping(data)
