"""JSON export of a validation result.

Why JSON:
- Interoperates with deployment scripts and CI pipelines.
- Keeps the CLI table rendering separate from the machine-readable output.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ValidationResult


def result_to_json(result: ValidationResult) -> str:
    """Render `result` as stable, UTF-8 friendly JSON."""

    payload = {
        "valid": result.is_valid,
        **result.model_dump(mode="json"),
    }
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_result_json(*, result: ValidationResult, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result_to_json(result), encoding="utf-8")
    return output_path
