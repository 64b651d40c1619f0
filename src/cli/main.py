"""Command-line entry point (Typer).

Why a thin CLI:
- Collects operator input (flags or a JSON file) and prints results.
- All rules live in `core.services.settings_validator`.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_result_json, result_to_json
from adapters.settings_loader import load_settings_input, settings_input_from_mapping
from cli import doctor
from cli.ui_components import build_failures_table, build_input_table, build_result_panel, print_banner
from core.config import AppSettings
from core.domain.models import SettingsInput
from core.log import setup_logging
from core.services.settings_validator import build_validator

app = typer.Typer(no_args_is_help=True, help="Validate repository administration settings.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def _collect_input(
    *,
    input_path: Path | None,
    broker_url: str | None,
    jwt_expiry: str | None,
    gemini_url: str | None,
    bundles: list[str] | None,
) -> SettingsInput:
    values: dict[str, object] = {}
    if input_path is not None:
        values = load_settings_input(input_path).model_dump()

    overrides = {
        "broker_url": broker_url,
        "jwt_expiry": jwt_expiry,
        "gemini_url": gemini_url,
        "selected_bundles": bundles or None,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return settings_input_from_mapping(values)


@app.command()
def validate(
    broker_url: Optional[str] = typer.Option(None, "--broker-url", help="Broker URL, e.g. tcp://localhost:61613."),
    jwt_expiry: Optional[str] = typer.Option(None, "--jwt-expiry", help='Interval expression, e.g. "2 days".'),
    gemini_url: Optional[str] = typer.Option(None, "--gemini-url", help="Gemini base URL."),
    bundles: Optional[List[str]] = typer.Option(
        None,
        "--bundle",
        help="Pseudo bundle as bundle:entity_type (repeatable).",
    ),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="JSON file with the settings; flags override its values.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the JSON result here."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Skip the banner and the input table."),
) -> None:
    """Validate settings and list every problem found."""

    settings = AppSettings()
    setup_logging(settings.log_level)

    try:
        data = _collect_input(
            input_path=input_path,
            broker_url=broker_url,
            jwt_expiry=jwt_expiry,
            gemini_url=gemini_url,
            bundles=bundles,
        )
    except (OSError, ValidationError, ValueError) as exc:
        _console.print(f"[red]Cannot read settings:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc

    result = build_validator(settings).validate_all(data)

    if output is not None:
        export_result_json(result=result, output_path=output)

    if as_json:
        typer.echo(result_to_json(result), nl=False)
    else:
        if not quiet:
            print_banner(_console)
            _console.print(build_input_table(data))
        if not result.is_valid:
            _console.print(build_failures_table(result))
        _console.print(build_result_panel(result))

    if not result.is_valid:
        raise typer.Exit(code=EXIT_INVALID)


def run() -> None:
    app()
