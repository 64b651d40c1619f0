"""Doctor command for environment diagnostics."""

from __future__ import annotations

from importlib import metadata
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.config import AppSettings, get_user_env_file
from core.domain.errors import SettingsValidationError
from core.services.settings_validator import ConfigValidator, build_validator

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_DISTRIBUTIONS = ("stomp.py", "dateparser", "httpx", "pydantic", "pydantic-settings")


def _check_distribution(name: str) -> tuple[bool, str]:
    try:
        return True, metadata.version(name)
    except metadata.PackageNotFoundError:
        return False, "not installed"


def _check_date_parser(validator: ConfigValidator) -> tuple[bool, str]:
    """Parse a known-good expression to detect dateparser issues."""

    try:
        interval = validator.validate_expiry("2 days")
    except SettingsValidationError as exc:
        return False, exc.message
    return True, f"'2 days' -> {interval.magnitude} {interval.unit}"


def _probe(check, *args) -> tuple[bool, str]:
    try:
        check(*args)
    except SettingsValidationError as exc:
        return False, exc.message
    return True, "reachable"


@app.command()
def run(
    broker_url: Optional[str] = typer.Option(None, "--broker-url", help="Also probe this broker."),
    gemini_url: Optional[str] = typer.Option(None, "--gemini-url", help="Also probe this Gemini service."),
) -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()
    validator = build_validator(settings)

    table = Table(title="Islandora Settings Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    table.add_row("Broker timeout", "OK", f"{settings.broker_timeout_seconds}s")
    table.add_row("Lookup timeout", "OK", f"{settings.lookup_timeout_seconds}s")
    table.add_row("Probe queue", "OK", settings.probe_queue)
    table.add_row("Probe URI", "OK", settings.probe_uri)

    for name in _DISTRIBUTIONS:
        ok, detail = _check_distribution(name)
        table.add_row(name, "OK" if ok else "FAIL", detail)

    ok_dates, detail_dates = _check_date_parser(validator)
    table.add_row("Date parser", "OK" if ok_dates else "FAIL", detail_dates)

    # Connectivity (opt-in)
    if broker_url:
        ok, detail = _probe(validator.validate_broker, broker_url)
        table.add_row("Broker", "OK" if ok else "FAIL", Text(detail))
    if gemini_url:
        ok, detail = _probe(validator.validate_lookup_service, gemini_url, 0)
        table.add_row("Gemini", "OK" if ok else "FAIL", Text(detail))

    _console.print(table)
