"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by `validate` and `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import SettingsInput, ValidationResult


def print_banner(console: Console) -> None:
    title = Text("Islandora Settings", style="bold cyan")
    subtitle = Text("Broker • JWT expiry • Gemini", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_input_table(data: SettingsInput) -> Table:
    """Table echoing what is about to be validated."""

    table = Table(title="Submitted settings")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("broker_url", Text(data.broker_url or "-"))
    table.add_row("jwt_expiry", Text(data.jwt_expiry or "-"))
    table.add_row("gemini_url", Text(data.gemini_url or "-"))
    bundles = Text()
    for i, bundle in enumerate(data.pseudo_bundles()):
        if i:
            bundles.append(", ")
        bundles.append(bundle.identifier)
        if not bundle.is_known_entity_type:
            bundles.append(" (unknown entity type)", style="yellow")
    table.add_row("gemini_pseudo_bundles", bundles if bundles.plain else Text("-"))
    return table


def build_failures_table(result: ValidationResult) -> Table:
    table = Table(title="Validation failures")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Kind", style="yellow", no_wrap=True)
    table.add_column("Message", style="red")
    for failure in result.failures:
        # Messages echo operator input: no markup.
        table.add_row(failure.field.value, failure.kind.value, Text(failure.message))
    return table


def build_result_panel(result: ValidationResult) -> Panel:
    if result.is_valid:
        return Panel(Text("All settings are valid.", style="bold green"), border_style="green")
    count = len(result.failures)
    body = Text(f"{count} problem(s) found. Fix them and submit again.", style="bold red")
    return Panel(body, border_style="red")
