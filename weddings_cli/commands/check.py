"""Validate details documents before publishing them."""

import logging
from typing import Optional

import typer
from rich.table import Table
from typing_extensions import Annotated

from weddings.calendar import list_slugs
from weddings.exceptions import ConfigurationError, DetailsNotFoundError
from weddings.models import WeddingDetails
from weddings_cli.context import get_context
from weddings_cli.display import console

logger = logging.getLogger(__name__)

LIST_FIELDS = ("schedule", "updates", "contacts")


def _skipped_entries(document: dict, details: WeddingDetails) -> list[str]:
    """Describe list entries that validation dropped."""
    notes = []
    for key in LIST_FIELDS:
        raw = document.get(key)
        if not isinstance(raw, list):
            continue
        dropped = len(raw) - len(getattr(details, key))
        if dropped:
            notes.append(f"{dropped} invalid {key} entr{'y' if dropped == 1 else 'ies'} skipped")
    return notes


def check_command(
    slug: Annotated[
        Optional[str],
        typer.Argument(help="Slug to check (default: every details file)"),
    ] = None,
) -> None:
    """
    Check details files for missing required fields and other problems.

    Exits with status 1 if any file cannot be rendered.
    """
    ctx = get_context()
    config = ctx.config

    slugs = [slug] if slug else list_slugs(config.data_dir, config.reserved_slugs)
    if not slugs:
        console.print(f"No details files found in {config.data_dir}")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Slug", style="cyan")
    table.add_column("Status")
    table.add_column("Events", justify="right")
    table.add_column("Notes")

    failures = 0
    for name in slugs:
        try:
            document = ctx.loader.load_raw(config.details_path(name))
            details = WeddingDetails.from_document(document, slug=name)
        except (DetailsNotFoundError, ConfigurationError) as e:
            failures += 1
            table.add_row(name, "[red]error[/red]", "-", str(e))
            continue

        notes = []
        if details.password is None:
            notes.append("no password (page cannot be unlocked)")
        notes.extend(_skipped_entries(document, details))
        status = "[yellow]warning[/yellow]" if notes else "[green]ok[/green]"
        table.add_row(name, status, str(len(details.schedule)), "; ".join(notes))

    console.print(table)
    if failures:
        raise typer.Exit(1)
