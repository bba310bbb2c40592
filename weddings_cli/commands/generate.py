"""Generate calendar files from details documents."""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from weddings.calendar import generate_all
from weddings_cli.context import get_context
from weddings_cli.display import console

logger = logging.getLogger(__name__)


def generate_command(
    slugs: Annotated[
        Optional[list[str]],
        typer.Argument(help="Slugs to generate (default: every details file)"),
    ] = None,
) -> None:
    """
    Generate {slug}.ics calendars from {slug}.json details.

    A file that cannot be read or parsed is reported and skipped; the
    other files are still generated. Exits with status 1 if any failed.
    """
    ctx = get_context()
    config = ctx.config

    result = generate_all(config, slugs=slugs or None)
    if not result.written and not result.failed:
        console.print(f"No details files found in {config.data_dir}")
        return

    for slug, path in result.written.items():
        console.print(f"  [green]✓[/green] {slug} → {path}")
    for slug, reason in result.failed.items():
        console.print(f"  [red]✗[/red] {slug}: {reason}")

    console.print(f"\nGenerated: {len(result.written)}, Failed: {len(result.failed)}")
    if not result.ok:
        raise typer.Exit(1)
