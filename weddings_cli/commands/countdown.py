"""Live countdown to the primary event."""

import logging
import time

import typer
from rich.live import Live
from typing_extensions import Annotated

from weddings.exceptions import ConfigurationError, DetailsNotFoundError
from weddings.formatters import localize
from weddings.render.countdown import Countdown, ThreadTimer, format_countdown, utc_now
from weddings_cli.context import get_context
from weddings_cli.display import console

logger = logging.getLogger(__name__)


def countdown_command(
    slug: Annotated[
        str,
        typer.Argument(help="Slug of the invite"),
    ],
    once: Annotated[
        bool,
        typer.Option("--once", help="Print the current value and exit"),
    ] = False,
) -> None:
    """Count down to the primary event, updating every second."""
    ctx = get_context()
    config = ctx.config

    try:
        details = ctx.loader.load(config.details_path(slug), slug=slug)
    except (DetailsNotFoundError, ConfigurationError) as e:
        logger.error(str(e))
        raise typer.Exit(1)

    primary = details.primary_event
    target = localize(primary.start, config.tzinfo)

    if once:
        console.print(format_countdown(target, utc_now(), primary.title))
        return

    with Live(console=console, refresh_per_second=4) as live:

        def show(text: str) -> None:
            live.update(f"[bold]{details.couple_names}[/bold]  {text}")

        countdown = Countdown(ThreadTimer(), on_update=show)
        countdown.mount(target, primary.title)
        try:
            while countdown.running:
                time.sleep(0.25)
        except KeyboardInterrupt:
            pass
        finally:
            countdown.unmount()
