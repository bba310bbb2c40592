"""Preview a rendered invite in the terminal."""

import logging

import typer
from typing_extensions import Annotated

from weddings.exceptions import ConfigurationError, DetailsNotFoundError
from weddings.render import render_invite
from weddings.render.decor import DecorRenderer, ThemeModeSource
from weddings_cli.context import get_context
from weddings_cli.display import InviteRenderer, console

logger = logging.getLogger(__name__)


def show_command(
    slug: Annotated[
        str,
        typer.Argument(help="Slug of the invite to preview"),
    ],
    dark: Annotated[
        bool,
        typer.Option("--dark", help="Resolve decor opacity for dark mode"),
    ] = False,
    toggle: Annotated[
        bool,
        typer.Option("--toggle", help="Also show the decor after switching light/dark mode"),
    ] = False,
) -> None:
    """Show what a guest sees after unlocking the invite."""
    ctx = get_context()
    config = ctx.config

    try:
        details = ctx.loader.load(config.details_path(slug), slug=slug)
    except DetailsNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    except ConfigurationError as e:
        logger.error(f"Cannot render '{slug}': {e}")
        raise typer.Exit(1)

    page = render_invite(
        details,
        f"/weddings/{slug}/calendar.ics",
        tz=config.tzinfo,
        page_url=f"https://{config.site_domain}/weddings/{slug}/",
        dark=dark,
        slug=slug,
    )

    # Decor follows the theme mode the same way the page's observer does
    mode = ThemeModeSource(dark=dark)
    decor = DecorRenderer(on_render=lambda state: setattr(page, "decor", state))
    decor.bind(mode, details)

    renderer = InviteRenderer()
    renderer.render(page)
    if toggle:
        mode.toggle()
        console.print(f"\n[dim]After switching to {'dark' if mode.dark else 'light'} mode:[/dim]")
        renderer.render_presentation(page)
    decor.unbind()
    console.print()
