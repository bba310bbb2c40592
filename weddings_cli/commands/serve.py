"""Run the invite site locally."""

import logging

import typer
from typing_extensions import Annotated

from weddings import create_app
from weddings_cli.context import get_context
from weddings_cli.display import console

logger = logging.getLogger(__name__)


def serve_command(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on")] = 5000,
    debug: Annotated[bool, typer.Option("--debug", help="Enable Flask debug mode")] = False,
) -> None:
    """Serve invites at /weddings/<slug>/ with the Flask development server."""
    ctx = get_context()
    app = create_app(ctx.config)
    logger.info(f"Serving invites from {ctx.config.data_dir}")
    console.print(f"Invites at http://{host}:{port}/weddings/<slug>/ (Ctrl+C to stop)")
    app.run(host=host, port=port, debug=debug)
