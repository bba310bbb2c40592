"""Typer application and command registration."""

import typer
from typing_extensions import Annotated

from weddings_cli import setup_logging
from weddings_cli.commands import (
    check_command,
    countdown_command,
    generate_command,
    serve_command,
    show_command,
)
from weddings_cli.context import CLIContext, set_context

app = typer.Typer(
    name="weddings",
    help="Wedding invite tools: calendar generation, config checks and a local server.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Set up logging and the shared context before any command runs."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("generate")(generate_command)
app.command("check")(check_command)
app.command("show")(show_command)
app.command("countdown")(countdown_command)
app.command("serve")(serve_command)
