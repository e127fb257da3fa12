"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import config_command, render_command
from cli.context import CLIContext, set_context

app = typer.Typer(
    help="Generate RFC 5545 calendar documents.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show informational log messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Configure logging and the shared context before any command runs."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("render")(render_command)
app.command("config")(config_command)
