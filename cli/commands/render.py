"""Render a JSON calendar description as iCalendar text."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from icsgen.document import load_document
from icsgen.exceptions import IcsError
from cli.context import get_context

logger = logging.getLogger(__name__)


def render_command(
    source: Annotated[
        Path,
        typer.Argument(help="Path to a JSON calendar description"),
    ],
    prod_id: Annotated[
        str | None,
        typer.Option("--prod-id", help="Product identifier (overrides config and document)"),
    ] = None,
    timezone: Annotated[
        str | None,
        typer.Option("--timezone", "-z", help="Calendar timezone (overrides config default)"),
    ] = None,
) -> None:
    """
    Render a calendar to standard output.

    The JSON file is either an array of events or an object with calendar
    fields (name, description, method, timezone, calendar_scale) and an
    'events' array.
    """
    ctx = get_context()
    config = ctx.config

    if not source.exists():
        logger.error(f"Input file {source} does not exist")
        raise typer.Exit(1)

    try:
        document = load_document(source)
        if prod_id is not None:
            document.prod_id = prod_id
        if timezone is not None:
            document.timezone = timezone
        calendar = document.to_component(config.prod_id, config.default_timezone)
        output = ctx.renderer.render_bytes(calendar)
    except IcsError as e:
        logger.error(f"Render failed: {e}")
        raise typer.Exit(1)

    sys.stdout.buffer.write(output)
    sys.stdout.flush()
    logger.info(f"Rendered {source} ({len(output)} bytes)")

