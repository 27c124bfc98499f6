"""CLI entry point for inspecting and navigating a chat list snapshot."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from src.cli.config import CliConfig
from src.cli.query import QueryEngine

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--snapshot",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Chat list snapshot JSON. Overrides CHAT_LIST_SNAPSHOT.",
)
@click.pass_context
def cli(ctx: click.Context, snapshot: Path | None) -> None:
    """Chat list inspector — sections, rows, and keyboard navigation."""
    load_dotenv()
    config = CliConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj = QueryEngine(snapshot or config.snapshot_path)


# Import and register commands after cli is defined to avoid circular imports.
from src.cli.commands import (  # noqa: E402
    avatars,
    locate,
    next_row,
    prev_row,
    sections,
    summary,
    threads,
)

cli.add_command(summary)
cli.add_command(sections)
cli.add_command(threads)
cli.add_command(locate)
cli.add_command(next_row)
cli.add_command(prev_row)
cli.add_command(avatars)
