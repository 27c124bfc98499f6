"""CLI command implementations — all commands delegate to QueryEngine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.avatars.types import (
    DEFAULT_GROUP_ICONS,
    DEFAULT_PROFILE_ICONS,
    AvatarModel,
    AvatarTheme,
    IconAvatar,
    ImageAvatar,
    TextAvatar,
)
from src.chatlist.snapshot import SnapshotError
from src.chatlist.types import ChatThread, ThreadLike

if TYPE_CHECKING:
    from src.chatlist.render_state import ChatListRenderState
    from src.cli.query import QueryEngine, Row

logger = logging.getLogger(__name__)
console = Console(width=200)


def _load(engine: QueryEngine) -> ChatListRenderState:
    """Load the snapshot or exit non-zero with a readable message."""
    try:
        return engine.load()
    except SnapshotError as exc:
        logger.error("Snapshot load failed: %s", exc)
        console.print(f"[red]Could not load snapshot: {escape(str(exc))}[/red]")
        raise SystemExit(1) from exc


def _avatar_cell(avatar: AvatarModel | None) -> Text:
    if avatar is None:
        return Text("—", style="dim")
    if isinstance(avatar.type, IconAvatar):
        label = avatar.type.icon.value
    elif isinstance(avatar.type, TextAvatar):
        label = avatar.type.text
    elif isinstance(avatar.type, ImageAvatar):
        label = avatar.type.path.name
    else:
        label = "?"
    theme = avatar.theme
    return Text(f" {label} ", style=f"{theme.foreground_hex} on {theme.background_hex}")


def _print_row(row: Row | None, empty_message: str) -> None:
    if row is None:
        console.print(f"[yellow]{empty_message}[/yellow]")
        return
    path, thread = row
    title = _title(thread)
    console.print(
        f"section [bold]{path.section}[/bold], row [bold]{path.row}[/bold]  "
        f"{escape(thread.unique_id)}"
        + (f"  [dim]{escape(title)}[/dim]" if title else "")
    )


def _title(thread: ThreadLike) -> str:
    return thread.title if isinstance(thread, ChatThread) else ""


@click.command()
@click.pass_obj
def summary(engine: QueryEngine) -> None:
    """Show inbox / archive counts and which banner rows are visible."""
    state = _load(engine)
    lines = [
        f"Inbox:            [bold]{state.inbox_count}[/bold]",
        f"Archived:         [bold]{state.archive_count}[/bold]",
        f"Visible threads:  [bold]{state.visible_thread_count}[/bold] "
        f"([cyan]{len(state.pinned_threads)} pinned[/cyan], "
        f"{len(state.unpinned_threads)} unpinned)",
        f"Reminders row:    {'yes' if state.has_visible_reminders else 'no'}",
        f"Archive row:      {'yes' if state.has_archived_threads_row else 'no'}",
    ]
    console.print(
        Panel("\n".join(lines), title=f"[bold]{escape(str(engine.snapshot_path))}[/bold]",
              border_style="blue")
    )


@click.command()
@click.pass_obj
def sections(engine: QueryEngine) -> None:
    """List the sections in display order with their row counts."""
    state = _load(engine)

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Section", width=16)
    table.add_column("Rows", width=6)

    for index, section in enumerate(state.sections):
        table.add_row(str(index), section.type.value, str(state.number_of_rows(index)))

    console.print(table)


@click.command()
@click.pass_obj
def threads(engine: QueryEngine) -> None:
    """List every thread row with its (section, row) position."""
    state = _load(engine)
    rows = engine.rows()

    if not rows:
        console.print("[yellow]No threads in this snapshot.[/yellow]")
        return

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Pos", style="dim", width=7)
    table.add_column("Section", width=10)
    table.add_column("Id", max_width=40)
    table.add_column("Title", max_width=40)
    table.add_column("Avatar", max_width=20)

    for path, thread in rows:
        avatar = thread.avatar if isinstance(thread, ChatThread) else None
        section_type = state.sections[path.section].type.value
        style = "cyan" if section_type == "pinned" else ""
        table.add_row(
            f"{path.section}:{path.row}",
            Text(section_type, style=style),
            Text(thread.unique_id),
            Text(_title(thread)),
            _avatar_cell(avatar),
        )

    console.print(table)


@click.command()
@click.argument("unique_id")
@click.pass_obj
def locate(engine: QueryEngine, unique_id: str) -> None:
    """Show the (section, row) position of a thread id."""
    _load(engine)
    _print_row(engine.locate(unique_id), f"No thread with id {escape(repr(unique_id))}.")


@click.command(name="next")
@click.argument("unique_id", required=False)
@click.pass_obj
def next_row(engine: QueryEngine, unique_id: str | None) -> None:
    """Show the row after UNIQUE_ID (first unpinned row when omitted)."""
    _load(engine)
    _print_row(engine.next_after(unique_id), "No next row.")


@click.command(name="prev")
@click.argument("unique_id", required=False)
@click.pass_obj
def prev_row(engine: QueryEngine, unique_id: str | None) -> None:
    """Show the row before UNIQUE_ID (last unpinned row when omitted)."""
    _load(engine)
    _print_row(engine.previous_before(unique_id), "No previous row.")


@click.command()
def avatars() -> None:
    """Show the default profile and group avatar icons with their themes."""
    for heading, icons in (("Profile", DEFAULT_PROFILE_ICONS), ("Group", DEFAULT_GROUP_ICONS)):
        table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan",
                      title=f"{heading} icons")
        table.add_column("Icon", width=12)
        table.add_column("Asset", width=20)
        table.add_column("Theme", width=6)
        table.add_column("Preview", width=14)
        for icon in icons:
            theme = AvatarTheme.for_icon(icon)
            table.add_row(
                icon.value,
                icon.image_name,
                theme.value,
                _avatar_cell(AvatarModel.for_icon(icon)),
            )
        console.print(table)
