"""Load already-materialized chat list data from a JSON snapshot into a render state."""

import json
import logging
from pathlib import Path
from typing import Any

from src.avatars.types import (
    AvatarIcon,
    AvatarModel,
    AvatarTheme,
    IconAvatar,
    ImageAvatar,
    TextAvatar,
)
from src.chatlist.render_state import ChatListRenderState
from src.chatlist.types import ChatThread, ViewInfo

logger = logging.getLogger(__name__)

_AVATAR_KINDS = ("icon", "text", "image")


class SnapshotError(ValueError):
    """Raised when a chat list snapshot cannot be read or is malformed."""


def load_snapshot(path: str | Path) -> ChatListRenderState:
    """Read a snapshot file and build the render state it describes.

    Expected shape::

        {
          "view_info": {"archive_count": 2, "inbox_count": 5,
                        "has_archived_threads_row": true,
                        "has_visible_reminders": false},
          "pinned":   [{"unique_id": "t1", "title": "Alice", "avatar": {"icon": "cat"}}],
          "unpinned": [{"unique_id": "t2", "title": "Book club"}]
        }
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Could not read snapshot {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot {path} is not valid JSON: {exc}") from exc

    state = parse_snapshot(data)
    logger.info(
        "Loaded snapshot %s: %d pinned, %d unpinned",
        path,
        len(state.pinned_threads),
        len(state.unpinned_threads),
    )
    return state


def parse_snapshot(data: Any) -> ChatListRenderState:
    """Build a render state from a decoded snapshot document."""
    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot must be a JSON object, got {type(data).__name__}")

    view_info = parse_view_info(data.get("view_info", {}))
    pinned = _parse_thread_list(data.get("pinned", []), "pinned")
    unpinned = _parse_thread_list(data.get("unpinned", []), "unpinned")

    # Both lists feed one table; an id may only appear once across them.
    overlap = {t.unique_id for t in pinned} & {t.unique_id for t in unpinned}
    if overlap:
        raise SnapshotError(f"Threads both pinned and unpinned: {sorted(overlap)}")

    return ChatListRenderState(view_info, pinned, unpinned)


def parse_view_info(data: Any) -> ViewInfo:
    """Map a view_info dict to ViewInfo; absent keys take the empty defaults."""
    if not isinstance(data, dict):
        raise SnapshotError(f"view_info must be an object, got {type(data).__name__}")
    return ViewInfo(
        archive_count=_count(data, "archive_count"),
        inbox_count=_count(data, "inbox_count"),
        has_archived_threads_row=_flag(data, "has_archived_threads_row"),
        has_visible_reminders=_flag(data, "has_visible_reminders"),
    )


def parse_thread(data: Any) -> ChatThread:
    """Map a thread dict to ChatThread."""
    if not isinstance(data, dict):
        raise SnapshotError(f"Thread entry must be an object, got {type(data).__name__}")
    unique_id = data.get("unique_id")
    if not isinstance(unique_id, str) or not unique_id:
        raise SnapshotError(f"Thread entry has no unique_id: {data!r}")
    title = data.get("title")
    if title is None:
        title = ""
    elif not isinstance(title, str):
        raise SnapshotError(f"Thread {unique_id!r} title must be a string, got {title!r}")
    avatar_raw = data.get("avatar")
    return ChatThread(
        unique_id=unique_id,
        title=title,
        avatar=(
            parse_avatar(avatar_raw, default_identifier=f"{unique_id}:avatar")
            if avatar_raw is not None
            else None
        ),
    )


def parse_avatar(data: Any, default_identifier: str = "") -> AvatarModel:
    """Map an avatar dict (exactly one of icon / text / image, optional theme).

    Text and image avatars without an explicit identifier take
    default_identifier so reloading the same file yields equal avatars.
    An empty default leaves AvatarModel to assign a random one.
    """
    if not isinstance(data, dict):
        raise SnapshotError(f"Avatar must be an object, got {type(data).__name__}")
    kinds = [k for k in _AVATAR_KINDS if k in data]
    if len(kinds) != 1:
        raise SnapshotError(f"Avatar needs exactly one of {_AVATAR_KINDS}, got {sorted(data)}")
    kind = kinds[0]

    theme: AvatarTheme | None = None
    if "theme" in data:
        try:
            theme = AvatarTheme(data["theme"])
        except ValueError as exc:
            raise SnapshotError(f"Unknown avatar theme {data['theme']!r}") from exc

    identifier = str(data.get("identifier", ""))
    if kind == "icon":
        try:
            icon = AvatarIcon(data["icon"])
        except ValueError as exc:
            raise SnapshotError(f"Unknown avatar icon {data['icon']!r}") from exc
        try:
            return AvatarModel(
                type=IconAvatar(icon),
                theme=theme or AvatarTheme.for_icon(icon),
                identifier=identifier,
            )
        except ValueError as exc:
            raise SnapshotError(str(exc)) from exc
    identifier = identifier or default_identifier
    if kind == "text":
        avatar_type: TextAvatar | ImageAvatar = TextAvatar(str(data["text"]))
    else:
        avatar_type = ImageAvatar(Path(str(data["image"])))
    return AvatarModel(
        type=avatar_type,
        theme=theme or AvatarTheme.default(),
        identifier=identifier,
    )


# ── Private ────────────────────────────────────────────────────────────────────


def _parse_thread_list(raw: Any, name: str) -> list[ChatThread]:
    if not isinstance(raw, list):
        raise SnapshotError(f"{name} must be a list, got {type(raw).__name__}")
    threads = [parse_thread(item) for item in raw]
    seen: set[str] = set()
    for thread in threads:
        if thread.unique_id in seen:
            raise SnapshotError(f"Duplicate thread id {thread.unique_id!r} in {name}")
        seen.add(thread.unique_id)
    return threads


def _count(data: dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SnapshotError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def _flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise SnapshotError(f"{key} must be true or false, got {value!r}")
    return value
