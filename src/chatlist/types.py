"""Value types shared by the chat list render state, publisher, and loader."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Protocol, runtime_checkable

from src.avatars.types import AvatarModel


class ChatListSectionType(str, Enum):
    """Kinds of section in the chat list.  Declaration order is display order."""

    REMINDERS = "reminders"
    ARCHIVE_BUTTON = "archive_button"
    PINNED = "pinned"
    UNPINNED = "unpinned"


@dataclass(frozen=True)
class ViewInfo:
    """Precomputed summary counts and banner flags for the chat list.

    Built by whatever assembles the thread lists; the render state only reads it.
    """

    archive_count: int = 0
    inbox_count: int = 0
    has_archived_threads_row: bool = False
    has_visible_reminders: bool = False

    @classmethod
    def empty(cls) -> "ViewInfo":
        return cls()


@runtime_checkable
class ThreadLike(Protocol):
    """Anything the chat list can index: only a stable unique id is required."""

    @property
    def unique_id(self) -> str: ...


@dataclass(frozen=True)
class ChatThread:
    """A conversation row as supplied to the chat list."""

    unique_id: str
    title: str = ""
    avatar: AvatarModel | None = None


class IndexPath(NamedTuple):
    """A (section, row) position in the sectioned list."""

    section: int
    row: int
