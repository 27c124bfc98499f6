"""ChatListRenderState — immutable snapshot of the chat list, indexed by section and row."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from src.chatlist.types import ChatListSectionType, IndexPath, ThreadLike, ViewInfo

logger = logging.getLogger(__name__)


class SectionRows(Enum):
    """Which thread list backs a section's rows."""

    NONE = "none"  # single static control, no indexable rows
    PINNED = "pinned"
    UNPINNED = "unpinned"


@dataclass(frozen=True)
class Section:
    type: ChatListSectionType
    rows: SectionRows = SectionRows.NONE


@dataclass(frozen=True)
class ChatListRenderState:
    """A snapshot of view info plus pinned and unpinned threads, laid out as sections.

    Sections are derived once at construction, always in the order
    reminders, archive button, pinned, unpinned.  Reminders and the archive
    button appear only when the view info asks for them; pinned and unpinned
    are always present, even when empty.

    The snapshot is never mutated.  Callers rebuild a new instance whenever
    the underlying threads or view info change and publish it by swapping a
    reference (see RenderStatePublisher).

    Thread ids must be unique within each list and must not appear in both;
    this is not checked here.

    Out-of-range positions are treated as absent: thread_at() returns None
    and number_of_rows() returns 0.  Negative indices are out of range.

    Usage::

        state = ChatListRenderState(view_info, pinned_threads, unpinned_threads)
        path = state.index_path_for_unique_id("thread_42")
        thread = state.thread_at(path) if path else None
    """

    view_info: ViewInfo
    pinned_threads: Sequence[ThreadLike] = ()
    unpinned_threads: Sequence[ThreadLike] = ()
    sections: tuple[Section, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "pinned_threads", tuple(self.pinned_threads))
        object.__setattr__(self, "unpinned_threads", tuple(self.unpinned_threads))
        object.__setattr__(self, "sections", self._derive_sections())

    @classmethod
    def empty(cls) -> "ChatListRenderState":
        """Placeholder state used before the first load."""
        return cls(ViewInfo.empty())

    def _derive_sections(self) -> tuple[Section, ...]:
        sections: list[Section] = []
        for section_type in ChatListSectionType:
            if section_type is ChatListSectionType.REMINDERS:
                if self.has_visible_reminders:
                    sections.append(Section(section_type))
            elif section_type is ChatListSectionType.ARCHIVE_BUTTON:
                if self.has_archived_threads_row:
                    sections.append(Section(section_type))
            elif section_type is ChatListSectionType.PINNED:
                sections.append(Section(section_type, SectionRows.PINNED))
            elif section_type is ChatListSectionType.UNPINNED:
                sections.append(Section(section_type, SectionRows.UNPINNED))
        return tuple(sections)

    # ── Derived properties ──────────────────────────────────────────────────────

    @property
    def archive_count(self) -> int:
        return self.view_info.archive_count

    @property
    def inbox_count(self) -> int:
        return self.view_info.inbox_count

    @property
    def visible_thread_count(self) -> int:
        return len(self.pinned_threads) + len(self.unpinned_threads)

    @property
    def has_archived_threads_row(self) -> bool:
        return self.view_info.has_archived_threads_row

    @property
    def has_visible_reminders(self) -> bool:
        return self.view_info.has_visible_reminders

    @property
    def has_pinned_and_unpinned_threads(self) -> bool:
        return bool(self.pinned_threads) and bool(self.unpinned_threads)

    # ── Table data source ───────────────────────────────────────────────────────

    @property
    def number_of_sections(self) -> int:
        return len(self.sections)

    def number_of_rows(self, section: int) -> int:
        """Row count of a section; static-control sections report 0 indexable rows."""
        resolved = self._section_at(section)
        if resolved is None:
            return 0
        return len(self._rows(resolved))

    def section_index(self, section_type: ChatListSectionType) -> int | None:
        """Position of the section of this type, or None if it is not shown."""
        for index, section in enumerate(self.sections):
            if section.type == section_type:
                return index
        return None

    def thread_at(self, index_path: tuple[int, int]) -> ThreadLike | None:
        """Return the thread at a (section, row) position, or None.

        None is returned for the reminders / archive button sections and for
        any position outside the current layout.
        """
        section_index, row = index_path
        section = self._section_at(section_index)
        if section is None or section.rows is SectionRows.NONE:
            return None
        threads = self._rows(section)
        if not 0 <= row < len(threads):
            logger.debug(
                "Row %d out of range for section %d (%d rows)", row, section_index, len(threads)
            )
            return None
        return threads[row]

    def index_path_for_unique_id(self, unique_id: str) -> IndexPath | None:
        """Locate a thread by id, searching pinned threads before unpinned ones."""
        row = _find(self.pinned_threads, unique_id)
        if row is not None:
            return IndexPath(section=self._required_index(ChatListSectionType.PINNED), row=row)
        row = _find(self.unpinned_threads, unique_id)
        if row is not None:
            return IndexPath(section=self._required_index(ChatListSectionType.UNPINNED), row=row)
        return None

    def index_path_after(self, thread: ThreadLike | None) -> IndexPath | None:
        """Position of the row following ``thread`` within its own section.

        A thread that is not pinned (including one not in either list) is
        looked for in the unpinned section.  With no thread, or a thread that
        is not found, the first row of that section is returned.  There is no
        wraparound: the last row has no successor.
        """
        section_index, threads = self._navigation_section(thread)
        if not threads:
            return None
        row = _find(threads, thread.unique_id) if thread is not None else None
        if row is None:
            return IndexPath(section=section_index, row=0)
        if row < len(threads) - 1:
            return IndexPath(section=section_index, row=row + 1)
        return None

    def index_path_before(self, thread: ThreadLike | None) -> IndexPath | None:
        """Position of the row preceding ``thread``; mirror image of index_path_after.

        Falls back to the last row of the section when the thread is absent
        or not found, and returns None when the thread is already first.
        """
        section_index, threads = self._navigation_section(thread)
        if not threads:
            return None
        row = _find(threads, thread.unique_id) if thread is not None else None
        if row is None:
            return IndexPath(section=section_index, row=len(threads) - 1)
        if row > 0:
            return IndexPath(section=section_index, row=row - 1)
        return None

    # ── Private ─────────────────────────────────────────────────────────────────

    def _section_at(self, index: int) -> Section | None:
        if not 0 <= index < len(self.sections):
            logger.debug("Section %d out of range (%d sections)", index, len(self.sections))
            return None
        return self.sections[index]

    def _rows(self, section: Section) -> tuple[ThreadLike, ...]:
        if section.rows is SectionRows.PINNED:
            return self.pinned_threads  # type: ignore[return-value]
        if section.rows is SectionRows.UNPINNED:
            return self.unpinned_threads  # type: ignore[return-value]
        return ()

    def _required_index(self, section_type: ChatListSectionType) -> int:
        index = self.section_index(section_type)
        if index is None:
            # Pinned and unpinned sections are always present.
            raise LookupError(f"{section_type.value} section missing")
        return index

    def _navigation_section(
        self, thread: ThreadLike | None
    ) -> tuple[int, tuple[ThreadLike, ...]]:
        """Pick the section keyboard navigation moves within.

        Pinned only if the thread is known to be pinned; everything else,
        including an unknown thread, navigates the unpinned section.
        """
        if thread is not None and _find(self.pinned_threads, thread.unique_id) is not None:
            section_type = ChatListSectionType.PINNED
        else:
            section_type = ChatListSectionType.UNPINNED
        index = self._required_index(section_type)
        return index, self._rows(self.sections[index])


def _find(threads: Sequence[ThreadLike], unique_id: str) -> int | None:
    for index, thread in enumerate(threads):
        if thread.unique_id == unique_id:
            return index
    return None
