"""QueryEngine — loads the chat list snapshot and answers CLI lookups against it."""

from pathlib import Path

from src.chatlist.publisher import RenderStatePublisher
from src.chatlist.render_state import ChatListRenderState
from src.chatlist.snapshot import load_snapshot
from src.chatlist.types import ChatThread, IndexPath, ThreadLike

#: A resolved row: its position and the thread shown there.
Row = tuple[IndexPath, ThreadLike]


class QueryEngine:
    """Coordinates the snapshot file and the published render state for CLI queries.

    The publisher is exposed as a public attribute so callers can subscribe
    to reloads.  CLI arguments are thread ids, so navigation resolves an id
    to its thread first; an id in neither list stands in as a foreign thread
    and gets the usual not-found fallback.

    Usage::

        engine = QueryEngine(Path("data/chat_list.json"))
        engine.load()
        row = engine.next_after("thread_42")
    """

    def __init__(
        self, snapshot_path: str | Path, publisher: RenderStatePublisher | None = None
    ) -> None:
        self.snapshot_path = Path(snapshot_path)
        self.publisher = publisher or RenderStatePublisher()

    @property
    def state(self) -> ChatListRenderState:
        return self.publisher.current

    def load(self) -> ChatListRenderState:
        """Read the snapshot file and publish it.  Raises SnapshotError."""
        state = load_snapshot(self.snapshot_path)
        self.publisher.publish(state)
        return state

    def reload(self) -> bool:
        """Re-read the snapshot; return True if the published state changed."""
        previous = self.publisher.current
        return self.load() != previous

    def rows(self) -> list[Row]:
        """Every thread-backed row in display order."""
        state = self.state
        result: list[Row] = []
        for section in range(state.number_of_sections):
            for row in range(state.number_of_rows(section)):
                path = IndexPath(section=section, row=row)
                thread = state.thread_at(path)
                if thread is not None:
                    result.append((path, thread))
        return result

    def locate(self, unique_id: str) -> Row | None:
        return self._resolve(self.state.index_path_for_unique_id(unique_id))

    def next_after(self, unique_id: str | None) -> Row | None:
        """Row following the given thread id (first row when unique_id is None)."""
        return self._resolve(self.state.index_path_after(self._thread_for(unique_id)))

    def previous_before(self, unique_id: str | None) -> Row | None:
        """Row preceding the given thread id (last row when unique_id is None)."""
        return self._resolve(self.state.index_path_before(self._thread_for(unique_id)))

    # ── Private ─────────────────────────────────────────────────────────────────

    def _thread_for(self, unique_id: str | None) -> ThreadLike | None:
        if unique_id is None:
            return None
        path = self.state.index_path_for_unique_id(unique_id)
        thread = self.state.thread_at(path) if path is not None else None
        return thread if thread is not None else ChatThread(unique_id=unique_id)

    def _resolve(self, path: IndexPath | None) -> Row | None:
        if path is None:
            return None
        thread = self.state.thread_at(path)
        return (path, thread) if thread is not None else None
