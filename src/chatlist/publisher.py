"""RenderStatePublisher — the single, atomically swapped reference to the current chat list."""

import logging
import threading
from collections.abc import Callable, Sequence

from src.chatlist.render_state import ChatListRenderState
from src.chatlist.types import ThreadLike, ViewInfo

logger = logging.getLogger(__name__)

#: Called with (previous, current) after a new render state is published.
Listener = Callable[[ChatListRenderState, ChatListRenderState], None]


class RenderStatePublisher:
    """Holds the current ChatListRenderState and notifies listeners on change.

    Render states are immutable, so readers simply grab ``current`` and use
    it without further locking.  Writers build a complete new state and swap
    it in with publish(); readers never see a half-built snapshot.

    Listeners run on the publishing thread, outside the state lock, so
    readers are never blocked by a slow listener.  Publishes from different
    threads are serialised on a separate publish lock, so listeners see
    (previous, current) pairs in publish order and the last pair delivered
    ends in ``current``.  A listener that raises is logged and skipped so
    the remaining listeners still run.

    Usage::

        publisher = RenderStatePublisher()
        unsubscribe = publisher.subscribe(lambda old, new: table.reload(new))
        publisher.rebuild(view_info, pinned, unpinned)
    """

    def __init__(self, initial: ChatListRenderState | None = None) -> None:
        self._lock = threading.Lock()
        self._publish_lock = threading.RLock()
        self._current = initial if initial is not None else ChatListRenderState.empty()
        self._listeners: list[Listener] = []
        self._generation = 0

    @property
    def current(self) -> ChatListRenderState:
        with self._lock:
            return self._current

    @property
    def generation(self) -> int:
        """Number of publishes since creation."""
        with self._lock:
            return self._generation

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def publish(self, state: ChatListRenderState) -> ChatListRenderState:
        """Swap in a new render state and return the one it replaced.

        Listeners are skipped when the new state equals the previous one.
        """
        with self._publish_lock:
            return self._swap_and_notify(state)

    def _swap_and_notify(self, state: ChatListRenderState) -> ChatListRenderState:
        with self._lock:
            previous = self._current
            self._current = state
            self._generation += 1
            listeners = list(self._listeners)

        if state == previous:
            logger.debug("Published render state is unchanged — listeners not notified")
            return previous

        logger.debug(
            "Published render state: %d section(s), %d visible thread(s)",
            state.number_of_sections,
            state.visible_thread_count,
        )
        for listener in listeners:
            try:
                listener(previous, state)
            except Exception as exc:  # noqa: BLE001
                logger.error("Render state listener %r failed: %s", listener, exc, exc_info=True)
        return previous

    def rebuild(
        self,
        view_info: ViewInfo,
        pinned_threads: Sequence[ThreadLike],
        unpinned_threads: Sequence[ThreadLike],
    ) -> ChatListRenderState:
        """Build a fresh render state from new inputs, publish it, and return it."""
        state = ChatListRenderState(view_info, pinned_threads, unpinned_threads)
        self.publish(state)
        return state
