"""Tests for RenderStatePublisher — atomic swap and listener notification."""

import logging
import threading
from unittest.mock import MagicMock

import pytest

from src.chatlist.publisher import RenderStatePublisher
from src.chatlist.render_state import ChatListRenderState
from src.chatlist.types import ChatThread, ViewInfo


def make_state(*unpinned_ids: str, inbox_count: int = 0) -> ChatListRenderState:
    return ChatListRenderState(
        ViewInfo(inbox_count=inbox_count),
        [],
        [ChatThread(unique_id=uid) for uid in unpinned_ids],
    )


class TestInitialState:
    def test_starts_empty(self) -> None:
        publisher = RenderStatePublisher()
        assert publisher.current == ChatListRenderState.empty()
        assert publisher.generation == 0

    def test_accepts_initial_state(self) -> None:
        state = make_state("t1")
        assert RenderStatePublisher(initial=state).current is state


class TestPublish:
    def test_swaps_current_and_returns_previous(self) -> None:
        publisher = RenderStatePublisher()
        first = make_state("t1")
        second = make_state("t1", "t2")

        assert publisher.publish(first) == ChatListRenderState.empty()
        assert publisher.publish(second) is first
        assert publisher.current is second
        assert publisher.generation == 2

    def test_notifies_listener_with_previous_and_current(self) -> None:
        publisher = RenderStatePublisher()
        listener = MagicMock()
        publisher.subscribe(listener)
        state = make_state("t1")

        publisher.publish(state)

        listener.assert_called_once_with(ChatListRenderState.empty(), state)

    def test_equal_state_does_not_notify(self) -> None:
        publisher = RenderStatePublisher(initial=make_state("t1"))
        listener = MagicMock()
        publisher.subscribe(listener)

        publisher.publish(make_state("t1"))

        listener.assert_not_called()
        assert publisher.generation == 1

    def test_failing_listener_does_not_block_others(self, caplog: pytest.LogCaptureFixture) -> None:
        publisher = RenderStatePublisher()
        broken = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        publisher.subscribe(broken)
        publisher.subscribe(healthy)

        with caplog.at_level(logging.ERROR):
            publisher.publish(make_state("t1"))

        healthy.assert_called_once()
        assert "boom" in caplog.text
        assert publisher.current == make_state("t1")

    def test_unsubscribe_stops_notifications(self) -> None:
        publisher = RenderStatePublisher()
        listener = MagicMock()
        unsubscribe = publisher.subscribe(listener)

        unsubscribe()
        unsubscribe()  # second call is a no-op
        publisher.publish(make_state("t1"))

        listener.assert_not_called()


class TestRebuild:
    def test_builds_and_publishes(self) -> None:
        publisher = RenderStatePublisher()
        pinned = [ChatThread(unique_id="p1")]
        unpinned = [ChatThread(unique_id="u1"), ChatThread(unique_id="u2")]

        state = publisher.rebuild(ViewInfo(has_visible_reminders=True), pinned, unpinned)

        assert publisher.current is state
        assert state.visible_thread_count == 3
        assert state.has_visible_reminders is True


class TestConcurrentReaders:
    def test_readers_only_see_complete_states(self) -> None:
        publisher = RenderStatePublisher()
        states = [make_state(*(f"t{i}" for i in range(n)), inbox_count=n) for n in range(1, 30)]
        observed: list[ChatListRenderState] = []
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                observed.append(publisher.current)

        thread = threading.Thread(target=reader)
        thread.start()
        for state in states:
            publisher.publish(state)
        stop.set()
        thread.join()

        for state in observed:
            # Each snapshot is internally consistent.
            assert state.visible_thread_count == state.inbox_count


class TestConcurrentPublishers:
    def test_notifications_arrive_in_publish_order(self) -> None:
        publisher = RenderStatePublisher()
        pairs: list[tuple[ChatListRenderState, ChatListRenderState]] = []
        publisher.subscribe(lambda previous, current: pairs.append((previous, current)))

        def writer(prefix: str) -> None:
            for n in range(50):
                publisher.publish(make_state(f"{prefix}{n}"))

        writers = [threading.Thread(target=writer, args=(p,)) for p in ("x", "y")]
        for thread in writers:
            thread.start()
        for thread in writers:
            thread.join()

        assert len(pairs) == 100
        for (_, earlier), (later_previous, _) in zip(pairs, pairs[1:]):
            assert later_previous is earlier
        assert pairs[-1][1] is publisher.current
