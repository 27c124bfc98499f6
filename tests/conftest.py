"""Shared pytest fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def sample_snapshot() -> dict[str, Any]:
    """A small chat list snapshot: both banner rows, two pinned, three unpinned."""
    return {
        "view_info": {
            "archive_count": 4,
            "inbox_count": 5,
            "has_archived_threads_row": True,
            "has_visible_reminders": True,
        },
        "pinned": [
            {"unique_id": "thread_a", "title": "Alice", "avatar": {"icon": "cat"}},
            {"unique_id": "thread_b", "title": "Bob"},
        ],
        "unpinned": [
            {"unique_id": "thread_c", "title": "Book club", "avatar": {"text": "BC", "theme": "A110"}},
            {"unique_id": "thread_d", "title": "Dana"},
            {"unique_id": "thread_e", "title": "Eve", "avatar": {"image": "avatars/eve.png"}},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, sample_snapshot: dict[str, Any]) -> Path:
    """sample_snapshot written to a temporary JSON file."""
    path = tmp_path / "chat_list.json"
    path.write_text(json.dumps(sample_snapshot), encoding="utf-8")
    return path
