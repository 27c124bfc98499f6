"""CLI settings read from the environment (after load_dotenv)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

_DEFAULT_SNAPSHOT_PATH = Path("data/chat_list.json")


@dataclass
class CliConfig:
    """Where the chat list snapshot lives and how chatty logging is."""

    snapshot_path: Path = field(default_factory=lambda: _DEFAULT_SNAPSHOT_PATH)
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls) -> CliConfig:
        """Build CliConfig from environment variables."""
        level_name = os.environ.get("CHAT_LIST_LOG_LEVEL", "WARNING").upper()
        level = logging.getLevelName(level_name)
        return cls(
            snapshot_path=Path(os.environ.get("CHAT_LIST_SNAPSHOT", str(_DEFAULT_SNAPSHOT_PATH))),
            # getLevelName() returns a "Level X" string for unknown names.
            log_level=level if isinstance(level, int) else logging.WARNING,
        )
