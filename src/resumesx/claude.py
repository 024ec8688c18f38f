"""Claude Code sessions: one global prompt history at ~/.claude/history.jsonl."""

import logging
import os
import threading
from pathlib import Path

from resumesx.jsonl import iter_jsonl
from resumesx.models import (
    Confidence, ResumeCommand, ResumeMode, SessionAggregate, ToolEvent, sort_by_time,
)
from resumesx.paths import matches_cwd, path_exists
from resumesx.summary import is_ui_echo, to_summary
from resumesx.timestamps import from_epoch_ms

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_valid_record(record) -> bool:
    if not isinstance(record, dict):
        return False
    return (
        ("timestamp" not in record or _is_number(record["timestamp"]))
        and isinstance(record.get("display", ""), str)
        and isinstance(record.get("sessionId", ""), str)
        and isinstance(record.get("project", ""), str)
    )


def update_aggregate(sessions: dict[str, SessionAggregate], session_id: str,
                     timestamp: float, text: str) -> None:
    """Fold one history entry into its session's running state.

    Entries may be out of order. An entry whose timestamp equals the current
    last one replaces it, so later lines win ties.
    """
    existing = sessions.get(session_id)
    if existing is None:
        sessions[session_id] = SessionAggregate(
            first_timestamp=timestamp,
            last_timestamp=timestamp,
            first=text,
            last=text,
        )
        return

    if timestamp < existing.first_timestamp:
        existing.first_timestamp = timestamp
        existing.first = text

    if timestamp >= existing.last_timestamp:
        existing.prev_timestamp = existing.last_timestamp
        existing.prev = existing.last
        existing.last_timestamp = timestamp
        existing.last = text
    elif existing.prev_timestamp is None or timestamp > existing.prev_timestamp:
        existing.prev_timestamp = timestamp
        existing.prev = text


class ClaudeProvider:
    """Aggregates the shared Claude Code history file by session id."""

    id = "claude"
    label = "Claude Code"

    def __init__(self, history_path: Path, cwd: str | None = None,
                 default_limit: int = 50):
        self.history_path = history_path
        self.cwd = cwd or os.getcwd()
        self.default_limit = default_limit

    def fetch_events(self, limit: int | None = None, include_all: bool = False,
                     cancel: threading.Event | None = None) -> list[ToolEvent]:
        if not path_exists(self.history_path):
            return []

        # Any later line can move a session's first message, so the whole
        # file is read before limiting.
        sessions = self._aggregate(include_all, cancel)
        if cancel is not None and cancel.is_set():
            return []

        items = []
        for session_id, data in sessions.items():
            summary = data.best_summary()
            occurred_at = from_epoch_ms(data.last_timestamp)
            if not summary or occurred_at is None:
                continue
            items.append(ToolEvent(
                id=f"claude-{session_id}",
                label=self.label,
                occurred_at=occurred_at,
                source=self.history_path.name,
                confidence=Confidence.HIGH,
                summary=summary,
                resume=ResumeCommand(
                    command="claude",
                    args=["--resume", session_id],
                    mode=ResumeMode.RESUME,
                ),
            ))

        effective_limit = limit if limit is not None else self.default_limit
        logger.debug("claude: %d sessions in %s", len(items), self.history_path)
        return sort_by_time(items)[:effective_limit]

    def _aggregate(self, include_all: bool,
                   cancel: threading.Event | None = None) -> dict[str, SessionAggregate]:
        sessions: dict[str, SessionAggregate] = {}
        for record in iter_jsonl(self.history_path):
            if cancel is not None and cancel.is_set():
                logger.debug("claude: cancelled while reading %s", self.history_path)
                break
            if not _is_valid_record(record):
                continue

            session_id = record.get("sessionId")
            timestamp = record.get("timestamp")
            project = record.get("project")
            if not session_id or not timestamp or not project:
                continue

            if not include_all and not matches_cwd(project, self.cwd):
                continue

            display = record.get("display")
            text = to_summary(display) if display and not is_ui_echo(display) else None
            if not text:
                continue

            update_aggregate(sessions, session_id, timestamp, text)
        return sessions
