"""Codex CLI sessions: one JSONL transcript per session under ~/.codex/sessions."""

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path

from resumesx.jsonl import iter_jsonl
from resumesx.models import Confidence, ResumeCommand, ResumeMode, ToolEvent
from resumesx.paths import matches_cwd, path_exists, read_dir_safe, stat_safe
from resumesx.summary import is_ui_echo, to_summary
from resumesx.timestamps import parse_iso

logger = logging.getLogger(__name__)

SESSION_SUFFIX = ".jsonl"


@dataclass
class SessionSummary:
    session_id: str | None = None
    session_cwd: str | None = None
    first_user_message: str | None = None
    prev_user_message: str | None = None
    last_user_message: str | None = None
    last_timestamp: str | None = None


def _is_valid_record(record) -> bool:
    if not isinstance(record, dict):
        return False
    return (
        isinstance(record.get("type", ""), str)
        and isinstance(record.get("timestamp", ""), str)
        and isinstance(record.get("payload", {}), (dict, type(None)))
    )


def list_session_files(root: Path) -> list[Path]:
    """Recursively collect *.jsonl files under root (depth-first, unordered)."""
    results = []
    stack = [root]
    while stack:
        current = stack.pop()
        for entry in read_dir_safe(current):
            full_path = Path(entry.path)
            try:
                if entry.is_dir(follow_symlinks=False):
                    stack.append(full_path)
                elif entry.is_file() and entry.name.endswith(SESSION_SUFFIX):
                    results.append(full_path)
            except OSError:
                continue
    return results


def read_session_summary(path: Path) -> SessionSummary:
    """Stream one transcript and pull out session metadata and user messages."""
    summary = SessionSummary()
    for record in iter_jsonl(path):
        if not _is_valid_record(record):
            continue

        timestamp = record.get("timestamp")
        if isinstance(timestamp, str):
            summary.last_timestamp = timestamp

        record_type = record.get("type")
        payload = record.get("payload")
        if not payload:
            continue

        if record_type == "session_meta":
            if isinstance(payload.get("id"), str):
                summary.session_id = payload["id"]
            if isinstance(payload.get("cwd"), str):
                summary.session_cwd = payload["cwd"]

        elif record_type == "event_msg":
            message = payload.get("message")
            if payload.get("type") != "user_message" or not isinstance(message, str):
                continue
            if is_ui_echo(message):
                continue
            if not summary.first_user_message:
                summary.first_user_message = message
            summary.prev_user_message = summary.last_user_message
            summary.last_user_message = message

    return summary


class CodexProvider:
    """Reads Codex CLI transcripts, newest files first."""

    id = "codex"
    label = "Codex CLI"

    def __init__(self, sessions_root: Path, cwd: str | None = None,
                 default_limit: int = 50):
        self.sessions_root = sessions_root
        self.cwd = cwd or os.getcwd()
        self.default_limit = default_limit

    def fetch_events(self, limit: int | None = None, include_all: bool = False,
                     cancel: threading.Event | None = None) -> list[ToolEvent]:
        if not path_exists(self.sessions_root):
            return []

        effective_limit = limit if limit is not None else self.default_limit

        ranked = []
        for path in list_session_files(self.sessions_root):
            stat = stat_safe(path)
            if stat is not None:
                ranked.append((stat.st_mtime, path))
        ranked.sort(key=lambda item: item[0], reverse=True)

        # Newest file wins when a session id appears in more than one file.
        events: list[ToolEvent] = []
        seen: set[str] = set()
        for _, path in ranked:
            if len(events) >= effective_limit:
                break
            if cancel is not None and cancel.is_set():
                logger.debug("codex: cancelled after %d events", len(events))
                break
            event = self._read_event(path, include_all)
            if event and event.id not in seen:
                seen.add(event.id)
                events.append(event)

        logger.debug("codex: %d events from %d files", len(events), len(ranked))
        return events

    def _read_event(self, path: Path, include_all: bool) -> ToolEvent | None:
        try:
            summary = read_session_summary(path)
        except OSError as e:
            logger.debug("Cannot read %s: %s", path, e)
            return None

        if not summary.session_id or not summary.session_cwd or not summary.last_timestamp:
            return None

        if not include_all and not matches_cwd(summary.session_cwd, self.cwd):
            return None

        occurred_at = parse_iso(summary.last_timestamp)
        if occurred_at is None:
            logger.debug("Bad timestamp %r in %s", summary.last_timestamp, path)
            return None

        text = to_summary(
            summary.first_user_message
            or summary.prev_user_message
            or summary.last_user_message
        )
        if not text:
            return None

        return ToolEvent(
            id=f"codex-{summary.session_id}",
            label=self.label,
            occurred_at=occurred_at,
            source=path.name,
            confidence=Confidence.HIGH,
            summary=text,
            resume=ResumeCommand(
                command="codex",
                args=["resume", summary.session_id],
                mode=ResumeMode.RESUME,
            ),
        )
