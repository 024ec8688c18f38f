"""Shared fixtures and log writers for resumesx tests."""

import json
import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from resumesx.models import Confidence, ResumeCommand, ResumeMode, ToolEvent


def write_jsonl(path: Path, records: list) -> Path:
    """Write records one per line. Strings are written verbatim."""
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def set_mtime(path: Path, mtime: float) -> None:
    os.utime(path, (mtime, mtime))


def codex_transcript(path: Path, session_id: str | None, cwd: str | None,
                     messages: list[str],
                     timestamp: str = "2025-03-01T10:00:00.000Z") -> Path:
    """Write a Codex session file: session_meta then one event_msg per message."""
    payload = {}
    if session_id is not None:
        payload["id"] = session_id
    if cwd is not None:
        payload["cwd"] = cwd
    records = [{"type": "session_meta", "timestamp": timestamp, "payload": payload}]
    for message in messages:
        records.append({
            "type": "event_msg",
            "timestamp": timestamp,
            "payload": {"type": "user_message", "message": message},
        })
    return write_jsonl(path, records)


def make_event(event_id: str, when: datetime, label: str = "Test Tool",
               summary: str = "did things", resumable: bool = True) -> ToolEvent:
    return ToolEvent(
        id=event_id,
        label=label,
        occurred_at=when,
        source="test",
        confidence=Confidence.HIGH,
        summary=summary,
        resume=ResumeCommand("tool", ["--resume", event_id], ResumeMode.RESUME)
        if resumable else None,
    )


def utc(year=2025, month=3, day=1, hour=0, minute=0, second=0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


@pytest.fixture
def project(tmp_path):
    """A project directory to scope sessions against."""
    path = tmp_path / "work" / "project"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def cwd(project):
    return str(project)
