"""Gemini CLI sessions: whole-JSON chat files under ~/.gemini/tmp/<project hash>/chats."""

import hashlib
import json
import logging
import os
import threading
from pathlib import Path

from resumesx.models import Confidence, ResumeCommand, ResumeMode, ToolEvent, sort_by_time
from resumesx.paths import path_exists, read_dir_safe, stat_safe
from resumesx.summary import to_summary
from resumesx.timestamps import parse_iso

logger = logging.getLogger(__name__)

CHATS_DIR = "chats"
SOURCE_TAG = "gemini-tmp"


def project_hash(cwd: str) -> str:
    """Gemini keys project directories by the SHA-256 of the absolute cwd."""
    return hashlib.sha256(cwd.encode("utf-8")).hexdigest()


def _is_valid_session(doc) -> bool:
    if not isinstance(doc, dict):
        return False
    return (
        isinstance(doc.get("sessionId", ""), str)
        and isinstance(doc.get("lastUpdated", ""), str)
        and isinstance(doc.get("messages", []), list)
    )


def _user_messages(messages: list) -> list[str]:
    return [
        m["content"] for m in messages
        if isinstance(m, dict)
        and m.get("type") == "user"
        and isinstance(m.get("content"), str)
    ]


def parse_chat_file(path: Path) -> ToolEvent | None:
    """Convert one chat document to an event, or None if it's unusable."""
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Skipping %s: %s", path, e)
        return None

    if not _is_valid_session(doc):
        return None

    last_updated = doc.get("lastUpdated")
    occurred_at = parse_iso(last_updated) if last_updated else None
    if occurred_at is None:
        return None

    user_messages = _user_messages(doc.get("messages") or [])
    if not user_messages:
        return None
    summary = to_summary(user_messages[0]) or to_summary(user_messages[-1])
    if not summary:
        return None

    return ToolEvent(
        id=f"gemini-{doc.get('sessionId') or path.name}",
        label=GeminiProvider.label,
        occurred_at=occurred_at,
        source=SOURCE_TAG,
        confidence=Confidence.MEDIUM,
        summary=summary,
        resume=ResumeCommand(command="gemini", args=[], mode=ResumeMode.LAUNCH),
    )


class GeminiProvider:
    """Reads Gemini chat files for this project (or every project)."""

    id = "gemini"
    label = "Gemini CLI"

    def __init__(self, tmp_root: Path, cwd: str | None = None,
                 default_limit: int = 50):
        self.tmp_root = tmp_root
        self.cwd = cwd or os.getcwd()
        self.default_limit = default_limit

    def chat_dirs(self, include_all: bool = False) -> list[Path]:
        if include_all:
            return [
                Path(entry.path) / CHATS_DIR
                for entry in read_dir_safe(self.tmp_root)
                if entry.is_dir()
            ]
        return [self.tmp_root / project_hash(self.cwd) / CHATS_DIR]

    def fetch_events(self, limit: int | None = None, include_all: bool = False,
                     cancel: threading.Event | None = None) -> list[ToolEvent]:
        effective_limit = limit if limit is not None else self.default_limit

        ranked = []
        for chats in self.chat_dirs(include_all):
            if not path_exists(chats):
                continue
            for entry in read_dir_safe(chats):
                if not entry.name.endswith(".json") or not entry.is_file():
                    continue
                path = Path(entry.path)
                stat = stat_safe(path)
                if stat is not None:
                    ranked.append((stat.st_mtime, path))
        ranked.sort(key=lambda item: item[0], reverse=True)

        # Newest file wins when a session id appears in more than one file.
        events = []
        seen = set()
        for _, path in ranked:
            if len(events) >= effective_limit:
                break
            if cancel is not None and cancel.is_set():
                logger.debug("gemini: cancelled after %d events", len(events))
                break
            event = parse_chat_file(path)
            if event and event.id not in seen:
                seen.add(event.id)
                events.append(event)

        logger.debug("gemini: %d events from %d files", len(events), len(ranked))
        return sort_by_time(events)
