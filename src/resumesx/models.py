"""Data models for scanned tool sessions and resume commands."""

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Protocol


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ResumeMode(str, Enum):
    RESUME = "resume"
    LAUNCH = "launch"


@dataclass
class ResumeCommand:
    command: str
    args: list[str] = field(default_factory=list)
    mode: ResumeMode = ResumeMode.RESUME


@dataclass
class ToolEvent:
    id: str
    label: str
    occurred_at: datetime
    source: str
    confidence: Confidence
    summary: str | None = None
    resume: ResumeCommand | None = None


def sort_by_time(events: Sequence[ToolEvent]) -> list[ToolEvent]:
    """Newest first. Stable, so equal timestamps keep their input order."""
    return sorted(events, key=lambda e: e.occurred_at, reverse=True)


class ToolProvider(Protocol):
    """A session source: an id, a display label and fetch_events().

    fetch_events() should return early once cancel is set.
    """
    id: str
    label: str

    def fetch_events(self, limit: int | None = None, include_all: bool = False,
                     cancel: threading.Event | None = None) -> list[ToolEvent]: ...


@dataclass
class ScanOptions:
    limit: int | None = None
    include_all: bool = False


@dataclass
class ScanResult:
    events: list[ToolEvent] = field(default_factory=list)
    latest: ToolEvent | None = None


@dataclass
class SessionAggregate:
    """Running per-session state while streaming a multi-session log."""
    first_timestamp: float
    last_timestamp: float
    prev_timestamp: float | None = None
    first: str | None = None
    last: str | None = None
    prev: str | None = None

    def best_summary(self) -> str | None:
        return self.first or self.prev or self.last
