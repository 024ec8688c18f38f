"""Output formatters for scanned events."""

import json
from dataclasses import asdict
from datetime import datetime, timezone

from resumesx.models import ResumeCommand, ToolEvent


def format_relative(dt: datetime, now: datetime | None = None) -> str:
    """Convert a datetime to relative time like '45s ago', '2h ago'."""
    now = now or datetime.now(timezone.utc)
    seconds = max(0, int((now - dt).total_seconds()))
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def format_event_compact(event: ToolEvent, now: datetime | None = None) -> str:
    """Single-line compact format for one event."""
    when = format_relative(event.occurred_at, now)
    return f"{when:>8}  {event.label:<11}  {event.summary or ''}"


def format_compact(events: list[ToolEvent], now: datetime | None = None) -> str:
    """Compact multi-line output for a list of events."""
    if not events:
        return "(no activity)"
    return "\n".join(format_event_compact(e, now) for e in events)


def format_json(events: list[ToolEvent]) -> str:
    """JSON array output."""
    data = []
    for e in events:
        d = asdict(e)
        d["occurred_at"] = e.occurred_at.isoformat()
        d["confidence"] = e.confidence.value
        if e.resume:
            d["resume"]["mode"] = e.resume.mode.value
        data.append(d)
    return json.dumps(data, indent=2)


def format_launch(resume: ResumeCommand) -> str:
    return f"Launching: {resume.command} {' '.join(resume.args)}".strip()
