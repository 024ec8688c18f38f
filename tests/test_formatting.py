"""Tests for output formatters."""

import json
from datetime import timedelta

from conftest import make_event, utc
from resumesx.formatting import (
    format_compact, format_event_compact, format_json, format_launch, format_relative,
)
from resumesx.models import ResumeCommand, ResumeMode

NOW = utc(2025, 3, 10, 12)


class TestFormatRelative:

    def test_seconds(self):
        assert format_relative(NOW - timedelta(seconds=42), NOW) == "42s ago"

    def test_minutes(self):
        assert format_relative(NOW - timedelta(minutes=5, seconds=59), NOW) == "5m ago"

    def test_hours(self):
        assert format_relative(NOW - timedelta(hours=3), NOW) == "3h ago"

    def test_days(self):
        assert format_relative(NOW - timedelta(days=9), NOW) == "9d ago"

    def test_future_clamps_to_zero(self):
        assert format_relative(NOW + timedelta(minutes=1), NOW) == "0s ago"


class TestFormatEvents:

    def test_compact_line(self):
        event = make_event("e", NOW - timedelta(hours=2), label="Codex CLI",
                           summary="add retry logic")
        line = format_event_compact(event, NOW)
        assert "2h ago" in line
        assert "Codex CLI" in line
        assert line.endswith("add retry logic")

    def test_compact_empty(self):
        assert format_compact([]) == "(no activity)"

    def test_compact_one_line_per_event(self):
        events = [make_event("a", NOW), make_event("b", NOW)]
        assert len(format_compact(events, NOW).splitlines()) == 2

    def test_json(self):
        event = make_event("codex-1", utc(2025, 3, 1, 10), label="Codex CLI")
        data = json.loads(format_json([event]))
        assert data[0]["id"] == "codex-1"
        assert data[0]["occurred_at"] == "2025-03-01T10:00:00+00:00"
        assert data[0]["confidence"] == "high"
        assert data[0]["resume"]["mode"] == "resume"
        assert data[0]["resume"]["args"] == ["--resume", "codex-1"]

    def test_json_without_resume(self):
        data = json.loads(format_json([make_event("x", NOW, resumable=False)]))
        assert data[0]["resume"] is None


class TestFormatLaunch:

    def test_with_args(self):
        resume = ResumeCommand("codex", ["resume", "abc"], ResumeMode.RESUME)
        assert format_launch(resume) == "Launching: codex resume abc"

    def test_without_args(self):
        assert format_launch(ResumeCommand("gemini", [], ResumeMode.LAUNCH)) == "Launching: gemini"
