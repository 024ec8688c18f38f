"""Tests for the interactive session picker."""

from conftest import make_event, utc
from resumesx.picker import HEADER, PROMPT, filter_events, pick_event
from resumesx.summary import PICKER_HEADER, PICKER_SEARCH_HINT, UI_ECHO_MARKERS, is_ui_echo


def scripted(*answers):
    """A prompt stand-in that replays answers and records what was asked."""
    asked = []
    queue = list(answers)

    def prompt(text, **kwargs):
        asked.append(text)
        return queue.pop(0)

    prompt.asked = asked
    return prompt


EVENTS = [
    make_event("codex-1", utc(hour=3), label="Codex CLI", summary="add retry logic"),
    make_event("claude-1", utc(hour=2), label="Claude Code", summary="fix login bug"),
    make_event("gemini-1", utc(hour=1), label="Gemini CLI", summary="write docs"),
]


class TestFilterEvents:

    def test_empty_query_returns_all(self):
        assert filter_events(EVENTS, "  ") == EVENTS

    def test_matches_summary_case_insensitive(self):
        assert [e.id for e in filter_events(EVENTS, "LOGIN")] == ["claude-1"]

    def test_matches_label(self):
        assert [e.id for e in filter_events(EVENTS, "gemini")] == ["gemini-1"]

    def test_no_match(self):
        assert filter_events(EVENTS, "kubernetes") == []


class TestPickEvent:

    def test_number_selects_row(self):
        lines = []
        prompt = scripted("2")
        chosen = pick_event(EVENTS, prompt=prompt, echo=lines.append)
        assert chosen.id == "claude-1"
        assert prompt.asked == [PROMPT]
        assert any(HEADER in line for line in lines)

    def test_empty_input_selects_first(self):
        chosen = pick_event(EVENTS, prompt=scripted(""), echo=lambda _: None)
        assert chosen.id == "codex-1"

    def test_search_then_select(self):
        lines = []
        chosen = pick_event(EVENTS, prompt=scripted("docs", "1"), echo=lines.append)
        assert chosen.id == "gemini-1"
        assert "Search: docs" in lines

    def test_initial_query(self):
        chosen = pick_event(EVENTS, query="login", prompt=scripted("1"), echo=lambda _: None)
        assert chosen.id == "claude-1"

    def test_quit(self):
        assert pick_event(EVENTS, prompt=scripted("q"), echo=lambda _: None) is None

    def test_no_events(self):
        lines = []
        prompt = scripted()
        assert pick_event([], prompt=prompt, echo=lines.append) is None
        assert lines[0] == "No activity found."
        assert prompt.asked == []

    def test_no_matches_then_clear(self):
        lines = []
        chosen = pick_event(EVENTS, prompt=scripted("kubernetes", "", "3"), echo=lines.append)
        assert "No matches." in lines
        assert chosen.id == "gemini-1"

    def test_out_of_range_number(self):
        lines = []
        chosen = pick_event(EVENTS, prompt=scripted("9", "1"), echo=lines.append)
        assert "No row 9." in lines
        assert chosen.id == "codex-1"

    def test_event_without_resume_is_not_returned(self):
        events = [make_event("x-1", utc(), label="Other Tool", resumable=False)] + EVENTS
        lines = []
        chosen = pick_event(events, prompt=scripted("1", "2"), echo=lines.append)
        assert "Other Tool does not support resume command." in lines
        assert chosen.id == "codex-1"


class TestPickerTextIsEcho:

    def test_header_and_prompt_are_recognized(self):
        assert is_ui_echo(HEADER)
        assert is_ui_echo(PROMPT)

    def test_text_comes_from_shared_markers(self):
        assert HEADER == PICKER_HEADER
        assert PROMPT.startswith(PICKER_SEARCH_HINT)
        assert PICKER_HEADER in UI_ECHO_MARKERS
        assert PICKER_SEARCH_HINT in UI_ECHO_MARKERS
