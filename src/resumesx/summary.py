"""Summary text helpers: whitespace normalization, truncation, UI echo detection."""

import re

MAX_SUMMARY_CHARS = 120
ELLIPSIS = "..."

_WHITESPACE = re.compile(r"\s+")

PICKER_HEADER = "Resume a previous session"
PICKER_SEARCH_HINT = "Type to search"

# Picker text, ours and that of full-screen resume pickers with arrow-key
# navigation. A session that captured it must not be summarized with it.
UI_ECHO_MARKERS = (
    PICKER_HEADER,
    PICKER_SEARCH_HINT,
    "Up/Down:",
    "Left/Right",
    "Page:",
)


def to_summary(text: str | None) -> str | None:
    """Collapse whitespace and cap at 120 chars. Returns None for empty input.

    Truncated text ends with "..." and is exactly MAX_SUMMARY_CHARS long, so
    summarizing a summary returns it unchanged.
    """
    if not text:
        return None
    collapsed = _WHITESPACE.sub(" ", text).strip()
    if not collapsed:
        return None
    if len(collapsed) > MAX_SUMMARY_CHARS:
        return collapsed[:MAX_SUMMARY_CHARS - len(ELLIPSIS)] + ELLIPSIS
    return collapsed


def is_ui_echo(message: str) -> bool:
    return any(marker in message for marker in UI_ECHO_MARKERS)
