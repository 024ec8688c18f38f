"""Searchable numbered session picker for the terminal."""

from collections.abc import Callable

import click

from resumesx.formatting import format_event_compact
from resumesx.models import ToolEvent
from resumesx.summary import PICKER_HEADER, PICKER_SEARCH_HINT

HEADER = PICKER_HEADER
PROMPT = f"{PICKER_SEARCH_HINT}, number to resume, q to quit"


def filter_events(events: list[ToolEvent], query: str) -> list[ToolEvent]:
    """Case-insensitive substring match against label and summary."""
    needle = query.strip().lower()
    if not needle:
        return list(events)
    return [
        e for e in events
        if needle in f"{e.label} {e.summary or ''}".lower()
    ]


def pick_event(
    events: list[ToolEvent],
    query: str = "",
    prompt: Callable[..., str] = click.prompt,
    echo: Callable[[str], None] = click.echo,
) -> ToolEvent | None:
    """Show events, read search terms or a row number, return the chosen event.

    Empty input picks the first visible row. Returns None on 'q' or when
    there is nothing to show.
    """
    if not events:
        echo("No activity found.")
        echo("Check that your CLI history files exist.")
        return None

    while True:
        matches = filter_events(events, query)
        echo(click.style(HEADER, fg="cyan", bold=True))
        if query.strip():
            echo(f"Search: {query.strip()}")
        if matches:
            for i, event in enumerate(matches, start=1):
                echo(f"{i:>3}. {format_event_compact(event)}")
        else:
            echo("No matches.")
            echo("Try another search query.")

        answer = prompt(PROMPT, default="", show_default=False).strip()

        if answer.lower() == "q":
            return None
        if not answer:
            if not matches:
                query = ""
                continue
            answer = "1"
        if answer.isdigit():
            index = int(answer)
            if not 1 <= index <= len(matches):
                echo(f"No row {index}.")
                continue
            event = matches[index - 1]
            if event.resume is None:
                echo(f"{event.label} does not support resume command.")
                continue
            return event
        query = answer
