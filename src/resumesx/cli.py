"""resumesx CLI: pick up where you left off in Codex, Claude Code or Gemini."""

import logging
import sys

import click

from resumesx.config import Settings
from resumesx.exec import spawn_interactive
from resumesx.formatting import format_compact, format_json, format_launch
from resumesx.models import ResumeCommand, ScanOptions, ToolEvent
from resumesx.picker import pick_event
from resumesx.providers import load_providers
from resumesx.scan import scan_providers


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _launch(resume: ResumeCommand) -> int:
    click.echo(format_launch(resume))
    return spawn_interactive(resume.command, resume.args)


def _resume_latest(latest: ToolEvent | None) -> int:
    if latest is None:
        click.echo("No activity found.")
        return 1
    if latest.resume is None:
        click.echo(f"{latest.label} does not support resume command.")
        return 1
    return _launch(latest.resume)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--last", "-l", is_flag=True, help="Resume the most recent session without the picker")
@click.option("--limit", "-n", type=int, default=None, help="Number of events to load")
@click.option("--all", "-a", "include_all", is_flag=True,
              help="Include sessions from every directory, not just this one")
@click.option("--list", "list_only", is_flag=True, help="Print sessions and exit")
@click.option("--format", "-f", "fmt", default="compact",
              type=click.Choice(["compact", "json"]), help="Output format for --list")
@click.option("--query", "-q", default="", help="Initial search query for the picker")
@click.option("--timeout", type=float, default=None, help="Give up on slow sources after N seconds")
@click.option("--debug", is_flag=True, help="Log scan details to stderr")
@click.version_option(None, "--version", "-v", package_name="resumesx")
def cli(last, limit, include_all, list_only, fmt, query, timeout, debug):
    """Resume a recent Codex, Claude Code or Gemini session for this directory."""
    _configure_logging(debug)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if limit is not None and limit <= 0:
        limit = None

    providers = load_providers(settings)
    result = scan_providers(
        providers, ScanOptions(limit=limit, include_all=include_all), timeout=timeout,
    )

    if list_only:
        if fmt == "json":
            click.echo(format_json(result.events))
        else:
            click.echo(format_compact(result.events))
        return

    if last:
        sys.exit(_resume_latest(result.latest))

    selected = pick_event(result.events, query=query)
    if selected is None or selected.resume is None:
        return
    sys.exit(_launch(selected.resume))
