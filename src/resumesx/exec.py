"""Launching the resumed tool, interactively or with captured output."""

import logging
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    stdout: str
    stderr: str
    exit_code: int | None


def run_command(command: str, args: list[str], cwd: str | None = None,
                timeout: float | None = None) -> CommandResult:
    """Run a command with captured output.

    On timeout the child is killed and whatever it printed is returned with
    exit_code None. A command that can't be started yields exit_code 1.
    """
    try:
        result = subprocess.run(
            [command, *args],
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        logger.debug("Killed %s after %ss", command, timeout)
        return CommandResult(
            stdout=_decode(e.stdout), stderr=_decode(e.stderr), exit_code=None,
        )
    except OSError as e:
        return CommandResult(stdout="", stderr=str(e), exit_code=1)
    return CommandResult(
        stdout=result.stdout, stderr=result.stderr, exit_code=result.returncode,
    )


def _decode(output: bytes | str | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def spawn_interactive(command: str, args: list[str], cwd: str | None = None) -> int:
    """Run a command attached to this terminal and return its exit status.

    Returns 1 if the command can't be started or dies from a signal.
    """
    logger.debug("Spawning %s %s", command, args)
    try:
        completed = subprocess.run([command, *args], cwd=cwd)
    except OSError as e:
        logger.error("Cannot start %s: %s", command, e)
        return 1
    if completed.returncode < 0:
        return 1
    return completed.returncode
