"""Filesystem helpers that never raise, plus the directory-scoping rule."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def resolve_home(path: str | Path) -> Path:
    """Expand a leading '~' to the user's home directory."""
    text = str(path)
    if text.startswith("~"):
        return Path.home() / text[1:].lstrip("/")
    return Path(text)


def path_exists(path: Path) -> bool:
    try:
        path.stat()
        return True
    except OSError:
        return False


def read_dir_safe(path: Path) -> list[os.DirEntry]:
    """List a directory's entries, or [] if it can't be read."""
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return []


def stat_safe(path: Path) -> os.stat_result | None:
    try:
        return path.stat()
    except OSError:
        return None


def matches_cwd(session_cwd: str, cwd: str) -> bool:
    """True if session_cwd is cwd, one of its ancestors, or one of its descendants."""
    return (
        session_cwd == cwd
        or cwd.startswith(session_cwd + os.sep)
        or session_cwd.startswith(cwd + os.sep)
    )
