"""Settings: where each tool keeps its logs, and the default scan limit."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from resumesx.paths import resolve_home

DEFAULT_LIMIT = 50

CODEX_SESSIONS = "~/.codex/sessions"
CLAUDE_HISTORY = "~/.claude/history.jsonl"
GEMINI_TMP = "~/.gemini/tmp"


@dataclass
class Settings:
    codex_sessions: Path
    claude_history: Path
    gemini_tmp: Path
    default_limit: int = DEFAULT_LIMIT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment overrides.

        RESUMESX_* variables name exact locations and win over the tools'
        own CODEX_HOME / CLAUDE_CONFIG_DIR.
        """
        env = os.environ if environ is None else environ

        codex = env.get("RESUMESX_CODEX_SESSIONS")
        if not codex and env.get("CODEX_HOME"):
            codex = os.path.join(env["CODEX_HOME"], "sessions")

        claude = env.get("RESUMESX_CLAUDE_HISTORY")
        if not claude and env.get("CLAUDE_CONFIG_DIR"):
            claude = os.path.join(env["CLAUDE_CONFIG_DIR"], "history.jsonl")

        gemini = env.get("RESUMESX_GEMINI_TMP")

        return cls(
            codex_sessions=resolve_home(codex or CODEX_SESSIONS),
            claude_history=resolve_home(claude or CLAUDE_HISTORY),
            gemini_tmp=resolve_home(gemini or GEMINI_TMP),
            default_limit=_parse_limit(env.get("RESUMESX_LIMIT")),
        )


def _parse_limit(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"RESUMESX_LIMIT must be a positive integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"RESUMESX_LIMIT must be a positive integer, got {raw!r}")
    return limit
