"""Builtin session providers and how to construct them from settings."""

from collections.abc import Callable

from resumesx.claude import ClaudeProvider
from resumesx.codex import CodexProvider
from resumesx.config import Settings
from resumesx.gemini import GeminiProvider
from resumesx.models import ToolProvider


def _codex(settings: Settings, cwd: str | None) -> ToolProvider:
    return CodexProvider(settings.codex_sessions, cwd=cwd,
                         default_limit=settings.default_limit)


def _claude(settings: Settings, cwd: str | None) -> ToolProvider:
    return ClaudeProvider(settings.claude_history, cwd=cwd,
                          default_limit=settings.default_limit)


def _gemini(settings: Settings, cwd: str | None) -> ToolProvider:
    return GeminiProvider(settings.gemini_tmp, cwd=cwd,
                          default_limit=settings.default_limit)


# Scan order; ties in the merged list keep this order.
BUILTIN_PROVIDERS: dict[str, Callable[[Settings, str | None], ToolProvider]] = {
    "codex": _codex,
    "claude": _claude,
    "gemini": _gemini,
}


def load_providers(
    settings: Settings | None = None,
    cwd: str | None = None,
) -> list[ToolProvider]:
    """Instantiate every builtin provider.

    Args:
        settings: Log locations and default limit. Read from the
            environment when omitted.
        cwd: Directory used for scoping (default: the process cwd).
    """
    settings = settings or Settings.from_env()
    return [factory(settings, cwd) for factory in BUILTIN_PROVIDERS.values()]
