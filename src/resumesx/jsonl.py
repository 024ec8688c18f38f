"""Streaming reader for newline-delimited JSON logs."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def iter_jsonl(path: Path) -> Iterator[Any]:
    """Yield each parsed line of a JSONL file, skipping blank and malformed lines.

    The file is read lazily; callers can stop iterating early.
    """
    with path.open("r", encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            try:
                yield json.loads(stripped)
            except json.JSONDecodeError:
                logger.debug("Skipping malformed line %d in %s", lineno, path)
                continue
