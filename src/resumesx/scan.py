"""Scan orchestrator: fan out to every provider, merge, sort, limit."""

import asyncio
import functools
import logging
import threading
import time
from collections.abc import Callable, Sequence

from resumesx.models import ScanOptions, ScanResult, ToolEvent, ToolProvider, sort_by_time

logger = logging.getLogger(__name__)


def _provider_name(provider: ToolProvider) -> str:
    return getattr(provider, "id", type(provider).__name__)


def _run_in_thread(loop: asyncio.AbstractEventLoop, func: Callable[[], list[ToolEvent]],
                   name: str) -> asyncio.Future:
    """Run func in a daemon thread and resolve a loop future with its outcome.

    Daemon threads do not hold the interpreter open, so a provider the scan
    has given up on cannot delay process exit.
    """
    future = loop.create_future()

    def deliver(outcome: Callable[[], None]) -> None:
        if not future.done():
            outcome()

    def worker() -> None:
        try:
            result = func()
        except Exception as e:
            outcome = functools.partial(future.set_exception, e)
        else:
            outcome = functools.partial(future.set_result, result)
        try:
            loop.call_soon_threadsafe(deliver, outcome)
        except RuntimeError:
            logger.debug("Provider %s finished after its scan ended", name)

    threading.Thread(target=worker, name=f"resumesx-scan-{name}", daemon=True).start()
    return future


async def _fetch(provider: ToolProvider, options: ScanOptions,
                 cancel: threading.Event) -> list[ToolEvent]:
    """Run one provider in a worker thread. Failures become an empty result."""
    loop = asyncio.get_running_loop()
    name = _provider_name(provider)
    call = functools.partial(
        provider.fetch_events,
        limit=options.limit, include_all=options.include_all, cancel=cancel,
    )
    try:
        return list(await _run_in_thread(loop, call, name))
    except Exception as e:
        logger.warning("Provider %s failed: %s", name, e)
        logger.debug("Provider %s traceback", name, exc_info=True)
        return []


async def scan_providers_async(
    providers: Sequence[ToolProvider],
    options: ScanOptions | None = None,
    timeout: float | None = None,
) -> ScanResult:
    """Fetch from all providers concurrently and merge newest-first.

    Args:
        providers: Sources to scan; each runs independently.
        options: Limit and include_all, passed through to every provider.
            The limit is applied again to the merged list.
        timeout: Seconds to wait. Providers still running after that are
            told to stop and abandoned; whatever already finished is still
            merged.
    """
    options = options or ScanOptions()
    if not providers:
        return ScanResult(events=[], latest=None)

    started = time.monotonic()
    cancel = threading.Event()
    tasks = [asyncio.create_task(_fetch(p, options, cancel)) for p in providers]
    try:
        done, pending = await asyncio.wait(tasks, timeout=timeout)
    finally:
        cancel.set()

    for provider, task in zip(providers, tasks):
        if task in pending:
            task.cancel()
            logger.warning("Provider %s timed out after %ss",
                           _provider_name(provider), timeout)
    results = [task.result() for task in tasks if task in done]

    merged = sort_by_time([event for result in results for event in result])
    events = merged[:options.limit] if options.limit is not None else merged
    logger.debug("Scanned %d providers in %.3fs: %d events",
                 len(providers), time.monotonic() - started, len(events))
    return ScanResult(events=events, latest=events[0] if events else None)


def scan_providers(
    providers: Sequence[ToolProvider],
    options: ScanOptions | None = None,
    timeout: float | None = None,
) -> ScanResult:
    """Synchronous entry point for scan_providers_async()."""
    return asyncio.run(scan_providers_async(providers, options, timeout))
