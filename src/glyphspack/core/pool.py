"""Parallel glyph task execution.

Glyph files are independent of each other, so reading and writing them is
fanned out over a bounded thread pool. Results come back in submission
order, and the caller applies the glyph order only after every task has
joined.

Key components:
- run_glyph_tasks: Run one task per glyph, surfacing the first failure
"""

import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import TypeVar

from glyphspack.exceptions import GlyphspackError, GlyphTaskError
from glyphspack.utils import get_logger

T = TypeVar("T")
R = TypeVar("R")

ProgressCallback = Callable[[int, int, str], None]

logger = get_logger()


def run_glyph_tasks(
    func: Callable[[T], R],
    items: Sequence[T],
    describe: Callable[[T], str] = str,
    max_workers: int | None = None,
    progress_callback: ProgressCallback | None = None,
) -> list[R]:
    """Run func on every item in a thread pool.

    The first failure stops the batch: futures that have not started are
    cancelled and running ones are awaited. Of all tasks that failed, the
    error of the one submitted first is raised, so the outcome does not
    depend on scheduling.

    Args:
        func: Task to run for each item
        items: Task inputs, one per glyph
        describe: Returns the glyph name or path of an item for messages
        max_workers: Maximum worker threads (None = executor default)
        progress_callback: Optional callback(completed, total, name) invoked
            after each successful task

    Returns:
        Task results in the order of items

    Raises:
        GlyphspackError: The error of the earliest failing task
        GlyphTaskError: If a task failed with an unexpected exception
    """
    total = len(items)
    results: list[R | None] = [None] * total
    if total == 0:
        return []

    completed = 0
    failures: dict[int, BaseException] = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        pending_futures: dict[Future[R], int] = {
            executor.submit(func, item): index for index, item in enumerate(items)
        }

        for future in as_completed(list(pending_futures)):
            index = pending_futures.pop(future)
            if future.cancelled():
                continue

            error = future.exception()
            if error is not None:
                failures[index] = error
                cancelled_count = sum(1 for f in pending_futures if f.cancel())
                logger.debug(
                    "Glyph task failed, cancelling remaining tasks",
                    item=describe(items[index]),
                    cancelled=cancelled_count,
                )
                continue

            results[index] = future.result()
            completed += 1
            if progress_callback is not None:
                progress_callback(completed, total, describe(items[index]))

    if failures:
        index = min(failures)
        error = failures[index]
        if isinstance(error, GlyphspackError):
            raise error
        logger.error(
            "Glyph task crashed",
            item=describe(items[index]),
            error=str(error),
            traceback="".join(traceback.format_exception(error)),
        )
        raise GlyphTaskError(describe(items[index]), str(error)) from error

    return results  # type: ignore[return-value]
