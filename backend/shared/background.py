"""
Fire-and-forget task dispatch.

Request handlers use BackgroundDispatcher for side work whose outcome must
never reach the response (e.g. last-activity tracking). Each coroutine runs
as its own asyncio task; failures are logged from a done-callback.
"""

import asyncio
import logging
from typing import Any, Coroutine

logger = logging.getLogger(__name__)


class BackgroundDispatcher:
    """
    Runs coroutines as detached asyncio tasks.

    The event loop only keeps weak references to tasks, so the dispatcher
    holds a strong reference until each task finishes.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    def dispatch(self, coro: Coroutine[Any, Any, Any], name: str = "background") -> asyncio.Task:
        """
        Schedule a coroutine without awaiting it.

        Args:
            coro: Coroutine to run
            name: Label used in log messages

        Returns:
            The created task (callers on the request path should not await it)
        """
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.debug(f"Background task {task.get_name()} was cancelled")
            return
        error = task.exception()
        if error is not None:
            logger.warning(
                f"Background task {task.get_name()} failed: {error!r}",
                exc_info=error,
            )

    @property
    def pending(self) -> int:
        """Number of tasks still running."""
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for all in-flight tasks. Used at shutdown and in tests."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
