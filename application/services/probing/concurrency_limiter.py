from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, List, Optional, Sequence, Set, TypeVar

from .errors import ProbeConfigurationError

T = TypeVar("T")
TaskFactory = Callable[[], Awaitable[T]]


class ConcurrencyLimiter:
    """Runs task factories with at most ``limit`` in flight, results in submission order.

    A factory is only called once a slot is free, so pending work never holds
    more than ``limit`` started coroutines. Started tasks are never cancelled:
    if the caller abandons ``run`` they still finish on the loop.
    """

    def __init__(self, limit: int) -> None:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ProbeConfigurationError(f"concurrency limit must be a positive integer, got {limit!r}")
        self.limit = limit
        self.in_flight = 0
        self.peak_in_flight = 0
        # strong refs so abandoned runs keep their tasks alive until done
        self._running: Set[asyncio.Task] = set()

    async def run(self, tasks: Sequence[TaskFactory[T]]) -> List[T]:
        """Execute every factory and return results ordered like ``tasks``.

        The limiter does not interpret results. If a task raises, the remaining
        tasks still run to completion and the first failure in submission
        order is re-raised afterwards.
        """
        started: List[Optional[asyncio.Task]] = [None] * len(tasks)
        pending: Set[asyncio.Task] = set()
        for idx, factory in enumerate(tasks):
            if len(pending) >= self.limit:
                _, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            task = asyncio.ensure_future(self._tracked(factory))
            self._running.add(task)
            task.add_done_callback(self._running.discard)
            started[idx] = task
            pending.add(task)
        if pending:
            await asyncio.wait(pending)
        return [t.result() for t in started]  # type: ignore[union-attr]

    async def _tracked(self, factory: TaskFactory[T]) -> T:
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            return await factory()
        finally:
            self.in_flight -= 1
