"""
Deferred continuations for turn pacing.

Everything runs on one thread: a continuation is a plain callback queued
with a delay, and it always runs to completion once due. Two backends:

- ManualScheduler keeps a virtual clock that only moves when ``advance``
  or ``run_until_idle`` is called (headless games, tests).
- AsyncioScheduler hands callbacks to a running event loop.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol, Tuple

from loguru import logger

Callback = Callable[..., Any]


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callback, *args: Any) -> Any:
        ...


@dataclass(slots=True)
class ManualScheduler:
    now: float = 0.0
    _queue: List[Tuple[float, int, Callback, tuple]] = field(
        default_factory=list, init=False, repr=False
    )
    _seq: itertools.count = field(default_factory=itertools.count, init=False, repr=False)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callback, *args: Any) -> None:
        due = self.now + max(float(delay), 0.0)
        # Sequence number keeps FIFO order for equal due times
        heapq.heappush(self._queue, (due, next(self._seq), callback, args))
        logger.debug(f"Scheduled {getattr(callback, '__name__', callback)} at t={due:.2f}")

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due."""
        deadline = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            due, _, callback, args = heapq.heappop(self._queue)
            self.now = due
            callback(*args)
            ran += 1
        self.now = deadline
        return ran

    def run_until_idle(self, max_callbacks: Optional[int] = None) -> int:
        """Run queued callbacks in due order until none are left."""
        ran = 0
        while self._queue:
            if max_callbacks is not None and ran >= max_callbacks:
                break
            due, _, callback, args = heapq.heappop(self._queue)
            self.now = max(self.now, due)
            callback(*args)
            ran += 1
        return ran


@dataclass(slots=True)
class AsyncioScheduler:
    loop: Optional[asyncio.AbstractEventLoop] = None

    def call_later(self, delay: float, callback: Callback, *args: Any) -> asyncio.TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback, *args)
