"""
Cooperative timeline for deferred and periodic callbacks.

Streamlit reruns the script top to bottom, so there is no event loop to
hang timers on. Instead the session owns a ``Timeline`` and the script
calls ``poll()`` on every rerun; every occurrence that has fallen due since
the last poll fires in due-time order. Tasks carry a ``CancellationToken``
and a cancelled task never fires again, which is how pause and reset stop a
pending completion from overwriting newer state.
"""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class CancellationToken:
    """Shared flag; one token is handed to every task belonging to a run."""

    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


@dataclass(order=True)
class _Task:
    due: float
    seq: int
    callback: Callable = field(compare=False)
    token: CancellationToken = field(compare=False)
    interval: Optional[float] = field(default=None, compare=False)


class Timeline:
    """
    Single logical timer for a session.

    Args:
        clock: zero-argument callable returning seconds (monotonic)
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue: list = []
        self._seq = itertools.count()
        # Due time of the occurrence being fired; tasks scheduled from inside
        # a callback are anchored here rather than to the wall clock.
        self._firing_at: Optional[float] = None

    def now(self) -> float:
        if self._firing_at is not None:
            return self._firing_at
        return self.clock()

    def call_later(self, delay: float, callback: Callable, token: CancellationToken) -> None:
        """Run ``callback()`` once, ``delay`` seconds from now."""
        self._push(self.now() + delay, callback, token, None)

    def call_every(self, interval: float, callback: Callable, token: CancellationToken) -> None:
        """
        Run ``callback()`` every ``interval`` seconds, first tick one interval
        from now. Returning ``False`` from the callback stops the task.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._push(self.now() + interval, callback, token, interval)

    def poll(self, now: float = None) -> int:
        """Fire every occurrence due at or before ``now``; return how many fired."""
        now = self.clock() if now is None else now
        fired = 0
        while self._queue and self._queue[0].due <= now:
            task = heapq.heappop(self._queue)
            if task.token.cancelled:
                continue
            self._firing_at = task.due
            try:
                keep_going = task.callback()
            finally:
                self._firing_at = None
            fired += 1
            if task.interval is not None and keep_going is not False and not task.token.cancelled:
                self._push(task.due + task.interval, task.callback, task.token, task.interval)
        if fired:
            logger.debug("timeline fired %d callback(s)", fired)
        return fired

    def pending(self) -> int:
        return sum(1 for task in self._queue if not task.token.cancelled)

    def clear(self) -> None:
        self._queue.clear()

    def _push(self, due, callback, token, interval) -> None:
        heapq.heappush(self._queue, _Task(due, next(self._seq), callback, token, interval))
