"""
Cooperative periodic tasks on a single thread.
Time is passed in explicitly, so a test can drive ticks without sleeping.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger("alphafx.utils.timers")


@dataclass
class PeriodicTask:
    """Callback that is due every `interval` seconds."""
    name: str
    interval: float
    callback: Callable[[], None]
    next_run: Optional[float] = None
    runs: int = 0

    def due(self, now: float) -> bool:
        return self.next_run is None or now >= self.next_run

    def run(self, now: float) -> None:
        self.callback()
        self.runs += 1
        # Schedule from now, not from the missed slot: a late loop does not burst.
        self.next_run = now + self.interval


class TickScheduler:
    """Runs due tasks in registration order. Not thread-safe; one loop owns it."""

    def __init__(self):
        self._tasks: List[PeriodicTask] = []
        self._stopped = False

    @property
    def tasks(self) -> List[PeriodicTask]:
        return list(self._tasks)

    def every(self, interval: float, callback: Callable[[], None], name: str = "") -> PeriodicTask:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        task = PeriodicTask(name=name or getattr(callback, "__name__", "task"), interval=interval, callback=callback)
        self._tasks.append(task)
        return task

    def cancel(self, task: PeriodicTask) -> None:
        if task in self._tasks:
            self._tasks.remove(task)

    def run_pending(self, now: float) -> int:
        """Run every task that is due at `now`. Returns how many ran."""
        ran = 0
        for task in list(self._tasks):
            if task.due(now):
                task.run(now)
                ran += 1
        return ran

    def seconds_until_next(self, now: float) -> float:
        pending = [t.next_run - now for t in self._tasks if t.next_run is not None]
        if not pending or len(pending) < len(self._tasks):
            return 0.0
        return max(0.0, min(pending))

    def stop(self) -> None:
        self._stopped = True

    def run_forever(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        max_iterations: Optional[int] = None,
    ) -> int:
        """Loop until stop(), KeyboardInterrupt or max_iterations. Returns iterations done."""
        self._stopped = False
        iterations = 0
        try:
            while not self._stopped:
                if max_iterations is not None and iterations >= max_iterations:
                    break
                now = clock()
                self.run_pending(now)
                iterations += 1
                sleep(self.seconds_until_next(clock()))
        except KeyboardInterrupt:
            logger.info("Scheduler stopped by user")
        return iterations
