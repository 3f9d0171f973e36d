"""Scheduler whose shared queue favours the tasks resumed least often."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, List, Optional, Tuple

from corosch.central_queue import SchedulerCentralQueue
from corosch.task import Task


class SchedulerCentralPriorityQueue(SchedulerCentralQueue):
    """Like the central queue, but the next task taken is the one with the
    fewest resumptions so far; among equals, the one queued first."""

    def __init__(self, num_threads: Optional[int] = None) -> None:
        super().__init__(num_threads)

    def emplace(self, coroutine: Any) -> Task:
        """Wrap a coroutine or generator in a task owned by this scheduler."""
        return super().emplace(coroutine)

    def schedule(self) -> None:
        """Queue every task that has no unfinished predecessor."""
        super().schedule()

    def wait(self) -> None:
        """Block until every emplaced task has finished."""
        super().wait()

    def _init_pending(self) -> None:
        self._heap: List[Tuple[int, int, Task]] = []
        self._sequence = itertools.count()

    def _has_pending(self) -> bool:
        return bool(self._heap)

    def _put(self, task: Task) -> None:
        heapq.heappush(self._heap, (task.resume_count, next(self._sequence), task))

    def _take(self) -> Task:
        return heapq.heappop(self._heap)[2]