"""Scheduler that feeds all worker threads from one shared first-in first-out queue."""

from __future__ import annotations

import os
import threading
from collections import deque
from typing import Any, Deque, List, Optional

from corosch.base import CoroScheduler
from corosch.task import Task


def _thread_count(num_threads: Optional[int]) -> int:
    if num_threads is None:
        return os.cpu_count() or 1
    if num_threads < 1:
        raise ValueError(f"num_threads must be at least 1, got {num_threads}")
    return num_threads


class SchedulerCentralQueue(CoroScheduler):
    """Worker threads take tasks from one shared queue.

    A task that suspends goes back to the end of the queue. When a task
    finishes, every successor whose last dependency it was is queued. The
    workers stop once every emplaced task has finished.
    """

    def __init__(self, num_threads: Optional[int] = None) -> None:
        count = _thread_count(num_threads)
        self._tasks: List[Task] = []
        self._cv = threading.Condition()
        self._stop = False
        self._finished = 0
        self._finished_lock = threading.Lock()
        self._init_pending()
        self._workers = [
            threading.Thread(
                target=self._work, name=f"corosch-worker-{index}", daemon=True
            )
            for index in range(count)
        ]
        for worker in self._workers:
            worker.start()

    # The pending container; the priority scheduler replaces these hooks.
    def _init_pending(self) -> None:
        self._pending: Deque[Task] = deque()

    def _has_pending(self) -> bool:
        return bool(self._pending)

    def _put(self, task: Task) -> None:
        self._pending.append(task)

    def _take(self) -> Task:
        return self._pending.popleft()

    def emplace(self, coroutine: Any) -> Task:
        """Wrap a coroutine in a task owned by this scheduler."""
        task = Task(coroutine)
        self._tasks.append(task)
        return task

    def schedule(self) -> None:
        """Queue every task that has no pending dependency."""
        if not self._tasks:
            self._halt()
            return
        sources = [task for task in self._tasks if task.dependency_count == 0]
        for task in sources:
            self._enqueue(task)

    def wait(self) -> None:
        """Block until the worker threads have stopped."""
        for worker in self._workers:
            worker.join()

    def _work(self) -> None:
        while True:
            with self._cv:
                self._cv.wait_for(lambda: self._stop or self._has_pending())
                if self._stop:
                    return
                task = self._take()
            self._process(task)

    def _enqueue(self, task: Task) -> None:
        with self._cv:
            self._put(task)
            self._cv.notify()

    def _halt(self) -> None:
        with self._cv:
            self._stop = True
            self._cv.notify_all()

    def _process(self, task: Task) -> None:
        if not task.resume():
            self._enqueue(task)
            return
        task.destroy()
        for successor in task.successors:
            if successor._release_dependency():
                self._enqueue(successor)
        with self._finished_lock:
            self._finished += 1
            all_done = self._finished == len(self._tasks)
        if all_done:
            self._halt()


Scheduler = SchedulerCentralQueue