"""Scheduler that gives each worker thread its own work-stealing queue."""

from __future__ import annotations

import threading
from typing import Any, List, Optional

from corosch.base import CoroScheduler
from corosch.central_queue import _thread_count
from corosch.task import Task
from corosch.wsq import WorkStealingQueue

_IDLE_WAIT = 0.001


class SchedulerWorkStealing(CoroScheduler):
    """Each worker drains its own queue, newest task first.

    Source tasks all go to the first worker's queue. A task that suspends,
    and every successor a finished task releases, goes back to the queue of
    the worker that ran it. Workers do not take from each other's queues.
    """

    def __init__(self, num_threads: Optional[int] = None) -> None:
        count = _thread_count(num_threads)
        self._tasks: List[Task] = []
        self._queues: List[WorkStealingQueue[Task]] = [
            WorkStealingQueue() for _ in range(count)
        ]
        self._stop = threading.Event()
        self._finished = 0
        self._finished_lock = threading.Lock()
        self._workers = [
            threading.Thread(
                target=self._work,
                args=(index,),
                name=f"corosch-stealer-{index}",
                daemon=True,
            )
            for index in range(count)
        ]
        for worker in self._workers:
            worker.start()

    def emplace(self, coroutine: Any) -> Task:
        """Wrap a coroutine in a task owned by this scheduler."""
        task = Task(coroutine)
        self._tasks.append(task)
        return task

    def schedule(self) -> None:
        """Put every task without pending dependencies in the first queue."""
        if not self._tasks:
            self._stop.set()
            return
        sources = [task for task in self._tasks if task.dependency_count == 0]
        for task in sources:
            self._queues[0].push(task)

    def wait(self) -> None:
        """Block until the worker threads have stopped."""
        for worker in self._workers:
            worker.join()

    def _work(self, tid: int) -> None:
        queue = self._queues[tid]
        while not self._stop.is_set():
            while not queue.empty():
                task = queue.pop()
                if task is not None:
                    self._process(task, tid)
            self._stop.wait(_IDLE_WAIT)

    def _process(self, task: Task, tid: int) -> None:
        queue = self._queues[tid]
        if not task.resume():
            queue.push(task)
            return
        task.destroy()
        for successor in task.successors:
            if successor._release_dependency():
                queue.push(successor)
        with self._finished_lock:
            self._finished += 1
            all_done = self._finished == len(self._tasks)
        if all_done:
            self._stop.set()