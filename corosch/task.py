"""Suspendable tasks and the dependency links between them."""

from __future__ import annotations

import threading
from typing import Any, List, Optional


class Task:
    """A unit of work backed by a generator or a native coroutine.

    The coroutine does not run until it is first resumed. Each call to
    :meth:`resume` runs it up to its next suspension point or to its end.
    The value it returns on completion becomes the task's success flag,
    reported by :meth:`is_done`. An exception escaping the coroutine ends
    the task without success and is kept in :attr:`exception`.
    """

    def __init__(self, coroutine: Any) -> None:
        if not (hasattr(coroutine, "send") and hasattr(coroutine, "close")):
            raise TypeError(
                f"expected a generator or coroutine, got {type(coroutine).__name__}"
            )
        self._coroutine = coroutine
        self.successors: List[Task] = []
        self.dependency_count = 0
        self.resume_count = 0
        self.name = ""
        self.finished = False
        self.exception: Optional[BaseException] = None
        self._done = False
        self._destroyed = False
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"Task(name={self.name!r}, finished={self.finished}, "
            f"dependencies={self.dependency_count})"
        )

    def set_name(self, name: str) -> "Task":
        """Name the task and return it, for chaining."""
        self.name = name
        return self

    def is_done(self) -> bool:
        """Whether the coroutine finished and reported success."""
        return self._done

    def precede(self, next_task: "Task") -> None:
        """Make ``next_task`` wait until this task has finished."""
        self.successors.append(next_task)
        with next_task._lock:
            next_task.dependency_count += 1

    def resume(self) -> bool:
        """Run the coroutine to its next suspension; return whether it finished."""
        if self._destroyed:
            raise RuntimeError(f"task {self.name!r} has been destroyed")
        if self.finished:
            raise RuntimeError(f"task {self.name!r} has already finished")
        with self._lock:
            self.resume_count += 1
        try:
            self._coroutine.send(None)
        except StopIteration as stop:
            self._done = bool(stop.value)
            self.finished = True
        except Exception as exc:  # the task ends without success
            self.exception = exc
            self.finished = True
        return self.finished

    def destroy(self) -> None:
        """Release the coroutine; the task cannot be resumed afterwards."""
        if not self._destroyed:
            self._coroutine.close()
            self._destroyed = True

    def _release_dependency(self) -> bool:
        """Drop one pending dependency; return True when none remain."""
        with self._lock:
            self.dependency_count -= 1
            return self.dependency_count == 0