"""Common interface of the coroutine schedulers."""

from __future__ import annotations

import abc
from typing import Any, Generator

from corosch.task import Task


class _Suspend:
    """Awaitable that gives control back to the scheduler exactly once."""

    __slots__ = ()

    def __await__(self) -> Generator[None, None, None]:
        yield

    __iter__ = __await__


class CoroScheduler(abc.ABC):
    """A scheduler runs tasks on worker threads, honouring dependencies."""

    @abc.abstractmethod
    def emplace(self, coroutine: Any) -> Task:
        """Wrap a coroutine in a task owned by this scheduler."""

    @abc.abstractmethod
    def schedule(self) -> None:
        """Start every task that has no pending dependency."""

    @abc.abstractmethod
    def wait(self) -> None:
        """Block until all tasks have finished."""

    def suspend(self) -> _Suspend:
        """Return an awaitable that suspends the running task once.

        Use ``await sched.suspend()`` in a native coroutine, or
        ``yield from sched.suspend()`` in a generator.
        """
        return _Suspend()