"""Dependency-aware schedulers for cooperative coroutine tasks, with a work-stealing queue and circuit graphs."""

__version__ = "1.0.0"

__all__ = [
    "task",
    "base",
    "wsq",
    "graph",
    "central_queue",
    "central_priority_queue",
    "work_stealing",
    "cli",
]