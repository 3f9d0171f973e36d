# corosch

Schedulers for graphs of cooperative tasks. Each task is a generator or a
native coroutine that can hand control back to its scheduler at any point, so
that a pool of worker threads can keep many tasks in flight at once. Tasks can
depend on one another: a task becomes ready only once every task that precedes
it has finished.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Tasks

`corosch.task.Task` wraps a generator or native coroutine (anything else is
rejected with `TypeError`). The coroutine does not start until it is first
resumed.

- `task.resume()` runs the coroutine to its next suspension point and returns
  whether it has finished. Resuming a finished or destroyed task raises
  `RuntimeError`.
- `task.destroy()` closes the coroutine.
- `task.set_name(name)` sets `task.name` and returns the task, so calls can be
  chained.
- `a.precede(b)` adds `b` to `a.successors` and raises `b.dependency_count`.
- `task.is_done()` is true when the coroutine returned a true value.

A task also exposes `resume_count` (how often it has been resumed) and
`finished`. If an exception escapes the coroutine, the task finishes without
success and the exception is kept in `task.exception`; the scheduler carries
on and still releases the task's successors.

## Schedulers

All schedulers implement `corosch.base.CoroScheduler`:

- `emplace(coroutine)` wraps a coroutine in a `Task`, registers it and returns it.
- `schedule()` enqueues every registered task with no pending dependencies.
- `wait()` blocks until the worker threads have stopped, which happens once
  every registered task has finished (or at once if none was registered).
- `suspend()` returns an awaitable that suspends the running task once:
  `yield from scheduler.suspend()` in a generator, `await scheduler.suspend()`
  in a native coroutine. A bare `yield` in a generator does the same.

Worker threads are started by the constructor, which takes the number of
threads (default: `os.cpu_count()`; fewer than one raises `ValueError`).
Register all tasks and their dependencies before calling `schedule()`.

| Class | Module | Order of ready tasks |
|-------|--------|----------------------|
| `SchedulerCentralQueue` | `corosch.central_queue` | one shared first-in, first-out queue |
| `SchedulerCentralPriorityQueue` | `corosch.central_priority_queue` | one shared queue, fewest resumptions first, ties in queueing order |
| `SchedulerWorkStealing` | `corosch.work_stealing` | one `WorkStealingQueue` per worker, newest task first |

`corosch.central_queue.Scheduler` is an alias for `SchedulerCentralQueue`.

A task that suspends is put back in the queue; a task that finishes releases
the successors for which it was the last dependency.

`SchedulerWorkStealing` puts all source tasks in the first worker's queue, and
a suspended task or a released successor goes back to the queue of the worker
that ran it. Workers do not take tasks from one another's queues, so in
practice the first worker runs every task.

```python
from corosch.central_queue import SchedulerCentralQueue


def step(rounds):
    for _ in range(rounds):
        yield          # let other tasks run
    return True


scheduler = SchedulerCentralQueue(4)
tasks = [scheduler.emplace(step(3)).set_name(f"t{i}") for i in range(5)]

for earlier, later in zip(tasks, tasks[1:]):
    earlier.precede(later)       # a linear chain

scheduler.schedule()
scheduler.wait()

assert all(task.is_done() for task in tasks)
```

## Work-stealing queue

`corosch.wsq.WorkStealingQueue` is a thread-safe double-ended queue: the owner
pushes and pops at one end, while `steal()` takes from the other. `pop()` and
`steal()` return `None` when the queue is empty. The capacity (default 1024)
must be a positive power of two, otherwise `ValueError` is raised; it doubles
when the queue fills up.

```python
from corosch.wsq import WorkStealingQueue

queue = WorkStealingQueue(2)
for item in range(3):
    queue.push(item)

queue.capacity()   # 4
queue.pop()        # 2, newest item
queue.steal()      # 0, oldest item
len(queue)         # 1
queue.empty()      # False
```

## Circuit graphs

`corosch.graph.Graph` holds `Node` and `Edge` objects in `graph.nodes` and
`graph.edges`, in insertion order. Build one by hand with `insert_node(name)`
and `insert_edge(from_node, to_node)`, which also records the edge in the
nodes' `fanouts` and `fanins`, or read a circuit file with
`Graph.from_file(filename)`.

A circuit file starts with the number of nodes, lists each quoted node name
ending in `;`, then edges as `"from" -> "to";`. Tokens are separated by
whitespace:

```
3
"a";
"b";
"c";
"a" -> "b";
"b" -> "c";
```

`from_file` raises `ValueError` for a missing or malformed node count, too few
node names, or an edge that names an unknown node; an incomplete trailing edge
is ignored. Errors opening the file propagate as `OSError`.

## Command line

`corosch-circuit` loads a circuit file and starts a work-stealing scheduler:

```
corosch-circuit NUM_ITR LENGTH CIRCUIT_FILE NUM_THREADS
```

It prints the parameters it was given, reads the graph, and prints the number
of nodes and edges. It exits with status 1 when the number of arguments is
wrong, a number is invalid, the circuit file cannot be opened or parsed, or
the thread count is below one.

## What the package does not do

The command does not attach any work to the graph's nodes: the scheduler it
creates has no tasks, so it stops at once, and `NUM_ITR` and `LENGTH` are only
echoed back. Running a computation over a circuit graph means emplacing tasks
yourself and linking them with `precede`.