import pytest

from corosch.central_priority_queue import SchedulerCentralPriorityQueue


async def _step(sched, log, name, suspends, result=True):
    for _ in range(suspends):
        log.append(name)
        await sched.suspend()
    log.append(name)
    return result


def test_all_tasks_succeed():
    sched = SchedulerCentralPriorityQueue(4)
    log = []
    tasks = [sched.emplace(_step(sched, log, f"t{i}", 2)) for i in range(6)]
    sched.schedule()
    sched.wait()
    assert all(task.is_done() for task in tasks)
    assert sorted(log) == sorted(f"t{i}" for i in range(6) for _ in range(3))


def test_least_resumed_task_goes_first():
    sched = SchedulerCentralPriorityQueue(1)
    log = []
    gate = sched.emplace(_step(sched, log, "G", 0))
    a = sched.emplace(_step(sched, log, "A", 1))
    b = sched.emplace(_step(sched, log, "B", 3))
    d = sched.emplace(_step(sched, log, "D", 3))
    c = sched.emplace(_step(sched, log, "C", 0))
    gate.precede(a)
    gate.precede(b)
    gate.precede(d)
    a.precede(c)
    sched.schedule()
    sched.wait()
    assert log[:6] == ["G", "A", "B", "D", "A", "C"]
    assert all(task.is_done() for task in (gate, a, b, c, d))


def test_chain_order_is_kept():
    sched = SchedulerCentralPriorityQueue(3)
    log = []
    names = ["first", "second", "third"]
    tasks = [sched.emplace(_step(sched, log, name, 1)) for name in names]
    for first, second in zip(tasks, tasks[1:]):
        first.precede(second)
    sched.schedule()
    sched.wait()
    assert log == [name for name in names for _ in range(2)]


def test_false_result_is_not_done():
    sched = SchedulerCentralPriorityQueue(2)
    task = sched.emplace(_step(sched, [], "x", 1, result=False))
    sched.schedule()
    sched.wait()
    assert task.is_done() is False
    assert task.finished is True


def test_empty_schedule_returns():
    sched = SchedulerCentralPriorityQueue(2)
    sched.schedule()
    sched.wait()
    assert not any(worker.is_alive() for worker in sched._workers)


def test_invalid_thread_count_rejected():
    with pytest.raises(ValueError):
        SchedulerCentralPriorityQueue(-1)