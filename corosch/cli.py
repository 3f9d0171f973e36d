"""Command that loads a circuit graph and starts a work-stealing scheduler."""

from __future__ import annotations

import sys
from typing import List, Optional

from corosch.graph import Graph
from corosch.work_stealing import SchedulerWorkStealing

USAGE = "usage: run_circuit_coro num_itr length circuit_file num_threads"


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        print(USAGE, file=sys.stderr)
        return 1

    num_itr_text, length_text, circuit_file, num_threads_text = args
    try:
        num_itr = int(num_itr_text)
        length = int(length_text)
        num_threads = int(num_threads_text)
    except ValueError as exc:
        print(f"invalid number: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    print("--------------------")
    print(
        f"num_itr = {num_itr}, length = {length}, "
        f"circuit_file = {circuit_file}, num_threads = {num_threads}"
    )

    try:
        graph = Graph.from_file(circuit_file)
    except OSError:
        print("Error opening file.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        scheduler = SchedulerWorkStealing(num_threads)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    scheduler.schedule()
    scheduler.wait()
    print(f"nodes = {len(graph.nodes)}, edges = {len(graph.edges)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())