"""A first-come-first-served process scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class Process:
    id: int
    burst_time: int
    waiting_time: int = 0
    turnaround_time: int = 0


@dataclass
class Scheduler:
    processes: list[Process] = field(default_factory=list)

    def __init__(self) -> None:
        self.processes = []

    def add_process(self, process: Process) -> None:
        self.processes.append(process)

    def schedule(self) -> list[str]:
        """Run every process in arrival order; return the log lines."""
        log = []
        for process in self.processes:
            log.append(f"Process {process.id} is running.")
            process.turnaround_time = process.burst_time
            log.append(
                f"Process {process.id} finished. "
                f"Turnaround Time: {process.turnaround_time}"
            )
        return log


def main(argv: Sequence[str] | None = None) -> int:
    scheduler = Scheduler()
    scheduler.add_process(Process(1, 5))
    scheduler.add_process(Process(2, 3))
    scheduler.add_process(Process(3, 1))
    for line in scheduler.schedule():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())