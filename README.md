# sysdemos

Two small demonstrations of classic systems-programming ideas. Each one can be run as a command.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Threaded processor (`sysdemos-threadnet`)

This is a Tk window, so it needs a Python that has `tkinter`. You choose between 1 and 10 worker
threads and give each one a positive integer input. Each worker adds its input to a shared counter
that is guarded by a lock. The counter starts at 2, and its value carries over from one run to the
next while the window stays open. The worker returns the counter's value after its addition. The
output pane first shows a short text that compares the threads to neural-network parts, such as
the perceptron, feed-forward and RNN. It then shows what each thread returned.

```
sysdemos-threadnet
```

The same logic is available without a GUI in `sysdemos.threadnet`. `process` checks the thread
count and inputs, runs the threads and returns the full report as a string. In this example the
three threads add 1, 2 and 3 to a counter that starts at 2:

```python
from sysdemos.threadnet import SharedCounter, process

counter = SharedCounter(2)
report = process("3", ["1", "2", "3"], counter)
print(counter.value())  # 8
```

If the thread count is not between 1 and 10, or an input is empty or not a positive integer,
`InputError` is raised. Numbers are read leniently: leading spaces are skipped, the leading digits
are used, and text with no leading number counts as 0. The lower-level pieces are also available:
`validate_inputs`, `parse_thread_count`, `run_threads`, `perceptron` and `analogy_text`.

## FCFS scheduler (`sysdemos-scheduler`)

The scheduler runs processes in the order they were added, which is First-Come-First-Served. It
sets each process's turnaround time to its burst time. The command schedules three processes with
burst times 5, 3 and 1 and prints the log.

```
sysdemos-scheduler
```

`Scheduler.schedule` returns the log lines instead of printing them:

```python
from sysdemos.scheduler import Process, Scheduler

s = Scheduler()
s.add_process(Process(1, 5))
for line in s.schedule():
    print(line)
# Process 1 is running.
# Process 1 finished. Turnaround Time: 5
```

## What this package does not do

There is no server health monitor. The package does not sample CPU or memory load, and it has no
interactive monitoring menu. The scheduler does not compute waiting times: `waiting_time` stays at
0.