from sysdemos.scheduler import Process, Scheduler, main


def test_process_defaults():
    process = Process(7, 4)
    assert (process.waiting_time, process.turnaround_time) == (0, 0)


def test_schedule_sets_turnaround_to_burst():
    scheduler = Scheduler()
    for pid, burst in [(1, 5), (2, 3), (3, 1)]:
        scheduler.add_process(Process(pid, burst))
    scheduler.schedule()
    assert [p.turnaround_time for p in scheduler.processes] == [5, 3, 1]


def test_schedule_log_order():
    scheduler = Scheduler()
    scheduler.add_process(Process(1, 5))
    scheduler.add_process(Process(2, 3))
    log = scheduler.schedule()
    assert log == [
        "Process 1 is running.",
        "Process 1 finished. Turnaround Time: 5",
        "Process 2 is running.",
        "Process 2 finished. Turnaround Time: 3",
    ]


def test_empty_scheduler():
    assert Scheduler().schedule() == []


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[-1] == "Process 3 finished. Turnaround Time: 1"