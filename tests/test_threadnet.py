import pytest

from sysdemos.threadnet import (
    InputError,
    SharedCounter,
    analogy_text,
    atoi,
    parse_thread_count,
    perceptron,
    process,
    run_threads,
    validate_inputs,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -7x", -7), ("+5", 5), ("abc", 0), ("", 0), ("12abc", 12)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text, expected", [("1", 1), ("10", 10), (" 3", 3)])
def test_parse_thread_count_accepts_range(text, expected):
    assert parse_thread_count(text) == expected


@pytest.mark.parametrize("text", ["0", "11", "abc", "", "-2"])
def test_parse_thread_count_rejects(text):
    with pytest.raises(InputError, match="between 1 and 10"):
        parse_thread_count(text)


def test_validate_inputs_returns_values():
    assert validate_inputs("3", ["4", "5", "6"]) == [4, 5, 6]


def test_validate_inputs_rejects_empty_entry():
    with pytest.raises(InputError, match="Invalid input for thread 1"):
        validate_inputs("2", ["1", ""])


def test_validate_inputs_rejects_non_positive():
    with pytest.raises(InputError, match="Invalid input for thread 0"):
        validate_inputs("1", ["0"])


def test_validate_inputs_checks_count_first():
    with pytest.raises(InputError, match="between 1 and 10"):
        validate_inputs("20", ["1"])


def test_shared_counter_default_start_and_add():
    counter = SharedCounter()
    assert counter.value() == 2
    assert counter.add(5) == counter.value()


def test_perceptron_adds_input():
    counter = SharedCounter(10)
    result = perceptron(counter, 0, 5)
    assert result == 10 + 5
    assert counter.value() == result


def test_run_threads_final_state_is_sum():
    counter = SharedCounter(2)
    values = [1, 2, 3, 4, 5, 6, 7, 8]
    results = run_threads(values, counter)
    assert len(results) == len(values)
    assert counter.value() == 2 + sum(values)
    assert max(results) == counter.value()
    assert len(set(results)) == len(values)


def test_run_threads_empty():
    counter = SharedCounter(2)
    assert run_threads([], counter) == []
    assert counter.value() == 2


def test_process_report_layout():
    counter = SharedCounter(2)
    report = process("3", ["1", "1", "1"], counter)
    assert report.startswith(analogy_text())
    tail = report[len(analogy_text()):].splitlines()
    assert len(tail) == 3
    for index, line in enumerate(tail):
        assert line.startswith(f"Thread {index} returned: ")
        assert line.endswith("(Neural analogy: Output of a Perceptron)")
    assert counter.value() == 2 + 3


def test_process_state_persists_between_runs():
    counter = SharedCounter(2)
    process("1", ["4"], counter)
    process("1", ["4"], counter)
    assert counter.value() == 2 + 4 + 4


def test_process_invalid_raises():
    with pytest.raises(InputError):
        process("3", ["1", "x", "1"], SharedCounter())