"""Worker threads feeding a shared counter, presented with neural-network analogies."""

from __future__ import annotations

import re
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

MIN_THREADS = 1
MAX_THREADS = 10
DEFAULT_COUNTER_START = 2

_ATOI_RE = re.compile(r"\s*([+-]?\d+)")

_ANALOGY = (
    "Neural Network Analogy:\n"
    "- Each thread runs 'foo', similar to a Perceptron processing an input.\n"
    "- Input passing is like Feed Forward (FF) neural network data flow.\n"
    "- Global counter retains state, akin to Recurrent Neural Network (RNN) loops.\n"
    "- Multiple threads interacting resemble GANs with multiple components.\n"
    "- Input processing could be compared to CNNs handling structured data.\n"
    "- Long-term state retention is similar to LSTM functionality.\n"
    "- Encoding/decoding inputs mirrors Auto Encoder (AE) behavior.\n\n"
)


class InputError(ValueError):
    """Raised when the thread count or a thread input is not acceptable."""


def atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk or nothing yields 0."""
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


def parse_thread_count(text: str) -> int:
    """Return the thread count in ``text``, which must lie between 1 and 10."""
    count = atoi(text)
    if not MIN_THREADS <= count <= MAX_THREADS:
        raise InputError(
            f"Error: Number of threads must be between {MIN_THREADS} and {MAX_THREADS}."
        )
    return count


def validate_inputs(count_text: str, input_texts: Sequence[str]) -> list[int]:
    """Check the thread count and every input; return the inputs as integers."""
    parse_thread_count(count_text)
    values = []
    for index, text in enumerate(input_texts):
        value = atoi(text)
        if not text or value <= 0:
            raise InputError(f"Error: Invalid input for thread {index}.")
        values.append(value)
    return values


def analogy_text() -> str:
    """The explanatory text shown before each run."""
    return _ANALOGY


class SharedCounter:
    """An integer shared between threads, guarded by a lock."""

    def __init__(self, start: int = DEFAULT_COUNTER_START) -> None:
        self._value = start
        self._lock = threading.Lock()

    def add(self, amount: int) -> int:
        """Add ``amount`` atomically and return the new value."""
        with self._lock:
            self._value += amount
            return self._value

    def value(self) -> int:
        with self._lock:
            return self._value


def perceptron(counter: SharedCounter, thread_id: int, input_value: int) -> int:
    """Fold one input into the shared state and return the state it produced."""
    return counter.add(input_value)


def run_threads(values: Sequence[int], counter: SharedCounter) -> list[int]:
    """Run one worker thread per value; return their results in thread order."""
    if not values:
        return []
    with ThreadPoolExecutor(max_workers=len(values)) as pool:
        futures = [
            pool.submit(perceptron, counter, thread_id, value)
            for thread_id, value in enumerate(values)
        ]
        return [future.result() for future in futures]


def process(
    count_text: str,
    input_texts: Sequence[str],
    counter: SharedCounter | None = None,
) -> str:
    """Validate, run the threads and return the full report text."""
    values = validate_inputs(count_text, input_texts)
    if counter is None:
        counter = SharedCounter()
    results = run_threads(values, counter)
    lines = "".join(
        f"Thread {thread_id} returned: {result} (Neural analogy: Output of a Perceptron)\n"
        for thread_id, result in enumerate(results)
    )
    return analogy_text() + lines


class ThreadProcessorApp:
    """Window with a thread count, one input per thread and an output pane."""

    def __init__(self, root) -> None:
        # Imported here so the computational part works without a Tk installation.
        import tkinter as tk

        self._tk = tk
        self.root = root
        self.counter = SharedCounter()
        self.input_vars: list = []

        root.title("Thread Processor with Neural Network Analogy")
        root.geometry("600x500")

        body = tk.Frame(root, padx=10, pady=10)
        body.pack(fill=tk.BOTH, expand=True)

        tk.Label(
            body,
            text="This program demonstrates multithreading with a function 'foo'.\n"
            "Outputs relate to neural network concepts (Perceptron, FF, RNN, etc.).",
        ).pack(anchor=tk.W)
        tk.Label(body, text="Number of Threads (1-10):").pack(anchor=tk.W)

        self.count_var = tk.StringVar(value="3")
        tk.Entry(body, textvariable=self.count_var).pack(fill=tk.X)

        self.input_grid = tk.Frame(body)
        self.input_grid.pack(fill=tk.X, pady=5)

        self.output = tk.Text(body, state=tk.DISABLED)
        self.output.pack(fill=tk.BOTH, expand=True, pady=5)

        tk.Button(body, text="Start Processing", command=self.on_start).pack()

        self.count_var.trace_add("write", self.on_num_threads_changed)
        self.on_num_threads_changed()

    def on_num_threads_changed(self, *args) -> None:
        """Rebuild the input rows after the thread count changed."""
        tk = self._tk
        try:
            count = parse_thread_count(self.count_var.get())
        except InputError as exc:
            self.write(f"{exc}\n")
            return
        for child in self.input_grid.winfo_children():
            child.destroy()
        self.input_vars = []
        for row in range(count):
            tk.Label(self.input_grid, text=f"Thread {row} Input:").grid(
                row=row, column=0, padx=5, pady=2, sticky=tk.W
            )
            var = tk.StringVar(value="1")
            tk.Entry(self.input_grid, textvariable=var).grid(
                row=row, column=1, padx=5, pady=2
            )
            self.input_vars.append(var)

    def on_start(self) -> None:
        """Run the threads and show the results."""
        try:
            report = process(
                self.count_var.get(),
                [var.get() for var in self.input_vars],
                self.counter,
            )
        except InputError as exc:
            self.write(f"{exc}\n")
            return
        tk = self._tk
        self.output.configure(state=tk.NORMAL)
        self.output.delete("1.0", tk.END)
        self.output.configure(state=tk.DISABLED)
        self.write(report)

    def write(self, message: str) -> None:
        """Append ``message`` to the output pane."""
        tk = self._tk
        self.output.configure(state=tk.NORMAL)
        self.output.insert(tk.END, message)
        self.output.configure(state=tk.DISABLED)


def main(argv: Sequence[str] | None = None) -> int:
    import tkinter as tk

    root = tk.Tk()
    ThreadProcessorApp(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())