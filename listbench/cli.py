"""Interactive menus for the list structures and a timing benchmark."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from listbench.arraylist import ArrayList
from listbench.doubly import DoublyLinkedList
from listbench.singly import SinglyLinkedList

SEPARATOR = "-----------------------------------------"
BENCH_VALUE = 12345
EMPTY_MESSAGE = "List is empty - there is nothing to remove"
BOUNDS_MESSAGE = "Index out of bounds!"

_INT_RE = re.compile(r"[+-]?\d+")
_TOKEN_RE = re.compile(r"\S+")

_COMMON_ITEMS = (
    "Add element at the front",
    "Add element at the back",
    "Add element at a random position",
    "Remove element from the front",
    "Remove element from the back",
    "Remove element from a random position",
    "Find element",
    "Print list from the front",
)


class _Input:
    """Reads single characters and integers from a text stream, token by token."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buf = ""

    def _fill(self) -> None:
        while True:
            self._buf = self._buf.lstrip()
            if self._buf:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buf = line

    def char(self) -> str:
        """Return the next non-blank character."""
        self._fill()
        ch, self._buf = self._buf[0], self._buf[1:]
        return ch

    def integer(self) -> int:
        """Return the next integer; a malformed token is dropped and ValueError raised."""
        self._fill()
        match = _INT_RE.match(self._buf)
        if match is None:
            token = _TOKEN_RE.match(self._buf)
            self._buf = self._buf[token.end():]
            raise ValueError(f"not an integer: {token.group()!r}")
        self._buf = self._buf[match.end():]
        return int(match.group())


@dataclass(frozen=True)
class BenchmarkResult:
    """Average operation times in nanoseconds for each structure."""

    trials: int
    add_array: int
    add_singly: int
    add_doubly: int
    search_array: int
    search_singly: int
    search_doubly: int
    remove_array: int
    remove_singly: int
    remove_doubly: int


def _timed(action: Callable[[], object]) -> int:
    start = time.perf_counter_ns()
    action()
    return time.perf_counter_ns() - start


def run_benchmark(
    num_elements: int, trials: int, rng: random.Random | None = None
) -> BenchmarkResult:
    """Time insert, search and remove at one random position on each structure."""
    if num_elements <= 0:
        raise ValueError("number of elements must be positive")
    if trials <= 0:
        raise ValueError("number of trials must be positive")
    gen = rng if rng is not None else random.Random()
    totals = dict.fromkeys(
        (f"{op}_{kind}" for op in ("add", "search", "remove")
         for kind in ("array", "singly", "doubly")),
        0,
    )
    for _ in range(trials):
        pos = gen.randrange(num_elements) + 1

        arr = ArrayList()
        arr.fill_random(num_elements, rng=gen)
        totals["add_array"] += _timed(lambda: arr.add(BENCH_VALUE, pos))
        totals["search_array"] += _timed(lambda: arr.search(BENCH_VALUE))
        totals["remove_array"] += _timed(lambda: arr.remove(pos))

        sll = SinglyLinkedList()
        sll.fill_random(num_elements, gen)
        totals["add_singly"] += _timed(lambda: sll.insert_at(pos, BENCH_VALUE))
        totals["search_singly"] += _timed(lambda: sll.find(BENCH_VALUE))
        totals["remove_singly"] += _timed(lambda: sll.remove_at(pos))

        dll = DoublyLinkedList()
        dll.fill_random(num_elements, gen)
        totals["add_doubly"] += _timed(lambda: dll.insert_at(pos, BENCH_VALUE))
        totals["search_doubly"] += _timed(lambda: dll.find(BENCH_VALUE))
        totals["remove_doubly"] += _timed(lambda: dll.remove_at(pos))

    return BenchmarkResult(
        trials=trials, **{name: total // trials for name, total in totals.items()}
    )


def format_results(result: BenchmarkResult) -> str:
    """Render a benchmark result as the three-line summary table."""
    rows = (
        ("Add time:      ", result.add_array, result.add_singly, result.add_doubly),
        ("Search time:   ", result.search_array, result.search_singly, result.search_doubly),
        ("Remove time:   ", result.remove_array, result.remove_singly, result.remove_doubly),
    )
    lines = [f"\n--- Benchmark Results (avg over {result.trials} trials) ---\n"]
    for label, array_ns, singly_ns, doubly_ns in rows:
        lines.append(
            f"{label}Dynamic Array: {array_ns} ns, "
            f"Singly LL: {singly_ns} ns, "
            f"Doubly LL: {doubly_ns} ns\n"
        )
    return "".join(lines)


def _run_menu(
    inp: _Input,
    out: TextIO,
    title: str,
    items: tuple[str, ...],
    actions: dict[str, Callable[[], None]],
) -> None:
    while True:
        out.write(f"{SEPARATOR}\n{title}:\n")
        for number, label in enumerate(items, 1):
            out.write(f"{number}. {label}\n")
        out.write("0. Exit\nEnter your choice: ")
        try:
            choice = inp.char()
        except EOFError:
            return
        if choice == "0":
            return
        action = actions.get(choice)
        if action is None:
            out.write("Invalid choice\n")
            continue
        try:
            action()
        except EOFError:
            return
        except ValueError:
            out.write("Invalid value\n")


def _ask(inp: _Input, out: TextIO, prompt: str) -> int:
    out.write(prompt)
    return inp.integer()


def _report_find(out: TextIO, found: bool) -> None:
    out.write("Element found in the list\n" if found else "Element not found\n")


def _write_values(out: TextIO, values) -> None:
    out.write("".join(f"{value} " for value in values) + "\n")


def _guard_empty(out: TextIO, remove: Callable[[], object]) -> Callable[[], None]:
    def action() -> None:
        try:
            remove()
        except IndexError:
            out.write(f"{EMPTY_MESSAGE}\n")

    return action


def _linked_actions(
    inp: _Input, out: TextIO, lst: SinglyLinkedList | DoublyLinkedList, rng: random.Random
) -> dict[str, Callable[[], None]]:
    return {
        "1": lambda: lst.push_front(_ask(inp, out, "Enter value to add at the front: ")),
        "2": lambda: lst.push_back(_ask(inp, out, "Enter value to add at the back: ")),
        "3": lambda: lst.insert_random(
            _ask(inp, out, "Enter value to add at a random position: "), rng
        ),
        "4": _guard_empty(out, lst.remove_front),
        "5": _guard_empty(out, lst.remove_back),
        "6": _guard_empty(out, lambda: lst.remove_random(rng)),
        "7": lambda: _report_find(out, lst.find(_ask(inp, out, "Enter value to find: "))),
        "8": lambda: _write_values(out, lst),
    }


def _singly_menu(inp: _Input, out: TextIO, rng: random.Random) -> None:
    lst = SinglyLinkedList()
    _run_menu(inp, out, "Singly Linked List Menu", _COMMON_ITEMS,
              _linked_actions(inp, out, lst, rng))


def _doubly_menu(inp: _Input, out: TextIO, rng: random.Random) -> None:
    lst = DoublyLinkedList()
    actions = _linked_actions(inp, out, lst, rng)
    actions["9"] = lambda: _write_values(out, reversed(lst))
    _run_menu(inp, out, "Doubly Linked List Menu",
              _COMMON_ITEMS + ("Print list from the back",), actions)


def _array_menu(inp: _Input, out: TextIO, rng: random.Random) -> None:
    arr = ArrayList()

    def checked(operation: Callable[[], object]) -> None:
        try:
            operation()
        except IndexError:
            out.write(f"{BOUNDS_MESSAGE}\n")

    def add_random() -> None:
        position = rng.randrange(len(arr) + 1)
        value = _ask(inp, out, "Enter value to add at a random position: ")
        checked(lambda: arr.add(value, position))

    def remove_random() -> None:
        position = rng.randrange(len(arr) + 1)
        checked(lambda: arr.remove(position))

    def add_front() -> None:
        value = _ask(inp, out, "Enter value to add at the front: ")
        checked(lambda: arr.add(value, 0))

    def add_back() -> None:
        value = _ask(inp, out, "Enter value to add at the back: ")
        checked(lambda: arr.add(value, len(arr)))

    actions = {
        "1": add_front,
        "2": add_back,
        "3": add_random,
        "4": lambda: checked(lambda: arr.remove(0)),
        "5": lambda: checked(lambda: arr.remove(len(arr) - 1)),
        "6": remove_random,
        "7": lambda: _report_find(out, arr.search(_ask(inp, out, "Enter value to find: "))),
        "8": lambda: out.write("".join(f"{value} \n" for value in arr)),
    }
    _run_menu(inp, out, "Dynamic Array Menu", _COMMON_ITEMS, actions)


def singly_menu(
    stdin: TextIO, stdout: TextIO, rng: random.Random | None = None
) -> None:
    """Run the interactive singly linked list menu until exit or end of input."""
    _singly_menu(_Input(stdin), stdout, rng if rng is not None else random.Random())


def doubly_menu(
    stdin: TextIO, stdout: TextIO, rng: random.Random | None = None
) -> None:
    """Run the interactive doubly linked list menu until exit or end of input."""
    _doubly_menu(_Input(stdin), stdout, rng if rng is not None else random.Random())


def array_menu(
    stdin: TextIO, stdout: TextIO, rng: random.Random | None = None
) -> None:
    """Run the interactive dynamic array menu until exit or end of input."""
    _array_menu(_Input(stdin), stdout, rng if rng is not None else random.Random())


def main(argv: list[str] | None = None) -> int:
    """Pick a structure to explore interactively, or run the benchmark."""
    parser = argparse.ArgumentParser(
        prog="listbench",
        description="Explore list structures interactively or benchmark them.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for random choices")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    inp = _Input(sys.stdin)
    out = sys.stdout
    out.write(
        "Choose list type:\n"
        "1. Singly Linked List\n"
        "2. Doubly Linked List\n"
        "3. Dynamic Array\n"
        "4. Benchmark\n"
        "0. Exit\n"
        "Enter your choice: "
    )
    menus = {"1": _singly_menu, "2": _doubly_menu, "3": _array_menu}
    while True:
        try:
            choice = inp.char()
        except EOFError:
            return 0
        if choice == "0":
            return 0
        if choice in menus:
            menus[choice](inp, out, rng)
            return 0
        if choice == "4":
            try:
                num_elements = _ask(inp, out, "Enter number of elements: ")
                trials = _ask(inp, out, "Enter number of trials: ")
                result = run_benchmark(num_elements, trials, rng)
            except EOFError:
                return 0
            except ValueError as exc:
                out.write(f"{exc}\n")
                return 1
            out.write(format_results(result))
            return 0
        out.write("Invalid choice\n")


if __name__ == "__main__":
    sys.exit(main())