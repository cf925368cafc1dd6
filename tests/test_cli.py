import io
import random
import sys

import pytest

from listbench.cli import (
    BenchmarkResult,
    array_menu,
    doubly_menu,
    format_results,
    main,
    run_benchmark,
    singly_menu,
)


def _streams(text):
    return io.StringIO(text), io.StringIO()


def _last_print(output):
    return output.split("Enter your choice: ")[-2].splitlines()[0]


@pytest.mark.parametrize("menu", [singly_menu, doubly_menu])
def test_linked_menu_push_and_print(menu):
    stdin, out = _streams("1 5\n2 7\n1 3\n8\n0\n")
    menu(stdin, out, random.Random(0))
    assert "3 5 7 \n" in out.getvalue()


def test_doubly_menu_prints_backward():
    stdin, out = _streams("2 5\n2 7\n2 9\n9\n0\n")
    doubly_menu(stdin, out, random.Random(0))
    assert "9 7 5 \n" in out.getvalue()


def test_singly_menu_has_no_backward_option():
    stdin, out = _streams("9\n0\n")
    singly_menu(stdin, out, random.Random(0))
    output = out.getvalue()
    assert "Invalid choice\n" in output
    assert "Print list from the back" not in output


@pytest.mark.parametrize("menu", [singly_menu, doubly_menu])
@pytest.mark.parametrize("choice", ["4", "5", "6"])
def test_linked_menu_remove_from_empty(menu, choice):
    stdin, out = _streams(f"{choice}\n0\n")
    menu(stdin, out, random.Random(0))
    assert "List is empty - there is nothing to remove\n" in out.getvalue()


@pytest.mark.parametrize("menu", [singly_menu, doubly_menu])
def test_linked_menu_remove_front_and_back(menu):
    stdin, out = _streams("2 1 2 2 2 3 4 5 8 0")
    menu(stdin, out, random.Random(0))
    output = out.getvalue()
    assert "2 \n" in output
    assert "1 2 3 \n" not in output


@pytest.mark.parametrize("menu", [singly_menu, doubly_menu, array_menu])
def test_menu_find(menu):
    stdin, out = _streams("2 42\n7 42\n7 43\n0\n")
    menu(stdin, out, random.Random(0))
    output = out.getvalue()
    assert output.count("Element found in the list\n") == 1
    assert output.count("Element not found\n") == 1


@pytest.mark.parametrize("menu", [singly_menu, doubly_menu])
def test_linked_menu_random_add_keeps_all_values(menu):
    stdin, out = _streams("2 1\n2 2\n3 99\n8\n0\n")
    menu(stdin, out, random.Random(5))
    printed = _last_print(out.getvalue())
    assert sorted(int(v) for v in printed.split()) == [1, 2, 99]


@pytest.mark.parametrize("menu", [singly_menu, doubly_menu])
def test_linked_menu_random_remove_drops_one(menu):
    stdin, out = _streams("2 1\n2 2\n2 3\n6\n8\n0\n")
    menu(stdin, out, random.Random(3))
    values = [int(v) for v in _last_print(out.getvalue()).split()]
    assert len(values) == 2
    assert set(values) < {1, 2, 3}


def test_array_menu_add_and_print():
    stdin, out = _streams("2 5\n2 7\n1 3\n8\n0\n")
    array_menu(stdin, out, random.Random(0))
    assert "3 \n5 \n7 \n" in out.getvalue()


def test_array_menu_remove_from_empty_reports_bounds():
    stdin, out = _streams("4\n5\n0\n")
    array_menu(stdin, out, random.Random(0))
    assert out.getvalue().count("Index out of bounds!\n") == 2


def test_array_menu_remove_back():
    stdin, out = _streams("2 5\n2 7\n5\n8\n0\n")
    array_menu(stdin, out, random.Random(0))
    output = out.getvalue()
    assert "5 \n" in output
    assert "7 \n" not in output.split("Enter your choice: ")[-2]


def test_menu_invalid_choice():
    stdin, out = _streams("x\n0\n")
    array_menu(stdin, out, random.Random(0))
    assert "Invalid choice\n" in out.getvalue()


def test_menu_invalid_value_is_reported():
    stdin, out = _streams("1 abc\n8\n0\n")
    singly_menu(stdin, out, random.Random(0))
    assert "Invalid value\n" in out.getvalue()


def test_menu_stops_at_end_of_input():
    stdin, out = _streams("1 4\n")
    singly_menu(stdin, out, random.Random(0))
    assert out.getvalue().count("Singly Linked List Menu:") == 2


def test_menu_header_lists_options():
    stdin, out = _streams("0\n")
    doubly_menu(stdin, out, random.Random(0))
    output = out.getvalue()
    assert output.startswith("-----------------------------------------\nDoubly Linked List Menu:\n")
    assert "9. Print list from the back\n0. Exit\nEnter your choice: " in output


def test_run_benchmark_returns_nonnegative_averages():
    result = run_benchmark(20, 3, random.Random(1))
    assert result.trials == 3
    times = [
        result.add_array, result.add_singly, result.add_doubly,
        result.search_array, result.search_singly, result.search_doubly,
        result.remove_array, result.remove_singly, result.remove_doubly,
    ]
    assert all(t >= 0 for t in times)


def test_run_benchmark_single_element():
    result = run_benchmark(1, 2, random.Random(0))
    assert result.trials == 2


@pytest.mark.parametrize("num_elements,trials", [(0, 1), (5, 0), (-1, 3)])
def test_run_benchmark_rejects_bad_sizes(num_elements, trials):
    with pytest.raises(ValueError):
        run_benchmark(num_elements, trials, random.Random(0))


def test_format_results_layout():
    result = BenchmarkResult(
        trials=4,
        add_array=1, add_singly=2, add_doubly=3,
        search_array=4, search_singly=5, search_doubly=6,
        remove_array=7, remove_singly=8, remove_doubly=9,
    )
    text = format_results(result)
    assert text.startswith("\n--- Benchmark Results (avg over 4 trials) ---\n")
    lines = text.splitlines()
    assert lines[2] == "Add time:      Dynamic Array: 1 ns, Singly LL: 2 ns, Doubly LL: 3 ns"
    assert lines[3] == "Search time:   Dynamic Array: 4 ns, Singly LL: 5 ns, Doubly LL: 6 ns"
    assert lines[4] == "Remove time:   Dynamic Array: 7 ns, Singly LL: 8 ns, Doubly LL: 9 ns"


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Choose list type:" in capsys.readouterr().out


def test_main_invalid_then_menu(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("z\n1\n2 6\n8\n0\n"))
    assert main(["--seed", "1"]) == 0
    output = capsys.readouterr().out
    assert "Invalid choice\n" in output
    assert "6 \n" in output


def test_main_benchmark(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n5\n2\n"))
    assert main(["--seed", "2"]) == 0
    output = capsys.readouterr().out
    assert "--- Benchmark Results (avg over 2 trials) ---" in output
    assert "Remove time:" in output


def test_main_benchmark_bad_size(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n0\n2\n"))
    assert main([]) == 1
    assert "Benchmark Results" not in capsys.readouterr().out