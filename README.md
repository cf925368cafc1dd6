# listbench

Three sequence structures side by side, with a small interactive program
for trying them out and a benchmark that times them against each other:

- `ArrayList` (`listbench.arraylist`): a growable integer array that starts
  with room for 10 items and doubles its `capacity` when full
- `SinglyLinkedList` (`listbench.singly`): a linked list with head and tail
  references
- `DoublyLinkedList` (`listbench.doubly`): a linked list that can also be
  walked backwards with `reversed()`

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
listbench
listbench --seed 42
```

`--seed` seeds the random generator used for random positions and random
values, so a run can be repeated.

The program first asks which structure to work with:

```
1. Singly Linked List
2. Doubly Linked List
3. Dynamic Array
4. Benchmark
0. Exit
```

Each structure has its own menu. From it you can add an item at the front,
at the back or at a random position, remove an item from the front, from the
back or from a random position, search for a value, and print the contents.
The doubly linked list menu can also print the list from back to front.
Removing from an empty linked list prints a message instead of failing; on
the dynamic array an out-of-range position prints `Index out of bounds!`.
Input that is not a number where a value is asked for prints
`Invalid value`. The menu ends on `0` or at the end of input.

The benchmark asks for a number of elements and a number of trials, both of
which must be positive. In each trial it fills each structure with that many
random values, then times one insertion, one search and one removal at the
same random position between 1 and the number of elements. It prints the
average time for each operation in nanoseconds.

## Using the structures from Python

```python
import random

from listbench.arraylist import ArrayList
from listbench.singly import SinglyLinkedList
from listbench.doubly import DoublyLinkedList

arr = ArrayList()
arr.add(5, 0)
arr.add(7, len(arr))
arr.add(6, 1)
list(arr)            # [5, 6, 7]
arr.search(6)        # True
arr.remove(0)        # 5
list(arr)            # [6, 7]

dll = DoublyLinkedList([1, 2, 3])
dll.push_front(0)
dll.insert_at(2, 99)
list(dll)            # [0, 1, 99, 2, 3]
list(reversed(dll))  # [3, 2, 99, 1, 0]
dll.remove_back()    # 3

sll = SinglyLinkedList()
sll.fill_random(5, random.Random(1))
len(sll)             # 5
sll.find(12345)      # True or False
```

Both linked lists offer `push_front`, `push_back`, `remove_front`,
`remove_back`, `find`, `insert_at`, `remove_at`, `insert_random`,
`remove_random` and `fill_random`. Removal methods return the removed value
and raise `IndexError` on an empty list or a position out of range;
`insert_at` on an empty list stores the value whatever the position.
`ArrayList.add` and `ArrayList.remove` raise `IndexError` for a position out
of range.

`ArrayList.fill_random(count, low=0, high=1000, rng=None)` draws values from
`low` to `high` inclusive; the linked lists' `fill_random` draws values below
100000.

Every method that picks something at random takes a `random.Random`
instance, so a seeded generator gives repeatable results. For the benchmark
from Python, use `run_benchmark(num_elements, trials, rng)`, which returns a
`BenchmarkResult`, and `format_results(result)` in `listbench.cli`. The
menus are available as `singly_menu`, `doubly_menu` and `array_menu`, each
taking an input stream, an output stream and an optional generator.