# algos

A small collection of classic algorithms written as plain Python functions:
breadth-first graph search, binary search, pair sums, a bounded factorial
and sliding-window routines over sequences and strings.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module             | Functions                                                                 |
|--------------------|---------------------------------------------------------------------------|
| `algos.graph`      | `default_graph()`, `bfs(start, target, graph=None)`                       |
| `algos.search`     | `binary_search(values, target)`                                           |
| `algos.arithmetic` | `factorial(n)`                                                            |
| `algos.pair_sum`   | `hash_set_sum(values, target)`, `two_pointer_sum(values, target)`         |
| `algos.windows`    | `max_window_sum(values, k)`, `longest_unique_substring(text)`, `all_substrings(text)`, `find_all_unique_substrings(text)` |
| `algos.cli`        | `main(argv=None)`                                                         |

### Graph search

`default_graph()` returns a small directed sample graph as a dict mapping
each node name to the list of its neighbours. `bfs` walks a graph breadth
first from `start` and returns `target` if it can be reached, otherwise
`None`. When no graph is passed, the sample graph is used.

```python
from algos.graph import bfs, default_graph

bfs("A", "F")                      # "F"
bfs("C", "F", default_graph())     # None
```

Visited-node messages are emitted through the `algos.graph` logger at
debug level.

### Binary search

`binary_search` reports whether `target` occurs in an ascending sequence.
An empty sequence never matches.

```python
from algos.search import binary_search

binary_search([1, 3, 5, 7, 9], 5)   # True
binary_search([1, 3, 5, 7, 9], 8)   # False
```

### Factorial

`factorial(n)` computes `n!` as long as the result fits in a signed 32-bit
integer. Negative `n` raises `ValueError`; a result above 2**31 - 1
(from `13!` upwards) raises `OverflowError`.

```python
from algos.arithmetic import factorial

factorial(5)    # 120
factorial(12)   # 479001600
```

### Pair sums

Both functions answer whether two distinct elements add up to `target`.
`hash_set_sum` accepts values in any order; `two_pointer_sum` expects them
sorted ascending and may miss pairs otherwise.

```python
from algos.pair_sum import hash_set_sum, two_pointer_sum

hash_set_sum([10, 15, 3, 7], 17)      # True
two_pointer_sum([1, 2, 3, 4, 5], 6)   # True
```

### Sliding windows

- `max_window_sum(values, k)` returns the largest sum of `k` consecutive
  values, or `None` when `k` is zero or negative or larger than the input.
- `longest_unique_substring(text)` returns the first longest substring
  without repeated characters.
- `all_substrings(text)` yields every non-empty substring, ordered by
  start and then end position.
- `find_all_unique_substrings(text)` returns, in the same order, every
  substring whose characters are all distinct.

```python
from algos.windows import (
    all_substrings,
    find_all_unique_substrings,
    longest_unique_substring,
    max_window_sum,
)

max_window_sum([2, 1, 5, 1, 3, 2], 3)   # 9
longest_unique_substring("AABCDEF")     # "ABCDEF"
list(all_substrings("AB"))              # ["A", "AB", "B"]
find_all_unique_substrings("AAB")       # ["A", "A", "AB", "B"]
```

## Command line

Installing the package provides the `algos` command. It prints every
substring of a text, one per line, followed by a comma-separated list of
the substrings without repeated characters. The text defaults to `AABC`:

```
algos
algos ABCA
```