# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. The solver prints the operations it uses, one per line;
the checker reads such a list and tells you whether it sorts the numbers.

## Operations

| name  | effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together, only when both stacks hold two or more values |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

Numbers can be given as separate arguments or as a single quoted,
space-separated string:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

Input that is not a valid 32-bit integer, duplicate values, or a missing
argument print `Error` to standard error and end with exit status 1.
Input that is already sorted prints nothing.

To check a list of operations, give it the same numbers and feed the
operations on standard input, one per line, each ending in a newline:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker prints `OK` when `a` ends up sorted and `b` empty, and `KO`
otherwise, followed by the final contents of both stacks. Blank lines are
ignored. An unknown operation, or a last line without its newline, prints
`Error` to standard error and ends with exit status 1.

## Library use

```python
from pushswap.solver import solve
from pushswap.stacks import Stacks

moves = solve([3, 2, 5, 1, 4])      # list of operation names

stacks = Stacks([3, 2, 5, 1, 4], record=False)
for name in moves:
    stacks.apply(name)              # ValueError on an unknown name
assert stacks.a == [1, 2, 3, 4, 5] and stacks.b == []
```

Stacks are lists listed from top to bottom. `Stacks` has one method per
operation and, when `record` is true (the default), appends every operation
that takes effect to `moves`.

- `pushswap.parsing`: `parse_args` turns command-line words into integers
  and raises `ParseError` on bad input; `parse_int`, `split_words`,
  `has_duplicates` and `is_sorted` are the pieces it is built from.
- `pushswap.solver`: `solve` returns the operations for a list of values
  (raising `ValueError` on duplicates); `push_swap` sorts a `Stacks` in place.
- `pushswap.costs`: the insertion positions and rotation costs the solver
  uses to pick its cheapest move.
- `pushswap.cli`: `main` and `checker_main` behind the two commands, plus
  `run_checker` and `format_stack`.