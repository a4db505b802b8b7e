# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of eleven operations, and check whether a sequence of
operations sorts a given list.

## Operations

| Name  | Effect                                                |
|-------|-------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                      |
| `sb`  | swap the top two elements of `b`                      |
| `ss`  | `sa` and `sb` together                                |
| `pa`  | move the top of `b` onto `a`                          |
| `pb`  | move the top of `a` onto `b`                          |
| `ra`  | rotate `a` up; the top goes to the bottom             |
| `rb`  | rotate `b` up                                         |
| `rr`  | `ra` and `rb` together                                |
| `rra` | rotate `a` down; the bottom goes to the top           |
| `rrb` | rotate `b` down                                       |
| `rrr` | `rra` and `rrb` together                              |

An operation that cannot take effect does nothing: swapping or rotating
a stack with fewer than two elements, pushing from an empty stack, and
`ss`, `rr` or `rrr` unless both stacks hold two or more elements.

## Installation

```
pip install .
```

## Command line

Print a sequence of operations that sorts the numbers, one per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

A single argument is split on spaces. The first number is the top of
stack `a`. Each number may have leading whitespace and one `+` or `-`
sign, followed only by decimal digits, and must fit a 32-bit signed
integer; no number may appear twice. Otherwise `Error` is printed and
the exit status is 1. Input that is already sorted prints nothing. With
no arguments the command does nothing.

Check a sequence of operations read from standard input, one per line:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker takes its numbers the same way. It prints `OK` when the
operations leave `a` in ascending order and `b` empty, and `K0`
otherwise. It prints `Error` for invalid numbers, for an unknown
operation, or for a last line that does not end with a newline. Once
the operations have been read, its exit status is 1 whatever the
verdict, as it is on error; with no arguments it does nothing and
exits with 0.

## Library

```python
from pushswap.stacks import Stacks, Operation
from pushswap.parsing import parse_arguments
from pushswap.sorting import sort

stacks = Stacks(parse_arguments(["3", "2", "5", "1", "4"]))
operations = sort(stacks)
print([op.value for op in operations])
print(stacks.is_solved())
```

- `pushswap.stacks`: `Operation` names the eleven operations by their
  text; `Stacks` holds lists `a` and `b` (top at index 0) and records
  in `operations` every operation that changed them. `Stacks.apply`
  takes an `Operation` or its text and returns whether it took effect;
  each operation also has its own method (`swap_a`, `push_b`,
  `rotate_both`, `reverse_rotate_a`, ...). `is_solved` is true when `a`
  is ascending and `b` is empty.
- `pushswap.parsing`: `parse_int`, `split_arguments`,
  `parse_arguments`, `is_sorted` and `check_duplicates`; invalid input
  raises `InputError`.
- `pushswap.sorting`: `sort` sorts `a` and returns the recorded
  operations; it handles two and three elements directly and larger
  inputs with a median-pivot quicksort across both stacks.
- `pushswap.cli`: `push_swap(args)` returns the operations for a list
  of number strings; `main` is the `push-swap` command.
- `pushswap.checker`: `execute` performs one newline-terminated
  instruction line, `run` applies lines to a `Stacks` and reports
  whether it ends solved; bad lines raise `InstructionError`. `main` is
  the `push-swap-checker` command.

## Tests

```
pip install ".[test]"
pytest
```