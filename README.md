# pushswap

Sorts a list of distinct integers using only the push_swap instruction
set. It works on two stacks, `a` and `b`, and prints the instructions
that sort stack `a` into ascending order, one instruction per line. The
top of stack `a` is the first number given.

## Instructions

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |

## Command line

```
pip install .
push_swap 3 2 1
```

prints

```
sa
rra
```

You can pass numbers as separate arguments, or several in one quoted
argument separated by spaces (`push_swap "4 67 3" 87 23`). With no
arguments, or when the input is already sorted, nothing is printed and
the exit status is 0.

On invalid input the command writes `Error` to standard error and exits
with status 1. Invalid input means any of these:

- a token that is not a whole number with an optional sign, or that has
  characters after its digits
- a value outside the 32-bit signed integer range
- a duplicate value
- an argument that holds no number at all

Two, three and five numbers are handled by dedicated short sequences;
any other count is sorted by moving chunks of values through stack `b`
and back.

## Library

```python
from pushswap.sorting import solve
from pushswap.parsing import parse_args, InputError
from pushswap.stacks import Stacks, is_sorted

values = parse_args(["5 1 4", "2", "3"])
print(solve(values))        # the list of instruction names

stacks = Stacks([2, 1, 3], [])
stacks.sa()
print(is_sorted(stacks.a))  # True
print(stacks.ops)           # ['sa']
```

- `pushswap.parsing` offers `parse_int`, `split_words`,
  `check_duplicates` and `parse_args`; invalid input raises `InputError`,
  a subclass of `ValueError`.
- `pushswap.normalize.normalize` replaces each value by its rank, 0 to
  n-1.
- `pushswap.stacks.Stacks` holds both stacks as deques and records every
  operation it performs in `ops`. An operation that cannot act, such as
  swapping a stack with fewer than two elements, changes nothing and is
  not recorded.
- `pushswap.sorting` provides `sort_two`, `sort_three`, `sort_five` and
  `chunk_sort`, each acting on a `Stacks` object, together with
  `find_min_index` and `solve`. `chunk_sort` expects stack `a` to hold
  normalized values.

## What it does not do

There is no checker: the package produces instructions but has no
command that reads instructions back and verifies that they sort a
given input.

## Tests

```
pip install .[test]
pytest
```