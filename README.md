# algobox

A compact toolbox of classic algorithms in plain Python, with no
third-party dependencies. Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module                   | Contents |
|--------------------------|----------|
| `algobox.conversions`    | `binary_to_decimal`, `binary_to_octal`, `decimal_to_binary`, `decimal_to_octal`, `octal_to_decimal`, `octal_to_binary`, `reverse_digits` |
| `algobox.arithmetic`     | `Complex`, `fibonacci_series`, `fibonacci`, `factorial`, `power`, `is_leap_year`, `is_prime`, `armstrong_numbers`, `karatsuba`, `calculate` |
| `algobox.text`           | `number_to_words`, `roman_to_int`, `count_vowels`, `remove_vowels`, `sum_of_integers`, `frequency_sort`, `precedence`, `infix_to_postfix` |
| `algobox.searching`      | `binary_search`, `binary_search_recursive`, `linear_search` |
| `algobox.sorting`        | `insertion_sort`, `selection_sort`, `radix_sort` |
| `algobox.arrays`         | `kadane`, `max_sum_naive`, `max_sum`, `stock_profit`, `rotate`, `furthest_building`, `three_sum_closest`, `invert_color` |
| `algobox.trees`          | `TreeNode`, `NaryNode`, `has_path_sum`, `is_balanced`, `are_identical`, `read_tree_level_wise` |
| `algobox.circular_list`  | `CircularLinkedList` |
| `algobox.matrices`       | `INF`, `floyd_warshall`, `format_distances`, `determinant`, `celebrity`, `min_path_cost`, `n_queens`, `longest_common_subsequence` |
| `algobox.booth`          | `booth_multiply`, `BoothStep` |
| `algobox.dfa`            | `Dfa` with `run` and `accepts` |
| `algobox.patterns`       | `butterfly` |
| `algobox.game`           | `GuessGame` |
| `algobox.cli`            | `main`, the entry point of the `algobox` command |

A few conventions worth knowing:

- Searches return the index of the target, or `None` when it is absent.
- Sorting functions take any iterable and return a new list; `radix_sort`
  accepts only non-negative integers.
- `decimal_to_octal`, `octal_to_decimal` and `octal_to_binary` take and
  return digits written as ordinary integers (`octal_to_decimal(345)` is `229`).
- `celebrity` returns `None` when there is no celebrity, and `n_queens`
  returns the column of the queen in each row, or `None` when no placement
  exists.
- `floyd_warshall` treats `INF` (99999) as "no edge"; `format_distances`
  renders the result as text with `INF` for unreachable pairs.
- `calculate` raises `ValueError` for an unknown operator.

## Examples

```python
from algobox.conversions import binary_to_decimal
from algobox.text import infix_to_postfix, roman_to_int
from algobox.arithmetic import Complex, is_leap_year
from algobox.arrays import kadane

binary_to_decimal("1011")                    # 11
roman_to_int("MCMXCIV")                      # 1994
infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i")    # 'abcd^e-fgh*+^*+i-'
is_leap_year(1996)                           # True
kadane([-2, -3, 4, -1, -2, 1, 5, -3])        # 7
str(Complex(4, 5) + Complex(8, 9))           # '12 + i14'
```

A circular linked list behaves like an ordinary iterable; positions count
from 1 at the head:

```python
from algobox.circular_list import CircularLinkedList

ring = CircularLinkedList([1, 2, 3, 4])
ring.insert_at_head(5)
list(ring)     # [5, 1, 2, 3, 4]
ring.delete(5) # 4
len(ring)      # 4
```

A DFA over the symbols 0 and 1 is described by a table of next states:

```python
from algobox.dfa import Dfa

dfa = Dfa({"A": ("A", "B"), "B": ("A", "B")}, initial="A", finals={"B"})
dfa.run("01")      # [('A', '0', 'A'), ('A', '1', 'B')]
dfa.accepts("01")  # True
```

`booth_multiply` takes two equally wide two's-complement bit strings, most
significant bit first, and returns the product (twice as wide) together with
a `BoothStep` record for every cycle.

## Command line

Installing the package provides an `algobox` command with three
sub-commands:

```
algobox calc + 4 5          # prints "4 + 5 = 9"
algobox butterfly 3         # prints a butterfly with three rows per wing
algobox guess               # guess a random number between 1 and 100
algobox guess --number 42   # the same game with a fixed number
```

`guess` reads one guess per line from standard input until the number is
found. See everything the command offers with:

```
algobox --help
```

## What it does not do

Only the calculator, the guessing game and the butterfly pattern have a
command. Everything else — conversions, searches, sorts, trees, matrices,
the DFA and Booth's algorithm — is used from Python; there is no interactive
prompt that reads their input from the keyboard.