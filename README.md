# puzzlebox

A collection of solvers for small puzzles, each one a plain Python function
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Function | Puzzle |
| --- | --- | --- |
| `puzzlebox.array_sum` | `min_clues(clues, length)` | Fewest known-sum ranges needed to learn an array's total |
| `puzzlebox.beautiful_digits` | `count_beautiful(low, high)` | Numbers in a range made of one repeated digit |
| `puzzlebox.conference_room` | `Point`, `locate_point(width, height, plan)` | The room point lying under its own image on a plan |
| `puzzlebox.fractions_sum` | `add_fractions(a, b, c, d)` | Sum of two fractions, reduced |
| `puzzlebox.free_lunch` | `min_lunch_cost(prices)` | Cheapest way through a run of lunches with earned coupons |
| `puzzlebox.ladder` | `travel_distance(floors, time_limit, leaving)` | Distance walked to meet everyone, one person within a time limit |
| `puzzlebox.maximize_sum` | `max_gain(numbers, moves)` | Largest increase of a sum by turning digits into nines |
| `puzzlebox.memory` | `max_mood(steps, skips)` | Best mood reachable on a staircase of memories |
| `puzzlebox.meteo` | `expected_note_day(today, last_note)` | The day a missed weekly diary note should have been made |
| `puzzlebox.mobile` | `phone_bill(base, included, price, used)` | Monthly bill with an allowance and a charge for extra use |
| `puzzlebox.odd_even` | `find_swap(heights)` | The two positions to swap so odd and even values alternate |
| `puzzlebox.pie` | `cut_count(n)` | Number of halving rounds to cut a pie into single pieces |
| `puzzlebox.polygonal_pie` | `polygon_area`, `find_intersections`, `left_area`, `dividing_x` | The vertical line that splits a polygon into equal areas |
| `puzzlebox.secret_santa` | `is_single_cycle(assignment)`, `find_fix(assignment)` | Repairing a gift assignment into one single loop |
| `puzzlebox.sequence` | `build_sequence(directions)` | Building a sequence from a string of `L` and `R` moves |
| `puzzlebox.trio` | `count_abc(text)` | Counting `abc` triples in a string |
| `puzzlebox.true_even` | `is_true_even(n)` | Whether every digit of a number is even |

## Using the library

```python
from puzzlebox.trio import count_abc
from puzzlebox.pie import cut_count
from puzzlebox.true_even import is_true_even
from puzzlebox.sequence import build_sequence

count_abc("abcabc")      # 2
cut_count(8)             # 3
is_true_even(2468)       # True
build_sequence("LRR")    # [1, 2, 3, 0]
```

Some puzzles may have no answer. In that case `min_clues`, `find_swap` and
`find_fix` return `None`. Input that makes no sense raises `ValueError`: for
example a position outside the floors in `travel_distance`, a negative
`skips` in `max_mood`, a negative size in `cut_count`, a recipient outside
the group in the `secret_santa` functions, or a polygon with no vertices in
`dividing_x`.

A few details worth knowing:

- `add_fractions` returns a `(numerator, denominator)` pair and reduces it
  only when the numerator is greater than one.
- `max_gain` treats a negative `moves` as "any number of changes", and
  gains nothing when the first number is zero.
- `dividing_x` bisects with a default `precision` of `1e-6`.
- `Point` is a named tuple of `x` and `y`. Its string form is the two
  coordinates separated by a space.

## Command line

Installing the package provides a `puzzlebox` command with two
sub-commands:

```
puzzlebox array-sum LENGTH [FIRST LAST ...]
puzzlebox meteo TODAY LAST_NOTE
```

`array-sum` takes the array's length and the clue ranges as pairs of
bounds. It prints `Yes` and the number of clues needed, or
`No, it's impossible.` `meteo` prints the day the missed note should have
been made. Run `puzzlebox --help` for details.

## Limitations

Only the `array-sum` and `meteo` puzzles can be run from the command line.
The other puzzles are available only as library functions. Nothing reads
puzzle input interactively.