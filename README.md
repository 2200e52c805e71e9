# contestbook

Solutions to well-known competitive-programming problems (sorting and
searching, greedy choices, sequences, scheduling, grid and graph traversal,
and a few contest puzzles), written as ordinary Python functions that take
Python values and return results.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the functions

Each problem is a function in one of these modules:

- `contestbook.greedy`: `apartments`, `apartments_alternating`,
  `ferris_wheel`, `movie_festival`, `stick_lengths`, `missing_coin_sum`,
  `tasks_and_deadlines`, `reading_books`, `paint_strip`
- `contestbook.searching`: `concert_tickets`, `sum_of_two_values`,
  `sum_of_three_values`, `sum_of_four_values`, `factory_machines`,
  `nearest_smaller_values`
- `contestbook.sequences`: `distinct_numbers`, `maximum_subarray_sum`,
  `collecting_numbers`, `collecting_numbers_ii`, `playlist`,
  `josephus_every_second`, `josephus`
- `contestbook.scheduling`: `restaurant_customers`, `room_allocation`,
  `traffic_lights`, `towers`
- `contestbook.graphs`: `building_roads`, `counting_rooms`, `labyrinth`
- `contestbook.puzzles`: `game_of_division`, `salahiano_arrays`,
  `resli_pair`, `ammar_permutation`, `convert_date`, `icpc_standing`

For example:

```python
from contestbook.greedy import ferris_wheel, missing_coin_sum
from contestbook.sequences import distinct_numbers

ferris_wheel([7, 2, 3, 9], 10)        # 3 gondolas
missing_coin_sum([2, 9, 1, 2, 7])     # 6
distinct_numbers([2, 3, 2, 2, 3])     # 2
```

Some conventions:

- Positions in results are 1-based, as in the usual problem statements.
- Searches that may find nothing (`sum_of_two_values`,
  `sum_of_three_values`, `sum_of_four_values`, `game_of_division`,
  `salahiano_arrays`, `labyrinth`) return `None` in that case.
- Input that cannot be solved raises `ValueError` or `IndexError`, for
  example an empty list for `stick_lengths`, `reading_books`,
  `factory_machines` or `maximum_subarray_sum`, a map without `A` and `B`
  for `labyrinth`, or a list that is not a permutation of 1..n for
  `collecting_numbers`.
- `restaurant_customers` takes `inclusive=True` by default, so a customer
  still counts at the moment of leaving; pass `inclusive=False` to let a
  departure and an arrival at the same moment not overlap.
- `collecting_numbers_ii` reports a running count after each swap, moving it
  down by one when the value at the smaller position is larger and up by one
  otherwise; it does not rearrange the permutation between swaps.

## Command line

The `contestbook` command solves one problem in the usual judge format. It
reads the problem's input from a file, or from standard input when no file
or `-` is given, and writes the answer to standard output:

```
contestbook PROBLEM < input.txt
contestbook PROBLEM input.txt
```

The problems it knows are:

```
ammar-permutation      apartments             apartments-alternating
building-roads         calendars              collecting-numbers
collecting-numbers-ii  concert-tickets        counting-rooms
distinct-numbers       factory-machines       ferris-wheel
game-of-division       icpc-standing          josephus-i
josephus-ii            labyrinth              maximum-subarray-sum
missing-coin-sum       movie-festival         nearest-smaller-values
paint-strip            playlist               reading-books
resli-pair             restaurant-customers   room-allocation
salahiano-arrays       stick-lengths          sum-of-four-values
sum-of-three-values    sum-of-two-values      tasks-and-deadlines
towers                 traffic-lights
```

`paint-strip`, `game-of-division`, `salahiano-arrays`, `resli-pair` and
`ammar-permutation` read a number of test cases first and answer each in
turn; `calendars` prints `Query N: ...` lines and `icpc-standing` prints
`Case N: ...` lines. When the input is malformed or cannot be solved, the
command prints a message to standard error and exits with status 1.

The same thing is available from Python through
`contestbook.cli.solve(problem, text)`, which takes the input text and
returns the output text, and raises `ValueError` for an unknown problem.

## What it does not do

The package solves the problems listed above and nothing more: it does not
fetch problems, judge or time submissions, or keep any record of runs.