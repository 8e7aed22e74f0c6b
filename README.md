# contestkit

Solvers for four sets of programming-contest problems. Each problem is a
plain Python function that takes ordinary Python values and returns its
answer; where a problem can have no answer, the function returns `None`.
Invalid arguments raise `ValueError`. The package needs nothing beyond the
standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `contestkit.april9` | `bard_songs`, `count_predecessor_rings`, `obstacle_levels` |
| `contestkit.march19` | `count_independent_sets`, `draft_picks`, `river_crossing`, `cube_net_folds`, `sentence_values`, `arrival_order`, `max_rectangle_area`, `min_erase_operations` |
| `contestkit.march26_first` | `discounted_total`, `checkers_winning_moves`, `permute_blocks`, `min_barrier_cost`, `count_valid_dates`, `max_crane_area`, `grid_jump_distance`, `hilbert_order`, `break_sequence` |
| `contestkit.march26_second` | `longest_visible_chain`, `balanced_split`, `min_removals_two_letters`, `find_route`, `unmatched_count`, `expected_cost` |
| `contestkit.nena20_first` | `average_range`, `max_revenue`, `best_exam_score`, `keypad_cost`, `sum_chain_starts`, `stack_costs`, `best_subset_sum` |
| `contestkit.nena20_second` | `count_moves`, `count_triangle_sets`, `min_subtree_size`, `longest_common_order`, `can_paint_all`, `count_non_annoying`, `first_span_days` |
| `contestkit.nena20_third` | `MinCostFlow`, `xor_tournament`, `min_games`, `jump_distances`, `count_structures` |
| `contestkit.cli` | `main`, the command-line entry point |

Every problem module also has `run(problem, text)`. It takes a problem
letter and that problem's raw input text, and returns the text the solver
prints. An unknown letter raises `ValueError`, as does input that ends too
early.

## Using the functions

```python
from contestkit.march19 import max_rectangle_area
from contestkit.march26_first import discounted_total, count_valid_dates
from contestkit.march26_second import min_removals_two_letters

max_rectangle_area(10, 4, 7)                 # 168
discounted_total([1, 2, 3, 4, 5, 6])         # 16: every third item is free
min_removals_two_letters("abcab")            # 1
count_valid_dates("04112018")                # (count, earliest datetime.date or None)
```

Running a problem on its input text:

```python
from contestkit import march19

march19.run("m", "10 4 7")                   # "168\n"
```

`contestkit.nena20_third.MinCostFlow` is the minimum-cost maximum-flow
network used by `xor_tournament`, and can be used on its own:

```python
from contestkit.nena20_third import MinCostFlow

network = MinCostFlow(4, 0, 3)               # size, source, sink
network.add_edge(0, 1, 2, 1)                 # source, target, capacity, cost
network.add_edge(1, 3, 2, 1)
network.add_edge(0, 2, 1, 5)
network.add_edge(2, 3, 1, 0)
network.solve()                              # (flow, cost) == (3, 9)
```

## Command line

The `contestkit` command takes a contest name, a problem letter and an
optional input file; without a file it reads standard input. It prints the
problem's answer.

```
contestkit --help
echo "10 4 7" | contestkit march19 m
contestkit nena20 d input.txt
```

Contests and their problem letters:

| Contest | Problems |
| --- | --- |
| `april9` | d e f |
| `march19` | a b c d e i m r |
| `march26` | b c d f g i j l m n o p q r s |
| `nena20` | a b c d e f g h i j k l m n o p q r |

A letter the contest does not have is a usage error. If the input file
cannot be read or the input is malformed, the command prints
`contestkit: <reason>` to standard error and exits with status 1.