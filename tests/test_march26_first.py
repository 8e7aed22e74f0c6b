from datetime import date

import pytest

from contestkit.march26_first import (
    break_sequence,
    checkers_winning_moves,
    count_valid_dates,
    discounted_total,
    grid_jump_distance,
    hilbert_order,
    max_crane_area,
    min_barrier_cost,
    permute_blocks,
    run,
)


def test_discount_not_applied_to_two_items():
    prices = [4, 9]
    assert discounted_total(prices) == sum(prices)


def test_discount_frees_cheapest_of_three():
    prices = [30, 10, 20]
    assert discounted_total(prices) == sum(prices) - min(prices)


def test_discount_independent_of_order():
    prices = [5, 1, 8, 3, 9, 2, 7]
    assert discounted_total(prices) == discounted_total(sorted(prices))
    assert discounted_total(prices) <= sum(prices)


def test_checkers_without_whites_every_black_wins():
    grid = ["B_", "_B"]
    assert checkers_winning_moves(grid) == sum(row.count("B") for row in grid)


def test_checkers_single_capture():
    grid = ["B..", ".W.", ".._"]
    assert checkers_winning_moves(grid) == sum(row.count("B") for row in grid)


def test_checkers_blocked_capture():
    assert checkers_winning_moves(["B..", ".W.", "..."]) == 0


def test_checkers_rejects_non_square():
    with pytest.raises(ValueError):
        checkers_winning_moves(["B_", "_"])


def test_permute_identity_pads_text():
    assert permute_blocks([1, 2, 3], "abcd") == "abcd".ljust(6)


def test_permute_round_trip():
    perm = [2, 4, 1, 3]
    inverse = [0] * len(perm)
    for j, p in enumerate(perm, start=1):
        inverse[p - 1] = j
    text = "the quick brown fox"
    scrambled = permute_blocks(perm, text)
    assert sorted(scrambled) == sorted(text.ljust(20))
    assert permute_blocks(inverse, scrambled) == text.ljust(20)


def test_permute_rejects_bad_entries():
    with pytest.raises(ValueError):
        permute_blocks([1, 5], "ab")
    with pytest.raises(ValueError):
        permute_blocks([], "ab")


def test_barrier_sum_of_surrounding_costs():
    grid = [".a.", "bBc", ".d."]
    costs = [1, 2, 3, 4]
    assert min_barrier_cost(grid, costs) == sum(costs)


def test_barrier_grows_with_costs():
    grid = [".a.", "aBa", ".a."]
    assert min_barrier_cost(grid, [2]) < min_barrier_cost(grid, [6])


def test_barrier_without_black_is_free():
    assert min_barrier_cost(["..", ".."], []) == 0


def test_barrier_impossible_on_border():
    assert min_barrier_cost(["B.", ".."], []) is None


def test_barrier_unknown_letter():
    with pytest.raises(ValueError):
        min_barrier_cost([".c.", "cBc", ".c."], [1])


def test_dates_all_zero():
    assert count_valid_dates("00000000") == (0, None)


def test_dates_earliest_of_year_2000():
    count, earliest = count_valid_dates("20000101")
    assert earliest == date(2000, 1, 1)
    assert count >= 1


def test_dates_independent_of_digit_order():
    count, earliest = count_valid_dates("04112018")
    assert count_valid_dates("81204110") == (count, earliest)
    assert sorted(earliest.strftime("%d%m%Y")) == sorted("04112018")
    assert earliest.year >= 2000


def test_dates_reject_bad_input():
    with pytest.raises(ValueError):
        count_valid_dates("1234567")
    with pytest.raises(ValueError):
        count_valid_dates("abcdefgh")


def test_cranes_apart_both_count():
    assert max_crane_area([(0, 0, 1), (10, 0, 2)]) == 1**2 + 2**2


def test_cranes_touching_conflict():
    assert max_crane_area([(0, 0, 1), (3, 0, 2)]) == 2**2


def test_cranes_single():
    assert max_crane_area([(5, 5, 3)]) == 3**2


def test_jump_along_row():
    row = "1111"
    assert grid_jump_distance([row]) == len(row) - 1


def test_jump_stuck():
    assert grid_jump_distance(["00", "00"]) is None


def test_jump_rejects_letters():
    with pytest.raises(ValueError):
        grid_jump_distance(["1a"])


def test_hilbert_quadrant_order():
    points = [(3, 1), (1, 3), (1, 1), (3, 3)]
    assert hilbert_order(points, 4) == [(1, 1), (1, 3), (3, 3), (3, 1)]


def test_hilbert_is_permutation():
    points = [(0, 0), (7, 2), (3, 5), (8, 8), (6, 1), (2, 2)]
    assert sorted(hilbert_order(points, 8)) == sorted(points)


def test_hilbert_errors():
    with pytest.raises(ValueError):
        hilbert_order([(1, 1), (1, 1)], 4)
    with pytest.raises(ValueError):
        hilbert_order([(5, 1)], 4)


def test_break_sequence_changes_one_digit():
    numbers = ["10", "20", "30"]
    result = break_sequence(numbers)
    diffs = [(a, b) for a, b in zip(numbers, result) if a != b]
    assert len(diffs) == 1
    old, new = diffs[0]
    assert sum(x != y for x, y in zip(old, new)) == 1
    assert any(int(a) >= int(b) for a, b in zip(result, result[1:]))


def test_break_sequence_impossible():
    assert break_sequence(["9", "10"]) is None
    assert break_sequence(["5"]) is None


def test_break_sequence_rejects_non_digits():
    with pytest.raises(ValueError):
        break_sequence(["1x", "2"])


def test_run_discount():
    assert run("b", "3\n1 2 3\n") == f"{discounted_total([1, 2, 3])}\n"


def test_run_checkers():
    assert run("c", "3\nB..\n.W.\n.._\n") == (
        f"{checkers_winning_moves(['B..', '.W.', '.._'])}\n"
    )


def test_run_permute_multiple_cases():
    text = "3 2 3 1\nabcd\n2 2 1\nxyz\n0\n"
    expected = (
        f"'{permute_blocks([2, 3, 1], 'abcd')}'\n"
        f"'{permute_blocks([2, 1], 'xyz')}'\n"
    )
    assert run("d", text) == expected


def test_run_barrier_impossible():
    assert run("f", "2 2 0\nB.\n..\n") == "-1\n"


def test_run_dates():
    count, earliest = count_valid_dates("01012000")
    assert run("g", "1\n01 01 2000\n") == f"{count} {earliest:%d %m %Y}\n"


def test_run_cranes():
    assert run("i", "1\n2\n0 0 1\n10 0 2\n") == f"{max_crane_area([(0, 0, 1), (10, 0, 2)])}\n"


def test_run_jumps():
    assert run("j", "2 2\n00\n00\n") == "-1\n"
    assert run("j", "1 4\n1111\n") == f"{grid_jump_distance(['1111'])}\n"


def test_run_hilbert():
    assert run("l", "4 4\n3 1\n1 3\n1 1\n3 3\n") == "1 1\n1 3\n3 3\n3 1\n"


def test_run_sequence():
    assert run("m", "2\n9 10\n") == "impossible\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("z", "")