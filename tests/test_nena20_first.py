import pytest

from contestkit.nena20_first import (
    average_range,
    best_exam_score,
    best_subset_sum,
    keypad_cost,
    max_revenue,
    run,
    stack_costs,
    sum_chain_starts,
)


def test_average_range_with_no_scores():
    assert average_range(2, []) == (-3.0, 3.0)


def test_average_range_ordering_and_full_information():
    low, high = average_range(5, [1, -2, 3])
    assert low <= high
    full_low, full_high = average_range(3, [1, 2, 3])
    assert full_low == full_high


def test_average_range_rejects_too_many_scores():
    with pytest.raises(ValueError):
        average_range(1, [1, 2])


def test_average_range_run_format():
    assert run("a", "2 0\n") == "-3 3\n"


def test_revenue_with_unused_ingredients():
    assert max_revenue([4, 7], [([0, 0], 2)]) == 2 * 2147483647


def test_revenue_without_recipes():
    assert max_revenue([5], []) == 0


def test_revenue_grows_with_stock():
    recipes = [([2, 3], 5), ([1, 4], 7)]
    assert max_revenue([20, 30], recipes) >= max_revenue([10, 15], recipes)


def test_revenue_rejects_mismatched_recipe():
    with pytest.raises(ValueError):
        max_revenue([1, 2], [([1], 3)])


def test_exam_single_sheet_matches_fully():
    assert best_exam_score(["TF"]) == 2


def test_exam_opposite_sheets():
    assert best_exam_score(["TT", "FF"]) == 1


def test_exam_duplicate_sheets_do_not_matter():
    sheets = ["TFT", "FFT"]
    assert best_exam_score(sheets + sheets) == best_exam_score(sheets)


def test_exam_requires_sheets():
    with pytest.raises(ValueError):
        best_exam_score([])


def test_keypad_zero_digit_costs_nothing():
    assert keypad_cost("0") == 0


def test_keypad_invariant_under_relabelling():
    assert keypad_cost("1213") == keypad_cost("5956")


def test_keypad_rejects_bad_input():
    with pytest.raises(ValueError):
        keypad_cost("")
    with pytest.raises(ValueError):
        keypad_cost("12a")


def test_chain_starts_basic():
    assert sum_chain_starts([1, 2, 3]) == 1
    assert sum_chain_starts([10]) == 10
    assert sum_chain_starts([]) == 0


def test_chain_starts_order_independent():
    assert sum_chain_starts([7, 3, 4, 9, 8]) == sum_chain_starts([3, 4, 7, 8, 9])


def test_stack_costs_single_item():
    assert stack_costs(1, [1, 1, 1]) == [0, 0, 0]


def test_stack_costs_length_and_bounds():
    requests = [2, 5, 2, 1, 5]
    costs = stack_costs(5, requests)
    assert len(costs) == len(requests)
    assert all(0 <= c <= 5 * step for step, c in enumerate(costs, start=1))


def test_subset_sum_takes_everything_when_it_fits():
    values = [3, 4, 2]
    assert best_subset_sum(20, values) == sum(values)


def test_subset_sum_empty_and_bounded():
    assert best_subset_sum(9, []) == 9
    assert best_subset_sum(10, [6, 5, 4, 3]) <= 10


def test_subset_sum_run_has_no_newline():
    assert run("g", "0 7\n") == "7"