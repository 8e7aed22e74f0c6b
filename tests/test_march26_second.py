import pytest

from contestkit.march26_second import (
    balanced_split,
    expected_cost,
    find_route,
    longest_visible_chain,
    min_removals_two_letters,
    run,
    unmatched_count,
)


def test_single_point_chain_has_length_one():
    assert longest_visible_chain([(3, 4)], 2) == 1


def test_chain_is_bounded_and_order_independent():
    points = [(0, 0), (1, 2), (2, 1), (3, 3), (0, 5), (4, 0)]
    result = longest_visible_chain(points, 1)
    assert 1 <= result <= len(points)
    assert longest_visible_chain(list(reversed(points)), 1) == result


def test_chain_never_shrinks_when_points_are_added():
    points = [(0, 0), (1, 2), (2, 1)]
    base = longest_visible_chain(points, 3)
    assert longest_visible_chain(points + [(5, 5), (1, 1)], 3) >= base


def test_chain_pinned_case():
    assert longest_visible_chain([(0, 0), (0, 1)], 1) == 2


def test_chain_rejects_non_positive_radius():
    with pytest.raises(ValueError):
        longest_visible_chain([(0, 0)], 0)


def test_chain_run_single_point():
    assert run("n", "1 3 5 5\n2 2\n") == "1\n"


def test_balanced_split_never_exceeds_half():
    weights = [3.5, 1.25, 7.0, 2.0, 4.5]
    chosen = balanced_split(weights)
    assert sum(weights[i - 1] for i in chosen) <= sum(weights) / 2 + 1e-9


def test_balanced_split_single_item_picks_nothing():
    assert balanced_split([5]) == []


def test_balanced_split_rejects_zero_weight():
    with pytest.raises(ValueError):
        balanced_split([1, 0])


def test_balanced_split_run_format():
    out = run("o", "2\n1 1\n0\n")
    assert out.endswith(" \n")
    tokens = out.split()
    assert len(tokens) == 1
    assert tokens[0] in {"1", "2"}


def test_two_letter_text_needs_no_removal():
    assert min_removals_two_letters("abbaab") == 0
    assert min_removals_two_letters("") == 0


def test_removals_pinned_case():
    assert min_removals_two_letters("aaabbc") == 1


def test_removals_reject_uppercase():
    with pytest.raises(ValueError):
        min_removals_two_letters("aB")


def test_route_found_along_chain():
    assert find_route(["a b", "b c"], "a", "c") == ["a", "b", "c"]


def test_route_to_self():
    assert find_route(["a b"], "b", "b") == ["b"]


def test_route_missing_or_disconnected():
    assert find_route(["a b", "c d"], "a", "d") is None
    assert find_route(["a b"], "a", "z") is None


def test_route_run_outputs():
    assert run("q", "2\na b\nb c\na c\n") == "a b c\n"
    assert run("q", "1\na b\na z\n") == "no route found"
    assert run("q", "2\na b\nc d\na d\n") == "no route found\n"


def test_unmatched_distinct_equal_lists():
    assert unmatched_count([4, 9, 1], [1, 4, 9]) == 0


def test_unmatched_pinned_case():
    assert unmatched_count([1, 2, 3], [2]) == 2


def test_unmatched_at_least_excess():
    first = [1, 5, 8, 13, 20]
    second = [6, 14]
    assert unmatched_count(first, second) >= len(first) - len(second)


def test_unmatched_requires_candidates():
    with pytest.raises(ValueError):
        unmatched_count([1], [])


def test_expected_cost_without_energy():
    assert expected_cost(0, 1, 1) == 225.0


def test_expected_cost_never_above_cap():
    for energy in range(1, 30):
        assert 0.0 <= expected_cost(energy, 2, 3) <= 225.0


def test_expected_cost_rejects_bad_steps():
    with pytest.raises(ValueError):
        expected_cost(5, 0, 1)


def test_expected_cost_run_format():
    assert run("s", "0 1 1\n") == "225\n"