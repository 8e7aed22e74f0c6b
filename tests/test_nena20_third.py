import pytest

from contestkit.nena20_third import (
    MinCostFlow,
    count_structures,
    jump_distances,
    min_games,
    run,
    xor_tournament,
)


def test_flow_rejects_equal_source_and_sink():
    with pytest.raises(ValueError):
        MinCostFlow(3, 1, 1)


def test_flow_rejects_edge_out_of_range():
    network = MinCostFlow(2, 0, 1)
    with pytest.raises(ValueError):
        network.add_edge(0, 5, 1, 0)


def test_flow_single_edge():
    network = MinCostFlow(2, 0, 1)
    network.add_edge(0, 1, 4, 3)
    assert network.solve() == (4, 12)


def test_flow_prefers_cheaper_parallel_edge():
    network = MinCostFlow(3, 0, 2)
    network.add_edge(0, 1, 1, 0)
    network.add_edge(1, 2, 1, 7)
    network.add_edge(1, 2, 1, 2)
    assert network.solve() == (1, 2)


def test_flow_without_path_is_empty():
    network = MinCostFlow(3, 0, 2)
    network.add_edge(0, 1, 5, 1)
    assert network.solve() == (0, 0)


def test_flow_solve_is_stable():
    network = MinCostFlow(3, 0, 2)
    network.add_edge(0, 1, 2, 1)
    network.add_edge(1, 2, 3, 1)
    first = network.solve()
    assert network.solve() == first


def test_xor_tournament_two_players():
    assert xor_tournament([(1, 1), (2, 1)]) == (3, 3)


def test_xor_tournament_trivial_inputs():
    assert xor_tournament([]) == (0, 0)
    assert xor_tournament([(7, 3)]) == (0, 0)


def test_xor_tournament_equal_strengths_cost_nothing():
    assert xor_tournament([(4, 1), (4, 2), (4, 1)]) == (0, 0)


def test_xor_tournament_order_independent_and_ordered():
    players = [(5, 2), (3, 1), (6, 2), (1, 1)]
    low, high = xor_tournament(players)
    assert (low, high) == xor_tournament(list(reversed(players)))
    assert low <= high


def test_min_games_without_rankings():
    assert min_games(3, []) == 3


def test_min_games_impossible_for_small_n():
    assert min_games(1, []) is None
    assert min_games(2, [("AB", 1)]) is None


def test_min_games_ranking_order_irrelevant():
    rankings = [("ABC", 2), ("CAB", 1)]
    assert min_games(3, rankings) == min_games(3, list(reversed(rankings)))


def test_min_games_rejects_bad_input():
    with pytest.raises(ValueError):
        min_games(6, [])
    with pytest.raises(ValueError):
        min_games(3, [("AD", 1)])


def test_jump_distances_single_point():
    assert jump_distances([1], 1) == [1]


def test_jump_distances_without_edges_unreachable():
    assert jump_distances([3, 8, 2], 0) == [None, None, None]


def test_jump_distances_wide_fan_out_reaches_all():
    result = jump_distances([3, 1, 4, 1, 5], 10)
    assert len(result) == 5
    assert all(d is not None and d >= 1 for d in result)


def test_jump_distances_rejects_negative_k():
    with pytest.raises(ValueError):
        jump_distances([1], -1)


def test_count_structures_prime_is_zero():
    for prime in (2, 3, 5, 7, 13):
        assert count_structures(prime, 1000) == 0


def test_count_structures_small():
    assert count_structures(4, 1000) == 2


def test_count_structures_consistent_modulo():
    assert count_structures(12, 7) == count_structures(12, 10**9 + 7) % 7


def test_count_structures_rejects_bad_modulus():
    with pytest.raises(ValueError):
        count_structures(4, 0)


def test_run_o_matches_function():
    low, high = xor_tournament([(1, 1), (2, 1)])
    assert run("o", "2\n1 1\n2 1\n") == f"{low} {high}\n"


def test_run_p_prints_sentinel_when_impossible():
    assert run("p", "2 0\n") == f"{1 << 61}\n"


def test_run_q_unreachable():
    assert run("q", "2 0\n5 7\n") == "-1\n-1\n"


def test_run_r_matches_function():
    assert run("r", "6 1000\n") == f"{count_structures(6, 1000)}\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("z", "")