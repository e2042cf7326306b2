import copy
import math

import numpy as np
import pytest

from sa_engine.engine.annealer import Strategy, anneal, run_simulated_annealing
from sa_engine.problems.grouping import (
    copy_groups,
    group_score,
    grouping_cost,
    make_grouping_cost,
    make_swap_neighbor,
    members_of,
    parity_preferences,
    sorted_groups,
    swap_between_groups,
)


def _solve(initial, seed):
    rng = np.random.default_rng(seed)
    strategy = Strategy(
        copy_state=copy_groups,
        generate_new_state=make_swap_neighbor(rng),
        get_cost=make_grouping_cost(parity_preferences(8)),
    )
    return anneal(strategy, initial, rng=rng)


@pytest.mark.parametrize(
    "initial, expected",
    [
        ([[1, 4], [2, 3]], [[1, 3], [2, 4]]),
        ([[1, 2, 3, 4], [5, 6, 7, 8]], [[1, 3, 5, 7], [2, 4, 6, 8]]),
    ],
)
def test_grouping_separates_evens_and_odds(initial, expected):
    snapshot = copy.deepcopy(initial)
    best = _solve(initial, seed=0)
    assert sorted_groups(best) == expected
    assert initial == snapshot


def test_grouping_cost_values():
    prefs = parity_preferences(4)
    assert grouping_cost([[1, 4], [2, 3]], prefs) == 0.0
    assert grouping_cost([[1, 3], [2, 4]], prefs) == pytest.approx(-2.0 * math.log(2.0))
    assert grouping_cost([], prefs) == 0.0


def test_group_score_sums_unordered_pairs():
    prefs = parity_preferences(8)
    assert group_score(np.array([1, 3, 5, 7], dtype=np.int64), prefs) == pytest.approx(12.0)
    assert group_score(np.array([1, 2], dtype=np.int64), prefs) == 0.0
    assert group_score(np.array([], dtype=np.int64), prefs) == 0.0


def test_parity_preferences_matrix():
    prefs = parity_preferences(3)
    assert prefs.shape == (4, 4)
    assert prefs[1, 3] == 2.0
    assert prefs[2, 0] == 2.0
    assert prefs[1, 2] == 0.0
    assert np.array_equal(prefs, prefs.T)


def test_swap_moves_one_member_each_way_without_mutating_input():
    rng = np.random.default_rng(42)
    groups = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    snapshot = copy.deepcopy(groups)

    for _ in range(50):
        new = swap_between_groups(groups, rng)
        assert groups == snapshot
        assert sorted(members_of(new)) == sorted(members_of(groups))
        changed = [g for g in range(3) if new[g] != groups[g]]
        assert len(changed) == 2
        for g in changed:
            assert sum(a != b for a, b in zip(new[g], groups[g])) == 1


def test_swap_handles_groups_of_different_sizes():
    rng = np.random.default_rng(0)
    groups = [[1], [2, 3, 4, 5]]
    seen = set()
    for _ in range(100):
        new = swap_between_groups(groups, rng)
        assert len(new[0]) == 1
        seen.add(new[0][0])
    assert seen == {2, 3, 4, 5}


@pytest.mark.parametrize("groups", [[], [[]], [[1]], [[1, 2, 3]], [[1], []], [[], []]])
def test_degenerate_groupings_are_returned_unchanged(groups):
    rng = np.random.default_rng(0)
    new = swap_between_groups(groups, rng)
    assert new == groups
    assert new is not groups


@pytest.mark.parametrize("groups", [[], [[]], [[1]], [[1, 2]]])
def test_annealing_degenerate_groupings_terminates(groups):
    rng = np.random.default_rng(0)
    best = run_simulated_annealing(
        copy_groups,
        make_swap_neighbor(rng),
        make_grouping_cost(parity_preferences(2)),
        groups,
        {"cooling_factor": 0.5},
        rng=rng,
    )
    assert best == groups


def test_sorted_groups_is_canonical():
    assert sorted_groups([[4, 2], [3, 1]]) == [[1, 3], [2, 4]]


@pytest.mark.parametrize("groups", [[[1, 10_000_000]], [[-1, 2]], [[1, 2], [3, 4]]])
def test_grouping_cost_rejects_members_outside_preferences(groups):
    with pytest.raises(ValueError):
        grouping_cost(groups, parity_preferences(3))


def test_out_of_range_member_error_propagates_from_annealer():
    rng = np.random.default_rng(0)
    with pytest.raises(ValueError):
        run_simulated_annealing(
            copy_groups,
            make_swap_neighbor(rng),
            make_grouping_cost(parity_preferences(3)),
            [[1, 2], [3, 99]],
            {"cooling_factor": 0.5},
            rng=rng,
        )
