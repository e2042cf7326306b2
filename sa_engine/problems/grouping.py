"""Grouping problem: split members into groups so liked pairs end up together.

A state is a list of groups, each a list of integer member ids. The
preference matrix is indexed by member id; a group's score is the sum of the
preferences over all its unordered pairs and the cost of a state is
``-sum(log(score))`` over groups with a positive score.
"""

from __future__ import annotations

import math
from typing import Callable, List, Sequence

import numpy as np
from numba import njit

Groups = List[List[int]]


@njit(cache=True)
def group_score(members, preferences):
    """Sum of ``preferences[a, b]`` over every unordered pair in ``members``."""

    total = 0.0
    n = members.shape[0]
    for i in range(n - 1):
        a = members[i]
        for j in range(i + 1, n):
            total += preferences[a, members[j]]
    return total


def copy_groups(groups: Sequence[Sequence[int]]) -> Groups:
    return [list(group) for group in groups]


def swap_between_groups(groups: Sequence[Sequence[int]], rng: np.random.Generator) -> Groups:
    """Swap one random member of a group with one of another group.

    Returns a new state; ``groups`` is left untouched. With fewer than two
    non-empty groups there is nothing to swap and an unchanged copy comes back.
    """

    result = copy_groups(groups)
    candidates = [g for g, group in enumerate(result) if len(group) > 0]
    if len(candidates) < 2:
        return result

    pick = rng.choice(len(candidates), size=2, replace=False)
    g1, g2 = candidates[int(pick[0])], candidates[int(pick[1])]
    i1 = int(rng.integers(0, len(result[g1])))
    i2 = int(rng.integers(0, len(result[g2])))

    result[g1][i1], result[g2][i2] = result[g2][i2], result[g1][i1]
    return result


def make_swap_neighbor(rng: np.random.Generator) -> Callable[[Groups], Groups]:
    def generate_new_state(groups: Groups) -> Groups:
        return swap_between_groups(groups, rng)

    return generate_new_state


def parity_preferences(max_member: int) -> np.ndarray:
    """Evens like evens and odds like odds (score 2), mixed pairs score 0."""

    ids = np.arange(max_member + 1)
    same = (ids[:, None] % 2) == (ids[None, :] % 2)
    return np.where(same, 2.0, 0.0)


def grouping_cost(groups: Sequence[Sequence[int]], preferences: np.ndarray) -> float:
    """Raises ValueError for a member id that is not a row of ``preferences``."""

    prefs = np.asarray(preferences)
    size = prefs.shape[0]
    cost = 0.0
    for group in groups:
        members = np.asarray(group, dtype=np.int64)
        # group_score indexes without bounds checks
        if members.size and (members.min() < 0 or members.max() >= size):
            raise ValueError(f"member ids must lie in [0, {size}), got group {list(group)}")
        score = group_score(members, prefs)
        if score > 0.0:
            cost -= math.log(score)
    return cost


def make_grouping_cost(preferences) -> Callable[[Groups], float]:
    prefs = np.ascontiguousarray(preferences, dtype=np.float64)

    def get_cost(groups: Groups) -> float:
        return grouping_cost(groups, prefs)

    return get_cost


def sorted_groups(groups: Sequence[Sequence[int]]) -> Groups:
    """Canonical form: members sorted within groups, groups sorted."""

    return sorted(sorted(group) for group in groups)


def members_of(groups: Sequence[Sequence[int]]) -> List[int]:
    return [int(m) for group in groups for m in group]
