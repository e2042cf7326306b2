"""Example problems built on the annealing engine."""

from .grouping import (
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

__all__ = [
    "copy_groups",
    "group_score",
    "grouping_cost",
    "make_grouping_cost",
    "make_swap_neighbor",
    "members_of",
    "parity_preferences",
    "sorted_groups",
    "swap_between_groups",
]
