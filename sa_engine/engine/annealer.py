"""Simulated annealing over an opaque, caller-defined state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

import numpy as np

from .acceptance import accept_solution
from .schedule import temperature_schedule
from ..config.config import build_options

T = TypeVar("T")


@dataclass(frozen=True)
class Strategy(Generic[T]):
    """The three problem-specific capabilities the annealer needs.

    ``copy_state`` must return a copy sharing no mutable structure with its
    input, ``generate_new_state`` must return a randomly perturbed neighbor
    without modifying its input, and ``get_cost`` must be a pure function of
    the state (lower is better, negative values allowed).
    """

    copy_state: Callable[[T], T]
    generate_new_state: Callable[[T], T]
    get_cost: Callable[[T], float]


def run_simulated_annealing(
    copy_state: Callable[[T], T],
    generate_new_state: Callable[[T], T],
    get_cost: Callable[[T], float],
    initial_state: T,
    options: Optional[Dict[str, Any]] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    metrics=None,
) -> T:
    """Return the lowest-cost state seen while annealing from ``initial_state``.

    Parameters
    ----------
    copy_state, generate_new_state, get_cost:
        Caller strategy functions, see :class:`Strategy`.
    initial_state:
        Starting point. It is copied on entry and never modified.
    options:
        Any subset of ``initial_temperature``, ``cooling_factor``,
        ``minimum_temperature``, ``swaps_per_temperature`` and ``log_period``;
        missing keys fall back to :data:`sa_engine.config.config.DEFAULTS`.
        ``cooling_factor >= 1`` never terminates.
    rng:
        Uniform source for the acceptance test. A fresh
        ``np.random.default_rng()`` is used when omitted.
    metrics:
        Optional :class:`~sa_engine.logging.metrics.Metrics` receiving every
        ``log_period``-th trial.

    Returns
    -------
    T
        A copy of the best state, independent of every state the run touched.
        Exceptions raised by the strategy functions propagate unchanged.
    """

    if rng is None:
        rng = np.random.default_rng()
    params = build_options(options)
    swaps = params["swaps_per_temperature"]
    log_period = max(1, params["log_period"])

    curr = copy_state(initial_state)
    curr_cost = get_cost(initial_state)
    best = copy_state(initial_state)
    best_cost = curr_cost

    trial = 0
    schedule = temperature_schedule(
        params["initial_temperature"],
        params["cooling_factor"],
        params["minimum_temperature"],
    )
    for level, temp in enumerate(schedule):
        for _ in range(swaps):
            trial += 1
            cand = generate_new_state(curr)
            new_cost = get_cost(cand)
            prev_cost = curr_cost
            status = "REJECT"

            if accept_solution(prev_cost, new_cost, temp, rng):
                curr, curr_cost = cand, new_cost
                status = "IMPROVE" if new_cost < prev_cost else "ACCEPT"

            # best tracks every generated neighbor, accepted or not
            if new_cost < best_cost:
                best = copy_state(cand)
                best_cost = new_cost
                status = "BEST"

            if metrics is not None and (trial % log_period == 0 or trial == 1):
                metrics.append(trial, level, temp, curr_cost, best_cost, status=status)

    return best


def anneal(
    strategy: Strategy[T],
    initial_state: T,
    options: Optional[Dict[str, Any]] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    metrics=None,
) -> T:
    """:func:`run_simulated_annealing` taking the strategy as one object."""

    return run_simulated_annealing(
        strategy.copy_state,
        strategy.generate_new_state,
        strategy.get_cost,
        initial_state,
        options,
        rng=rng,
        metrics=metrics,
    )
