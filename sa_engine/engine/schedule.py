"""Geometric cooling schedule."""

from __future__ import annotations

import math
from typing import Iterator


def temperature_schedule(
    initial_temperature: float,
    cooling_factor: float,
    minimum_temperature: float,
) -> Iterator[float]:
    """Yield the temperature of every level while it stays above the minimum.

    The generator is infinite when ``cooling_factor >= 1`` and
    ``initial_temperature > minimum_temperature``.
    """

    temp = float(initial_temperature)
    while temp > minimum_temperature:
        yield temp
        temp *= cooling_factor


def schedule_length(
    initial_temperature: float,
    cooling_factor: float,
    minimum_temperature: float,
) -> int:
    """Number of temperature levels the annealer will visit.

    Counted on the same float sequence the annealer walks, so it matches the
    run exactly; ``ceil(log(min / init) / log(cooling))`` is the closed form
    up to rounding drift.
    """

    if initial_temperature <= minimum_temperature:
        return 0
    return sum(1 for _ in temperature_schedule(initial_temperature, cooling_factor, minimum_temperature))


def estimated_length(
    initial_temperature: float,
    cooling_factor: float,
    minimum_temperature: float,
) -> int:
    """Closed-form level count, ``ceil(log(min / init) / log(cooling))``."""

    if initial_temperature <= minimum_temperature:
        return 0
    if not 0.0 < cooling_factor < 1.0:
        raise ValueError("cooling_factor must lie in (0, 1) for a finite schedule")
    return int(math.ceil(math.log(minimum_temperature / initial_temperature) / math.log(cooling_factor)))
