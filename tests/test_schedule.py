import pytest

from sa_engine.config.config import DEFAULTS, build_options
from sa_engine.engine.schedule import estimated_length, schedule_length, temperature_schedule


def test_default_schedule_length_matches_closed_form():
    length = schedule_length(1.0, 0.99, 1e-5)
    # log(1e-5) / log(0.99) = 1145.5...
    assert length == 1146
    assert estimated_length(1.0, 0.99, 1e-5) == length


def test_schedule_strictly_decreasing():
    temps = list(temperature_schedule(1.0, 0.9, 1e-3))
    assert temps[0] == 1.0
    assert all(b < a for a, b in zip(temps, temps[1:]))
    assert temps[-1] > 1e-3
    assert temps[-1] * 0.9 <= 1e-3


def test_schedule_empty_when_starting_at_minimum():
    assert list(temperature_schedule(1e-5, 0.99, 1e-5)) == []
    assert schedule_length(0.5, 0.99, 1.0) == 0
    assert estimated_length(0.5, 0.99, 1.0) == 0


def test_zero_cooling_gives_single_level():
    assert schedule_length(1.0, 0.0, 1e-5) == 1


def test_estimated_length_rejects_non_cooling_factor():
    with pytest.raises(ValueError):
        estimated_length(1.0, 1.0, 1e-5)


def test_build_options_fills_missing_fields():
    params = build_options({"cooling_factor": 0.5, "swaps_per_temperature": None})
    assert params["cooling_factor"] == 0.5
    assert params["swaps_per_temperature"] == DEFAULTS["swaps_per_temperature"]
    assert params["initial_temperature"] == 1.0
    assert params["minimum_temperature"] == 1e-5
    assert isinstance(params["swaps_per_temperature"], int)


def test_build_options_without_overrides_is_defaults():
    assert build_options() == DEFAULTS
    assert build_options() is not DEFAULTS
