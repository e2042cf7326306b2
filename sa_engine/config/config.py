# Annealing parameter defaults (every key may be overridden independently)
DEFAULTS = {
    "initial_temperature": 1.0,
    "cooling_factor": 0.99,      # temperature *= cooling_factor after each level
    "minimum_temperature": 1e-5,  # stop once temperature <= this
    "swaps_per_temperature": 10,  # neighbor trials per temperature level
    "log_period": 1,              # record every Nth trial into Metrics
}


def build_options(options=None):
    """Merge ``options`` over :data:`DEFAULTS` and coerce the numeric types.

    No range checks are made: a ``cooling_factor`` of 1 or more never lets the
    temperature fall below ``minimum_temperature`` and the run does not end.
    """
    params = DEFAULTS.copy()
    if options:
        params.update({k: v for k, v in options.items() if v is not None})
    params["initial_temperature"] = float(params["initial_temperature"])
    params["cooling_factor"] = float(params["cooling_factor"])
    params["minimum_temperature"] = float(params["minimum_temperature"])
    params["swaps_per_temperature"] = int(params["swaps_per_temperature"])
    params["log_period"] = int(params["log_period"])
    return params
