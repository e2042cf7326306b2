import numpy as np

def accept_solution(curr_cost, new_cost, temp, rng):
    """Metropolis criterion: improvements always pass, worse moves with exp(-delta/T)."""
    delta = new_cost - curr_cost
    if delta < 0.0:
        return True
    if temp <= 0.0:
        return False
    p = np.exp(-delta / temp)
    return bool(p > rng.random())
