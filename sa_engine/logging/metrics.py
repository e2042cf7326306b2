import csv
import json

import numpy as np


class Metrics:
    def __init__(self):
        self.rows = []

    def append(self, trial, level, temp, curr, best, status=""):
        self.rows.append((int(trial), int(level), float(temp), float(curr), float(best), status))

    def column(self, name):
        idx = ("trial", "level", "temp", "curr_cost", "best_cost", "status").index(name)
        return [row[idx] for row in self.rows]

    def as_arrays(self):
        """Numeric columns as NumPy arrays (used for the compact trace export)."""
        return {
            "trials": np.array(self.column("trial"), dtype=np.int64),
            "levels": np.array(self.column("level"), dtype=np.int64),
            "temp": np.array(self.column("temp"), dtype=np.float64),
            "curr": np.array(self.column("curr_cost"), dtype=np.float64),
            "best": np.array(self.column("best_cost"), dtype=np.float64),
        }

    def save_csv(self, path):
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["trial", "level", "temp", "curr_cost", "best_cost", "status"])
            for row in self.rows:
                w.writerow(list(row))


def save_metrics_json(path, metrics, best_cost, params, *, extra=None):
    data = {
        "final_best_cost": float(best_cost),
        "trials_logged": len(metrics.rows),
        "params": params,
    }
    if extra:
        data.update(extra)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_groups_csv(path, groups):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["group_id", "pos", "member"])
        for g, group in enumerate(groups):
            for i, member in enumerate(group):
                w.writerow([g, i + 1, int(member)])
