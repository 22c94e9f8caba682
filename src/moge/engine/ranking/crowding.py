"""
Crowding-distance assignment.

Assumes every solution of the front is evaluated; values are relative to the
front they were computed on and are overwritten on every call.
"""

from __future__ import annotations

import numpy as np

from moge.foundation.exceptions import ContractViolationError
from moge.foundation.solution import Population


def crowding_distances(F: np.ndarray) -> np.ndarray:
    """
    Standard crowding distance for a single front.
    Args:
        F: objective matrix (k, M) of the front members.
    Returns:
        Array of length k; boundary solutions get +inf.
    """
    k = F.shape[0]
    if k <= 2:
        return np.full(k, np.inf)

    d = np.zeros(k, dtype=float)
    for m in range(F.shape[1]):
        order = np.argsort(F[:, m], kind="mergesort")
        sorted_vals = F[order, m]

        d[order[0]] = np.inf
        d[order[-1]] = np.inf

        span = sorted_vals[-1] - sorted_vals[0]
        if span <= 0.0:
            continue

        contrib = (sorted_vals[2:] - sorted_vals[:-2]) / span
        d[order[1:-1]] += contrib

    return d


class CrowdingDistance:
    """Assign ``crowding_distance`` to every member of a front."""

    def __init__(self, n_obj: int) -> None:
        if n_obj <= 0:
            raise ValueError("n_obj must be a positive integer.")
        self.n_obj = int(n_obj)

    def execute(self, front: Population) -> None:
        if len(front) == 0:
            return
        if len(front) <= 2:
            for solution in front:
                solution.crowding_distance = float("inf")
            return
        F = front.objective_matrix()
        if F.shape[1] != self.n_obj:
            raise ContractViolationError(f"Front has {F.shape[1]} objectives, expected {self.n_obj}.")
        for solution, value in zip(front, crowding_distances(F)):
            solution.crowding_distance = float(value)


__all__ = ["CrowdingDistance", "crowding_distances"]
