from __future__ import annotations

import numpy as np

from moge.foundation.problem.base import Problem
from moge.foundation.solution import Solution


def _check_probability(prob: float) -> float:
    prob = float(prob)
    if not 0.0 <= prob <= 1.0:
        raise ValueError("probability must be in [0, 1].")
    return prob


class IntegerFlipMutation:
    """
    Per-gene random reset to any value within the problem bounds.
    """

    def __init__(self, problem: Problem, probability: float, rng: np.random.Generator | None = None) -> None:
        self.problem = problem
        self.probability = _check_probability(probability)
        self.rng = rng or np.random.default_rng()

    def __call__(self, solution: Solution) -> Solution:
        if self.probability <= 0.0 or solution.n_var == 0:
            return solution
        X = solution.variables
        mask = self.rng.random(X.shape) < self.probability
        if not np.any(mask):
            return solution
        lower = self.problem.xl
        upper = self.problem.xu
        rand_vals = self.rng.integers(lower, upper + 1, size=X.shape, dtype=X.dtype)
        X[mask] = rand_vals[mask]
        solution.invalidate()
        return solution


class CreepMutation:
    """
    Small integer step mutation (+/- step), clipped to the problem bounds.
    """

    def __init__(
        self,
        problem: Problem,
        probability: float,
        step: int = 1,
        rng: np.random.Generator | None = None,
    ) -> None:
        if step <= 0:
            raise ValueError("step must be a positive integer.")
        self.problem = problem
        self.probability = _check_probability(probability)
        self.step = int(step)
        self.rng = rng or np.random.default_rng()

    def __call__(self, solution: Solution) -> Solution:
        if self.probability <= 0.0 or solution.n_var == 0:
            return solution
        X = solution.variables
        mask = self.rng.random(X.shape) < self.probability
        if not np.any(mask):
            return solution
        deltas = self.rng.choice([-self.step, self.step], size=X.shape, replace=True)
        proposed = X.copy()
        proposed[mask] = proposed[mask] + deltas[mask]
        np.clip(proposed, self.problem.xl, self.problem.xu, out=proposed)
        X[:] = proposed
        solution.invalidate()
        return solution


__all__ = ["IntegerFlipMutation", "CreepMutation"]
