from __future__ import annotations

import numpy as np

from moge.foundation.problem.base import Problem
from moge.foundation.solution import Population, Solution

DEFAULT_PROBABILITY = 0.9
ALLOW_REPETITION = True
AVOID_REPETITION = False
MAX_REPETITION_ATTEMPTS = 10


class SinglePointCrossover:
    """
    One-point crossover for integer genomes.

    Both offspring share a single cut point and swap tails. With
    ``allow_repetition=False`` the cut is redrawn (up to MAX_REPETITION_ATTEMPTS
    times) while an offspring still equals one of its parents.
    """

    def __init__(
        self,
        problem: Problem,
        probability: float = DEFAULT_PROBABILITY,
        allow_repetition: bool = ALLOW_REPETITION,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be in [0, 1].")
        self.problem = problem
        self.probability = float(probability)
        self.allow_repetition = bool(allow_repetition)
        self.rng = rng or np.random.default_rng()

    def __call__(self, parent1: Solution, parent2: Solution) -> Population:
        child1 = Solution(parent1.variables.copy())
        child2 = Solution(parent2.variables.copy())
        n_var = min(parent1.n_var, parent2.n_var)
        if n_var < 2 or self.rng.random() >= self.probability:
            return Population([child1, child2])

        x1, x2 = parent1.variables, parent2.variables
        attempts = 1 if self.allow_repetition else MAX_REPETITION_ATTEMPTS
        for _ in range(attempts):
            point = int(self.rng.integers(1, n_var))
            child1.variables = np.concatenate([x1[:point], x2[point:]])
            child2.variables = np.concatenate([x2[:point], x1[point:]])
            if self.allow_repetition or not self._repeats(child1, child2, x1, x2):
                break
        return Population([child1, child2])

    @staticmethod
    def _repeats(child1: Solution, child2: Solution, x1: np.ndarray, x2: np.ndarray) -> bool:
        return any(
            np.array_equal(child.variables, parent)
            for child in (child1, child2)
            for parent in (x1, x2)
        )


__all__ = [
    "SinglePointCrossover",
    "DEFAULT_PROBABILITY",
    "ALLOW_REPETITION",
    "AVOID_REPETITION",
]
