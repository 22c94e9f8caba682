from __future__ import annotations

from collections.abc import Callable

import numpy as np

from moge.engine.ranking.comparator import NSGAIIComparator
from moge.foundation.solution import Population, Solution


class BinaryTournamentSelection:
    """
    Binary tournament using a comparator.
    comparator(a, b) returns <0 if a better than b, >0 if b better, 0 if tie.
    Ties are broken uniformly at random.
    """

    def __init__(
        self,
        comparator: Callable[[Solution, Solution], int] | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.comparator = comparator or NSGAIIComparator()
        self.rng = rng or np.random.default_rng()

    def __call__(self, population: Population) -> Solution:
        pop_size = len(population)
        if pop_size == 0:
            raise ValueError("population is empty.")
        if pop_size == 1:
            return population[0]
        i, j = self.rng.choice(pop_size, size=2, replace=False)
        a, b = population[int(i)], population[int(j)]
        cmp = self.comparator(a, b)
        if cmp < 0:
            return a
        if cmp > 0:
            return b
        return a if self.rng.random() < 0.5 else b


class RandomSelection:
    """Uniform random parent selection."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng or np.random.default_rng()

    def __call__(self, population: Population) -> Solution:
        pop_size = len(population)
        if pop_size == 0:
            raise ValueError("population is empty.")
        return population[int(self.rng.integers(0, pop_size))]


__all__ = ["BinaryTournamentSelection", "RandomSelection"]
