from __future__ import annotations

from moge.foundation.solution import Population

from .dominance import SolutionDominance


class FrontsExtractor:
    """
    Classic O(N^2) fast non-dominated sort over a population of solutions.

    Every unordered pair is compared once. Each solution ends up in exactly one
    front and gets ``rank`` set to that front's index. Within a front, solutions
    keep their relative order from the input population.
    """

    def __init__(self, dominance: SolutionDominance) -> None:
        self.dominance = dominance

    def execute(self, population: Population) -> list[Population]:
        n = len(population)
        if n == 0:
            return []

        dominated: list[list[int]] = [[] for _ in range(n)]
        dominated_count = [0] * n
        for i in range(n):
            for j in range(i + 1, n):
                cmp = self.dominance.compare(population[i], population[j])
                if cmp < 0:
                    dominated[i].append(j)
                    dominated_count[j] += 1
                elif cmp > 0:
                    dominated[j].append(i)
                    dominated_count[i] += 1

        fronts: list[Population] = []
        current = [i for i in range(n) if dominated_count[i] == 0]
        level = 0
        while current:
            front = Population(population[i] for i in current)
            for solution in front:
                solution.rank = level
            fronts.append(front)

            following: list[int] = []
            for i in current:
                for j in dominated[i]:
                    dominated_count[j] -= 1
                    if dominated_count[j] == 0:
                        following.append(j)
            current = sorted(following)
            level += 1

        return fronts


__all__ = ["FrontsExtractor"]
