from __future__ import annotations

import math

from moge.foundation.solution import Solution


def nsga2_sort_key(solution: Solution) -> tuple[float, float]:
    """Ascending sort key: lower rank first, then higher crowding distance. Unranked sorts last."""
    rank = math.inf if solution.rank is None else solution.rank
    return rank, -solution.crowding_distance


class NSGAIIComparator:
    """
    Crowded-comparison operator.
    compare(a, b) returns <0 if a is better than b, >0 if b is better, 0 if tie.
    """

    def compare(self, a: Solution, b: Solution) -> int:
        key_a = nsga2_sort_key(a)
        key_b = nsga2_sort_key(b)
        if key_a < key_b:
            return -1
        if key_b < key_a:
            return 1
        return 0

    __call__ = compare


__all__ = ["NSGAIIComparator", "nsga2_sort_key"]
