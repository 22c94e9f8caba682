from __future__ import annotations

import logging

from moge.engine.ranking import CrowdingDistance, FrontsExtractor, SolutionDominance, nsga2_sort_key
from moge.foundation.solution import Population


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def reduce_population(
    population: Population,
    max_size: int,
    dominance: SolutionDominance,
    n_obj: int,
) -> Population:
    """
    NSGA-II elitist reduction based on fronts + crowding.

    Whole fronts are admitted while they fit. The first front that does not fit is
    sorted by rank, then crowding distance (descending), then original position, and
    only its best members fill the remaining slots. No randomness is involved.
    """
    if max_size <= 0:
        raise ValueError("max_size must be a positive integer.")

    fronts = FrontsExtractor(dominance).execute(population)
    assigner = CrowdingDistance(n_obj)
    reduced = Population()
    for front in fronts:
        if len(reduced) >= max_size:
            break
        assigner.execute(front)
        if len(reduced) + len(front) <= max_size:
            reduced.extend(front)
            continue
        remaining = max_size - len(reduced)
        # sorted() is stable, so equal keys keep their front order
        reduced.extend(sorted(front, key=nsga2_sort_key)[:remaining])
        _logger().debug(
            "Truncated front %s: kept %d of %d solutions",
            front[0].rank,
            remaining,
            len(front),
        )
    return reduced


__all__ = ["reduce_population"]
