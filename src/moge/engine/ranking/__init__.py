"""
Ranking primitives: dominance, non-dominated fronts and crowding distance.
"""

from .comparator import NSGAIIComparator, nsga2_sort_key
from .crowding import CrowdingDistance, crowding_distances
from .dominance import SolutionDominance
from .fronts import FrontsExtractor

__all__ = [
    "SolutionDominance",
    "FrontsExtractor",
    "CrowdingDistance",
    "crowding_distances",
    "NSGAIIComparator",
    "nsga2_sort_key",
]
