"""
MOGE: multi-objective Grammatical Evolution over integer genomes.

Example:
    from moge import EngineConfig, GrammaticalEvolution, make_problem

    problem = make_problem("resource_allocation")
    engine = GrammaticalEvolution(problem, EngineConfig(population_size=40, max_generations=50, seed=1))
    engine.initialize()
    front = engine.execute()
"""

from .engine.algorithm import EngineState, GrammaticalEvolution, reduce_population
from .engine.config import EngineConfig, load_run_spec
from .engine.ranking import CrowdingDistance, FrontsExtractor, NSGAIIComparator, SolutionDominance
from .foundation.logging import configure_moge_logging
from .foundation.problem import Problem, available_problem_names, make_problem
from .foundation.solution import Population, Solution
from .hooks.progress import ProgressEvent

__version__ = "0.1.0"

__all__ = [
    "GrammaticalEvolution",
    "EngineState",
    "EngineConfig",
    "load_run_spec",
    "reduce_population",
    "SolutionDominance",
    "FrontsExtractor",
    "CrowdingDistance",
    "NSGAIIComparator",
    "Problem",
    "make_problem",
    "available_problem_names",
    "Population",
    "Solution",
    "ProgressEvent",
    "configure_moge_logging",
]
