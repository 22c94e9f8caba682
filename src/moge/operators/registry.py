"""
Name-based factories for the bundled operators (used by configuration and CLI).
"""

from __future__ import annotations

from typing import Any

import numpy as np

from moge.foundation.exceptions import InvalidOperatorError
from moge.foundation.problem.base import Problem

from .crossover import SinglePointCrossover
from .mutation import CreepMutation, IntegerFlipMutation
from .protocols import CrossoverOperator, MutationOperator, SelectionOperator
from .selection import BinaryTournamentSelection, RandomSelection

_SELECTION_ALIASES = {
    "tournament": "binary_tournament",
    "binary_tournament": "binary_tournament",
    "random": "random",
}
_CROSSOVER_ALIASES = {
    "single_point": "single_point",
    "one_point": "single_point",
    "spx": "single_point",
}
_MUTATION_ALIASES = {
    "flip": "int_flip",
    "int_flip": "int_flip",
    "random_reset": "int_flip",
    "creep": "creep",
}


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def make_selection(name: str, rng: np.random.Generator | None = None, **params: Any) -> SelectionOperator:
    key = _SELECTION_ALIASES.get(_normalize(name))
    if key == "binary_tournament":
        return BinaryTournamentSelection(rng=rng, **params)
    if key == "random":
        return RandomSelection(rng=rng)
    raise InvalidOperatorError("selection", name, sorted(_SELECTION_ALIASES))


def make_crossover(
    name: str,
    problem: Problem,
    probability: float,
    rng: np.random.Generator | None = None,
    **params: Any,
) -> CrossoverOperator:
    key = _CROSSOVER_ALIASES.get(_normalize(name))
    if key == "single_point":
        return SinglePointCrossover(problem, probability=probability, rng=rng, **params)
    raise InvalidOperatorError("crossover", name, sorted(_CROSSOVER_ALIASES))


def make_mutation(
    name: str,
    problem: Problem,
    probability: float,
    rng: np.random.Generator | None = None,
    **params: Any,
) -> MutationOperator:
    key = _MUTATION_ALIASES.get(_normalize(name))
    if key == "int_flip":
        return IntegerFlipMutation(problem, probability, rng=rng)
    if key == "creep":
        return CreepMutation(problem, probability, rng=rng, **params)
    raise InvalidOperatorError("mutation", name, sorted(_MUTATION_ALIASES))


__all__ = ["make_selection", "make_crossover", "make_mutation"]
