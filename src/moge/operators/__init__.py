from .crossover import SinglePointCrossover
from .mutation import CreepMutation, IntegerFlipMutation
from .protocols import CrossoverOperator, MutationOperator, SelectionOperator
from .registry import make_crossover, make_mutation, make_selection
from .selection import BinaryTournamentSelection, RandomSelection

__all__ = [
    "SelectionOperator",
    "CrossoverOperator",
    "MutationOperator",
    "BinaryTournamentSelection",
    "RandomSelection",
    "SinglePointCrossover",
    "IntegerFlipMutation",
    "CreepMutation",
    "make_selection",
    "make_crossover",
    "make_mutation",
]
