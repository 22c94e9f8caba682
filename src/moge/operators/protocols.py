from __future__ import annotations

from typing import Literal, Protocol, TypeAlias, runtime_checkable

from moge.foundation.solution import Population, Solution


@runtime_checkable
class SelectionOperator(Protocol):
    """
    Pick one parent from the current population.

    Must tolerate repeated calls against an unmodified population and may return
    the same solution more than once.
    """

    def __call__(self, population: Population) -> Solution: ...


@runtime_checkable
class CrossoverOperator(Protocol):
    """
    Combine two parents into one or more offspring.

    Implementations must not modify the parents; offspring are new Solution objects.
    """

    def __call__(self, parent1: Solution, parent2: Solution) -> Population: ...


@runtime_checkable
class MutationOperator(Protocol):
    """Mutate a solution in place and return it."""

    def __call__(self, solution: Solution) -> Solution: ...


SelectionName: TypeAlias = Literal["tournament", "binary_tournament", "random"]
CrossoverName: TypeAlias = Literal["single_point", "one_point", "spx"]
MutationName: TypeAlias = Literal["flip", "int_flip", "random_reset", "creep"]


__all__ = [
    "SelectionOperator",
    "CrossoverOperator",
    "MutationOperator",
    "SelectionName",
    "CrossoverName",
    "MutationName",
]
