"""
Object model for candidate solutions.

A Solution carries an integer genome, an objective vector that is only present
after evaluation, and the two per-generation ranking attributes (front rank and
crowding distance). A Population is an insertion-ordered list of Solutions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Sequence

import numpy as np

from moge.foundation.exceptions import ContractViolationError

if TYPE_CHECKING:
    from moge.engine.ranking.dominance import SolutionDominance


@dataclass(eq=False)
class Solution:
    """
    Candidate solution with an integer genome.

    Equality and hashing are identity based: two solutions with identical
    genomes are still distinct members of a population.
    """

    variables: np.ndarray
    objectives: np.ndarray | None = None
    rank: int | None = None
    crowding_distance: float = 0.0
    properties: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.variables = np.array(self.variables, dtype=np.int64)
        if self.variables.ndim != 1:
            raise ValueError("variables must be a 1D integer vector.")
        if self.objectives is not None:
            self.set_objectives(self.objectives)

    @property
    def n_var(self) -> int:
        return int(self.variables.shape[0])

    @property
    def n_obj(self) -> int:
        return 0 if self.objectives is None else int(self.objectives.shape[0])

    @property
    def is_evaluated(self) -> bool:
        return self.objectives is not None

    def variable(self, index: int) -> int:
        return int(self.variables[index])

    def objective(self, index: int) -> float:
        if self.objectives is None:
            raise ContractViolationError("Objective requested from an unevaluated solution.")
        return float(self.objectives[index])

    def set_objectives(self, values: Sequence[float] | np.ndarray) -> None:
        objectives = np.array(values, dtype=float)
        if objectives.ndim != 1:
            raise ValueError("objectives must be a 1D vector.")
        self.objectives = objectives

    def invalidate(self) -> None:
        """Drop objective values and ranking data after the genome changed."""
        self.objectives = None
        self.rank = None
        self.crowding_distance = 0.0

    def copy(self) -> "Solution":
        """Independent clone; ranking attributes are not carried over."""
        return Solution(
            variables=self.variables.copy(),
            objectives=None if self.objectives is None else self.objectives.copy(),
            properties=dict(self.properties),
        )

    def __repr__(self) -> str:
        objs = "unevaluated" if self.objectives is None else np.array2string(self.objectives, precision=4)
        return f"Solution(n_var={self.n_var}, objectives={objs}, rank={self.rank}, crowding={self.crowding_distance:.4g})"


class Population(list):
    """Insertion-ordered collection of solutions."""

    def __init__(self, solutions: Iterable[Solution] = ()) -> None:
        super().__init__(solutions)

    def __getitem__(self, item):
        result = super().__getitem__(item)
        if isinstance(item, slice):
            return Population(result)
        return result

    def is_evaluated(self) -> bool:
        return all(solution.is_evaluated for solution in self)

    def objective_matrix(self) -> np.ndarray:
        """Return the (N, M) objective matrix; every member must be evaluated."""
        if not self:
            return np.empty((0, 0), dtype=float)
        rows = []
        for idx, solution in enumerate(self):
            if solution.objectives is None:
                raise ContractViolationError(f"Solution at position {idx} has not been evaluated.")
            rows.append(solution.objectives)
        try:
            return np.vstack(rows)
        except ValueError as exc:
            raise ContractViolationError("Objective vectors have inconsistent lengths.") from exc

    def variable_matrix(self) -> np.ndarray:
        if not self:
            return np.empty((0, 0), dtype=np.int64)
        return np.vstack([solution.variables for solution in self])

    def reduce_to_non_dominated(self, dominance: "SolutionDominance") -> "Population":
        """Return the members not dominated by any other member, in their current order."""
        kept = Population()
        for candidate in self:
            if not any(other is not candidate and dominance.dominates(other, candidate) for other in self):
                kept.append(candidate)
        return kept

    def __repr__(self) -> str:
        return f"Population(size={len(self)})"


__all__ = ["Solution", "Population"]
