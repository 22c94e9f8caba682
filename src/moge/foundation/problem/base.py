"""
Problem contract consumed by the generational engine.

Concrete problems only implement ``evaluate_solution``; bounds checking, batched
evaluation and random initialization live here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from moge.foundation.exceptions import BoundsError, EvaluationError, ProblemDimensionError
from moge.foundation.solution import Population, Solution

MINIMIZE = "min"
MAXIMIZE = "max"
_VALID_SENSES = (MINIMIZE, MAXIMIZE)


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _as_bounds(value: int | Sequence[int] | np.ndarray, n_var: int) -> np.ndarray:
    arr = np.asarray(value)
    if arr.ndim == 0:
        arr = np.full(n_var, arr)
    if np.issubdtype(arr.dtype, np.floating) and not np.all(np.equal(np.rint(arr), arr)):
        raise BoundsError("Integer bounds must hold whole numbers.")
    return arr.astype(np.int64)


def _validate_bounds(n_var: int, lower: np.ndarray, upper: np.ndarray) -> None:
    if lower.shape != upper.shape or lower.shape[0] != n_var:
        raise BoundsError("lower and upper bounds must be 1D arrays of length n_var.")
    if np.any(lower > upper):
        raise BoundsError("lower bounds must not exceed upper bounds.")


class Problem(ABC):
    """
    Integer-encoded multi-objective problem.

    Args:
        n_var: Genome length.
        n_obj: Number of objectives.
        xl: Inclusive lower bound (scalar or per-variable).
        xu: Inclusive upper bound (scalar or per-variable).
        senses: Per-objective "min" or "max"; defaults to minimizing everything.
    """

    encoding = "integer"

    def __init__(
        self,
        n_var: int,
        n_obj: int,
        xl: int | Sequence[int] | np.ndarray = 0,
        xu: int | Sequence[int] | np.ndarray = 255,
        senses: Sequence[str] | None = None,
    ) -> None:
        if n_var <= 0 or n_obj <= 0:
            raise ProblemDimensionError("n_var and n_obj must be positive.", n_var=n_var, n_obj=n_obj)
        self.n_var = int(n_var)
        self.n_obj = int(n_obj)
        self.xl = _as_bounds(xl, self.n_var)
        self.xu = _as_bounds(xu, self.n_var)
        _validate_bounds(self.n_var, self.xl, self.xu)
        if senses is None:
            senses = (MINIMIZE,) * self.n_obj
        senses = tuple(str(s).lower() for s in senses)
        if len(senses) != self.n_obj:
            raise ProblemDimensionError("senses must provide one entry per objective.", n_var=n_var, n_obj=n_obj)
        invalid = [s for s in senses if s not in _VALID_SENSES]
        if invalid:
            raise ValueError(f"Unknown objective sense(s) {invalid}; expected 'min' or 'max'.")
        self.senses: tuple[str, ...] = senses

    def number_of_variables(self) -> int:
        return self.n_var

    def number_of_objectives(self) -> int:
        return self.n_obj

    def new_random_solutions(self, size: int, rng: np.random.Generator | None = None) -> Population:
        """
        Generate ``size`` unevaluated solutions drawn uniformly within the inclusive bounds.
        """
        if size <= 0:
            raise ValueError("size must be a positive integer.")
        rng = rng or np.random.default_rng()
        X = rng.integers(self.xl, self.xu + 1, size=(size, self.n_var), dtype=np.int64)
        return Population(Solution(row) for row in X)

    def check_bounds(self, solution: Solution) -> None:
        if solution.n_var != self.n_var:
            raise EvaluationError(
                f"Solution has {solution.n_var} variables, expected {self.n_var}.",
                solution=solution,
            )
        outside = np.flatnonzero((solution.variables < self.xl) | (solution.variables > self.xu))
        if outside.size:
            idx = int(outside[0])
            raise EvaluationError(
                f"Variable {idx} = {solution.variable(idx)} is outside [{self.xl[idx]}, {self.xu[idx]}].",
                solution=solution,
            )

    def evaluate(self, population: Population) -> None:
        """
        Evaluate every solution of ``population`` in place.

        The batch is all-or-nothing: bounds are checked for the whole batch first and
        objective vectors are only written once every solution evaluated successfully.
        """
        for solution in population:
            self.check_bounds(solution)

        results: list[np.ndarray] = []
        for solution in population:
            try:
                values = np.asarray(self.evaluate_solution(solution), dtype=float).reshape(-1)
            except EvaluationError:
                raise
            except Exception as exc:
                raise EvaluationError(f"evaluate_solution() failed: {exc}", solution=solution) from exc
            if values.shape[0] != self.n_obj:
                raise EvaluationError(
                    f"evaluate_solution() returned {values.shape[0]} objectives, expected {self.n_obj}.",
                    solution=solution,
                )
            results.append(values)

        for solution, values in zip(population, results):
            solution.set_objectives(values)
        _logger().debug("Evaluated %d solutions", len(population))

    @abstractmethod
    def evaluate_solution(self, solution: Solution) -> Sequence[float] | np.ndarray:
        """Return the objective vector of ``solution``."""

    def describe(self) -> dict[str, object]:
        return {
            "name": type(self).__name__,
            "n_var": self.n_var,
            "n_obj": self.n_obj,
            "senses": list(self.senses),
        }


__all__ = ["Problem", "MINIMIZE", "MAXIMIZE"]
