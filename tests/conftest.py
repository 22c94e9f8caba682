from __future__ import annotations

from typing import Sequence

import numpy as np
import pytest

from moge.foundation.problem.base import Problem
from moge.foundation.solution import Population, Solution


class IdentityProblem(Problem):
    """Objectives are the genome itself, so scenarios can be written as integer tuples."""

    def __init__(self, n_var: int = 2, xl: int = 0, xu: int = 10, senses: Sequence[str] | None = None) -> None:
        super().__init__(n_var=n_var, n_obj=n_var, xl=xl, xu=xu, senses=senses)
        self.calls = 0

    def evaluate_solution(self, solution: Solution) -> np.ndarray:
        self.calls += 1
        return solution.variables.astype(float)


@pytest.fixture
def identity_problem() -> IdentityProblem:
    return IdentityProblem()


@pytest.fixture
def make_population():
    """Build a population of evaluated solutions from objective tuples."""

    def _make(*objectives: Sequence[float]) -> Population:
        return Population(Solution(np.zeros(1, dtype=int), objectives=obj) for obj in objectives)

    return _make
