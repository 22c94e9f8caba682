from __future__ import annotations

import numpy as np

from moge.foundation.solution import Solution

from .base import MAXIMIZE, MINIMIZE, Problem


class IntegerResourceAllocationProblem(Problem):
    """
    Allocate integer resources to tasks.
    Objective 1: minimize cost.
    Objective 2: maximize utility with diminishing returns.
    """

    def __init__(self, n_var: int = 20, max_per_task: int = 10, seed: int = 321) -> None:
        super().__init__(
            n_var=n_var,
            n_obj=2,
            xl=0,
            xu=max(1, int(max_per_task)),
            senses=(MINIMIZE, MAXIMIZE),
        )
        rng = np.random.default_rng(seed)
        self.task_cost = rng.uniform(0.5, 2.0, size=self.n_var)
        self.task_reward = rng.uniform(1.0, 3.0, size=self.n_var)

    def evaluate_solution(self, solution: Solution) -> np.ndarray:
        x = solution.variables
        cost = float(x @ self.task_cost)
        utility = float(np.sum(self.task_reward * np.sqrt(x)))
        return np.array([cost, utility])

    def describe(self) -> dict[str, object]:
        info = super().describe()
        info.update(
            {
                "avg_cost": float(self.task_cost.mean()),
                "avg_reward": float(self.task_reward.mean()),
                "max_per_task": int(self.xu[0]),
            }
        )
        return info


class IntegerJobAssignmentProblem(Problem):
    """
    Assign job types (integer labels) to positions.
    Objective 1: minimize mismatch cost to preferred types.
    Objective 2: minimize the share of the most common type (encourage spread).
    """

    def __init__(self, n_positions: int = 30, n_job_types: int = 5, seed: int = 99) -> None:
        if n_job_types <= 1:
            raise ValueError("n_job_types must be greater than 1.")
        super().__init__(n_var=n_positions, n_obj=2, xl=0, xu=int(n_job_types) - 1)
        self.n_job_types = int(n_job_types)

        rng = np.random.default_rng(seed)
        self.preferences = rng.integers(0, self.n_job_types, size=self.n_var, dtype=np.int64)
        self.mismatch_penalty = rng.uniform(0.5, 2.5, size=self.n_var)

    def evaluate_solution(self, solution: Solution) -> np.ndarray:
        x = solution.variables
        mismatch_cost = float((x != self.preferences).astype(float) @ self.mismatch_penalty)
        counts = np.bincount(x, minlength=self.n_job_types)
        max_share = counts.max() / float(self.n_var)
        return np.array([mismatch_cost, max_share])

    def describe(self) -> dict[str, object]:
        info = super().describe()
        info.update(
            {
                "n_job_types": self.n_job_types,
                "avg_mismatch_penalty": float(self.mismatch_penalty.mean()),
            }
        )
        return info


__all__ = [
    "IntegerResourceAllocationProblem",
    "IntegerJobAssignmentProblem",
]
