"""
Problem registry: named factories for the bundled integer problems.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from moge.foundation.exceptions import InvalidProblemError, ProblemDimensionError

from .base import Problem
from .integer import IntegerJobAssignmentProblem, IntegerResourceAllocationProblem

ProblemFactory = Callable[[int | None], Problem]


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a bundled problem."""

    key: str
    label: str
    default_n_var: int
    factory: ProblemFactory
    description: str = ""

    def create(self, n_var: int | None = None) -> Problem:
        actual_n_var = self.default_n_var if n_var is None else int(n_var)
        if actual_n_var <= 0:
            raise ProblemDimensionError("n_var must be a positive integer.", n_var=actual_n_var)
        return self.factory(actual_n_var)


def _resource_allocation(n_var: int | None) -> Problem:
    return IntegerResourceAllocationProblem(n_var=n_var or 20)


def _job_assignment(n_var: int | None) -> Problem:
    return IntegerJobAssignmentProblem(n_positions=n_var or 30)


_PROBLEM_SPECS: dict[str, ProblemSpec] = {
    "resource_allocation": ProblemSpec(
        key="resource_allocation",
        label="Integer resource allocation",
        default_n_var=20,
        factory=_resource_allocation,
        description="Minimize cost while maximizing diminishing-returns utility.",
    ),
    "job_assignment": ProblemSpec(
        key="job_assignment",
        label="Integer job assignment",
        default_n_var=30,
        factory=_job_assignment,
        description="Minimize preference mismatch and the dominance of a single job type.",
    ),
}


def get_problem_specs() -> dict[str, ProblemSpec]:
    return dict(_PROBLEM_SPECS)


def available_problem_names() -> tuple[str, ...]:
    return tuple(_PROBLEM_SPECS.keys())


def make_problem(name: str, n_var: int | None = None) -> Problem:
    """Instantiate a registered problem by name (case-insensitive, '-' accepted for '_')."""
    key = name.strip().lower().replace("-", "_")
    spec = _PROBLEM_SPECS.get(key)
    if spec is None:
        raise InvalidProblemError(name, available=list(available_problem_names()))
    return spec.create(n_var)


__all__ = ["ProblemSpec", "ProblemFactory", "available_problem_names", "get_problem_specs", "make_problem"]
