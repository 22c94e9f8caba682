from .base import MAXIMIZE, MINIMIZE, Problem
from .integer import IntegerJobAssignmentProblem, IntegerResourceAllocationProblem
from .registry import ProblemSpec, available_problem_names, get_problem_specs, make_problem

__all__ = [
    "Problem",
    "MINIMIZE",
    "MAXIMIZE",
    "IntegerResourceAllocationProblem",
    "IntegerJobAssignmentProblem",
    "ProblemSpec",
    "available_problem_names",
    "get_problem_specs",
    "make_problem",
]
