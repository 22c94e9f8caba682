from __future__ import annotations

import numpy as np
import pytest

from moge.foundation.exceptions import BoundsError, EvaluationError, InvalidProblemError, ProblemDimensionError
from moge.foundation.problem import (
    IntegerJobAssignmentProblem,
    IntegerResourceAllocationProblem,
    Problem,
    available_problem_names,
    make_problem,
)
from moge.foundation.solution import Population, Solution


class _PlainProblem(Problem):
    def evaluate_solution(self, solution: Solution):
        if solution.variable(0) == 3:
            raise ZeroDivisionError("boom")
        return [float(solution.variables.sum())] * self.n_obj


class _ShortObjectivesProblem(Problem):
    def evaluate_solution(self, solution: Solution):
        return [1.0]


def test_dimensions_must_be_positive():
    with pytest.raises(ProblemDimensionError):
        _PlainProblem(n_var=0, n_obj=2)
    with pytest.raises(ProblemDimensionError):
        _PlainProblem(n_var=2, n_obj=0)


def test_bounds_validation():
    with pytest.raises(BoundsError):
        _PlainProblem(n_var=2, n_obj=1, xl=5, xu=1)
    with pytest.raises(BoundsError):
        _PlainProblem(n_var=2, n_obj=1, xl=[0, 0, 0], xu=[1, 1, 1])
    with pytest.raises(BoundsError):
        _PlainProblem(n_var=2, n_obj=1, xl=0.5, xu=3)


def test_scalar_bounds_are_broadcast(identity_problem):
    assert identity_problem.xl.tolist() == [0, 0]
    assert identity_problem.xu.tolist() == [10, 10]
    assert identity_problem.number_of_variables() == 2
    assert identity_problem.number_of_objectives() == 2


def test_senses_default_and_validation():
    assert _PlainProblem(n_var=2, n_obj=2).senses == ("min", "min")
    assert _PlainProblem(n_var=2, n_obj=2, senses=["MIN", "max"]).senses == ("min", "max")
    with pytest.raises(ProblemDimensionError):
        _PlainProblem(n_var=2, n_obj=2, senses=["min"])
    with pytest.raises(ValueError):
        _PlainProblem(n_var=2, n_obj=1, senses=["largest"])


def test_new_random_solutions_are_unevaluated_and_in_bounds():
    problem = _PlainProblem(n_var=5, n_obj=1, xl=[0, 1, 2, 3, 4], xu=[1, 2, 3, 4, 5])
    pop = problem.new_random_solutions(50, np.random.default_rng(0))

    assert isinstance(pop, Population)
    assert len(pop) == 50
    assert not any(s.is_evaluated for s in pop)
    X = pop.variable_matrix()
    assert np.all(X >= problem.xl)
    assert np.all(X <= problem.xu)
    # upper bound is inclusive
    assert np.any(X == problem.xu)


def test_new_random_solutions_requires_positive_size(identity_problem):
    with pytest.raises(ValueError):
        identity_problem.new_random_solutions(0)


def test_evaluate_writes_objectives_in_place(identity_problem):
    pop = Population([Solution([1, 4]), Solution([3, 2])])
    identity_problem.evaluate(pop)
    assert pop.objective_matrix().tolist() == [[1.0, 4.0], [3.0, 2.0]]


def test_out_of_bounds_rejects_whole_batch(identity_problem):
    pop = Population([Solution([1, 4]), Solution([3, 11])])

    with pytest.raises(EvaluationError) as excinfo:
        identity_problem.evaluate(pop)

    assert "Variable 1" in str(excinfo.value)
    assert excinfo.value.details["solution"] is pop[1]
    assert identity_problem.calls == 0
    assert not pop[0].is_evaluated


def test_wrong_genome_length_is_rejected(identity_problem):
    with pytest.raises(EvaluationError):
        identity_problem.evaluate(Population([Solution([1, 2, 3])]))


def test_failures_inside_evaluate_solution_are_wrapped():
    problem = _PlainProblem(n_var=2, n_obj=1, xl=0, xu=5)
    pop = Population([Solution([1, 1]), Solution([3, 1])])

    with pytest.raises(EvaluationError) as excinfo:
        problem.evaluate(pop)

    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
    assert not pop[0].is_evaluated


def test_objective_count_is_checked():
    problem = _ShortObjectivesProblem(n_var=2, n_obj=2, xl=0, xu=5)
    with pytest.raises(EvaluationError):
        problem.evaluate(Population([Solution([1, 1])]))


def test_resource_allocation_objectives():
    problem = IntegerResourceAllocationProblem(n_var=4, max_per_task=3)
    zero = Solution(np.zeros(4, dtype=int))
    full = Solution(np.full(4, 3))
    problem.evaluate(Population([zero, full]))

    assert problem.senses == ("min", "max")
    assert zero.objectives.tolist() == [0.0, 0.0]
    assert full.objective(0) == pytest.approx(3 * problem.task_cost.sum())
    assert full.objective(1) == pytest.approx(np.sqrt(3) * problem.task_reward.sum())


def test_job_assignment_objectives():
    problem = IntegerJobAssignmentProblem(n_positions=6, n_job_types=3)
    preferred = Solution(problem.preferences.copy())
    problem.evaluate(Population([preferred]))

    assert preferred.objective(0) == 0.0
    assert 0.0 < preferred.objective(1) <= 1.0
    with pytest.raises(ValueError):
        IntegerJobAssignmentProblem(n_job_types=1)


def test_registry_round_trip():
    names = available_problem_names()
    assert "resource_allocation" in names
    assert "job_assignment" in names

    problem = make_problem("Resource-Allocation", n_var=7)
    assert isinstance(problem, IntegerResourceAllocationProblem)
    assert problem.n_var == 7


def test_registry_unknown_problem():
    with pytest.raises(InvalidProblemError) as excinfo:
        make_problem("zdt1")
    assert "job_assignment" in str(excinfo.value)


@pytest.mark.parametrize("n_var", [0, -4])
def test_registry_rejects_non_positive_n_var(n_var):
    with pytest.raises(ProblemDimensionError) as excinfo:
        make_problem("job_assignment", n_var=n_var)
    assert excinfo.value.details["n_var"] == n_var
