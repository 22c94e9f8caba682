from __future__ import annotations

import numpy as np
import pytest

from moge.engine.ranking import SolutionDominance
from moge.foundation.exceptions import ContractViolationError
from moge.foundation.solution import Population, Solution


def test_solution_starts_unevaluated():
    s = Solution([3, 1, 4])

    assert not s.is_evaluated
    assert s.n_var == 3
    assert s.n_obj == 0
    assert s.variables.dtype == np.int64
    with pytest.raises(ContractViolationError):
        s.objective(0)


def test_solution_copies_input_genome():
    genome = np.array([1, 2, 3])
    s = Solution(genome)
    genome[0] = 99
    assert s.variable(0) == 1


def test_solution_rejects_2d_genome():
    with pytest.raises(ValueError):
        Solution(np.zeros((2, 2), dtype=int))


def test_copy_is_independent_and_unranked():
    s = Solution([1, 2], objectives=[0.5, 1.5], properties={"phenotype": "x+1"})
    s.rank = 0
    s.crowding_distance = 2.0

    clone = s.copy()
    clone.variables[0] = 7

    assert s.variable(0) == 1
    assert clone.objective(1) == pytest.approx(1.5)
    assert clone.rank is None
    assert clone.crowding_distance == 0.0
    assert clone.properties == {"phenotype": "x+1"}
    assert clone is not s


def test_invalidate_drops_objectives_and_ranking():
    s = Solution([1], objectives=[1.0, 2.0])
    s.rank = 3
    s.crowding_distance = np.inf
    s.invalidate()
    assert not s.is_evaluated
    assert s.rank is None
    assert s.crowding_distance == 0.0


def test_identity_based_equality():
    a = Solution([1, 2], objectives=[1.0])
    b = Solution([1, 2], objectives=[1.0])
    assert a != b
    assert len({a, b}) == 2


def test_population_slicing_keeps_type():
    pop = Population(Solution([i]) for i in range(4))
    assert isinstance(pop[1:3], Population)
    assert len(pop[1:3]) == 2
    assert isinstance(pop[0], Solution)


def test_objective_matrix(make_population):
    pop = make_population((1.0, 2.0), (3.0, 4.0))
    assert np.array_equal(pop.objective_matrix(), np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert Population().objective_matrix().shape == (0, 0)


def test_objective_matrix_requires_evaluation():
    pop = Population([Solution([1], objectives=[1.0]), Solution([2])])
    assert not pop.is_evaluated()
    with pytest.raises(ContractViolationError):
        pop.objective_matrix()


def test_variable_matrix():
    pop = Population([Solution([1, 2]), Solution([3, 4])])
    assert pop.variable_matrix().tolist() == [[1, 2], [3, 4]]


def test_reduce_to_non_dominated_keeps_order_and_duplicates(make_population):
    pop = make_population((2.0, 2.0), (1.0, 3.0), (3.0, 3.0), (2.0, 2.0))

    front = pop.reduce_to_non_dominated(SolutionDominance())

    assert [tuple(s.objectives) for s in front] == [(2.0, 2.0), (1.0, 3.0), (2.0, 2.0)]
    assert len(pop) == 4
