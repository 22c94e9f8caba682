import numpy as np
import pytest

from moge.foundation.exceptions import InvalidOperatorError
from moge.foundation.solution import Solution
from moge.operators import CreepMutation, IntegerFlipMutation, make_mutation


@pytest.fixture
def problem(identity_problem):
    return type(identity_problem)(n_var=8, xl=2, xu=5)


def _evaluated(genome):
    return Solution(genome, objectives=[0.0] * len(genome))


def test_flip_mutates_in_place_within_bounds(problem):
    mutation = IntegerFlipMutation(problem, probability=1.0, rng=np.random.default_rng(0))
    solution = _evaluated([2] * 8)
    genome = solution.variables

    result = mutation(solution)

    assert result is solution
    assert solution.variables is genome
    assert np.all((genome >= 2) & (genome <= 5))
    assert not solution.is_evaluated


def test_flip_reaches_every_value_in_bounds(problem):
    mutation = IntegerFlipMutation(problem, probability=1.0, rng=np.random.default_rng(1))
    seen = set()
    for _ in range(20):
        seen.update(mutation(Solution([3] * 8)).variables.tolist())
    assert seen == {2, 3, 4, 5}


def test_zero_probability_keeps_evaluation(problem):
    solution = _evaluated([4] * 8)
    IntegerFlipMutation(problem, probability=0.0)(solution)
    CreepMutation(problem, probability=0.0)(solution)
    assert solution.variables.tolist() == [4] * 8
    assert solution.is_evaluated


def test_creep_moves_by_one_step_and_clips(problem):
    mutation = CreepMutation(problem, probability=1.0, rng=np.random.default_rng(2))
    for _ in range(20):
        before = np.array([2, 5, 3, 4, 2, 5, 3, 4])
        after = mutation(Solution(before)).variables
        assert np.all(np.abs(after - before) <= 1)
        assert np.all((after >= 2) & (after <= 5))


def test_creep_invalidates(problem):
    solution = _evaluated([3] * 8)
    solution.rank = 0
    CreepMutation(problem, probability=1.0, step=1, rng=np.random.default_rng(3))(solution)
    assert not solution.is_evaluated
    assert solution.rank is None


@pytest.mark.parametrize("probability", [-0.1, 1.1])
def test_probability_is_validated(problem, probability):
    with pytest.raises(ValueError):
        IntegerFlipMutation(problem, probability)
    with pytest.raises(ValueError):
        CreepMutation(problem, probability)


def test_creep_step_must_be_positive(problem):
    with pytest.raises(ValueError):
        CreepMutation(problem, 0.5, step=0)


@pytest.mark.parametrize(
    ("name", "cls"),
    [("int_flip", IntegerFlipMutation), ("flip", IntegerFlipMutation), ("random-reset", IntegerFlipMutation), ("creep", CreepMutation)],
)
def test_registry(problem, name, cls):
    op = make_mutation(name, problem, 0.25)
    assert isinstance(op, cls)
    assert op.probability == pytest.approx(0.25)


def test_registry_unknown_name(problem):
    with pytest.raises(InvalidOperatorError):
        make_mutation("polynomial", problem, 0.1)
