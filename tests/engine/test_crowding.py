import numpy as np
import pytest

from moge.engine.ranking import CrowdingDistance, crowding_distances
from moge.foundation.exceptions import ContractViolationError


def test_four_point_front(make_population):
    front = make_population((1, 4), (2, 3), (3, 2), (4, 1))
    CrowdingDistance(2).execute(front)

    values = [s.crowding_distance for s in front]
    assert values[0] == np.inf
    assert values[3] == np.inf
    assert values[1] == pytest.approx(4 / 3)
    assert values[2] == pytest.approx(4 / 3)


@pytest.mark.parametrize("size", [1, 2])
def test_small_fronts_are_all_boundary(make_population, size):
    front = make_population(*[(i, -i) for i in range(size)])
    CrowdingDistance(2).execute(front)
    assert all(s.crowding_distance == np.inf for s in front)


def test_empty_front_is_a_no_op(make_population):
    CrowdingDistance(2).execute(make_population())


def test_zero_span_objective_contributes_nothing(make_population):
    front = make_population((1, 7), (2, 7), (3, 7), (4, 7))
    CrowdingDistance(2).execute(front)

    values = [s.crowding_distance for s in front]
    assert values[0] == np.inf
    assert values[3] == np.inf
    assert values[1:3] == pytest.approx([2 / 3, 2 / 3])


def test_values_are_overwritten(make_population):
    front = make_population((1, 4), (2, 3), (3, 2), (4, 1))
    for s in front:
        s.crowding_distance = 123.0
    CrowdingDistance(2).execute(front)
    assert front[1].crowding_distance == pytest.approx(4 / 3)

    CrowdingDistance(2).execute(front[1:3])
    assert front[1].crowding_distance == np.inf


def test_boundary_solutions_get_infinity_per_objective():
    rng = np.random.default_rng(4)
    F = rng.random((12, 3))
    d = crowding_distances(F)

    for m in range(3):
        assert d[np.argmin(F[:, m])] == np.inf
        assert d[np.argmax(F[:, m])] == np.inf
    assert np.all(d >= 0.0)


def test_objective_count_mismatch(make_population):
    front = make_population((1, 4), (2, 3), (3, 2))
    with pytest.raises(ContractViolationError):
        CrowdingDistance(3).execute(front)


def test_n_obj_must_be_positive():
    with pytest.raises(ValueError):
        CrowdingDistance(0)
