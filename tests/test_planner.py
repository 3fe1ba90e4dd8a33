import pytest

from grover_match import ConfigurationError, grover_iterations_from_n, int_sqrt, optimal_iterations
from grover_match.planner import plan_iterations


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (15, 3), (16, 4), (17, 4), (99, 9)])
def test_int_sqrt_values(n, expected):
    assert int_sqrt(n) == expected


def test_int_sqrt_floor_property():
    for n in range(0, 5000):
        k = int_sqrt(n)
        assert k * k <= n < (k + 1) * (k + 1)


def test_int_sqrt_negative():
    with pytest.raises(ConfigurationError):
        int_sqrt(-1)


@pytest.mark.parametrize("n, expected", [(16, 3), (1, 0), (4, 1), (64, 6), (100, 7), (0, 0)])
def test_grover_iterations_from_n(n, expected):
    assert grover_iterations_from_n(n) == expected


@pytest.mark.parametrize("n, m, expected", [(16, 1, 3), (16, 4, 1), (128, 1, 8), (16, 0, 0)])
def test_optimal_iterations(n, m, expected):
    assert optimal_iterations(n, m) == expected


def test_plan_iterations_switches_formula():
    # 15 records: isqrt truncates to 3 -> 2 iterations, float sqrt gives 3
    assert plan_iterations(15) == 2
    assert plan_iterations(15, 1, precise=True) == 3
