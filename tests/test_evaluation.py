import random

import pytest

from alpsolver.evaluation import (
    cost,
    format_solution,
    is_feasible,
    random_solution,
    save_solution,
)
from alpsolver.instance import parse_instance

SAMPLE = """2 10
0 5 10 20 1.0 2.0
99999 3
0 5 15 25 1.5 2.5
3 99999
"""


@pytest.fixture
def planes():
    return parse_instance(SAMPLE)


def test_cost_zero_at_targets(planes):
    assert cost([10, 15], planes) == 0.0


def test_cost_early_uses_early_penalty(planes):
    assert cost([9, 15], planes) == planes[0].early_penalty


def test_cost_late_uses_late_penalty(planes):
    assert cost([10, 17], planes) == 2 * planes[1].late_penalty


def test_cost_length_mismatch_raises(planes):
    with pytest.raises(ValueError):
        cost([10], planes)


def test_feasible_at_targets(planes):
    assert is_feasible([10, 15], planes) is True


def test_infeasible_outside_window(planes):
    assert is_feasible([4, 15], planes) is False
    assert is_feasible([10, 26], planes) is False


def test_infeasible_separation(planes):
    assert is_feasible([10, 11], planes) is False


def test_feasible_in_reverse_order(planes):
    assert is_feasible([20, 15], planes) is True


def test_random_solution_is_feasible(planes):
    rng = random.Random(7)
    for _ in range(20):
        solution = random_solution(planes, rng)
        assert is_feasible(solution, planes)


def test_random_solution_is_reproducible(planes):
    first = random_solution(planes, random.Random(3))
    second = random_solution(planes, random.Random(3))
    assert len(first) == 2
    assert 5 <= first[0] <= 20
    assert 5 <= first[1] <= 25
    assert is_feasible(first, planes) is True
    assert first == second


def test_random_solution_fixed_window():
    planes = parse_instance("1 0\n0 7 7 7 1.0 1.0\n0")
    assert random_solution(planes, random.Random(1)) == [7]


def test_random_solution_bad_window_raises():
    planes = parse_instance("1 0\n0 9 7 5 1.0 1.0\n0")
    with pytest.raises(ValueError):
        random_solution(planes, random.Random(1))


def test_format_solution():
    assert format_solution([12, 30]) == (
        "hora de aterrizaje avión n1: 12\nhora de aterrizaje avión n2: 30\n"
    )


def test_save_solution_round_trip(tmp_path):
    path = tmp_path / "sol.txt"
    save_solution(path, [4, 5, 6])
    assert path.read_text(encoding="utf-8") == format_solution([4, 5, 6])