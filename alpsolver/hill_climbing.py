"""Best-improvement hill climbing with random restarts."""

from __future__ import annotations

import random
from typing import Sequence

from alpsolver.evaluation import cost, is_feasible, random_solution
from alpsolver.instance import Aircraft

_STEP = 1


def neighbours(solution: Sequence[int], aircraft: Sequence[Aircraft]) -> list[list[int]]:
    """Feasible schedules that move one landing time by one unit."""
    result = []
    for index, time in enumerate(solution):
        for shifted in (time + _STEP, time - _STEP):
            candidate = list(solution)
            candidate[index] = shifted
            if is_feasible(candidate, aircraft):
                result.append(candidate)
    return result


def hill_climbing(
    aircraft: Sequence[Aircraft],
    max_iter: int,
    restarts: int,
    rng: random.Random | None = None,
) -> list[int]:
    """Return the cheapest schedule found over ``restarts`` climbs.

    Each climb starts at a random feasible schedule and repeatedly moves
    to the cheapest strictly improving neighbour, for at most
    ``max_iter`` moves. An empty list is returned when ``restarts`` is 0.
    """
    rng = rng if rng is not None else random.Random()
    best: list[int] = []
    best_cost = 999999999.0

    for _ in range(restarts):
        current = random_solution(aircraft, rng)
        current_cost = cost(current, aircraft)
        if current_cost < best_cost or not best:
            best, best_cost = current, current_cost

        for _ in range(max_iter):
            step, step_cost = None, current_cost
            for candidate in neighbours(current, aircraft):
                candidate_cost = cost(candidate, aircraft)
                if candidate_cost < step_cost:
                    step, step_cost = candidate, candidate_cost
            if step is None:
                break
            current, current_cost = step, step_cost

        if current_cost < best_cost:
            best, best_cost = current, current_cost
    return best