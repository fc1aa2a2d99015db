"""Cost, feasibility and random construction of landing schedules."""

from __future__ import annotations

import random
from os import PathLike
from pathlib import Path
from typing import Sequence

from alpsolver.instance import Aircraft


def cost(solution: Sequence[int], aircraft: Sequence[Aircraft]) -> float:
    """Total penalty for landing each aircraft away from its target time."""
    total = 0.0
    for time, plane in zip(solution, aircraft, strict=True):
        if time < plane.target:
            total += (plane.target - time) * plane.early_penalty
        elif time > plane.target:
            total += (time - plane.target) * plane.late_penalty
    return total


def is_feasible(solution: Sequence[int], aircraft: Sequence[Aircraft]) -> bool:
    """Whether every aircraft lands in its window with the required separations."""
    if len(solution) != len(aircraft):
        raise ValueError("solution and aircraft lists differ in length")
    for time, plane in zip(solution, aircraft):
        if not plane.earliest <= time <= plane.latest:
            return False
    order = sorted(range(len(solution)), key=lambda index: solution[index])
    for first, second in zip(order, order[1:]):
        if solution[second] - solution[first] < aircraft[first].separations[second]:
            return False
    return True


def random_solution(
    aircraft: Sequence[Aircraft], rng: random.Random | None = None
) -> list[int]:
    """Draw landing times uniformly in each window until the schedule is feasible."""
    rng = rng if rng is not None else random.Random()
    for number, plane in enumerate(aircraft, start=1):
        if plane.earliest > plane.latest:
            raise ValueError(
                f"earliest time cannot exceed latest time for aircraft {number}"
            )
    while True:
        solution = [rng.randint(plane.earliest, plane.latest) for plane in aircraft]
        if is_feasible(solution, aircraft):
            return solution


def format_solution(solution: Sequence[int]) -> str:
    """Render a schedule as one line per aircraft."""
    return "".join(
        f"hora de aterrizaje avión n{number}: {time}\n"
        for number, time in enumerate(solution, start=1)
    )


def save_solution(path: str | PathLike[str], solution: Sequence[int]) -> None:
    """Write a schedule to ``path`` in the format of :func:`format_solution`."""
    Path(path).write_text(format_solution(solution), encoding="utf-8")