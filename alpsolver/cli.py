"""Command line entry point: solve an instance with several restart budgets."""

from __future__ import annotations

import random
import sys
import time
from typing import Sequence

from alpsolver.evaluation import cost, save_solution
from alpsolver.hill_climbing import hill_climbing
from alpsolver.instance import InstanceError, load_instance

MAX_ITER = 100
RESTART_BUDGETS = (10, 50, 100)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the instance named in ``argv`` and write one file per budget."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Escribe bien el input", file=sys.stderr)
        return 1

    try:
        aircraft = load_instance(args[0])
    except InstanceError as exc:
        print(exc, file=sys.stderr)
        return 1

    rng = random.Random()
    for restarts in RESTART_BUDGETS:
        started = time.process_time()
        solution = hill_climbing(aircraft, MAX_ITER, restarts, rng)
        elapsed = time.process_time() - started
        total = cost(solution, aircraft)
        save_solution(f"sol_{restarts}.txt", solution)
        print(
            f"valor objetivo {restarts} repes = {total:g}, "
            f"tiempo de ejecución = {elapsed:g}s"
        )

    print("Soluciones guardadas en archivos de salida.")
    return 0


if __name__ == "__main__":
    sys.exit(main())