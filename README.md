# alpsolver

alpsolver finds landing times for a set of aircraft. Each aircraft must land inside its own time window. Aircraft that land one after another must be separated by at least the required gap. The goal is to keep the total penalty for landing early or late as small as possible.

The search is best-improvement hill climbing with random restarts. Each climb starts from a random feasible schedule. At each step it tries moving one aircraft's landing time one unit earlier or later. It then moves to the cheapest feasible neighbour that strictly lowers the cost. A climb stops when no neighbour lowers the cost or when the iteration limit is reached. The cheapest schedule over all restarts is kept.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
alpsolver INSTANCE_FILE
```

The instance is solved three times, with 10, 50 and 100 restarts. Each climb makes at most 100 moves. For each run the command prints the objective value and the CPU time taken. The landing times are written to `sol_10.txt`, `sol_50.txt` and `sol_100.txt` in the current directory. Each file has one line per aircraft, for example:

```
hora de aterrizaje avión n1: 98
```

If no file is given, or the instance cannot be read, the command prints a message to standard error and exits with status 1. The random generator is not seeded from the command line, so results vary from run to run.

## Instance format

The file holds whitespace-separated numbers:

1. The number of aircraft `n`, then the freeze time. The freeze time is read but not used.
2. For each aircraft, in order:
   - appearance time
   - earliest landing time
   - target landing time
   - latest landing time
   - penalty per unit of time landing early
   - penalty per unit of time landing late
   - `n` separation times, one to every aircraft, itself included

## Library use

```python
import random

from alpsolver.instance import load_instance
from alpsolver.evaluation import cost, is_feasible, save_solution
from alpsolver.hill_climbing import hill_climbing

aircraft = load_instance("airland1.txt")
best = hill_climbing(aircraft, max_iter=100, restarts=10, rng=random.Random(1))
print(cost(best, aircraft), is_feasible(best, aircraft))
save_solution("schedule.txt", best)
```

- `alpsolver.instance`
  - `Aircraft` is a frozen dataclass. Its fields are `id`, `appearance`, `earliest`, `target`, `latest`, `early_penalty`, `late_penalty` and `separations`.
  - `parse_instance(text)` reads an instance from a string.
  - `load_instance(path)` reads an instance from a file.
  - Both raise `InstanceError`, a subclass of `ValueError`, when the file cannot be opened or the data is malformed.
- `alpsolver.evaluation`
  - `cost(solution, aircraft)` gives the total early and late penalty.
  - `is_feasible(solution, aircraft)` checks the landing windows and the separation between aircraft that land consecutively.
  - `random_solution(aircraft, rng=None)` draws times uniformly in each window until the schedule is feasible. It raises `ValueError` if any aircraft's earliest time is after its latest time.
  - `format_solution(solution)` renders a schedule as text.
  - `save_solution(path, solution)` writes that text to a file.
- `alpsolver.hill_climbing`
  - `neighbours(solution, aircraft)` lists the feasible one-unit moves.
  - `hill_climbing(aircraft, max_iter, restarts, rng=None)` runs the search. It returns an empty list when `restarts` is 0.

`random_solution`, and so `hill_climbing`, keeps drawing until it finds a feasible schedule. It does not return for an instance that has no feasible schedule.