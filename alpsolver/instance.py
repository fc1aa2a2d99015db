"""Aircraft landing problem instances and their text format."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterator


class InstanceError(ValueError):
    """Raised when an instance cannot be read or is malformed."""


@dataclass(frozen=True)
class Aircraft:
    """One aircraft: its landing window, penalties and separation times.

    ``separations[j]`` is the minimum time that must pass after this
    aircraft lands before aircraft ``j`` may land.
    """

    id: int
    appearance: int
    earliest: int
    target: int
    latest: int
    early_penalty: float
    late_penalty: float
    separations: tuple[int, ...]


def _take(tokens: Iterator[str], kind: type, what: str):
    try:
        token = next(tokens)
    except StopIteration:
        raise InstanceError(f"unexpected end of instance while reading {what}") from None
    try:
        return kind(token)
    except ValueError:
        raise InstanceError(f"invalid value {token!r} for {what}") from None


def parse_instance(text: str) -> list[Aircraft]:
    """Parse an instance given as whitespace-separated numbers.

    The text starts with the number of aircraft and the freeze time,
    followed, for each aircraft, by its appearance, earliest, target and
    latest times, its early and late penalties, and one separation time
    per aircraft.
    """
    tokens = iter(text.split())
    count = _take(tokens, int, "number of aircraft")
    if count < 0:
        raise InstanceError(f"negative number of aircraft: {count}")
    _take(tokens, int, "freeze time")

    aircraft = []
    for number in range(1, count + 1):
        label = f"aircraft {number}"
        appearance = _take(tokens, int, f"appearance time of {label}")
        earliest = _take(tokens, int, f"earliest time of {label}")
        target = _take(tokens, int, f"target time of {label}")
        latest = _take(tokens, int, f"latest time of {label}")
        early_penalty = _take(tokens, float, f"early penalty of {label}")
        late_penalty = _take(tokens, float, f"late penalty of {label}")
        separations = tuple(
            _take(tokens, int, f"separation {other} of {label}")
            for other in range(1, count + 1)
        )
        aircraft.append(
            Aircraft(
                id=number,
                appearance=appearance,
                earliest=earliest,
                target=target,
                latest=latest,
                early_penalty=early_penalty,
                late_penalty=late_penalty,
                separations=separations,
            )
        )
    return aircraft


def load_instance(path: str | PathLike[str]) -> list[Aircraft]:
    """Read and parse the instance stored in ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise InstanceError(f"could not open instance file: {path}") from exc
    return parse_instance(text)