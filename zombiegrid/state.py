"""Cell state and transition rules for the zombie outbreak automaton."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum

logger = logging.getLogger(__name__)

NO_DIRECTION = 8

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_DIRECTIONS = {
    (0, -1): 0,
    (1, -1): 1,
    (1, 0): 2,
    (1, 1): 3,
    (0, 1): 4,
    (-1, 1): 5,
    (-1, 0): 6,
    (-1, -1): 7,
    (0, 0): NO_DIRECTION,
}


class Status(Enum):
    EMPTY = 0
    ZOMBIE = 1
    HUMAN = 2


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _grow(population: int, rate: float) -> int:
    grown = int(population * rate)
    return max(_I32_MIN, min(_I32_MAX, grown))


def _as_i8(value: int) -> int:
    return (int(value) + 128) % 256 - 128


def delta_to_direction(dx: int, dy: int) -> int | None:
    """Map a neighbour offset to a direction 0-7 (8 for none), or None if not adjacent."""
    return _DIRECTIONS.get((dx, dy))


def _direction_between(dx: int, dy: int) -> int:
    direction = delta_to_direction(dx, dy)
    if direction is None:
        raise ValueError(f"offset ({dx}, {dy}) is not between neighbouring cells")
    return direction


@dataclass(frozen=True)
class ZombieState:
    """The contents of one grid cell."""

    xy: tuple[int, int] = (0, 0)
    altitude: int = 0
    temperature: int = 0
    status: Status = Status.EMPTY
    population: int = 0
    direction: int = 0
    smell_human: int = 0
    smell_zombie: int = 0

    def _offset_to(self, other: ZombieState) -> tuple[int, int]:
        return other.xy[0] - self.xy[0], other.xy[1] - self.xy[1]

    def next_state(self, neighbors: Iterable[ZombieState]) -> ZombieState:
        """Compute this cell's state for the next tick from its neighbours."""
        neighbors = list(neighbors)
        if not neighbors:
            raise ValueError("a cell needs at least one neighbour")

        incoming_humans = 0
        incoming_zombies = 0
        for neighbor in neighbors:
            toward_us = _direction_between(*neighbor._offset_to(self))
            if neighbor.direction == toward_us:
                if neighbor.status is Status.ZOMBIE:
                    incoming_zombies += neighbor.population
                elif neighbor.status is Status.HUMAN:
                    incoming_humans += neighbor.population

        stayed = self.direction == NO_DIRECTION
        total_humans = incoming_humans + (
            self.population if self.status is Status.HUMAN and stayed else 0
        )
        total_zombies = incoming_zombies + (
            self.population if self.status is Status.ZOMBIE and stayed else 0
        )

        status, population = self._fight(total_humans, total_zombies)

        if population == 0:
            status = Status.EMPTY
        if population < 0:
            logger.warning(
                "Cell's population is negative! Cell at %s: %s %d, neighbours: %r",
                self.xy,
                status.name,
                population,
                neighbors,
            )
        if status is Status.HUMAN:
            population = _grow(population, 1.01)

        count = len(neighbors)
        smell_human = _div(sum(n.smell_human for n in neighbors), count) + (
            self.population if self.status is Status.HUMAN else 0
        )
        smell_zombie = _div(sum(n.smell_zombie for n in neighbors), count) + (
            self.population if self.status is Status.ZOMBIE else 0
        )

        direction = NO_DIRECTION
        # Ties go to the last neighbour in iteration order.
        candidates = list(reversed(neighbors))
        if status is Status.ZOMBIE:
            preferred = max(
                candidates,
                key=lambda n: (n.smell_human, -n.temperature, -n.altitude),
            )
            direction = _direction_between(*self._offset_to(preferred))
        elif status is Status.HUMAN:
            preferred = max(
                candidates,
                key=lambda n: (-n.smell_zombie, n.temperature, n.altitude),
            )
            preferred_is_zombie = preferred.status is Status.ZOMBIE
            zombie_population = preferred.population if preferred_is_zombie else 0
            if _div(population, 3) > zombie_population or (
                not preferred_is_zombie and preferred.smell_zombie < smell_zombie
            ):
                direction = _direction_between(*self._offset_to(preferred))

        return replace(
            self,
            status=status,
            population=population,
            direction=direction,
            smell_human=smell_human,
            smell_zombie=smell_zombie,
        )

    def _fight(self, humans: int, zombies: int) -> tuple[Status, int]:
        if self.status is Status.HUMAN:
            # Holders' advantage: one human holds off three zombies.
            threshold = _div(zombies, 3)
            if humans > threshold:
                return Status.HUMAN, humans - threshold
            if humans < threshold:
                return Status.ZOMBIE, zombies - humans * 3 + _div(humans, 3)
            return Status.EMPTY, 0

        if humans > zombies:
            return Status.HUMAN, humans - zombies
        if humans < zombies:
            if self.status is Status.ZOMBIE:
                # A third of the defeated humans join the horde.
                return Status.ZOMBIE, zombies - humans + _div(humans, 3)
            return Status.ZOMBIE, zombies - humans
        return Status.EMPTY, 0


def state_from_values(values: Sequence[int]) -> ZombieState:
    """Build a state from x, y, altitude, temperature, status, population,
    direction, human smell and zombie smell, in that order."""
    if len(values) < 9:
        raise ValueError(f"expected 9 values, got {len(values)}")
    status = {1: Status.ZOMBIE, 2: Status.HUMAN}.get(values[4], Status.EMPTY)
    return ZombieState(
        xy=(values[0], values[1]),
        altitude=values[2],
        temperature=values[3],
        status=status,
        population=values[5],
        direction=_as_i8(values[6]),
        smell_human=values[7],
        smell_zombie=values[8],
    )