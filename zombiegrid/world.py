"""The simulation grid, its display rules and the windowed viewer."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from typing import NamedTuple

from zombiegrid.state import Status, ZombieState, state_from_values
from zombiegrid.terrain import TerrainGenerator

CELL_SIZE = 12.0
CELL_HALF_SIZE = CELL_SIZE / 2.0
CELL_MAX_POPULATION = 1000

TERRAIN_LEVELS = 5
TERRAIN_BASE_LEVEL = 100.0
TICK_SECONDS = 0.1

WINDOW_TITLE = "Zombie Test"
WINDOW_SIZE = (1900, 1100)
BACKGROUND = (43, 44, 47)
HUMAN_COLOR = (65, 105, 225)
ZOMBIE_COLOR = (0, 128, 0)

# Moore neighbourhood offsets, in the order neighbours are visited.
_NEIGHBOR_OFFSETS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

Vec3 = tuple[float, float, float]
_ZERO: Vec3 = (0.0, 0.0, 0.0)


class CellScales(NamedTuple):
    """Sizes of the human and zombie markers drawn inside a cell."""

    humans: Vec3
    zombies: Vec3


class World:
    """A rectangular grid of cells that all advance together each tick."""

    def __init__(
        self,
        width: int = 150,
        height: int = 75,
        seed: int = 42,
        rng: random.Random | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("the world needs at least one cell in each direction")
        self.width = width
        self.height = height
        self.seed = seed
        rng = rng if rng is not None else random.Random()
        terrain = TerrainGenerator(seed).generate(
            width, height, TERRAIN_LEVELS, TERRAIN_BASE_LEVEL
        )
        self.cells: list[list[ZombieState]] = [
            [_random_cell(x, y, terrain[y][x], rng) for x in range(width)]
            for y in range(height)
        ]

    def __iter__(self) -> Iterator[ZombieState]:
        for row in self.cells:
            yield from row

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> list[ZombieState]:
        """Return the states of the cells around (x, y) that lie inside the grid."""
        if not self._contains(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the world")
        return [
            self.cells[y + dy][x + dx]
            for dx, dy in _NEIGHBOR_OFFSETS
            if self._contains(x + dx, y + dy)
        ]

    def step(self) -> None:
        """Advance every cell by one tick, each from the previous generation."""
        self.cells = [
            [cell.next_state(self.neighbors(x, y)) for x, cell in enumerate(row)]
            for y, row in enumerate(self.cells)
        ]


def _random_cell(
    x: int, y: int, terrain_cell: Sequence[float], rng: random.Random
) -> ZombieState:
    roll = rng.randrange(256) % 4
    status = {1: Status.ZOMBIE.value, 2: Status.HUMAN.value}.get(roll, Status.EMPTY.value)
    if status == Status.HUMAN.value:
        population = rng.randrange(256) % 100 + 50
    elif status == Status.ZOMBIE.value:
        population = rng.randrange(256) % 10 + 1
    else:
        population = 0
    altitude, temperature = terrain_cell[0], terrain_cell[1]
    return state_from_values(
        [x, y, int(altitude), int(temperature), status, population, 0, 0, 0]
    )


def cell_view_scales(state: ZombieState) -> CellScales:
    """Return the marker sizes used to draw ``state``."""
    fraction = min(state.population / CELL_MAX_POPULATION, 1.0)
    size = fraction * CELL_HALF_SIZE / 2.0
    if state.status is Status.ZOMBIE:
        zombie_size = min(size * 25.0, CELL_HALF_SIZE)
        return CellScales(_ZERO, (zombie_size, zombie_size, 1.0))
    if state.status is Status.HUMAN:
        return CellScales((size, size, 1.0), _ZERO)
    return CellScales(_ZERO, _ZERO)


def smell_color(state: ZombieState) -> tuple[float, float, float, float]:
    """Return the RGBA colour, channels from 0 to 1, showing a cell's zombie smell."""
    return (1.0, 0.0, 0.0, state.smell_zombie / 1000.0)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zombiegrid", description="Watch a zombie outbreak spread across a map."
    )
    parser.add_argument("--width", type=int, default=150, help="cells across")
    parser.add_argument("--height", type=int, default=75, help="cells down")
    parser.add_argument("--seed", type=int, default=42, help="terrain seed")
    parser.add_argument(
        "--population-seed",
        type=int,
        default=None,
        help="seed for the initial population (random if omitted)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="stop after this many simulation ticks",
    )
    return parser.parse_args(argv)


def _draw(screen, pygame, world: World) -> None:
    screen.fill(BACKGROUND)
    centre_x = WINDOW_SIZE[0] / 2.0
    centre_y = WINDOW_SIZE[1] / 2.0
    origin_x = -(world.width * CELL_SIZE) / 2.0
    origin_y = -(world.height * CELL_SIZE) / 2.0

    overlay = pygame.Surface(WINDOW_SIZE, pygame.SRCALPHA)
    markers = []
    for cell in world:
        x, y = cell.xy
        sx = centre_x + origin_x + CELL_SIZE * x
        sy = centre_y - (origin_y + CELL_SIZE * y)

        r, g, b, a = smell_color(cell)
        alpha = max(0, min(255, round(a * 255)))
        rect = pygame.Rect(0, 0, int(CELL_SIZE), int(CELL_SIZE))
        rect.center = (round(sx), round(sy))
        overlay.fill((round(r * 255), round(g * 255), round(b * 255), alpha), rect)

        scales = cell_view_scales(cell)
        markers.append((sx, sy, scales.zombies, ZOMBIE_COLOR))
        markers.append((sx, sy, scales.humans, HUMAN_COLOR))

    screen.blit(overlay, (0, 0))
    # Zombies are drawn beneath humans.
    for sx, sy, (w, h, _), color in markers:
        if w <= 0 or h <= 0:
            continue
        rect = pygame.Rect(0, 0, max(1, round(w)), max(1, round(h)))
        rect.center = (round(sx), round(sy))
        pygame.draw.rect(screen, color, rect)
    pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the simulation until it is closed."""
    args = _parse_args(argv)
    rng = random.Random(args.population_seed)
    world = World(args.width, args.height, args.seed, rng)
    print(f"Map spawned with size: {world.width}x{world.height}")

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        elapsed = 0.0
        ticks = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            elapsed += clock.tick(60) / 1000.0
            while running and elapsed >= TICK_SECONDS:
                elapsed -= TICK_SECONDS
                world.step()
                ticks += 1
                if args.ticks is not None and ticks >= args.ticks:
                    running = False
            _draw(screen, pygame, world)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())