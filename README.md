# zombiegrid

A zombie outbreak played out as a cellular automaton. Each cell of a grid
sits on generated terrain, with an altitude and a temperature taken from
Perlin noise. A cell is empty or holds a population of humans or zombies.
On every tick, all cells advance together from the previous generation:
populations that moved in fight with the cell's holders, smells spread
from neighbours, and each population picks a direction to move in.

- Zombies head for the neighbour with the strongest smell of humans. On a
  tie they prefer colder, then lower ground.
- Humans pick the neighbour with the least smell of zombies (on a tie,
  warmer, then higher ground). They move there only if a third of their
  population is larger than the zombies in that cell, or if that cell holds
  no zombies and smells less of zombies than their own.
- Humans holding a cell can beat three times their number of zombies.
  Zombies that defeat humans in their own cell gain a third of them.
- Human populations grow by one percent per tick, rounded down.

## Installing

```
pip install .
```

This installs pygame, which is used to draw the simulation.

## Running

```
zombiegrid
```

This prints the size of the map and opens a window that shows the grid,
advancing the simulation ten times a second until the window is closed.
Blue squares are humans and green squares are zombies, drawn larger where
the population is larger. A red tint on a cell shows how strongly it smells
of zombies.

Options:

- `--width N`, `--height N`: size of the grid in cells (default 150 by 75).
- `--seed N`: seed for the terrain (default 42).
- `--population-seed N`: seed for the random initial populations; without
  it they differ on every run.
- `--ticks N`: close the window after this many simulation ticks.

Each cell starts empty, with zombies (1 to 10 of them) or with humans
(50 to 149 of them), chosen at random.

## Using it as a library

```python
import random

from zombiegrid.terrain import TerrainGenerator, render_map
from zombiegrid.world import World

terrain = TerrainGenerator(42).generate(60, 20, 5, 100.0)
print(render_map(terrain, 0))  # altitude as ASCII art

world = World(150, 75, 42, random.Random(1))
for _ in range(10):
    world.step()
```

- `zombiegrid.terrain`: `Perlin` noise, `TerrainGenerator`, which returns
  rows of `[altitude, temperature]` cells, and `render_map`, which returns
  one layer of a terrain as ASCII art.
- `zombiegrid.state`: `Status`, `ZombieState` and the rules for one cell.
  `ZombieState.next_state(neighbors)` returns the cell's state for the next
  tick. `delta_to_direction(dx, dy)` maps a neighbour offset to a direction
  from 0 (north) clockwise to 7 (north-west), 8 for no movement, or `None`
  if the cells are not adjacent. `state_from_values(values)` builds a state
  from nine integers.
- `zombiegrid.world`: `World`, the grid, with `step()` and
  `neighbors(x, y)`; `cell_view_scales` and `smell_color`, which give the
  marker sizes and tint used to draw a cell; and `main`, the command.

## What it does not do

The window only displays the simulation: there is no way to pause it, edit
cells or save and reload a world. The terrain itself is not drawn; it
affects only which way populations move.

## Tests

```
pip install .[test]
pytest
```