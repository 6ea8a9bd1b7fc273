# genart

A collection of small generative-art algorithms with no third-party
dependencies. Each module computes geometry (points, segments, polygons,
circles) or simple simulation state that you can pass to the drawing library
of your choice.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `genart.vec3d` | Immutable `Vec3d` with `+`, `-`, `*` (scalar, or dot product of two vectors), `/`, `cross`, `normalized`, `clamp` and more; `lerp`, `eucl` |
| `genart.rotation` | `rotate_x`, `rotate_y`, `rotate_z` and `rotate` about a pivot point, angles in degrees |
| `genart.camera` | `perspective` and `look_at` matrices; `Camera` whose `projection` maps a world point to homogeneous clip coordinates, with `window_w` and `window_h` properties |
| `genart.chaikin` | Chaikin corner cutting: `chaikin_cut`, `chaikin`, `chaikin_open`, `chaikin_close` |
| `genart.mathutil` | `linspace`, `map_range` |
| `genart.clipping` | `OutCode`, `encode_endpoint`, Cohen–Sutherland `clip_line`, `hatch_square`, `quad_fill` |
| `genart.poisson` | Incremental `PoissonDisk` sampler with `Cell` states, and `dot_size` for stippling by brightness |
| `genart.collatz` | `collatz` sequence generator and `collatz_path` segments |
| `genart.tictactoe` | `Field`, `Player`, `Eval`, `BoardState`, `Rect`, `Board`, `Game`, `GameMode`, `minimax`, `check_winner` |
| `genart.packing` | `Circle` and `CirclePacker` random packing inside a disc of radius 300, optionally checking only the nearest circle (`nearest_only`) |
| `genart.watercolor` | `rpoly`, `deform`, `create_base_poly`, `polystack` |
| `genart.population` | `Cell` and a bouncing, replicating `Population` |
| `genart.patterns` | `neighbour_links` (returns `Link` tuples), `diagonal_pattern`, `square_grid`, `periodic_dots` (returns `Dot`s) |
| `genart.lifecycle` | `Message` states and `next_message` |
| `genart.pendulum` | Chained `Pendulum` tracing coloured paths, and `rotate` in 2D |
| `genart.neutrons` | `vel_dist`, `gen_dist`, `free_path_positions` and a command-line entry point |

Functions and classes that use randomness accept an optional
`random.Random` instance (`rng`), so results can be reproduced with a seed.

## Examples

Smooth an open polyline:

```python
from genart.chaikin import chaikin_open

points = [(-150.0, -150.0), (-50.0, 50.0), (0.0, 0.0), (150.0, 150.0)]
smooth = chaikin_open(points, 0.25, 3)
```

Clip a segment to a rectangle:

```python
from genart.clipping import clip_line

segment = clip_line(-10.0, 5.0, 20.0, 5.0, 0.0, 0.0, 10.0, 10.0)
# ((0.0, 5.0), (10.0, 5.0)), or None if the segment misses the window
```

Poisson-disk sampling with a seeded generator:

```python
import random
from genart.poisson import PoissonDisk

disk = PoissonDisk(200, 200, 10, 30, random.Random(1))
while disk.tick():
    pass
print(disk.num_points())
```

Let the computer pick a tic-tac-toe move:

```python
from genart.tictactoe import Board, Rect

board = Board(Rect.from_w_h(600.0, 600.0))
board.register_click(-250.0, 250.0)   # human plays the top-left cell
board.computer_move()
print(board.cells, board.state)
```

## Command line

Print a sample of the neutron free-path simulation:

```
genart-neutrons
genart-neutrons --seed 42 -n 10
```

`--seed` fixes the random generator; `-n` sets how many path positions are
printed (default 100).

## What it does not do

The package draws nothing and opens no windows. It returns coordinates,
segments, polygons, circles and game state; rendering them, handling mouse
and keyboard input, and showing the tic-tac-toe board or its text are left to
the caller. `Camera` always uses its fixed perspective projection;
`CamMode.ORTHOGRAPHIC` is defined but not applied.