# platnav

This package handles navigation for agents in a side-scrolling, tile-based
platformer world. It builds a navigation mesh over a grid of tiles and works
out which standing spots can be linked by walking, falling or jumping. It then
searches that mesh with A* to produce a path. An agent in a small physics
world follows that path one segment at a time.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `platnav.vec`

- `Vec2` is an immutable 2D vector. It supports `+` and `-` with another
  vector, `*` and `/` by a number, unary `-`, unpacking as `x, y = v`,
  `length()` and `distance(other)`.
- `sign(n)` returns -1, 0 or 1.
- `WORLD_SCALE` is the number of pixels per world unit (32.0).

### `platnav.tilemap`

- `Tile` has two values, `EMPTY` and `WALL`.
- `TileCoord.from_vec(v)` truncates a world position toward zero to give a
  tile coordinate.
- `Tilemap(width, height)` is a grid that starts out all `Tile.EMPTY`. A size
  that is not positive raises `ValueError`.
  - Index it as `tilemap[x, y]`. A position outside the grid raises
    `IndexError`, and assigning anything other than a `Tile` raises
    `TypeError`.
  - `toggle_tile(x, y)` flips a cell between empty and wall.
  - `tile_index(x, y)` and `tile_coord(i)` convert between cell coordinates
    and flat row-major indices.
  - `tile_to_world(x, y)` gives the pixel corner of a cell, using
    `Tilemap.tile_size`, which is 32.
  - `is_solid(x, y)` reports whether a body is blocked at a cell. Walls are
    solid. Outside the grid, the left, right and bottom sides count as solid
    and the space above the top counts as open.

### `platnav.physics`

- `Body(position, half_width, half_height, velocity=..., density=1.0)` is an
  axis-aligned box that never rotates.
  - `mass` is its density times its area.
  - `apply_impulse(impulse)` changes its velocity by the impulse divided by
    its mass.
- `World(tilemap, gravity=Vec2(0.0, 10.0))` holds bodies.
  - `add_body(body)` adds a body to the world.
  - `step(dt)` advances the world by `dt` seconds in `SUB_STEPS` (16)
    sub-steps. On each sub-step it applies gravity, moves each body and
    stops it against solid cells.
  - A negative `dt` raises `ValueError`.

### `platnav.nav_mesh`

`NavMesh(tilemap)` places a `Node` at the centre of every tile that is not a
wall and has a wall directly beneath it. The bottom row of the grid gets no
nodes.

It links pairs of nodes with `Edge` objects. Each edge has a type, and the
first test that passes sets it:

- `EdgeType.WALK` joins neighbouring nodes on the same level.
- `EdgeType.FALL` joins nodes in adjacent columns at different heights, where
  the drop column is clear.
- `EdgeType.JUMP` joins platform ends within `max_jump_dist` (10.0), where
  neither arc hits a wall.

Each edge stores a launch velocity in each direction, `vel_ab` and `vel_ba`.
For jumps, `best_jump(a, b)` computes these velocities. It picks the slowest
sampled arc whose apex lies between the two points. If no sampled arc
qualifies, it returns an infinite vector.

Other members:

- `gravity` defaults to 10.0 and `max_jump_dist` to 10.0. The mesh reads both
  when it generates.
- `generate()` rebuilds the mesh. Call it after you change the tilemap.
- `closest(position)` returns the index of the nearest node and
  `get_closest(position)` returns the node itself. Both raise `ValueError` on
  an empty mesh.
- `valid()` reports whether the mesh has any nodes.
- `can_walk`, `can_fall`, `can_jump`, `has_connection`, `jump_velocity`,
  `jump_apex`, `jump_collides` and `projectile` expose the individual tests
  and the arc calculations.

### `platnav.pathfinder`

`Pathfinder(agent, nav_mesh)` plans routes for an agent.

`set_goal(p)` runs A* from the node nearest the agent to the node nearest
`p`. It returns a `collections.deque` of `PathSegment` values and also stores
it as `pathfinder.path`.

- Each segment holds a `start` point and the `velocity` the agent should take
  on when it reaches that point.
- Edges whose launch velocity exceeds the agent's `max_speed` horizontally or
  `jump_speed` vertically are skipped. `can_connect(edge, direction)` makes
  this check.
- If the goal cannot be reached, the path ends at the explored node closest
  to it.
- Edge costs come from `compute_cost(edge, direction)`, an estimate of travel
  time along the edge.
- `get_adjacent(node)` lists the nodes the agent can reach directly from a
  node.

### `platnav.agent`

`Agent(world, x, y)` adds a box body to the world. The box is 0.8 wide by 2.0
high.

- `position` and `velocity` are properties. Setting `velocity` applies the
  impulse needed to reach that velocity.
- `path` holds the current path.
- `update()` runs horizontally toward the next path point. On reaching it,
  `update()` drops the previous segment and takes on the velocity of the
  segment it has arrived at. At the final point it stops.
- `at(p)` and `at_x(p)` are the arrival tests:
  - Horizontally, the agent must be within 0.1 of the point.
  - Vertically, it must be within 0.75.
- `move_towards(point, speed)` sets the horizontal velocity toward a point.

## Example

```python
from platnav.agent import Agent
from platnav.nav_mesh import NavMesh
from platnav.pathfinder import Pathfinder
from platnav.physics import World
from platnav.tilemap import Tile, Tilemap
from platnav.vec import Vec2

tilemap = Tilemap(30, 30)
for x in range(30):
    tilemap[x, 29] = Tile.WALL          # a floor
tilemap.toggle_tile(12, 28)             # a step to climb

world = World(tilemap)
nav_mesh = NavMesh(tilemap)
agent = Agent(world, 5.5, 27.5)
pathfinder = Pathfinder(agent, nav_mesh)

if nav_mesh.valid():
    agent.path = pathfinder.set_goal(Vec2(20.0, 28.0))

for _ in range(600):
    agent.update()
    world.step(1 / 60)
```

Positions are in world units. One tile is one unit, and y grows downwards.

## What it does not do

This is a library only. It has no window, no drawing, no camera and no
keyboard or mouse input. It also provides no command to run. To show the
tilemap, mesh, paths or agent, or to let someone edit tiles and pick goals,
you need your own front end. `WORLD_SCALE` and `Tilemap.tile_size` give the
pixel scale for drawing.