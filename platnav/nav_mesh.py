"""Navigation graph of standable tiles linked by walk, fall and jump edges."""

from __future__ import annotations

import enum
import itertools
import math
from dataclasses import dataclass, field

from .tilemap import Tile, TileCoord, Tilemap
from .vec import Vec2

# Flight times tried when searching for the cheapest jump, 0.1 to 1.9.
_JUMP_SAMPLES = tuple(k / 10 for k in range(1, 20))
# Horizontal spacing of the points sampled along a jump arc.
_ARC_STEP = 0.1
_NO_JUMP = Vec2(math.inf, math.inf)


class EdgeType(enum.Enum):
    WALK = enum.auto()
    JUMP = enum.auto()
    FALL = enum.auto()


class EdgeDirection(enum.Enum):
    A_TO_B = enum.auto()
    B_TO_A = enum.auto()


@dataclass
class Node:
    """A point an agent can stand on, with the indices of its edges."""

    position: Vec2
    edges: list[int] = field(default_factory=list)


@dataclass
class Edge:
    """A link between nodes ``a`` and ``b`` with the launch velocity each way."""

    a: int
    b: int
    type: EdgeType
    vel_ab: Vec2
    vel_ba: Vec2


class NavMesh:
    """Graph of the places an agent can stand in a tilemap and how to move between them.

    A node sits at the centre of every empty tile that has a non-empty tile
    directly below it. ``gravity`` and ``max_jump_dist`` are read on every
    call to :meth:`generate`.
    """

    def __init__(self, tilemap: Tilemap) -> None:
        self.tilemap = tilemap
        self.gravity = 10.0
        self.max_jump_dist = 10.0
        self.nodes: list[Node] = []
        self.edges: list[Edge] = []
        self.generate()

    def _tile(self, x: int, y: int) -> Tile:
        # Reads go through the flat index; anything off the grid is empty.
        try:
            return self.tilemap[x, y]
        except IndexError:
            return Tile.EMPTY

    def generate(self) -> None:
        """Rebuild all nodes and edges from the current tilemap."""
        width, height = self.tilemap.width, self.tilemap.height
        self.nodes = [
            Node(Vec2(x + 0.5, y + 0.5))
            for x in range(width)
            for y in range(height - 1)
            if self._tile(x, y) is not Tile.WALL and self._tile(x, y + 1) is not Tile.EMPTY
        ]
        self.edges = []

        for a, b in itertools.permutations(range(len(self.nodes)), 2):
            if self.has_connection(a, b):
                continue
            if self.can_walk(a, b):
                self._add_walk_edge(a, b)
            elif self.can_fall(a, b):
                self._add_fall_edge(a, b)
            elif self.can_jump(a, b):
                self._add_jump_edge(a, b)

    def closest(self, position: Vec2) -> int:
        """Index of the node nearest ``position``; later nodes win ties."""
        if not self.nodes:
            raise ValueError("navigation mesh has no nodes")
        best_dist = math.inf
        best = 0
        for i, node in enumerate(self.nodes):
            d = position.distance(node.position)
            if d > best_dist:
                continue
            best_dist = d
            best = i
        return best

    def get_closest(self, position: Vec2) -> Node:
        """The node nearest ``position``."""
        return self.nodes[self.closest(position)]

    def valid(self) -> bool:
        """Whether the mesh has any nodes at all."""
        return bool(self.nodes)

    def has_connection(self, a: int, b: int) -> bool:
        """Whether an edge already joins nodes ``a`` and ``b``."""
        pair = {a, b}
        return any(
            {self.edges[e].a, self.edges[e].b} == pair
            for e in itertools.chain(self.nodes[a].edges, self.nodes[b].edges)
        )

    def can_walk(self, a: int, b: int) -> bool:
        """Whether ``a`` and ``b`` are side by side on the same level."""
        pa, pb = self.nodes[a].position, self.nodes[b].position
        return pa.y == pb.y and abs(pa.x - pb.x) == 1.0

    def can_jump(self, a: int, b: int) -> bool:
        """Whether ``a`` and ``b`` are both platform ends within jumping distance."""
        pa, pb = self.nodes[a].position, self.nodes[b].position
        ta, tb = TileCoord.from_vec(pa), TileCoord.from_vec(pb)

        if ta.x == tb.x:
            return False
        if pa.distance(pb) > self.max_jump_dist:
            return False
        return self._on_platform_end(ta) and self._on_platform_end(tb)

    def _on_platform_end(self, t: TileCoord) -> bool:
        return (
            self._tile(t.x + 1, t.y + 1) is Tile.EMPTY
            or self._tile(t.x - 1, t.y + 1) is Tile.EMPTY
        )

    def can_fall(self, a: int, b: int) -> bool:
        """Whether one node can drop straight onto the other from the next column."""
        ta = TileCoord.from_vec(self.nodes[a].position)
        tb = TileCoord.from_vec(self.nodes[b].position)

        if ta.x == tb.x or ta.y == tb.y:
            return False
        if abs(ta.x - tb.x) > 1:
            return False

        # Smaller y is higher up; the drop happens in the lower node's column.
        if ta.y < tb.y:
            start_y, end_y, x = ta.y, tb.y, tb.x
        else:
            start_y, end_y, x = tb.y, ta.y, ta.x

        return all(self._tile(x, y) is not Tile.WALL for y in range(start_y, end_y))

    def best_jump(self, a: Vec2, b: Vec2) -> Vec2:
        """Slowest launch velocity from ``a`` to ``b`` whose apex lies between them.

        Returns an infinite vector when no sampled flight time qualifies.
        """
        velocity = _NO_JUMP
        low_x, high_x = min(a.x, b.x), max(a.x, b.x)
        top_y = min(a.y, b.y)
        for s in _JUMP_SAMPLES:
            v = self.jump_velocity(a, b, s)
            apex = self.jump_apex(a, v)
            if apex.x < low_x or apex.x > high_x:
                continue
            if abs(apex.y - top_y) < 0.5:
                continue
            if v.length() < velocity.length():
                velocity = v
        return velocity

    def jump_velocity(self, a: Vec2, b: Vec2, s: float) -> Vec2:
        """Upward launch velocity from ``a`` towards ``b`` with ``s`` seconds per unit across."""
        if s == 0:
            raise ValueError("jump time scale must not be zero")
        dx = b.x - a.x
        if dx == 0:
            raise ValueError("cannot jump between points in the same column")
        vx = -1.0 / s if dx < 0 else 1.0 / s
        duration = s * dx
        vy = (b.y - 0.5 * self.gravity * duration * duration - a.y) / duration
        return Vec2(vx, -abs(vy))

    def jump_apex(self, a: Vec2, velocity: Vec2) -> Vec2:
        """Highest point of the arc launched from ``a`` with ``velocity``."""
        x = -(velocity.y / self.gravity) * velocity.x + a.x
        return Vec2(x, self.projectile(velocity, a, x))

    def jump_collides(self, a: Vec2, b: Vec2, velocity: Vec2) -> bool:
        """Whether the arc from ``a`` with ``velocity`` passes through a wall before ``b``."""
        lowest, highest = min(a.x, b.x), max(a.x, b.x)
        steps = math.floor((highest - lowest) / _ARC_STEP + 1e-9)
        for k in range(steps + 1):
            x = lowest + k * _ARC_STEP
            y = self.projectile(velocity, a, x)
            if not math.isfinite(y):
                continue
            tile = TileCoord.from_vec(Vec2(x, y))
            if self._tile(tile.x, tile.y) is Tile.WALL:
                return True
        return False

    def projectile(self, v: Vec2, p0: Vec2, x: float) -> float:
        """Height at ``x`` of the arc launched from ``p0`` with velocity ``v``."""
        if v.x == 0:
            raise ValueError("projectile needs a horizontal velocity")
        t = (x - p0.x) / v.x
        return 0.5 * self.gravity * t * t + v.y * t + p0.y

    def _link(self, edge: Edge) -> None:
        self.edges.append(edge)
        index = len(self.edges) - 1
        self.nodes[edge.a].edges.append(index)
        self.nodes[edge.b].edges.append(index)

    def _add_walk_edge(self, a: int, b: int) -> None:
        self._link(Edge(a, b, EdgeType.WALK, Vec2(1.0, 0.0), Vec2(-1.0, 0.0)))

    def _add_jump_edge(self, a: int, b: int) -> None:
        pa, pb = self.nodes[a].position, self.nodes[b].position
        vel_ab = self.best_jump(pa, pb)
        vel_ba = self.best_jump(pb, pa)
        if self.jump_collides(pa, pb, vel_ab) or self.jump_collides(pb, pa, vel_ba):
            return
        self._link(Edge(a, b, EdgeType.JUMP, vel_ab, vel_ba))

    def _add_fall_edge(self, a: int, b: int) -> None:
        pa, pb = self.nodes[a].position, self.nodes[b].position
        vel_ab = Vec2(1.0, 0.0) if pa.y < pb.y else self.best_jump(pa, pb)
        vel_ba = Vec2(-1.0, 0.0) if pb.y < pa.y else self.best_jump(pb, pa)
        self._link(Edge(a, b, EdgeType.FALL, vel_ab, vel_ba))