"""A* search over a navigation mesh, producing a path of launch points."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Deque, Sequence

from .nav_mesh import EdgeDirection, EdgeType, NavMesh
from .vec import Vec2

if TYPE_CHECKING:
    from .agent import Agent


@dataclass(frozen=True)
class PathSegment:
    """A point on a path and the velocity with which the agent arrives there."""

    start: Vec2
    velocity: Vec2 = field(default_factory=Vec2)


Path = Deque[PathSegment]


@dataclass
class PathNode:
    """A search entry: a mesh node reached over ``edge`` from ``parent``."""

    node: int
    parent: int = -1
    edge: int = -1
    cost: float = 0.0
    distance: float = 0.0


class Pathfinder:
    """Plans routes for an agent through a navigation mesh."""

    def __init__(self, agent: Agent, nav_mesh: NavMesh) -> None:
        self.agent = agent
        self.nav_mesh = nav_mesh
        self.path: Path = deque()

    def set_goal(self, p: Vec2) -> Path:
        """Plan a path from the agent towards ``p``.

        When ``p`` cannot be reached the path ends at the explored node that
        lies closest to it. Raises ``ValueError`` if the mesh has no nodes.
        """
        self.path = deque()
        mesh = self.nav_mesh
        agent_position = self.agent.position

        start = PathNode(
            node=mesh.closest(agent_position),
            distance=agent_position.distance(p),
        )
        goal = mesh.closest(p)

        open_list: list[PathNode] = [start]
        closed: list[PathNode] = []
        goal_reached = False

        while open_list:
            closed.append(open_list.pop(self._lowest_cost(open_list)))
            current = len(closed) - 1
            entry = closed[current]

            if entry.node == goal:
                goal_reached = True
                break

            for neighbour in self.get_adjacent(entry.node):
                if self._in_list(open_list, neighbour) or self._in_list(closed, neighbour):
                    continue
                neighbour.parent = current
                neighbour.distance = mesh.nodes[neighbour.node].position.distance(p)
                neighbour.cost += entry.cost
                open_list.append(neighbour)

        end = len(closed) - 1 if goal_reached else self._nearest_to_goal(closed)
        self.path = self._build_path(closed, end)
        return self.path

    def _build_path(self, entries: Sequence[PathNode], goal: int) -> Path:
        segments: list[PathSegment] = []
        index = goal
        child: PathNode | None = None
        while index != -1:
            entry = entries[index]
            velocity = Vec2()
            if child is not None:
                edge = self.nav_mesh.edges[child.edge]
                velocity = edge.vel_ab if entry.node == edge.a else edge.vel_ba
            segments.append(PathSegment(self.nav_mesh.nodes[entry.node].position, velocity))
            child = entry
            index = entry.parent
        return deque(reversed(segments))

    @staticmethod
    def _in_list(entries: Sequence[PathNode], candidate: PathNode) -> bool:
        return any(e.node == candidate.node and e.edge == candidate.edge for e in entries)

    @staticmethod
    def _lowest_cost(entries: Sequence[PathNode]) -> int:
        # Later entries win ties.
        best_cost = math.inf
        best = 0
        for i, entry in enumerate(entries):
            c = entry.cost + entry.distance
            if c > best_cost:
                continue
            best_cost = c
            best = i
        return best

    @staticmethod
    def _nearest_to_goal(entries: Sequence[PathNode]) -> int:
        best_dist = math.inf
        best = 0
        for i, entry in enumerate(entries):
            if entry.distance > best_dist:
                continue
            best_dist = entry.distance
            best = i
        return best

    def compute_cost(self, edge: int, direction: EdgeDirection) -> float:
        """Estimated travel time along ``edge`` in ``direction``."""
        e = self.nav_mesh.edges[edge]
        pa = self.nav_mesh.nodes[e.a].position
        pb = self.nav_mesh.nodes[e.b].position
        dx = abs(pa.x - pb.x)
        dy = abs(pa.y - pb.y)

        if e.type is EdgeType.WALK:
            return dx / self.agent.max_speed
        if e.type is EdgeType.JUMP:
            vx = e.vel_ab.x if direction is EdgeDirection.A_TO_B else e.vel_ba.x
            return dx / abs(vx) * 5.0
        return math.sqrt(2 * dy / abs(self.nav_mesh.gravity))

    def get_adjacent(self, node: int) -> list[PathNode]:
        """Search entries for every node the agent can reach directly from ``node``."""
        adjacent = []
        for edge in self.nav_mesh.nodes[node].edges:
            e = self.nav_mesh.edges[edge]
            direction = EdgeDirection.A_TO_B if node == e.a else EdgeDirection.B_TO_A
            if not self.can_connect(edge, direction):
                continue
            other = e.b if direction is EdgeDirection.A_TO_B else e.a
            adjacent.append(
                PathNode(node=other, edge=edge, cost=self.compute_cost(edge, direction))
            )
        return adjacent

    def can_connect(self, edge: int, direction: EdgeDirection) -> bool:
        """Whether the agent is fast enough to take ``edge`` in ``direction``."""
        e = self.nav_mesh.edges[edge]
        v = e.vel_ab if direction is EdgeDirection.A_TO_B else e.vel_ba
        return abs(v.x) <= self.agent.max_speed and abs(v.y) <= self.agent.jump_speed