import math

import pytest

from platnav.agent import Agent
from platnav.nav_mesh import Edge, EdgeDirection, EdgeType, NavMesh
from platnav.pathfinder import PathSegment, Pathfinder
from platnav.physics import World
from platnav.tilemap import Tile, Tilemap
from platnav.vec import Vec2


def _floor_map(width, height, floor_columns):
    tilemap = Tilemap(width, height)
    for x in floor_columns:
        tilemap[x, height - 1] = Tile.WALL
    return tilemap


def _setup(tilemap, x, y):
    world = World(tilemap)
    agent = Agent(world, x, y)
    mesh = NavMesh(tilemap)
    return agent, mesh, Pathfinder(agent, mesh)


def _connected(mesh, pa, pb):
    ia = next(i for i, n in enumerate(mesh.nodes) if n.position == pa)
    ib = next(i for i, n in enumerate(mesh.nodes) if n.position == pb)
    return mesh.has_connection(ia, ib)


def test_path_to_own_node_is_single_segment():
    tilemap = _floor_map(6, 5, range(6))
    agent, mesh, finder = _setup(tilemap, 2.5, 3.0)
    path = finder.set_goal(Vec2(2.5, 3.5))
    assert list(path) == [PathSegment(Vec2(2.5, 3.5), Vec2(0.0, 0.0))]


def test_path_endpoints_and_links():
    tilemap = _floor_map(6, 5, range(6))
    agent, mesh, finder = _setup(tilemap, 0.5, 3.0)
    goal = Vec2(5.2, 3.4)
    path = finder.set_goal(goal)
    assert path[0].start == mesh.get_closest(agent.position).position
    assert path[-1].start == mesh.get_closest(goal).position
    for first, second in zip(path, list(path)[1:]):
        assert _connected(mesh, first.start, second.start)
    assert finder.path == path


def test_unreachable_goal_stops_at_nearest_explored_node():
    tilemap = _floor_map(7, 5, [0, 1, 5, 6])
    agent, mesh, finder = _setup(tilemap, 0.5, 3.0)
    mesh.max_jump_dist = 0.5
    mesh.generate()
    path = finder.set_goal(Vec2(6.5, 3.5))
    assert path[0].start == Vec2(0.5, 3.5)
    assert path[-1].start == Vec2(1.5, 3.5)
    assert len(path) == 2


def test_empty_mesh_raises():
    tilemap = Tilemap(4, 4)
    agent, mesh, finder = _setup(tilemap, 1.0, 1.0)
    with pytest.raises(ValueError):
        finder.set_goal(Vec2(2.0, 2.0))


def test_walk_cost_uses_max_speed():
    tilemap = _floor_map(6, 5, range(6))
    agent, mesh, finder = _setup(tilemap, 2.5, 3.0)
    walk = next(i for i, e in enumerate(mesh.edges) if e.type is EdgeType.WALK)
    assert finder.compute_cost(walk, EdgeDirection.A_TO_B) == pytest.approx(1 / agent.max_speed)
    assert finder.compute_cost(walk, EdgeDirection.B_TO_A) == pytest.approx(1 / agent.max_speed)


def test_fall_cost_is_free_fall_time():
    tilemap = _floor_map(6, 5, range(6))
    agent, mesh, finder = _setup(tilemap, 2.5, 3.0)
    mesh.nodes[0].position = Vec2(0.5, 1.5)
    mesh.nodes[1].position = Vec2(1.5, 3.5)
    mesh.edges.append(Edge(0, 1, EdgeType.FALL, Vec2(1.0, 0.0), Vec2(-1.0, 0.0)))
    index = len(mesh.edges) - 1
    expected = math.sqrt(2 * 2.0 / mesh.gravity)
    assert finder.compute_cost(index, EdgeDirection.A_TO_B) == pytest.approx(expected)


def test_can_connect_rejects_fast_edges():
    tilemap = _floor_map(6, 5, range(6))
    agent, mesh, finder = _setup(tilemap, 2.5, 3.0)
    mesh.edges.append(Edge(0, 1, EdgeType.JUMP, Vec2(math.inf, math.inf), Vec2(1.0, -1.0)))
    index = len(mesh.edges) - 1
    assert finder.can_connect(index, EdgeDirection.A_TO_B) is False
    assert finder.can_connect(index, EdgeDirection.B_TO_A) is True


def test_get_adjacent_of_inner_node():
    tilemap = _floor_map(6, 5, range(6))
    agent, mesh, finder = _setup(tilemap, 2.5, 3.0)
    inner = next(i for i, n in enumerate(mesh.nodes) if n.position == Vec2(2.5, 3.5))
    neighbours = {mesh.nodes[p.node].position for p in finder.get_adjacent(inner)}
    assert Vec2(1.5, 3.5) in neighbours
    assert Vec2(3.5, 3.5) in neighbours
    for entry in finder.get_adjacent(inner):
        assert inner in (mesh.edges[entry.edge].a, mesh.edges[entry.edge].b)
        assert entry.cost > 0