"""Navigation meshes, A* pathfinding and simple physics for tile-based platformer agents."""

__version__ = "0.1.0"
__all__ = ["vec", "tilemap", "physics", "nav_mesh", "pathfinder", "agent"]