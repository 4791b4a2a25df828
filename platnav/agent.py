"""A box-shaped character that follows planned paths."""

from __future__ import annotations

from collections import deque

from .pathfinder import Path
from .physics import Body, World
from .vec import Vec2, sign


class Agent:
    """A non-rotating body in a :class:`World` that walks and jumps along a path."""

    width = 1.0
    height = 2.0
    max_speed = 5.0
    jump_speed = 10.0

    def __init__(self, world: World, x: float, y: float) -> None:
        self.world = world
        self._body = world.add_body(
            Body(
                position=Vec2(x, y),
                half_width=self.width / 2.0 * 0.8,
                half_height=self.height / 2.0,
                density=1.0,
            )
        )
        self.path: Path = deque()

    @property
    def position(self) -> Vec2:
        return self._body.position

    @position.setter
    def position(self, value: Vec2) -> None:
        self._body.position = Vec2(value.x, value.y)

    @property
    def velocity(self) -> Vec2:
        return self._body.velocity

    @velocity.setter
    def velocity(self, value: Vec2) -> None:
        dv = Vec2(value.x, value.y) - self.velocity
        self._body.apply_impulse(dv * self._body.mass)

    def move_towards(self, point: Vec2, speed: float) -> None:
        """Run horizontally towards ``point`` at ``speed``, keeping vertical velocity."""
        dx = point.x - self.position.x
        self.velocity = Vec2(sign(dx) * abs(speed), self.velocity.y)

    def update(self) -> None:
        """Steer along the current path, dropping segments as they are reached."""
        if not self.path:
            return

        sub_goal = 1 if len(self.path) > 1 else 0
        first = self.path[0]
        vx = self.max_speed if first.velocity.y == 0.0 else first.velocity.x
        self.move_towards(self.path[sub_goal].start, vx)

        if len(self.path) > 1 and self.at(self.path[1].start):
            self.path.popleft()
            self.velocity = self.path[0].velocity
        elif len(self.path) == 1 and self.at(self.path[0].start):
            self.path.clear()
            self.velocity = Vec2(0.0, 0.0)

    def at(self, p: Vec2) -> bool:
        """Whether the agent stands at ``p``."""
        return self.at_x(p) and abs(self.position.y - p.y) < 0.75

    def at_x(self, p: Vec2) -> bool:
        """Whether the agent is horizontally level with ``p``."""
        return abs(self.position.x - p.x) < 0.1