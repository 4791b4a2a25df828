"""A small rigid-body simulation for box-shaped bodies in a tilemap."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from .tilemap import Tilemap
from .vec import Vec2

SUB_STEPS = 16
DEFAULT_GRAVITY = Vec2(0.0, 10.0)

_EPS = 1e-6


@dataclass
class Body:
    """An axis-aligned box that never rotates."""

    position: Vec2
    half_width: float
    half_height: float
    velocity: Vec2 = field(default_factory=Vec2)
    density: float = 1.0

    def __post_init__(self) -> None:
        if self.half_width <= 0 or self.half_height <= 0:
            raise ValueError("body extents must be positive")
        if self.density <= 0:
            raise ValueError("body density must be positive")

    @property
    def mass(self) -> float:
        return self.density * 4.0 * self.half_width * self.half_height

    def apply_impulse(self, impulse: Vec2) -> None:
        """Change the velocity by ``impulse / mass``."""
        self.velocity = self.velocity + impulse / self.mass


class World:
    """Bodies moving under gravity and colliding with a tilemap.

    One tile is one world unit. The map is closed on the left, right and
    bottom and open at the top. Each step is split into ``SUB_STEPS``
    sub-steps.
    """

    def __init__(self, tilemap: Tilemap, gravity: Vec2 = DEFAULT_GRAVITY) -> None:
        self.tilemap = tilemap
        self.gravity = gravity
        self.sub_steps = SUB_STEPS
        self.bodies: list[Body] = []

    def add_body(self, body: Body) -> Body:
        self.bodies.append(body)
        return body

    def step(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds."""
        if dt < 0:
            raise ValueError("time step must not be negative")
        if dt == 0:
            return
        h = dt / self.sub_steps
        for _ in range(self.sub_steps):
            for body in self.bodies:
                self._advance(body, h)

    def _advance(self, body: Body, h: float) -> None:
        body.velocity = body.velocity + self.gravity * h
        self._move_x(body, body.velocity.x * h)
        self._move_y(body, body.velocity.y * h)

    def _solid_cells(
        self, left: float, right: float, top: float, bottom: float
    ) -> Iterator[tuple[int, int]]:
        for cx in range(math.floor(left + _EPS), math.ceil(right - _EPS)):
            for cy in range(math.floor(top + _EPS), math.ceil(bottom - _EPS)):
                if self.tilemap.is_solid(cx, cy):
                    yield cx, cy

    def _move_x(self, body: Body, dx: float) -> None:
        if dx == 0:
            return
        hw, hh = body.half_width, body.half_height
        old_x, y = body.position.x, body.position.y
        x = old_x + dx
        cells = self._solid_cells(x - hw, x + hw, y - hh, y + hh)
        if dx > 0:
            ahead = [cx for cx, _ in cells if cx >= old_x + hw - _EPS]
            if ahead and x + hw > min(ahead):
                x = min(ahead) - hw
                body.velocity = Vec2(0.0, body.velocity.y)
        else:
            ahead = [cx + 1 for cx, _ in cells if cx + 1 <= old_x - hw + _EPS]
            if ahead and x - hw < max(ahead):
                x = max(ahead) + hw
                body.velocity = Vec2(0.0, body.velocity.y)
        body.position = Vec2(x, y)

    def _move_y(self, body: Body, dy: float) -> None:
        if dy == 0:
            return
        hw, hh = body.half_width, body.half_height
        x, old_y = body.position.x, body.position.y
        y = old_y + dy
        cells = self._solid_cells(x - hw, x + hw, y - hh, y + hh)
        if dy > 0:
            ahead = [cy for _, cy in cells if cy >= old_y + hh - _EPS]
            if ahead and y + hh > min(ahead):
                y = min(ahead) - hh
                body.velocity = Vec2(body.velocity.x, 0.0)
        else:
            ahead = [cy + 1 for _, cy in cells if cy + 1 <= old_y - hh + _EPS]
            if ahead and y - hh < max(ahead):
                y = max(ahead) + hh
                body.velocity = Vec2(body.velocity.x, 0.0)
        body.position = Vec2(x, y)