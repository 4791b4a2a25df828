"""A rectangular grid of empty and wall tiles."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .vec import Vec2


class Tile(enum.Enum):
    EMPTY = 0
    WALL = 1


@dataclass(frozen=True)
class TileCoord:
    """Integer tile coordinates."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_vec(cls, v: Vec2) -> TileCoord:
        """Truncate a world position towards zero to get its tile."""
        return cls(int(v.x), int(v.y))


class Tilemap:
    """A ``width`` by ``height`` grid of tiles, all empty at first.

    Tiles are stored row by row and addressed as ``tilemap[x, y]``. Indexing
    goes through the flat row-major index, so an ``x`` just past either side
    of a row reads the neighbouring row; only positions outside the whole
    grid raise ``IndexError``.
    """

    tile_size = 32

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"tilemap size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._tiles = [Tile.EMPTY] * (self.width * self.height)

    def tile_index(self, x: int, y: int) -> int:
        """Flat index of tile (x, y)."""
        return self.width * y + x

    def tile_coord(self, i: int) -> tuple[int, int]:
        """Tile coordinates of flat index ``i``."""
        return i % self.width, i // self.width

    def _checked_index(self, key: tuple[int, int]) -> int:
        x, y = key
        index = self.tile_index(int(x), int(y))
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return index

    def __getitem__(self, key: tuple[int, int]) -> Tile:
        return self._tiles[self._checked_index(key)]

    def __setitem__(self, key: tuple[int, int], value: Tile) -> None:
        if not isinstance(value, Tile):
            raise TypeError(f"expected a Tile, got {value!r}")
        self._tiles[self._checked_index(key)] = value

    def tile_to_world(self, x: int, y: int) -> Vec2:
        """Pixel position of the top-left corner of tile (x, y)."""
        size = float(self.tile_size)
        return Vec2(x * size, y * size)

    def toggle_tile(self, x: float, y: float) -> None:
        """Swap the tile at (x, y) between empty and wall."""
        key = (int(x), int(y))
        self[key] = Tile.EMPTY if self[key] is Tile.WALL else Tile.WALL

    def is_solid(self, x: int, y: int) -> bool:
        """Whether a body is blocked at tile (x, y).

        The map is closed on the left, right and bottom and open at the top.
        """
        if y < 0:
            return False
        if x < 0 or x >= self.width or y >= self.height:
            return True
        return self._tiles[self.tile_index(x, y)] is Tile.WALL