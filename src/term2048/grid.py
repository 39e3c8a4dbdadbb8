from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple


# (x, y): x = column, y = row, (0, 0) = top-left corner
Position = Tuple[int, int]


@dataclass(frozen=True)
class Tile:
    value: Optional[int] = None

    def is_empty(self) -> bool:
        return self.value is None


EMPTY = Tile()


class Grid:
    """
    Square matrix of tiles, stored row-major (``tiles[y][x]``).

    Tiles are immutable, so copying the rows is enough for a deep clone.
    """

    def __init__(self, size: int = 4):
        self._size = size
        self._tiles: List[List[Tile]] = [[EMPTY] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> "Grid":
        grid = cls(len(rows))
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                grid.set((x, y), value)
        return grid

    @property
    def size(self) -> int:
        return self._size

    def contains(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self._size and 0 <= y < self._size

    def get(self, pos: Position) -> Optional[Tile]:
        if not self.contains(pos):
            return None
        x, y = pos
        return self._tiles[y][x]

    def get_value(self, pos: Position) -> Optional[int]:
        tile = self.get(pos)
        return None if tile is None else tile.value

    def set(self, pos: Position, value: Optional[int]) -> None:
        assert self.contains(pos), f"position {pos} outside a {self._size}x{self._size} grid"
        x, y = pos
        self._tiles[y][x] = EMPTY if value is None else Tile(value)

    def move_tile(self, src: Position, dst: Position) -> None:
        # copy, then clear src
        (sx, sy), (dx, dy) = src, dst
        self._tiles[dy][dx] = self._tiles[sy][sx]
        self._tiles[sy][sx] = EMPTY

    def tiles(self) -> Tuple[Tuple[Tile, ...], ...]:
        return tuple(tuple(row) for row in self._tiles)

    def positions(self) -> Iterator[Position]:
        for x in range(self._size):
            for y in range(self._size):
                yield (x, y)

    def empty_positions(self) -> List[Position]:
        return [pos for pos in self.positions() if self._tiles[pos[1]][pos[0]].is_empty()]

    def tile_count(self) -> int:
        return sum(1 for row in self._tiles for tile in row if not tile.is_empty())

    def total(self) -> int:
        return sum(tile.value for row in self._tiles for tile in row if tile.value is not None)

    def biggest_value(self) -> int:
        return max((tile.value for row in self._tiles for tile in row if tile.value is not None), default=0)

    def to_rows(self) -> List[List[Optional[int]]]:
        return [[tile.value for tile in row] for row in self._tiles]

    def clone(self) -> "Grid":
        other = Grid.__new__(Grid)
        other._size = self._size
        other._tiles = [row[:] for row in self._tiles]
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"Grid({self.to_rows()!r})"
