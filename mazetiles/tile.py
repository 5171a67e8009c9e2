"""Tiles: small row-major field grids anchored in a maze.

A tile's ``fields`` buffer holds ``size.width * size.height`` values in
row-major order, so buffer index ``i`` is the local cell
``(i % width, i // width)``. Tiles are the unit of composition; a
``TileGroup`` is a rectangular block of fields that a maze stamps as one unit
tile per field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .adjacency import has_walkable_neighbour, neighbour_at
from .geometry import Direction, Field, Position, Size
from .schemas import TileState

G = Field.GROUND
P = Field.PATH


def _checked_fields(size: Size, fields: Sequence[Field]) -> List[Field]:
    """Copy ``fields`` into a fresh list, failing fast on a shape mismatch."""
    buffer = list(fields)
    if len(buffer) != len(size):
        raise ValueError(
            f"Field buffer has {len(buffer)} cells but size "
            f"{size.width}x{size.height} needs {len(size)}"
        )
    return buffer


class FieldGrid:
    """Row-major field buffer helpers shared by ``Tile`` and ``TileGroup``.

    Subclasses provide ``size`` and ``fields`` attributes.
    """

    size: Size
    fields: List[Field]

    def local_position(self, index: int) -> Position:
        """Translate a buffer index into a local (x, y) coordinate."""
        return Position(index % self.size.width, index // self.size.width)

    def local_index(self, position: Position) -> int:
        """Translate a local (x, y) coordinate into a buffer index."""
        return position.y * self.size.width + position.x

    def field_at(self, x: int, y: int) -> Optional[Field]:
        """Return the field at local ``(x, y)`` or ``None`` outside the grid."""
        if not (0 <= x < self.size.width and 0 <= y < self.size.height):
            return None
        return self.fields[y * self.size.width + x]

    def rows(self) -> List[List[Field]]:
        """Return the buffer chunked into rows, top row first."""
        width = self.size.width
        if width == 0:
            return []
        return [self.fields[start : start + width] for start in range(0, len(self.fields), width)]

    def rotate(self, times: int = 1) -> None:
        """Rotate the field grid 90 degrees clockwise in place.

        Source cell at row ``r``, column ``c`` lands at row ``c``, column
        ``height - 1 - r`` (transpose, then reverse each row). The size is
        replaced by its transpose, so square grids keep their size. Four
        rotations restore the original arrangement.
        """
        for _ in range(times % 4):
            width, height = self.size.width, self.size.height
            rotated = [[Field.NONE] * height for _ in range(width)]
            for row_index, row in enumerate(self.rows()):
                for column_index, value in enumerate(row):
                    rotated[column_index][height - 1 - row_index] = value
            self.fields = [value for row in rotated for value in row]
            self.size = self.size.transposed()


@dataclass
class Tile(FieldGrid):
    """A field grid anchored at ``position`` (maze-cell units, top-left corner)."""

    position: Position
    size: Size
    fields: List[Field] = field(repr=False)

    def __post_init__(self) -> None:
        self.fields = _checked_fields(self.size, self.fields)

    @classmethod
    def new_path(cls) -> "Tile":
        """Return the canonical 3x3 tile with a vertical path down the middle."""
        return cls(
            Position(0, 0),
            Size(3, 3),
            [
                G, P, G,
                G, P, G,
                G, P, G,
            ],
        )

    @classmethod
    def unit(cls, position: Position, value: Field) -> "Tile":
        """Return a 1x1 tile holding a single field."""
        return cls(position, Size(1, 1), [value])

    def copy(self) -> "Tile":
        return Tile(self.position, self.size, list(self.fields))

    def neighbour_at(self, other: "Tile") -> Optional[Direction]:
        return neighbour_at(self, other)

    def has_walkable_neighbour(self, other: "Tile") -> bool:
        return has_walkable_neighbour(self, other)

    def to_state(self) -> TileState:
        return TileState(
            x=self.position.x,
            y=self.position.y,
            width=self.size.width,
            height=self.size.height,
            fields=[value.name.lower() for value in self.fields],
        )

    @classmethod
    def from_state(cls, state: TileState) -> "Tile":
        return cls(
            Position(state.x, state.y),
            Size(state.width, state.height),
            [Field[name.upper()] for name in state.fields],
        )


@dataclass
class TileGroup(FieldGrid):
    """A rectangular block of fields stamped into a maze as unit tiles."""

    origin: Position
    size: Size
    fields: List[Field] = field(repr=False)

    def __post_init__(self) -> None:
        self.fields = _checked_fields(self.size, self.fields)

    def unit_tiles(self) -> List[Tile]:
        """Return one unit tile per field, offset by ``origin``."""
        return [
            Tile.unit(self.local_position(index) + self.origin, value)
            for index, value in enumerate(self.fields)
        ]
