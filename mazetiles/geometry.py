"""Value types shared by tiles and mazes.

Positions use maze-cell units: ``x`` is the column, ``y`` the row, and
``(0, 0)`` is the top-left cell. Sizes describe a row-major field buffer of
``width * height`` cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List


class Field(Enum):
    """State of a single maze cell."""

    NONE = 0  # no tile data here (background)
    GROUND = 1
    PATH = 2

    @property
    def is_walkable(self) -> bool:
        """Only path cells can be walked on."""
        return self is Field.PATH


class Direction(Enum):
    """Side of a tile on which a neighbour sits."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @classmethod
    def all(cls) -> List["Direction"]:
        """Return every direction, clockwise from the top."""
        return [cls.TOP, cls.RIGHT, cls.BOTTOM, cls.LEFT]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Size:
    """Width and height of a field grid."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Size cannot be negative, got {self.width}x{self.height}")

    def __len__(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return len(self) == 0

    def transposed(self) -> "Size":
        """Return the size with width and height swapped."""
        return Size(self.height, self.width)


@dataclass(frozen=True)
class Position:
    """Integer grid coordinate; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position cannot be negative, got ({self.x}, {self.y})")

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y
