"""Edge adjacency checks between placed tiles.

Two tiles are neighbours when their positions differ by exactly one row or
one column and nothing else. They connect when at least one pair of facing
edge cells is walkable on both sides. Nothing here mutates a tile.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from .geometry import Direction

if TYPE_CHECKING:  # pragma: no cover
    from .tile import Tile


def neighbour_at(tile: "Tile", other: "Tile") -> Optional[Direction]:
    """Return the side of ``tile`` that ``other`` sits on, or ``None``.

    ``TOP`` is the same column one row up, ``RIGHT`` the same row one column
    across, and so on. Zero, diagonal and longer offsets have no direction.
    """
    here, there = tile.position, other.position

    if there.x == here.x:
        if there.y == here.y - 1:
            return Direction.TOP
        if there.y == here.y + 1:
            return Direction.BOTTOM
    if there.y == here.y:
        if there.x == here.x - 1:
            return Direction.LEFT
        if there.x == here.x + 1:
            return Direction.RIGHT
    return None


def edge_pairs(tile: "Tile", other: "Tile", direction: Direction) -> List[Tuple[int, int]]:
    """Return ``(tile_index, other_index)`` pairs of cells facing across the edge.

    For 3x3 tiles facing right this is ``[(2, 0), (5, 3), (8, 6)]``. Edges of
    different lengths are aligned at the top-left and only the overlapping
    cells are paired.
    """
    width, height = tile.size.width, tile.size.height
    other_width, other_height = other.size.width, other.size.height

    if direction is Direction.TOP:
        return [
            (column, (other_height - 1) * other_width + column)
            for column in range(min(width, other_width))
        ]
    if direction is Direction.BOTTOM:
        return [
            ((height - 1) * width + column, column)
            for column in range(min(width, other_width))
        ]
    if direction is Direction.LEFT:
        return [
            (row * width, row * other_width + other_width - 1)
            for row in range(min(height, other_height))
        ]
    return [
        (row * width + width - 1, row * other_width)
        for row in range(min(height, other_height))
    ]


def has_walkable_neighbour(tile: "Tile", other: "Tile") -> bool:
    """Return True if ``other`` is a neighbour reachable across the shared edge."""
    direction = neighbour_at(tile, other)
    if direction is None:
        return False
    return any(
        tile.fields[mine].is_walkable and other.fields[theirs].is_walkable
        for mine, theirs in edge_pairs(tile, other, direction)
    )
