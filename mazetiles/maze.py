"""Maze compositor: places tiles and flattens them into one field array.

A maze keeps a sparse ``Position -> Tile`` map. Tile positions are the
top-left anchor of the tile in maze-cell units, so a 3x3 tile at ``(3, 0)``
covers columns 3-5 of rows 0-2. The dense path returned by ``get_path`` is
recomputed from the map on every call and is never stored.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .adjacency import has_walkable_neighbour, neighbour_at
from .config import Config
from .geometry import Direction, Field, Position, Size
from .logging_utils import log_debug
from .rendering import render_ascii
from .schemas import MazeState
from .tile import Tile, TileGroup


class Maze:
    """A fixed-size maze assembled from placed tiles.

    Placement policy:
    - Tiles anchored outside ``[0, width) x [0, height)`` are dropped silently.
    - A tile placed on an occupied anchor replaces the earlier tile.
    """

    def __init__(self, width: int, height: int, tile_size: Optional[int] = None):
        self.size = Size(width, height)
        self.tile_size = tile_size if tile_size is not None else Config.TILE_SIZE
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        self.tiles: Dict[Position, Tile] = {}

    def __repr__(self) -> str:
        return f"Maze(width={self.size.width}, height={self.size.height}, tiles={len(self.tiles)})"

    def __len__(self) -> int:
        return len(self.tiles)

    def __contains__(self, position: object) -> bool:
        return position in self.tiles

    @classmethod
    def from_path(cls, width: int, height: int, fields: Sequence[Field]) -> "Maze":
        """Build a maze from an already flattened field array.

        Each field becomes a unit tile at its own cell. Raises ValueError when
        ``fields`` does not hold ``width * height`` entries.
        """
        maze = cls(width, height)
        maze.add_tile_group(TileGroup(Position(0, 0), Size(width, height), fields))
        return maze

    # Placement -----------------------------------------------------------

    def in_bounds(self, position: Position) -> bool:
        return position.x < self.size.width and position.y < self.size.height

    def add_tile(self, tile: Tile) -> None:
        """Place a copy of ``tile`` at its position, replacing any tile already there."""
        if not self.in_bounds(tile.position):
            log_debug(
                f"Dropping tile at ({tile.position.x}, {tile.position.y}): outside "
                f"{self.size.width}x{self.size.height} maze"
            )
            return
        self.tiles[tile.position] = tile.copy()

    def add_tiles(self, tiles: Iterable[Tile]) -> None:
        for tile in tiles:
            self.add_tile(tile)

    def add_tile_group(self, group: TileGroup) -> None:
        """Stamp every field of ``group`` as a unit tile at ``origin + (x, y)``."""
        self.add_tiles(group.unit_tiles())

    # Lookups -------------------------------------------------------------

    def get_index(self, position: Position) -> int:
        """Return the flat index of ``position`` in the maze's row-major path."""
        return position.y * self.size.width + position.x

    def get_position(self, index: int) -> Position:
        return Position(index % self.size.width, index // self.size.width)

    def get_tile_at_position(self, position: Position) -> Optional[Tile]:
        """Return a copy of the tile anchored at ``position``, if any."""
        tile = self.tiles.get(position)
        if tile is None:
            return None
        return tile.copy()

    def get_tile_at_index(self, index: int) -> Optional[Tile]:
        """Return the tile whose tile-grid cell contains flat ``index``.

        The global cell is snapped down to a multiple of ``tile_size`` on both
        axes and looked up as an anchor.
        """
        if index < 0 or index >= len(self.size):
            return None
        cell = self.get_position(index)
        anchor = Position(
            cell.x - cell.x % self.tile_size,
            cell.y - cell.y % self.tile_size,
        )
        return self.get_tile_at_position(anchor)

    def get_path(self) -> List[Field]:
        """Flatten all tiles into one row-major field list of ``len(self.size)``.

        Every local field is offset by its tile's position. Cells that fall
        outside the maze are clipped. ``Field.NONE`` cells are transparent, so
        they never erase what an earlier tile wrote; otherwise later tiles
        win where tiles overlap.
        """
        path = [Field.NONE] * len(self.size)
        for tile in self.tiles.values():
            for index, value in enumerate(tile.fields):
                if value is Field.NONE:
                    continue
                local = tile.local_position(index)
                x = tile.position.x + local.x
                y = tile.position.y + local.y
                if x >= self.size.width or y >= self.size.height:
                    continue
                path[y * self.size.width + x] = value
        return path

    def get_field_at_position(self, position: Position) -> Optional[Field]:
        if not self.in_bounds(position):
            return None
        return self.get_path()[self.get_index(position)]

    # Neighbours ----------------------------------------------------------

    def neighbours(self, position: Position) -> Dict[Direction, Tile]:
        """Return copies of the tiles one row or column away from ``position``.

        Neighbours are resolved through the position map on each call; tiles
        hold no references to each other.
        """
        tile = self.tiles.get(position)
        if tile is None:
            return {}
        found: Dict[Direction, Tile] = {}
        x, y = position.x, position.y
        for nx, ny in ((x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y)):
            if nx < 0 or ny < 0:
                continue
            other = self.tiles.get(Position(nx, ny))
            if other is None:
                continue
            direction = neighbour_at(tile, other)
            if direction is not None:
                found[direction] = other.copy()
        return found

    def walkable_neighbours(self, position: Position) -> Dict[Direction, Tile]:
        """Like ``neighbours`` but only those connected by a walkable edge."""
        tile = self.tiles.get(position)
        if tile is None:
            return {}
        return {
            direction: other
            for direction, other in self.neighbours(position).items()
            if has_walkable_neighbour(tile, other)
        }

    # Snapshots and views -------------------------------------------------

    def render(self, symbols: Optional[Dict[Field, str]] = None) -> str:
        return render_ascii(self.get_path(), self.size, symbols=symbols)

    def to_state(self) -> MazeState:
        return MazeState(
            width=self.size.width,
            height=self.size.height,
            tile_size=self.tile_size,
            tiles={position.as_tuple(): tile.to_state() for position, tile in self.tiles.items()},
        )

    @classmethod
    def from_state(cls, state: MazeState) -> "Maze":
        maze = cls(state.width, state.height, tile_size=state.tile_size)
        maze.add_tiles(Tile.from_state(tile_state) for tile_state in state.tiles.values())
        return maze
