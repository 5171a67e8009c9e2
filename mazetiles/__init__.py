"""
Mazetiles - compose mazes from small field tiles.

Tiles carry a local pattern of fields (none / ground / path). A Maze places
tiles at grid positions and flattens them into one walkable-path array.
No file I/O, no global state beyond environment-driven Config.
"""

__version__ = "0.1.0"

# Value types
from .geometry import Direction, Field, Position, Size

# Tiles and adjacency
from .tile import FieldGrid, Tile, TileGroup
from .adjacency import edge_pairs, has_walkable_neighbour, neighbour_at

# Compositor
from .maze import Maze

# Snapshots and views
from .schemas import MazeState, TileState
from .rendering import render_ascii

from .config import Config

__all__ = [
    # Value types
    "Direction",
    "Field",
    "Position",
    "Size",
    # Tiles
    "FieldGrid",
    "Tile",
    "TileGroup",
    # Adjacency
    "edge_pairs",
    "has_walkable_neighbour",
    "neighbour_at",
    # Compositor
    "Maze",
    # Snapshots and views
    "MazeState",
    "TileState",
    "render_ascii",
    # Configuration
    "Config",
]
