"""
Demo: Assembling a Maze from Tiles
==================================

WHAT THIS SHOWS:
- Building 3x3 path tiles and rotating them
- Checking that neighbouring tiles connect along a walkable edge
- Stamping a block of fields with a TileGroup
- Flattening the maze into one path and printing it

RUN:
    python -m examples.demo.run --rotate
"""

import argparse
import json

from mazetiles import Config, Field, Maze, Position, Size, Tile, TileGroup
from mazetiles.logging_utils import log_error, log_info, log_success

G = Field.GROUND
P = Field.PATH


def build_column(rotate_middle: bool = False) -> list[Tile]:
    """Three path tiles stacked at tile-grid positions (0, 0), (0, 1), (0, 2)."""
    column = []
    for row in range(3):
        tile = Tile(Position(0, row), Size(3, 3), Tile.new_path().fields)
        if rotate_middle and row == 1:
            tile.rotate()
        column.append(tile)
    return column


def build_maze(column: list[Tile]) -> Maze:
    """Place the column at 3x3 cell anchors plus a horizontal stub on the right."""
    maze = Maze(9, 9)

    for tile in column:
        anchor = Position(tile.position.x * 3, tile.position.y * 3)
        maze.add_tile(Tile(anchor, tile.size, tile.fields))

    stub = TileGroup(
        Position(3, 3),
        Size(3, 3),
        [
            G, G, G,
            P, P, P,
            G, G, G,
        ],
    )
    maze.add_tile_group(stub)
    return maze


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Assemble a small tile maze")
    parser.add_argument("--rotate", action="store_true", help="Rotate the middle tile before placing it")
    parser.add_argument("--state", action="store_true", help="Print the maze snapshot as JSON")
    return parser.parse_args()


def main(args: argparse.Namespace) -> None:
    try:
        Config.validate()
    except ValueError as exc:
        log_error(str(exc))
        raise SystemExit(1)

    log_info(Config.display())
    column = build_column(rotate_middle=args.rotate)
    top, middle = column[0], column[1]
    log_info(f"Top tile connects downward: {top.has_walkable_neighbour(middle)}")

    maze = build_maze(column)

    print(maze.render())
    if args.state:
        state = maze.to_state()
        snapshot = {
            "width": state.width,
            "height": state.height,
            "tiles": [tile.model_dump() for tile in state.tiles.values()],
        }
        print(json.dumps(snapshot, indent=2))
    log_success(f"Assembled {maze!r}")


if __name__ == "__main__":
    main(parse_args())
