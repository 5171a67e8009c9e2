"""Pydantic schemas for maze snapshots.

These models mirror the lightweight dataclasses in ``tile.py`` and
``maze.py`` but keep a maze serializable. Fields are stored by name
(``"none"``, ``"ground"``, ``"path"``) so snapshots stay readable as JSON.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Tuple

from pydantic import BaseModel, Field, model_validator

FieldName = Literal["none", "ground", "path"]


class TileState(BaseModel):
    """A placed tile: anchor, shape and row-major field names."""

    x: int = Field(..., ge=0, description="Anchor column in maze cells")
    y: int = Field(..., ge=0, description="Anchor row in maze cells")
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    fields: List[FieldName] = Field(
        default_factory=list,
        description="Row-major field names, width * height entries",
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "TileState":
        if len(self.fields) != self.width * self.height:
            raise ValueError(
                f"Tile state has {len(self.fields)} fields, expected {self.width * self.height}"
            )
        return self


class MazeState(BaseModel):
    """Sparse representation of a maze: its size and placed tiles."""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    tile_size: int = Field(3, gt=0, description="Tile grid used for index lookups")
    tiles: Dict[Tuple[int, int], TileState] = Field(
        default_factory=dict,
        description="Sparse map: (x, y) → tile",
    )

    @model_validator(mode="after")
    def _check_keys(self) -> "MazeState":
        for key, tile in self.tiles.items():
            if tuple(key) != (tile.x, tile.y):
                raise ValueError(
                    f"Tile keyed at {tuple(key)} is positioned at ({tile.x}, {tile.y})"
                )
        return self
