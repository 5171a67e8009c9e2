"""ASCII views of a flattened maze path for debugging and examples."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .geometry import Field, Size

_DEFAULT_FIELD_SYMBOLS: Dict[Field, str] = {
    Field.NONE: "  ",
    Field.GROUND: "██",
    Field.PATH: "· ",
}


def render_ascii(
    fields: Sequence[Field],
    size: Size,
    *,
    symbols: Optional[Dict[Field, str]] = None,
) -> str:
    """Render a row-major field list as one text line per row, top row first.

    ``symbols`` overrides the default glyph per field; fields without a glyph
    fall back to ``??``.
    """
    if len(fields) != len(size):
        raise ValueError(
            f"Cannot render {len(fields)} fields as a {size.width}x{size.height} grid"
        )

    mapping = {**_DEFAULT_FIELD_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    lines: List[str] = []
    for y in range(size.height):
        row = fields[y * size.width : (y + 1) * size.width]
        lines.append("".join(mapping.get(value, "??") for value in row))
    return "\n".join(lines)
