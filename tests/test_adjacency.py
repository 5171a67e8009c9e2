"""Tests for neighbour direction and walkable-edge checks."""

from mazetiles import (
    Direction,
    Field,
    Position,
    Size,
    Tile,
    edge_pairs,
    has_walkable_neighbour,
    neighbour_at,
)

G = Field.GROUND
P = Field.PATH


def _path_tile(x: int, y: int) -> Tile:
    return Tile(Position(x, y), Size(3, 3), Tile.new_path().fields)


def test_unit_tiles_left_and_right():
    first = Tile.unit(Position(2, 3), P)
    second = Tile.unit(Position(3, 3), P)
    assert neighbour_at(first, second) is Direction.RIGHT
    assert neighbour_at(second, first) is Direction.LEFT


def test_unit_tiles_top_and_bottom():
    first = Tile.unit(Position(2, 3), P)
    above = Tile.unit(Position(2, 2), P)
    below = Tile.unit(Position(2, 4), P)
    assert neighbour_at(first, above) is Direction.TOP
    assert neighbour_at(first, below) is Direction.BOTTOM
    assert first.neighbour_at(above) is Direction.TOP


def test_no_direction_for_other_offsets():
    origin = Tile.unit(Position(2, 3), P)
    for x, y in [(2, 3), (3, 4), (1, 2), (4, 3), (2, 5), (2, 0)]:
        assert neighbour_at(origin, Tile.unit(Position(x, y), P)) is None


def test_three_by_three_tiles_use_one_step_offsets():
    top = _path_tile(0, 0)
    assert neighbour_at(top, _path_tile(0, 1)) is Direction.BOTTOM
    assert neighbour_at(_path_tile(0, 1), top) is Direction.TOP
    assert neighbour_at(top, _path_tile(1, 0)) is Direction.RIGHT
    assert neighbour_at(_path_tile(1, 0), top) is Direction.LEFT
    # tile size does not stretch the offset
    assert neighbour_at(top, _path_tile(0, 3)) is None
    assert neighbour_at(top, _path_tile(3, 0)) is None


def test_edge_pairs_for_three_by_three():
    a, b = _path_tile(0, 0), _path_tile(0, 0)
    assert edge_pairs(a, b, Direction.TOP) == [(0, 6), (1, 7), (2, 8)]
    assert edge_pairs(a, b, Direction.BOTTOM) == [(6, 0), (7, 1), (8, 2)]
    assert edge_pairs(a, b, Direction.LEFT) == [(0, 2), (3, 5), (6, 8)]
    assert edge_pairs(a, b, Direction.RIGHT) == [(2, 0), (5, 3), (8, 6)]


def test_edge_pairs_of_mismatched_edges_keep_overlap():
    wide = Tile(Position(0, 0), Size(3, 1), [P, P, P])
    narrow = Tile(Position(0, 1), Size(2, 1), [P, P])
    assert edge_pairs(wide, narrow, Direction.BOTTOM) == [(0, 0), (1, 1)]

    big = _path_tile(0, 0)
    unit = Tile.unit(Position(1, 0), P)
    assert edge_pairs(big, unit, Direction.RIGHT) == [(2, 0)]
    assert edge_pairs(unit, big, Direction.LEFT) == [(0, 2)]


def test_stacked_path_tiles_are_walkable():
    top = _path_tile(0, 0)
    bottom = _path_tile(0, 1)
    assert has_walkable_neighbour(top, bottom) is True
    assert has_walkable_neighbour(bottom, top) is True
    assert top.has_walkable_neighbour(bottom) is True


def test_side_by_side_vertical_paths_do_not_connect():
    left = _path_tile(0, 0)
    right = _path_tile(1, 0)
    # facing columns are all ground
    assert has_walkable_neighbour(left, right) is False


def test_one_walkable_side_is_not_enough():
    top = _path_tile(0, 0)
    blocked = Tile(Position(0, 1), Size(3, 3), [G, G, G, G, P, G, G, P, G])
    assert has_walkable_neighbour(top, blocked) is False


def test_rotated_tile_connects_horizontally():
    left = _path_tile(0, 0)
    left.rotate()
    right = _path_tile(1, 0)
    right.rotate()
    assert has_walkable_neighbour(left, right) is True


def test_any_single_pair_connects():
    top = Tile(Position(0, 0), Size(3, 3), [G] * 8 + [P])
    bottom = Tile(Position(0, 1), Size(3, 3), [G, G, P] + [G] * 6)
    assert has_walkable_neighbour(top, bottom) is True


def test_mixed_sizes_compare_facing_cells():
    top_row_path = Tile(Position(0, 0), Size(3, 3), [P, P, P] + [G] * 6)
    assert has_walkable_neighbour(top_row_path, Tile.unit(Position(1, 0), P)) is True
    assert has_walkable_neighbour(top_row_path, Tile.unit(Position(1, 0), G)) is False
    # the unit tile below faces cell 6, which is ground
    assert has_walkable_neighbour(top_row_path, Tile.unit(Position(0, 1), P)) is False


def test_non_neighbours_never_walkable():
    assert has_walkable_neighbour(_path_tile(0, 0), _path_tile(0, 2)) is False
    assert has_walkable_neighbour(_path_tile(0, 0), _path_tile(0, 3)) is False
