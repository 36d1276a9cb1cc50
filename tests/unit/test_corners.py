# tests/unit/test_corners.py

from collector_maze.components import Position
from collector_maze.renderer.corners import CornerPlacement, corner_placements
from tests.test_utils import make_corridor_state, make_walled_state


def test_corner_where_diagonal_is_wall() -> None:
    state = make_walled_state()
    assert corner_placements(state, Position(1, 0), tile_id=1) == [
        CornerPlacement(
            index=3,
            clip=(75, 25, 25, 25),
            origin=(50, 0),
            size=50,
            clip_id="tileCorner3ClipPath1",
            image_id="tileCorner31",
        )
    ]


def test_corner_below_wall() -> None:
    state = make_walled_state()
    placements = corner_placements(state, Position(1, 2), tile_id=7)
    assert [p.index for p in placements] == [2]
    assert placements[0].clip == (75, 100, 25, 25)


def test_no_corner_on_wall_or_off_grid() -> None:
    state = make_walled_state()
    assert corner_placements(state, Position(2, 1), tile_id=5) == []
    assert corner_placements(state, Position(5, 5), tile_id=0) == []


def test_no_corner_when_neighbour_blocked() -> None:
    # In a one-row corridor every vertical neighbour is off the grid.
    state = make_corridor_state([1, 1])
    assert corner_placements(state, Position(1, 0), tile_id=1) == []


def test_no_corner_in_open_room() -> None:
    state = make_walled_state()
    assert corner_placements(state, Position(0, 0), tile_id=0) == []


def test_corner_scales_with_square_size() -> None:
    state = make_walled_state()
    (placement,) = corner_placements(state, Position(1, 0), tile_id=1, square_size=20)
    assert placement.clip == (30, 10, 10, 10)
    assert placement.origin == (20, 0)
