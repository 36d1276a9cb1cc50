"""Corner decoration geometry.

Collector levels soften inside corners of the maze: an open tile whose two
orthogonal neighbours towards a corner are open, while the diagonal tile in
that corner is a wall (or off the grid), gets a quarter-tile corner graphic
clipped into that quadrant.
"""

from dataclasses import dataclass
from typing import List, Protocol, Tuple

from collector_maze.components import Position
from collector_maze.state import MazeState

SQUARE_SIZE = 50

CORNERS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
"""(dx, dy) of each corner, indexed by corner number."""


@dataclass(frozen=True)
class CornerPlacement:
    """Where to draw one corner graphic.

    Attributes:
        index: Corner number (index into ``CORNERS``).
        clip: ``(x, y, width, height)`` pixel rectangle the graphic is clipped to.
        origin: ``(x, y)`` pixel position of the full-tile graphic.
        size: Edge length of the full-tile graphic in pixels.
        clip_id: Stable identifier of the clip region.
        image_id: Stable identifier of the graphic.
    """

    index: int
    clip: Tuple[int, int, int, int]
    origin: Tuple[int, int]
    size: int
    clip_id: str
    image_id: str


class RenderPort(Protocol):
    """Drawing surface the level subtypes paint through."""

    def draw_tile(self, state: MazeState, pos: Position, tile_id: int) -> None: ...

    def draw_corner(self, placement: CornerPlacement) -> None: ...


def corner_placements(
    state: MazeState, pos: Position, tile_id: int, square_size: int = SQUARE_SIZE
) -> List[CornerPlacement]:
    """Return the corner decorations for the tile at ``pos``.

    Wall and off-grid tiles never get corners.
    """
    if state.is_wall_or_out_of_bounds(pos):
        return []

    half = square_size // 2
    placements: List[CornerPlacement] = []
    for i, (dx, dy) in enumerate(CORNERS):
        if (
            not state.is_wall_or_out_of_bounds(Position(pos.x + dx, pos.y))
            and not state.is_wall_or_out_of_bounds(Position(pos.x, pos.y + dy))
            and state.is_wall_or_out_of_bounds(Position(pos.x + dx, pos.y + dy))
        ):
            placements.append(
                CornerPlacement(
                    index=i,
                    clip=(
                        pos.x * square_size + (dx + 1) * square_size // 4,
                        pos.y * square_size + (dy + 1) * square_size // 4,
                        half,
                        half,
                    ),
                    origin=(pos.x * square_size, pos.y * square_size),
                    size=square_size,
                    clip_id=f"tileCorner{i}ClipPath{tile_id}",
                    image_id=f"tileCorner{i}{tile_id}",
                )
            )
    return placements
