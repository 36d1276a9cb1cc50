"""Pillow render port.

:class:`ImageRenderPort` paints tiles and corner decorations onto an RGBA
image; :func:`render` walks the grid and lets a level subtype issue the draw
calls for each tile.
"""

from typing import Dict, Optional, Protocol, Tuple

from PIL import Image, ImageDraw

from collector_maze.components import Position
from collector_maze.renderer.corners import SQUARE_SIZE, CornerPlacement, RenderPort
from collector_maze.state import MazeState

Color = Tuple[int, int, int, int]

DEFAULT_PALETTE: Dict[str, Color] = {
    "wall": (92, 64, 51, 255),
    "open": (222, 214, 196, 255),
    "finish": (120, 190, 120, 255),
    "collectible": (240, 200, 60, 255),
    "empty_collectible": (200, 190, 170, 255),
    "agent": (40, 90, 200, 255),
    "corner": (92, 64, 51, 255),
    "text": (30, 30, 30, 255),
}


class TileDrawer(Protocol):
    def draw_tile(
        self, port: RenderPort, state: MazeState, pos: Position, tile_id: int
    ) -> None: ...


class ImageRenderPort:
    """Pillow-backed :class:`RenderPort`.

    Tiles are flat colour squares; collectible cells show their remaining
    quantity. Corner decorations paste ``corner_texture`` clipped to the
    placement rectangle.
    """

    def __init__(
        self,
        width: int,
        height: int,
        square_size: int = SQUARE_SIZE,
        palette: Optional[Dict[str, Color]] = None,
        corner_texture: Optional[Image.Image] = None,
    ) -> None:
        self.square_size = square_size
        self.palette = {**DEFAULT_PALETTE, **(palette or {})}
        self.image = Image.new(
            "RGBA", (width * square_size, height * square_size), self.palette["wall"]
        )
        self.corner_texture = corner_texture or Image.new(
            "RGBA", (square_size, square_size), self.palette["corner"]
        )
        self._draw = ImageDraw.Draw(self.image)

    def _box(self, pos: Position) -> Tuple[int, int, int, int]:
        s = self.square_size
        return (pos.x * s, pos.y * s, (pos.x + 1) * s - 1, (pos.y + 1) * s - 1)

    def draw_tile(self, state: MazeState, pos: Position, tile_id: int) -> None:
        if state.is_wall_or_out_of_bounds(pos):
            self._draw.rectangle(self._box(pos), fill=self.palette["wall"])
            return

        cell = state.collectible.get(pos)
        if cell is not None:
            key = "collectible" if cell.current > 0 else "empty_collectible"
            self._draw.rectangle(self._box(pos), fill=self.palette[key])
            x0, y0, _, _ = self._box(pos)
            self._draw.text((x0 + 4, y0 + 4), str(cell.current), fill=self.palette["text"])
        elif pos == state.finish:
            self._draw.rectangle(self._box(pos), fill=self.palette["finish"])
        else:
            self._draw.rectangle(self._box(pos), fill=self.palette["open"])

    def draw_corner(self, placement: CornerPlacement) -> None:
        texture = self.corner_texture
        if texture.size != (placement.size, placement.size):
            texture = texture.resize((placement.size, placement.size))
        x, y, w, h = placement.clip
        ox, oy = placement.origin
        region = texture.crop((x - ox, y - oy, x - ox + w, y - oy + h))
        self.image.alpha_composite(region, dest=(x, y))

    def draw_agent(self, pos: Position) -> None:
        pad = self.square_size // 5
        x0, y0, x1, y1 = self._box(pos)
        self._draw.ellipse((x0 + pad, y0 + pad, x1 - pad, y1 - pad), fill=self.palette["agent"])


def render(
    state: MazeState,
    drawer: TileDrawer,
    square_size: int = SQUARE_SIZE,
    corner_texture: Optional[Image.Image] = None,
) -> Image.Image:
    """Render ``state`` through ``drawer`` (a level subtype) to an RGBA image."""
    port = ImageRenderPort(
        state.width, state.height, square_size=square_size, corner_texture=corner_texture
    )
    for y in range(state.height):
        for x in range(state.width):
            drawer.draw_tile(port, state, Position(x, y), tile_id=y * state.width + x)
    port.draw_agent(state.agent)
    return port.image
