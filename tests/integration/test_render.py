from collector_maze.levels.loader import load_level
from collector_maze.levels.subtypes import create_subtype, MazeSubtype
from collector_maze.renderer import render
from collector_maze.renderer.image import DEFAULT_PALETTE
from tests.test_utils import COLLECTOR_DEFINITION


def test_render_size() -> None:
    config, state = load_level(COLLECTOR_DEFINITION)
    image = render(state, create_subtype(config), square_size=20)
    assert image.size == (5 * 20, 4 * 20)
    assert image.mode == "RGBA"


def test_collector_draws_inside_corner() -> None:
    config, state = load_level(COLLECTOR_DEFINITION)
    # (2, 1) has open neighbours right and below and a wall at (3, 2).
    corner_pixel = (140, 90)
    plain_pixel = (120, 70)

    collector_image = render(state, create_subtype(config))
    maze_image = render(state, MazeSubtype(config))

    assert collector_image.getpixel(corner_pixel) == DEFAULT_PALETTE["corner"]
    assert maze_image.getpixel(corner_pixel) == DEFAULT_PALETTE["collectible"]
    assert collector_image.getpixel(plain_pixel) == DEFAULT_PALETTE["collectible"]
