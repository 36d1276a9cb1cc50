"""Rendering subpackage.

Turns immutable ``MazeState`` snapshots into images. Level subtypes never
touch an image directly; they issue draw calls against a :class:`RenderPort`
so outcome logic stays free of any rendering dependency and the geometry can
be tested headless.

* :mod:`.corners` computes decorative corner placements (pure geometry).
* :mod:`.image` is the Pillow implementation of the port plus :func:`render`.
"""

from .corners import CornerPlacement, RenderPort, corner_placements
from .image import ImageRenderPort, render

__all__ = [
    "CornerPlacement",
    "ImageRenderPort",
    "RenderPort",
    "corner_placements",
    "render",
]
