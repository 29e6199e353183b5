"""Pillow image renderer.

Each grid cell becomes a square tile of ``resolution // width`` pixels. Tiles
are looked up by name (``floor``, ``wall``, ``goal``, ``player``, ``crate``,
``crate_on_goal``): an image file from ``texture_map`` under ``asset_root``
if one is configured and loads, otherwise a solid color from the palette.
Background tiles are drawn first, then every foreground element on top.
"""

import logging
import os
from functools import lru_cache
from typing import Dict, Optional, Tuple

from PIL import Image

from soko_universe.types import BackgroundElementType, ForegroundElementType
from soko_universe.universe import Universe

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 640
DEFAULT_ASSET_ROOT = "assets"

TileName = str
Color = Tuple[int, int, int, int]
TextureMap = Dict[TileName, str]
Palette = Dict[TileName, Color]

BACKGROUND_TILES: Dict[BackgroundElementType, TileName] = {
    BackgroundElementType.FLOOR: "floor",
    BackgroundElementType.WALL: "wall",
    BackgroundElementType.GOAL: "goal",
}

# (element type, standing on a goal) -> tile
FOREGROUND_TILES: Dict[Tuple[ForegroundElementType, bool], TileName] = {
    (ForegroundElementType.PLAYER, False): "player",
    (ForegroundElementType.PLAYER, True): "player",
    (ForegroundElementType.CRATE, False): "crate",
    (ForegroundElementType.CRATE, True): "crate_on_goal",
}

DEFAULT_PALETTE: Palette = {
    "floor": (32, 32, 32, 255),
    "wall": (120, 72, 40, 255),
    "goal": (60, 140, 60, 255),
    "player": (70, 110, 220, 255),
    "crate": (200, 150, 60, 255),
    "crate_on_goal": (230, 200, 60, 255),
}

TileCache = Dict[Tuple[TileName, int], Image.Image]


def load_texture(path: str, size: int) -> Optional[Image.Image]:
    try:
        return Image.open(path).convert("RGBA").resize((size, size))
    except OSError:
        return None


@lru_cache(maxsize=256)
def solid_tile(color: Color, size: int) -> Image.Image:
    return Image.new("RGBA", (size, size), color)


def get_tile(
    name: TileName,
    size: int,
    texture_map: TextureMap,
    asset_root: str,
    palette: Palette,
    cache: TileCache,
) -> Image.Image:
    key = (name, size)
    if key in cache:
        return cache[key]

    tile: Optional[Image.Image] = None
    if name in texture_map:
        path = os.path.join(asset_root, texture_map[name])
        tile = load_texture(path, size)
        if tile is None:
            logger.warning("Texture %s for tile %r not loadable, using color", path, name)
    if tile is None:
        tile = solid_tile(palette[name], size)

    cache[key] = tile
    return tile


def render(
    universe: Universe,
    resolution: int = DEFAULT_RESOLUTION,
    texture_map: Optional[TextureMap] = None,
    asset_root: str = DEFAULT_ASSET_ROOT,
    palette: Optional[Palette] = None,
    cache: Optional[TileCache] = None,
) -> Image.Image:
    """Render the current frame as an RGBA image.

    The image is ``width * cell`` by ``height * cell`` pixels with
    ``cell = max(1, resolution // width)``.
    """
    width, height = universe.width(), universe.height()
    cell_size = max(1, resolution // width)
    texture_map = texture_map if texture_map is not None else {}
    palette = {**DEFAULT_PALETTE, **(palette or {})}
    cache = cache if cache is not None else {}

    def tile(name: TileName) -> Image.Image:
        return get_tile(name, cell_size, texture_map, asset_root, palette, cache)

    img = Image.new("RGBA", (width * cell_size, height * cell_size), palette["floor"])

    for y in range(height):
        for x in range(width):
            kind = universe.get_background(x, y)
            img.alpha_composite(tile(BACKGROUND_TILES[kind]), (x * cell_size, y * cell_size))

    for i in range(universe.foreground_size()):
        element = universe.get_foreground_element(i)
        on_goal = universe.get_background(element.x, element.y) == BackgroundElementType.GOAL
        name = FOREGROUND_TILES[(element.element_type, on_goal)]
        img.alpha_composite(tile(name), (element.x * cell_size, element.y * cell_size))

    return img


class TextureRenderer:
    resolution: int
    texture_map: TextureMap
    asset_root: str
    palette: Palette

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        texture_map: Optional[TextureMap] = None,
        asset_root: str = DEFAULT_ASSET_ROOT,
        palette: Optional[Palette] = None,
    ):
        self.resolution = resolution
        self.texture_map = texture_map or {}
        self.asset_root = asset_root
        self.palette = {**DEFAULT_PALETTE, **(palette or {})}
        self._cache: TileCache = {}

    def render(self, universe: Universe) -> Image.Image:
        return render(
            universe,
            resolution=self.resolution,
            texture_map=self.texture_map,
            asset_root=self.asset_root,
            palette=self.palette,
            cache=self._cache,
        )
