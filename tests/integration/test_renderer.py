from pathlib import Path

from PIL import Image

from soko_universe.actions import Action
from soko_universe.renderer.text import render_text
from soko_universe.renderer.texture import DEFAULT_PALETTE, TextureRenderer, render
from soko_universe.universe import Universe

ROWS = ["#####", "#PCB#", "#.G.#", "#####"]


def test_render_text_matches_level_encoding() -> None:
    universe = Universe.from_level(ROWS)
    assert render_text(universe) == "\n".join(ROWS)


def test_render_text_status_line() -> None:
    universe = Universe.from_level(ROWS)
    assert render_text(universe, status=True).splitlines()[-1] == "1/2"


def test_render_text_follows_moves() -> None:
    universe = Universe.from_named_level("first_push")
    universe.move(Action.RIGHT)
    universe.move(Action.RIGHT)
    assert render_text(universe) == "#######\n#..PCG#\n#######"


def cell_color(img: Image.Image, x: int, y: int, cell: int) -> tuple[int, ...]:
    return img.getpixel((x * cell + cell // 2, y * cell + cell // 2))  # type: ignore[return-value]


def test_render_image_size_and_tiles() -> None:
    universe = Universe.from_level(ROWS)
    img = render(universe, resolution=50)
    assert img.mode == "RGBA"
    assert img.size == (50, 40)
    assert cell_color(img, 0, 0, 10) == DEFAULT_PALETTE["wall"]
    assert cell_color(img, 1, 1, 10) == DEFAULT_PALETTE["player"]
    assert cell_color(img, 2, 1, 10) == DEFAULT_PALETTE["crate"]
    assert cell_color(img, 3, 1, 10) == DEFAULT_PALETTE["crate_on_goal"]
    assert cell_color(img, 1, 2, 10) == DEFAULT_PALETTE["floor"]
    assert cell_color(img, 2, 2, 10) == DEFAULT_PALETTE["goal"]


def test_missing_texture_falls_back_to_palette(tmp_path: Path) -> None:
    universe = Universe.from_level(ROWS)
    renderer = TextureRenderer(
        resolution=50, texture_map={"wall": "nope.png"}, asset_root=str(tmp_path)
    )
    img = renderer.render(universe)
    assert cell_color(img, 0, 0, 10) == DEFAULT_PALETTE["wall"]


def test_texture_file_is_used(tmp_path: Path) -> None:
    Image.new("RGBA", (4, 4), (1, 2, 3, 255)).save(tmp_path / "wall.png")
    universe = Universe.from_level(ROWS)
    renderer = TextureRenderer(
        resolution=50, texture_map={"wall": "wall.png"}, asset_root=str(tmp_path)
    )
    img = renderer.render(universe)
    assert cell_color(img, 0, 0, 10) == (1, 2, 3, 255)
    # Cached tile reused on the next frame.
    assert renderer.render(universe).tobytes() == img.tobytes()


def test_partial_palette_keeps_defaults() -> None:
    universe = Universe.from_level(ROWS)
    wall = (9, 9, 9, 255)
    img = render(universe, resolution=50, palette={"wall": wall})
    assert cell_color(img, 0, 0, 10) == wall
    assert cell_color(img, 2, 1, 10) == DEFAULT_PALETTE["crate"]
    img = TextureRenderer(resolution=50, palette={"wall": wall}).render(universe)
    assert cell_color(img, 0, 0, 10) == wall
    assert cell_color(img, 2, 2, 10) == DEFAULT_PALETTE["goal"]
