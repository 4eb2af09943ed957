import io
from typing import Iterable

from PIL import Image, UnidentifiedImageError

from pshot.console import console
from pshot.errors import CompositeError
from pshot.models import Tile

WHITE = (255, 255, 255, 255)


def composite_tiles(
    tiles: Iterable[Tile],
    width: int,
    height: int,
    background: tuple = WHITE,
) -> bytes:
    """Stitch tiles onto one ``width x height`` canvas and encode it as PNG.

    Each tile is anchored at its own top edge. Rows of a tile that fall
    below the canvas are cropped off, so the canvas is exactly ``height``
    rows tall and never a multiple of the tile height.

    A page with no height still yields an image: a single ``width x 1`` row
    of background.
    """
    if height <= 0:
        console.log(
            f"[yellow]Page height is {height}px, writing a blank {width}x1 image"
        )
        height = 1
        tiles = []

    try:
        canvas = Image.new("RGBA", (width, height), background)
        for tile in tiles:
            _paste_tile(canvas, tile)
        buffer = io.BytesIO()
        canvas.save(buffer, format="PNG")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise CompositeError(f"Failed to stitch screenshot: {e}") from e

    return buffer.getvalue()


def _paste_tile(canvas: Image.Image, tile: Tile) -> None:
    visible = canvas.height - tile.top
    if visible <= 0:
        return

    with Image.open(io.BytesIO(tile.image)) as img:
        overlay = img.convert("RGBA")

    if overlay.height > visible:
        overlay = overlay.crop((0, 0, overlay.width, visible))
    if overlay.width > canvas.width:
        overlay = overlay.crop((0, 0, canvas.width, overlay.height))

    canvas.alpha_composite(overlay, dest=(0, tile.top))
