import logging
from pathlib import Path

from PIL import Image

from masked_maze.errors import MaskSizeError, MazeConfigurationError
from masked_maze.grid import Mask

logger = logging.getLogger(__name__)


def load_mask(path: str | Path, width: int, height: int) -> Mask:
    """
    Load a monochrome bitmap as a maze mask.

    Every black pixel at (x, y) protects cell (y, x): that cell's own east and
    south walls are never knocked down, so the picture shows through the maze.

    Args:
        path: A 1-bit image, typically PBM (anything Pillow can open works and
              is cut to black and white first, darker than 128 is black).
        width: Expected image width, equal to the maze width in cells.
        height: Expected image height, equal to the maze height in cells.

    Raises
    ------
        MaskSizeError: If the image is not exactly width x height pixels.
        MazeConfigurationError: If the file cannot be read as an image.
    """
    try:
        with Image.open(path) as image:
            # Hard threshold at 128; dithering would speckle grey areas
            bitmap = image.convert("1", dither=Image.Dither.NONE)
    except OSError as exc:  # includes UnidentifiedImageError
        raise MazeConfigurationError(f"Cannot read mask image '{path}': {exc}") from exc

    if bitmap.size != (width, height):
        raise MaskSizeError(
            f"Cannot use mask image '{path}'; expected {width}*{height}, 1-bit image "
            f"(got {bitmap.size[0]}*{bitmap.size[1]})"
        )

    pixels = bitmap.load()
    mask = frozenset(
        (y, x) for y in range(height) for x in range(width) if pixels[x, y] == 0
    )
    logger.debug("Loaded %d masked cells from %s", len(mask), path)
    return mask
