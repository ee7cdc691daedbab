"""Reading and writing image files as pixel grids."""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .config import Config
from .exceptions import ImageLoadError
from .grid import PixelGrid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def resolve_image_path(name: PathLike) -> Path:
    """Append the default extension to a bare image name."""
    path = Path(name)
    if not path.suffix:
        path = path.with_suffix(Config.DEFAULT_EXTENSION)
    return path


def load_image(path: PathLike) -> PixelGrid:
    """Load an image file as an RGB PixelGrid."""
    path = Path(path)
    try:
        with Image.open(path) as img:
            array = np.array(img.convert('RGB'), dtype=np.uint8)
    except OSError as exc:
        # Covers missing files, directories, permissions and undecodable data
        raise ImageLoadError(f"Could not open or find the image: {path}") from exc

    grid = PixelGrid.from_array(array)
    logger.info("Loaded %s (%d x %d)", path, grid.width, grid.height)
    return grid


def save_image(grid: PixelGrid, path: PathLike):
    """Save a PixelGrid to an image file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    array = grid.to_array()
    if array.shape[2] == 1:
        array = array[:, :, 0]
    Image.fromarray(array).save(path)
    logger.info("Saved: %s", path)
