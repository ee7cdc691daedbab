"""
Content-aware image resizing by seam carving.

Removes the lowest-energy 8-connected path of pixels, one seam at a time,
with either an optimal (dynamic programming) or a greedy seam search.
"""

__version__ = "0.1.0"

from .exceptions import (SeamCarvingError, InvalidArgumentError,
                         ResourceExhaustedError, ImageLoadError)
from .grid import PixelGrid
from .energy import gradient_magnitude_energy
from .seam import (Strategy, cumulative_cost, dp_seam, greedy_seam,
                   seam_energy, remove_seam)
from .carving import (
    remove_vertical_seam,
    remove_horizontal_seam,
    resize,
    resize_with_comparison,
)

__all__ = [
    'SeamCarvingError',
    'InvalidArgumentError',
    'ResourceExhaustedError',
    'ImageLoadError',
    'PixelGrid',
    'gradient_magnitude_energy',
    'Strategy',
    'cumulative_cost',
    'dp_seam',
    'greedy_seam',
    'seam_energy',
    'remove_seam',
    'remove_vertical_seam',
    'remove_horizontal_seam',
    'resize',
    'resize_with_comparison',
]
