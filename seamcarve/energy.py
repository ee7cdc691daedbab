"""
Energy function for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the per-channel central-difference gradient magnitude:
E(y, x) = sqrt(sum_c dx_c^2 + dy_c^2)
"""

import torch

from .exceptions import InvalidArgumentError
from .grid import PixelGrid


def gradient_magnitude_energy(grid: PixelGrid) -> torch.Tensor:
    """
    Compute gradient magnitude energy for a pixel grid.

    For interior pixels, with central differences per channel c:
      dx_c = I(y, x+1, c) - I(y, x-1, c)
      dy_c = I(y+1, x, c) - I(y-1, x, c)
      E(y, x) = sqrt(sum_c dx_c^2 + dy_c^2)

    Border rows and columns have no neighbor on one side and get zero energy.

    Args:
        grid: PixelGrid of at least 2x2 pixels

    Returns:
        Energy map (H, W), float64, non-negative
    """
    if grid.width < 2 or grid.height < 2:
        raise InvalidArgumentError(
            f"Energy needs at least a 2x2 grid, got {grid.width}x{grid.height}")

    pixels = grid.pixels.to(torch.float64)
    energy = torch.zeros(grid.height, grid.width, dtype=torch.float64)

    # Empty slices for 2-pixel dimensions leave the map all zero
    dx = pixels[:, 1:-1, 2:] - pixels[:, 1:-1, :-2]
    dy = pixels[:, 2:, 1:-1] - pixels[:, :-2, 1:-1]
    energy[1:-1, 1:-1] = torch.sqrt((dx ** 2 + dy ** 2).sum(dim=0))

    return energy
