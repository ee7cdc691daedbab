"""
High-level carving functions that drive the seam removal loop.
"""

import logging
from typing import Dict, Union

from .config import Config
from .energy import gradient_magnitude_energy
from .exceptions import InvalidArgumentError, ResourceExhaustedError
from .grid import PixelGrid
from .seam import Strategy, remove_seam

logger = logging.getLogger(__name__)


def remove_vertical_seam(grid: PixelGrid,
                         strategy: Strategy = Strategy.OPTIMAL) -> PixelGrid:
    """
    Remove one vertical seam, reducing width by 1.

    The energy map is computed fresh from grid, since every removal
    changes the gradients next to the seam.
    """
    energy = gradient_magnitude_energy(grid)
    seam = strategy.find_seam(energy)
    logger.debug("%s seam starts at column %d, ends at column %d",
                 strategy.value, seam[0].item(), seam[-1].item())
    return remove_seam(grid, seam)


def remove_horizontal_seam(grid: PixelGrid,
                           strategy: Strategy = Strategy.OPTIMAL) -> PixelGrid:
    """
    Remove one horizontal seam, reducing height by 1.

    Transposes the grid, removes a vertical seam and transposes back.
    """
    return remove_vertical_seam(grid.transpose(), strategy).transpose()


def _is_allocation_failure(exc: RuntimeError) -> bool:
    message = str(exc)
    return "can't allocate memory" in message or "out of memory" in message.lower()


def _check_targets(grid: PixelGrid, target_width: int, target_height: int):
    if not 0 < target_width <= grid.width:
        raise InvalidArgumentError(
            f"Target width must be in [1, {grid.width}], got {target_width}")
    if not 0 < target_height <= grid.height:
        raise InvalidArgumentError(
            f"Target height must be in [1, {grid.height}], got {target_height}")

    # Every removal computes energy on a grid of at least 2x2
    if target_width < grid.width and grid.height < 2:
        raise InvalidArgumentError(
            f"Cannot remove vertical seams from a grid of height {grid.height}")
    if target_height < grid.height and target_width < 2:
        raise InvalidArgumentError(
            f"Cannot remove horizontal seams once width is {target_width}")


def resize(grid: PixelGrid, target_width: int, target_height: int,
           strategy: Union[Strategy, str] = Strategy.OPTIMAL) -> PixelGrid:
    """
    Content-aware resize by seam removal.

    Removes (width - target_width) vertical seams, then
    (height - target_height) horizontal seams, one at a time.

    Args:
        grid: Input PixelGrid, left untouched
        target_width: Width in [1, grid.width]
        target_height: Height in [1, grid.height]
        strategy: Strategy or its name ('optimal' or 'greedy')

    Returns:
        Resized PixelGrid (a copy when no seams are removed)
    """
    try:
        strategy = Strategy(strategy)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown strategy: {strategy!r}") from exc
    _check_targets(grid, target_width, target_height)

    n_vertical = grid.width - target_width
    n_horizontal = grid.height - target_height
    logger.info("Resizing %dx%d -> %dx%d with %s seams (%d vertical, %d horizontal)",
                grid.width, grid.height, target_width, target_height,
                strategy.value, n_vertical, n_horizontal)

    carved = grid.clone()

    try:
        for i in range(n_vertical):
            carved = remove_vertical_seam(carved, strategy)
            if (i + 1) % Config.PROGRESS_EVERY == 0:
                logger.info("  Removed %d/%d vertical seams, size: %dx%d",
                            i + 1, n_vertical, carved.width, carved.height)

        for i in range(n_horizontal):
            carved = remove_horizontal_seam(carved, strategy)
            if (i + 1) % Config.PROGRESS_EVERY == 0:
                logger.info("  Removed %d/%d horizontal seams, size: %dx%d",
                            i + 1, n_horizontal, carved.width, carved.height)
    except MemoryError as exc:
        raise ResourceExhaustedError(
            f"Out of memory while carving {carved.width}x{carved.height} grid") from exc
    except RuntimeError as exc:
        # torch reports failed CPU allocations as RuntimeError
        if not _is_allocation_failure(exc):
            raise
        raise ResourceExhaustedError(
            f"Out of memory while carving {carved.width}x{carved.height} grid") from exc

    return carved


def resize_with_comparison(grid: PixelGrid, target_width: int,
                           target_height: int) -> Dict[Strategy, PixelGrid]:
    """
    Resize with every strategy for comparison.

    Each strategy runs its own pipeline on the same input grid.
    """
    return {strategy: resize(grid, target_width, target_height, strategy)
            for strategy in Strategy}
