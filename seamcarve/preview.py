"""Side-by-side comparison figure of the original and carved images."""

import logging
from pathlib import Path
from typing import Dict, Union

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from .config import Config
from .grid import PixelGrid
from .seam import Strategy

logger = logging.getLogger(__name__)


def _show(ax, grid: PixelGrid, title: str):
    img = grid.to_array()
    if img.shape[2] == 1:
        ax.imshow(img[:, :, 0], cmap='gray', vmin=0, vmax=255)
    else:
        ax.imshow(img)
    ax.set_title(title, fontsize=11)
    ax.axis('off')


def save_comparison(original: PixelGrid, results: Dict[Strategy, PixelGrid],
                    path: Union[str, Path]):
    """
    Save the original and each strategy's result in one row.

    Args:
        original: Input grid
        results: Carved grid per strategy, as from resize_with_comparison
        path: Output image file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    n = 1 + len(results)
    size = Config.PREVIEW_PANEL_SIZE
    fig, axes = plt.subplots(1, n, figsize=(size * n, size))
    if n == 1:
        axes = [axes]

    _show(axes[0], original, f"Original ({original.width} x {original.height})")
    for ax, (strategy, grid) in zip(axes[1:], results.items()):
        _show(ax, grid, f"{strategy.value.capitalize()} ({grid.width} x {grid.height})")

    plt.tight_layout()
    fig.savefig(path, dpi=100, bbox_inches='tight')
    plt.close(fig)
    logger.info("Saved comparison: %s", path)
