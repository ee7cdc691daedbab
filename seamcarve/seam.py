"""
Seam computation algorithms.

Two approaches:
1. Dynamic programming: globally optimal seam over all 8-connected paths
2. Greedy: follows the locally cheapest neighbor row by row (no backtracking)

Both break ties the same way: the smallest column when picking a start,
then straight, left, right, each replacing the choice only when strictly
cheaper.
"""

import enum
from typing import Sequence, Union

import torch

from .exceptions import InvalidArgumentError
from .grid import PixelGrid


def _as_float_map(values: torch.Tensor) -> torch.Tensor:
    if values.dim() != 2 or values.numel() == 0:
        raise InvalidArgumentError(
            f"Expected a non-empty (H, W) map, got shape {tuple(values.shape)}")
    if not values.is_floating_point():
        values = values.to(torch.float64)
    return values


def _next_column(row: torch.Tensor, col: int) -> int:
    """Pick straight, left or right of col in row, whichever is strictly cheapest."""
    best_col = col
    best = row[col].item()
    if col > 0 and row[col - 1].item() < best:
        best = row[col - 1].item()
        best_col = col - 1
    if col < row.shape[0] - 1 and row[col + 1].item() < best:
        best_col = col + 1
    return best_col


def cumulative_cost(energy: torch.Tensor) -> torch.Tensor:
    """
    Cumulative minimum cost table for vertical seams.

    M(0, x) = E(0, x)
    M(y, x) = E(y, x) + min(M(y-1, x-1), M(y-1, x), M(y-1, x+1))

    Neighbors outside the grid are left out of the minimum.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cost table (H, W)
    """
    energy = _as_float_map(energy)
    H, W = energy.shape

    M = energy.clone()

    for i in range(1, H):
        # Shifted versions of previous row's cumulative cost
        M_prev = M[i - 1]
        M_left = torch.full((W,), float('inf'), dtype=M.dtype)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), float('inf'), dtype=M.dtype)
        M_right[:-1] = M_prev[1:]

        M[i] = energy[i] + torch.min(torch.min(M_left, M_prev), M_right)

    return M


def dp_seam(cost: torch.Tensor) -> torch.Tensor:
    """
    Backtrack the optimal vertical seam through a cost table.

    Starts from the cheapest entry of the last row (smallest column on
    ties) and walks upward to the cheapest of the three cells above.

    Args:
        cost: Cost table (H, W) from cumulative_cost

    Returns:
        Seam indices (H,) with column index per row
    """
    cost = _as_float_map(cost)
    H, W = cost.shape

    seam = torch.zeros(H, dtype=torch.long)
    # torch.argmin returns the first minimal index
    seam[-1] = torch.argmin(cost[-1])

    for i in range(H - 2, -1, -1):
        seam[i] = _next_column(cost[i], seam[i + 1].item())

    return seam


def greedy_seam(energy: torch.Tensor) -> torch.Tensor:
    """
    Compute a vertical seam greedily from raw energy.

    Args:
        energy: Energy map (H, W)

    Returns:
        Seam indices (H,) with column index per row
    """
    energy = _as_float_map(energy)
    H, W = energy.shape

    seam = torch.zeros(H, dtype=torch.long)
    seam[0] = torch.argmin(energy[0])

    for i in range(1, H):
        seam[i] = _next_column(energy[i], seam[i - 1].item())

    return seam


def seam_energy(energy: torch.Tensor, seam: torch.Tensor) -> float:
    """Total energy along a vertical seam."""
    rows = torch.arange(energy.shape[0])
    return energy[rows, torch.as_tensor(seam, dtype=torch.long)].sum().item()


class Strategy(enum.Enum):
    """Seam search algorithm."""

    OPTIMAL = 'optimal'
    GREEDY = 'greedy'

    def find_seam(self, energy: torch.Tensor) -> torch.Tensor:
        """Find a vertical seam in energy with this strategy."""
        if self is Strategy.OPTIMAL:
            return dp_seam(cumulative_cost(energy))
        return greedy_seam(energy)


def remove_seam(grid: PixelGrid,
                seam: Union[torch.Tensor, Sequence[int]]) -> PixelGrid:
    """
    Remove a vertical seam from a grid.

    Pixels left of seam[y] are kept, the pixel at seam[y] is dropped and
    pixels right of it shift one column left.

    Args:
        grid: PixelGrid (C, H, W)
        seam: Column index per row (H,)

    Returns:
        New PixelGrid (C, H, W - 1)
    """
    seam = torch.as_tensor(seam)
    if seam.is_floating_point() or seam.is_complex() or seam.dtype == torch.bool:
        raise InvalidArgumentError(f"Seam indices must be integers, got {seam.dtype}")
    seam = seam.to(torch.long)
    C, H, W = grid.pixels.shape

    if seam.dim() != 1 or seam.shape[0] != H:
        raise InvalidArgumentError(
            f"Seam must have one index per row ({H}), got shape {tuple(seam.shape)}")
    if H > 0 and (seam.min().item() < 0 or seam.max().item() >= W):
        raise InvalidArgumentError(
            f"Seam indices must lie in [0, {W}), got [{seam.min().item()}, {seam.max().item()}]")

    keep = torch.ones(H, W, dtype=torch.bool)
    keep[torch.arange(H), seam] = False

    # Boolean indexing walks rows in order, so a reshape restores the layout
    carved = grid.pixels[:, keep].reshape(C, H, W - 1)

    return PixelGrid(carved)
