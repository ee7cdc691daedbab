"""Shared test fixtures for the seamcarve test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarve.grid import PixelGrid


@pytest.fixture
def uniform_grid():
    """5x5 RGB grid where every pixel is the same color."""
    return make_uniform_grid(5, 5, (40, 120, 200))


@pytest.fixture
def random_grid():
    """Seeded random 12x16 RGB grid."""
    return make_random_grid(12, 16, seed=42)


def make_uniform_grid(H, W, color=(0, 0, 0)):
    pixels = torch.tensor(color, dtype=torch.uint8).view(-1, 1, 1).expand(len(color), H, W)
    return PixelGrid(pixels.clone())


def make_random_grid(H, W, channels=3, seed=0):
    generator = torch.Generator().manual_seed(seed)
    pixels = torch.randint(0, 256, (channels, H, W), dtype=torch.uint8, generator=generator)
    return PixelGrid(pixels)


def make_index_grid(H, W):
    """Single-channel grid whose value at (y, x) is 10 * y + x."""
    rows = torch.arange(H).unsqueeze(1) * 10
    cols = torch.arange(W).unsqueeze(0)
    return PixelGrid((rows + cols).to(torch.uint8).unsqueeze(0))


def make_vertical_edge_grid(H, W, edge_col):
    """Black left of edge_col, white from edge_col on."""
    pixels = torch.zeros(3, H, W, dtype=torch.uint8)
    pixels[:, :, edge_col:] = 255
    return PixelGrid(pixels)
