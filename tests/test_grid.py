"""Tests for the PixelGrid buffer."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from seamcarve.grid import PixelGrid
from seamcarve.exceptions import InvalidArgumentError

from conftest import make_random_grid, make_index_grid


class TestPixelGrid:
    def test_dimensions(self):
        grid = PixelGrid(torch.zeros(3, 4, 7, dtype=torch.uint8))
        assert (grid.width, grid.height, grid.channels) == (7, 4, 3)

    def test_rejects_non_uint8(self):
        with pytest.raises(InvalidArgumentError):
            PixelGrid(torch.zeros(3, 4, 4))

    def test_rejects_wrong_rank(self):
        with pytest.raises(InvalidArgumentError):
            PixelGrid(torch.zeros(4, 4, dtype=torch.uint8))

    def test_from_buffer_interleaves_channels(self):
        """Buffer is row-major with the channels of each pixel adjacent."""
        # 2x1 image: pixel 0 = (1, 2, 3), pixel 1 = (4, 5, 6)
        grid = PixelGrid.from_buffer(bytes([1, 2, 3, 4, 5, 6]), width=2, height=1)
        assert grid.pixels[:, 0, 0].tolist() == [1, 2, 3]
        assert grid.pixels[:, 0, 1].tolist() == [4, 5, 6]

    def test_buffer_length_mismatch(self):
        with pytest.raises(InvalidArgumentError):
            PixelGrid.from_buffer(bytes(10), width=2, height=2, channels=3)

    def test_to_buffer_length(self):
        grid = make_random_grid(5, 6)
        assert len(grid.to_buffer()) == 5 * 6 * 3

    def test_from_array_grayscale(self):
        array = np.arange(12, dtype=np.uint8).reshape(3, 4)
        grid = PixelGrid.from_array(array)
        assert (grid.width, grid.height, grid.channels) == (4, 3, 1)
        assert grid.pixels[0, 2, 1].item() == 9

    def test_to_array_is_a_copy(self):
        """Writing to the returned array leaves a one-channel grid untouched."""
        grid = PixelGrid(torch.zeros(1, 2, 2, dtype=torch.uint8))
        array = grid.to_array()
        array[0, 0, 0] = 99
        assert grid.pixels[0, 0, 0].item() == 0

    def test_from_array_copies(self):
        array = np.zeros((2, 3), dtype=np.uint8)
        grid = PixelGrid.from_array(array)
        array[0, 0] = 99
        assert grid.pixels[0, 0, 0].item() == 0

    def test_clone_is_independent(self):
        grid = make_random_grid(4, 4)
        copy = grid.clone()
        copy.pixels[0, 0, 0] = 255 - grid.pixels[0, 0, 0]
        assert not grid.equals(copy)


class TestTranspose:
    def test_swaps_dimensions(self):
        grid = make_random_grid(5, 9)
        transposed = grid.transpose()
        assert (transposed.width, transposed.height) == (5, 9)

    def test_moves_whole_pixels(self):
        """Pixel (y, x) lands at (x, y) with all of its channels."""
        grid = make_random_grid(4, 6)
        transposed = grid.transpose()
        for y in range(4):
            for x in range(6):
                assert torch.equal(transposed.pixels[:, x, y], grid.pixels[:, y, x])

    def test_round_trip_is_identity(self):
        grid = make_random_grid(7, 3)
        assert grid.transpose().transpose().equals(grid)

    def test_index_grid(self):
        grid = make_index_grid(2, 3)
        assert grid.transpose().pixels[0].tolist() == [[0, 10], [1, 11], [2, 12]]
