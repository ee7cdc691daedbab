"""
Pixel grid: the image buffer that seam carving consumes and produces.

Pixels are held as a uint8 tensor of shape (C, H, W). Grids are immutable;
every operation returns a new grid.
"""

from dataclasses import dataclass

import numpy as np
import torch

from .exceptions import InvalidArgumentError


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """
    Decoded image of unsigned 8-bit samples.

    The grid takes ownership of pixels; callers must not write to the
    tensor afterwards. The from_buffer and from_array constructors copy.

    Args:
        pixels: uint8 tensor (C, H, W)
    """

    pixels: torch.Tensor

    def __post_init__(self):
        if self.pixels.dtype != torch.uint8:
            raise InvalidArgumentError(
                f"PixelGrid needs uint8 samples, got {self.pixels.dtype}")
        if self.pixels.dim() != 3:
            raise InvalidArgumentError(
                f"PixelGrid needs a (C, H, W) tensor, got shape {tuple(self.pixels.shape)}")

    @property
    def channels(self) -> int:
        return self.pixels.shape[0]

    @property
    def height(self) -> int:
        return self.pixels.shape[1]

    @property
    def width(self) -> int:
        return self.pixels.shape[2]

    @classmethod
    def from_buffer(cls, buffer: bytes, width: int, height: int,
                    channels: int = 3) -> 'PixelGrid':
        """
        Build a grid from a row-major buffer with interleaved channels.

        Args:
            buffer: width * height * channels bytes
            width: Image width
            height: Image height
            channels: Samples per pixel

        Returns:
            New PixelGrid owning a copy of the samples
        """
        expected = width * height * channels
        if len(buffer) != expected:
            raise InvalidArgumentError(
                f"Buffer holds {len(buffer)} samples, expected {expected} "
                f"for {width}x{height}x{channels}")
        array = np.frombuffer(bytes(buffer), dtype=np.uint8)
        return cls.from_array(array.reshape(height, width, channels))

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PixelGrid':
        """Build a grid from an (H, W, C) or (H, W) uint8 array."""
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        if array.dtype != np.uint8:
            raise InvalidArgumentError(f"Expected uint8 array, got {array.dtype}")
        pixels = torch.tensor(array).permute(2, 0, 1).contiguous()
        return cls(pixels)

    def to_array(self) -> np.ndarray:
        """Return the samples as an (H, W, C) numpy array."""
        return self.pixels.permute(1, 2, 0).numpy().copy()

    def to_buffer(self) -> bytes:
        """Return the row-major, channel-interleaved sample buffer."""
        return self.to_array().tobytes()

    def clone(self) -> 'PixelGrid':
        return PixelGrid(self.pixels.clone())

    def transpose(self) -> 'PixelGrid':
        """
        Swap rows and columns.

        Each pixel moves with its full channel tuple, so transposing twice
        gives back the original grid.
        """
        return PixelGrid(self.pixels.transpose(1, 2).contiguous())

    def equals(self, other: 'PixelGrid') -> bool:
        """True if both grids have the same shape and samples."""
        return torch.equal(self.pixels, other.pixels)

    def __repr__(self):
        return f"PixelGrid(width={self.width}, height={self.height}, channels={self.channels})"
