"""Exception hierarchy for seam carving."""


class SeamCarvingError(Exception):
    """Base exception for all seam carving errors."""


class InvalidArgumentError(SeamCarvingError, ValueError):
    """Raised for bad target sizes, malformed seams or degenerate grids."""


class ResourceExhaustedError(SeamCarvingError, MemoryError):
    """Raised when a grid, energy map or cost table cannot be allocated."""


class ImageLoadError(SeamCarvingError):
    """Raised when an image file cannot be read or decoded."""
