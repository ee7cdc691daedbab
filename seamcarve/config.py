"""Global configuration for seam carving."""


class Config:
    """Global configuration."""

    # Carving
    PROGRESS_EVERY = 20  # Log progress every N seams

    # Files
    DEFAULT_EXTENSION = '.png'
    OUTPUT_TEMPLATE = 'output_{strategy}_{width}x{height}.png'

    # Preview
    PREVIEW_PANEL_SIZE = 6  # Inches per panel

    # Logging
    LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
    LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
