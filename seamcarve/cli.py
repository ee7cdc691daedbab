"""
Command line for content-aware resizing.

Run:
    seamcarve photo 500 400 --preview output/comparison.png

Writes one output image per strategy so the optimal and greedy results
can be compared.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .carving import resize
from .config import Config
from .exceptions import SeamCarvingError
from .io import load_image, resolve_image_path, save_image
from .logging_config import setup_logging
from .preview import save_comparison
from .seam import Strategy

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarve',
        description="Shrink an image by removing low-energy seams"
    )
    parser.add_argument(
        'image',
        type=str,
        help=f"Input image (a bare name gets {Config.DEFAULT_EXTENSION} appended)"
    )
    parser.add_argument('width', type=int, help='Target width')
    parser.add_argument('height', type=int, help='Target height')
    parser.add_argument(
        '--strategy',
        choices=[s.value for s in Strategy] + ['both'],
        default='both',
        help='Seam search to run (default: both)'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default='.',
        help='Directory for the carved images (default: current directory)'
    )
    parser.add_argument(
        '--preview',
        type=str,
        help='Also save a side-by-side comparison figure to this file'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Log level (default: INFO)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.strategy == 'both':
        strategies = list(Strategy)
    else:
        strategies = [Strategy(args.strategy)]

    output_dir = Path(args.output_dir)

    try:
        original = load_image(resolve_image_path(args.image))
        results = {}
        for strategy in strategies:
            carved = resize(original, args.width, args.height, strategy)
            name = Config.OUTPUT_TEMPLATE.format(strategy=strategy.value,
                                                 width=carved.width,
                                                 height=carved.height)
            save_image(carved, output_dir / name)
            results[strategy] = carved
    except SeamCarvingError as exc:
        logger.error("%s", exc)
        return 1

    if args.preview:
        save_comparison(original, results, args.preview)

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
