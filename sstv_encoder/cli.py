"""Command-line entry point: ``sstv-encode IMAGE [OUT]``."""

from __future__ import annotations

import argparse
import logging
import sys

from PIL import UnidentifiedImageError

from .constants import DEFAULT_OUTPUT_PATH
from .encoder import encode_image_file

logger = logging.getLogger('sstv_encoder.cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sstv-encode',
        description="Encode an image as Scottie 1 SSTV audio (44.1 kHz float WAV).",
    )
    parser.add_argument("image", help="Input image path")
    parser.add_argument("out_path", nargs="?", default=DEFAULT_OUTPUT_PATH,
                        help=f"Output WAV path (default: {DEFAULT_OUTPUT_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        result = encode_image_file(args.image, args.out_path)
    except (OSError, UnidentifiedImageError, RuntimeError) as e:
        logger.error(f"Encoding failed: {e}")
        return 1

    logger.info(f"Wrote {result.output_path} ({result.duration_s:.1f} s)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
