"""Source image loading.

Decodes any image Pillow understands and normalises it to the RGB raster
size of the transmit mode.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from .modes import SCOTTIE_1

logger = logging.getLogger('sstv_encoder.image_source')


def prepare_image(img: Image.Image, width: int = SCOTTIE_1.width,
                  height: int = SCOTTIE_1.height) -> np.ndarray:
    """Convert to RGB and resize to exactly width x height.

    Aspect ratio is not preserved; the transmit raster is fixed.

    Returns:
        uint8 array of shape (height, width, 3).
    """
    img = img.convert('RGB')
    if img.size != (width, height):
        img = img.resize((width, height), resample=Image.LANCZOS)
    return np.array(img, dtype=np.uint8)


def load_image(path: str | Path, width: int = SCOTTIE_1.width,
               height: int = SCOTTIE_1.height) -> np.ndarray:
    """Open an image file and prepare it for transmission.

    Raises:
        FileNotFoundError: If the path does not exist.
        PIL.UnidentifiedImageError: If the file is not a decodable image.
    """
    with Image.open(path) as img:
        logger.info(f"Loaded {path} ({img.width}x{img.height}, {img.mode})")
        return prepare_image(img, width, height)
