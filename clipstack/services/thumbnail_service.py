#!/usr/bin/env python3
"""
Thumbnail Service - Shrinks clipboard icons before they are stored
"""
import logging
from io import BytesIO
from typing import Optional

from PIL import Image

logger = logging.getLogger(__name__)


class PillowImageResizer:
    """Image resizing and PNG encoding backed by Pillow"""

    def resize(self, data: bytes, width: int, height: int) -> bytes:
        """
        Scale an image to an exact size

        Args:
            data: Encoded source image in any format Pillow can read
            width: Target width in pixels
            height: Target height in pixels

        Returns:
            Resized image bytes (TIFF format)

        Raises:
            OSError: If the data cannot be decoded as an image
        """
        image = Image.open(BytesIO(data))
        image.load()

        if image.mode not in ("RGB", "RGBA"):
            image = image.convert("RGBA")

        resized = image.resize((width, height), Image.Resampling.LANCZOS)

        output = BytesIO()
        resized.save(output, format="TIFF")
        logger.debug(f"Resized image {image.size} -> {resized.size}")
        return output.getvalue()

    def encode_as_png(self, data: bytes) -> Optional[bytes]:
        """
        Re-encode an image as PNG

        Args:
            data: Encoded source image

        Returns:
            PNG bytes or None on error
        """
        try:
            image = Image.open(BytesIO(data))
            output = BytesIO()
            image.save(output, format="PNG", optimize=True)
            return output.getvalue()
        except (OSError, ValueError) as e:
            logger.error(f"Error encoding image as PNG: {e}")
            return None
