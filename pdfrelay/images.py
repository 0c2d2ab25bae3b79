"""Pack raster images into a PDF, one image per page."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Sequence

from PIL import Image, UnidentifiedImageError
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from .exceptions import MissingInputError, UnsupportedImageError

LOGGER = logging.getLogger("pdfrelay.images")

EMBEDDABLE_FORMATS = {"PNG", "JPEG"}
# Modes that can be written to a PNG without conversion.
PNG_MODES = {"1", "L", "LA", "P", "RGB", "RGBA"}


def _png_mode(image: Image.Image) -> str:
    if image.mode in PNG_MODES:
        return image.mode
    if "A" in image.getbands() or "transparency" in image.info:
        return "RGBA"
    return "RGB"


def normalise_image(data: bytes, position: int = 1) -> tuple[bytes, int, int]:
    """Return embeddable image bytes and the pixel size of ``data``.

    PNG and JPEG buffers in a common colour mode are returned untouched;
    anything else is re-encoded as PNG.
    """

    try:
        with Image.open(BytesIO(data)) as image:
            image.load()
            width, height = image.size
            if image.format in EMBEDDABLE_FORMATS and image.mode in PNG_MODES:
                return data, width, height

            LOGGER.debug(
                "Re-encoding image %d from %s/%s to PNG", position, image.format, image.mode
            )
            converted = image.convert(_png_mode(image))
            buffer = BytesIO()
            converted.save(buffer, format="PNG")
            return buffer.getvalue(), width, height
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise UnsupportedImageError(f"Unsupported or corrupt image at position {position}: {exc}") from exc


def pack_images(images: Sequence[bytes]) -> bytes:
    """Build a PDF with one page per image, sized 1pt per pixel, in input order."""

    if not images:
        raise MissingInputError("At least one image is required")

    output = BytesIO()
    pdf = canvas.Canvas(output)
    for position, data in enumerate(images, start=1):
        embedded, width, height = normalise_image(data, position)
        pdf.setPageSize((width, height))
        pdf.drawImage(ImageReader(BytesIO(embedded)), 0, 0, width=width, height=height, mask="auto")
        pdf.showPage()
    pdf.save()

    LOGGER.info("Packed %d image(s) into a PDF", len(images))
    return output.getvalue()


__all__ = ["normalise_image", "pack_images"]
