"""Watermark tool stamping a text overlay onto every page."""

from __future__ import annotations

from io import BytesIO
from typing import Any, Mapping

from pypdf import PageObject, PdfReader
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ...core.utils import get_logger, writer_to_bytes
from ...exceptions import InvalidOptionError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfrelay.tools.watermark")

FONT_NAME = "Helvetica"
TEXT_GREY = (0.5, 0.5, 0.5)
EDGE_OFFSET = 50.0

DEFAULT_OPTIONS: dict[str, Any] = {
    "opacity": 0.3,
    "font_size": 48.0,
    "rotation": -45.0,
    "position": "center",
}
POSITIONS = ("center", "top", "bottom", "diagonal")


def resolve_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge ``options`` over :data:`DEFAULT_OPTIONS`, ignoring ``None`` values."""

    resolved = dict(DEFAULT_OPTIONS)
    if options:
        resolved.update({key: value for key, value in options.items() if value is not None})

    if not 0.0 <= float(resolved["opacity"]) <= 1.0:
        raise InvalidOptionError("Watermark opacity must be between 0 and 1")
    if float(resolved["font_size"]) <= 0:
        raise InvalidOptionError("Watermark font size must be positive")
    if resolved["position"] not in POSITIONS:
        raise InvalidOptionError(f"Watermark position must be one of {POSITIONS}")
    return resolved


def text_origin(
    width: float,
    height: float,
    text_width: float,
    font_size: float,
    position: str,
) -> tuple[float, float]:
    """Return the drawing origin of the watermark on a ``width`` x ``height`` page.

    The text is always centred horizontally. ``top`` and ``bottom`` sit
    :data:`EDGE_OFFSET` points from the respective edge; ``center`` and
    ``diagonal`` are vertically centred.
    """

    x = width / 2 - text_width / 2
    y = height / 2 - font_size / 2
    if position == "top":
        y = height - font_size - EDGE_OFFSET
    elif position == "bottom":
        y = EDGE_OFFSET
    return x, y


def build_overlay(
    text: str,
    width: float,
    height: float,
    options: Mapping[str, Any],
) -> PageObject:
    """Draw ``text`` on a transparent page of the given size and return it."""

    font_size = float(options["font_size"])
    text_width = stringWidth(text, FONT_NAME, font_size)
    x, y = text_origin(width, height, text_width, font_size, options["position"])

    buffer = BytesIO()
    overlay = canvas.Canvas(buffer, pagesize=(width, height), pageCompression=0)
    overlay.setFont(FONT_NAME, font_size)
    overlay.setFillColorRGB(*TEXT_GREY)
    overlay.setFillAlpha(float(options["opacity"]))
    overlay.translate(x, y)
    overlay.rotate(float(options["rotation"]))
    overlay.drawString(0, 0, text)
    overlay.showPage()
    overlay.save()

    buffer.seek(0)
    return PdfReader(buffer).pages[0]


@register_tool("watermark")
class WatermarkTool(BaseTool):
    name = "watermark"

    def run(self) -> bytes:
        context = self.context
        text = context.config.get("text")
        if not text:
            raise InvalidOptionError("Watermark text is required")
        options = resolve_options(context.config.get("options"))

        document = context.ensure_document()
        writer = document.clone_writer()

        overlays: dict[tuple[float, float, float, float], PageObject] = {}
        for page in writer.pages:
            box = page.mediabox
            key = (float(box.left), float(box.bottom), float(box.width), float(box.height))
            overlay = overlays.get(key)
            if overlay is None:
                overlay = build_overlay(text, key[2], key[3], options)
                overlays[key] = overlay
            if key[0] or key[1]:
                page.merge_translated_page(overlay, key[0], key[1], expand=False)
            else:
                page.merge_page(overlay, expand=False)

        LOGGER.debug(
            "Watermarked %d page(s) at %s with opacity %s",
            len(writer.pages),
            options["position"],
            options["opacity"],
        )
        result = writer_to_bytes(writer)
        context.resources["result"] = result
        return result
