"""Rotate tool applying an additive rotation to selected pages."""

from __future__ import annotations

from pypdf.generic import NameObject, NumberObject

from ...core.page_ranges import resolve_pages
from ...core.utils import get_logger, writer_to_bytes
from ...exceptions import InvalidOptionError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfrelay.tools.rotate")

VALID_ANGLES = (90, 180, 270)


def coerce_angle(value: object) -> int:
    """Return ``value`` as one of :data:`VALID_ANGLES`."""

    try:
        angle = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise InvalidOptionError(f"Rotation angle must be one of {VALID_ANGLES}, got {value!r}") from exc
    if angle not in VALID_ANGLES:
        raise InvalidOptionError(f"Rotation angle must be one of {VALID_ANGLES}, got {value!r}")
    return angle


@register_tool("rotate")
class RotateTool(BaseTool):
    name = "rotate"

    def run(self) -> bytes:
        context = self.context
        angle = coerce_angle(context.config.get("angle"))
        selection = context.config.get("pages")

        document = context.ensure_document()
        writer = document.clone_writer()
        targets = list(dict.fromkeys(resolve_pages(selection, len(writer.pages))))

        for page_index in targets:
            page = writer.pages[page_index]
            current = int(page.rotation)
            page[NameObject("/Rotate")] = NumberObject((current + angle) % 360)

        LOGGER.debug("Rotated %d page(s) by %d degrees", len(targets), angle)
        result = writer_to_bytes(writer)
        context.resources["result"] = result
        return result
