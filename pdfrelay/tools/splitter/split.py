"""Split tool producing one PDF per page range expression."""

from __future__ import annotations

from typing import Sequence

from ...core.page_ranges import parse_page_range
from ...core.utils import get_logger, writer_to_bytes
from ...exceptions import InvalidOptionError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfrelay.tools.split")


def build_part_filename(index: int) -> str:
    """Return the archive entry name for the ``index``-th (1-based) split output."""

    return f"part-{index}.pdf"


@register_tool("split")
class SplitTool(BaseTool):
    name = "split"

    def run(self) -> list[bytes]:
        context = self.context
        page_ranges: Sequence[str] | None = context.config.get("page_ranges")
        if not page_ranges:
            raise InvalidOptionError("At least one page range is required")

        document = context.ensure_document()
        total_pages = document.page_count
        reader = document.reader

        outputs: list[bytes] = []
        for position, expression in enumerate(page_ranges, start=1):
            indices = parse_page_range(expression, total_pages)
            writer = document.empty_writer()
            for page_index in indices:
                writer.add_page(reader.pages[page_index])
            if not indices:
                LOGGER.debug("Range %r selected no pages; writing an empty document", expression)
            LOGGER.debug("Writing %d page(s) for range %d (%r)", len(indices), position, expression)
            outputs.append(writer_to_bytes(writer))

        context.resources["result"] = outputs
        return outputs
