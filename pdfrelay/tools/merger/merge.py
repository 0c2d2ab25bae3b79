"""Merge tool combining several uploaded PDFs into one document."""

from __future__ import annotations

from typing import Sequence

from pypdf import PdfWriter

from ...core.document import load_document
from ...core.utils import get_logger, writer_to_bytes
from ...exceptions import MissingInputError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfrelay.tools.merge")


@register_tool("merge")
class MergeTool(BaseTool):
    """Append every page of each input, in order, into a single PDF.

    Metadata is copied from the first input. When ``bookmarks`` is configured
    an outline item pointing at the first page of each input is added; missing
    or blank titles fall back to ``Document N``.
    """

    name = "merge"

    def run(self) -> bytes:
        context = self.context
        documents = context.documents
        if len(documents) < 2:
            raise MissingInputError("At least 2 PDF files are required")

        bookmarks: Sequence[str] | None = context.config.get("bookmarks")
        writer = PdfWriter()
        bookmark_targets: list[tuple[str, int]] = []

        for index, data in enumerate(documents):
            document = load_document(data)
            start_page_index = len(writer.pages)
            LOGGER.debug("Adding %d page(s) from input %d", document.page_count, index + 1)
            for page in document.reader.pages:
                writer.add_page(page)

            if index == 0:
                metadata = document.metadata()
                if metadata:
                    writer.add_metadata(metadata)

            if bookmarks is not None:
                title = bookmarks[index] if index < len(bookmarks) else None
                bookmark_targets.append((title or f"Document {index + 1}", start_page_index))

        for title, page_index in bookmark_targets:
            if page_index < len(writer.pages):
                writer.add_outline_item(title, page_index)

        LOGGER.debug("Merged %d PDFs into %d page(s)", len(documents), len(writer.pages))
        result = writer_to_bytes(writer)
        context.resources["result"] = result
        return result
