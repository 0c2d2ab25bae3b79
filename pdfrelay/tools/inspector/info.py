"""Information and text extraction tools for uploaded PDFs."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from pypdf import DocumentInformation

from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfrelay.tools.info")


@dataclasses.dataclass(slots=True)
class PdfInfo:
    """Describes page geometry, size and metadata of a PDF."""

    pages: int
    file_size: int
    page_size: str | None = None
    width: float | None = None
    height: float | None = None
    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: str | None = None
    creator: str | None = None
    producer: str | None = None
    creation_date: str | None = None
    modification_date: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


def _text_field(metadata: DocumentInformation, key: str) -> str | None:
    value = metadata.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _date_field(metadata: DocumentInformation, attribute: str, key: str) -> str | None:
    try:
        value: datetime | None = getattr(metadata, attribute)
    except ValueError as exc:
        LOGGER.warning("Ignoring unparseable %s %r: %s", key, metadata.get(key), exc)
        return None
    return value.isoformat() if value is not None else None


@register_tool("info")
class InfoTool(BaseTool):
    name = "info"

    def run(self) -> PdfInfo:
        context = self.context
        document = context.ensure_document()

        info = PdfInfo(pages=document.page_count, file_size=document.size_bytes)
        if info.pages:
            width, height = document.page_size(0)
            info.width = width
            info.height = height
            info.page_size = f"{round(width)} x {round(height)} pts"

        metadata = document.reader.metadata
        if metadata:
            info.title = _text_field(metadata, "/Title")
            info.author = _text_field(metadata, "/Author")
            info.subject = _text_field(metadata, "/Subject")
            info.keywords = _text_field(metadata, "/Keywords")
            info.creator = _text_field(metadata, "/Creator")
            info.producer = _text_field(metadata, "/Producer")
            info.creation_date = _date_field(metadata, "creation_date", "/CreationDate")
            info.modification_date = _date_field(metadata, "modification_date", "/ModDate")

        LOGGER.debug("PDF info: %s", info)
        context.resources["result"] = info
        return info


@register_tool("extract-text")
class ExtractTextTool(BaseTool):
    name = "extract-text"

    def run(self) -> str:
        context = self.context
        document = context.ensure_document()

        chunks = [page.extract_text() or "" for page in document.reader.pages]
        text = "\n\n".join(chunk.strip() for chunk in chunks)
        LOGGER.debug("Extracted %d character(s) from %d page(s)", len(text), len(chunks))
        context.resources["result"] = text
        return text
