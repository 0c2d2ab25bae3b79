"""Core building blocks shared by every pdfrelay tool."""

from __future__ import annotations

from .document import PdfDocument, load_document
from .page_ranges import ALL_PAGES, parse_page_range, resolve_pages
from .utils import configure_logging, get_logger, writer_to_bytes

__all__ = [
    "ALL_PAGES",
    "PdfDocument",
    "configure_logging",
    "get_logger",
    "load_document",
    "parse_page_range",
    "resolve_pages",
    "writer_to_bytes",
]
