"""In-memory PDF document handle built on :mod:`pypdf`."""

from __future__ import annotations

import logging
from io import BytesIO

from pypdf import PdfReader, PdfWriter
from pypdf.generic import RectangleObject

from ..exceptions import InvalidPasswordError, PdfLoadError

LOGGER = logging.getLogger("pdfrelay.core")


class PdfDocument:
    """A parsed PDF owned by a single request.

    The handle is created from raw bytes and never cached; callers derive new
    :class:`~pypdf.PdfWriter` instances from it and serialise those.
    """

    def __init__(self, data: bytes, *, password: str | None = None) -> None:
        if not data:
            raise PdfLoadError("PDF buffer is empty")

        self.size_bytes = len(data)
        try:
            self.reader = PdfReader(BytesIO(data))
        except Exception as exc:  # pragma: no cover - pypdf exceptions vary
            raise PdfLoadError(f"Unable to read PDF: {exc}") from exc

        self.is_encrypted = bool(self.reader.is_encrypted)
        if self.is_encrypted:
            self._decrypt(password)

    def _decrypt(self, password: str | None) -> None:
        try:
            status = self.reader.decrypt(password or "")
        except Exception as exc:  # pragma: no cover - decrypt errors vary
            raise PdfLoadError(f"Unable to decrypt PDF: {exc}") from exc

        if status == 0:
            if password:
                raise InvalidPasswordError("Incorrect password for encrypted PDF")
            raise PdfLoadError("PDF is encrypted and requires a password")
        LOGGER.debug("Opened encrypted PDF (%s)", getattr(status, "name", status))

    @property
    def page_count(self) -> int:
        try:
            return len(self.reader.pages)
        except Exception as exc:  # pragma: no cover - malformed page trees vary
            raise PdfLoadError(f"Unable to read PDF page tree: {exc}") from exc

    def page_size(self, index: int = 0) -> tuple[float, float]:
        """Return ``(width, height)`` in points of the page at ``index``."""

        box: RectangleObject = self.reader.pages[index].mediabox
        return float(box.width), float(box.height)

    def metadata(self) -> dict[str, str]:
        """Return the document information dictionary as plain strings."""

        raw = self.reader.metadata
        if not raw:
            return {}
        return {
            key: str(value)
            for key, value in raw.items()
            if isinstance(key, str) and value is not None
        }

    def clone_writer(self) -> PdfWriter:
        """Return a writer holding a full copy of this document."""

        writer = PdfWriter(clone_from=self.reader)
        return writer

    def empty_writer(self) -> PdfWriter:
        """Return a writer with no pages that carries this document's metadata."""

        writer = PdfWriter()
        metadata = self.metadata()
        if metadata:
            writer.add_metadata(metadata)
        return writer


def load_document(data: bytes, *, password: str | None = None) -> PdfDocument:
    """Parse ``data`` into a :class:`PdfDocument`."""

    return PdfDocument(data, password=password)


__all__ = ["PdfDocument", "load_document"]
