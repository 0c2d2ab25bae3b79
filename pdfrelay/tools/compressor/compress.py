"""Plugin exposing container-level PDF compression through the registry."""

from __future__ import annotations

from dataclasses import dataclass

from ...core.utils import get_logger, writer_to_bytes
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfrelay.tools.compress")


@dataclass(frozen=True)
class CompressionResult:
    """Compressed PDF bytes together with before/after sizes."""

    data: bytes
    original_size: int

    @property
    def compressed_size(self) -> int:
        return len(self.data)

    @property
    def saved_bytes(self) -> int:
        return self.original_size - self.compressed_size


@register_tool("compress")
class CompressTool(BaseTool):
    """Re-serialise a PDF with compressed content streams and shared objects.

    Embedded images are left untouched; only the container is optimised.
    """

    name = "compress"

    def run(self) -> CompressionResult:
        context = self.context
        document = context.ensure_document()
        writer = document.clone_writer()

        for page in writer.pages:
            page.compress_content_streams()
        writer.compress_identical_objects(remove_identicals=True, remove_orphans=True)

        result = CompressionResult(data=writer_to_bytes(writer), original_size=document.size_bytes)
        LOGGER.debug(
            "Compressed PDF from %d to %d byte(s)",
            result.original_size,
            result.compressed_size,
        )
        context.resources["result"] = result
        return result
