"""Local PDF transform engine built on the pluggable tool registry."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Mapping, Sequence

from .models import TransformRequest
from .tools import load_builtin_plugins
from .tools.common.interfaces import TransformContext
from .tools.common.pipeline import ToolRegistry, registry, run_tool
from .tools.compressor import CompressionResult
from .tools.inspector import PdfInfo

LOGGER = logging.getLogger("pdfrelay.engine")

load_builtin_plugins()


class PdfTransformEngine:
    """Run PDF-to-PDF transforms on in-memory buffers.

    Every call loads its own document, mutates a fresh writer and returns the
    serialised result. Nothing is shared between calls, so a single engine can
    serve concurrent requests.
    """

    def __init__(self, *, tools: ToolRegistry | None = None) -> None:
        self.tools = tools or registry

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def split(self, data: bytes, page_ranges: Sequence[str]) -> list[bytes]:
        return self._run("split", data, page_ranges=list(page_ranges))

    def rotate(self, data: bytes, angle: int | str, pages: str | None = None) -> bytes:
        return self._run("rotate", data, angle=angle, pages=pages)

    def encrypt(
        self,
        data: bytes,
        user_password: str,
        owner_password: str | None = None,
        permissions: Mapping[str, bool] | None = None,
    ) -> bytes:
        return self._run(
            "encrypt",
            data,
            user_password=user_password,
            owner_password=owner_password,
            permissions=permissions,
        )

    def decrypt(self, data: bytes, password: str) -> bytes:
        return self._run("decrypt", data, password=password)

    def watermark(self, data: bytes, text: str, options: Mapping[str, Any] | None = None) -> bytes:
        return self._run("watermark", data, text=text, options=options)

    def compress(self, data: bytes) -> CompressionResult:
        return self._run("compress", data)

    def info(self, data: bytes) -> PdfInfo:
        return self._run("info", data)

    def extract_text(self, data: bytes) -> str:
        return self._run("extract-text", data)

    def merge(self, documents: Sequence[bytes], bookmarks: Sequence[str] | None = None) -> bytes:
        context = TransformContext(documents=list(documents), config={"bookmarks": bookmarks})
        return self._execute("merge", context)

    def apply(self, data: bytes, request: TransformRequest) -> Any:
        """Dispatch a validated request model to the tool it names."""

        context = TransformContext(data=data, config=request.tool_config())
        return self._execute(request.tool, context)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _run(self, name: str, data: bytes, **config: Any) -> Any:
        return self._execute(name, TransformContext(data=data, config=config))

    def _execute(self, name: str, context: TransformContext) -> Any:
        started = perf_counter()
        result = run_tool(name, context, tools=self.tools)
        LOGGER.info("Completed %s in %.1f ms", name, (perf_counter() - started) * 1000)
        return result


__all__ = ["PdfTransformEngine"]
