"""Async client for the Gotenberg headless rendering service."""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

import httpx

from ..exceptions import MissingInputError, RemoteRenderError
from .options import ConversionOptions, HtmlRenderOptions

LOGGER = logging.getLogger("pdfrelay.render")

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 120.0
DEFAULT_PDFA = "PDF/A-2b"

# Gotenberg only converts an index.html; markdown files are pulled in by name.
MARKDOWN_WRAPPER = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Document</title>
  </head>
  <body>
    {{ toHTML "index.md" }}
  </body>
</html>
"""

FilePart = tuple[str, bytes, str]


class Renderer(Protocol):
    """Capability interface for the remote document renderer."""

    async def office_to_pdf(
        self, data: bytes, filename: str, options: ConversionOptions | None = None
    ) -> bytes: ...

    async def html_to_pdf(
        self,
        *,
        html: str | None = None,
        url: str | None = None,
        options: HtmlRenderOptions | None = None,
    ) -> bytes: ...

    async def markdown_to_pdf(
        self, markdown: str, options: HtmlRenderOptions | None = None
    ) -> bytes: ...

    async def convert_to_pdfa(self, data: bytes, filename: str, pdfa: str = DEFAULT_PDFA) -> bytes: ...

    async def health_check(self) -> bool: ...


class GotenbergClient:
    """Forward conversions to a Gotenberg instance over multipart HTTP.

    A fresh :class:`httpx.AsyncClient` is opened per call so the client holds
    no connection state between requests. ``transport`` lets tests substitute
    :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    async def _convert(
        self,
        path: str,
        *,
        files: Sequence[FilePart] = (),
        fields: dict[str, str] | None = None,
        action: str = "conversion",
    ) -> bytes:
        parts: list[tuple[str, Any]] = [("files", part) for part in files]
        # Plain fields are sent as filename-less parts so the body is always multipart.
        parts.extend((name, (None, value.encode("utf-8"))) for name, value in (fields or {}).items())

        try:
            async with self._client() as client:
                response = await client.post(path, files=parts)
        except httpx.TimeoutException as exc:
            raise RemoteRenderError(f"Gotenberg {action} timed out after {self.timeout:g}s") from exc
        except httpx.HTTPError as exc:
            raise RemoteRenderError(f"Gotenberg {action} failed: {exc}") from exc

        if response.is_error:
            LOGGER.error("Gotenberg %s returned %d: %s", path, response.status_code, response.text)
            raise RemoteRenderError(f"Gotenberg {action} failed: {response.text}")

        LOGGER.info("Gotenberg %s produced %d byte(s)", path, len(response.content))
        return response.content

    async def office_to_pdf(
        self, data: bytes, filename: str, options: ConversionOptions | None = None
    ) -> bytes:
        fields = options.form_fields() if options else {}
        return await self._convert(
            "/forms/libreoffice/convert",
            files=[(filename, data, "application/octet-stream")],
            fields=fields,
            action="office conversion",
        )

    async def html_to_pdf(
        self,
        *,
        html: str | None = None,
        url: str | None = None,
        options: HtmlRenderOptions | None = None,
    ) -> bytes:
        fields = options.form_fields() if options else {}
        if html:
            return await self._convert(
                "/forms/chromium/convert/html",
                files=[("index.html", html.encode("utf-8"), "text/html")],
                fields=fields,
                action="HTML to PDF conversion",
            )
        if url:
            return await self._convert(
                "/forms/chromium/convert/url",
                fields={"url": url, **fields},
                action="URL to PDF conversion",
            )
        raise MissingInputError("Either html or url must be provided")

    async def markdown_to_pdf(self, markdown: str, options: HtmlRenderOptions | None = None) -> bytes:
        fields = options.form_fields() if options else {}
        return await self._convert(
            "/forms/chromium/convert/markdown",
            files=[
                ("index.html", MARKDOWN_WRAPPER.encode("utf-8"), "text/html"),
                ("index.md", markdown.encode("utf-8"), "text/markdown"),
            ],
            fields=fields,
            action="Markdown to PDF conversion",
        )

    async def convert_to_pdfa(self, data: bytes, filename: str, pdfa: str = DEFAULT_PDFA) -> bytes:
        return await self._convert(
            "/forms/pdfengines/convert",
            files=[(filename, data, "application/pdf")],
            fields={"pdfa": pdfa},
            action="PDF/A conversion",
        )

    async def health_check(self) -> bool:
        try:
            async with self._client() as client:
                response = await client.get("/health")
        except httpx.HTTPError as exc:
            LOGGER.warning("Gotenberg health check failed: %s", exc)
            return False
        if response.is_error:
            LOGGER.warning("Gotenberg health check returned %d", response.status_code)
            return False
        return True


__all__ = ["DEFAULT_PDFA", "GotenbergClient", "MARKDOWN_WRAPPER", "Renderer"]
