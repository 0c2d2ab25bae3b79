"""Routes forwarding document conversions to the remote renderer."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from pydantic import BaseModel

from pdfrelay.exceptions import MissingInputError
from pdfrelay.images import pack_images
from pdfrelay.models import parse_request
from pdfrelay.render import ConversionOptions, HtmlRenderOptions, Renderer
from pdfrelay.settings import Settings

from ..dependencies import get_renderer, get_settings
from ..uploads import attachment, file_stem, read_upload, read_uploads, safe_filename

LOGGER = logging.getLogger("pdfrelay.api")

router = APIRouter(prefix="/convert", tags=["convert"])

OFFICE_KINDS = ("docx", "xlsx", "pptx", "office")


class HtmlToPdfBody(BaseModel):
    html: str | None = None
    url: str | None = None
    options: HtmlRenderOptions | None = None


class UrlToPdfBody(BaseModel):
    url: str | None = None
    options: HtmlRenderOptions | None = None


class MarkdownToPdfBody(BaseModel):
    markdown: str | None = None
    options: HtmlRenderOptions | None = None


def _json_object(payload: Any) -> Any:
    # No body reads as an empty request.
    return {} if payload is None else payload


async def office_to_pdf(
    file: UploadFile | None = File(None, description="Office document to convert."),
    options: str | None = Form(None, description="Optional JSON encoded conversion options."),
    renderer: Renderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Convert a Word, Excel, PowerPoint or OpenDocument upload to PDF."""

    data = await read_upload(file, limit=settings.max_upload_bytes)
    conversion_options = parse_request(ConversionOptions, options) if options else None
    filename = safe_filename(file.filename, "document")

    pdf = await renderer.office_to_pdf(data, filename, conversion_options)
    LOGGER.info("Converted %s to PDF (%d bytes)", filename, len(pdf))
    return attachment(pdf, f"{file_stem(filename)}.pdf")


for kind in OFFICE_KINDS:
    router.add_api_route(
        f"/{kind}-to-pdf",
        office_to_pdf,
        methods=["POST"],
        name=f"{kind}_to_pdf",
        summary=f"Convert {kind} documents to PDF",
    )


@router.post("/html-to-pdf", summary="Render HTML markup or a URL to PDF")
async def html_to_pdf(payload: Any = Body(None), renderer: Renderer = Depends(get_renderer)) -> Response:
    body = parse_request(HtmlToPdfBody, _json_object(payload))
    if not body.html and not body.url:
        raise MissingInputError("Either html or url must be provided")
    pdf = await renderer.html_to_pdf(html=body.html, url=body.url, options=body.options)
    return attachment(pdf, "converted.pdf")


@router.post("/url-to-pdf", summary="Render a web page to PDF")
async def url_to_pdf(payload: Any = Body(None), renderer: Renderer = Depends(get_renderer)) -> Response:
    body = parse_request(UrlToPdfBody, _json_object(payload))
    if not body.url:
        raise MissingInputError("URL is required")
    pdf = await renderer.html_to_pdf(url=body.url, options=body.options)
    return attachment(pdf, "webpage.pdf")


@router.post("/markdown-to-pdf", summary="Render Markdown to PDF")
async def markdown_to_pdf(payload: Any = Body(None), renderer: Renderer = Depends(get_renderer)) -> Response:
    body = parse_request(MarkdownToPdfBody, _json_object(payload))
    if not body.markdown:
        raise MissingInputError("Markdown content is required")
    pdf = await renderer.markdown_to_pdf(body.markdown, body.options)
    return attachment(pdf, "document.pdf")


@router.post("/images-to-pdf", summary="Combine images into a PDF")
async def images_to_pdf(
    files: List[UploadFile] | None = File(None, description="Images, one per page, in order."),
    settings: Settings = Depends(get_settings),
) -> Response:
    images = await read_uploads(files, limit=settings.max_upload_bytes, max_files=settings.max_images)
    pdf = await run_in_threadpool(pack_images, images)
    return attachment(pdf, "images.pdf")


@router.post("/pdf-to-pdfa", summary="Convert a PDF to PDF/A-2b")
async def pdf_to_pdfa(
    file: UploadFile | None = File(None, description="PDF to archive."),
    renderer: Renderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> Response:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    filename = safe_filename(file.filename, "document.pdf")
    pdf = await renderer.convert_to_pdfa(data, filename)
    return attachment(pdf, f"{file_stem(filename)}-pdfa.pdf")


__all__ = ["router"]
