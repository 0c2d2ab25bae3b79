"""Routes running local PDF transforms through :class:`PdfTransformEngine`."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from pydantic.alias_generators import to_camel

from pdfrelay.engine import PdfTransformEngine
from pdfrelay.exceptions import MissingInputError
from pdfrelay.models import (
    CompressRequest,
    DecryptRequest,
    EncryptRequest,
    RotateRequest,
    SplitRequest,
    WatermarkRequest,
    parse_request,
)
from pdfrelay.settings import Settings
from pdfrelay.tools.splitter import build_part_filename

from ..dependencies import get_engine, get_settings
from ..uploads import ZIP_MEDIA_TYPE, attachment, file_stem, read_upload, read_uploads, zip_outputs

LOGGER = logging.getLogger("pdfrelay.api")

router = APIRouter(prefix="/pdf", tags=["pdf"])

REQUEST_FIELD_DESCRIPTION = "JSON encoded transform options."


def _require(raw: str | None, field_name: str = "request") -> str:
    if not raw:
        raise MissingInputError(f"The '{field_name}' field is required")
    return raw


@router.post("/merge", summary="Merge PDFs in upload order")
async def merge_documents(
    files: List[UploadFile] | None = File(None, description="PDF files to merge."),
    add_bookmarks: bool = Form(False, description="When true, add a bookmark for each merged document."),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    documents = await read_uploads(
        files,
        limit=settings.max_upload_bytes,
        max_files=settings.max_images,
        minimum=2,
        missing_message="At least 2 PDF files are required",
    )
    bookmarks = None
    if add_bookmarks:
        bookmarks = [file_stem(upload.filename, f"Document {index}") for index, upload in enumerate(files, start=1)]

    merged = await run_in_threadpool(engine.merge, documents, bookmarks)
    return attachment(merged, "merged.pdf")


@router.post("/split", summary="Split a PDF by page range expressions")
async def split_document(
    file: UploadFile | None = File(None, description="Source PDF."),
    request: str | None = Form(None, description=REQUEST_FIELD_DESCRIPTION),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    split_request = parse_request(SplitRequest, _require(request))

    parts: list[bytes] = await run_in_threadpool(engine.apply, data, split_request)
    if len(parts) == 1:
        return attachment(parts[0], "split.pdf")

    archive = zip_outputs((build_part_filename(index), part) for index, part in enumerate(parts, start=1))
    return attachment(archive, "split-pdfs.zip", media_type=ZIP_MEDIA_TYPE)


@router.post("/rotate", summary="Rotate pages of a PDF")
async def rotate_document(
    file: UploadFile | None = File(None, description="Source PDF."),
    request: str | None = Form(None, description=REQUEST_FIELD_DESCRIPTION),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    rotate_request = parse_request(RotateRequest, _require(request))
    rotated = await run_in_threadpool(engine.apply, data, rotate_request)
    return attachment(rotated, "rotated.pdf")


@router.post("/compress", summary="Optimise the structure of a PDF")
async def compress_document(
    file: UploadFile | None = File(None, description="Source PDF."),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    result = await run_in_threadpool(engine.apply, data, CompressRequest())

    headers = {
        "X-PdfRelay-Original-Size": str(result.original_size),
        "X-PdfRelay-Compressed-Size": str(result.compressed_size),
    }
    return attachment(result.data, f"{file_stem(file.filename)}-compressed.pdf", headers=headers)


@router.post("/encrypt", summary="Password-protect a PDF")
async def encrypt_document(
    file: UploadFile | None = File(None, description="Source PDF."),
    request: str | None = Form(None, description=REQUEST_FIELD_DESCRIPTION),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    encrypt_request = parse_request(EncryptRequest, _require(request))
    encrypted = await run_in_threadpool(engine.apply, data, encrypt_request)
    return attachment(encrypted, "encrypted.pdf")


@router.post("/decrypt", summary="Remove password protection from a PDF")
async def decrypt_document(
    file: UploadFile | None = File(None, description="Encrypted PDF."),
    password: str | None = Form(None, description="Password that opens the document."),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    if not password:
        raise MissingInputError("Password is required")
    decrypted = await run_in_threadpool(engine.apply, data, DecryptRequest(password=password))
    return attachment(decrypted, "decrypted.pdf")


@router.post("/watermark", summary="Stamp a text watermark on every page")
async def watermark_document(
    file: UploadFile | None = File(None, description="Source PDF."),
    request: str | None = Form(None, description=REQUEST_FIELD_DESCRIPTION),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    watermark_request = parse_request(WatermarkRequest, _require(request))
    watermarked = await run_in_threadpool(engine.apply, data, watermark_request)
    return attachment(watermarked, "watermarked.pdf")


@router.post("/info", summary="Describe page geometry and metadata")
async def document_info(
    file: UploadFile | None = File(None, description="Source PDF."),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    info = await run_in_threadpool(engine.info, data)
    payload = {to_camel(key): value for key, value in info.as_dict().items() if value is not None}
    return {"success": True, "info": payload}


@router.post("/extract-text", summary="Extract the text of every page")
async def extract_text(
    file: UploadFile | None = File(None, description="Source PDF."),
    engine: PdfTransformEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    data = await read_upload(file, limit=settings.max_upload_bytes)
    text = await run_in_threadpool(engine.extract_text, data)
    return {"success": True, "text": text}


__all__ = ["router"]
