"""Helpers shared by the conversion and PDF utility routes."""

from __future__ import annotations

import re
import unicodedata
from io import BytesIO
from pathlib import PurePosixPath
from typing import Iterable, Sequence
from zipfile import ZIP_DEFLATED, ZipFile

from fastapi import Response, UploadFile

from pdfrelay.exceptions import MissingInputError, PayloadTooLargeError

PDF_MEDIA_TYPE = "application/pdf"
ZIP_MEDIA_TYPE = "application/zip"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(filename: str | None, default: str) -> str:
    """Return an ASCII basename derived from user input."""

    if not filename:
        return default

    candidate = PurePosixPath(filename.replace("\\", "/")).name
    candidate = unicodedata.normalize("NFKD", candidate).encode("ascii", "ignore").decode("ascii")
    candidate = _UNSAFE_CHARS.sub("_", candidate).strip("._")
    return candidate or default


def file_stem(filename: str | None, default: str = "document") -> str:
    return PurePosixPath(safe_filename(filename, f"{default}.pdf")).stem or default


async def read_upload(upload: UploadFile | None, *, limit: int) -> bytes:
    """Read an uploaded file fully into memory, enforcing ``limit`` bytes."""

    if upload is None:
        raise MissingInputError("No file uploaded")

    if upload.size is not None and upload.size > limit:
        raise PayloadTooLargeError(f"File '{upload.filename}' exceeds the {limit} byte upload limit")
    contents = await upload.read()
    if len(contents) > limit:
        raise PayloadTooLargeError(f"File '{upload.filename}' exceeds the {limit} byte upload limit")
    if not contents:
        raise MissingInputError(f"File '{upload.filename}' is empty")
    return contents


async def read_uploads(
    uploads: Sequence[UploadFile] | None,
    *,
    limit: int,
    max_files: int,
    minimum: int = 1,
    missing_message: str = "No files uploaded",
) -> list[bytes]:
    if not uploads or len(uploads) < minimum:
        raise MissingInputError(missing_message)
    if len(uploads) > max_files:
        raise PayloadTooLargeError(f"At most {max_files} files can be uploaded at once")
    return [await read_upload(upload, limit=limit) for upload in uploads]


def attachment(
    content: bytes,
    filename: str,
    media_type: str = PDF_MEDIA_TYPE,
    headers: dict[str, str] | None = None,
) -> Response:
    """Return ``content`` as a download named ``filename``."""

    disposition = {"Content-Disposition": f'attachment; filename="{safe_filename(filename, "download")}"'}
    return Response(content=content, media_type=media_type, headers={**disposition, **(headers or {})})


def zip_outputs(parts: Iterable[tuple[str, bytes]]) -> bytes:
    """Create an in-memory zip archive holding ``(name, data)`` entries."""

    buffer = BytesIO()
    with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
        for name, data in parts:
            archive.writestr(name, data)
    return buffer.getvalue()


__all__ = [
    "PDF_MEDIA_TYPE",
    "ZIP_MEDIA_TYPE",
    "safe_filename",
    "file_stem",
    "zip_outputs",
    "attachment",
    "read_upload",
    "read_uploads",
]
