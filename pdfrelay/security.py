"""Password protection helpers for the :mod:`pdfrelay` toolkit."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Mapping

from pypdf import PdfReader
from pypdf.constants import UserAccessPermissions

from .core.document import PdfDocument, load_document
from .core.utils import writer_to_bytes
from .exceptions import EncryptionError, InvalidOptionError, PdfLoadError

LOGGER = logging.getLogger("pdfrelay.security")

# Grants that callers can switch off; everything else stays allowed.
_PRINT_FLAGS = UserAccessPermissions.PRINT | UserAccessPermissions.PRINT_TO_REPRESENTATION
_COPY_FLAGS = UserAccessPermissions.EXTRACT
_MODIFY_FLAGS = UserAccessPermissions.MODIFY


def build_permissions(permissions: Mapping[str, object] | None = None) -> UserAccessPermissions:
    """Translate ``{print, copy, modify}`` switches into a permission flag.

    Each switch defaults to allowed and is only revoked when explicitly
    ``False``. Printing, when allowed, is high resolution. Annotating, form
    filling, accessibility extraction and document assembly are always
    granted.
    """

    permissions = permissions or {}
    flags = int(UserAccessPermissions.all())
    if permissions.get("print") is False:
        flags &= ~int(_PRINT_FLAGS)
    if permissions.get("copy") is False:
        flags &= ~int(_COPY_FLAGS)
    if permissions.get("modify") is False:
        flags &= ~int(_MODIFY_FLAGS)
    return UserAccessPermissions(flags)


def protect_pdf(
    data: bytes,
    password: str,
    *,
    owner_password: str | None = None,
    permissions: Mapping[str, object] | None = None,
) -> bytes:
    """Encrypt ``data`` with ``password`` and return the protected PDF bytes."""

    if not password:
        raise InvalidOptionError("A non-empty user password is required")

    try:
        document = load_document(data)
    except PdfLoadError as exc:
        raise EncryptionError(f"Cannot encrypt PDF: {exc}") from exc
    writer = document.clone_writer()
    flags = build_permissions(permissions)

    try:
        writer.encrypt(
            user_password=password,
            owner_password=owner_password or password,
            permissions_flag=flags,
        )
        result = writer_to_bytes(writer)
    except Exception as exc:  # pragma: no cover - encryption errors vary
        raise EncryptionError(f"Failed to encrypt PDF: {exc}") from exc

    LOGGER.info(
        "Encrypted %d page(s) with owner password %s",
        document.page_count,
        "<provided>" if owner_password else "<default>",
    )
    return result


def unprotect_pdf(data: bytes, password: str) -> bytes:
    """Open ``data`` with ``password`` and return it without encryption."""

    if not password:
        raise InvalidOptionError("A non-empty password is required")

    document: PdfDocument = load_document(data, password=password)
    if not document.is_encrypted:
        LOGGER.debug("Input PDF is not encrypted; re-serialising as-is")

    writer = document.clone_writer()
    try:
        result = writer_to_bytes(writer)
    except Exception as exc:  # pragma: no cover - pypdf exceptions vary
        raise PdfLoadError(f"Failed to write decrypted PDF: {exc}") from exc

    LOGGER.info("Decrypted PDF with %d page(s)", document.page_count)
    return result


def is_pdf_encrypted(data: bytes) -> bool:
    """Return ``True`` when ``data`` holds an encrypted PDF document."""

    try:
        reader = PdfReader(BytesIO(data))
    except Exception as exc:  # pragma: no cover - pypdf exceptions vary
        raise PdfLoadError(f"Unable to read PDF: {exc}") from exc
    return bool(reader.is_encrypted)


__all__ = [
    "build_permissions",
    "protect_pdf",
    "unprotect_pdf",
    "is_pdf_encrypted",
]
