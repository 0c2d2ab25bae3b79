"""Encryption helpers exposed through the pdfrelay tools namespace."""

from __future__ import annotations

from ...security import build_permissions, is_pdf_encrypted, protect_pdf, unprotect_pdf
from .encrypt import DecryptTool, EncryptTool

__all__ = [
    "DecryptTool",
    "EncryptTool",
    "build_permissions",
    "is_pdf_encrypted",
    "protect_pdf",
    "unprotect_pdf",
]
