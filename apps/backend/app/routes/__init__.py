"""API routers for conversions and local PDF utilities."""

from __future__ import annotations

from .convert import router as convert_router
from .pdf import router as pdf_router

__all__ = ["convert_router", "pdf_router"]
