"""Document conversion relay and local PDF transform toolkit."""

from __future__ import annotations

from .core import load_document, parse_page_range, resolve_pages
from .engine import PdfTransformEngine
from .exceptions import (
    EncryptionError,
    InvalidOptionError,
    InvalidPageRangeError,
    InvalidPasswordError,
    MissingInputError,
    PayloadTooLargeError,
    PdfLoadError,
    PdfRelayError,
    RemoteRenderError,
    UnsupportedImageError,
)
from .images import pack_images
from .models import (
    CompressRequest,
    DecryptRequest,
    EncryptRequest,
    InfoRequest,
    RotateRequest,
    SplitRequest,
    WatermarkRequest,
    parse_request,
)
from .render import ConversionOptions, GotenbergClient, HtmlRenderOptions
from .settings import Settings
from .tools.common.interfaces import TransformContext
from .tools.common.pipeline import ToolRegistry, register_tool, registry

__version__ = "0.1.0"

__all__ = [
    "CompressRequest",
    "ConversionOptions",
    "DecryptRequest",
    "EncryptRequest",
    "EncryptionError",
    "GotenbergClient",
    "HtmlRenderOptions",
    "InfoRequest",
    "InvalidOptionError",
    "InvalidPageRangeError",
    "InvalidPasswordError",
    "MissingInputError",
    "PayloadTooLargeError",
    "PdfLoadError",
    "PdfRelayError",
    "PdfTransformEngine",
    "RemoteRenderError",
    "RotateRequest",
    "Settings",
    "SplitRequest",
    "ToolRegistry",
    "TransformContext",
    "UnsupportedImageError",
    "WatermarkRequest",
    "load_document",
    "pack_images",
    "parse_page_range",
    "parse_request",
    "register_tool",
    "registry",
    "resolve_pages",
]
