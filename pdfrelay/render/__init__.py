"""Remote rendering client and option models."""

from __future__ import annotations

from .client import DEFAULT_PDFA, GotenbergClient, Renderer
from .options import PAPER_SIZES, ConversionOptions, HtmlRenderOptions, Margins, paper_dimensions

__all__ = [
    "ConversionOptions",
    "DEFAULT_PDFA",
    "GotenbergClient",
    "HtmlRenderOptions",
    "Margins",
    "PAPER_SIZES",
    "Renderer",
    "paper_dimensions",
]
