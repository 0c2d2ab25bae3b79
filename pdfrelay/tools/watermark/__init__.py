"""Watermarking exposed through the pdfrelay tools namespace."""

from __future__ import annotations

from .watermark import DEFAULT_OPTIONS, EDGE_OFFSET, POSITIONS, WatermarkTool, build_overlay, resolve_options, text_origin

__all__ = [
    "DEFAULT_OPTIONS",
    "EDGE_OFFSET",
    "POSITIONS",
    "WatermarkTool",
    "build_overlay",
    "resolve_options",
    "text_origin",
]
