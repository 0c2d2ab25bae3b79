"""Compression utilities exposed through the pdfrelay tools namespace."""

from __future__ import annotations

from .compress import CompressionResult, CompressTool

__all__ = ["CompressionResult", "CompressTool"]
