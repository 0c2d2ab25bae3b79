"""Inspection tools exposed through the pdfrelay tools namespace."""

from __future__ import annotations

from .info import ExtractTextTool, InfoTool, PdfInfo

__all__ = ["ExtractTextTool", "InfoTool", "PdfInfo"]
