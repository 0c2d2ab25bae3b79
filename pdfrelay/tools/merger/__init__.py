"""Merge utilities exposed through the pdfrelay tools namespace."""

from __future__ import annotations

from .merge import MergeTool

__all__ = ["MergeTool"]
