"""Split utilities exposed through the pdfrelay tools namespace."""

from __future__ import annotations

from .split import SplitTool, build_part_filename

__all__ = ["SplitTool", "build_part_filename"]
