"""Page rotation exposed through the pdfrelay tools namespace."""

from __future__ import annotations

from .rotate import VALID_ANGLES, RotateTool, coerce_angle

__all__ = ["VALID_ANGLES", "RotateTool", "coerce_angle"]
