"""Command line interface for pdfrelay."""

from __future__ import annotations

from .main import main

__all__ = ["main"]
