"""Shared plumbing for pdfrelay tools."""

from __future__ import annotations

from .interfaces import BaseTool, TransformContext
from .pipeline import ToolRegistry, register_tool, registry, run_tool

__all__ = ["BaseTool", "TransformContext", "ToolRegistry", "register_tool", "registry", "run_tool"]
