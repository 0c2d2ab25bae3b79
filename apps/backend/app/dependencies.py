"""FastAPI dependencies resolving the services built by :func:`create_app`."""

from __future__ import annotations

from fastapi import Request

from pdfrelay.engine import PdfTransformEngine
from pdfrelay.render import Renderer
from pdfrelay.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_renderer(request: Request) -> Renderer:
    return request.app.state.renderer


def get_engine(request: Request) -> PdfTransformEngine:
    return request.app.state.engine


__all__ = ["get_engine", "get_renderer", "get_settings"]
