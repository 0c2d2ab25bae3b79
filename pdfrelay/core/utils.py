"""Utilities shared by pdfrelay tools."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Any

from pypdf import PdfWriter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach the pdfrelay handler to the package logger and set its level."""

    logger = get_logger("pdfrelay")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    return resolved


def update_dict(target: dict[str, Any], **updates: Any) -> dict[str, Any]:
    target.update({k: v for k, v in updates.items() if v is not None})
    return target


def writer_to_bytes(writer: PdfWriter) -> bytes:
    """Serialise ``writer`` into an in-memory PDF buffer."""

    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()
