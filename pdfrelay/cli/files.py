"""File helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

from ..core.utils import resolve_path


def read_input(path: str | Path) -> bytes:
    return resolve_path(path).read_bytes()


def write_output(path: str | Path, data: bytes) -> Path:
    destination = resolve_path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(data)
    return destination
