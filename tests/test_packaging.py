"""Packaging-level checks for the declared dependencies."""

from __future__ import annotations

import re
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

_REQUIREMENT = re.compile(r"^(?P<name>[A-Za-z0-9_.-]+)(?P<spec>.*)$")


def _requirements() -> dict[str, str]:
    pins: dict[str, str] = {}
    for line in (PROJECT_ROOT / "requirements.txt").read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        match = _REQUIREMENT.match(line)
        pins[match.group("name").lower()] = match.group("spec")
    return pins


def test_pypdf_is_capped_below_next_major() -> None:
    clauses = set(_requirements()["pypdf"].split(","))

    assert ">=5.1" in clauses
    assert "<7" in clauses


def test_runtime_stack_is_declared() -> None:
    declared = set(_requirements())

    assert {"fastapi", "pydantic", "python-multipart", "pypdf", "reportlab", "pillow", "httpx", "uvicorn"} <= declared
