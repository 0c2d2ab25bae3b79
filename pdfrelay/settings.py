"""Environment-driven runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .render.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


def _env_number(name: str, default: float, cast: type = float):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return cast(default)
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    gotenberg_url: str = DEFAULT_BASE_URL
    render_timeout: float = DEFAULT_TIMEOUT
    max_upload_mb: int = 100
    max_images: int = 50
    log_level: str = "INFO"

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from ``PDFRELAY_*`` environment variables."""

        url = os.getenv("PDFRELAY_GOTENBERG_URL") or os.getenv("GOTENBERG_URL") or DEFAULT_BASE_URL
        return cls(
            gotenberg_url=url,
            render_timeout=_env_number("PDFRELAY_RENDER_TIMEOUT", DEFAULT_TIMEOUT),
            max_upload_mb=_env_number("PDFRELAY_MAX_UPLOAD_MB", 100, int),
            max_images=_env_number("PDFRELAY_MAX_IMAGES", 50, int),
            log_level=(os.getenv("PDFRELAY_LOG_LEVEL") or "INFO").upper(),
        )


__all__ = ["Settings"]
