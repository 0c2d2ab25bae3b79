"""Namespace for pluggable pdfrelay tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .splitter import split  # noqa: F401  # register the split tool
    from .rotator import rotate  # noqa: F401
    from .encryptor import encrypt  # noqa: F401  # register encrypt and decrypt tools
    from .watermark import watermark  # noqa: F401
    from .compressor import compress  # noqa: F401
    from .inspector import info  # noqa: F401  # register info and extract-text tools
    from .merger import merge  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
