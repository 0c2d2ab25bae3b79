"""Exception hierarchy shared by the :mod:`pdfrelay` library and API."""

from __future__ import annotations


class PdfRelayError(Exception):
    """Base exception for all errors raised by :mod:`pdfrelay`."""

    status_code: int = 500


class MissingInputError(PdfRelayError):
    """Raised when a required file or field was not supplied."""

    status_code = 400


class PayloadTooLargeError(PdfRelayError):
    """Raised when an upload exceeds the configured size ceiling."""

    status_code = 413


class InvalidOptionError(PdfRelayError):
    """Raised when an options payload is malformed or fails validation."""


class InvalidPageRangeError(InvalidOptionError):
    """Raised when a page range expression contains a non-numeric token."""

    def __init__(self, token: str, expression: str | None = None) -> None:
        self.token = token
        self.expression = expression
        message = f"Invalid page range token {token!r}"
        if expression is not None and expression != token:
            message += f" in {expression!r}"
        super().__init__(message)


class RemoteRenderError(PdfRelayError):
    """Raised when the remote rendering service fails or is unreachable."""


class PdfLoadError(PdfRelayError):
    """Raised when a PDF buffer cannot be parsed."""


class InvalidPasswordError(PdfLoadError):
    """Raised when an encrypted PDF cannot be opened with the supplied password."""


class UnsupportedImageError(PdfRelayError):
    """Raised when an image cannot be identified or re-encoded."""


class EncryptionError(PdfRelayError):
    """Raised when an encrypted PDF cannot be produced."""


__all__ = [
    "PdfRelayError",
    "MissingInputError",
    "PayloadTooLargeError",
    "InvalidOptionError",
    "InvalidPageRangeError",
    "RemoteRenderError",
    "PdfLoadError",
    "InvalidPasswordError",
    "UnsupportedImageError",
    "EncryptionError",
]
