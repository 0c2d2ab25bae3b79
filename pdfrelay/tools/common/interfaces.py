"""Core interfaces and context objects shared by pdfrelay tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...core.document import PdfDocument, load_document
from ...exceptions import MissingInputError


@dataclass
class TransformContext:
    """Holds shared execution state for a tool invocation."""

    data: bytes | None = None
    documents: list[bytes] = field(default_factory=list)
    document: PdfDocument | None = None
    resources: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def ensure_document(self, *, password: str | None = None) -> PdfDocument:
        if self.document is None:
            if not self.data:
                raise MissingInputError("A PDF document is required")
            self.document = load_document(self.data, password=password)
        return self.document


class BaseTool:
    """Base class for all pluggable pdfrelay tools."""

    name: str

    def __init__(self, context: TransformContext) -> None:
        self.context = context

    def run(self) -> Any:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

