from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Callable
import sys

import pytest
from PIL import Image
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def build_pdf(
    pages: int,
    *,
    width: float = 200,
    height: float = 200,
    metadata: dict[str, str] | None = None,
) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=width, height=height)
    if metadata:
        writer.add_metadata(metadata)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def build_image(fmt: str, size: tuple[int, int], mode: str = "RGB", color: object = "red") -> bytes:
    buffer = BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture()
def sample_pdf() -> bytes:
    return build_pdf(5, metadata={"/Producer": "pdfrelay-tests", "/Title": "Sample"})


@pytest.fixture()
def ten_page_pdf() -> bytes:
    return build_pdf(10, width=300, height=400)


@pytest.fixture()
def empty_pdf() -> bytes:
    return build_pdf(0)


@pytest.fixture()
def sample_pdf_path(tmp_path: Path, sample_pdf: bytes) -> Path:
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf)
    return path


@pytest.fixture()
def pdf_factory() -> Callable[..., bytes]:
    def _create(pages: int = 1, title: str | None = None, **kwargs) -> bytes:
        metadata = {"/Title": title} if title is not None else None
        return build_pdf(pages, metadata=metadata, **kwargs)

    return _create


@pytest.fixture()
def png_image() -> bytes:
    return build_image("PNG", (40, 30))


@pytest.fixture()
def jpeg_image() -> bytes:
    return build_image("JPEG", (64, 48), color="blue")


@pytest.fixture()
def image_factory() -> Callable[..., bytes]:
    return build_image
