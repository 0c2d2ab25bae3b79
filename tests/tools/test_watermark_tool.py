from __future__ import annotations

from io import BytesIO

import pytest
from pypdf import PdfReader

from pdfrelay.exceptions import InvalidOptionError
from pdfrelay.tools import load_builtin_plugins
from pdfrelay.tools.common.interfaces import TransformContext
from pdfrelay.tools.common.pipeline import run_tool
from pdfrelay.tools.watermark import DEFAULT_OPTIONS, EDGE_OFFSET, resolve_options, text_origin


def setup_module(module):
    load_builtin_plugins()


def _watermark(data: bytes, text: str = "CONFIDENTIAL", options=None) -> bytes:
    return run_tool("watermark", TransformContext(data=data, config={"text": text, "options": options}))


def test_watermark_keeps_pages_and_dimensions(ten_page_pdf: bytes) -> None:
    result = PdfReader(BytesIO(_watermark(ten_page_pdf)))
    source = PdfReader(BytesIO(ten_page_pdf))

    assert len(result.pages) == len(source.pages)
    for stamped, original in zip(result.pages, source.pages):
        assert stamped.mediabox.width == original.mediabox.width
        assert stamped.mediabox.height == original.mediabox.height


@pytest.mark.parametrize("position", ["center", "top", "bottom", "diagonal"])
def test_every_page_content_contains_the_text(sample_pdf: bytes, position: str) -> None:
    result = PdfReader(BytesIO(_watermark(sample_pdf, options={"position": position})))

    for page in result.pages:
        assert b"CONFIDENTIAL" in page.get_contents().get_data()


def test_watermark_requires_text(sample_pdf: bytes) -> None:
    with pytest.raises(InvalidOptionError):
        _watermark(sample_pdf, text="")


@pytest.mark.parametrize(
    "options",
    [{"opacity": 1.5}, {"opacity": -0.1}, {"font_size": 0}, {"position": "left"}],
)
def test_invalid_options_are_rejected(options) -> None:
    with pytest.raises(InvalidOptionError):
        resolve_options(options)


def test_missing_options_fall_back_to_defaults() -> None:
    assert resolve_options(None) == DEFAULT_OPTIONS
    assert resolve_options({"opacity": None, "rotation": 30})["rotation"] == 30
    assert resolve_options({"opacity": 0})["opacity"] == 0


def test_text_origin_positions() -> None:
    assert text_origin(600, 800, 100, 48, "center") == (250, 376)
    assert text_origin(600, 800, 100, 48, "diagonal") == (250, 376)
    assert text_origin(600, 800, 100, 48, "top") == (250, 800 - 48 - EDGE_OFFSET)
    assert text_origin(600, 800, 100, 48, "bottom") == (250, EDGE_OFFSET)
