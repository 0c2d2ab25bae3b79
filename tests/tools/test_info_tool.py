from __future__ import annotations

from pdfrelay.tools import load_builtin_plugins
from pdfrelay.tools.common.interfaces import TransformContext
from pdfrelay.tools.common.pipeline import run_tool
from pdfrelay.tools.inspector import PdfInfo

from conftest import build_pdf


def setup_module(module):
    load_builtin_plugins()


def test_info_reports_geometry_and_metadata() -> None:
    data = build_pdf(
        3,
        width=595.28,
        height=841.89,
        metadata={
            "/Title": "Quarterly report",
            "/Author": "Finance",
            "/Keywords": "  ",
            "/CreationDate": "D:20240102030405",
        },
    )

    info: PdfInfo = run_tool("info", TransformContext(data=data))

    assert info.pages == 3
    assert info.file_size == len(data)
    assert info.page_size == "595 x 842 pts"
    assert info.width == 595.28
    assert info.title == "Quarterly report"
    assert info.author == "Finance"
    assert info.keywords is None
    assert info.subject is None
    assert info.creation_date is not None and info.creation_date.startswith("2024-01-02T03:04:05")


def test_info_on_empty_document_has_no_page_size(empty_pdf: bytes) -> None:
    info = run_tool("info", TransformContext(data=empty_pdf))

    assert info.pages == 0
    assert info.page_size is None
    assert info.width is None
    assert info.height is None


def test_unparseable_dates_are_ignored() -> None:
    data = build_pdf(1, metadata={"/ModDate": "yesterday"})

    info = run_tool("info", TransformContext(data=data))

    assert info.modification_date is None


def test_extract_text_joins_pages(sample_pdf: bytes) -> None:
    text = run_tool("extract-text", TransformContext(data=sample_pdf))

    assert text == "\n\n".join([""] * 5)
