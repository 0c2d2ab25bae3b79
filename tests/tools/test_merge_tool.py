from __future__ import annotations

from io import BytesIO

import pytest
from pypdf import PdfReader

from pdfrelay.exceptions import MissingInputError, PdfLoadError
from pdfrelay.tools import load_builtin_plugins
from pdfrelay.tools.common.interfaces import TransformContext
from pdfrelay.tools.common.pipeline import registry


def setup_module(module):
    load_builtin_plugins()


def _merge(documents, bookmarks=None) -> bytes:
    context = TransformContext(documents=documents, config={"bookmarks": bookmarks})
    return registry.create("merge", context).run()


def test_merge_appends_pages_in_order(pdf_factory) -> None:
    first = pdf_factory(2, title="Document One", width=100, height=100)
    second = pdf_factory(3, width=300, height=300)

    reader = PdfReader(BytesIO(_merge([first, second])))

    assert [float(page.mediabox.width) for page in reader.pages] == [100, 100, 300, 300, 300]
    assert reader.metadata.get("/Title") == "Document One"
    assert not reader.outline


def test_merge_adds_bookmarks(pdf_factory) -> None:
    reader = PdfReader(BytesIO(_merge([pdf_factory(2), pdf_factory(1)], bookmarks=["one", ""])))

    titles = [item.title for item in reader.outline]
    assert titles == ["one", "Document 2"]
    assert [reader.get_destination_page_number(item) for item in reader.outline] == [0, 2]


def test_merge_requires_two_documents(pdf_factory) -> None:
    with pytest.raises(MissingInputError):
        _merge([pdf_factory(1)])


def test_merge_fails_on_corrupt_input(pdf_factory) -> None:
    with pytest.raises(PdfLoadError):
        _merge([pdf_factory(1), b"junk"])
