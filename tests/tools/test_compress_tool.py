from __future__ import annotations

from io import BytesIO

from pypdf import PdfReader

from pdfrelay.tools import load_builtin_plugins
from pdfrelay.tools.common.interfaces import TransformContext
from pdfrelay.tools.common.pipeline import registry
from pdfrelay.tools.compressor import CompressionResult


def setup_module(module):
    load_builtin_plugins()


def test_compress_returns_sizes_and_valid_pdf(sample_pdf: bytes) -> None:
    context = TransformContext(data=sample_pdf)
    result = registry.create("compress", context).run()

    assert isinstance(result, CompressionResult)
    assert result.original_size == len(sample_pdf)
    assert result.compressed_size == len(result.data)
    assert result.saved_bytes == result.original_size - result.compressed_size
    assert len(PdfReader(BytesIO(result.data)).pages) == 5
    assert context.resources["result"] is result
