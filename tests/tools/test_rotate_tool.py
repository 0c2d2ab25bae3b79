from __future__ import annotations

from io import BytesIO

import pytest
from pypdf import PdfReader

from pdfrelay.exceptions import InvalidOptionError
from pdfrelay.tools import load_builtin_plugins
from pdfrelay.tools.common.interfaces import TransformContext
from pdfrelay.tools.common.pipeline import run_tool
from pdfrelay.tools.rotator import coerce_angle


def setup_module(module):
    load_builtin_plugins()


def _rotate(data: bytes, angle, pages=None) -> bytes:
    return run_tool("rotate", TransformContext(data=data, config={"angle": angle, "pages": pages}))


def _rotations(data: bytes) -> list[int]:
    return [page.rotation for page in PdfReader(BytesIO(data)).pages]


def test_rotation_accumulates_modulo_360(sample_pdf: bytes) -> None:
    twice = _rotate(_rotate(sample_pdf, 90), 90)
    assert _rotations(twice) == [180] * 5

    four_times = _rotate(_rotate(twice, "90"), 90)
    assert _rotations(four_times) == [0] * 5


def test_rotation_only_touches_selected_pages(sample_pdf: bytes) -> None:
    rotated = _rotate(sample_pdf, 270, pages="1,3-4")

    assert _rotations(rotated) == [270, 0, 270, 270, 0]


def test_repeated_page_selection_rotates_once(sample_pdf: bytes) -> None:
    rotated = _rotate(sample_pdf, 90, pages="2,2,1-2")

    assert _rotations(rotated) == [90, 90, 0, 0, 0]


@pytest.mark.parametrize("pages", [None, "all", ""])
def test_rotation_defaults_to_every_page(sample_pdf: bytes, pages) -> None:
    assert _rotations(_rotate(sample_pdf, 180, pages=pages)) == [180] * 5


@pytest.mark.parametrize("angle", [45, "abc", None, 360])
def test_invalid_angles_are_rejected(angle) -> None:
    with pytest.raises(InvalidOptionError):
        coerce_angle(angle)
