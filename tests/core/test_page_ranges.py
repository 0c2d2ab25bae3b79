from __future__ import annotations

import pytest

from pdfrelay.core.page_ranges import parse_page_range, resolve_pages
from pdfrelay.exceptions import InvalidOptionError, InvalidPageRangeError


@pytest.mark.parametrize("total", [1, 2, 5, 10, 37])
def test_full_range_selects_every_page(total: int) -> None:
    assert parse_page_range(f"1-{total}", total) == list(range(total))


def test_single_pages_are_zero_based() -> None:
    assert parse_page_range("1,3,5", 10) == [0, 2, 4]


def test_range_end_is_clamped_to_page_count() -> None:
    assert parse_page_range("8-12", 10) == [7, 8, 9]


def test_out_of_range_single_page_contributes_nothing() -> None:
    assert parse_page_range("50", 10) == []
    assert parse_page_range("0", 10) == []


def test_range_starting_past_the_end_is_empty() -> None:
    assert parse_page_range("12-15", 10) == []
    assert parse_page_range("5-3", 10) == []


def test_range_start_is_clamped_to_first_page() -> None:
    assert parse_page_range("0-2", 10) == [0, 1]


def test_order_and_duplicates_are_preserved() -> None:
    assert parse_page_range("3,1-2,3", 5) == [2, 0, 1, 2]


def test_whitespace_and_empty_tokens_are_ignored() -> None:
    assert parse_page_range(" 1 , ,3, 2 - 4 ,", 10) == [0, 2, 1, 2, 3]
    assert parse_page_range("", 10) == []


@pytest.mark.parametrize("expression,token", [("a", "a"), ("1,b", "b"), ("1-b", "1-b"), ("-3", "-3"), ("1-2-3", "1-2-3")])
def test_non_numeric_tokens_are_rejected(expression: str, token: str) -> None:
    with pytest.raises(InvalidPageRangeError) as excinfo:
        parse_page_range(expression, 10)

    assert excinfo.value.token == token
    assert repr(token) in str(excinfo.value)
    assert isinstance(excinfo.value, InvalidOptionError)


@pytest.mark.parametrize("selection", [None, "", "  ", "all", "ALL"])
def test_resolve_pages_defaults_to_every_page(selection: str | None) -> None:
    assert resolve_pages(selection, 4) == [0, 1, 2, 3]


def test_resolve_pages_delegates_to_parser() -> None:
    assert resolve_pages("2-3", 4) == [1, 2]
