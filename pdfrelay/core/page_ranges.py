"""Parsing of human page range expressions such as ``"1-5,7,9-11"``."""

from __future__ import annotations

from typing import List

from ..exceptions import InvalidPageRangeError

ALL_PAGES = "all"


def _parse_number(part: str, token: str, expression: str) -> int:
    value = part.strip()
    if not value.isdecimal():
        raise InvalidPageRangeError(token, expression)
    return int(value)


def parse_page_range(expression: str, total_pages: int) -> List[int]:
    """Parse ``expression`` into zero-based page indices.

    Tokens are separated by commas and are either a single 1-based page
    number or an inclusive ``start-end`` range. Indices are emitted in the
    order the tokens appear and duplicates are kept. Anything outside
    ``1..total_pages`` is dropped silently, so every returned index satisfies
    ``0 <= index < total_pages``.

    Args:
        expression: The page range expression.
        total_pages: Page count of the document the indices refer to.

    Raises:
        InvalidPageRangeError: If a token is not numeric.

    Returns:
        A list of zero-based page indices.
    """

    indices: List[int] = []
    for raw_token in expression.split(","):
        token = raw_token.strip()
        if not token:
            continue

        if "-" in token:
            start_str, end_str = token.split("-", 1)
            start = _parse_number(start_str, token, expression)
            end = _parse_number(end_str, token, expression)
            first = max(start, 1)
            last = min(end, total_pages)
            indices.extend(range(first - 1, last))
        else:
            number = _parse_number(token, token, expression)
            if 1 <= number <= total_pages:
                indices.append(number - 1)

    return indices


def resolve_pages(selection: str | None, total_pages: int) -> List[int]:
    """Return the indices targeted by ``selection``; ``None``/``"all"`` selects every page."""

    if selection is None or not selection.strip() or selection.strip().lower() == ALL_PAGES:
        return list(range(total_pages))
    return parse_page_range(selection, total_pages)


__all__ = ["ALL_PAGES", "parse_page_range", "resolve_pages"]
