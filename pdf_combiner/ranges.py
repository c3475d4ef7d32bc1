"""Page range parsing for :mod:`pdf_combiner`."""

from __future__ import annotations

import logging
from typing import Iterable, Union

from .exceptions import InvalidRangeError
from .types import ALL_PAGES, PageList, PageSelection

LOGGER = logging.getLogger("pdf_combiner.ranges")


def _to_page(token: str, segment: str) -> int:
    if not token.isdecimal():
        raise InvalidRangeError(
            f"Invalid page number '{token}' in segment '{segment}'. Expected a positive integer.",
            segment=segment,
        )
    page = int(token)
    if page < 1:
        raise InvalidRangeError(
            f"Invalid page number {page} in segment '{segment}'. Page numbers must be >= 1.",
            segment=segment,
        )
    return page


def parse_page_range(expression: str) -> PageList:
    """Expand a page range expression such as ``"1,3,6, 12-16"``.

    Segments keep the order in which they are written and repeated pages are
    kept; a hyphenated segment always expands in ascending order. Page
    numbers are not checked against any document here.

    Raises:
        InvalidRangeError: If a segment is neither a page number nor a
            ``start-end`` range, or if ``start`` is greater than ``end``.
    """

    compact = "".join(str(expression).split())
    pages: PageList = []

    for segment in compact.split(","):
        parts = segment.split("-")
        if len(parts) == 2:
            start = _to_page(parts[0], segment)
            end = _to_page(parts[1], segment)
            if start > end:
                raise InvalidRangeError(
                    f"Starting page, '{start}' is greater than ending page '{end}'.",
                    segment=segment,
                    start=start,
                    end=end,
                )
            pages.extend(range(start, end + 1))
        elif len(parts) == 1:
            pages.append(_to_page(parts[0], segment))
        else:
            raise InvalidRangeError(
                f"Invalid page range format: '{segment}'. Expected 'page' or 'start-end'.",
                segment=segment,
            )

    LOGGER.debug("Parsed page range %r into %d page(s)", expression, len(pages))
    return pages


def normalize_pages(pages: Union[str, Iterable[int], None]) -> PageSelection:
    """Turn a caller's page selection into ``"all"`` or a tuple of page numbers."""

    if pages is None:
        return ALL_PAGES
    if isinstance(pages, str):
        if pages.strip().lower() == ALL_PAGES:
            return ALL_PAGES
        return tuple(parse_page_range(pages))

    normalized = []
    for page in pages:
        normalized.append(_to_page(str(page).strip(), str(page)))
    if not normalized:
        raise InvalidRangeError("Page selection cannot be empty")
    return tuple(normalized)


__all__ = ["parse_page_range", "normalize_pages"]
